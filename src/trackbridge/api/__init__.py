"""HTTP API for trackbridge."""
