"""Domain-specific library modules.

Modules here import trackbridge domain models and provide the pure
resolution logic (title parsing, ID synthesis). URL helpers live in
``trackbridge.utils`` instead.

Consumers should import directly from submodules::

    from trackbridge.lib.titles import parse_track_info
    from trackbridge.lib.identifiers import generate_track_id
"""
