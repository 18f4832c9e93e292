"""Custom exceptions for trackbridge.

All exceptions include an HTTP status_code attribute for easy
integration with web frameworks like FastAPI.
"""


class TrackBridgeError(Exception):
    """Base exception for trackbridge.

    Attributes:
        status_code: HTTP status code for API error responses.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidUrlError(TrackBridgeError):
    """Failed to parse a YouTube URL.

    Raised when the URL is neither a watch URL with a ``v`` parameter
    nor a playlist URL with a ``list`` parameter.
    """

    status_code: int = 400  # Bad Request


class UpstreamUnavailableError(TrackBridgeError):
    """A metadata source could not provide data.

    Raised inside the metadata clients for network errors, non-success
    statuses and empty result sets. Never leaves the client: it is turned
    into an empty result so the resolver can move to the next source.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)
