"""Configuration for trackbridge."""

from dataclasses import dataclass

from trackbridge.lib.identifiers import DEFAULT_SERVICE_BASE_URL


@dataclass(frozen=True)
class ResolverConfig:
    """Resolver configuration.

    Attributes:
        api_key: YouTube Data API key. The API tier is skipped when unset.
        api_base_url: YouTube Data API v3 base URL.
        oembed_url: Public oEmbed endpoint.
        service_base_url: Base of the synthesized music service URLs.
        request_timeout: Timeout in seconds for each upstream request.
    """

    api_key: str | None = None
    api_base_url: str = "https://www.googleapis.com/youtube/v3"
    oembed_url: str = "https://www.youtube.com/oembed"
    service_base_url: str = DEFAULT_SERVICE_BASE_URL
    request_timeout: float = 10.0
