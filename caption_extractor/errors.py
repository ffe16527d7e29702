class CaptionExtractorError(Exception):
    """Base error for caption extraction."""


class ProxyConfigurationError(CaptionExtractorError, ValueError):
    """Raised when a proxy function does not produce a usable page URL."""


class FetchError(CaptionExtractorError):
    """Raised when a page or transcript document cannot be retrieved."""

    def __init__(self, url: str, cause: Exception):
        super().__init__(f"Failed to fetch {url}: {cause}")
        self.url = url
        self.cause = cause
