"""Exceptions raised while fetching feeds and translating titles."""


class FetchError(Exception):
    """Raised when a feed cannot be fetched."""


class NetworkError(FetchError):
    """Connection-level failure (DNS, refused, reset, unsupported scheme)."""


class FetchTimeoutError(FetchError):
    """The request exceeded the per-attempt timeout."""


class TooManyRedirectsError(FetchError):
    """The redirect chain exceeded the hop limit."""


class HttpStatusError(FetchError):
    """The final response was not 200 OK."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


class TranslationError(Exception):
    """Raised when a title cannot be translated."""
