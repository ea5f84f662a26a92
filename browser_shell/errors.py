"""Exception types raised by the browser shell."""


class BrowserError(Exception):
    """Base class for all browser shell errors."""


class MalformedLocation(BrowserError, ValueError):
    """Raised when text cannot be parsed into an absolute URL."""


class NoPreviousEntry(BrowserError):
    """Raised when going back from the first history entry."""


class NoNextEntry(BrowserError):
    """Raised when going forward from the last history entry."""


class NoCurrentLocation(BrowserError):
    """Raised when an action needs a current page and none has been visited."""


class UnknownFavorite(BrowserError, KeyError):
    """Raised when a favorite name has not been saved."""

    def __str__(self) -> str:
        # KeyError quotes its argument
        return Exception.__str__(self)


class RendererError(BrowserError):
    """Raised when the page renderer fails to load or query a page."""
