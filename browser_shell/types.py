from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import urlsplit

from browser_shell.errors import MalformedLocation

# Schemes that are meaningless without a host part
NETWORK_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


@dataclass(frozen=True)
class Location:
    """An absolute URL known to be well formed"""

    url: str

    def __str__(self) -> str:
        return self.url

    @classmethod
    def parse(cls, text: str) -> "Location":
        """
        Validate text as an absolute URL.

        Args:
            text: URL text, surrounding whitespace is ignored

        Returns:
            Location: The validated location

        Raises:
            MalformedLocation: If the text is not an absolute URL
        """
        if text is None:
            raise MalformedLocation("No URL given")

        url = text.strip()
        if not url or any(c.isspace() for c in url):
            raise MalformedLocation(f"Not a valid URL: {text!r}")

        try:
            parts = urlsplit(url)
            # Accessing the port validates it
            parts.port
        except ValueError as e:
            raise MalformedLocation(f"Not a valid URL: {text!r} ({str(e)})") from e

        if not parts.scheme:
            raise MalformedLocation(f"URL has no scheme: {text!r}")
        if parts.scheme.lower() in NETWORK_SCHEMES and not parts.hostname:
            raise MalformedLocation(f"URL has no host: {text!r}")

        return cls(url=url)


class LinkEventType(StrEnum):
    """Hyperlink events reported by a page renderer"""

    CLICK = "click"
    MOUSEOVER = "mouseover"
    MOUSEOUT = "mouseout"


@dataclass(frozen=True)
class LinkEvent:
    """A hyperlink interaction inside the rendered page"""

    type: LinkEventType
    href: str
