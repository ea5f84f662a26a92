"""Page renderer abstraction.

The browser shell never renders pages itself. A renderer loads URLs into
some web engine and reports hyperlink clicks and hovers back so the view
can decide what to do with them.
"""

from abc import ABC, abstractmethod

from browser_shell.types import LinkEvent


class PageRenderer(ABC):
    """Abstract interface for displaying web pages."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @abstractmethod
    def load(self, url: str) -> None:
        """Load and display the given URL.

        Raises:
            RendererError: If the page could not be loaded
        """
        ...

    @abstractmethod
    def poll_link_events(self) -> list[LinkEvent]:
        """Return hyperlink events seen since the last call, oldest first."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release the underlying engine."""
        ...
