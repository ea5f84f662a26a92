import pytest

from browser_shell import BrowserModel
from browser_shell.config import load_labels
from browser_shell.errors import RendererError
from browser_shell.renderer.base import PageRenderer
from browser_shell.types import LinkEvent
from browser_shell.view import BrowserView


class FakeRenderer(PageRenderer):
    """In-memory renderer that records loads instead of displaying them."""

    def __init__(self) -> None:
        self.loaded_urls: list[str] = []
        self.pending_events: list[LinkEvent] = []
        self.failing_urls: set[str] = set()
        self.closed = False

    def load(self, url: str) -> None:
        if url in self.failing_urls:
            raise RendererError(f"Could not load {url}")
        self.loaded_urls.append(url)

    def poll_link_events(self) -> list[LinkEvent]:
        events, self.pending_events = self.pending_events, []
        return events

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def model():
    return BrowserModel()


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def errors():
    return []


@pytest.fixture
def view(model, renderer, errors):
    return BrowserView(
        model,
        renderer,
        load_labels("english"),
        error_listener=lambda title, message: errors.append((title, message)),
    )
