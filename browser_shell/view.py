import logging
from typing import Callable, Optional

from browser_shell import BrowserModel
from browser_shell.errors import (MalformedLocation, NoCurrentLocation,
                                  RendererError, UnknownFavorite)
from browser_shell.renderer.base import PageRenderer
from browser_shell.types import LinkEvent, LinkEventType, Location

logger = logging.getLogger(__name__)

PROTOCOL_PREFIX = "http://"
# Status text when no link is hovered; never empty so the status line keeps its height
BLANK = " "

ErrorListener = Callable[[str, str], None]


def complete_url(url: str) -> str:
    """Add the default protocol to a URL typed without one."""
    url = url.strip()
    if "://" not in url:
        return PROTOCOL_PREFIX + url
    return url


class BrowserView:
    """
    Front-end independent browser controls.

    Turns user commands and renderer link events into model changes and
    page loads, and keeps the state a front end draws: the address text,
    the status line, which navigation buttons are usable and the list of
    favorite names.
    """

    def __init__(
        self,
        model: BrowserModel,
        renderer: PageRenderer,
        labels: dict[str, str],
        error_listener: Optional[ErrorListener] = None,
    ) -> None:
        """
        Args:
            model: Browsing state to drive
            renderer: Where pages are displayed
            labels: Display strings, see config.load_labels
            error_listener: Called with (title, message) for every error shown
        """
        self.model = model
        self.renderer = renderer
        self.labels = labels
        self.error_listener = error_listener

        self.url_text: str = ""
        self.status: str = BLANK
        self.favorite_names: list[str] = model.favorite_names()
        self.back_enabled: bool = False
        self.next_enabled: bool = False
        self.home_enabled: bool = False
        self.enable_buttons()

    def show_page(self, url: Optional[str]) -> None:
        """Display a URL typed by the user, recording it in history."""
        if url is None:
            return
        try:
            # check for a valid URL before updating model, view
            location = Location.parse(complete_url(url))
        except MalformedLocation:
            self.show_error(f"Could not load {url}")
            return
        self.visit(location)

    def show_link(self, href: str) -> None:
        """Display a link followed inside the page; hrefs arrive absolute."""
        try:
            location = Location.parse(href)
        except MalformedLocation:
            self.show_error(f"Could not load {href}")
            return
        self.visit(location)

    def visit(self, location: Location) -> None:
        self.model.go(location)
        self.update(location)

    def show_status(self, message: str) -> None:
        self.status = message

    def show_error(self, message: str) -> None:
        title = self.labels["ErrorTitle"]
        logger.warning(f"{title}: {message}")
        if self.error_listener:
            self.error_listener(title, message)

    def back(self) -> None:
        location = self.model.back()
        if location is not None:
            self.update(location)

    def next(self) -> None:
        location = self.model.next()
        if location is not None:
            self.update(location)

    def home(self) -> None:
        home = self.model.get_home()
        if home is not None:
            self.visit(home)

    def set_home(self) -> None:
        try:
            self.model.set_home()
        except NoCurrentLocation as e:
            self.show_error(str(e))
        self.enable_buttons()

    def add_favorite(self, name: str) -> None:
        """Save the current page under name and list it."""
        try:
            self.model.add_favorite(name)
        except (NoCurrentLocation, ValueError) as e:
            self.show_error(str(e))
            return
        if name not in self.favorite_names:
            self.favorite_names.append(name)

    def show_favorite(self, name: str) -> None:
        try:
            location = self.model.get_favorite(name)
        except UnknownFavorite as e:
            self.show_error(str(e))
            return
        self.visit(location)

    def handle_link_event(self, event: LinkEvent) -> None:
        if event.type == LinkEventType.CLICK:
            self.show_link(event.href)
        elif event.type == LinkEventType.MOUSEOVER:
            self.show_status(event.href)
        elif event.type == LinkEventType.MOUSEOUT:
            self.show_status(BLANK)

    def process_link_events(self) -> int:
        """
        Handle the link events the renderer has collected.

        Returns:
            int: Number of events handled
        """
        try:
            events = self.renderer.poll_link_events()
        except RendererError as e:
            logger.error(f"Reading link events failed: {str(e)}")
            return 0
        for event in events:
            self.handle_link_event(event)
        return len(events)

    def update(self, location: Location) -> None:
        """Display location without touching history."""
        try:
            self.renderer.load(str(location))
        except RendererError:
            self.show_error(f"Could not load {location}")
        self.url_text = str(location)
        self.enable_buttons()

    def enable_buttons(self) -> None:
        # only enable buttons when useful to user
        self.back_enabled = self.model.has_previous()
        self.next_enabled = self.model.has_next()
        self.home_enabled = self.model.get_home() is not None
