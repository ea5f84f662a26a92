import logging
from typing import Optional

from browser_shell.errors import (NoCurrentLocation, NoNextEntry,
                                  NoPreviousEntry, UnknownFavorite)
from browser_shell.history import NavigationHistory
from browser_shell.types import Location

logger = logging.getLogger(__name__)


class BrowserModel:
    """
    Where the browser is now: navigation history, the home page and
    named favorites. Nothing here touches a page renderer; callers load
    the returned locations themselves.
    """

    def __init__(self) -> None:
        self.history: NavigationHistory = NavigationHistory()
        self._home: Optional[Location] = None
        self._favorites: dict[str, Location] = {}

    def go(self, location: Location) -> None:
        """
        Make the given location current, recording it in history.

        Args:
            location: The already validated location to visit
        """
        logger.info(f"Navigating to {location}")
        self.history.record_visit(location)

    def back(self) -> Optional[Location]:
        """
        Move back in history.

        Returns:
            Location or None: The previous location, None if there is none
        """
        try:
            return self.history.go_back()
        except NoPreviousEntry:
            logger.debug("Back requested with no previous entry")
            return None

    def next(self) -> Optional[Location]:
        """
        Move forward in history.

        Returns:
            Location or None: The next location, None if there is none
        """
        try:
            return self.history.go_forward()
        except NoNextEntry:
            logger.debug("Next requested with no next entry")
            return None

    def has_previous(self) -> bool:
        return self.history.has_previous()

    def has_next(self) -> bool:
        return self.history.has_next()

    def current(self) -> Optional[Location]:
        """Get the current location, None before the first visit"""
        return self.history.current()

    def set_home(self) -> None:
        """
        Make the current location the home page.

        Raises:
            NoCurrentLocation: If nothing has been visited yet
        """
        self._home = self._require_current("set home page")
        logger.info(f"Home page set to {self._home}")

    def get_home(self) -> Optional[Location]:
        return self._home

    def add_favorite(self, name: str) -> None:
        """
        Save the current location under the given name, replacing any
        favorite already saved with that name.

        Args:
            name: Favorite name, must not be blank

        Raises:
            ValueError: If the name is blank
            NoCurrentLocation: If nothing has been visited yet
        """
        if not name or not name.strip():
            raise ValueError("Favorite name must not be empty")

        location = self._require_current(f"add favorite {name!r}")
        self._favorites[name] = location
        logger.info(f"Saved favorite {name!r} -> {location}")

    def get_favorite(self, name: str) -> Location:
        """
        Look up a saved favorite.

        Raises:
            UnknownFavorite: If no favorite has that name
        """
        try:
            return self._favorites[name]
        except KeyError:
            raise UnknownFavorite(f"No favorite named {name!r}") from None

    def favorite_names(self) -> list[str]:
        """Get favorite names in the order they were first added"""
        return list(self._favorites)

    def _require_current(self, action: str) -> Location:
        current = self.history.current()
        if current is None:
            raise NoCurrentLocation(f"Cannot {action}: no page has been visited")
        return current
