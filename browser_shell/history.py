import logging
from typing import Optional

from browser_shell.errors import NoNextEntry, NoPreviousEntry
from browser_shell.types import Location

logger = logging.getLogger(__name__)


class NavigationHistory:
    """Visited locations with a cursor for back/forward traversal"""

    def __init__(self):
        self._entries: list[Location] = []
        self._cursor: int = -1

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def cursor(self) -> int:
        """Index of the current entry, -1 while the history is empty"""
        return self._cursor

    def record_visit(self, location: Location) -> None:
        """Append a visit and move the cursor onto it"""
        # A fresh visit from the middle of history drops the forward entries
        if self.has_next():
            dropped = len(self._entries) - self._cursor - 1
            logger.debug(f"Discarding {dropped} forward history entries")
            self._entries = self._entries[: self._cursor + 1]

        self._entries.append(location)
        self._cursor = len(self._entries) - 1

    def has_previous(self) -> bool:
        """Check if we can navigate backwards"""
        return self._cursor > 0

    def has_next(self) -> bool:
        """Check if we can navigate forwards"""
        return self._cursor < len(self._entries) - 1

    def current(self) -> Optional[Location]:
        """Get the location under the cursor"""
        if 0 <= self._cursor < len(self._entries):
            return self._entries[self._cursor]
        return None

    def entries(self) -> list[Location]:
        """Get all history entries"""
        return self._entries.copy()

    def go_back(self) -> Location:
        """
        Move the cursor to the previous entry.

        Returns:
            Location: The entry now under the cursor

        Raises:
            NoPreviousEntry: If the cursor is on the first entry or history is empty
        """
        if not self.has_previous():
            raise NoPreviousEntry("No previous history entry")
        self._cursor -= 1
        return self._entries[self._cursor]

    def go_forward(self) -> Location:
        """
        Move the cursor to the next entry.

        Returns:
            Location: The entry now under the cursor

        Raises:
            NoNextEntry: If the cursor is on the last entry or history is empty
        """
        if not self.has_next():
            raise NoNextEntry("No next history entry")
        self._cursor += 1
        return self._entries[self._cursor]
