"""
Purpose: Command recall list behind the Up/Down keys.
Most-recent-first, de-duplicated, capped. Independent of the transcript.

cursor == -1 means "not recalling"; 0 is the most recent statement.
"""

from __future__ import annotations
from typing import Optional

DEFAULT_LIMIT = 50


class RecallHistory:
    def __init__(self, limit: int = DEFAULT_LIMIT) -> None:
        self.limit = limit
        self._items: list[str] = []
        self.cursor: int = -1

    def __len__(self) -> int:
        return len(self._items)

    def get(self) -> list[str]:
        return self._items[:]

    def push(self, statement: str) -> None:
        """Record an executed statement at the front, dropping older copies."""
        self._items = [statement] + [s for s in self._items if s != statement]
        del self._items[self.limit :]
        self.cursor = -1

    def previous(self) -> Optional[str]:
        """Step back in time. Returns None when there is nothing older."""
        if self.cursor >= len(self._items) - 1:
            return None
        self.cursor += 1
        return self._items[self.cursor]

    def next(self) -> Optional[str]:
        """Step forward. Returns "" when leaving recall, None if not recalling."""
        if self.cursor > 0:
            self.cursor -= 1
            return self._items[self.cursor]
        if self.cursor == 0:
            self.cursor = -1
            return ""
        return None

    def reset_cursor(self) -> None:
        self.cursor = -1
