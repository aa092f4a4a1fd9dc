# -*- coding: utf-8 -*-
"""
History stack of visited page indices, used for backward navigation.
"""

from typing import Iterable, Iterator, List, Optional


class HistoryStack:
    """LIFO record of the page indices the user advanced from."""

    def __init__(self, entries: Optional[Iterable[int]] = None):
        self._entries: List[int] = list(entries or [])

    def push(self, page: int):
        self._entries.append(page)

    def pop(self) -> Optional[int]:
        """Remove and return the most recent entry, or None when empty."""
        if not self._entries:
            return None
        return self._entries.pop()

    def peek(self) -> Optional[int]:
        if not self._entries:
            return None
        return self._entries[-1]

    def clear(self):
        self._entries.clear()

    def discard_from(self, page_count: int) -> int:
        """
        Drop entries that no longer point at an existing page.

        Returns:
            Number of entries removed
        """
        kept = [entry for entry in self._entries if 0 <= entry < page_count]
        removed = len(self._entries) - len(kept)
        self._entries = kept
        return removed

    def discard_top(self, page: int) -> int:
        """
        Pop entries equal to ``page`` off the top of the stack.

        After a rebuild an entry can point at the page being shown; going
        back to it would not move.

        Returns:
            Number of entries removed
        """
        removed = 0
        while self._entries and self._entries[-1] == page:
            self._entries.pop()
            removed += 1
        return removed

    def to_list(self) -> List[int]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other) -> bool:
        if isinstance(other, HistoryStack):
            return self._entries == other._entries
        if isinstance(other, list):
            return self._entries == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"HistoryStack({self._entries!r})"
