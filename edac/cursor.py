"""
edac.cursor
AUTHOR: carter-vin

Resettable forward cursor over an immutable snapshot

Contract:
- next() returns the element under the cursor, then advances
- past the end next() keeps returning None; there is no auto-reset
- reset() moves back to just before the first element
- each Cursor is its own object; two traversals never share position
"""

from __future__ import annotations

from typing import Any, Iterable, Optional


class Cursor:
    def __init__(self, items: Iterable[Any]) -> None:
        self._items: tuple[Any, ...] = tuple(items)
        # None = unset; next() then starts at the first element
        self._pos: Optional[int] = None

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> tuple[Any, ...]:
        return self._items

    @property
    def exhausted(self) -> bool:
        return self._pos is not None and self._pos >= len(self._items)

    def reset(self) -> None:
        self._pos = 0

    def next(self) -> Optional[Any]:
        if self._pos is None:
            self._pos = 0
        if self._pos >= len(self._items):
            return None
        item = self._items[self._pos]
        self._pos += 1
        return item
