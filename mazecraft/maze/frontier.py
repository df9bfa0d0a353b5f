"""Candidate set for the carve loop.

Holds indices of unfilled cells that touch the carved region. A list backs
uniform indexed draws and a set backs membership, so both ``offer`` and
``draw_random`` are O(1).
"""

from __future__ import annotations

from typing import Callable, List, Optional, Set

RandRange = Callable[[int, int], int]


class Frontier:
    __slots__ = ("_items", "_members")

    def __init__(self):
        self._items: List[int] = []
        self._members: Set[int] = set()

    def offer(self, index: int) -> bool:
        """Add ``index`` unless already present. Returns True when it was added."""
        if index in self._members:
            return False
        self._members.add(index)
        self._items.append(index)
        return True

    def draw_random(self, rand_range: RandRange) -> Optional[int]:
        """Remove and return a uniformly chosen member, or None when empty."""
        if not self._items:
            return None
        pos = rand_range(0, len(self._items) - 1)
        index = self._items[pos]
        last = self._items.pop()
        if pos < len(self._items):
            self._items[pos] = last
        self._members.discard(index)
        return index

    def __contains__(self, index: int) -> bool:
        return index in self._members

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


__all__ = ["Frontier", "RandRange"]
