"""Data models supporting the honeycomb grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .constants import SIDES, NeighborSlot


@dataclass
class Cell:
    """One hexagon of the honeycomb.

    ``neighbors`` holds arena indices into the owning grid, one slot per
    :class:`NeighborSlot` role. Absent neighbors are ``None``.
    """

    letter: str
    ring: int
    offset: int
    index: int = -1
    neighbors: List[Optional[int]] = field(default_factory=lambda: [None] * SIDES)
    visited: bool = field(default=False, repr=False, compare=False)

    @property
    def is_corner(self) -> bool:
        if self.ring == 0:
            return True
        return self.offset % self.ring == 0

    def neighbor(self, slot: NeighborSlot) -> Optional[int]:
        return self.neighbors[slot]

    def iter_neighbors(self) -> Iterator[int]:
        """Yield present neighbor indices in slot order."""

        for index in self.neighbors:
            if index is not None:
                yield index

    @property
    def degree(self) -> int:
        return sum(1 for _ in self.iter_neighbors())
