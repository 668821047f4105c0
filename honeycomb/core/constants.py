"""Shared constants and enumerations for the honeycomb grid."""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple

SIDES = 6
CENTER_RING = 0


class NeighborSlot(IntEnum):
    """Fixed directional roles of a cell's six neighbor slots."""

    INNER = 0
    LEFT = 1
    RIGHT = 2
    OUTER = 3
    OUTER_RIGHT = 4
    # Inner-left for edge cells, outer-left for corner cells.
    DIAGONAL = 5


SAME_RING_SLOTS: Tuple[NeighborSlot, ...] = (NeighborSlot.LEFT, NeighborSlot.RIGHT)


def ring_capacity(ring: int) -> int:
    """Number of cells a well-formed ring holds."""

    if ring == CENTER_RING:
        return 1
    return SIDES * ring
