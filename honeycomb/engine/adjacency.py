"""Closed-form neighbor resolution for concentric hexagonal rings.

Ring ``r`` has six sides of ``r`` cells each. A cell at offset ``c`` sits on
side ``c // r`` at step ``c % r``; step 0 is the side's corner. Ring ``r + 1``
has one more cell per side, so offsets map between rings by scaling the side
index while keeping the step:

* a corner touches one inner cell and three outer cells,
* an edge cell touches two inner cells and two outer cells.

The sixth slot (:attr:`NeighborSlot.DIAGONAL`) therefore holds the inner-left
neighbor of an edge cell and the outer-left neighbor of a corner.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

from ..core.constants import SIDES, NeighborSlot, ring_capacity
from ..core.models import Cell
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .grid import HoneycombGrid


LOGGER = get_logger(__name__)


def inner_offsets(ring: int, offset: int, size: Optional[int] = None) -> Tuple[int, Optional[int]]:
    """Return ``(inner, inner_left)`` offsets on ``ring - 1``.

    ``size`` is the actual length of ``ring`` and defaults to a well-formed
    ring. ``inner_left`` is ``None`` for corners. Only the last offset of the
    ring wraps, to inner offset 0; every other offset is returned unreduced
    so that lookups on a malformed ring fail.
    """

    if size is None:
        size = ring_capacity(ring)
    side, step = divmod(offset, ring)
    inner = 0 if offset == size - 1 else (ring - 1) * side + step
    inner_left = None if step == 0 else (ring - 1) * side + step - 1
    return inner, inner_left


def outer_offsets(
    ring: int, offset: int, outer_size: Optional[int] = None
) -> Tuple[int, int, Optional[int]]:
    """Return ``(outer, outer_right, outer_left)`` offsets on ``ring + 1``.

    ``outer_left`` is ``None`` for edge cells; for the corner at offset 0 it
    wraps to the last offset of the outer ring, whose actual length is
    ``outer_size`` (a well-formed ring by default).
    """

    if outer_size is None:
        outer_size = ring_capacity(ring + 1)
    side, step = divmod(offset, ring)
    outer = (ring + 1) * side + step
    outer_left = None
    if step == 0:
        outer_left = outer_size - 1 if offset == 0 else (ring + 1) * side - 1
    return outer, outer + 1, outer_left


def resolve_adjacency(grid: HoneycombGrid) -> None:
    """Assign the six neighbor slots of every cell in ``grid``."""

    for cell in grid.cells:
        if cell.ring == 0:
            _link_center(grid, cell)
        else:
            _link_ring_cell(grid, cell)
    LOGGER.debug("Resolved adjacency for %s cells", len(grid.cells))


def _link_center(grid: HoneycombGrid, cell: Cell) -> None:
    if grid.ring_count < 2:
        return
    for slot in range(SIDES):
        cell.neighbors[slot] = grid.index_at(1, slot)


def _link_ring_cell(grid: HoneycombGrid, cell: Cell) -> None:
    ring, offset = cell.ring, cell.offset
    size = grid.ring_size(ring)

    inner, inner_left = inner_offsets(ring, offset, size)
    cell.neighbors[NeighborSlot.INNER] = grid.index_at(ring - 1, inner)
    if inner_left is not None:
        cell.neighbors[NeighborSlot.DIAGONAL] = grid.index_at(ring - 1, inner_left)

    cell.neighbors[NeighborSlot.LEFT] = grid.index_at(ring, (offset - 1) % size)
    cell.neighbors[NeighborSlot.RIGHT] = grid.index_at(ring, (offset + 1) % size)

    if ring + 1 >= grid.ring_count:
        return

    outer, outer_right, outer_left = outer_offsets(ring, offset, grid.ring_size(ring + 1))
    cell.neighbors[NeighborSlot.OUTER] = grid.index_at(ring + 1, outer)
    cell.neighbors[NeighborSlot.OUTER_RIGHT] = grid.index_at(ring + 1, outer_right)
    if outer_left is not None:
        cell.neighbors[NeighborSlot.DIAGONAL] = grid.index_at(ring + 1, outer_left)
