"""Deterministic integrity checks for a linked honeycomb."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.constants import SAME_RING_SLOTS, SIDES, ring_capacity
from ..core.exceptions import ValidationError
from ..utils.logger import get_logger
from .grid import HoneycombGrid


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs geometry and adjacency validation over a built grid."""

    def validate(self, grid: HoneycombGrid) -> ValidationResult:
        try:
            self._check_ring_sizes(grid)
            self._check_center(grid)
            self._check_neighbor_counts(grid)
            self._check_symmetry(grid)
        except ValidationError as exc:
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _check_ring_sizes(self, grid: HoneycombGrid) -> None:
        for ring in range(grid.ring_count):
            if grid.ring_size(ring) != ring_capacity(ring):
                raise ValidationError(
                    f"Ring {ring} has {grid.ring_size(ring)} cells, expected {ring_capacity(ring)}"
                )

    def _check_center(self, grid: HoneycombGrid) -> None:
        if grid.ring_count < 2:
            return
        center = grid.cell_at(0, 0)
        expected = [grid.index_at(1, offset) for offset in range(SIDES)]
        if center.neighbors != expected:
            raise ValidationError("Center cell is not linked to ring 1 in offset order")

    def _check_neighbor_counts(self, grid: HoneycombGrid) -> None:
        outermost = grid.ring_count - 1
        for cell in grid:
            if cell.ring == 0:
                continue
            inner = sum(1 for index in cell.iter_neighbors() if grid[index].ring == cell.ring - 1)
            same = sum(1 for slot in SAME_RING_SLOTS if cell.neighbors[slot] is not None)
            outer = sum(1 for index in cell.iter_neighbors() if grid[index].ring == cell.ring + 1)
            expected_inner = 1 if cell.is_corner else 2
            expected_outer = 0 if cell.ring == outermost else (3 if cell.is_corner else 2)
            if (inner, same, outer) != (expected_inner, 2, expected_outer):
                raise ValidationError(
                    f"Cell ({cell.ring},{cell.offset}) has {inner} inner, {same} same-ring "
                    f"and {outer} outer neighbors"
                )

    def _check_symmetry(self, grid: HoneycombGrid) -> None:
        for cell in grid:
            for index in cell.iter_neighbors():
                other = grid[index]
                if cell.index not in other.neighbors:
                    raise ValidationError(
                        f"Cell ({cell.ring},{cell.offset}) lists ({other.ring},{other.offset}) "
                        "as a neighbor but not the reverse"
                    )
