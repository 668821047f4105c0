"""Honeycomb grid representation and construction."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence

from ..core.constants import ring_capacity
from ..core.exceptions import GridGeometryError
from ..core.models import Cell
from ..utils.logger import get_logger
from .adjacency import resolve_adjacency


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Configuration values driving grid construction."""

    # Reject rings whose length is not 1 (center) or 6 * ring.
    validate_geometry: bool = True


class HoneycombGrid:
    """Owns every cell of a honeycomb in a flat arena.

    Cells are stored ring-major, offset-minor. ``rings[r][c]`` and the
    letter index both hold arena indices into :attr:`cells`.
    """

    def __init__(self, lines: Sequence[str], config: Optional[GridConfig] = None) -> None:
        self.config = config or GridConfig()
        self.cells: List[Cell] = []
        self.rings: List[List[int]] = []
        self.letter_index: Dict[str, List[int]] = defaultdict(list)
        if self.config.validate_geometry:
            self._check_geometry(lines)
        self._populate(lines)
        resolve_adjacency(self)
        LOGGER.debug("Built honeycomb with %s rings and %s cells", self.ring_count, len(self.cells))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @staticmethod
    def _check_geometry(lines: Sequence[str]) -> None:
        for ring, line in enumerate(lines):
            expected = ring_capacity(ring)
            if len(line) != expected:
                raise GridGeometryError(
                    f"Ring {ring} has {len(line)} cells, expected {expected}"
                )

    def _populate(self, lines: Sequence[str]) -> None:
        for ring, line in enumerate(lines):
            positions: List[int] = []
            for offset, letter in enumerate(line):
                cell = Cell(letter=letter, ring=ring, offset=offset, index=len(self.cells))
                self.cells.append(cell)
                positions.append(cell.index)
                self.letter_index[letter].append(cell.index)
            self.rings.append(positions)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    @property
    def ring_count(self) -> int:
        return len(self.rings)

    def ring_size(self, ring: int) -> int:
        return len(self.rings[ring])

    def index_at(self, ring: int, offset: int) -> int:
        """Return the arena index of ``(ring, offset)``.

        Raises :class:`GridGeometryError` when the position does not exist,
        which only happens for honeycombs built without geometry validation.
        """

        if not 0 <= ring < len(self.rings):
            raise GridGeometryError(f"Ring {ring} is outside the honeycomb")
        positions = self.rings[ring]
        if not 0 <= offset < len(positions):
            raise GridGeometryError(
                f"Offset {offset} is outside ring {ring} of size {len(positions)}"
            )
        return positions[offset]

    def cell_at(self, ring: int, offset: int) -> Cell:
        return self.cells[self.index_at(ring, offset)]

    def cells_with_letter(self, letter: str) -> List[Cell]:
        return [self.cells[index] for index in self.letter_index.get(letter, ())]

    def letters(self) -> List[str]:
        return list(self.letter_index)

    def neighbors_of(self, cell: Cell) -> List[Cell]:
        return [self.cells[index] for index in cell.iter_neighbors()]


def build_grid(lines: Sequence[str], config: Optional[GridConfig] = None) -> HoneycombGrid:
    """Build a fully linked honeycomb from ring text, center ring first."""

    return HoneycombGrid(lines, config)
