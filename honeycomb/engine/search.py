"""Depth-first word search over a linked honeycomb.

Words are short, so each attempt recurses at most ``len(word)`` levels and
stops at the first complete path. Start cells come from the grid's
by-letter index in read order and neighbors are tried in slot order, which
keeps results reproducible.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable, Iterator, List

from ..core.models import Cell
from ..utils.logger import get_logger
from .grid import HoneycombGrid


LOGGER = get_logger(__name__)


@dataclass
class SearchStats:
    words_checked: int = 0
    words_found: int = 0
    start_cells: int = 0
    expansions: int = 0


@contextmanager
def _visiting(cell: Cell) -> Iterator[Cell]:
    """Mark ``cell`` for the current path and unmark it on every exit."""

    cell.visited = True
    try:
        yield cell
    finally:
        cell.visited = False


class WordSearcher:
    """Answers path-existence queries against one honeycomb."""

    def __init__(self, grid: HoneycombGrid) -> None:
        self.grid = grid
        self.stats = SearchStats()

    def contains(self, word: str) -> bool:
        """Return whether ``word`` can be spelled along a simple path."""

        if not word:
            raise ValueError("Cannot search for an empty word")
        self.stats.words_checked += 1
        # A simple path never covers more cells than the grid has.
        if len(word) > len(self.grid):
            return False

        for start in self.grid.cells_with_letter(word[0]):
            self.stats.start_cells += 1
            if self._extend(start, word[1:]):
                self.stats.words_found += 1
                return True
        return False

    def _extend(self, cell: Cell, suffix: str) -> bool:
        if not suffix:
            return True
        self.stats.expansions += 1
        target = suffix[0]
        with _visiting(cell):
            for index in cell.iter_neighbors():
                neighbor = self.grid.cells[index]
                if neighbor.visited or neighbor.letter != target:
                    continue
                if self._extend(neighbor, suffix[1:]):
                    return True
        return False

    def find_all(self, words: Iterable[str]) -> List[str]:
        """Return the words present in the grid, sorted lexicographically."""

        candidates = list(words)
        found = [word for word in candidates if self.contains(word)]
        found.sort()
        LOGGER.info("Found %s of %s words", len(found), len(candidates))
        LOGGER.debug(
            "Search tried %s start cells and expanded %s cells",
            self.stats.start_cells,
            self.stats.expansions,
        )
        return found


def search(grid: HoneycombGrid, word: str) -> bool:
    return WordSearcher(grid).contains(word)


def find_words(grid: HoneycombGrid, words: Iterable[str]) -> List[str]:
    return WordSearcher(grid).find_all(words)
