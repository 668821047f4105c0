"""Pretty-print helpers for honeycomb grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List, Sequence

from ..core.constants import SIDES

if TYPE_CHECKING:
    from ..engine.grid import HoneycombGrid
    from ..engine.search import SearchStats


def format_ring(grid: HoneycombGrid, ring: int) -> str:
    letters = [grid.cell_at(ring, offset).letter for offset in range(grid.ring_size(ring))]
    if ring == 0 or len(letters) != SIDES * ring:
        return "".join(letters)
    # One group per side, each starting at its corner.
    sides = ["".join(letters[side * ring:(side + 1) * ring]) for side in range(SIDES)]
    return " ".join(sides)


def format_grid(grid: HoneycombGrid) -> str:
    lines: List[str] = []
    for ring in range(grid.ring_count):
        lines.append(f"{ring:>3} | {format_ring(grid, ring)}")
    return "\n".join(lines)


def pretty_print_grid(grid: HoneycombGrid, *, label: str | None = None, stream=None) -> None:
    """Print the honeycomb ring by ring, sides separated by spaces."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)


def print_search_stats(
    grid: HoneycombGrid,
    words: Sequence[str],
    found: Sequence[str],
    stats: SearchStats,
    *,
    stream=None,
) -> None:
    """Print grid and search statistics for a completed run."""

    stream = stream or sys.stdout

    print("--- Grid ---", file=stream)
    print(f"  Rings:         {grid.ring_count}", file=stream)
    print(f"  Cells:         {len(grid)}", file=stream)
    letters = Counter(cell.letter for cell in grid)
    if letters:
        common = " ".join(f"{letter}:{count}" for letter, count in letters.most_common(5))
        print(f"  Top letters:   {common}", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Dictionary:    {len(words)}", file=stream)
    if words:
        print(f"  Found:         {len(found)} ({len(found) / len(words) * 100:.0f}%)", file=stream)
    else:
        print(f"  Found:         {len(found)}", file=stream)
    if found:
        lengths = [len(word) for word in found]
        print(f"  Length range:  {min(lengths)}-{max(lengths)}", file=stream)

    print(file=stream)
    print("--- Search ---", file=stream)
    print(f"  Start cells:   {stats.start_cells}", file=stream)
    print(f"  Expansions:    {stats.expansions}", file=stream)
