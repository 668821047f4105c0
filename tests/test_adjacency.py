import unittest

from honeycomb.core.constants import NeighborSlot
from honeycomb.engine.adjacency import inner_offsets, outer_offsets
from honeycomb.engine.grid import build_grid


def uniform_rings(count: int, letter: str = "X") -> list:
    return [letter] + [letter * (6 * ring) for ring in range(1, count)]


class OffsetArithmeticTests(unittest.TestCase):
    def test_inner_offsets(self) -> None:
        self.assertEqual(inner_offsets(1, 4), (0, None))
        self.assertEqual(inner_offsets(2, 1), (1, 0))
        self.assertEqual(inner_offsets(2, 2), (1, None))
        # The last offset of a ring wraps to inner offset 0.
        self.assertEqual(inner_offsets(2, 11), (0, 5))
        self.assertEqual(inner_offsets(3, 17), (0, 11))
        self.assertEqual(inner_offsets(3, 4), (3, 2))
        # Offsets of a ring longer than 6 * ring are not wrapped.
        self.assertEqual(inner_offsets(2, 11, 13), (6, 5))
        self.assertEqual(inner_offsets(2, 12, 13), (0, None))

    def test_outer_offsets(self) -> None:
        self.assertEqual(outer_offsets(1, 0), (0, 1, 11))
        self.assertEqual(outer_offsets(1, 3), (6, 7, 5))
        self.assertEqual(outer_offsets(2, 2), (3, 4, 2))
        self.assertEqual(outer_offsets(2, 3), (4, 5, None))
        self.assertEqual(outer_offsets(2, 0), (0, 1, 17))
        self.assertEqual(outer_offsets(1, 0, 13), (0, 1, 12))
        self.assertEqual(outer_offsets(1, 5, 13), (10, 11, 9))


class AdjacencyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = build_grid(["A", "BCDEFG", "HIJKLMNOPQRS"])

    def slot_letters(self, ring: int, offset: int) -> list:
        cell = self.grid.cell_at(ring, offset)
        return [None if index is None else self.grid[index].letter for index in cell.neighbors]

    def test_center_links_ring_one_in_order(self) -> None:
        self.assertEqual(self.slot_letters(0, 0), list("BCDEFG"))

    def test_single_cell_has_no_neighbors(self) -> None:
        grid = build_grid(["A"])
        self.assertEqual(grid.cell_at(0, 0).neighbors, [None] * 6)

    def test_ring_one_corner_slots(self) -> None:
        self.assertEqual(self.slot_letters(1, 0), ["A", "G", "C", "H", "I", "S"])
        self.assertEqual(self.slot_letters(1, 5), ["A", "F", "B", "R", "S", "Q"])

    def test_outermost_edge_cell_slots(self) -> None:
        self.assertEqual(self.slot_letters(2, 1), ["C", "H", "J", None, None, "B"])
        self.assertEqual(self.slot_letters(2, 11), ["B", "R", "H", None, None, "G"])

    def test_outermost_corner_has_no_diagonal(self) -> None:
        cell = self.grid.cell_at(2, 4)
        self.assertIsNone(cell.neighbor(NeighborSlot.DIAGONAL))
        self.assertEqual(self.grid[cell.neighbor(NeighborSlot.INNER)].letter, "D")

    def test_neighbor_counts_follow_corner_rule(self) -> None:
        for rings in (2, 3, 4, 5):
            grid = build_grid(uniform_rings(rings))
            outermost = rings - 1
            for cell in grid:
                if cell.ring == 0:
                    continue
                neighbors = grid.neighbors_of(cell)
                inner = sum(1 for other in neighbors if other.ring == cell.ring - 1)
                same = sum(1 for other in neighbors if other.ring == cell.ring)
                outer = sum(1 for other in neighbors if other.ring == cell.ring + 1)
                self.assertEqual(inner, 1 if cell.is_corner else 2, (cell.ring, cell.offset))
                self.assertEqual(same, 2, (cell.ring, cell.offset))
                if cell.ring == outermost:
                    self.assertEqual(outer, 0)
                else:
                    self.assertEqual(outer, 3 if cell.is_corner else 2, (cell.ring, cell.offset))

    def test_adjacency_is_symmetric(self) -> None:
        for rings in (1, 2, 3, 4, 6):
            grid = build_grid(uniform_rings(rings))
            for cell in grid:
                for index in cell.iter_neighbors():
                    self.assertIn(
                        cell.index,
                        grid[index].neighbors,
                        f"{(cell.ring, cell.offset)} -> {(grid[index].ring, grid[index].offset)}",
                    )

    def test_neighbors_are_distinct_and_never_self(self) -> None:
        grid = build_grid(uniform_rings(4))
        for cell in grid:
            present = list(cell.iter_neighbors())
            self.assertEqual(len(present), len(set(present)))
            self.assertNotIn(cell.index, present)

    def test_inner_rings_are_fully_surrounded(self) -> None:
        grid = build_grid(uniform_rings(4))
        for cell in grid:
            if cell.ring < 3:
                self.assertEqual(cell.degree, 6)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
