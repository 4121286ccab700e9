import unittest

from wordgrid.core.constants import Axis, CellKind, TraceKind
from wordgrid.core.models import Cell
from wordgrid.engine.grid import CellGrid
from wordgrid.engine.tracer import WordTracer


def tracer_for(*rows: str) -> WordTracer:
    return WordTracer(CellGrid.from_layout(list(rows)))


class StraightTraceTests(unittest.TestCase):
    def test_straight_run_includes_empty_cells(self) -> None:
        tracer = tracer_for("A . C #")
        word = tracer.trace_straight(0, 1, Axis.HORIZONTAL)
        assert word is not None
        self.assertEqual(word.cells, ((0, 0), (0, 1), (0, 2)))
        self.assertEqual(word.letters, ("A", "", "C"))
        self.assertEqual(word.text, "AC")
        self.assertEqual(word.trace, TraceKind.STRAIGHT)
        self.assertFalse(word.is_complete)
        self.assertEqual(word.id, "0-0-horizontal")

    def test_straight_run_stops_at_labels_and_blocks(self) -> None:
        tracer = tracer_for("A B =x C D # E")
        first = tracer.trace_straight(0, 1, Axis.HORIZONTAL)
        second = tracer.trace_straight(0, 3, Axis.HORIZONTAL)
        assert first is not None and second is not None
        self.assertEqual(first.text, "AB")
        self.assertEqual(second.text, "CD")
        self.assertIsNone(tracer.trace_straight(0, 6, Axis.HORIZONTAL))

    def test_vertical_straight_run(self) -> None:
        tracer = tracer_for("# A", "# .", "# C", "# #")
        word = tracer.trace_straight(2, 1, Axis.VERTICAL)
        assert word is not None
        self.assertEqual(word.cells, ((0, 1), (1, 1), (2, 1)))
        self.assertEqual(word.direction, Axis.VERTICAL)

    def test_non_fillable_start_returns_none(self) -> None:
        tracer = tracer_for("# A B")
        self.assertIsNone(tracer.trace_straight(0, 0, Axis.HORIZONTAL))
        self.assertIsNone(tracer.trace_straight(5, 5, Axis.HORIZONTAL))


class PotentialTraceTests(unittest.TestCase):
    def test_empty_cell_is_a_soft_boundary(self) -> None:
        tracer = tracer_for("A B . D E")
        left = tracer.trace_potential(0, 0, Axis.HORIZONTAL)
        right = tracer.trace_potential(0, 4, Axis.HORIZONTAL)
        assert left is not None and right is not None
        self.assertEqual(left.text, "AB")
        self.assertEqual(right.cells, ((0, 3), (0, 4)))
        self.assertEqual(right.trace, TraceKind.POTENTIAL)

    def test_empty_start_returns_none(self) -> None:
        tracer = tracer_for("A . C")
        self.assertIsNone(tracer.trace_potential(0, 1, Axis.HORIZONTAL))
        self.assertIsNone(tracer.trace_potential(0, 1, Axis.VERTICAL))

    def test_potential_words_never_contain_empty_cells(self) -> None:
        grid = CellGrid.from_layout(
            [
                "A . C D #",
                "E F . H I",
                ". J K # L",
                "M N . O P",
            ]
        )
        tracer = WordTracer(grid)
        for row, col in grid.positions():
            for axis in Axis:
                word = tracer.trace_potential(row, col, axis)
                if word is None:
                    continue
                for r, c in word.cells:
                    self.assertTrue(grid.cell(r, c).has_content(), (row, col, axis, word.id))

    def test_isolated_cell(self) -> None:
        tracer = tracer_for("# # #", "# X #", "# # #")
        for axis in Axis:
            with self.subTest(axis=axis):
                self.assertIsNone(tracer.trace_straight(1, 1, axis))
                word = tracer.trace_potential(1, 1, axis)
                assert word is not None
                self.assertEqual(word.length, 1)
                self.assertEqual(word.text, "X")

    def test_single_letter_in_straight_run_of_one(self) -> None:
        tracer = tracer_for("A #", "B #")
        self.assertIsNone(tracer.trace_straight(0, 0, Axis.HORIZONTAL))
        word = tracer.trace_potential(0, 0, Axis.HORIZONTAL)
        assert word is not None
        self.assertEqual(word.length, 1)


class EnumerationTests(unittest.TestCase):
    def test_enumerate_words_deduplicates_in_scan_order(self) -> None:
        tracer = tracer_for("A B #", "C . D")
        ids = [word.id for word in tracer.enumerate_words()]
        self.assertEqual(
            ids,
            ["0-0-horizontal", "0-0-vertical", "0-1-vertical", "1-0-horizontal"],
        )

    def test_word_stats(self) -> None:
        tracer = tracer_for("A B #", "C . D")
        stats = tracer.word_stats()
        self.assertEqual(stats.total, 4)
        self.assertEqual(stats.horizontal, 2)
        self.assertEqual(stats.vertical, 2)
        self.assertEqual(stats.complete, 2)
        self.assertEqual(stats.incomplete, 2)

    def test_enumeration_reflects_grid_edits(self) -> None:
        grid = CellGrid.from_layout(["A B C"])
        tracer = WordTracer(grid)
        self.assertEqual(len(tracer.enumerate_words()), 1)
        grid.set_cell(0, 1, Cell(kind=CellKind.BLOCKED))
        self.assertEqual(tracer.enumerate_words(), [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
