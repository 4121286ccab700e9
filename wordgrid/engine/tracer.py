"""Word tracing over a grid accessor.

Three tracers share the same walking primitives:

  * straight: maximal run of fillable cells, used to enumerate the grid;
  * potential: run of filled cells around a clicked cell, where an empty
    fillable cell is a soft boundary;
  * bent: follows redirect cells, first backward to the true start and then
    forward to the end, recording every bend taken.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set, Tuple

from ..core.constants import MAX_BACKWARD_STEPS, Axis, TraceKind
from ..core.models import BendPoint, Position, Word, WordStats, make_word_id
from ..utils.logger import get_logger
from .grid import GridAccessor


LOGGER = get_logger(__name__)


@dataclass
class TraceConfig:
    """Tunables for the tracers."""

    max_backward_steps: int = MAX_BACKWARD_STEPS
    min_word_length: int = 2

    def __post_init__(self) -> None:
        if self.max_backward_steps <= 0:
            raise ValueError("max_backward_steps must be positive")
        if self.min_word_length <= 0:
            raise ValueError("min_word_length must be positive")


@dataclass
class TraceRun:
    """Raw result of a forward trace."""

    direction: Axis
    cells: List[Position] = field(default_factory=list)
    bend_points: List[BendPoint] = field(default_factory=list)


class WordTracer:
    """Computes words from the live grid; keeps no state between calls."""

    def __init__(self, grid: GridAccessor, config: Optional[TraceConfig] = None) -> None:
        self.grid = grid
        self.config = config or TraceConfig()

    # ------------------------------------------------------------------
    # Cell predicates
    # ------------------------------------------------------------------
    def is_fillable(self, row: int, col: int) -> bool:
        cell = self.grid.get_cell(row, col)
        return cell is not None and cell.is_fillable()

    def is_filled(self, row: int, col: int) -> bool:
        cell = self.grid.get_cell(row, col)
        return cell is not None and cell.has_content()

    # ------------------------------------------------------------------
    # Straight and potential words
    # ------------------------------------------------------------------
    def trace_straight(self, row: int, col: int, axis: Axis) -> Optional[Word]:
        """Maximal run of fillable cells through ``(row, col)``, empty cells included."""

        if not self.is_fillable(row, col):
            return None
        cells = self._walk(row, col, axis, self.is_fillable)
        if len(cells) < self.config.min_word_length:
            return None
        return self._build_word(cells, axis, TraceKind.STRAIGHT)

    def trace_potential(self, row: int, col: int, axis: Axis) -> Optional[Word]:
        """Run of filled cells through ``(row, col)``; single letters are allowed."""

        if not self.is_filled(row, col):
            return None
        cells = self._walk(row, col, axis, self.is_filled)
        if not cells:
            return None
        return self._build_word(cells, axis, TraceKind.POTENTIAL)

    def _walk(
        self,
        row: int,
        col: int,
        axis: Axis,
        accept: Callable[[int, int], bool],
    ) -> List[Position]:
        dr, dc = axis.step
        start_row, start_col = row, col
        while accept(start_row - dr, start_col - dc):
            start_row -= dr
            start_col -= dc

        cells = [(start_row, start_col)]
        r, c = start_row + dr, start_col + dc
        while accept(r, c):
            cells.append((r, c))
            r += dr
            c += dc
        return cells

    # ------------------------------------------------------------------
    # Bent words
    # ------------------------------------------------------------------
    def trace_bent(self, row: int, col: int, axis: Axis) -> Optional[Word]:
        """Word through ``(row, col)`` that changes axis at least once.

        Returns ``None`` when the trace takes no bend, so callers fall back to
        :meth:`trace_potential`. Every traced cell, the first included, must
        hold content.
        """

        if not self.is_filled(row, col):
            return None
        start_row, start_col, start_axis = self.find_start_with_redirects(row, col, axis)
        run = self.trace_from_start(start_row, start_col, start_axis)

        if len(run.cells) < self.config.min_word_length or not run.bend_points:
            return None
        if (row, col) not in run.cells:
            LOGGER.debug(
                "Bent trace from %s does not pass through anchor (%s,%s)",
                run.cells[0],
                row,
                col,
            )
            return None
        return self._build_word(run.cells, run.direction, TraceKind.BENT, run.bend_points)

    def find_start_with_redirects(self, row: int, col: int, axis: Axis) -> Tuple[int, int, Axis]:
        """Walk backward, following redirects in reverse, to the word's first cell."""

        current_row, current_col, current_axis = row, col, axis
        visited: Set[Tuple[int, int, Axis]] = set()
        for _ in range(self.config.max_backward_steps):
            key = (current_row, current_col, current_axis)
            if key in visited:
                LOGGER.debug("Redirect cycle at %s while searching for word start", key)
                break
            visited.add(key)

            dr, dc = current_axis.step
            prev_row, prev_col = current_row - dr, current_col - dc
            prev = self.grid.get_cell(prev_row, prev_col)
            if prev is None or not prev.has_content():
                break

            current_row, current_col = prev_row, prev_col
            # The previous cell turned the word onto this axis, so the word
            # reached it along the other one.
            if prev.redirect.target == current_axis:
                current_axis = current_axis.other
        else:
            LOGGER.debug(
                "Backward search from (%s,%s) capped after %s steps",
                row,
                col,
                self.config.max_backward_steps,
            )
        return current_row, current_col, current_axis

    def trace_from_start(self, row: int, col: int, axis: Axis) -> TraceRun:
        """Walk forward from a word start, turning at redirect cells."""

        run = TraceRun(direction=axis)
        current_row, current_col, current_axis = row, col, axis
        visited: Set[Position] = set()
        limit = self.grid.rows * self.grid.cols
        while len(run.cells) < limit:
            position = (current_row, current_col)
            if position in visited:
                LOGGER.debug("Redirect cycle at %s while tracing forward", position)
                break
            visited.add(position)

            cell = self.grid.get_cell(current_row, current_col)
            if cell is None or not cell.has_content():
                break
            run.cells.append(position)

            turned = cell.turns(current_axis)
            if turned is not None:
                run.bend_points.append(
                    BendPoint(
                        index=len(run.cells) - 1,
                        from_axis=current_axis,
                        to_axis=turned,
                        position=position,
                    )
                )
                current_axis = turned

            dr, dc = current_axis.step
            current_row += dr
            current_col += dc

        return run

    def retrace(self, word: Word) -> Optional[Word]:
        """Rebuild ``word`` from its stored start and direction on the current grid."""

        row, col = word.start
        if word.trace == TraceKind.STRAIGHT:
            return self.trace_straight(row, col, word.direction)
        if word.trace == TraceKind.POTENTIAL:
            return self.trace_potential(row, col, word.direction)
        return self.trace_bent(row, col, word.direction) or self.trace_potential(
            row, col, word.direction
        )

    # ------------------------------------------------------------------
    # Grid-wide queries
    # ------------------------------------------------------------------
    def enumerate_words(self) -> List[Word]:
        """All distinct straight words, row-major, horizontal before vertical."""

        words: List[Word] = []
        seen: Set[str] = set()
        for row in range(self.grid.rows):
            for col in range(self.grid.cols):
                if not self.is_fillable(row, col):
                    continue
                for axis in (Axis.HORIZONTAL, Axis.VERTICAL):
                    word = self.trace_straight(row, col, axis)
                    if word is not None and word.id not in seen:
                        seen.add(word.id)
                        words.append(word)
        LOGGER.debug("Enumerated %s straight words", len(words))
        return words

    def word_stats(self) -> WordStats:
        """Counts over :meth:`enumerate_words`, split by axis and completeness."""

        words = self.enumerate_words()
        complete = sum(1 for word in words if word.is_complete)
        return WordStats(
            total=len(words),
            horizontal=sum(1 for word in words if word.direction == Axis.HORIZONTAL),
            vertical=sum(1 for word in words if word.direction == Axis.VERTICAL),
            complete=complete,
            incomplete=len(words) - complete,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_word(
        self,
        cells: List[Position],
        direction: Axis,
        trace: TraceKind,
        bend_points: Optional[List[BendPoint]] = None,
    ) -> Word:
        bends = tuple(bend_points or ())
        letters = []
        for r, c in cells:
            cell = self.grid.get_cell(r, c)
            letters.append(cell.content.strip() if cell is not None else "")
        return Word(
            id=make_word_id(cells[0], direction, bends),
            cells=tuple(cells),
            direction=direction,
            letters=tuple(letters),
            trace=trace,
            bend_points=bends,
        )
