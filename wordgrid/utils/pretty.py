"""Pretty-print helpers for grids and selected words."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, Optional

from ..core.constants import CellKind, Redirect

if TYPE_CHECKING:
    from ..core.models import Cell, Word, WordStats
    from ..engine.grid import GridAccessor


SYMBOLS = {
    CellKind.BLOCKED: "#",
    CellKind.LABEL: "=",
}

REDIRECT_MARKS = {
    Redirect.NONE: "",
    Redirect.TURN_TO_HORIZONTAL: "-",
    Redirect.TURN_TO_VERTICAL: "|",
}


def cell_symbol(cell: Optional[Cell]) -> str:
    if cell is None:
        return " "
    if cell.kind != CellKind.FILLABLE:
        return SYMBOLS[cell.kind]
    letter = cell.content.strip() or "."
    return letter + REDIRECT_MARKS[cell.redirect]


def format_grid(grid: GridAccessor, word: Optional[Word] = None) -> str:
    """Render the grid as text; cells of ``word`` are wrapped in brackets."""

    selected = set(word.cells) if word is not None else set()
    header_cells = [f"{c:>4}" for c in range(grid.cols)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (4 * grid.cols))
    for r in range(grid.rows):
        row_cells = []
        for c in range(grid.cols):
            symbol = cell_symbol(grid.get_cell(r, c))
            if (r, c) in selected:
                symbol = f"[{symbol}]"
            row_cells.append(f"{symbol:>4}")
        lines.append(f"{r:>2} |" + "".join(row_cells))
    return "\n".join(lines)


def format_word(word: Optional[Word]) -> str:
    if word is None:
        return "(no selection)"
    cells = " ".join(f"({r},{c})" for r, c in word.cells)
    summary = f"{word.id}: {word.text!r} {word.direction.value}, {word.length} cells {cells}"
    if word.bend_points:
        bends = ", ".join(
            f"{bend.index}@{bend.position} {bend.from_axis.value}->{bend.to_axis.value}"
            for bend in word.bend_points
        )
        summary += f" bends [{bends}]"
    return summary


def print_words(
    words: Iterable[Word],
    stats: Optional[WordStats] = None,
    *,
    stream=None,
) -> None:
    """Print one line per word, followed by the grid-wide counts."""

    stream = stream or sys.stdout
    for word in words:
        print(format_word(word), file=stream)
    if stats is not None:
        print(file=stream)
        print("--- Words ---", file=stream)
        print(f"  Total:         {stats.total}", file=stream)
        print(f"  Horizontal:    {stats.horizontal}", file=stream)
        print(f"  Vertical:      {stats.vertical}", file=stream)
        print(f"  Complete:      {stats.complete}", file=stream)
        if stats.incomplete:
            print(f"  Incomplete:    {stats.incomplete}", file=stream)
