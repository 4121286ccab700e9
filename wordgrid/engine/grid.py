"""Grid accessor protocol and an in-memory grid adapter."""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

from ..core.constants import Bounds, CellKind, Redirect
from ..core.exceptions import GridBoundsError, GridLayoutError
from ..core.models import Cell
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

REDIRECT_SUFFIXES = {
    "-": Redirect.TURN_TO_HORIZONTAL,
    "|": Redirect.TURN_TO_VERTICAL,
}


class GridAccessor(Protocol):
    """Read-only view over a rectangular grid of cells.

    ``get_cell`` returns ``None`` for coordinates outside the grid.
    """

    rows: int
    cols: int

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        ...


def parse_token(token: str) -> Cell:
    """Parse one layout token into a :class:`Cell`.

    ``#`` is blocked, ``=text`` is a label, ``.`` is an empty fillable cell and
    a single character is a fillable cell holding it. Fillable tokens may end
    with ``-`` (turn to horizontal) or ``|`` (turn to vertical).
    """

    if not token:
        raise GridLayoutError("Empty cell token")
    if token == "#":
        return Cell(kind=CellKind.BLOCKED)
    if token.startswith("="):
        return Cell(kind=CellKind.LABEL, content=token[1:])

    redirect = Redirect.NONE
    if len(token) > 1 and token[-1] in REDIRECT_SUFFIXES:
        redirect = REDIRECT_SUFFIXES[token[-1]]
        token = token[:-1]
    if len(token) != 1 or token in REDIRECT_SUFFIXES or token == "#":
        raise GridLayoutError(f"Unrecognised cell token {token!r}")
    content = "" if token == "." else token.upper()
    return Cell(kind=CellKind.FILLABLE, content=content, redirect=redirect)


def format_token(cell: Cell) -> str:
    if cell.kind == CellKind.BLOCKED:
        return "#"
    if cell.kind == CellKind.LABEL:
        return f"={cell.content}"
    token = cell.content if cell.has_content() else "."
    for suffix, redirect in REDIRECT_SUFFIXES.items():
        if cell.redirect == redirect:
            token += suffix
    return token


class CellGrid:
    """Mutable in-memory grid implementing :class:`GridAccessor`."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise GridLayoutError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.bounds = Bounds(rows=rows, cols=cols)
        self.cells: List[List[Cell]] = [[Cell() for _ in range(cols)] for _ in range(rows)]

    @classmethod
    def from_layout(cls, layout: Sequence[str] | str) -> "CellGrid":
        """Build a grid from whitespace-separated token rows."""

        parsed: List[List[Cell]] = []
        for index, line in enumerate(layout_rows(layout)):
            tokens = line.split()
            if not tokens:
                continue
            try:
                parsed.append([parse_token(token) for token in tokens])
            except GridLayoutError as exc:
                raise GridLayoutError(f"Row {index}: {exc}") from exc

        if not parsed:
            raise GridLayoutError("Layout has no rows")
        width = len(parsed[0])
        for index, row in enumerate(parsed):
            if len(row) != width:
                raise GridLayoutError(
                    f"Row {index} has {len(row)} cells, expected {width}"
                )

        grid = cls(len(parsed), width)
        grid.cells = parsed
        LOGGER.debug("Parsed %sx%s grid layout", grid.rows, grid.cols)
        return grid

    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def cols(self) -> int:
        return self.bounds.cols

    # ------------------------------------------------------------------
    # Accessor
    # ------------------------------------------------------------------
    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        if not self.bounds.contains(row, col):
            return None
        return self.cells[row][col]

    def cell(self, row: int, col: int) -> Cell:
        if not self.bounds.contains(row, col):
            raise GridBoundsError(f"Cell {(row, col)} outside {self.rows}x{self.cols} grid")
        return self.cells[row][col]

    # ------------------------------------------------------------------
    # Editing helpers used by callers between engine calls
    # ------------------------------------------------------------------
    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        self.cell(row, col)
        self.cells[row][col] = cell

    def set_content(self, row: int, col: int, content: str) -> None:
        cell = self.cell(row, col)
        if not cell.is_fillable():
            raise GridLayoutError(f"Cell {(row, col)} is not fillable")
        cell.content = content.upper()

    def to_layout(self) -> List[str]:
        return [" ".join(format_token(cell) for cell in row) for row in self.cells]

    def positions(self) -> Iterable[Tuple[int, int]]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield r, c


def layout_rows(layout: Sequence[str] | str) -> List[str]:
    """Split a multi-line layout string, or pass a row list through."""

    if isinstance(layout, str):
        return [line for line in layout.splitlines() if line.strip()]
    return list(layout)
