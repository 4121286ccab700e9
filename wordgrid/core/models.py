"""Data models supporting the word selection engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .constants import Axis, CellKind, Redirect, TraceKind

Position = Tuple[int, int]


@dataclass
class Cell:
    """Represents a grid cell as seen by the engine.

    A cell carries no coordinates of its own: its position is the `(row, col)`
    passed to `GridAccessor.get_cell`, and words record positions alongside.
    """

    kind: CellKind = CellKind.FILLABLE
    content: str = ""
    redirect: Redirect = Redirect.NONE

    def is_fillable(self) -> bool:
        return self.kind == CellKind.FILLABLE

    def has_content(self) -> bool:
        return self.is_fillable() and bool(self.content.strip())

    def is_empty(self) -> bool:
        return self.is_fillable() and not self.content.strip()

    def turns(self, axis: Axis) -> Optional[Axis]:
        """Return the new axis when this cell is passed through along ``axis``."""

        target = self.redirect.target
        if target is not None and target != axis:
            return target
        return None


@dataclass(frozen=True)
class BendPoint:
    """A redirect taken while tracing a word."""

    index: int
    from_axis: Axis
    to_axis: Axis
    position: Position


@dataclass(frozen=True)
class Word:
    """An immutable snapshot of a traced word."""

    id: str
    cells: Tuple[Position, ...]
    direction: Axis
    letters: Tuple[str, ...]
    trace: TraceKind
    bend_points: Tuple[BendPoint, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        return "".join(self.letters)

    @property
    def length(self) -> int:
        return len(self.cells)

    @property
    def start(self) -> Position:
        return self.cells[0]

    @property
    def end(self) -> Position:
        return self.cells[-1]

    @property
    def is_bent(self) -> bool:
        return bool(self.bend_points)

    @property
    def is_complete(self) -> bool:
        return all(letter.strip() for letter in self.letters)

    def contains(self, row: int, col: int) -> bool:
        return (row, col) in self.cells


@dataclass(frozen=True)
class WordStats:
    """Counts over the straight words of a grid."""

    total: int
    horizontal: int
    vertical: int
    complete: int
    incomplete: int


def make_word_id(start: Position, direction: Axis, bend_points: Sequence[BendPoint] = ()) -> str:
    """Build the deterministic key used to re-locate a word after edits."""

    word_id = f"{start[0]}-{start[1]}-{direction.value}"
    for bend in bend_points:
        word_id += f"+{bend.index}{bend.to_axis.short}"
    return word_id
