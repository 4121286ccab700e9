"""Shared constants and enumerations for the word selection engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


MAX_BACKWARD_STEPS = 50


class CellKind(str, Enum):
    """All supported cell kinds in the grid."""

    FILLABLE = "fillable"
    LABEL = "label"
    BLOCKED = "blocked"


class Axis(str, Enum):
    """Traversal axes supported by the tracers."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Axis.HORIZONTAL else (1, 0)

    @property
    def other(self) -> "Axis":
        return Axis.VERTICAL if self is Axis.HORIZONTAL else Axis.HORIZONTAL

    @property
    def short(self) -> str:
        return self.value[0]


class Redirect(str, Enum):
    """Direction-change markers carried by fillable cells."""

    NONE = "none"
    TURN_TO_HORIZONTAL = "turn-to-horizontal"
    TURN_TO_VERTICAL = "turn-to-vertical"

    @property
    def target(self) -> Optional[Axis]:
        if self is Redirect.TURN_TO_HORIZONTAL:
            return Axis.HORIZONTAL
        if self is Redirect.TURN_TO_VERTICAL:
            return Axis.VERTICAL
        return None


class TraceKind(str, Enum):
    """Which tracer produced a word."""

    STRAIGHT = "straight"
    POTENTIAL = "potential"
    BENT = "bent"


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
