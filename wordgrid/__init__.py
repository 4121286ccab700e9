"""Word detection and selection engine for grid puzzle editors.

This package exposes the public API surface via:

- ``wordgrid.engine.tracer.WordTracer``: straight, potential and bent word traces.
- ``wordgrid.engine.selection.SelectionController``: click handling and toggling.
- ``wordgrid.engine.grid.CellGrid``: in-memory grid accessor with a text layout parser.
"""

from .core.constants import Axis, CellKind, Redirect, TraceKind
from .core.models import BendPoint, Cell, Word, WordStats
from .engine.grid import CellGrid, GridAccessor
from .engine.selection import SelectionController, SelectionNotifier
from .engine.tracer import TraceConfig, WordTracer

__all__ = [
    "Axis",
    "BendPoint",
    "Cell",
    "CellGrid",
    "CellKind",
    "GridAccessor",
    "Redirect",
    "SelectionController",
    "SelectionNotifier",
    "TraceConfig",
    "TraceKind",
    "Word",
    "WordStats",
    "WordTracer",
]

__version__ = "0.1.0"
