"""Click-driven word selection."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from ..core.constants import Axis
from ..core.models import Position, Word
from ..utils.logger import get_logger
from .grid import GridAccessor
from .tracer import TraceConfig, WordTracer


LOGGER = get_logger(__name__)

SelectionListener = Callable[[Optional[Word]], None]


class SelectionNotifier:
    """Fans selection changes out to display collaborators, in subscription order."""

    def __init__(self) -> None:
        self._listeners: List[SelectionListener] = []

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self, word: Optional[Word]) -> None:
        for listener in list(self._listeners):
            listener(word)


class SelectionController:
    """Owns the current selection for one grid and decides what a click selects.

    The controller is either idle (no selection) or holds a single word.
    Clicking a filled cell selects the horizontal interpretation when it is a
    real word, else the vertical one. Clicking again inside the selected word
    toggles to the other axis when both exist, and a further click on the
    cell that toggled to the vertical word clears the selection.
    """

    def __init__(
        self,
        grid: GridAccessor,
        config: Optional[TraceConfig] = None,
        notifier: Optional[SelectionNotifier] = None,
    ) -> None:
        self.tracer = WordTracer(grid, config)
        self.notifier = notifier or SelectionNotifier()
        self._current: Optional[Word] = None
        self._toggled_at: Optional[Position] = None

    @property
    def current_selection(self) -> Optional[Word]:
        return self._current

    def on_selection_change(self, listener: SelectionListener) -> Callable[[], None]:
        return self.notifier.subscribe(listener)

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def handle_click(self, row: int, col: int) -> Optional[Word]:
        if not self.tracer.is_filled(row, col):
            LOGGER.debug("Click on (%s,%s) outside any word", row, col)
            return self._select(None)

        horizontal, vertical = self.candidates(row, col)
        valid_h = self._is_valid(horizontal)
        valid_v = self._is_valid(vertical)

        current = self._current
        if current is not None and current.contains(row, col):
            if valid_h and valid_v:
                return self._toggle(row, col, current, horizontal, vertical)
            LOGGER.debug("Second click on single-direction word %s", current.id)
            return self._select(None)

        if valid_h:
            return self._select(horizontal)
        if valid_v:
            return self._select(vertical)
        return self._select(horizontal or vertical)

    def refresh(self, word: Optional[Word] = None) -> Optional[Word]:
        """Re-trace ``word`` (default: the current selection) against the live grid."""

        target = word if word is not None else self._current
        if target is None:
            return self._select(None)
        fresh = self.tracer.retrace(target)
        if fresh is None:
            LOGGER.debug("Word %s no longer exists after refresh", target.id)
        return self._select(fresh)

    def clear_selection(self) -> None:
        self._select(None)

    def candidates(self, row: int, col: int) -> Tuple[Optional[Word], Optional[Word]]:
        """Horizontal and vertical interpretations of a click, bent words first."""

        return self._interpret(row, col, Axis.HORIZONTAL), self._interpret(row, col, Axis.VERTICAL)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _interpret(self, row: int, col: int, axis: Axis) -> Optional[Word]:
        return self.tracer.trace_bent(row, col, axis) or self.tracer.trace_potential(row, col, axis)

    def _is_valid(self, word: Optional[Word]) -> bool:
        return word is not None and word.length >= self.tracer.config.min_word_length

    def _toggle(
        self, row: int, col: int, current: Word, horizontal: Word, vertical: Word
    ) -> Optional[Word]:
        # The cycle only completes on the cell that toggled to the vertical word.
        if current.id == vertical.id and self._toggled_at == (row, col):
            return self._select(None)
        for candidate in (horizontal, vertical):
            if candidate.direction != current.direction and candidate.id != current.id:
                toggled_at = (row, col) if candidate.id == vertical.id else None
                return self._select(candidate, toggled_at)
        return self._select(None)

    def _select(
        self, word: Optional[Word], toggled_at: Optional[Position] = None
    ) -> Optional[Word]:
        previous = self._current
        self._current = word
        self._toggled_at = toggled_at
        LOGGER.debug(
            "Selection %s -> %s",
            previous.id if previous else None,
            word.id if word else None,
        )
        self.notifier.notify(word)
        return word
