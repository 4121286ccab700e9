"""CLI entrypoint that replays clicks over a grid layout."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from wordgrid.core.constants import MAX_BACKWARD_STEPS
from wordgrid.core.exceptions import GridLayoutError
from wordgrid.engine.grid import CellGrid
from wordgrid.engine.selection import SelectionController
from wordgrid.engine.tracer import TraceConfig
from wordgrid.utils.logger import configure_logging
from wordgrid.utils.pretty import format_grid, format_word, print_words


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Trace and select words in a grid puzzle layout",
    )
    parser.add_argument(
        "--row",
        action="append",
        required=True,
        metavar="TOKENS",
        help=(
            "One grid row as space-separated tokens: a letter, '.' for an empty cell, "
            "'#' blocked, '=text' label; suffix '-' or '|' turns the word "
            "horizontal or vertical"
        ),
    )
    parser.add_argument(
        "--click",
        nargs=2,
        type=int,
        action="append",
        default=[],
        metavar=("ROW", "COL"),
        help="Cell to click; repeat to replay a click sequence",
    )
    parser.add_argument(
        "--list-words",
        action="store_true",
        help="Print every straight word in the grid with summary counts",
    )
    parser.add_argument(
        "--max-backward-steps",
        type=int,
        default=MAX_BACKWARD_STEPS,
        help="Safety bound for the backward start search",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    try:
        grid = CellGrid.from_layout(args.row)
        config = TraceConfig(max_backward_steps=args.max_backward_steps)
    except (GridLayoutError, ValueError) as exc:
        parser.error(str(exc))

    controller = SelectionController(grid, config=config)

    if args.list_words:
        print_words(controller.tracer.enumerate_words(), controller.tracer.word_stats())
        print()

    for row, col in args.click:
        word = controller.handle_click(row, col)
        print(f"click ({row},{col}) -> {format_word(word)}")
        print(format_grid(grid, word))
        print()


if __name__ == "__main__":  # pragma: no cover
    main()
