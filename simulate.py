"""
Run a seed locally, printing each generation until the board settles.

    python simulate.py glider.txt --generations 20
    python simulate.py blinker.txt --alive o --dead ' ' --svg final.svg
    printf "##\\n##" | python simulate.py -
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional

from infra.logger import configure_logging, get_logger
from life import Board, BoardError, RenderError, TextOptions, render_svg, render_text

logger = get_logger(__name__)


def simulate(
    board: Board,
    max_generations: int,
    on_generation: Optional[Callable[[Board], None]] = None,
) -> Board:
    """
    Advance ``board`` in place until it is terminal or ``max_generations``
    transitions have been applied.

    Args:
        board: Board to advance
        max_generations: Upper bound on transitions (must be >= 0)
        on_generation: Called with the board after every transition

    Returns:
        The same board, for chaining
    """
    if max_generations < 0:
        raise ValueError(f"max_generations cannot be negative: {max_generations}")

    for _ in range(max_generations):
        board.next()
        if on_generation is not None:
            on_generation(board)
        if board.terminal():
            logger.info("Board settled at generation %d", board.generation)
            break
    return board


def _read_seed(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate a Game of Life seed locally.")
    parser.add_argument("seed", help="Seed file, or '-' for stdin")
    parser.add_argument("--generations", type=int, default=100, help="Maximum generations (default: 100)")
    parser.add_argument("--alive", default=None, help="Alive symbol (default: '#')")
    parser.add_argument("--dead", default=None, help="Dead symbol (default: '.')")
    parser.add_argument("--separator", default=None, help="Row separator (default: newline)")
    parser.add_argument("--svg", default=None, help="Write the final board as SVG to this path")
    parser.add_argument("--quiet", action="store_true", help="Only print the final board")
    args = parser.parse_args(argv)

    configure_logging(level="INFO")

    try:
        options = TextOptions.from_optional(args.alive, args.dead, args.separator)
        board = Board.from_seed(_read_seed(args.seed), options)
    except BoardError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    def show(b: Board) -> None:
        print(f"[n: {b.generation}, Δ: {b.delta}]")
        print(render_text(b, options))
        print()

    if not args.quiet:
        show(board)
    simulate(board, args.generations, on_generation=None if args.quiet else show)
    if args.quiet:
        show(board)

    if args.svg:
        try:
            Path(args.svg).write_text(render_svg(board), encoding="utf-8")
        except RenderError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        logger.info("Wrote %s", args.svg)

    return 0


if __name__ == "__main__":
    sys.exit(main())
