"""
Life Engine - Conway's Game of Life on a bounded grid.

This package holds the board model, the seed codec, the transition rule
and the text/SVG renderers. It performs no I/O.

Quick Start:
    from life import Board, TextOptions, render_svg, render_text

    board = Board.from_seed("##\\n##")
    board.next()
    board.terminal()          # True: a block is a still life
    print(render_text(board))
    svg = render_svg(board)
"""

__version__ = "1.0.0"

from .board import Board
from .errors import (
    BoardError,
    InvalidGrid,
    InvalidSeedCharacter,
    InvalidSeparator,
    InvalidSymbol,
    LifeError,
    RenderError,
)
from .rendering import RenderFormat, SVGOptions, render_svg, render_text
from .seed import TextOptions, decode, encode

__all__ = [
    # Model
    "Board",

    # Seed codec
    "TextOptions",
    "decode",
    "encode",

    # Rendering
    "RenderFormat",
    "SVGOptions",
    "render_svg",
    "render_text",

    # Errors
    "LifeError",
    "BoardError",
    "InvalidSeparator",
    "InvalidSeedCharacter",
    "InvalidSymbol",
    "InvalidGrid",
    "RenderError",
]
