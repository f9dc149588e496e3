"""Plain-text board rendering, in the same format the seed codec accepts."""

from __future__ import annotations

from typing import Optional

from ..board import Board
from ..seed import TextOptions, encode


def render_text(board: Board, options: Optional[TextOptions] = None) -> str:
    """
    Render the board's current grid as seed text.

    Decoding the result with the same options reproduces the grid;
    generation and delta are not part of the text.
    """
    return encode(board.grid, options or TextOptions())
