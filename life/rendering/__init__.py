"""
Renderers for Life boards.

Both renderers are pure functions of a board and a set of options; neither
mutates the board.
"""

from .formats import RenderFormat
from .svg import SVGOptions, render_svg
from .text import render_text

__all__ = ["RenderFormat", "SVGOptions", "render_svg", "render_text"]
