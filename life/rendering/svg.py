"""
SVG board rendering.

Each live cell becomes one ``<rect>``; dead cells emit nothing. A caption
band of fixed height under the grid shows the generation and delta:

    <svg xmlns="http://www.w3.org/2000/svg" width="60" height="80">
      <rect x="20" y="0" width="20" height="20" fill="black" stroke="white" stroke-width="2" />
      ...
      <text x="50%" y="75" ...>t = 1, Δ = 4</text>
    </svg>

(Output is emitted on one line; indentation above is for reading only.)
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Optional

from ..board import Board
from ..errors import RenderError

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Height of the caption band below the grid
CAPTION_HEIGHT = 20
# Caption baseline distance from the bottom edge
CAPTION_OFFSET = 5

DEFAULT_CELL_SIZE = 20
DEFAULT_STROKE_WIDTH = 2
DEFAULT_STROKE_COLOR = "white"
DEFAULT_FILL_COLOR = "black"

# Characters outside the XML 1.0 Char production
_ILLEGAL_XML_CHARS = re.compile(
    "[^\t\n\r%s-%s%s-%s%s-%s]"
    % (chr(0x20), chr(0xD7FF), chr(0xE000), chr(0xFFFD), chr(0x10000), chr(0x10FFFF))
)


@dataclass(frozen=True)
class SVGOptions:
    """
    Styling for the SVG renderer.

    Attributes:
        cell_size: Side length of one cell in SVG units
        stroke_width: Outline width of live cells
        stroke_color: Outline color of live cells
        fill_color: Fill color of live cells and the caption
    """
    cell_size: int = DEFAULT_CELL_SIZE
    stroke_width: int = DEFAULT_STROKE_WIDTH
    stroke_color: str = DEFAULT_STROKE_COLOR
    fill_color: str = DEFAULT_FILL_COLOR

    def __post_init__(self):
        if self.cell_size < 0:
            raise ValueError(f"Cell size cannot be negative: {self.cell_size}")
        if self.stroke_width < 0:
            raise ValueError(f"Stroke width cannot be negative: {self.stroke_width}")

    @classmethod
    def from_optional(
        cls,
        cell_size: Optional[int] = None,
        stroke_width: Optional[int] = None,
        stroke_color: Optional[str] = None,
        fill_color: Optional[str] = None,
    ) -> SVGOptions:
        """Build options, defaulting every missing field independently."""
        return cls(
            cell_size=DEFAULT_CELL_SIZE if cell_size is None else cell_size,
            stroke_width=DEFAULT_STROKE_WIDTH if stroke_width is None else stroke_width,
            stroke_color=DEFAULT_STROKE_COLOR if stroke_color is None else stroke_color,
            fill_color=DEFAULT_FILL_COLOR if fill_color is None else fill_color,
        )


def render_svg(board: Board, options: Optional[SVGOptions] = None) -> str:
    """
    Render the board as a standalone SVG document.

    Args:
        board: Board to draw (not modified)
        options: Styling (defaults to 20px black cells with a white stroke)

    Returns:
        SVG markup

    Raises:
        RenderError: If the styling values cannot be written as well-formed XML
    """
    opts = options or SVGOptions()
    size = opts.cell_size
    width = board.cols * size
    height = board.rows * size + CAPTION_HEIGHT

    root = ET.Element(
        "svg",
        {"xmlns": SVG_NAMESPACE, "width": str(width), "height": str(height)},
    )

    for row, cells in enumerate(board.grid):
        for col, alive in enumerate(cells):
            if not alive:
                continue
            ET.SubElement(
                root,
                "rect",
                {
                    "x": str(col * size),
                    "y": str(row * size),
                    "width": str(size),
                    "height": str(size),
                    "fill": opts.fill_color,
                    "stroke": opts.stroke_color,
                    "stroke-width": str(opts.stroke_width),
                },
            )

    caption = ET.SubElement(
        root,
        "text",
        {
            "x": "50%",
            "y": str(height - CAPTION_OFFSET),
            "font-family": "monospace",
            "font-size": "12",
            "fill": opts.fill_color,
            "dominant-baseline": "center",
            "text-anchor": "middle",
        },
    )
    caption.text = f"t = {board.generation}, Δ = {board.delta}"

    try:
        svg = ET.tostring(root, encoding="unicode")
        svg.encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise RenderError(f"unable to write svg: {exc}") from exc

    illegal = _ILLEGAL_XML_CHARS.search(svg)
    if illegal:
        raise RenderError(f"invalid xml character: {illegal.group()!r}")

    return svg
