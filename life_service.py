from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from infra.logger import get_logger
from life import Board, RenderFormat, SVGOptions, TextOptions, render_svg, render_text
from store import BoardStore

logger = get_logger(__name__)


class BoardNotFound(LookupError):
    """No board is stored under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"game '{name}' not found")


class InvalidBoardName(ValueError):
    """Board names must be non-empty and alphanumeric or '-'."""

    def __init__(self, name: str):
        self.name = name
        super().__init__("game name must be alphanumeric or '-'")


@dataclass(frozen=True)
class Rendered:
    """A rendered board ready to send."""

    content: str
    media_type: str


def split_extension(path_name: str) -> Tuple[str, RenderFormat]:
    """
    Split ``"glider.svg"`` into ``("glider", RenderFormat.SVG)``.

    Names without an extension, or with an unknown one, render as text.
    """
    name, dot, ext = path_name.rpartition(".")
    if not dot:
        return path_name, RenderFormat.TEXT
    return name, RenderFormat.from_extension(ext)


def validate_name(name: str) -> str:
    if not name or not all(char.isalnum() or char == "-" for char in name):
        raise InvalidBoardName(name)
    return name


class LifeService:
    """
    Request-scoped orchestration over a board store.

    Each call loads at most one board, optionally advances it, and writes it
    back. The store owns consistency between overlapping requests.
    """

    def __init__(self, store: BoardStore):
        self.store = store

    # ------------------------------------------------------------------#
    # Core API
    # ------------------------------------------------------------------#
    def create(
        self,
        name: str,
        seed: str,
        text_options: Optional[TextOptions] = None,
    ) -> Board:
        """
        Decode a seed and store it as a new board.

        Raises:
            InvalidBoardName: If the name has characters other than alphanumerics and '-'
            BoardError: If the seed cannot be decoded
            BoardAlreadyExists: If the name is taken
        """
        validate_name(name)
        board = Board.from_seed(seed, text_options)
        self.store.create(name, board)
        logger.info("Created board %s (%dx%d, population %d)", name, board.rows, board.cols, board.population)
        return board

    def view(self, name: str, advance: bool = False) -> Board:
        """
        Load a board, optionally advancing and saving it first.

        Raises:
            BoardNotFound: If no board is stored under ``name``
        """
        board = self.store.load(name)
        if board is None:
            raise BoardNotFound(name)

        if advance:
            board.next()
            self.store.save(name, board)
            logger.info(
                "Advanced board %s to generation %d (delta %d)",
                name, board.generation, board.delta,
            )
        return board

    @staticmethod
    def render(
        board: Board,
        fmt: RenderFormat,
        text_options: Optional[TextOptions] = None,
        svg_options: Optional[SVGOptions] = None,
    ) -> Rendered:
        """Render a board in the requested format."""
        if fmt is RenderFormat.SVG:
            content = render_svg(board, svg_options)
        else:
            content = render_text(board, text_options)
        return Rendered(content=content, media_type=fmt.media_type)
