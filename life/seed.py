"""
Seed codec - textual encoding of a board's cells.

A seed is a sequence of row-strings joined by a single separator character.
Every character in a row is either the alive or the dead symbol:

    ##.
    .#.       (alive='#', dead='.', separator='\\n')
    ..#

Rows may have different lengths; shorter rows are right-padded with dead
cells when decoding. Symbols are compared per code point, so multi-byte
glyphs such as '█' work as expected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import InvalidSeedCharacter, InvalidSeparator, InvalidSymbol

Grid = List[List[bool]]

DEFAULT_ALIVE = "#"
DEFAULT_DEAD = "."
DEFAULT_SEPARATOR = "\n"


@dataclass(frozen=True)
class TextOptions:
    """
    Symbol set used to encode and decode seeds.

    Attributes:
        alive: Character for a live cell
        dead: Character for a dead cell
        separator: Character placed between rows
    """
    alive: str = DEFAULT_ALIVE
    dead: str = DEFAULT_DEAD
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self):
        for field_name in ("alive", "dead", "separator"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or len(value) != 1:
                raise InvalidSymbol(field_name, value)

    @classmethod
    def from_optional(
        cls,
        alive: Optional[str] = None,
        dead: Optional[str] = None,
        separator: Optional[str] = None,
    ) -> TextOptions:
        """Build options, defaulting every missing symbol independently."""
        return cls(
            alive=DEFAULT_ALIVE if alive is None else alive,
            dead=DEFAULT_DEAD if dead is None else dead,
            separator=DEFAULT_SEPARATOR if separator is None else separator,
        )


def decode(seed: str, options: Optional[TextOptions] = None) -> Grid:
    """
    Parse a seed into a rectangular boolean grid.

    Args:
        seed: Seed text
        options: Symbol set (defaults to '#', '.', newline)

    Returns:
        Row-major grid of booleans, padded with dead cells to the longest row.
        A seed that is empty after stripping whitespace yields a zero-row grid.

    Raises:
        InvalidSeparator: If the separator equals the alive or dead symbol,
            or the alive and dead symbols are the same (the symbol set
            cannot tell rows and cells apart)
        InvalidSeedCharacter: On the first character that is neither symbol
    """
    opts = options or TextOptions()
    if opts.alive == opts.dead or opts.separator in (opts.alive, opts.dead):
        raise InvalidSeparator(opts.separator)

    seed = seed.strip()
    # Zero rows rather than one empty row, so encode(decode("")) == ""
    if not seed:
        return []

    rows = seed.split(opts.separator)
    cols = max(len(row) for row in rows)

    grid: Grid = [[False] * cols for _ in rows]
    for row_idx, row in enumerate(rows):
        for col_idx, char in enumerate(row):
            if char == opts.alive:
                grid[row_idx][col_idx] = True
            elif char != opts.dead:
                raise InvalidSeedCharacter(char, opts.alive, opts.dead)

    return grid


def encode(grid: Sequence[Sequence[bool]], options: Optional[TextOptions] = None) -> str:
    """Serialize a grid to seed text (no trailing separator)."""
    opts = options or TextOptions()
    return opts.separator.join(
        "".join(opts.alive if cell else opts.dead for cell in row)
        for row in grid
    )
