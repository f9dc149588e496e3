"""
Exception hierarchy for the Life engine.

Seed and grid problems are ``BoardError`` (also ``ValueError``) so callers can
treat them as bad input. ``RenderError`` signals an internal fault in one of
the renderers.
"""

from __future__ import annotations


class LifeError(Exception):
    """Base class for all engine errors."""


class BoardError(LifeError, ValueError):
    """Invalid input while building a board."""


class InvalidSeparator(BoardError):
    """Separator collides with the alive or dead symbol."""

    def __init__(self, separator: str):
        self.separator = separator
        super().__init__(f"invalid seed separator: {separator!r}")


class InvalidSeedCharacter(BoardError):
    """A seed character is neither the alive nor the dead symbol."""

    def __init__(self, char: str, alive: str, dead: str):
        self.char = char
        self.alive = alive
        self.dead = dead
        super().__init__(
            f"invalid seed character: {char!r}, expected {alive!r} or {dead!r}"
        )


class InvalidSymbol(BoardError):
    """A text symbol is not exactly one character."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"{field} must be a single character, got {value!r}")


class InvalidGrid(BoardError):
    """Grid or counters violate the board invariants."""


class RenderError(LifeError):
    """A renderer could not produce well-formed output."""
