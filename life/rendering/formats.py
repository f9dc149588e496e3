"""Output format selection for board responses."""

from __future__ import annotations

from enum import Enum


class RenderFormat(Enum):
    """Supported board renderings and their media types."""
    TEXT = "txt"
    SVG = "svg"

    @property
    def media_type(self) -> str:
        if self is RenderFormat.SVG:
            return "image/svg+xml"
        return "text/plain; charset=utf-8"

    @classmethod
    def from_extension(cls, ext: str | None) -> RenderFormat:
        """Map a file extension to a format; anything but ``svg`` is text."""
        if ext and ext.lower() == cls.SVG.value:
            return cls.SVG
        return cls.TEXT
