"""Errors raised by board store adapters."""

from __future__ import annotations


class StoreError(Exception):
    """A store operation failed; the adapter's own error is chained."""


class BoardAlreadyExists(StoreError):
    """A board with this name is already stored."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"game '{name}' already exists")
