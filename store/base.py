"""
Board store interface.

A store maps board names to the three persisted board fields (grid,
generation, delta) and must round-trip them exactly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from life import Board


class BoardStore(ABC):
    """
    Abstract persistence adapter for named boards.

    Subclasses must implement:
    - load(): fetch a board by name
    - create(): insert a new board, refusing existing names
    - save(): write the current state of a board

    All failures surface as ``StoreError``.
    """

    @abstractmethod
    def load(self, name: str) -> Optional[Board]:
        """
        Fetch a board.

        Returns:
            The stored board, or None if the name is unknown
        """

    @abstractmethod
    def create(self, name: str, board: Board) -> None:
        """
        Store a new board.

        Raises:
            BoardAlreadyExists: If the name is taken
        """

    @abstractmethod
    def save(self, name: str, board: Board) -> None:
        """Write grid, generation and delta for ``name`` (insert or replace)."""

    def exists(self, name: str) -> bool:
        """Check whether a board is stored under ``name``."""
        return self.load(name) is not None

    def close(self) -> None:
        """Release connections. Default: no-op."""
        return
