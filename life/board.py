"""
Board - grid state and the Game of Life transition.

The board owns a rectangular grid of booleans plus two counters:

- generation: transitions applied since the board was seeded
- delta: cells that changed on the most recent transition

Usage:
    from life import Board

    board = Board.from_seed(".#.\\n.#.\\n.#.")
    board.next()        # -> 4 (blinker flips)
    board.terminal()    # -> False
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .errors import InvalidGrid
from .seed import Grid, TextOptions, decode, encode

# (row, col) offsets of the eight surrounding cells
NEIGHBORS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),  # NW
    (-1, 0),   # N
    (-1, 1),   # NE
    (0, 1),    # E
    (1, 1),    # SE
    (1, 0),    # S
    (1, -1),   # SW
    (0, -1),   # W
)


@dataclass
class Board:
    """
    One Life simulation instance.

    The grid is never resized; ``next()`` is the only mutating operation.

    Attributes:
        grid: Row-major boolean cells, every row the same length
        generation: Number of transitions applied since seeding
        delta: Number of cells changed by the last transition
    """
    grid: Grid = field(default_factory=list)
    generation: int = 0
    delta: int = 0

    def __post_init__(self):
        """Validate board invariants."""
        widths = {len(row) for row in self.grid}
        if len(widths) > 1:
            raise InvalidGrid(f"Grid rows must have equal length, got {sorted(widths)}")
        if self.generation < 0:
            raise InvalidGrid(f"Generation cannot be negative: {self.generation}")
        if self.delta < 0:
            raise InvalidGrid(f"Delta cannot be negative: {self.delta}")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_seed(cls, seed: str, options: Optional[TextOptions] = None) -> Board:
        """
        Create a fresh board (generation 0, delta 0) from seed text.

        Raises:
            BoardError: If the seed or symbol set is invalid
        """
        return cls(grid=decode(seed, options))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Board:
        """
        Restore a board from ``to_dict()`` output.

        Raises:
            InvalidGrid: If a field is missing or a cell is not a bool
        """
        try:
            grid = [list(row) for row in data["grid"]]
            generation = int(data.get("generation", 0))
            delta = int(data.get("delta", 0))
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidGrid(f"Malformed board data: {exc}") from exc

        for row in grid:
            for cell in row:
                if not isinstance(cell, bool):
                    raise InvalidGrid(f"Grid cells must be booleans, got {cell!r}")
        return cls(grid=grid, generation=generation, delta=delta)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the persisted fields to a JSON-friendly dict."""
        return {
            "grid": [list(row) for row in self.grid],
            "generation": self.generation,
            "delta": self.delta,
        }

    def to_seed(self, options: Optional[TextOptions] = None) -> str:
        """Encode the current grid as seed text."""
        return encode(self.grid, options)

    def clone(self) -> Board:
        """Deep copy, safe to advance independently."""
        return copy.deepcopy(self)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def population(self) -> int:
        """Number of live cells."""
        return sum(sum(row) for row in self.grid)

    # ------------------------------------------------------------------
    # Transition
    # ------------------------------------------------------------------
    def next(self) -> int:
        """
        Advance one generation in place.

        All neighbor lookups read the pre-transition grid. Cells outside
        the grid count as dead (no wraparound).

        Returns:
            Number of cells whose state changed (also stored in ``delta``)
        """
        next_grid: Grid = []
        delta = 0

        for row in range(self.rows):
            next_row: List[bool] = []
            for col in range(self.cols):
                alive = self.grid[row][col]
                state = self._next_state(alive, self._count_neighbors(row, col))
                if state != alive:
                    delta += 1
                next_row.append(state)
            next_grid.append(next_row)

        self.grid = next_grid
        self.delta = delta
        self.generation += 1
        return delta

    def terminal(self) -> bool:
        """
        Whether the last transition changed nothing.

        A board that has never been advanced is not terminal, even when
        every cell is dead.
        """
        return self.generation > 0 and self.delta == 0

    def _count_neighbors(self, row: int, col: int) -> int:
        rows, cols = self.rows, self.cols
        count = 0
        for dr, dc in NEIGHBORS:
            r, c = row + dr, col + dc
            if 0 <= r < rows and 0 <= c < cols and self.grid[r][c]:
                count += 1
        return count

    @staticmethod
    def _next_state(alive: bool, neighbors: int) -> bool:
        # Reproduction
        if not alive and neighbors == 3:
            return True
        # Underpopulation
        if alive and neighbors <= 1:
            return False
        # Survival
        if alive and neighbors in (2, 3):
            return True
        # Overpopulation, or a dead cell stays dead
        return False

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return self.to_seed()

    def __repr__(self) -> str:
        return f"[n: {self.generation}, Δ: {self.delta}]\n{self.to_seed()}"
