"""
SQLite board store.

Boards are kept in a single ``games`` table. The grid column holds the
default text encoding of the board compressed with zstd, which shrinks
large sparse boards considerably. The row count is stored beside it so
that grids with rows but no columns load with their shape intact.
"""

from __future__ import annotations

import sqlite3
import threading
from pathlib import Path
from typing import List, Optional

import zstandard

from infra.logger import get_logger
from infra.settings import IN_MEMORY_DB
from life import Board, BoardError, TextOptions
from .base import BoardStore
from .errors import BoardAlreadyExists, StoreError

logger = get_logger(__name__)

TABLE_SCHEMA = """
CREATE TABLE IF NOT EXISTS games (
    name TEXT PRIMARY KEY,
    board BLOB NOT NULL,
    generation INTEGER NOT NULL,
    delta INTEGER NOT NULL,
    row_count INTEGER NOT NULL DEFAULT 0
)
"""

COMPRESSION_LEVEL = 3
# Upper bound for frames written without a content size
MAX_DECOMPRESSED_SIZE = 64 * 1024 * 1024

# The stored grid always uses the default symbols.
_STORAGE_TEXT = TextOptions()


class SqliteStore(BoardStore):
    """
    Board store backed by one SQLite database.

    A single connection is shared by all threads and guarded by a lock, so
    ``":memory:"`` databases behave like file databases.
    """

    def __init__(self, db_path: str | Path = IN_MEMORY_DB):
        self.db_path = str(db_path)
        if self.db_path != IN_MEMORY_DB:
            Path(self.db_path).expanduser().parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        try:
            self._conn = sqlite3.connect(self.db_path, check_same_thread=False)
        except sqlite3.Error as exc:
            raise StoreError(f"sql: {exc}") from exc

    def migrate(self) -> None:
        """Create the games table if it is missing."""
        self._execute(TABLE_SCHEMA)
        logger.info("SQLite store ready at %s", self.db_path)

    # ------------------------------------------------------------------
    # BoardStore API
    # ------------------------------------------------------------------
    def load(self, name: str) -> Optional[Board]:
        rows = self._execute(
            "SELECT board, generation, delta, row_count FROM games WHERE name = ?", (name,)
        )
        if not rows:
            return None

        blob, generation, delta, row_count = rows[0]
        seed = self.decompress(blob)
        try:
            grid = Board.from_seed(seed, _STORAGE_TEXT).grid
            # Rows without columns have no text form
            if not grid and row_count:
                grid = [[] for _ in range(row_count)]
            return Board(grid=grid, generation=generation, delta=delta)
        except BoardError as exc:
            raise StoreError(f"board: {exc}") from exc

    def create(self, name: str, board: Board) -> None:
        try:
            self._execute(
                "INSERT INTO games (name, board, generation, delta, row_count) VALUES (?, ?, ?, ?, ?)",
                (name, self.compress(board.to_seed(_STORAGE_TEXT)), board.generation, board.delta, board.rows),
            )
        except StoreError as exc:
            if isinstance(exc.__cause__, sqlite3.IntegrityError):
                raise BoardAlreadyExists(name) from exc.__cause__
            raise
        logger.debug("Created board %s (%dx%d)", name, board.rows, board.cols)

    def save(self, name: str, board: Board) -> None:
        self._execute(
            "INSERT INTO games (name, board, generation, delta, row_count) VALUES (?, ?, ?, ?, ?) "
            "ON CONFLICT(name) DO UPDATE SET "
            "board = excluded.board, generation = excluded.generation, "
            "delta = excluded.delta, row_count = excluded.row_count",
            (name, self.compress(board.to_seed(_STORAGE_TEXT)), board.generation, board.delta, board.rows),
        )
        logger.debug("Saved board %s at generation %d", name, board.generation)

    def exists(self, name: str) -> bool:
        return bool(self._execute("SELECT 1 FROM games WHERE name = ?", (name,)))

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _execute(self, sql: str, params: tuple = ()) -> List[tuple]:
        """Run one statement in its own transaction and return all rows."""
        try:
            with self._lock, self._conn:
                return self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise StoreError(f"sql: {exc}") from exc

    @staticmethod
    def compress(text: str) -> bytes:
        try:
            return zstandard.ZstdCompressor(level=COMPRESSION_LEVEL).compress(text.encode("utf-8"))
        except zstandard.ZstdError as exc:
            raise StoreError(f"zstd: unable to compress: {exc}") from exc

    @staticmethod
    def decompress(data: bytes) -> str:
        try:
            raw = zstandard.ZstdDecompressor().decompress(data, max_output_size=MAX_DECOMPRESSED_SIZE)
        except zstandard.ZstdError as exc:
            raise StoreError(f"zstd: unable to decompress: {exc}") from exc
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise StoreError(f"zstd: invalid utf8: {exc}") from exc
