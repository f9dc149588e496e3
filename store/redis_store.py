"""
Redis board store.

Each board is one JSON document under ``{prefix}{name}``:

    {"grid": [[false, true], [true, true]], "generation": 3, "delta": 1}

Writes are last-write-wins; creation uses ``SET NX`` so two concurrent
creators cannot both succeed.
"""

from __future__ import annotations

import json
from typing import Optional

import redis

from infra.logger import get_logger
from life import Board, BoardError
from .base import BoardStore
from .errors import BoardAlreadyExists, StoreError

logger = get_logger(__name__)

DEFAULT_PREFIX = "life:board:"


class RedisStore(BoardStore):
    """Board store backed by a Redis key-value namespace."""

    def __init__(self, client: "redis.Redis", prefix: str = DEFAULT_PREFIX):
        self._client = client
        self._prefix = prefix

    @classmethod
    def from_url(cls, url: str, prefix: str = DEFAULT_PREFIX) -> RedisStore:
        """Connect to the Redis server at ``url``."""
        logger.info("Redis store at %s", url)
        return cls(redis.Redis.from_url(url), prefix=prefix)

    def key(self, name: str) -> str:
        return f"{self._prefix}{name}"

    # ------------------------------------------------------------------
    # BoardStore API
    # ------------------------------------------------------------------
    def load(self, name: str) -> Optional[Board]:
        try:
            data = self._client.get(self.key(name))
        except redis.RedisError as exc:
            raise StoreError(f"redis: {exc}") from exc
        if data is None:
            return None

        try:
            return Board.from_dict(json.loads(data))
        except (ValueError, BoardError) as exc:
            raise StoreError(f"board: corrupt payload for '{name}': {exc}") from exc

    def create(self, name: str, board: Board) -> None:
        try:
            created = self._client.set(self.key(name), self._dump(board), nx=True)
        except redis.RedisError as exc:
            raise StoreError(f"redis: {exc}") from exc
        if not created:
            raise BoardAlreadyExists(name)
        logger.debug("Created board %s (%dx%d)", name, board.rows, board.cols)

    def save(self, name: str, board: Board) -> None:
        try:
            self._client.set(self.key(name), self._dump(board))
        except redis.RedisError as exc:
            raise StoreError(f"redis: {exc}") from exc
        logger.debug("Saved board %s at generation %d", name, board.generation)

    def exists(self, name: str) -> bool:
        try:
            return bool(self._client.exists(self.key(name)))
        except redis.RedisError as exc:
            raise StoreError(f"redis: {exc}") from exc

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _dump(board: Board) -> str:
        return json.dumps(board.to_dict(), separators=(",", ":"))
