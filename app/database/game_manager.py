from typing import List
from uuid import UUID

import asyncpg

from ..models.data import GameRec
from ..logger import get_logger
from .exceptions import GameAlreadyExistsError, GameNotFoundError, StoreError

logger = get_logger(__name__)


class GameManager:
    """Parameterized SQL over the games table, one pooled connection per call"""

    def __init__(self, db_connection):
        self.db = db_connection

    async def insert(self, game_id: UUID, name: str, creator: str, plays: int) -> GameRec:
        """Insert a new game and return the persisted row"""
        try:
            async with self.db.pool.acquire() as conn:
                row = await conn.fetchrow('''
                    INSERT INTO games (id, name, creator, plays)
                    VALUES ($1, $2, $3, $4)
                    RETURNING *
                ''', game_id, name, creator, plays)
        except asyncpg.UniqueViolationError as e:
            raise GameAlreadyExistsError(name) from e
        except Exception as e:
            raise self._store_error("insert game", e) from e
        return GameRec.from_record(row)

    async def list_all(self) -> List[GameRec]:
        """Get every game ordered by name"""
        try:
            async with self.db.pool.acquire() as conn:
                rows = await conn.fetch('SELECT * FROM games ORDER BY name')
        except Exception as e:
            raise self._store_error("list games", e) from e
        return [GameRec.from_record(row) for row in rows]

    async def get_by_id(self, game_id: UUID) -> GameRec:
        try:
            async with self.db.pool.acquire() as conn:
                row = await conn.fetchrow('SELECT * FROM games WHERE id = $1', game_id)
        except Exception as e:
            raise self._store_error("fetch game", e) from e

        if not row:
            raise GameNotFoundError(game_id)
        return GameRec.from_record(row)

    async def delete_by_id(self, game_id: UUID) -> GameRec:
        """Remove a game and return the deleted row"""
        try:
            async with self.db.pool.acquire() as conn:
                row = await conn.fetchrow('DELETE FROM games WHERE id = $1 RETURNING *', game_id)
        except Exception as e:
            raise self._store_error("delete game", e) from e

        if not row:
            raise GameNotFoundError(game_id)
        return GameRec.from_record(row)

    async def update_by_id(self, game_id: UUID, name: str, creator: str, plays: int) -> GameRec:
        """
        Overwrite all mutable columns of an existing game.

        Callers merge omitted fields with the current row before calling this;
        nothing here protects against a concurrent write to the same id.
        """
        row = None
        try:
            async with self.db.pool.acquire() as conn:
                exists = await conn.fetchval('SELECT 1 FROM games WHERE id = $1', game_id)
                if exists:
                    row = await conn.fetchrow('''
                        UPDATE games
                        SET name = $2, creator = $3, plays = $4
                        WHERE id = $1
                        RETURNING *
                    ''', game_id, name, creator, plays)
        except Exception as e:
            raise self._store_error("update game", e) from e

        if not row:
            raise GameNotFoundError(game_id)
        return GameRec.from_record(row)

    @staticmethod
    def _store_error(action: str, error: Exception) -> StoreError:
        logger.error(f"Database error while trying to {action}: {error}")
        return StoreError(f"Failed to {action}")
