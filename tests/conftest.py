"""
Shared fixtures for the games API tests.

The HTTP layer is exercised against FakeGameManager, an in-memory stand-in
with the same async interface and exceptions as app.database.GameManager.
"""

import asyncio
from datetime import datetime, timezone
from typing import Dict, List
from uuid import UUID

import pytest
from starlette.testclient import TestClient

from app.core.dependencies import get_game_manager
from app.database import GameAlreadyExistsError, GameNotFoundError, StoreError
from app.main import create_app
from app.models.data import GameRec


def _copy(rec: GameRec) -> GameRec:
    return GameRec(**rec.to_dict())


class FakeGameManager:
    """Dict-backed GameManager. Every call yields to the loop once, like a real round trip."""

    def __init__(self):
        self.rows: Dict[UUID, GameRec] = {}
        self.update_calls = 0
        self.broken = False

    async def _round_trip(self):
        await asyncio.sleep(0)
        if self.broken:
            raise StoreError("connection refused by 10.0.0.5:5432")

    async def insert(self, game_id: UUID, name: str, creator: str, plays: int) -> GameRec:
        await self._round_trip()
        if any(rec.name == name for rec in self.rows.values()):
            raise GameAlreadyExistsError(name)
        rec = GameRec(game_id, name, creator, plays, datetime.now(timezone.utc))
        self.rows[game_id] = rec
        return _copy(rec)

    async def list_all(self) -> List[GameRec]:
        await self._round_trip()
        return [_copy(rec) for rec in sorted(self.rows.values(), key=lambda r: r.name)]

    async def get_by_id(self, game_id: UUID) -> GameRec:
        await self._round_trip()
        if game_id not in self.rows:
            raise GameNotFoundError(game_id)
        return _copy(self.rows[game_id])

    async def delete_by_id(self, game_id: UUID) -> GameRec:
        await self._round_trip()
        if game_id not in self.rows:
            raise GameNotFoundError(game_id)
        return self.rows.pop(game_id)

    async def update_by_id(self, game_id: UUID, name: str, creator: str, plays: int) -> GameRec:
        await self._round_trip()
        if game_id not in self.rows:
            raise GameNotFoundError(game_id)
        if any(rec.name == name and rec_id != game_id for rec_id, rec in self.rows.items()):
            raise StoreError("duplicate key value violates unique constraint")
        self.update_calls += 1
        rec = self.rows[game_id]
        self.rows[game_id] = GameRec(game_id, name, creator, plays, rec.created_at)
        return _copy(self.rows[game_id])


@pytest.fixture
def fake_games() -> FakeGameManager:
    return FakeGameManager()


@pytest.fixture
def client(fake_games: FakeGameManager) -> TestClient:
    """Client for an app whose store is the in-memory fake. Lifespan is not run."""
    app = create_app()
    app.dependency_overrides[get_game_manager] = lambda: fake_games
    return TestClient(app)
