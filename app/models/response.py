from datetime import datetime
from pydantic import BaseModel
from typing import List, Literal, Optional
from uuid import UUID

from .data import GameRec


class Game(BaseModel):
    id: UUID
    name: str
    creator: str
    plays: int
    created_at: Optional[datetime] = None

    @classmethod
    def from_rec(cls, rec: GameRec) -> 'Game':
        return cls(**rec.to_dict())


class GameData(BaseModel):
    game: Game


class DeletedGameData(BaseModel):
    deleted_game: Game


class PlayerData(BaseModel):
    player: Game


class GameResponse(BaseModel):
    status: Literal["success"] = "success"
    data: GameData


class GameListResponse(BaseModel):
    status: Literal["ok"] = "ok"
    count: int
    notes: List[Game]


class DeleteGameResponse(BaseModel):
    status: Literal["success"] = "success"
    message: str
    data: DeletedGameData


class UpdateGameResponse(BaseModel):
    status: Literal["success"] = "success"
    message: str
    data: PlayerData


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    message: str = "Hello, World!"


class ErrorResponse(BaseModel):
    status: Literal["fail", "error"]
    message: str
