# --- Request Schemas ---
from pydantic import BaseModel, Field
from typing import Optional

# games.plays is a PostgreSQL INTEGER
MAX_PLAYS = 2_147_483_647


class CreateGameSchema(BaseModel):
    name: str
    creator: str
    plays: int = Field(..., ge=0, le=MAX_PLAYS)


class UpdateGameSchema(BaseModel):
    name: Optional[str] = None
    creator: Optional[str] = None
    plays: Optional[int] = Field(None, ge=0, le=MAX_PLAYS)
