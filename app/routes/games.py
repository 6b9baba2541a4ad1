from uuid import UUID, uuid4

from fastapi import APIRouter, Depends, HTTPException

from ..core.dependencies import get_game_manager
from ..database import GameAlreadyExistsError, GameManager, GameNotFoundError
from ..models.game import CreateGameSchema, UpdateGameSchema
from ..models.response import (
    DeletedGameData,
    DeleteGameResponse,
    ErrorResponse,
    Game,
    GameData,
    GameListResponse,
    GameResponse,
    PlayerData,
    UpdateGameResponse,
)
from ..logger import get_logger

logger = get_logger(__name__)
router = APIRouter(tags=["games"])

INTERNAL_ERROR = "Internal server error"

STORE_FAILURE = {500: {"model": ErrorResponse}}
NOT_FOUND = {404: {"model": ErrorResponse}, **STORE_FAILURE}
CONFLICT = {409: {"model": ErrorResponse}, **STORE_FAILURE}


@router.post("/api/games", response_model=GameResponse, responses=CONFLICT)
async def create_game(body: CreateGameSchema, games: GameManager = Depends(get_game_manager)):
    """
    Create a new game.

    - **name**: Unique name of the game
    - **creator**: Who made the game
    - **plays**: Initial play counter
    """
    try:
        rec = await games.insert(uuid4(), body.name, body.creator, body.plays)
        logger.info(f"Created game {rec.id} ({rec.name!r})")
        return GameResponse(data=GameData(game=Game.from_rec(rec)))
    except GameAlreadyExistsError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.error(f"Error creating game: {e}")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.get("/api/games", response_model=GameListResponse, responses=STORE_FAILURE)
async def list_games(games: GameManager = Depends(get_game_manager)):
    """List every game ordered by name"""
    try:
        recs = await games.list_all()
        return GameListResponse(count=len(recs), notes=[Game.from_rec(rec) for rec in recs])
    except Exception as e:
        logger.error(f"Error listing games: {e}")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.get("/api/games/{game_id}", response_model=GameResponse, responses=NOT_FOUND)
async def get_game(game_id: UUID, games: GameManager = Depends(get_game_manager)):
    try:
        rec = await games.get_by_id(game_id)
        return GameResponse(data=GameData(game=Game.from_rec(rec)))
    except GameNotFoundError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error getting game {game_id}: {e}")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.delete("/api/games/{game_id}", response_model=DeleteGameResponse, responses=NOT_FOUND)
async def delete_game(game_id: UUID, games: GameManager = Depends(get_game_manager)):
    """Delete a game and return the removed record"""
    try:
        rec = await games.delete_by_id(game_id)
        logger.info(f"Deleted game {game_id}")
        return DeleteGameResponse(
            message="Game deleted successfully",
            data=DeletedGameData(deleted_game=Game.from_rec(rec))
        )
    except GameNotFoundError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error deleting game {game_id}: {e}")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)


@router.patch("/api/games/{game_id}", response_model=UpdateGameResponse, responses=NOT_FOUND)
@router.put("/api/games/{game_id}", response_model=UpdateGameResponse, responses=NOT_FOUND)
async def update_game(
    game_id: UUID,
    body: UpdateGameSchema,
    games: GameManager = Depends(get_game_manager)
):
    """
    Update the fields present in the body and keep the rest.

    The current row is read first and all three columns are written back,
    so two concurrent updates of the same game race and the last one wins.
    """
    try:
        current = await games.get_by_id(game_id)
        rec = await games.update_by_id(
            game_id,
            body.name if body.name is not None else current.name,
            body.creator if body.creator is not None else current.creator,
            body.plays if body.plays is not None else current.plays,
        )
        logger.info(f"Updated game {game_id}")
        return UpdateGameResponse(
            message="Game updated successfully",
            data=PlayerData(player=Game.from_rec(rec))
        )
    except GameNotFoundError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error updating game {game_id}: {e}")
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR)
