from fastapi import HTTPException, Request

from ..database import GameManager
from ..logger import get_logger

logger = get_logger(__name__)


def get_game_manager(request: Request) -> GameManager:
    """Resolve the GameManager from the DatabaseManager attached at startup"""
    db = getattr(request.app.state, 'db', None)
    if db is None:
        logger.error("Request received before the database manager was initialized")
        raise HTTPException(status_code=500, detail="Internal server error")
    return db.games
