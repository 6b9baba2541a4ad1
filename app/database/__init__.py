from .base import DatabaseManager
from .exceptions import DatabaseError, GameAlreadyExistsError, GameNotFoundError, StoreError
from .game_manager import GameManager

__all__ = [
    'DatabaseManager',
    'DatabaseError',
    'GameAlreadyExistsError',
    'GameManager',
    'GameNotFoundError',
    'StoreError',
]
