from .connection import DatabaseConnection
from .game_manager import GameManager
from ..config import DatabaseConfig
from ..logger import get_logger

logger = get_logger(__name__)


class DatabaseManager:
    """Process-wide store context, built once at startup and handed to every request"""

    def __init__(self, config: DatabaseConfig):
        self.config = config
        self.db_connection = DatabaseConnection(config)
        self.game_manager = None
        self._initialized = False

    async def initialize(self):
        """Initialize all components"""
        if self._initialized:
            return

        try:
            await self.db_connection.initialize()
            self.game_manager = GameManager(self.db_connection)
            self._initialized = True
            logger.info("Database manager initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize database manager: {e}")
            await self.close()
            raise

    async def close(self):
        """Close all connections"""
        if self.db_connection:
            await self.db_connection.close()
        self.game_manager = None
        self._initialized = False

    @property
    def games(self) -> GameManager:
        if not self._initialized:
            raise RuntimeError("Database manager not initialized")
        return self.game_manager
