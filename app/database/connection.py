import asyncpg
import asyncio
from ..config import DatabaseConfig
from ..logger import get_logger

logger = get_logger(__name__)

CREATE_GAMES_TABLE = '''
    CREATE TABLE IF NOT EXISTS games (
        id UUID PRIMARY KEY NOT NULL,
        name TEXT NOT NULL UNIQUE,
        creator TEXT NOT NULL,
        plays INTEGER NOT NULL,
        created_at TIMESTAMP WITH TIME ZONE DEFAULT NOW()
    )
'''


class DatabaseConnection:
    def __init__(self, config: DatabaseConfig):
        self.config = config
        self.pool = None
        self._initialized = False
        self._init_lock = asyncio.Lock()

    async def initialize(self):
        """Create the connection pool and make sure the games table exists"""
        if self._initialized:
            return

        async with self._init_lock:
            if self._initialized:  # Double check after acquiring lock
                return

            try:
                # Bounded pool; acquire() waits for a free connection when exhausted
                self.pool = await asyncpg.create_pool(
                    dsn=self.config.DATABASE_URL,
                    min_size=self.config.POOL_MIN_SIZE,
                    max_size=self.config.POOL_MAX_SIZE,
                )

                if self.config.CREATE_SCHEMA:
                    async with self.pool.acquire() as conn:
                        await conn.execute(CREATE_GAMES_TABLE)

                self._initialized = True
                logger.info("Connection to the database is successful")
            except Exception as e:
                logger.error(f"Failed to connect to the database: {e}")
                await self.close()
                raise

    async def close(self):
        """Close the connection pool"""
        if self.pool:
            await self.pool.close()
            self.pool = None
        self._initialized = False
