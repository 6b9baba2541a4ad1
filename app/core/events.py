import asyncio

from fastapi import FastAPI

from ..config import DatabaseConfig, ServerConfig
from ..database import DatabaseManager
from ..logger import get_logger, setup_logging

logger = get_logger(__name__)


async def startup_event(app: FastAPI):
    """Read the database config, open the pool and attach the manager to the app"""
    setup_logging(ServerConfig().LOG_LEVEL)
    try:
        db = DatabaseManager(DatabaseConfig())
        await db.initialize()
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise
    app.state.db = db
    logger.info("Database initialized")


async def shutdown_event(app: FastAPI):
    """Close database connections"""
    db = getattr(app.state, 'db', None)
    if db is None:
        return
    try:
        async with asyncio.timeout(5.0):
            await db.close()
            logger.info("Database connections closed")
    except asyncio.TimeoutError:
        logger.warning("Shutdown timed out, database pool was not closed cleanly")
    finally:
        app.state.db = None
