# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

# Local application imports
from ...core.config import get_settings

logger = logging.getLogger(__name__)

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    The client owns the connection pool; it connects lazily on first use and
    fails fast after ``MONGO_TIMEOUT_MS`` when the server is unreachable.

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        connectTimeoutMS=settings.mongo_timeout_ms,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    logger.info(f"MongoDB client created for database '{settings.mongo_database_name}'")
    return _mongo_database


def close_connection() -> None:
    """Close the MongoDB client and drop the cached handles"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB client closed")
    _mongo_client = None
    _mongo_database = None
