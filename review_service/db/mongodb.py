"""
MongoDB database connection and configuration
"""

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError
from typing import Optional

from review_service.core.config import config
from review_service.core.errors import StoreError
from review_service.core.logger import logger
from review_service.db.indexes import create_indexes

REVIEWS_COLLECTION = "reviews"
REACTIONS_COLLECTION = "reactions"


class Database:
    """Database connection manager"""

    client: Optional[AsyncIOMotorClient] = None
    database = None


db = Database()


async def connect_to_mongo():
    """Create database connection and make sure indexes exist"""
    logger.info("Connecting to MongoDB...")

    try:
        db.client = AsyncIOMotorClient(
            config.mongodb_url,
            serverSelectionTimeoutMS=config.mongodb_server_selection_timeout_ms,
            tz_aware=True,
        )
        db.database = db.client[config.mongodb_database]

        # Test connection
        await db.client.admin.command('ping')

        await create_indexes(db.database)

        logger.info(
            f"Successfully connected to MongoDB database '{config.mongodb_database}'",
            metadata={
                "event": "mongodb_connected",
                "database": config.mongodb_database,
            }
        )
    except PyMongoError as e:
        logger.error(
            "Could not connect to MongoDB",
            error=e,
            metadata={"event": "mongodb_connection_error"}
        )
        raise StoreError("Database unavailable")


async def close_mongo_connection():
    """Close database connection"""
    logger.info("Closing connection to MongoDB...")
    if db.client is not None:
        db.client.close()
        db.client = None
        db.database = None


async def get_database():
    """Get database instance"""
    if db.database is None:
        await connect_to_mongo()
    return db.database


async def get_review_collection():
    """Get reviews collection"""
    database = await get_database()
    return database[REVIEWS_COLLECTION]


async def get_reaction_collection():
    """Get reactions collection"""
    database = await get_database()
    return database[REACTIONS_COLLECTION]
