"""
Database index management for MongoDB.

Indexes are created at application startup.
"""

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

from review_service.core.logger import logger


async def create_indexes(database: AsyncIOMotorDatabase) -> None:
    """
    Create the indexes backing thread queries and reaction counters.

    Args:
        database: MongoDB database instance
    """
    # Thread lookup, returned in creation order
    await database["reviews"].create_index(
        [
            ("source", ASCENDING),
            ("external_id", ASCENDING),
            ("created_at", ASCENDING),
        ],
        name="idx_thread_created"
    )
    logger.info("Created compound index on 'source', 'external_id', 'created_at'")

    # One counter document per media item
    await database["reactions"].create_index(
        [("source", ASCENDING), ("external_id", ASCENDING)],
        unique=True,
        name="idx_reaction_media_unique"
    )
    logger.info("Created unique index on 'source', 'external_id' for reactions")
