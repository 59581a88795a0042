"""
Index management.
Ensures store-side constraints exist before the API serves requests.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.database.databases import auth_db, catalog_db

logger = logging.getLogger(__name__)


async def create_collection_indexes(db: AsyncIOMotorDatabase, indexes: dict) -> None:
    """Create the indexes described by a ``Collections.INDEXES`` mapping."""
    for collection_name, index_defs in indexes.items():
        collection = db[collection_name]
        for index_def in index_defs:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            await collection.create_index(keys, **kwargs)


async def create_indexes(client: AsyncIOMotorClient) -> None:
    """Create necessary indexes for all databases."""
    await create_collection_indexes(
        client[auth_db.DB_NAME], auth_db.Collections.INDEXES
    )
    await create_collection_indexes(
        client[catalog_db.DB_NAME], catalog_db.Collections.INDEXES
    )
    logger.info(f"Indexes ensured on {auth_db.DB_NAME} and {catalog_db.DB_NAME}")
