"""
Connection management for MongoDB and Elasticsearch.
"""
from typing import Optional

from elasticsearch import AsyncElasticsearch
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.config import get_settings

# Global connection instances
_mongo_client: Optional[AsyncIOMotorClient] = None
_search_client: Optional[AsyncElasticsearch] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(settings.mongo_uri)
    return _mongo_client


async def get_search_client() -> Optional[AsyncElasticsearch]:
    """
    Get or create the Elasticsearch client.

    Returns None when no Elasticsearch URL is configured, which turns
    search mirroring off.
    """
    global _search_client
    if _search_client is None:
        settings = get_settings()
        if not settings.elasticsearch_url:
            return None
        _search_client = AsyncElasticsearch(settings.elasticsearch_url)
    return _search_client


async def close_connections():
    """Close all connections."""
    global _mongo_client, _search_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None

    if _search_client is not None:
        await _search_client.close()
        _search_client = None


async def get_database(db_name: str) -> AsyncIOMotorDatabase:
    """Get a specific MongoDB database by name."""
    client = await get_mongo_client()
    return client[db_name]
