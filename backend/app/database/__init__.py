"""
Database module - MongoDB and Elasticsearch connections and database definitions.
"""
from app.database.connections import (
    get_mongo_client,
    get_search_client,
    close_connections,
    get_database,
)
from app.database.databases import auth_db, catalog_db

__all__ = [
    "get_mongo_client",
    "get_search_client",
    "close_connections",
    "get_database",
    "auth_db",
    "catalog_db",
]
