"""
Catalog database configuration.
Stores movie records with their embedded ratings and comments.

Structure:
- movies: One document per movie; ratings and comments live inline
"""

DB_NAME = "catalog_db"


class Collections:
    """Collection names in catalog_db."""
    MOVIES = "movies"

    INDEXES = {
        "movies": [
            {"keys": [("name", 1)]},
            {"keys": [("genre", 1)]},
        ],
    }
