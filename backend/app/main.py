"""
MovieTickets Backend - FastAPI Application

A movie catalog with user accounts, ratings, comments and full-text search.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.database.connections import get_mongo_client, close_connections
from app.database.indexes import create_indexes
from app.routers import auth, health, movies

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("movietickets")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Initialize database connection
    - Create indexes (unique usernames and emails)
    - Ensure the search index exists

    Shutdown:
    - Close all connections
    """
    logger.info("Starting up MovieTickets Backend...")

    try:
        client = await get_mongo_client()
        await create_indexes(client)
        logger.info("Database indexes created")
    except Exception as e:
        logger.warning(f"Database initialization warning: {e}")

    try:
        search = await movies.get_search_service()
        if search is None:
            logger.info("Search disabled, no Elasticsearch URL configured")
        else:
            await search.ensure_index()
            logger.info(f"Search index '{search.index}' ready")
    except Exception as e:
        logger.warning(f"Search initialization warning: {e}")

    yield

    logger.info("Shutting down MovieTickets Backend...")
    await close_connections()
    logger.info("Connections closed")


# Create FastAPI application
app = FastAPI(
    title="MovieTickets API",
    description="""
## Movie Catalog API

### Features
- **Authentication**: Registration, login and JWT bearer tokens
- **Movies**: Create, list, update and delete movies
- **Ratings & Comments**: One rating per user per movie, unlimited comments
- **Search**: Fuzzy full-text search with a genre boost, backed by Elasticsearch

### Authentication
Protected endpoints require a JWT token in the Authorization header:
```
Authorization: Bearer your_jwt_token
```

Obtain a token via `POST /auth/login`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(movies.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "MovieTickets API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
