"""
Movie service for the catalog: CRUD, ratings, comments and search.
"""
import logging
from typing import Any, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from app.core.exceptions import BadRequestError, NotFoundError
from app.database.databases import catalog_db
from app.models.movie import Comment, Movie, Rating
from app.schemas.auth import TokenUser
from app.schemas.movie import (
    CommentCreate,
    MovieCreate,
    MovieResponse,
    RatingCreate,
)

logger = logging.getLogger(__name__)


def parse_object_id(value: str) -> ObjectId:
    """Convert a string id to an ObjectId or fail with BadRequestError."""
    if not ObjectId.is_valid(value):
        raise BadRequestError(f"Invalid movie id: {value}")
    return ObjectId(value)


class MovieService:
    """Service for movie catalog operations."""

    def __init__(self, db: AsyncIOMotorDatabase, search=None):
        """
        Initialize with catalog database and an optional search index.

        Args:
            db: catalog_db database
            search: SearchService (or compatible) mirror; None disables search
        """
        self.db = db
        self.movies = db[catalog_db.Collections.MOVIES]
        self.search = search

    # ==================== Movie CRUD ====================

    async def create_movie(self, request: MovieCreate) -> MovieResponse:
        """Create a movie with empty ratings and comments."""
        movie_doc = Movie(**request.model_dump()).model_dump(exclude={"id"})

        result = await self.movies.insert_one(movie_doc)
        movie_doc["_id"] = result.inserted_id

        await self._mirror("index", movie_doc)
        return self._movie_to_response(movie_doc)

    async def get_all_movies(self) -> list[MovieResponse]:
        """List every movie, in store order."""
        cursor = self.movies.find({})
        movies = await cursor.to_list(length=None)
        return [self._movie_to_response(m) for m in movies]

    async def get_movie_by_id(self, movie_id: str) -> MovieResponse:
        """
        Get a movie by ID.

        Raises:
            BadRequestError: If the ID is not a valid ObjectId
            NotFoundError: If no movie has this ID
        """
        oid = parse_object_id(movie_id)

        movie_doc = await self.movies.find_one({"_id": oid})
        if not movie_doc:
            raise NotFoundError("Movie not found")

        return self._movie_to_response(movie_doc)

    async def update_movie(
        self, movie_id: str, request: MovieCreate
    ) -> Optional[MovieResponse]:
        """Replace every descriptive field of a movie; ratings and comments are kept."""
        oid = parse_object_id(movie_id)

        result = await self.movies.find_one_and_update(
            {"_id": oid},
            {"$set": request.model_dump()},
            return_document=ReturnDocument.AFTER,
        )

        if not result:
            return None

        await self._mirror("update", result)
        return self._movie_to_response(result)

    async def delete_movie(self, movie_id: str) -> Optional[MovieResponse]:
        """Delete a movie along with its embedded ratings and comments."""
        oid = parse_object_id(movie_id)

        result = await self.movies.find_one_and_delete({"_id": oid})

        if not result:
            return None

        await self._mirror("delete", result)
        return self._movie_to_response(result)

    # ==================== Ratings & Comments ====================

    async def rate_movie(self, request: RatingCreate, user: TokenUser) -> MovieResponse:
        """
        Add the user's rating to a movie.

        A user rates a movie at most once; a second attempt is rejected,
        never merged.

        Raises:
            BadRequestError: Invalid ID, unknown movie, or already rated
        """
        oid = parse_object_id(request.movie_id)
        movie_doc = await self._get_movie_doc(oid)

        for existing in movie_doc.get("ratings", []):
            if existing["user_id"] == user.user_id:
                raise BadRequestError("You have already rated this movie")

        rating = Rating(user_id=user.user_id, rating=request.rating)

        # The filter repeats the check so two concurrent rates cannot both land
        result = await self.movies.find_one_and_update(
            {"_id": oid, "ratings.user_id": {"$ne": user.user_id}},
            {"$push": {"ratings": rating.model_dump()}},
            return_document=ReturnDocument.AFTER,
        )

        if not result:
            raise BadRequestError("You have already rated this movie")

        await self._mirror("update", result)
        return self._movie_to_response(result)

    async def comment_on_movie(
        self, request: CommentCreate, user: TokenUser
    ) -> MovieResponse:
        """
        Append a comment to a movie.

        Raises:
            BadRequestError: Invalid ID or unknown movie
        """
        oid = parse_object_id(request.movie_id)
        await self._get_movie_doc(oid)

        comment = Comment(user_id=user.user_id, text=request.text)

        result = await self.movies.find_one_and_update(
            {"_id": oid},
            {"$push": {"comments": comment.model_dump()}},
            return_document=ReturnDocument.AFTER,
        )

        if not result:
            raise BadRequestError("Movie not found")

        await self._mirror("update", result)
        return self._movie_to_response(result)

    # ==================== Search ====================

    async def search_movies(
        self, query: Optional[str], genre: Optional[str] = None
    ) -> list[MovieResponse]:
        """
        Full-text search over name and description, boosted by genre.

        An empty query, or a service without search, returns no results
        without touching the index. An index failure is logged and also
        yields no results.
        """
        if not query or self.search is None:
            return []

        try:
            hits = await self.search.search(query, genre)
        except Exception:
            logger.exception(f"Search failed for query '{query}'")
            return []

        return [MovieResponse(**hit) for hit in hits]

    # ==================== Helpers ====================

    async def _get_movie_doc(self, oid: ObjectId) -> dict:
        movie_doc = await self.movies.find_one({"_id": oid})
        if not movie_doc:
            raise BadRequestError("Movie not found")
        return movie_doc

    async def _mirror(self, operation: str, movie_doc: dict) -> None:
        """
        Forward a committed change to the search index.

        Failures are logged and dropped; the store write stands either way.
        """
        if self.search is None:
            return

        doc_id = str(movie_doc["_id"])
        fields = self._search_fields(movie_doc)

        try:
            if operation == "index":
                await self.search.index_document(doc_id, fields)
            elif operation == "update":
                await self.search.update_document(doc_id, fields)
            elif operation == "delete":
                await self.search.delete_document(doc_id)
        except Exception:
            logger.exception(f"Search {operation} failed for movie {doc_id}")

    @staticmethod
    def _search_fields(movie_doc: dict) -> dict[str, Any]:
        return {k: v for k, v in movie_doc.items() if k != "_id"}

    @staticmethod
    def _movie_to_response(movie_doc: dict) -> MovieResponse:
        fields = {k: v for k, v in movie_doc.items() if k != "_id"}
        return MovieResponse(id=str(movie_doc["_id"]), **fields)
