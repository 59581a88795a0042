"""
Movies router for the catalog, ratings, comments and search.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.config import get_settings
from app.core.exceptions import BadRequestError, NotFoundError
from app.database.connections import get_database, get_search_client
from app.database.databases import catalog_db
from app.dependencies.auth import CurrentUser
from app.schemas.movie import (
    CommentCreate,
    MovieCreate,
    MovieResponse,
    RatingCreate,
)
from app.services.movie_service import MovieService
from app.services.search_service import SearchService

router = APIRouter(prefix="/movies", tags=["Movies"])


async def get_search_service() -> Optional[SearchService]:
    """Dependency to get SearchService instance, or None when search is off."""
    client = await get_search_client()
    if client is None:
        return None
    settings = get_settings()
    return SearchService(
        client, settings.elasticsearch_index, settings.search_max_results
    )


async def get_movie_service(
    search: Optional[SearchService] = Depends(get_search_service),
) -> MovieService:
    """Dependency to get MovieService instance."""
    db = await get_database(catalog_db.DB_NAME)
    return MovieService(db, search)


def _http_error(e: ValueError) -> HTTPException:
    """Translate a service error into the matching HTTP error."""
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# ==================== Movie CRUD ====================


@router.post(
    "",
    response_model=MovieResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create movie",
)
async def create_movie(
    body: MovieCreate,
    movie_service: MovieService = Depends(get_movie_service),
):
    """
    Add a movie to the catalog.

    - **name**, **genre**: Required
    - **description**, **release_date**, **ticket_price**, **country**, **photo_uri**: Optional
    """
    return await movie_service.create_movie(body)


@router.get(
    "",
    response_model=list[MovieResponse],
    summary="List movies",
)
async def list_movies(
    movie_service: MovieService = Depends(get_movie_service),
):
    """List every movie in the catalog."""
    return await movie_service.get_all_movies()


@router.get(
    "/search",
    response_model=list[MovieResponse],
    summary="Search movies",
)
async def search_movies(
    query: Optional[str] = Query(None, description="Free text matched against name and description"),
    genre: Optional[str] = Query(None, description="Genre that ranks matching movies higher"),
    movie_service: MovieService = Depends(get_movie_service),
):
    """
    Fuzzy search over name and description.

    Movies of the given genre get a score boost. An empty query returns `[]`.
    """
    return await movie_service.search_movies(query, genre)


@router.get(
    "/{movie_id}",
    response_model=MovieResponse,
    summary="Get movie",
)
async def get_movie(
    movie_id: str,
    movie_service: MovieService = Depends(get_movie_service),
):
    """Get one movie. Returns 400 for a malformed ID and 404 for an unknown one."""
    try:
        return await movie_service.get_movie_by_id(movie_id)
    except (BadRequestError, NotFoundError) as e:
        raise _http_error(e)


@router.put(
    "/{movie_id}",
    response_model=MovieResponse,
    summary="Update movie",
)
async def update_movie(
    movie_id: str,
    body: MovieCreate,
    movie_service: MovieService = Depends(get_movie_service),
):
    """Replace all descriptive fields of a movie."""
    try:
        movie = await movie_service.update_movie(movie_id, body)
    except BadRequestError as e:
        raise _http_error(e)

    if not movie:
        raise _http_error(NotFoundError("Movie not found"))

    return movie


@router.delete(
    "/{movie_id}",
    response_model=MovieResponse,
    summary="Delete movie",
)
async def delete_movie(
    movie_id: str,
    movie_service: MovieService = Depends(get_movie_service),
):
    """Delete a movie and return the removed record."""
    try:
        movie = await movie_service.delete_movie(movie_id)
    except BadRequestError as e:
        raise _http_error(e)

    if not movie:
        raise _http_error(NotFoundError("Movie not found"))

    return movie


# ==================== Ratings & Comments ====================


@router.post(
    "/rate",
    response_model=MovieResponse,
    summary="Rate movie",
)
async def rate_movie(
    body: RatingCreate,
    current_user: CurrentUser,
    movie_service: MovieService = Depends(get_movie_service),
):
    """
    Rate a movie once per user.

    Requires `Authorization: Bearer <token>`.
    """
    try:
        return await movie_service.rate_movie(body, current_user)
    except BadRequestError as e:
        raise _http_error(e)


@router.post(
    "/comment",
    response_model=MovieResponse,
    summary="Comment on movie",
)
async def comment_on_movie(
    body: CommentCreate,
    current_user: CurrentUser,
    movie_service: MovieService = Depends(get_movie_service),
):
    """
    Add a comment to a movie.

    Requires `Authorization: Bearer <token>`.
    """
    try:
        return await movie_service.comment_on_movie(body, current_user)
    except BadRequestError as e:
        raise _http_error(e)
