"""
Movie model for catalog database.
"""
from typing import Optional

from pydantic import BaseModel, Field


class Rating(BaseModel):
    """A single user's rating, embedded in its movie."""
    user_id: str = Field(..., description="Rating author")
    rating: float = Field(..., description="Rating value")


class Comment(BaseModel):
    """A user comment, embedded in its movie."""
    user_id: str = Field(..., description="Comment author")
    text: str = Field(..., description="Comment body")


class Movie(BaseModel):
    """
    Movie document model for MongoDB catalog_db.movies collection.

    Ratings and comments have no lifecycle of their own; they are
    removed together with the movie.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., description="Movie title")
    description: Optional[str] = None
    release_date: Optional[str] = None
    # Prices are stored in a single currency
    ticket_price: Optional[float] = None
    country: Optional[str] = None
    genre: str = Field(..., description="Genre used for search boosting")
    photo_uri: Optional[str] = None
    ratings: list[Rating] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)

    class Config:
        populate_by_name = True
