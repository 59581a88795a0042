"""
Movie request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field


class MovieCreate(BaseModel):
    """Create or fully replace a movie."""
    name: str = Field(..., min_length=1, description="Movie title")
    description: Optional[str] = Field(None, description="Synopsis")
    release_date: Optional[str] = Field(None, description="Release date as given")
    ticket_price: Optional[float] = Field(None, ge=0, description="Ticket price")
    country: Optional[str] = Field(None, description="Country of production")
    genre: str = Field(..., min_length=1, description="Genre")
    photo_uri: Optional[str] = Field(None, description="Poster URI")


class RatingCreate(BaseModel):
    """Rate a movie."""
    movie_id: str = Field(..., alias="movieId", min_length=1, description="Movie ID")
    rating: float = Field(..., ge=0, le=10, description="Rating between 0 and 10")

    class Config:
        populate_by_name = True


class CommentCreate(BaseModel):
    """Comment on a movie."""
    movie_id: str = Field(..., alias="movieId", min_length=1, description="Movie ID")
    text: str = Field(..., min_length=1, description="Comment body")

    class Config:
        populate_by_name = True


class RatingResponse(BaseModel):
    user_id: str = Field(..., alias="userId")
    rating: float

    class Config:
        populate_by_name = True


class CommentResponse(BaseModel):
    user_id: str = Field(..., alias="userId")
    text: str

    class Config:
        populate_by_name = True


class MovieResponse(BaseModel):
    """Movie as returned by the API."""
    id: str = Field(..., description="Movie ID")
    name: str
    description: Optional[str] = None
    release_date: Optional[str] = None
    ticket_price: Optional[float] = None
    country: Optional[str] = None
    genre: str
    photo_uri: Optional[str] = None
    ratings: list[RatingResponse] = Field(default_factory=list)
    comments: list[CommentResponse] = Field(default_factory=list)
