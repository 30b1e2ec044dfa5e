from typing import Optional

from pydantic import BaseModel, Field

from library_catalog.models import Book


class BooksListResponse(BaseModel):
    """Response schema for the book collection"""
    books: list[Book] = Field(default_factory=list)
    total: int = Field(..., description="Number of books returned")
    is_loading: bool = Field(False, description="A mutation is in flight")
    error: Optional[str] = Field(None, description="Last repository error")


class CatalogStatsResponse(BaseModel):
    """Response schema for collection statistics"""
    total_books: int
    genre_count: int
    average_condition: float = Field(..., description="Mean star rating (0-5)")
    genres: list[str] = Field(default_factory=list)


class ConditionResponse(BaseModel):
    """Response schema for one condition option"""
    value: str = Field(..., description="Stored condition value")
    rating: int = Field(..., description="Star rating (2-5)")
    description: str
