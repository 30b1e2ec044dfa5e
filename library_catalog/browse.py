"""Filtering and summary helpers over a book collection."""
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from library_catalog.models import Book, BookCondition


@dataclass
class BookFilter:
    """Dashboard filters. Empty values match everything."""

    search: Optional[str] = None
    genre: Optional[str] = None
    condition: Optional[BookCondition] = None

    def matches(self, book: Book) -> bool:
        if self.search:
            term = self.search.lower()
            if term not in book.title.lower() and term not in book.author.lower():
                return False
        if self.genre and book.genre != self.genre:
            return False
        if self.condition and book.condition != self.condition:
            return False
        return True


def filter_books(books: Iterable[Book], book_filter: BookFilter) -> List[Book]:
    """Books matching the filter, in their original order."""
    return [book for book in books if book_filter.matches(book)]


def list_genres(books: Iterable[Book]) -> List[str]:
    """Distinct genres in order of first appearance."""
    seen: List[str] = []
    for book in books:
        if book.genre and book.genre not in seen:
            seen.append(book.genre)
    return seen


@dataclass
class CatalogStats:
    total_books: int
    genre_count: int
    average_condition: float
    genres: List[str] = field(default_factory=list)


def compute_stats(books: Sequence[Book]) -> CatalogStats:
    """
    Summarize a collection.

    ``average_condition`` is the mean star rating of all books (0 when the
    collection is empty).
    """
    genres = list_genres(books)
    total = len(books)
    average = sum(book.condition.rating for book in books) / total if total else 0.0
    return CatalogStats(
        total_books=total,
        genre_count=len(genres),
        average_condition=average,
        genres=genres,
    )
