from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from loguru import logger

from library_catalog.browse import BookFilter, compute_stats, filter_books
from library_catalog.exceptions import StorageError
from library_catalog.models import Book, BookCondition, BookCreate, BookPatch
from library_catalog.repository import BookRepository
from .dependencies import get_book_repository
from .schemas import BooksListResponse, CatalogStatsResponse, ConditionResponse


router = APIRouter(prefix="/v1/books", tags=["books"])


def _list_response(repository: BookRepository, books: list[Book]) -> BooksListResponse:
    return BooksListResponse(
        books=books,
        total=len(books),
        is_loading=repository.is_loading,
        error=repository.error,
    )


def _storage_failure(e: StorageError) -> HTTPException:
    # The raw storage message is shown to the user as is
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=e.message,
    )


@router.get("", response_model=BooksListResponse)
async def list_books(
    q: Optional[str] = Query(None, description="Search title or author"),
    genre: Optional[str] = None,
    condition: Optional[BookCondition] = None,
    repository: BookRepository = Depends(get_book_repository),
) -> BooksListResponse:
    """
    List books, newest first.

    Serves the in-memory collection; use POST /refresh to reload it.
    """
    books = filter_books(repository.books, BookFilter(search=q, genre=genre, condition=condition))
    return _list_response(repository, books)


@router.get("/stats", response_model=CatalogStatsResponse)
async def get_stats(
    repository: BookRepository = Depends(get_book_repository),
) -> CatalogStatsResponse:
    stats = compute_stats(repository.books)
    return CatalogStatsResponse(
        total_books=stats.total_books,
        genre_count=stats.genre_count,
        average_condition=stats.average_condition,
        genres=stats.genres,
    )


@router.get("/conditions", response_model=list[ConditionResponse])
async def list_conditions() -> list[ConditionResponse]:
    """Condition options for the add/edit form, best first."""
    return [
        ConditionResponse(value=c.value, rating=c.rating, description=c.description)
        for c in BookCondition
    ]


@router.post("/refresh", response_model=BooksListResponse)
async def refresh_books(
    repository: BookRepository = Depends(get_book_repository),
) -> BooksListResponse:
    """
    Reload the collection from Supabase.

    A failed reload still answers 200; the message is in ``error`` and the
    previous collection is returned.
    """
    await repository.refresh()
    return _list_response(repository, list(repository.books))


@router.get("/{book_id}", response_model=Book)
async def get_book(
    book_id: str,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    book = repository.get(book_id)
    if book is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Book not found"
        )
    return book


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
async def create_book(
    request: BookCreate,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    try:
        return await repository.create(request)
    except StorageError as e:
        logger.error(f"Failed to create book: {e.message}")
        raise _storage_failure(e)


@router.patch("/{book_id}", response_model=Book)
async def update_book(
    book_id: str,
    request: BookPatch,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    try:
        return await repository.update(book_id, request)
    except StorageError as e:
        logger.error(f"Failed to update book {book_id}: {e.message}")
        raise _storage_failure(e)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    book_id: str,
    repository: BookRepository = Depends(get_book_repository),
) -> Response:
    try:
        await repository.delete(book_id)
    except StorageError as e:
        logger.error(f"Failed to delete book {book_id}: {e.message}")
        raise _storage_failure(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
