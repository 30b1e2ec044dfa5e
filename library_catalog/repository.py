"""Book repository - in-memory mirror of the books table.

The repository is the single source of truth for the collection within a
running process. Consumers read ``books``, ``is_loading`` and ``error`` and
call the async operations; every state change is pushed to subscribers.

Mutations are not serialized: two concurrent calls race at the store and
apply their mirror changes in response order.
"""
from typing import Any, Callable, Dict, List, Optional, Tuple

from loguru import logger
from pydantic import ValidationError

from library_catalog.exceptions import StorageError
from library_catalog.models import Book, BookCreate, BookPatch
from library_catalog.storage import BookStore

Subscriber = Callable[["BookRepository"], None]


class BookRepository:
    """Synchronizes the book collection with a BookStore."""

    def __init__(self, store: BookStore):
        """
        Initialize an empty repository.

        Use ``BookRepository.open`` to also perform the initial load.

        Args:
            store: Persistence client for the books table
        """
        self.store = store
        self._books: List[Book] = []
        self._is_loading = False
        self._error: Optional[str] = None
        self._subscribers: List[Subscriber] = []

    @classmethod
    async def open(cls, store: BookStore) -> "BookRepository":
        """Create a repository and load the collection once."""
        repository = cls(store)
        await repository.refresh()
        return repository

    # =========================================================================
    # State
    # =========================================================================

    @property
    def books(self) -> Tuple[Book, ...]:
        """Books, newest first."""
        return tuple(self._books)

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> Optional[str]:
        return self._error

    def get(self, book_id: str) -> Optional[Book]:
        return next((b for b in self._books if b.id == book_id), None)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback invoked after every state change.

        Returns:
            Function that removes the callback
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            try:
                callback(self)
            except Exception:
                logger.exception("Book repository subscriber failed")

    def _set_loading(self, value: bool) -> None:
        self._is_loading = value
        self._notify()

    def _set_error(self, message: Optional[str]) -> None:
        if self._error != message:
            self._error = message
            self._notify()

    def _fail(self, action: str, exc: Exception) -> StorageError:
        """Record a failed operation and return the error to raise."""
        message = str(exc) or f"Failed to {action} book"
        self._set_error(message)
        return exc if isinstance(exc, StorageError) else StorageError(message)

    @staticmethod
    def _to_book(row: Dict[str, Any]) -> Book:
        try:
            return Book.from_row(row)
        except ValidationError as e:
            raise StorageError(f"Invalid book row {row.get('id')}: {e}") from e

    # =========================================================================
    # Operations
    # =========================================================================

    async def refresh(self) -> bool:
        """
        Reload the whole collection, newest first.

        Failures are reported through ``error`` only; the previous collection
        is kept.

        Returns:
            True if the collection was replaced, False otherwise
        """
        self._set_error(None)
        try:
            rows = await self.store.select(order_by="created_at", ascending=False)
            books = [self._to_book(row) for row in rows]
        except Exception as e:
            logger.error(f"Error fetching books: {e}")
            self._fail("fetch", e)
            return False

        self._books = books
        self._notify()
        logger.info(f"Loaded {len(books)} books")
        return True

    async def create(self, fields: BookCreate) -> Book:
        """
        Insert a book and put it at the front of the collection.

        Raises:
            StorageError: If the store rejects the insert
        """
        self._set_error(None)
        self._set_loading(True)
        try:
            row = await self.store.insert(fields.to_row())
            book = self._to_book(row)
            self._books = [book, *self._books]
        except Exception as e:
            logger.error(f"Error adding book: {e}")
            raise self._fail("add", e)
        finally:
            self._set_loading(False)

        logger.info(f"Created book {book.id}")
        return book

    async def update(self, book_id: str, patch: BookPatch) -> Book:
        """
        Apply a patch and replace the book in place.

        The book keeps its position; only creation affects ordering.

        Raises:
            StorageError: If the store rejects the update or the id is unknown
        """
        self._set_error(None)
        self._set_loading(True)
        try:
            row = await self.store.update(book_id, patch.to_row())
            book = self._to_book(row)
            self._books = [book if b.id == book_id else b for b in self._books]
        except Exception as e:
            logger.error(f"Error updating book {book_id}: {e}")
            raise self._fail("update", e)
        finally:
            self._set_loading(False)

        logger.info(f"Updated book {book_id}")
        return book

    async def delete(self, book_id: str) -> None:
        """
        Delete a book from the store, then from the collection.

        On failure the book stays in the collection.

        Raises:
            StorageError: If the store rejects the delete or the id is unknown
        """
        self._set_error(None)
        self._set_loading(True)
        try:
            await self.store.delete(book_id)
            self._books = [b for b in self._books if b.id != book_id]
        except Exception as e:
            logger.error(f"Error deleting book {book_id}: {e}")
            raise self._fail("delete", e)
        finally:
            self._set_loading(False)

        logger.info(f"Deleted book {book_id}")
