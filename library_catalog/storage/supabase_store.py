"""Supabase 기반 books 테이블 저장소"""
from typing import Any, Awaitable, Callable, Dict, List

import httpx
from loguru import logger
from postgrest.exceptions import APIError
from supabase import AsyncClient, AsyncClientOptions, create_async_client

from library_catalog.config import config
from library_catalog.exceptions import BookNotFoundError, ConfigurationError, StorageError

from .base import BookStore


async def create_supabase_client() -> AsyncClient:
    """
    Create the Supabase AsyncClient (ANON_KEY).

    Raises ConfigurationError (a RuntimeError) when the connection settings
    are missing; this is a fatal startup condition.
    """
    if not config.SUPABASE_URL or not config.SUPABASE_ANON_KEY:
        raise ConfigurationError(
            "Supabase configuration missing. Set SUPABASE_URL and SUPABASE_ANON_KEY."
        )

    return await create_async_client(
        config.SUPABASE_URL,
        config.SUPABASE_ANON_KEY,
        options=AsyncClientOptions(
            postgrest_client_timeout=config.SUPABASE_TIMEOUT,
            storage_client_timeout=config.SUPABASE_TIMEOUT,
        )
    )


class SupabaseBookStore(BookStore):
    """Books table on Supabase (PostgREST).

    테이블 스키마 (books): schema.sql 참고
        id: uuid, pk
        title, author: text not null
        description, genre, notes: text null
        condition: text (excellent | good | fair | poor)
        created_at, updated_at: timestamptz
    """

    def __init__(self, client: AsyncClient, table_name: str = "books"):
        self.client = client
        self.table_name = table_name

    async def _execute(self, action: str, run: Callable[[], Awaitable[Any]]) -> Any:
        """Run a query and translate client errors into StorageError."""
        try:
            return await run()
        except APIError as e:
            message = e.message or str(e)
            logger.error(f"Supabase error while {action}: {message} (code={e.code})")
            raise StorageError(message) from e
        except (httpx.HTTPError, OSError) as e:
            message = str(e) or type(e).__name__
            logger.error(f"Connection error while {action}: {message}")
            raise StorageError(message) from e

    async def select(self, *, order_by: str, ascending: bool) -> List[Dict[str, Any]]:
        response = await self._execute(
            "fetching books",
            lambda: self.client.table(self.table_name)
            .select("*")
            .order(order_by, desc=not ascending)
            .execute(),
        )
        return list(response.data or [])

    async def insert(self, row: Dict[str, Any]) -> Dict[str, Any]:
        response = await self._execute(
            "creating book",
            lambda: self.client.table(self.table_name).insert(row).execute(),
        )
        if not response.data:
            raise StorageError("Failed to create book")
        return response.data[0]

    async def update(self, book_id: str, patch: Dict[str, Any]) -> Dict[str, Any]:
        response = await self._execute(
            f"updating book {book_id}",
            lambda: self.client.table(self.table_name)
            .update(patch)
            .eq("id", book_id)
            .execute(),
        )
        if not response.data:
            raise BookNotFoundError(book_id)
        return response.data[0]

    async def delete(self, book_id: str) -> None:
        response = await self._execute(
            f"deleting book {book_id}",
            lambda: self.client.table(self.table_name)
            .delete()
            .eq("id", book_id)
            .execute(),
        )
        if not response.data:
            raise BookNotFoundError(book_id)
