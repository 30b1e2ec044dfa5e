"""BookStore 추상 인터페이스

Supabase 외의 백엔드로 교체 시 이 인터페이스를 구현하면 됩니다.

사용 예시:
    store = SupabaseBookStore(client)
    repository = await BookRepository.open(store)
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List


class BookStore(ABC):
    """Row-level access to the books table.

    Implementations raise StorageError for every failure, and
    BookNotFoundError when an update matches no row.
    """

    @abstractmethod
    async def select(self, *, order_by: str, ascending: bool) -> List[Dict[str, Any]]:
        """Fetch every row ordered by ``order_by``.

        Args:
            order_by: Column to order by
            ascending: Sort direction

        Returns:
            Raw rows
        """
        pass

    @abstractmethod
    async def insert(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a row and return it as stored (with id and timestamps)."""
        pass

    @abstractmethod
    async def update(self, book_id: str, patch: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ``patch`` to the row with ``book_id`` and return the stored row."""
        pass

    @abstractmethod
    async def delete(self, book_id: str) -> None:
        """Delete the row with ``book_id``."""
        pass
