"""In-Memory books 저장소

개발/테스트용. 프로세스 종료 시 데이터 소실됩니다.
프로덕션에서는 SupabaseBookStore를 사용하세요.
"""
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from library_catalog.exceptions import BookNotFoundError, StorageError

from .base import BookStore


class InMemoryBookStore(BookStore):
    """In-Memory 기반 books 저장소

    특징:
        - id(UUID)와 created_at/updated_at을 저장소가 부여
        - update 시 updated_at 갱신
        - fail_next()로 다음 호출 실패를 흉내낼 수 있음

    사용 예시:
        store = InMemoryBookStore()
        store.fail_next("delete", "network unreachable")
        await store.delete(book_id)  # StorageError
    """

    def __init__(self, rows: Optional[List[Dict[str, Any]]] = None):
        self._rows: Dict[str, Dict[str, Any]] = {}
        self._failures: Dict[str, str] = {}
        # created_at must be strictly increasing even within one clock tick
        self._last_timestamp = datetime.min.replace(tzinfo=timezone.utc)
        for row in rows or []:
            self._rows[str(row["id"])] = dict(row)

    def fail_next(self, operation: str, message: str = "Network request failed") -> None:
        """Make the next call of ``operation`` raise StorageError."""
        self._failures[operation] = message

    def _check_failure(self, operation: str) -> None:
        message = self._failures.pop(operation, None)
        if message is not None:
            raise StorageError(message)

    def _now(self) -> datetime:
        now = datetime.now(timezone.utc)
        if now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now

    async def select(self, *, order_by: str, ascending: bool) -> List[Dict[str, Any]]:
        self._check_failure("select")
        rows = sorted(self._rows.values(), key=lambda r: r[order_by], reverse=not ascending)
        return [dict(r) for r in rows]

    async def insert(self, row: Dict[str, Any]) -> Dict[str, Any]:
        self._check_failure("insert")
        now = self._now().isoformat()
        stored = {
            "description": None,
            "genre": None,
            "notes": None,
            **row,
            "id": str(uuid.uuid4()),
            "created_at": now,
            "updated_at": now,
        }
        self._rows[stored["id"]] = stored
        return dict(stored)

    async def update(self, book_id: str, patch: Dict[str, Any]) -> Dict[str, Any]:
        self._check_failure("update")
        if book_id not in self._rows:
            raise BookNotFoundError(book_id)
        stored = self._rows[book_id]
        stored.update(patch)
        stored["updated_at"] = self._now().isoformat()
        return dict(stored)

    async def delete(self, book_id: str) -> None:
        self._check_failure("delete")
        if book_id not in self._rows:
            raise BookNotFoundError(book_id)
        del self._rows[book_id]

    def __len__(self) -> int:
        return len(self._rows)
