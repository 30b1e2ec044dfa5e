import pytest
import pytest_asyncio

from library_catalog.repository import BookRepository
from library_catalog.storage import InMemoryBookStore


def make_row(book_id: str, title: str, created_at: str, **overrides) -> dict:
    """Raw books table row as returned by Supabase"""
    row = {
        "id": book_id,
        "title": title,
        "author": "Author of " + title,
        "description": None,
        "genre": None,
        "condition": "good",
        "notes": None,
        "created_at": created_at,
        "updated_at": created_at,
    }
    row.update(overrides)
    return row


@pytest.fixture
def seeded_rows() -> list[dict]:
    return [
        make_row("book-1", "Dune", "2024-01-01T10:00:00+00:00", author="Frank Herbert", genre="Fiction"),
        make_row("book-2", "Sapiens", "2024-02-01T10:00:00+00:00", author="Yuval Noah Harari",
                 genre="History", condition="excellent", description="A brief history"),
        make_row("book-3", "Emma", "2024-03-01T10:00:00+00:00", author="Jane Austen",
                 genre="Fiction", condition="poor", notes="Water damage"),
    ]


@pytest.fixture
def store(seeded_rows) -> InMemoryBookStore:
    return InMemoryBookStore(seeded_rows)


@pytest_asyncio.fixture
async def repository(store) -> BookRepository:
    return await BookRepository.open(store)


@pytest.fixture
def row_factory():
    return make_row
