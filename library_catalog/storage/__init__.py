"""Storage module - books 테이블 저장소"""
from .base import BookStore
from .in_memory import InMemoryBookStore
from .supabase_store import SupabaseBookStore, create_supabase_client

__all__ = ["BookStore", "InMemoryBookStore", "SupabaseBookStore", "create_supabase_client"]
