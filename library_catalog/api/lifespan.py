from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from loguru import logger

from library_catalog.config import config
from library_catalog.repository import BookRepository
from library_catalog.storage import SupabaseBookStore, create_supabase_client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    FastAPI Lifespan Context Manager

    Creates the Supabase client and the book repository (with its initial
    load) at startup, and closes the client at shutdown.
    """
    try:
        logger.info("Initializing Supabase Client...")
        app.state.supabase = await create_supabase_client()

        store = SupabaseBookStore(app.state.supabase, table_name=config.BOOKS_TABLE)
        app.state.repository = await BookRepository.open(store)
        if app.state.repository.error:
            logger.warning(f"Initial book load failed: {app.state.repository.error}")

        yield

    except RuntimeError as e:
        logger.error(
            f"Startup failed: {e} | "
            f"SUPABASE_URL={'set' if config.SUPABASE_URL else 'MISSING'}, "
            f"SUPABASE_ANON_KEY={'set' if config.SUPABASE_ANON_KEY else 'MISSING'}"
        )
        raise
    finally:
        logger.info("Closing Supabase Client...")
        if getattr(app.state, "supabase", None):
            await app.state.supabase.postgrest.session.aclose()
            logger.info("Supabase Client closed successfully")
