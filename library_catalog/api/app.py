"""FastAPI 애플리케이션"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from library_catalog import __version__
from library_catalog.config import config
from .books import router as books_router
from .lifespan import lifespan

# 앱 생성
app = FastAPI(
    title="Personal Library",
    description="Personal book catalog backed by Supabase",
    version=__version__,
    lifespan=lifespan,
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(books_router)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}
