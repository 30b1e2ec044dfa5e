"""설정 관리"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Supabase
    SUPABASE_URL = os.getenv("SUPABASE_URL")
    SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY")
    SUPABASE_TIMEOUT = int(os.getenv("SUPABASE_TIMEOUT", "10"))
    BOOKS_TABLE = os.getenv("BOOKS_TABLE", "books")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8080"))

    # CORS 설정
    ALLOWED_ORIGINS = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:8000,http://localhost:3000"
    ).split(",")


config = Config()
