"""FastAPI 서버 실행

Usage:
    python main.py
    # or
    uvicorn library_catalog.api:app --reload --host 0.0.0.0 --port 8080
"""
import sys

import uvicorn
from loguru import logger

from library_catalog.config import config

if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Run the library catalog API server")
    parser.add_argument("--server.port", dest="server_port", type=int, default=config.PORT, help="Port to run the server on")
    parser.add_argument("--server.address", dest="server_address", type=str, default=config.HOST, help="Host to run the server on")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    args, unknown = parser.parse_known_args()

    logger.remove()
    logger.add(sys.stderr, level=config.LOG_LEVEL)

    uvicorn.run(
        "library_catalog.api:app",
        host=args.server_address,
        port=args.server_port,
        reload=args.reload,
    )
