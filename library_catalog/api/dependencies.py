from fastapi import HTTPException, Request, status

from library_catalog.repository import BookRepository


def get_book_repository(request: Request) -> BookRepository:
    """
    Dependency to get the BookRepository created at startup.
    """
    if not hasattr(request.app.state, "repository"):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Book repository not initialized"
        )
    return request.app.state.repository
