"""Exception classes for the library catalog."""


class CatalogError(Exception):
    """Base exception for the catalog."""

    pass


class ConfigurationError(CatalogError, RuntimeError):
    """Raised when required configuration is missing. Fatal at startup."""

    pass


class StorageError(CatalogError):
    """Raised when the remote store fails or rejects an operation.

    The message is the raw underlying message and is shown to users as is.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BookNotFoundError(StorageError):
    """Raised when an update or delete matches no row.

    Consumers treat this like any other StorageError.
    """

    def __init__(self, book_id: str):
        super().__init__(f"Book not found: {book_id}")
        self.book_id = book_id


__all__ = ["CatalogError", "ConfigurationError", "StorageError", "BookNotFoundError"]
