"""Domain exceptions raised by services and translated by the API layer."""


class BookstoreError(Exception):
    """Base class for bookstore domain errors."""


class BookNotFoundError(BookstoreError):
    """Raised when a book id does not match any stored record."""

    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"Book not found with id {book_id}")


class CatalogUnavailableError(BookstoreError):
    """Raised when the downstream catalog cannot answer a lookup."""
