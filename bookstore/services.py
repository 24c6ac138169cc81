"""Business logic services used by HTTP controllers.

Services are intentionally thin: they translate request schemas into
models, delegate persistence to repositories and raise domain exceptions
that the API layer maps to HTTP responses.
"""

import logging
import secrets
from typing import List, Optional
from passlib.context import CryptContext
from sqlmodel import Session
from . import models, repositories
from .catalog_client import CatalogClient
from .exceptions import BookNotFoundError, CatalogUnavailableError
from .schemas import BookIn
from .utils.circuit_breaker import CircuitBreaker

PWD_CTX = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
PLACEHOLDER_TITLE = "Unavailable"
PLACEHOLDER_AUTHOR = "Unknown"

logger = logging.getLogger("bookstore.services")


class BookService:
    """CRUD operations on the book catalogue of this store."""
    def __init__(self, session: Session):
        self.session = session
        self.repo = repositories.BookRepository(session)

    def list_books(self) -> List[models.Book]:
        return self.repo.list_all()

    def create_book(self, payload: BookIn) -> models.Book:
        """Persist a new book and return it with its generated id."""
        book = self.repo.create(models.Book(**payload.model_dump()))
        logger.info("book_created id=%s title=%r", book.id, book.title)
        return book

    def get_book(self, book_id: int) -> models.Book:
        """Return the book with `book_id` or raise `BookNotFoundError`."""
        book = self.repo.get(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def update_book(self, book_id: int, payload: BookIn) -> models.Book:
        """Replace every mutable field of an existing book."""
        book = self.get_book(book_id)
        return self.repo.update(book, payload.model_dump())

    def delete_book(self, book_id: int) -> None:
        book = self.get_book(book_id)
        self.repo.delete(book)
        logger.info("book_deleted id=%s", book_id)

    def count(self) -> int:
        return self.repo.count()


class AdminCredentials:
    """Holds the single admin login used by the `/admin` gate.

    Only a hash of the password is kept. When no password is supplied a
    random one is generated and written to the log once, so a developer
    can read it from the console.
    """
    def __init__(self, username: str, password: Optional[str] = None):
        self.username = username
        self.generated = not password
        if self.generated:
            password = secrets.token_urlsafe(16)
            logger.warning("Using generated admin password for user %r: %s", username, password)
        self._password_hash = PWD_CTX.hash(password)

    def verify(self, username: str, password: str) -> bool:
        """Return True when `username`/`password` match the admin login."""
        # always run the hash check so timing does not reveal the username
        password_ok = PWD_CTX.verify(password, self._password_hash)
        return secrets.compare_digest(username.encode(), self.username.encode()) and password_ok


class CatalogService:
    """Look books up in the downstream catalog, degrading to a placeholder.

    A circuit breaker guards the client: once it is open the downstream
    service is not called and the placeholder is returned directly.
    """
    def __init__(self, client: CatalogClient, breaker: CircuitBreaker):
        self.client = client
        self.breaker = breaker

    def lookup(self, book_id: int) -> dict:
        """Return a catalog record for `book_id`.

        The result always carries `fallback`; it is True when the
        placeholder record was produced instead of the catalog answer.
        """
        if not self.breaker.allow():
            logger.info("catalog breaker open, serving placeholder for id=%s", book_id)
            return self.placeholder(book_id)
        try:
            record = self.client.fetch_book(book_id)
        except CatalogUnavailableError:
            self.breaker.record_failure()
            return self.placeholder(book_id)
        self.breaker.record_success()
        return {
            'id': book_id,
            'title': record.title,
            'author': record.author,
            'price': record.price,
            'fallback': False,
        }

    @staticmethod
    def placeholder(book_id: int) -> dict:
        return {
            'id': book_id,
            'title': PLACEHOLDER_TITLE,
            'author': PLACEHOLDER_AUTHOR,
            'price': 0.0,
            'fallback': True,
        }
