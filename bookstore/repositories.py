"""Repository classes encapsulating database operations.

`BookRepository` is the only aggregate. It returns SQLModel objects and
performs commits/refreshes where appropriate.
"""

from typing import List, Optional
from sqlmodel import Session, select
from sqlalchemy import func
from . import models


class BookRepository:
    """CRUD operations for `Book` objects."""
    def __init__(self, session: Session):
        self.session = session

    def create(self, book: models.Book) -> models.Book:
        """Persist a new book and return the managed instance."""
        self.session.add(book)
        self.session.commit()
        self.session.refresh(book)
        return book

    def list_all(self) -> List[models.Book]:
        """Return every stored book."""
        stmt = select(models.Book).order_by(models.Book.id)
        return self.session.exec(stmt).all()

    def get(self, book_id: int) -> Optional[models.Book]:
        """Get a `Book` by primary key."""
        return self.session.get(models.Book, book_id)

    def update(self, book: models.Book, fields: dict) -> models.Book:
        """Overwrite the given fields on `book` and commit."""
        for name, value in fields.items():
            setattr(book, name, value)
        self.session.add(book)
        self.session.commit()
        self.session.refresh(book)
        return book

    def delete(self, book: models.Book) -> None:
        self.session.delete(book)
        self.session.commit()

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(models.Book)).one()
