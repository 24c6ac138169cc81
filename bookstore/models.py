"""SQLModel data models.

The bookstore has a single table: `book`. The identifier is generated by
the database on insert and never changes afterwards.
"""

from typing import Optional
from sqlmodel import SQLModel, Field


class Book(SQLModel, table=True):
    """A book offered by the store.

    Fields:
    - `title`: display title
    - `author`: author name as entered
    - `price`: unit price in the store currency
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(index=True, nullable=False, max_length=255)
    author: str = Field(nullable=False, max_length=255)
    price: float = Field(nullable=False)
