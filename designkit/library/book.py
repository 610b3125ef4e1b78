"""Books held by the library and their copy counts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class BookStatus(Enum):
    """Shelf status of a title."""

    AVAILABLE = "Available"
    BORROWED = "Borrowed"
    RESERVED = "Reserved"
    MAINTENANCE = "Maintenance"


class BookCategory(Enum):
    """Subject category of a title."""

    FICTION = "Fiction"
    NON_FICTION = "Non-Fiction"
    SCIENCE = "Science"
    TECHNOLOGY = "Technology"
    HISTORY = "History"
    PHILOSOPHY = "Philosophy"
    LITERATURE = "Literature"
    CHILDREN = "Children"
    ACADEMIC = "Academic"
    OTHER = "Other"


@dataclass(eq=False)
class Book:
    """A title with one or more physical copies."""

    isbn: str
    title: str
    author: str
    publisher: str
    publication_year: int
    category: BookCategory
    total_copies: int = 1
    location: str = ""
    price: float = 0.0
    description: str = ""
    status: BookStatus = field(default=BookStatus.AVAILABLE, init=False)
    available_copies: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.available_copies = self.total_copies

    def is_available(self) -> bool:
        return self.available_copies > 0 and self.status is BookStatus.AVAILABLE

    def increment_copies(self) -> None:
        """Add one copy to the collection and to the shelf."""
        self.total_copies += 1
        self.available_copies += 1

    def decrement_copies(self) -> None:
        """Withdraw one copy, never going below zero."""
        if self.total_copies > 0:
            self.total_copies -= 1
        if self.available_copies > 0:
            self.available_copies -= 1

    def category_string(self) -> str:
        return self.category.value

    def status_string(self) -> str:
        return self.status.value