"""Library members, their loans and fines."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum


class MemberType(Enum):
    """Kind of membership, which sets the loan limit."""

    STUDENT = "Student"
    FACULTY = "Faculty"
    STAFF = "Staff"
    GUEST = "Guest"
    PREMIUM = "Premium"


class MemberStatus(Enum):
    """Standing of a membership."""

    ACTIVE = "Active"
    SUSPENDED = "Suspended"
    EXPIRED = "Expired"
    BLACKLISTED = "Blacklisted"


_MAX_BOOKS = {
    MemberType.STUDENT: 5,
    MemberType.FACULTY: 10,
    MemberType.STAFF: 8,
    MemberType.GUEST: 3,
    MemberType.PREMIUM: 15,
}

MEMBERSHIP_PERIOD = timedelta(days=365)
FINE_BORROW_LIMIT = 10.0


@dataclass(eq=False)
class Member:
    """A registered borrower."""

    member_id: str
    name: str
    email: str
    phone: str
    address: str
    member_type: MemberType
    registration_date: datetime = field(default_factory=datetime.now)
    status: MemberStatus = field(default=MemberStatus.ACTIVE, init=False)
    expiry_date: datetime = field(init=False)
    max_books_allowed: int = field(init=False)
    fine_balance: float = field(default=0.0, init=False)
    borrowed_books: list[str] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.expiry_date = self.registration_date + MEMBERSHIP_PERIOD
        self.max_books_allowed = _MAX_BOOKS[self.member_type]

    @property
    def current_books_borrowed(self) -> int:
        return len(self.borrowed_books)

    def can_borrow_book(self) -> bool:
        """Active, under the loan limit and owing no more than the fine limit."""
        return (
            self.status is MemberStatus.ACTIVE
            and self.current_books_borrowed < self.max_books_allowed
            and self.fine_balance <= FINE_BORROW_LIMIT
        )

    def add_borrowed_book(self, isbn: str) -> None:
        """Record a loan; ignored once the loan limit is reached."""
        if self.current_books_borrowed < self.max_books_allowed:
            self.borrowed_books.append(isbn)

    def remove_borrowed_book(self, isbn: str) -> None:
        """Forget one loan of the given ISBN, if there is one."""
        if isbn in self.borrowed_books:
            self.borrowed_books.remove(isbn)

    def add_fine(self, amount: float) -> None:
        self.fine_balance += amount

    def pay_fine(self, amount: float) -> None:
        """Reduce the balance; payments larger than the balance are ignored."""
        if amount <= self.fine_balance:
            self.fine_balance -= amount

    def is_active(self) -> bool:
        return self.status is MemberStatus.ACTIVE

    def type_string(self) -> str:
        return self.member_type.value

    def status_string(self) -> str:
        return self.status.value