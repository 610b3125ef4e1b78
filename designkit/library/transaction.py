"""Loan, return and renewal records with overdue fines."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum

LOAN_PERIOD = timedelta(days=14)


class TransactionType(Enum):
    """What a transaction records."""

    BORROW = "Borrow"
    RETURN = "Return"
    RENEW = "Renew"
    RESERVE = "Reserve"
    CANCEL_RESERVATION = "Cancel Reservation"


class TransactionStatus(Enum):
    """Lifecycle state of a transaction."""

    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    OVERDUE = "Overdue"


@dataclass(eq=False)
class Transaction:
    """A single library transaction; borrows are due two weeks after the date."""

    transaction_id: str
    member_id: str
    book_isbn: str
    librarian_id: str
    transaction_type: TransactionType
    transaction_date: datetime = field(default_factory=datetime.now)
    status: TransactionStatus = field(default=TransactionStatus.PENDING, init=False)
    due_date: datetime | None = field(default=None, init=False)
    return_date: datetime | None = field(default=None, init=False)
    fine_amount: float = field(default=0.0, init=False)
    notes: str = field(default="", init=False)

    def __post_init__(self) -> None:
        if self.transaction_type is TransactionType.BORROW:
            self.due_date = self.transaction_date + LOAN_PERIOD

    def is_overdue(self, now: datetime | None = None) -> bool:
        """True for an open borrow whose due date has passed."""
        if (
            self.transaction_type is not TransactionType.BORROW
            or self.status is TransactionStatus.COMPLETED
            or self.due_date is None
        ):
            return False
        now = datetime.now() if now is None else now
        return now > self.due_date

    def days_overdue(self, now: datetime | None = None) -> int:
        """Whole days past the due date, zero when not overdue."""
        now = datetime.now() if now is None else now
        if not self.is_overdue(now):
            return 0
        hours = int((now - self.due_date).total_seconds() // 3600)
        return hours // 24

    def calculate_fine(self, daily_rate: float = 1.0, now: datetime | None = None) -> float:
        now = datetime.now() if now is None else now
        if not self.is_overdue(now):
            return 0.0
        return self.days_overdue(now) * daily_rate

    def type_string(self) -> str:
        return self.transaction_type.value

    def status_string(self) -> str:
        return self.status.value