"""Holds placed by members on borrowed titles."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum

RESERVATION_PERIOD = timedelta(days=7)


class ReservationStatus(Enum):
    """Lifecycle state of a reservation."""

    PENDING = "Pending"
    READY = "Ready"
    CANCELLED = "Cancelled"
    EXPIRED = "Expired"


@dataclass(eq=False)
class Reservation:
    """A hold on a title, valid for a week from the reservation date."""

    reservation_id: str
    member_id: str
    book_isbn: str
    reservation_date: datetime = field(default_factory=datetime.now)
    status: ReservationStatus = field(default=ReservationStatus.PENDING, init=False)
    expiry_date: datetime = field(init=False)
    notes: str = field(default="", init=False)

    def __post_init__(self) -> None:
        self.expiry_date = self.reservation_date + RESERVATION_PERIOD

    def is_expired(self, now: datetime | None = None) -> bool:
        now = datetime.now() if now is None else now
        return now > self.expiry_date

    def is_ready(self) -> bool:
        return self.status is ReservationStatus.READY

    def status_string(self) -> str:
        return self.status.value