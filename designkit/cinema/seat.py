"""Individual seats in a cinema screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SeatStatus(Enum):
    """Occupancy state of a seat."""

    AVAILABLE = "Available"
    OCCUPIED = "Occupied"
    RESERVED = "Reserved"
    MAINTENANCE = "Maintenance"


class SeatType(Enum):
    """Kind of seat."""

    REGULAR = "Regular"
    PREMIUM = "Premium"
    VIP = "VIP"
    WHEELCHAIR_ACCESSIBLE = "Wheelchair Accessible"


@dataclass(eq=False)
class Seat:
    """A seat at a zero-based row and column; ``price`` is a surcharge."""

    seat_id: str
    row: int
    column: int
    seat_type: SeatType = SeatType.REGULAR
    status: SeatStatus = field(default=SeatStatus.AVAILABLE, init=False)
    price: float = field(default=0.0, init=False)
    booking_id: str = field(default="", init=False)

    def seat_number(self) -> str:
        """Human-readable label such as ``A1``: row letter, one-based column."""
        return f"{chr(ord('A') + self.row)}{self.column + 1}"

    def status_string(self) -> str:
        return self.status.value

    def type_string(self) -> str:
        return self.seat_type.value

    def is_available(self) -> bool:
        return self.status is SeatStatus.AVAILABLE

    def is_occupied(self) -> bool:
        return self.status is SeatStatus.OCCUPIED

    def is_reserved(self) -> bool:
        return self.status is SeatStatus.RESERVED

    def reserve(self, booking_id: str) -> None:
        """Hold the seat for a booking; ignored unless the seat is available."""
        if self.status is SeatStatus.AVAILABLE:
            self.status = SeatStatus.RESERVED
            self.booking_id = booking_id

    def occupy(self) -> None:
        """Mark a reserved seat as taken; ignored otherwise."""
        if self.status is SeatStatus.RESERVED:
            self.status = SeatStatus.OCCUPIED

    def release(self) -> None:
        """Make the seat available again and drop its booking."""
        self.status = SeatStatus.AVAILABLE
        self.booking_id = ""

    def set_maintenance(self) -> None:
        """Take the seat out of service and drop its booking."""
        self.status = SeatStatus.MAINTENANCE
        self.booking_id = ""