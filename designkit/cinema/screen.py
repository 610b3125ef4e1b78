"""A cinema screen and its grid of seats."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import chain

from designkit.cinema.seat import Seat, SeatStatus, SeatType

_LAYOUT_MARKS = {
    SeatStatus.AVAILABLE: " [ ]",
    SeatStatus.RESERVED: " [R]",
    SeatStatus.OCCUPIED: " [X]",
    SeatStatus.MAINTENANCE: " [M]",
}


class SeatUnavailableError(Exception):
    """Raised when a seat is not in the state an operation needs."""


class Screen:
    """A screen with ``total_rows`` by ``total_columns`` seats."""

    def __init__(self, screen_id: str, name: str, total_rows: int, total_columns: int) -> None:
        self.screen_id = screen_id
        self.name = name
        self.total_rows = total_rows
        self.total_columns = total_columns
        self.is_active = True
        self._seats: list[list[Seat]] = []
        self._by_id: dict[str, Seat] = {}
        self.initialize_seats()

    def total_seats(self) -> int:
        return self.total_rows * self.total_columns

    @property
    def seats(self) -> list[list[Seat]]:
        """The seat grid, row by row."""
        return [list(row) for row in self._seats]

    def _all_seats(self) -> Iterator[Seat]:
        return chain.from_iterable(self._seats)

    # Lookup

    def get_seat(self, seat_id: str) -> Seat | None:
        return self._by_id.get(seat_id)

    def seat_at(self, row: int, column: int) -> Seat | None:
        if 0 <= row < self.total_rows and 0 <= column < self.total_columns:
            return self._seats[row][column]
        return None

    def _require(self, seat_id: str) -> Seat:
        seat = self.get_seat(seat_id)
        if seat is None:
            raise KeyError(f"no such seat: {seat_id}")
        return seat

    def _require_at(self, row: int, column: int) -> Seat:
        seat = self.seat_at(row, column)
        if seat is None:
            raise IndexError(f"no seat at row {row}, column {column}")
        return seat

    # Seat operations

    @staticmethod
    def _reserve(seat: Seat, booking_id: str) -> None:
        if not seat.is_available():
            raise SeatUnavailableError(f"seat {seat.seat_id} is not available")
        seat.reserve(booking_id)

    @staticmethod
    def _occupy(seat: Seat) -> None:
        if not seat.is_reserved():
            raise SeatUnavailableError(f"seat {seat.seat_id} is not reserved")
        seat.occupy()

    def reserve_seat(self, seat_id: str, booking_id: str) -> None:
        self._reserve(self._require(seat_id), booking_id)

    def reserve_seat_at(self, row: int, column: int, booking_id: str) -> None:
        self._reserve(self._require_at(row, column), booking_id)

    def occupy_seat(self, seat_id: str) -> None:
        self._occupy(self._require(seat_id))

    def occupy_seat_at(self, row: int, column: int) -> None:
        self._occupy(self._require_at(row, column))

    def release_seat(self, seat_id: str) -> None:
        self._require(seat_id).release()

    def release_seat_at(self, row: int, column: int) -> None:
        self._require_at(row, column).release()

    def set_seat_maintenance(self, seat_id: str) -> None:
        """Take a seat out of service; unknown ids are ignored."""
        seat = self.get_seat(seat_id)
        if seat is not None:
            seat.set_maintenance()

    def set_seat_maintenance_at(self, row: int, column: int) -> None:
        """Take a seat out of service; positions off the grid are ignored."""
        seat = self.seat_at(row, column)
        if seat is not None:
            seat.set_maintenance()

    # Queries

    def available_seats(self) -> list[Seat]:
        return [s for s in self._all_seats() if s.is_available()]

    def reserved_seats(self) -> list[Seat]:
        return [s for s in self._all_seats() if s.is_reserved()]

    def occupied_seats(self) -> list[Seat]:
        return [s for s in self._all_seats() if s.is_occupied()]

    def available_seat_count(self) -> int:
        return sum(1 for s in self._all_seats() if s.is_available())

    def reserved_seat_count(self) -> int:
        return sum(1 for s in self._all_seats() if s.is_reserved())

    def occupied_seat_count(self) -> int:
        return sum(1 for s in self._all_seats() if s.is_occupied())

    def is_seat_available(self, seat_id: str) -> bool:
        seat = self.get_seat(seat_id)
        return seat is not None and seat.is_available()

    def is_seat_available_at(self, row: int, column: int) -> bool:
        seat = self.seat_at(row, column)
        return seat is not None and seat.is_available()

    def seat_layout(self) -> str:
        """A text map of the seats: [ ] free, [R] reserved, [X] taken, [M] out of service."""
        header = "   " + "".join(f" {col + 1} " for col in range(self.total_columns))
        lines = [f"Screen: {self.name} ({self.total_rows}x{self.total_columns})", header]
        for index, row in enumerate(self._seats):
            marks = "".join(_LAYOUT_MARKS[seat.status] for seat in row)
            lines.append(f"{chr(ord('A') + index)} {marks}")
        return "\n".join(lines) + "\n"

    # Setup

    def initialize_seats(self) -> None:
        """Build a fresh grid of available seats with ids ``<screen>_<row>_<col>``."""
        self._seats = [
            [Seat(f"{self.screen_id}_{row}_{col}", row, col) for col in range(self.total_columns)]
            for row in range(self.total_rows)
        ]
        self._by_id = {seat.seat_id: seat for seat in self._all_seats()}

    def set_seat_type(self, row: int, column: int, seat_type: SeatType) -> None:
        seat = self.seat_at(row, column)
        if seat is not None:
            seat.seat_type = seat_type

    def set_seat_price(self, row: int, column: int, price: float) -> None:
        seat = self.seat_at(row, column)
        if seat is not None:
            seat.price = price