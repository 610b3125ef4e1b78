import pytest

from designkit.cinema.seat import Seat, SeatStatus, SeatType


@pytest.fixture
def seat():
    return Seat("S_0_0", 0, 0)


def test_defaults(seat):
    assert seat.status is SeatStatus.AVAILABLE
    assert seat.seat_type is SeatType.REGULAR
    assert seat.price == 0.0
    assert seat.booking_id == ""


@pytest.mark.parametrize(
    "row, column, label",
    [(0, 0, "A1"), (1, 4, "B5")],
)
def test_seat_number(row, column, label):
    assert Seat("x", row, column).seat_number() == label


def test_reserve_sets_booking(seat):
    seat.reserve("BOOK1")
    assert seat.is_reserved()
    assert seat.booking_id == "BOOK1"
    assert seat.status_string() == "Reserved"


def test_reserve_ignored_when_not_available(seat):
    seat.reserve("BOOK1")
    seat.reserve("BOOK2")
    assert seat.booking_id == "BOOK1"


def test_occupy_requires_reservation(seat):
    seat.occupy()
    assert seat.is_available()
    seat.reserve("BOOK1")
    seat.occupy()
    assert seat.is_occupied()
    assert seat.status_string() == "Occupied"


def test_release_clears_booking(seat):
    seat.reserve("BOOK1")
    seat.occupy()
    seat.release()
    assert seat.is_available()
    assert seat.booking_id == ""


def test_maintenance(seat):
    seat.reserve("BOOK1")
    seat.set_maintenance()
    assert seat.status is SeatStatus.MAINTENANCE
    assert seat.booking_id == ""
    assert not seat.is_available()
    seat.reserve("BOOK2")
    assert seat.status is SeatStatus.MAINTENANCE


def test_type_string():
    seat = Seat("x", 0, 0, SeatType.WHEELCHAIR_ACCESSIBLE)
    assert seat.type_string() == "Wheelchair Accessible"
    assert Seat("y", 0, 0, SeatType.VIP).type_string() == "VIP"