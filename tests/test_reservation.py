from datetime import datetime, timedelta

import pytest

from designkit.library.reservation import Reservation, ReservationStatus

START = datetime(2024, 3, 1, 12, 0)


def make():
    return Reservation("RES1", "M1", "isbn-1", reservation_date=START)


def test_new_reservation_is_pending():
    reservation = make()
    assert reservation.status is ReservationStatus.PENDING
    assert reservation.notes == ""
    assert reservation.is_ready() is False


def test_expiry_is_one_week_later():
    reservation = make()
    assert reservation.expiry_date - reservation.reservation_date == timedelta(days=7)


def test_not_expired_on_expiry_instant():
    reservation = make()
    assert reservation.is_expired(reservation.expiry_date) is False


def test_expired_after_expiry():
    reservation = make()
    later = reservation.expiry_date + timedelta(seconds=1)
    assert reservation.is_expired(later) is True


def test_fresh_reservation_not_expired_now():
    reservation = Reservation("RES2", "M1", "isbn-1")
    assert reservation.is_expired() is False


def test_ready_status():
    reservation = make()
    reservation.status = ReservationStatus.READY
    assert reservation.is_ready() is True


@pytest.mark.parametrize(
    "status, text",
    [
        (ReservationStatus.PENDING, "Pending"),
        (ReservationStatus.READY, "Ready"),
        (ReservationStatus.CANCELLED, "Cancelled"),
        (ReservationStatus.EXPIRED, "Expired"),
    ],
)
def test_status_string(status, text):
    reservation = make()
    reservation.status = status
    assert reservation.status_string() == text