from datetime import datetime, timedelta

import pytest

from designkit.elevators.floor import Direction
from designkit.elevators.request import Request, RequestStatus, RequestType

START = datetime(2024, 1, 1, 12, 0, 0)


def make(request_type=RequestType.INTERNAL, **kwargs):
    return Request(1, 5, Direction.UP, request_type, **kwargs)


def test_request_id_format():
    request_id = make().request_id
    assert request_id[:3] == "REQ"
    assert len(request_id) == 9
    assert request_id[3:].isdigit()


def test_request_ids_are_sequential():
    first = make()
    second = make()
    assert int(second.request_id[3:]) == int(first.request_id[3:]) + 1


def test_external_priority_is_higher():
    assert make(RequestType.EXTERNAL).priority == 2
    assert make(RequestType.INTERNAL).priority == 1


def test_type_predicates():
    external = make(RequestType.EXTERNAL)
    internal = make(RequestType.INTERNAL)
    assert external.is_external() and not external.is_internal()
    assert internal.is_internal() and not internal.is_external()


def test_new_request_is_pending():
    request = make()
    assert request.is_pending()
    assert not request.is_assigned()
    assert not request.is_completed()
    assert request.assigned_elevator_id == ""


def test_wait_time_while_pending():
    request = make(request_time=START)
    assert request.wait_time(START + timedelta(seconds=7, milliseconds=900)) == 7


def test_wait_time_zero_when_not_pending():
    request = make(request_time=START)
    request.status = RequestStatus.ASSIGNED
    assert request.wait_time(START + timedelta(seconds=30)) == 0


def test_total_time_for_completed_request():
    request = make(request_time=START)
    request.status = RequestStatus.COMPLETED
    request.completion_time = START + timedelta(seconds=42)
    assert request.total_time(START + timedelta(hours=1)) == 42


def test_total_time_falls_back_to_wait_time():
    request = make(request_time=START)
    now = START + timedelta(seconds=12)
    assert request.total_time(now) == request.wait_time(now)


@pytest.mark.parametrize(
    "status, text",
    [
        (RequestStatus.PENDING, "Pending"),
        (RequestStatus.ASSIGNED, "Assigned"),
        (RequestStatus.COMPLETED, "Completed"),
        (RequestStatus.CANCELLED, "Cancelled"),
    ],
)
def test_status_string(status, text):
    request = make()
    request.status = status
    assert request.status_string() == text


def test_type_and_direction_strings():
    assert make(RequestType.EXTERNAL).type_string() == "External"
    assert make(RequestType.INTERNAL).type_string() == "Internal"
    assert Request(3, 1, Direction.DOWN, RequestType.INTERNAL).direction_string() == "DOWN"