"""Hall and car calls made to the elevator system."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from designkit.elevators.floor import Direction

_request_counter = itertools.count(1)


class RequestType(Enum):
    """Where a request came from."""

    EXTERNAL = "External"  # floor button
    INTERNAL = "Internal"  # button inside the car


class RequestStatus(Enum):
    """Lifecycle state of a request."""

    PENDING = "Pending"
    ASSIGNED = "Assigned"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


def _next_request_id() -> str:
    return f"REQ{next(_request_counter):06d}"


@dataclass(eq=False)
class Request:
    """A call for service; identity is the request object itself."""

    source_floor: int
    destination_floor: int
    direction: Direction
    request_type: RequestType
    request_time: datetime = field(default_factory=datetime.now)
    status: RequestStatus = field(default=RequestStatus.PENDING, init=False)
    completion_time: datetime | None = field(default=None, init=False)
    assigned_elevator_id: str = field(default="", init=False)
    priority: int = field(default=1, init=False)
    request_id: str = field(default_factory=_next_request_id, init=False)

    def __post_init__(self) -> None:
        if self.request_type is RequestType.EXTERNAL:
            self.priority = 2

    def is_external(self) -> bool:
        return self.request_type is RequestType.EXTERNAL

    def is_internal(self) -> bool:
        return self.request_type is RequestType.INTERNAL

    def is_pending(self) -> bool:
        return self.status is RequestStatus.PENDING

    def is_assigned(self) -> bool:
        return self.status is RequestStatus.ASSIGNED

    def is_completed(self) -> bool:
        return self.status is RequestStatus.COMPLETED

    def wait_time(self, now: datetime | None = None) -> int:
        """Whole seconds waited so far; zero once the request left PENDING."""
        if self.status is not RequestStatus.PENDING:
            return 0
        now = datetime.now() if now is None else now
        return int((now - self.request_time).total_seconds())

    def total_time(self, now: datetime | None = None) -> int:
        """Whole seconds from request to completion, or the wait time so far."""
        if self.status is RequestStatus.COMPLETED:
            if self.completion_time is None:
                return 0
            return int((self.completion_time - self.request_time).total_seconds())
        return self.wait_time(now)

    def type_string(self) -> str:
        return self.request_type.value

    def status_string(self) -> str:
        return self.status.value

    def direction_string(self) -> str:
        return self.direction.value