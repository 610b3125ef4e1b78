"""A single elevator car with its queue, buttons and doors."""

from __future__ import annotations

from collections import deque
from datetime import datetime
from enum import Enum
from typing import Callable

from designkit.elevators.floor import Direction
from designkit.elevators.request import Request, RequestStatus


class ElevatorState(Enum):
    """Operating state of an elevator."""

    IDLE = "IDLE"
    MOVING_UP = "MOVING_UP"
    MOVING_DOWN = "MOVING_DOWN"
    DOOR_OPENING = "DOOR_OPENING"
    DOOR_OPEN = "DOOR_OPEN"
    DOOR_CLOSING = "DOOR_CLOSING"
    MAINTENANCE = "MAINTENANCE"
    EMERGENCY = "EMERGENCY"


class DoorState(Enum):
    """State of the elevator doors."""

    OPEN = "OPEN"
    CLOSED = "CLOSED"
    OPENING = "OPENING"
    CLOSING = "CLOSING"


_MOVING = (ElevatorState.MOVING_UP, ElevatorState.MOVING_DOWN)


class Elevator:
    """An elevator car serving floors between ``min_floor`` and ``max_floor``."""

    def __init__(
        self,
        elevator_id: str,
        max_floor: int,
        min_floor: int = 1,
        speed: float = 1.0,
        door_open_time: float = 3.0,
        door_close_time: float = 3.0,
        capacity: int = 8,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.elevator_id = elevator_id
        self.max_floor = max_floor
        self.min_floor = min_floor
        self.speed = speed
        self.door_open_time = door_open_time
        self.door_close_time = door_close_time
        self.capacity = capacity
        self.current_floor = min_floor
        self.direction = Direction.NONE
        self.door_state = DoorState.CLOSED
        self.current_load = 0
        self.is_operational = True
        self._clock = clock
        self._state = ElevatorState.IDLE
        self._pressed: set[int] = set()
        self._queue: deque[Request] = deque()
        self._completed: list[Request] = []
        self.last_state_change = clock()

    @property
    def state(self) -> ElevatorState:
        return self._state

    @property
    def request_queue(self) -> tuple[Request, ...]:
        return tuple(self._queue)

    @property
    def completed_requests(self) -> list[Request]:
        return list(self._completed)

    def set_state(self, new_state: ElevatorState) -> None:
        """Change state and record the time of the change."""
        self._state = new_state
        self.last_state_change = self._clock()

    # Requests

    def add_request(self, request: Request) -> bool:
        """Queue a request; refused when out of service or full."""
        if not self.is_operational or self.current_load >= self.capacity:
            return False
        self._queue.append(request)
        return True

    def next_request(self) -> Request | None:
        """Take the oldest queued request, or None when the queue is empty."""
        return self._queue.popleft() if self._queue else None

    def complete_request(self, request: Request) -> None:
        request.status = RequestStatus.COMPLETED
        request.completion_time = self._clock()
        self._completed.append(request)

    def remove_request(self, request: Request) -> None:
        self._queue = deque(
            queued for queued in self._queue if queued.request_id != request.request_id
        )

    def has_requests(self) -> bool:
        return bool(self._queue)

    def request_count(self) -> int:
        return len(self._queue)

    # Car buttons

    def _in_range(self, floor: int) -> bool:
        return self.min_floor <= floor <= self.max_floor

    def press_floor_button(self, floor: int) -> None:
        if self._in_range(floor):
            self._pressed.add(floor)

    def clear_floor_button(self, floor: int) -> None:
        if self._in_range(floor):
            self._pressed.discard(floor)

    def is_floor_button_pressed(self, floor: int) -> bool:
        return self._in_range(floor) and floor in self._pressed

    def pressed_floor_buttons(self) -> list[int]:
        return sorted(self._pressed)

    # Movement and doors

    def move(self) -> None:
        """Advance one floor in the current moving direction, within bounds."""
        if not self.is_operational or self._state not in _MOVING:
            return
        if self._state is ElevatorState.MOVING_UP and self.current_floor < self.max_floor:
            self.current_floor += 1
        elif self._state is ElevatorState.MOVING_DOWN and self.current_floor > self.min_floor:
            self.current_floor -= 1

    def _elapsed_seconds(self) -> int:
        return int((self._clock() - self.last_state_change).total_seconds())

    def open_door(self) -> None:
        if self._state not in (ElevatorState.IDLE, ElevatorState.DOOR_CLOSING):
            return
        self.set_state(ElevatorState.DOOR_OPENING)
        self.door_state = DoorState.OPENING
        if self._elapsed_seconds() >= self.door_open_time:
            self.door_state = DoorState.OPEN
            self.set_state(ElevatorState.DOOR_OPEN)

    def close_door(self) -> None:
        if self._state is not ElevatorState.DOOR_OPEN:
            return
        self.set_state(ElevatorState.DOOR_CLOSING)
        self.door_state = DoorState.CLOSING
        if self._elapsed_seconds() >= self.door_close_time:
            self.door_state = DoorState.CLOSED
            self.set_state(ElevatorState.IDLE)

    def stop(self) -> None:
        if self.is_moving():
            self.set_state(ElevatorState.IDLE)
            self.direction = Direction.NONE

    def emergency_stop(self) -> None:
        self.set_state(ElevatorState.EMERGENCY)
        self.is_operational = False

    def can_serve_floor(self, floor: int) -> bool:
        return self._in_range(floor) and self.is_operational

    def can_serve_direction(self, direction: Direction) -> bool:
        if not self.is_operational:
            return False
        if self._state is ElevatorState.IDLE:
            return True
        if self._state is ElevatorState.MOVING_UP and direction is Direction.UP:
            return True
        return self._state is ElevatorState.MOVING_DOWN and direction is Direction.DOWN

    def distance_to_floor(self, floor: int) -> int:
        return abs(self.current_floor - floor)

    def is_idle(self) -> bool:
        return self._state is ElevatorState.IDLE

    def is_moving(self) -> bool:
        return self._state in _MOVING

    def is_door_open(self) -> bool:
        return self.door_state is DoorState.OPEN

    # Reporting

    def state_string(self) -> str:
        return self._state.value

    def direction_string(self) -> str:
        return self.direction.value

    def door_state_string(self) -> str:
        return self.door_state.value

    def utilization_rate(self, now: datetime | None = None) -> float:
        """Completed requests per 100 seconds since the last state change."""
        if not self._completed:
            return 0.0
        now = self._clock() if now is None else now
        total = int((now - self.last_state_change).total_seconds())
        if total == 0:
            return 0.0
        return len(self._completed) * 100.0 / total

    def total_trips(self) -> int:
        return len(self._completed)