"""Assignment of requests to elevators under several scheduling policies."""

from __future__ import annotations

from enum import Enum

from designkit.elevators.elevator import Elevator
from designkit.elevators.floor import Direction
from designkit.elevators.request import Request, RequestStatus


class SchedulingAlgorithm(Enum):
    """Policy used to pick an elevator for a request."""

    FCFS = "FCFS"  # first come, first served
    SCAN = "SCAN"  # elevator algorithm
    LOOK = "LOOK"  # improved SCAN
    SSTF = "SSTF"  # shortest seek time first
    PRIORITY = "PRIORITY"  # priority based


class Scheduler:
    """Keeps the elevators and pending requests and matches them up."""

    def __init__(self, algorithm: SchedulingAlgorithm = SchedulingAlgorithm.LOOK) -> None:
        self.algorithm = algorithm
        self._elevators: list[Elevator] = []
        self._pending: list[Request] = []

    @property
    def elevators(self) -> list[Elevator]:
        return list(self._elevators)

    @property
    def pending_requests(self) -> list[Request]:
        return list(self._pending)

    # Elevators

    def add_elevator(self, elevator: Elevator) -> None:
        self._elevators.append(elevator)

    def remove_elevator(self, elevator_id: str) -> None:
        self._elevators = [e for e in self._elevators if e.elevator_id != elevator_id]

    def get_elevator(self, elevator_id: str) -> Elevator | None:
        return next((e for e in self._elevators if e.elevator_id == elevator_id), None)

    # Requests

    def add_request(self, request: Request) -> None:
        self._pending.append(request)

    def remove_request(self, request: Request) -> None:
        self._pending = [r for r in self._pending if r.request_id != request.request_id]

    def clear_pending_requests(self) -> None:
        self._pending.clear()

    # Scheduling

    def assign_request(self, request: Request) -> Elevator | None:
        """Pick an elevator for the request under the current algorithm."""
        handlers = {
            SchedulingAlgorithm.FCFS: self.fcfs_assign,
            SchedulingAlgorithm.SCAN: self.scan_assign,
            SchedulingAlgorithm.LOOK: self.look_assign,
            SchedulingAlgorithm.SSTF: self.sstf_assign,
            SchedulingAlgorithm.PRIORITY: self.priority_assign,
        }
        return handlers.get(self.algorithm, self.look_assign)(request)

    def schedule_requests(self) -> None:
        """Assign every still-pending request that some elevator can take."""
        for request in self._pending:
            if not request.is_pending():
                continue
            elevator = self.assign_request(request)
            if elevator is not None:
                request.status = RequestStatus.ASSIGNED
                request.assigned_elevator_id = elevator.elevator_id
                elevator.add_request(request)

    def fcfs_assign(self, request: Request) -> Elevator | None:
        """First available elevator that can serve the request."""
        return next(
            (e for e in self._available_elevators() if self.can_serve_request(e, request)),
            None,
        )

    def _lowest_cost(self, request: Request) -> Elevator | None:
        best: Elevator | None = None
        best_cost: int | None = None
        for elevator in self._operational_elevators():
            if not self.can_serve_request(elevator, request):
                continue
            cost = self.calculate_cost(elevator, request)
            if best_cost is None or cost < best_cost:
                best, best_cost = elevator, cost
        return best

    def _nearest(self, request: Request) -> Elevator | None:
        best: Elevator | None = None
        best_distance: int | None = None
        for elevator in self._operational_elevators():
            if not self.can_serve_request(elevator, request):
                continue
            distance = elevator.distance_to_floor(request.source_floor)
            if best_distance is None or distance < best_distance:
                best, best_distance = elevator, distance
        return best

    def scan_assign(self, request: Request) -> Elevator | None:
        return self._lowest_cost(request)

    def look_assign(self, request: Request) -> Elevator | None:
        return self._lowest_cost(request)

    def sstf_assign(self, request: Request) -> Elevator | None:
        return self._nearest(request)

    def priority_assign(self, request: Request) -> Elevator | None:
        """Weigh distance, load and request priority; highest score wins."""
        best: Elevator | None = None
        best_score: float | None = None
        for elevator in self._operational_elevators():
            if not self.can_serve_request(elevator, request):
                continue
            distance_score = 1.0 / (1.0 + elevator.distance_to_floor(request.source_floor))
            load_score = 1.0 - elevator.current_load / elevator.capacity
            priority_score = request.priority / 10.0
            score = distance_score * 0.4 + load_score * 0.3 + priority_score * 0.3
            if best_score is None or score > best_score:
                best, best_score = elevator, score
        return best

    # Queries

    def find_nearest_idle_elevator(self, floor: int) -> Elevator | None:
        best: Elevator | None = None
        best_distance: int | None = None
        for elevator in self._elevators:
            if elevator.is_idle() and elevator.can_serve_floor(floor):
                distance = elevator.distance_to_floor(floor)
                if best_distance is None or distance < best_distance:
                    best, best_distance = elevator, distance
        return best

    def find_best_elevator(self, request: Request) -> Elevator | None:
        """Like assign_request, with PRIORITY falling back to the cost rule."""
        if self.algorithm is SchedulingAlgorithm.FCFS:
            return self.fcfs_assign(request)
        if self.algorithm is SchedulingAlgorithm.SSTF:
            return self._nearest(request)
        return self._lowest_cost(request)

    def calculate_cost(self, elevator: Elevator, request: Request) -> int:
        distance = elevator.distance_to_floor(request.source_floor)
        return distance * 2 + elevator.request_count() * 5 + elevator.current_load * 3

    def can_serve_request(self, elevator: Elevator, request: Request) -> bool:
        return (
            elevator.is_operational
            and elevator.can_serve_floor(request.source_floor)
            and elevator.can_serve_floor(request.destination_floor)
            and elevator.current_load < elevator.capacity
        )

    def algorithm_string(self) -> str:
        return self.algorithm.value

    # Helpers

    def _available_elevators(self) -> list[Elevator]:
        return [
            e for e in self._elevators if e.is_operational and e.current_load < e.capacity
        ]

    def _operational_elevators(self) -> list[Elevator]:
        return [e for e in self._elevators if e.is_operational]

    def _total_distance(self, elevator: Elevator, request: Request) -> int:
        to_source = elevator.distance_to_floor(request.source_floor)
        return to_source + abs(request.destination_floor - request.source_floor)

    def _is_direction_compatible(self, elevator: Elevator, request: Request) -> bool:
        if elevator.is_idle():
            return True
        return elevator.direction in (request.direction, Direction.NONE)