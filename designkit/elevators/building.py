"""A building that owns floors, elevators, a scheduler and the request log."""

from __future__ import annotations

from collections import Counter
from datetime import datetime

from designkit.elevators.elevator import DoorState, Elevator, ElevatorState
from designkit.elevators.floor import ButtonState, Direction, Floor
from designkit.elevators.request import Request, RequestStatus, RequestType
from designkit.elevators.scheduler import Scheduler, SchedulingAlgorithm


class Building:
    """Floors numbered from ``-basement_floors`` to ``total_floors``, skipping 0."""

    def __init__(
        self,
        building_id: str,
        building_name: str,
        total_floors: int,
        basement_floors: int = 0,
    ) -> None:
        self.building_id = building_id
        self.building_name = building_name
        self._total_floors = total_floors
        self._basement_floors = basement_floors
        self._floors: list[Floor] = []
        self._elevators: list[Elevator] = []
        self._requests: list[Request] = []
        self.scheduler: Scheduler = Scheduler()
        self.simulation_start_time: datetime | None = None
        self.is_simulation_running = False
        self.initialize_floors()

    # Configuration

    @property
    def total_floors(self) -> int:
        return self._total_floors

    @property
    def basement_floors(self) -> int:
        return self._basement_floors

    def set_total_floors(self, floors: int) -> None:
        self._total_floors = floors
        self.initialize_floors()

    def set_basement_floors(self, basements: int) -> None:
        self._basement_floors = basements
        self.initialize_floors()

    # Floors

    def initialize_floors(self) -> None:
        """Rebuild the floor list; there is no floor 0."""
        self._floors = [
            Floor(number)
            for number in range(-self._basement_floors, self._total_floors + 1)
            if number != 0
        ]

    @property
    def floors(self) -> list[Floor]:
        return list(self._floors)

    def get_floor(self, floor_number: int) -> Floor | None:
        return next((f for f in self._floors if f.floor_number == floor_number), None)

    def floors_with_requests(self) -> list[Floor]:
        return [f for f in self._floors if f.has_any_request()]

    # Elevators

    @property
    def elevators(self) -> list[Elevator]:
        return list(self._elevators)

    @property
    def elevator_count(self) -> int:
        return len(self._elevators)

    def add_elevator(self, elevator: Elevator) -> None:
        self._elevators.append(elevator)
        self.scheduler.add_elevator(elevator)

    def remove_elevator(self, elevator_id: str) -> None:
        self._elevators = [e for e in self._elevators if e.elevator_id != elevator_id]
        self.scheduler.remove_elevator(elevator_id)

    def get_elevator(self, elevator_id: str) -> Elevator | None:
        return next((e for e in self._elevators if e.elevator_id == elevator_id), None)

    def operational_elevators(self) -> list[Elevator]:
        return [e for e in self._elevators if e.is_operational]

    # Scheduler

    def set_scheduler(self, scheduler: Scheduler) -> None:
        """Replace the scheduler and register every existing elevator with it."""
        self.scheduler = scheduler
        for elevator in self._elevators:
            scheduler.add_elevator(elevator)

    def set_scheduling_algorithm(self, algorithm: SchedulingAlgorithm) -> None:
        self.scheduler.algorithm = algorithm

    # Requests

    def _check_floor(self, floor_number: int) -> None:
        if not self.is_valid_floor(floor_number):
            raise ValueError(f"invalid floor: {floor_number}")

    def create_external_request(self, source_floor: int, direction: Direction) -> Request:
        """Create a hall call and press the matching floor button."""
        self._check_floor(source_floor)
        request = Request(source_floor, source_floor, direction, RequestType.EXTERNAL)
        floor = self.get_floor(source_floor)
        if floor is not None:
            if direction is Direction.UP:
                floor.up_button = ButtonState.PRESSED
            elif direction is Direction.DOWN:
                floor.down_button = ButtonState.PRESSED
        return request

    def create_internal_request(self, source_floor: int, destination_floor: int) -> Request:
        """Create a car call from one floor to another."""
        self._check_floor(source_floor)
        self._check_floor(destination_floor)
        direction = Direction.UP if destination_floor > source_floor else Direction.DOWN
        return Request(source_floor, destination_floor, direction, RequestType.INTERNAL)

    def submit_request(self, request: Request) -> None:
        self._requests.append(request)
        self.scheduler.add_request(request)

    @property
    def all_requests(self) -> list[Request]:
        return list(self._requests)

    @property
    def total_requests(self) -> int:
        return len(self._requests)

    def pending_requests(self) -> list[Request]:
        return [r for r in self._requests if r.is_pending()]

    def completed_requests(self) -> list[Request]:
        return [r for r in self._requests if r.is_completed()]

    def clear_all_requests(self) -> None:
        self._requests.clear()

    # Simulation

    def start_simulation(self) -> None:
        self.is_simulation_running = True
        self.simulation_start_time = datetime.now()

    def stop_simulation(self) -> None:
        self.is_simulation_running = False

    def step_simulation(self) -> None:
        """Advance every operational elevator by one step, then schedule."""
        if not self.is_simulation_running:
            return
        for elevator in self._elevators:
            if not elevator.is_operational:
                continue
            request = elevator.next_request()
            if request is None:
                if elevator.is_moving():
                    elevator.stop()
                continue
            if elevator.current_floor == request.source_floor:
                elevator.open_door()
                if elevator.door_state is DoorState.OPEN:
                    elevator.close_door()
                    request.status = RequestStatus.ASSIGNED
            else:
                if elevator.current_floor < request.source_floor:
                    elevator.direction = Direction.UP
                    elevator.set_state(ElevatorState.MOVING_UP)
                else:
                    elevator.direction = Direction.DOWN
                    elevator.set_state(ElevatorState.MOVING_DOWN)
                elevator.move()
        self.scheduler.schedule_requests()

    def run_simulation(self, steps: int) -> None:
        self.start_simulation()
        for _ in range(steps):
            self.step_simulation()
        self.stop_simulation()

    # Statistics

    def average_wait_time(self) -> float:
        completed = self.completed_requests()
        if not completed:
            return 0.0
        return sum(r.wait_time() for r in completed) / len(completed)

    def average_travel_time(self) -> float:
        completed = self.completed_requests()
        if not completed:
            return 0.0
        return sum(r.total_time() for r in completed) / len(completed)

    def completed_requests_count(self) -> int:
        return len(self.completed_requests())

    def system_utilization(self) -> float:
        if not self._elevators:
            return 0.0
        total = sum(e.utilization_rate() for e in self._elevators)
        return total / len(self._elevators)

    def most_utilized_elevators(self, count: int = 3) -> list[Elevator]:
        ranked = sorted(self._elevators, key=lambda e: e.utilization_rate(), reverse=True)
        return ranked[: max(count, 0)]

    def most_requested_floors(self, count: int = 5) -> list[int]:
        """Floors ranked by how often they appear as a source or car destination."""
        counts: Counter[int] = Counter()
        for request in self._requests:
            counts[request.source_floor] += 1
            if request.request_type is RequestType.INTERNAL:
                counts[request.destination_floor] += 1
        return [floor for floor, _ in counts.most_common(max(count, 0))]

    def elevator_trip_counts(self) -> dict[str, int]:
        return {e.elevator_id: e.total_trips() for e in self._elevators}

    # Emergency and maintenance

    def emergency_stop_all(self) -> None:
        for elevator in self._elevators:
            elevator.emergency_stop()
        self.stop_simulation()

    def set_elevator_maintenance(self, elevator_id: str, maintenance: bool) -> None:
        elevator = self.get_elevator(elevator_id)
        if elevator is None:
            return
        elevator.is_operational = not maintenance
        elevator.set_state(ElevatorState.MAINTENANCE if maintenance else ElevatorState.IDLE)

    def is_elevator_in_maintenance(self, elevator_id: str) -> bool:
        elevator = self.get_elevator(elevator_id)
        if elevator is None:
            return False
        return not elevator.is_operational and elevator.state is ElevatorState.MAINTENANCE

    def reset_system(self) -> None:
        """Return every elevator to service, clear buttons and requests."""
        for elevator in self._elevators:
            elevator.is_operational = True
            elevator.set_state(ElevatorState.IDLE)
            elevator.current_load = 0
        for floor in self._floors:
            floor.clear_all_requests()
        self._requests.clear()
        self.scheduler.clear_pending_requests()
        self.stop_simulation()

    # Utilities

    def is_valid_floor(self, floor_number: int) -> bool:
        return (
            -self._basement_floors <= floor_number <= self._total_floors
            and floor_number != 0
        )

    def floor_index(self, floor_number: int) -> int:
        """Position of the floor in the floor list."""
        self._check_floor(floor_number)
        offset = floor_number + self._basement_floors
        return offset if floor_number < 0 else offset - 1

    def floor_display_name(self, floor_number: int) -> str:
        if floor_number == 0:
            return "G"
        if floor_number < 0:
            return f"B{-floor_number}"
        return str(floor_number)

    def status_report(self) -> str:
        lines = [
            f"=== Building Status: {self.building_name} ===",
            f"Building ID: {self.building_id}",
            f"Total Floors: {self._total_floors} (Basements: {self._basement_floors})",
            f"Elevators: {len(self._elevators)}",
            f"Simulation Running: {'Yes' if self.is_simulation_running else 'No'}",
            "",
            "--- Elevator Status ---",
        ]
        lines.extend(
            f"Elevator {e.elevator_id}: Floor {e.current_floor}"
            f" | State: {e.state_string()}"
            f" | Direction: {e.direction_string()}"
            f" | Load: {e.current_load}/{e.capacity}"
            f" | Operational: {'Yes' if e.is_operational else 'No'}"
            for e in self._elevators
        )
        lines.extend(["", "--- Floor Requests ---"])
        lines.extend(
            f"Floor {self.floor_display_name(f.floor_number)}: {f.button_state_string()}"
            for f in self.floors_with_requests()
        )
        return "\n".join(lines)

    def statistics_report(self) -> str:
        lines = [
            f"=== Building Statistics: {self.building_name} ===",
            f"Total Requests: {self.total_requests}",
            f"Completed Requests: {self.completed_requests_count()}",
            f"Average Wait Time: {self.average_wait_time():.2f} seconds",
            f"Average Travel Time: {self.average_travel_time():.2f} seconds",
            f"System Utilization: {self.system_utilization():.2f}%",
            "",
            "--- Elevator Utilization ---",
        ]
        lines.extend(
            f"Elevator {e.elevator_id}: {e.utilization_rate():.2f}% | Trips: {e.total_trips()}"
            for e in self._elevators
        )
        most_utilized = self.most_utilized_elevators(3)
        if most_utilized:
            lines.extend(["", "--- Most Utilized Elevators ---"])
            lines.extend(
                f"Elevator {e.elevator_id}: {e.utilization_rate():.2f}%" for e in most_utilized
            )
        most_requested = self.most_requested_floors(5)
        if most_requested:
            lines.extend(["", "--- Most Requested Floors ---"])
            lines.extend(f"Floor {self.floor_display_name(f)}" for f in most_requested)
        return "\n".join(lines)