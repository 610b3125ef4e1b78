from datetime import datetime, timedelta

import pytest

from designkit.elevators.building import Building
from designkit.elevators.elevator import Elevator, ElevatorState
from designkit.elevators.floor import ButtonState, Direction
from designkit.elevators.request import Request, RequestStatus, RequestType
from designkit.elevators.scheduler import Scheduler, SchedulingAlgorithm


@pytest.fixture
def building():
    return Building("B1", "Tower", 10, 2)


def test_floors_skip_zero_and_span_range(building):
    numbers = [f.floor_number for f in building.floors]
    assert 0 not in numbers
    assert min(numbers) == -2
    assert max(numbers) == 10
    assert numbers == sorted(numbers)


def test_set_total_and_basement_floors_rebuild(building):
    building.set_total_floors(4)
    building.set_basement_floors(0)
    numbers = [f.floor_number for f in building.floors]
    assert numbers == [1, 2, 3, 4]


def test_get_floor(building):
    assert building.get_floor(-1).floor_number == -1
    assert building.get_floor(0) is None
    assert building.get_floor(11) is None


def test_is_valid_floor(building):
    assert building.is_valid_floor(-2)
    assert building.is_valid_floor(10)
    assert not building.is_valid_floor(0)
    assert not building.is_valid_floor(-3)
    assert not building.is_valid_floor(11)


def test_floor_index_matches_floor_list(building):
    floors = building.floors
    for floor in floors:
        assert floors[building.floor_index(floor.floor_number)] is floor


def test_floor_index_invalid_raises(building):
    with pytest.raises(ValueError):
        building.floor_index(0)


def test_floor_display_name(building):
    assert building.floor_display_name(0) == "G"
    assert building.floor_display_name(-2).startswith("B")
    assert building.floor_display_name(7) == str(7)


def test_external_request_presses_button(building):
    request = building.create_external_request(3, Direction.UP)
    assert request.request_type is RequestType.EXTERNAL
    assert request.destination_floor == request.source_floor == 3
    assert building.get_floor(3).up_button is ButtonState.PRESSED
    assert [f.floor_number for f in building.floors_with_requests()] == [3]


def test_external_request_invalid_floor(building):
    with pytest.raises(ValueError):
        building.create_external_request(0, Direction.UP)


def test_internal_request_direction(building):
    up = building.create_internal_request(1, 5)
    down = building.create_internal_request(5, 1)
    assert up.direction is Direction.UP
    assert down.direction is Direction.DOWN
    with pytest.raises(ValueError):
        building.create_internal_request(1, 42)


def test_submit_request_is_pending(building):
    request = building.create_internal_request(1, 5)
    building.submit_request(request)
    assert building.pending_requests() == [request]
    assert building.scheduler.pending_requests == [request]
    assert building.total_requests == 1
    building.clear_all_requests()
    assert building.all_requests == []


def test_add_and_remove_elevator(building):
    elevator = Elevator("E1", 10)
    building.add_elevator(elevator)
    assert building.get_elevator("E1") is elevator
    assert building.scheduler.get_elevator("E1") is elevator
    building.remove_elevator("E1")
    assert building.get_elevator("E1") is None
    assert building.scheduler.get_elevator("E1") is None
    assert building.elevator_count == 0


def test_set_scheduler_registers_elevators(building):
    elevator = Elevator("E1", 10)
    building.add_elevator(elevator)
    scheduler = Scheduler(SchedulingAlgorithm.FCFS)
    building.set_scheduler(scheduler)
    assert building.scheduler is scheduler
    assert scheduler.elevators == [elevator]
    building.set_scheduling_algorithm(SchedulingAlgorithm.SSTF)
    assert scheduler.algorithm is SchedulingAlgorithm.SSTF


def test_maintenance(building):
    building.add_elevator(Elevator("E1", 10))
    building.set_elevator_maintenance("E1", True)
    assert building.is_elevator_in_maintenance("E1")
    assert building.operational_elevators() == []
    building.set_elevator_maintenance("E1", False)
    assert not building.is_elevator_in_maintenance("E1")
    assert building.get_elevator("E1").state is ElevatorState.IDLE
    assert not building.is_elevator_in_maintenance("missing")


def test_step_without_running_does_nothing(building):
    building.add_elevator(Elevator("E1", 10))
    request = building.create_external_request(3, Direction.UP)
    building.submit_request(request)
    building.step_simulation()
    assert request.is_pending()


def test_run_simulation_assigns_and_moves(building):
    elevator = Elevator("E1", 10)
    building.add_elevator(elevator)
    request = building.create_external_request(3, Direction.DOWN)
    building.submit_request(request)
    building.run_simulation(2)
    assert request.status is RequestStatus.ASSIGNED
    assert request.assigned_elevator_id == "E1"
    assert elevator.current_floor > elevator.min_floor
    assert not building.is_simulation_running


def test_emergency_stop_all(building):
    elevators = [Elevator("E1", 10), Elevator("E2", 10)]
    for elevator in elevators:
        building.add_elevator(elevator)
    building.start_simulation()
    building.emergency_stop_all()
    assert all(e.state is ElevatorState.EMERGENCY for e in elevators)
    assert building.operational_elevators() == []
    assert not building.is_simulation_running


def test_reset_system(building):
    elevator = Elevator("E1", 10)
    building.add_elevator(elevator)
    elevator.current_load = 4
    building.emergency_stop_all()
    request = building.create_external_request(2, Direction.UP)
    building.submit_request(request)
    building.reset_system()
    assert elevator.is_operational
    assert elevator.current_load == 0
    assert elevator.state is ElevatorState.IDLE
    assert building.floors_with_requests() == []
    assert building.all_requests == []
    assert building.scheduler.pending_requests == []


def test_travel_time_statistics(building):
    start = datetime(2024, 1, 1, 12, 0, 0)
    elevator = Elevator("E1", 10, clock=lambda: start + timedelta(seconds=30))
    building.add_elevator(elevator)
    request = Request(1, 5, Direction.UP, RequestType.INTERNAL, request_time=start)
    building.submit_request(request)
    elevator.complete_request(request)
    assert building.completed_requests() == [request]
    assert building.completed_requests_count() == 1
    assert building.average_travel_time() == 30.0
    assert building.average_wait_time() == 0.0
    assert building.elevator_trip_counts() == {"E1": 1}


def test_empty_statistics(building):
    assert building.average_wait_time() == 0.0
    assert building.average_travel_time() == 0.0
    assert building.system_utilization() == 0.0
    assert building.most_utilized_elevators() == []


def test_most_utilized_elevators_clipped(building):
    for name in ("E1", "E2"):
        building.add_elevator(Elevator(name, 10))
    ranked = building.most_utilized_elevators(3)
    assert sorted(e.elevator_id for e in ranked) == ["E1", "E2"]
    assert len(building.most_utilized_elevators(1)) == 1


def test_most_requested_floors(building):
    building.submit_request(building.create_internal_request(1, 5))
    building.submit_request(building.create_external_request(5, Direction.DOWN))
    floors = building.most_requested_floors(5)
    assert floors[0] == 5
    assert set(floors) == {1, 5}
    assert building.most_requested_floors(1) == [5]


def test_reports(building):
    building.add_elevator(Elevator("E1", 10))
    building.submit_request(building.create_external_request(-1, Direction.UP))
    status = building.status_report()
    assert "=== Building Status: Tower ===" in status
    assert "Elevator E1: Floor 1" in status
    assert "Floor B1:" in status
    stats = building.statistics_report()
    assert "Total Requests: 1" in stats
    assert "Completed Requests: 0" in stats
    assert "Average Wait Time: 0.00 seconds" in stats