import pytest

from designkit.elevators.floor import ButtonState, Direction, Floor


def test_new_floor_has_no_requests():
    floor = Floor(4)
    assert floor.floor_number == 4
    assert floor.has_any_request() is False
    assert floor.requested_direction is Direction.NONE
    assert floor.is_destination is False


def test_up_button_registers_request():
    floor = Floor(2)
    floor.up_button = ButtonState.PRESSED
    assert floor.has_up_request()
    assert not floor.has_down_request()
    assert floor.has_any_request()


def test_down_button_registers_request():
    floor = Floor(2)
    floor.down_button = ButtonState.PRESSED
    assert floor.has_down_request()
    assert not floor.has_up_request()
    assert floor.has_any_request()


def test_clear_single_buttons():
    floor = Floor(1, up_button=ButtonState.PRESSED, down_button=ButtonState.PRESSED)
    floor.clear_up_request()
    assert not floor.has_up_request()
    assert floor.has_down_request()
    floor.clear_down_request()
    assert not floor.has_any_request()


def test_clear_all_requests_resets_direction():
    floor = Floor(
        5,
        up_button=ButtonState.PRESSED,
        down_button=ButtonState.PRESSED,
        requested_direction=Direction.UP,
    )
    floor.clear_all_requests()
    assert not floor.has_any_request()
    assert floor.requested_direction is Direction.NONE


@pytest.mark.parametrize("direction", list(Direction))
def test_direction_string_names_direction(direction):
    floor = Floor(3, requested_direction=direction)
    assert floor.direction_string() == direction.name


def test_button_state_string_format():
    floor = Floor(3, up_button=ButtonState.PRESSED)
    assert floor.button_state_string() == "Floor 3: UP=PRESSED, DOWN=NOT_PRESSED"


def test_button_state_string_reflects_changes():
    floor = Floor(-1)
    floor.down_button = ButtonState.PRESSED
    text = floor.button_state_string()
    assert text.startswith("Floor -1: ")
    assert "DOWN=PRESSED" in text
    assert "UP=NOT_PRESSED" in text