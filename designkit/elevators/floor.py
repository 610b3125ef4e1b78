"""Floors of a building and their hall call buttons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Travel direction of a call or an elevator."""

    UP = "UP"
    DOWN = "DOWN"
    NONE = "NONE"


class ButtonState(Enum):
    """State of a hall call button."""

    PRESSED = "PRESSED"
    NOT_PRESSED = "NOT_PRESSED"


@dataclass
class Floor:
    """A single floor with an up and a down call button."""

    floor_number: int
    up_button: ButtonState = ButtonState.NOT_PRESSED
    down_button: ButtonState = ButtonState.NOT_PRESSED
    is_destination: bool = False
    requested_direction: Direction = Direction.NONE

    def has_up_request(self) -> bool:
        return self.up_button is ButtonState.PRESSED

    def has_down_request(self) -> bool:
        return self.down_button is ButtonState.PRESSED

    def has_any_request(self) -> bool:
        return self.has_up_request() or self.has_down_request()

    def clear_up_request(self) -> None:
        self.up_button = ButtonState.NOT_PRESSED

    def clear_down_request(self) -> None:
        self.down_button = ButtonState.NOT_PRESSED

    def clear_all_requests(self) -> None:
        """Release both buttons and forget the requested direction."""
        self.up_button = ButtonState.NOT_PRESSED
        self.down_button = ButtonState.NOT_PRESSED
        self.requested_direction = Direction.NONE

    def direction_string(self) -> str:
        return self.requested_direction.value

    def button_state_string(self) -> str:
        return (
            f"Floor {self.floor_number}: "
            f"UP={self.up_button.value}, DOWN={self.down_button.value}"
        )