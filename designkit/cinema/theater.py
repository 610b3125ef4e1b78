"""Theaters and the screens they house."""

from __future__ import annotations

from dataclasses import dataclass, field

from designkit.cinema.screen import Screen


@dataclass(eq=False)
class Theater:
    """A cinema venue holding one or more screens."""

    theater_id: str
    name: str
    location: str
    address: str
    phone: str
    is_active: bool = True
    screens: list[Screen] = field(default_factory=list, init=False)

    def get_screen(self, screen_id: str) -> Screen | None:
        return next((s for s in self.screens if s.screen_id == screen_id), None)

    def total_screens(self) -> int:
        return len(self.screens)

    def add_screen(self, screen: Screen) -> None:
        self.screens.append(screen)

    def remove_screen(self, screen_id: str) -> None:
        """Remove the first screen with the id; raises KeyError if there is none."""
        screen = self.get_screen(screen_id)
        if screen is None:
            raise KeyError(f"no such screen: {screen_id}")
        self.screens.remove(screen)

    def has_screen(self, screen_id: str) -> bool:
        return any(s.screen_id == screen_id for s in self.screens)

    def total_seats(self) -> int:
        return sum(s.total_seats() for s in self.screens)

    def available_seats(self) -> int:
        return sum(s.available_seat_count() for s in self.screens)

    def active_screens(self) -> list[Screen]:
        return [s for s in self.screens if s.is_active]

    def theater_info(self) -> str:
        return "\n".join(
            [
                f"Theater: {self.name}",
                f"Location: {self.location}",
                f"Address: {self.address}",
                f"Phone: {self.phone}",
                f"Screens: {self.total_screens()}",
                f"Total Seats: {self.total_seats()}",
                f"Available Seats: {self.available_seats()}",
                f"Status: {'Active' if self.is_active else 'Inactive'}",
            ]
        )