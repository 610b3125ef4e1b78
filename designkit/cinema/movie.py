"""Movies shown at the cinema."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Genre(Enum):
    """Genre of a film."""

    ACTION = "Action"
    COMEDY = "Comedy"
    DRAMA = "Drama"
    HORROR = "Horror"
    ROMANCE = "Romance"
    THRILLER = "Thriller"
    SCI_FI = "Sci-Fi"
    DOCUMENTARY = "Documentary"
    ANIMATION = "Animation"
    FAMILY = "Family"


class Rating(Enum):
    """Audience rating."""

    G = "G"
    PG = "PG"
    PG13 = "PG-13"
    R = "R"
    NC17 = "NC-17"


@dataclass(eq=False)
class Movie:
    """A film; ``duration`` is in minutes."""

    movie_id: str
    title: str
    description: str
    genre: Genre
    duration: int
    rating: Rating
    director: str
    cast: list[str] = field(default_factory=list)
    language: str = ""
    is_active: bool = True

    def genre_string(self) -> str:
        return self.genre.value

    def rating_string(self) -> str:
        return self.rating.value

    def duration_string(self) -> str:
        """Duration as ``Xh Ym``; hours are left out when zero."""
        hours, minutes = divmod(self.duration, 60)
        text = f"{hours}h " if hours > 0 else ""
        if minutes > 0 or hours == 0:
            text += f"{minutes}m"
        return text

    def add_cast_member(self, actor: str) -> None:
        if actor not in self.cast:
            self.cast.append(actor)

    def remove_cast_member(self, actor: str) -> None:
        self.cast = [name for name in self.cast if name != actor]