"""Library staff and what their role lets them manage."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LibrarianRole(Enum):
    """Seniority of a staff member."""

    JUNIOR = "Junior"
    SENIOR = "Senior"
    MANAGER = "Manager"
    ADMIN = "Admin"


_SENIOR_ROLES = frozenset(
    {LibrarianRole.SENIOR, LibrarianRole.MANAGER, LibrarianRole.ADMIN}
)


@dataclass(eq=False)
class Librarian:
    """A member of the library staff."""

    employee_id: str
    name: str
    email: str
    phone: str
    role: LibrarianRole
    department: str
    is_active: bool = True

    def can_manage_books(self) -> bool:
        return self.is_active and self.role in LibrarianRole

    def can_manage_members(self) -> bool:
        return self.is_active and self.role in _SENIOR_ROLES

    def can_manage_fines(self) -> bool:
        return self.is_active and self.role in _SENIOR_ROLES

    def role_string(self) -> str:
        return self.role.value