"""DTOs for department and employee administration."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a paginated listing."""

    items: tuple[T, ...]
    total: int
    page: int
    limit: int

    @property
    def has_next(self) -> bool:
        return self.page * self.limit < self.total

    @property
    def has_prev(self) -> bool:
        return self.page > 1


@dataclass(frozen=True)
class DepartmentCreate:
    name: str
    display_name: str
    description: str | None = None


@dataclass(frozen=True)
class DepartmentUpdate:
    """Editable department fields. The slug name is immutable and absent here."""

    display_name: str
    description: str | None = None
    is_active: bool = True


@dataclass(frozen=True)
class EmployeeCreate:
    name: str
    email: str
    password: str
    role: str
    department: str


@dataclass(frozen=True)
class EmployeeUpdate:
    """Editable employee fields. Passwords are not changed through updates."""

    name: str
    email: str
    role: str
    department: str
