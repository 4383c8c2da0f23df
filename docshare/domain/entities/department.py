"""Department domain entity.

An organizational unit. Folders can be shared with a whole department
(department-scoped access) instead of named users.
"""

from dataclasses import dataclass

from docshare.domain.exceptions import ValidationException


@dataclass(frozen=True)
class DepartmentEntity:
    """Domain entity for a department.

    name is the lowercase slug chosen at creation and never changes.
    employee_count is computed by the backend and is read only here.
    """

    id: str
    name: str
    display_name: str
    description: str | None = None
    is_active: bool = True
    employee_count: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationException("Department ID is required", field="id")

    def can_delete(self) -> bool:
        """Return whether the delete action should be offered.

        Convenience guard only: the backend still decides whether a delete
        succeeds.
        """
        return self.employee_count == 0
