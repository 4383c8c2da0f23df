"""Department and employee administration."""

from __future__ import annotations

from docshare.application.dtos.admin import (
    DepartmentCreate,
    DepartmentUpdate,
    EmployeeCreate,
    EmployeeUpdate,
    Page,
)
from docshare.application.dtos.auth import Credentials
from docshare.application.dtos.notification import CommandResult, Notification
from docshare.application.interfaces.backend import IDocumentBackend
from docshare.domain.entities import DepartmentEntity, UserEntity
from docshare.domain.exceptions import ValidationException


def _required(value: str | None, field: str, label: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationException(f"{label} is required", field=field)
    return value


class _PagedAdmin:
    def __init__(
        self,
        backend: IDocumentBackend,
        default_page_size: int = 10,
        max_page_size: int = 100,
    ) -> None:
        self.backend = backend
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    def _paging(self, page: int | None, limit: int | None) -> tuple[int, int]:
        page = max(page or 1, 1)
        limit = min(max(limit or self.default_page_size, 1), self.max_page_size)
        return page, limit


class DepartmentAdminService(_PagedAdmin):
    """List, create, update and delete departments.

    The department name is lowercased and fixed at creation. Its format is
    checked by the backend, whose message reaches the user unmodified, as
    does the rejection of deleting a department that still has employees.
    Updates only carry display name, description and active flag.
    """

    async def list_departments(
        self, credentials: Credentials, page: int | None = None, limit: int | None = None
    ) -> Page[DepartmentEntity]:
        page, limit = self._paging(page, limit)
        return await self.backend.list_departments(credentials, page=page, limit=limit)

    async def create_department(
        self, credentials: Credentials, data: DepartmentCreate
    ) -> CommandResult[DepartmentEntity]:
        name = _required(data.name, "name", "Department name").lower()
        display_name = _required(data.display_name, "display_name", "Display name")
        department = await self.backend.create_department(
            credentials,
            DepartmentCreate(
                name=name,
                display_name=display_name,
                description=(data.description or "").strip() or None,
            ),
        )
        return CommandResult(department, Notification.success("Department created successfully"))

    async def update_department(
        self, credentials: Credentials, department_id: str, data: DepartmentUpdate
    ) -> CommandResult[DepartmentEntity]:
        display_name = _required(data.display_name, "display_name", "Display name")
        department = await self.backend.update_department(
            credentials,
            department_id,
            DepartmentUpdate(
                display_name=display_name,
                description=(data.description or "").strip() or None,
                is_active=data.is_active,
            ),
        )
        return CommandResult(department, Notification.success("Department updated successfully"))

    async def delete_department(
        self, credentials: Credentials, department_id: str
    ) -> CommandResult[str]:
        await self.backend.delete_department(credentials, department_id)
        return CommandResult(
            department_id, Notification.success("Department deleted successfully")
        )


class EmployeeAdminService(_PagedAdmin):
    """List, create, update and delete employees."""

    async def list_employees(
        self, credentials: Credentials, page: int | None = None, limit: int | None = None
    ) -> Page[UserEntity]:
        page, limit = self._paging(page, limit)
        return await self.backend.list_employees(credentials, page=page, limit=limit)

    async def create_employee(
        self, credentials: Credentials, data: EmployeeCreate
    ) -> CommandResult[UserEntity]:
        name = _required(data.name, "name", "Employee name")
        employee = await self.backend.create_employee(
            credentials,
            EmployeeCreate(
                name=name,
                email=(data.email or "").strip(),
                password=data.password,
                role=data.role,
                department=data.department,
            ),
        )
        return CommandResult(employee, Notification.success("Employee created successfully"))

    async def update_employee(
        self, credentials: Credentials, employee_id: str, data: EmployeeUpdate
    ) -> CommandResult[UserEntity]:
        name = _required(data.name, "name", "Employee name")
        employee = await self.backend.update_employee(
            credentials,
            employee_id,
            EmployeeUpdate(
                name=name,
                email=(data.email or "").strip(),
                role=data.role,
                department=data.department,
            ),
        )
        return CommandResult(employee, Notification.success("Employee updated successfully"))

    async def delete_employee(
        self, credentials: Credentials, employee_id: str
    ) -> CommandResult[str]:
        await self.backend.delete_employee(credentials, employee_id)
        return CommandResult(employee_id, Notification.success("Employee deleted successfully"))
