"""Administration API: departments and employees.

The backend decides who may call these; a rejected call (e.g. deleting a
department that still has employees) surfaces the backend's message as is.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from docshare.api.v1.dependencies import (
    CredentialsDep,
    get_department_admin_service,
    get_employee_admin_service,
)
from docshare.application.dtos.admin import (
    DepartmentCreate,
    DepartmentUpdate,
    EmployeeCreate,
    EmployeeUpdate,
)
from docshare.application.use_cases import DepartmentAdminService, EmployeeAdminService
from docshare.schemas.admin import (
    DepartmentCommandResponse,
    DepartmentCreateRequest,
    DepartmentPageResponse,
    DepartmentUpdateRequest,
    EmployeeCommandResponse,
    EmployeeCreateRequest,
    EmployeePageResponse,
    EmployeeUpdateRequest,
)
from docshare.schemas.common import MessageResponse, NotificationSchema
from docshare.schemas.user import DepartmentResponse, UserResponse

router = APIRouter()

DepartmentsDep = Annotated[DepartmentAdminService, Depends(get_department_admin_service)]
EmployeesDep = Annotated[EmployeeAdminService, Depends(get_employee_admin_service)]


@router.get("/departments", response_model=DepartmentPageResponse)
async def list_departments(
    credentials: CredentialsDep,
    departments: DepartmentsDep,
    page: Annotated[int | None, Query(ge=1)] = None,
    limit: Annotated[int | None, Query(ge=1)] = None,
):
    result = await departments.list_departments(credentials, page, limit)
    return DepartmentPageResponse(
        items=[DepartmentResponse.from_entity(d) for d in result.items],
        total=result.total,
        page=result.page,
        limit=result.limit,
        has_next=result.has_next,
        has_prev=result.has_prev,
    )


@router.post("/departments", response_model=DepartmentCommandResponse, status_code=201)
async def create_department(
    body: DepartmentCreateRequest,
    credentials: CredentialsDep,
    departments: DepartmentsDep,
):
    result = await departments.create_department(
        credentials,
        DepartmentCreate(
            name=body.name, display_name=body.display_name, description=body.description
        ),
    )
    return DepartmentCommandResponse(
        department=DepartmentResponse.from_entity(result.value),
        notification=NotificationSchema.from_dto(result.notification),
    )


@router.put("/departments/{department_id}", response_model=DepartmentCommandResponse)
async def update_department(
    department_id: str,
    body: DepartmentUpdateRequest,
    credentials: CredentialsDep,
    departments: DepartmentsDep,
):
    result = await departments.update_department(
        credentials,
        department_id,
        DepartmentUpdate(
            display_name=body.display_name,
            description=body.description,
            is_active=body.is_active,
        ),
    )
    return DepartmentCommandResponse(
        department=DepartmentResponse.from_entity(result.value),
        notification=NotificationSchema.from_dto(result.notification),
    )


@router.delete("/departments/{department_id}", response_model=MessageResponse)
async def delete_department(
    department_id: str,
    credentials: CredentialsDep,
    departments: DepartmentsDep,
):
    result = await departments.delete_department(credentials, department_id)
    return MessageResponse(
        id=result.value, notification=NotificationSchema.from_dto(result.notification)
    )


@router.get("/employees", response_model=EmployeePageResponse)
async def list_employees(
    credentials: CredentialsDep,
    employees: EmployeesDep,
    page: Annotated[int | None, Query(ge=1)] = None,
    limit: Annotated[int | None, Query(ge=1)] = None,
):
    result = await employees.list_employees(credentials, page, limit)
    return EmployeePageResponse(
        items=[UserResponse.from_entity(u) for u in result.items],
        total=result.total,
        page=result.page,
        limit=result.limit,
        has_next=result.has_next,
        has_prev=result.has_prev,
    )


@router.post("/employees", response_model=EmployeeCommandResponse, status_code=201)
async def create_employee(
    body: EmployeeCreateRequest,
    credentials: CredentialsDep,
    employees: EmployeesDep,
):
    result = await employees.create_employee(
        credentials,
        EmployeeCreate(
            name=body.name,
            email=body.email,
            password=body.password,
            role=body.role.value,
            department=body.department,
        ),
    )
    return EmployeeCommandResponse(
        employee=UserResponse.from_entity(result.value),
        notification=NotificationSchema.from_dto(result.notification),
    )


@router.put("/employees/{employee_id}", response_model=EmployeeCommandResponse)
async def update_employee(
    employee_id: str,
    body: EmployeeUpdateRequest,
    credentials: CredentialsDep,
    employees: EmployeesDep,
):
    result = await employees.update_employee(
        credentials,
        employee_id,
        EmployeeUpdate(
            name=body.name, email=body.email, role=body.role.value, department=body.department
        ),
    )
    return EmployeeCommandResponse(
        employee=UserResponse.from_entity(result.value),
        notification=NotificationSchema.from_dto(result.notification),
    )


@router.delete("/employees/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: str,
    credentials: CredentialsDep,
    employees: EmployeesDep,
):
    result = await employees.delete_employee(credentials, employee_id)
    return MessageResponse(
        id=result.value, notification=NotificationSchema.from_dto(result.notification)
    )
