"""API tests for department and employee administration."""

from httpx import AsyncClient

from conftest import FakeDocumentBackend


async def test_department_page(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.get("/api/v1/admin/departments?page=1&limit=2", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert [d["name"] for d in data["items"]] == ["engineering", "human-resources"]
    assert (data["total"], data["has_next"], data["has_prev"]) == (3, True, False)


async def test_delete_department_with_employees(
    client: AsyncClient, auth_headers: dict[str, str], fake_backend: FakeDocumentBackend
) -> None:
    response = await client.delete("/api/v1/admin/departments/d-hr", headers=auth_headers)
    assert response.status_code == 400
    message = "Cannot delete department. 3 employees are assigned to it."
    data = response.json()
    assert data["message"] == message
    assert data["notification"] == {"level": "error", "message": message}


async def test_create_department_name_checked_by_backend(
    client: AsyncClient, auth_headers: dict[str, str], fake_backend: FakeDocumentBackend
) -> None:
    message = "Department name must not contain spaces"
    fake_backend.fail_next("POST", "/admin/departments", 400, {"message": message})
    response = await client.post(
        "/api/v1/admin/departments",
        json={"name": "Sales Team", "display_name": "Sales Team"},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json()["message"] == message
    assert fake_backend.calls("POST", "/admin/departments")[0]["name"] == "sales team"


async def test_create_and_update_department(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    created = await client.post(
        "/api/v1/admin/departments",
        json={"name": "legal", "display_name": "Legal"},
        headers=auth_headers,
    )
    assert created.status_code == 201
    department = created.json()["department"]
    assert department["can_delete"] is True

    updated = await client.put(
        f"/api/v1/admin/departments/{department['id']}",
        json={"display_name": "Legal & Compliance", "is_active": False},
        headers=auth_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["department"]["display_name"] == "Legal & Compliance"
    assert updated.json()["department"]["is_active"] is False
    assert updated.json()["notification"]["message"] == "Department updated successfully"


async def test_employee_crud(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    listed = await client.get("/api/v1/admin/employees", headers=auth_headers)
    assert listed.json()["total"] == 3

    created = await client.post(
        "/api/v1/admin/employees",
        json={
            "name": "Dan",
            "email": "dan@example.com",
            "password": "dan-pass",
            "role": "manager",
            "department": "finance",
        },
        headers=auth_headers,
    )
    assert created.status_code == 201
    employee = created.json()["employee"]
    assert employee["role"] == "manager"

    deleted = await client.delete(f"/api/v1/admin/employees/{employee['id']}", headers=auth_headers)
    assert deleted.json()["notification"]["message"] == "Employee deleted successfully"


async def test_admin_requires_bearer(client: AsyncClient) -> None:
    response = await client.get("/api/v1/admin/departments")
    assert response.status_code == 401
