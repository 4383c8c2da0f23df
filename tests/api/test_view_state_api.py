"""API tests for the remembered view state and tags."""

from httpx import AsyncClient


async def test_defaults(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.get("/api/v1/view-state", headers=auth_headers)
    assert response.json() == {
        "current_folder": None,
        "current_filter": "all",
        "expanded_folders": [],
    }


async def test_patch_only_changes_sent_fields(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    await client.patch(
        "/api/v1/view-state", json={"current_folder": "f-root"}, headers=auth_headers
    )
    response = await client.patch(
        "/api/v1/view-state", json={"current_filter": "mydrives"}, headers=auth_headers
    )
    assert response.json()["current_folder"] == "f-root"
    assert response.json()["current_filter"] == "mydrives"

    response = await client.patch(
        "/api/v1/view-state", json={"current_folder": None}, headers=auth_headers
    )
    assert response.json()["current_folder"] is None
    assert response.json()["current_filter"] == "mydrives"


async def test_toggle_expanded_keeps_selection(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    await client.patch(
        "/api/v1/view-state", json={"current_folder": "f-shared"}, headers=auth_headers
    )
    response = await client.post("/api/v1/view-state/expanded/f-root", headers=auth_headers)
    assert response.json()["expanded_folders"] == ["f-root"]
    assert response.json()["current_folder"] == "f-shared"
    response = await client.post("/api/v1/view-state/expanded/f-root", headers=auth_headers)
    assert response.json()["expanded_folders"] == []


async def test_view_state_is_per_user(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    await client.patch(
        "/api/v1/view-state", json={"current_folder": "f-root"}, headers=auth_headers
    )
    response = await client.get(
        "/api/v1/view-state", headers={"Authorization": "Bearer token-alice"}
    )
    assert response.json()["current_folder"] is None


async def test_tag_crud(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    created = await client.post(
        "/api/v1/tags", json={"name": "draft", "color": "#00FF00"}, headers=auth_headers
    )
    assert created.status_code == 201
    tag = created.json()["tag"]
    assert tag["color"] == "#00ff00"

    bad = await client.put(
        f"/api/v1/tags/{tag['id']}", json={"name": "draft", "color": "green"}, headers=auth_headers
    )
    assert bad.status_code == 400
    assert bad.json()["details"] == {"field": "color"}

    deleted = await client.delete(f"/api/v1/tags/{tag['id']}", headers=auth_headers)
    assert deleted.json()["notification"]["message"] == "Tag deleted successfully"


async def test_users_directory(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.get("/api/v1/users", headers=auth_headers)
    assert {u["id"] for u in response.json()} == {"u-admin", "u-alice", "u-bob"}
    assert all("password" not in u for u in response.json())
