"""Pytest configuration and fixtures for docshare.

HTTP tests run the FastAPI app through httpx.ASGITransport. The document
backend is replaced by FakeDocumentBackend, an in-memory implementation of
its REST API mounted on httpx.MockTransport, so the real
DocumentBackendClient (and its normalization) is exercised end to end.
"""

import copy
import json
import os
import re
from collections.abc import AsyncIterator
from typing import Any

# Settings are read when docshare.main is imported.
os.environ.setdefault("BACKEND_API_URL", "http://backend.test/api")
os.environ.setdefault("VIEW_STATE_PATH", "")

import httpx
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from docshare.application.dtos.auth import Credentials
from docshare.core.config import get_settings
from docshare.infrastructure.backend import DocumentBackendClient
from docshare.infrastructure.view_state import InMemoryViewStateStore

BACKEND_URL = "http://backend.test/api"


def _json(status: int, body: Any = None) -> httpx.Response:
    if body is None:
        return httpx.Response(status)
    return httpx.Response(status, json=body)


class FakeDocumentBackend:
    """In-memory document backend speaking the backend's JSON shapes.

    Records use "_id" or "id" inconsistently on purpose. Every request is
    appended to self.requests as (method, path, json_body). Use fail_next()
    to make the next matching call answer with an error.
    """

    def __init__(self) -> None:
        self.requests: list[tuple[str, str, Any]] = []
        self.request_ids: list[str | None] = []
        self._failures: dict[tuple[str, str], tuple[int, Any]] = {}
        self._seq = 0
        self.departments: list[dict] = [
            {"_id": "d-eng", "name": "engineering", "displayName": "Engineering",
             "description": "Builds things", "isActive": True, "employeeCount": 2},
            {"_id": "d-hr", "name": "human-resources", "displayName": "Human Resources",
             "isActive": True, "employeeCount": 3},
            {"_id": "d-fin", "name": "finance", "displayName": "Finance",
             "isActive": False, "employeeCount": 0},
        ]
        self.users: list[dict] = [
            {"_id": "u-admin", "id": "u-admin", "name": "Ada Admin", "email": "admin@example.com",
             "password": "admin-pass", "role": "admin", "department": self.departments[0]},
            {"_id": "u-alice", "name": "Alice", "email": "alice@example.com",
             "password": "alice-pass", "role": "employee", "department": self.departments[0]},
            {"id": "u-bob", "name": "Bob", "email": "bob@example.com",
             "password": "bob-pass", "role": "manager", "department": self.departments[1]},
        ]
        self.tokens: dict[str, str] = {
            "token-admin": "u-admin",
            "token-alice": "u-alice",
            "token-bob": "u-bob",
        }
        self.folders: list[dict] = [
            {"_id": "f-root", "name": "Root", "parent": None, "owner": "u-admin",
             "hasAccess": True, "canViewContent": True, "departmentAccess": [],
             "sharedWith": [], "createdAt": "2024-01-05T10:00:00.000Z"},
            {"_id": "f-restricted", "name": "Restricted", "parent": {"_id": "f-root"},
             "owner": {"_id": "u-bob", "name": "Bob"}, "hasAccess": True,
             "canViewContent": False, "departmentAccess": [self.departments[1]],
             "sharedWith": []},
            {"_id": "f-hidden-child", "name": "Hidden Child", "parent": "f-restricted",
             "owner": "u-bob", "hasAccess": True, "canViewContent": True},
            {"_id": "f-secret", "name": "Secret", "parent": None, "owner": "u-bob",
             "hasAccess": False, "canViewContent": True},
            {"_id": "f-shared", "name": "Shared", "parent": None, "owner": "u-admin",
             "departmentAccess": ["d-eng"], "sharedWith": [{"_id": "u-alice"}]},
        ]
        self.documents: list[dict] = [
            {"_id": "doc-1", "name": "report.pdf", "originalName": "Q1 report.pdf",
             "mimeType": "application/pdf", "size": 2048, "folder": {"_id": "f-root"},
             "owner": {"_id": "u-admin"}, "isStarred": False,
             "tags": [{"id": "t-1", "name": "urgent", "color": "#FF0000"}],
             "sharedWith": [{"_id": "u-alice"}],
             "permissions": {"read": ["u-alice"], "write": ["u-alice", "u-bob"], "delete": []},
             "createdAt": "2024-02-01T08:30:00Z"},
            {"_id": "doc-2", "name": "notes.txt", "originalName": "notes.txt",
             "mimeType": "text/plain", "size": 12, "folder": "f-shared",
             "owner": "u-admin", "isStarred": True, "tags": [], "sharedWith": []},
        ]
        self.tags: list[dict] = [
            {"id": "t-1", "name": "urgent", "color": "#FF0000", "owner": "u-admin"},
            {"_id": "t-2", "name": "legacy", "color": "red", "owner": "u-admin"},
        ]
        self.invoices: list[dict] = [
            {"_id": "inv-1", "vendorName": "Acme Supplies", "invoiceDate": "2024-03-01T00:00:00.000Z",
             "invoiceValue": 1200.5, "invoiceQty": 3,
             "document": {"_id": "doc-1", "originalName": "Q1 report.pdf", "mimeType": "application/pdf"},
             "createdAt": "2024-03-02T09:00:00Z"},
            {"_id": "inv-2", "vendorName": "Globex", "invoiceDate": "2024-04-15T00:00:00.000Z",
             "invoiceValue": 80, "invoiceQty": 1, "document": None},
        ]

    # helpers

    def token_for(self, user_id: str) -> str:
        return next(t for t, uid in self.tokens.items() if uid == user_id)

    def fail_next(self, method: str, path: str, status: int, body: Any = None) -> None:
        self._failures[(method, path)] = (status, body)

    def calls(self, method: str, path: str) -> list[Any]:
        return [body for m, p, body in self.requests if m == method and p == path]

    def _next_id(self, prefix: str) -> str:
        self._seq += 1
        return f"{prefix}-new-{self._seq}"

    @staticmethod
    def _rid(record: dict) -> str:
        return record.get("_id") or record.get("id")

    def _find(self, records: list[dict], rid: str) -> dict | None:
        return next((r for r in records if self._rid(r) == rid), None)

    def _public_user(self, user: dict) -> dict:
        return {k: v for k, v in user.items() if k != "password"}

    # transport entry point

    def handle(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path.startswith("/api"):
            path = path[len("/api"):]
        body = None
        content_type = request.headers.get("content-type", "")
        if request.content and content_type.startswith("application/json"):
            body = json.loads(request.content)
        self.requests.append((request.method, path, body))
        self.request_ids.append(request.headers.get("x-request-id"))

        failure = self._failures.pop((request.method, path), None)
        if failure is not None:
            return _json(*failure)

        if path == "/auth/login" and request.method == "POST":
            return self._login(body)
        if path == "/auth/register" and request.method == "POST":
            return self._register(body)

        auth = request.headers.get("authorization", "")
        user_id = self.tokens.get(auth.removeprefix("Bearer "))
        if user_id is None:
            return _json(401, {"message": "Please authenticate"})
        return self._route(request, path, body, user_id)

    def _login(self, body: dict) -> httpx.Response:
        for user in self.users:
            if user["email"] == body.get("email") and user["password"] == body.get("password"):
                token = self.token_for(self._rid(user))
                return _json(200, {"token": token, "user": self._public_user(user)})
        return _json(401, {"message": "Invalid credentials"})

    def _register(self, body: dict) -> httpx.Response:
        if any(u["email"] == body["email"] for u in self.users):
            return _json(400, {"message": "User already exists"})
        user = dict(body, _id=self._next_id("u"))
        self.users.append(user)
        token = f"token-{user['_id']}"
        self.tokens[token] = user["_id"]
        return _json(201, {"token": token, "user": self._public_user(user)})

    def _route(self, request: httpx.Request, path: str, body: Any, user_id: str) -> httpx.Response:
        method = request.method
        parts = path.strip("/").split("/")
        head = parts[0]
        if head == "auth" and parts[1:] == ["me"]:
            return _json(200, {"user": self._public_user(self._find(self.users, user_id))})
        if head == "folders":
            return self._folders(method, parts[1:], body, request, user_id)
        if head == "documents":
            return self._documents(method, parts[1:], body, request, user_id)
        if head == "tags":
            return self._tags(method, parts[1:], body, user_id)
        if head == "invoices":
            return self._invoices(method, parts[1:], body, request)
        if head == "users" and method == "GET":
            return _json(200, [self._public_user(u) for u in self.users])
        if head == "admin" and parts[1:2] == ["departments"]:
            return self._departments(method, parts[2:], body, request)
        if head == "admin" and parts[1:2] == ["employees"]:
            return self._employees(method, parts[2:], body)
        return _json(404, {"message": f"Route not found: {method} {path}"})

    def _folders(self, method, rest, body, request, user_id) -> httpx.Response:
        if not rest:
            if method == "GET":
                return _json(200, copy.deepcopy(self.folders))
            folder = {
                "_id": self._next_id("f"),
                "name": body["name"],
                "parent": body.get("parent"),
                "owner": user_id,
                "departmentAccess": body.get("departmentAccess", []),
                "sharedWith": [],
            }
            self.folders.append(folder)
            return _json(201, folder)
        folder = self._find(self.folders, rest[0])
        if folder is None:
            return _json(404, {"message": "Folder not found"})
        action = rest[1] if len(rest) > 1 else None
        if action is None and method == "GET":
            return _json(200, copy.deepcopy(folder))
        if action is None and method == "PUT":
            folder["name"] = body["name"]
            if "departmentAccess" in body:
                folder["departmentAccess"] = list(body["departmentAccess"])
            return _json(200, folder)
        if action is None and method == "DELETE":
            self.folders.remove(folder)
            return _json(200, {"message": "Folder deleted"})
        if action == "contents":
            if folder.get("canViewContent") is False or folder.get("hasAccess") is False:
                return _json(403, {"message": "Access denied"})
            fid = self._rid(folder)
            children = [f for f in self.folders if self._parent_of(f) == fid]
            docs = [d for d in self.documents if self._folder_of(d) == fid]
            return _json(200, {"folders": children, "documents": docs})
        if action == "share-department" and method == "PUT":
            folder["departmentAccess"] = [
                self._find(self.departments, d) or d for d in body["departments"]
            ]
            return _json(200, folder)
        if action == "share" and method == "PUT":
            folder["sharedWith"] = list(body["userIds"])
            return _json(200, folder)
        return _json(404, {"message": "Route not found"})

    @staticmethod
    def _parent_of(folder: dict) -> str | None:
        parent = folder.get("parent")
        return parent.get("_id") if isinstance(parent, dict) else parent

    @staticmethod
    def _folder_of(document: dict) -> str | None:
        folder = document.get("folder")
        return folder.get("_id") if isinstance(folder, dict) else folder

    def _documents(self, method, rest, body, request, user_id) -> httpx.Response:
        if not rest and method == "GET":
            params = request.url.params
            docs = self.documents
            if params.get("folder"):
                docs = [d for d in docs if self._folder_of(d) == params["folder"]]
            if params.get("starred") == "true":
                docs = [d for d in docs if d.get("isStarred")]
            if params.get("invoices") == "true":
                invoiced = {(i.get("document") or {}).get("_id") for i in self.invoices}
                docs = [d for d in docs if self._rid(d) in invoiced]
            if params.get("search"):
                docs = [d for d in docs if params["search"].lower() in d["name"].lower()]
            return _json(200, copy.deepcopy(docs))
        if rest == ["upload"] and method == "POST":
            raw = request.content
            filename = re.search(rb'filename="([^"]+)"', raw)
            folder = re.search(rb'name="folder"\r\n\r\n([^\r]*)', raw)
            document = {
                "_id": self._next_id("doc"),
                "name": filename.group(1).decode() if filename else "upload",
                "originalName": filename.group(1).decode() if filename else "upload",
                "mimeType": "application/pdf",
                "size": len(raw),
                "folder": folder.group(1).decode() if folder else None,
                "owner": user_id,
                "isStarred": False,
                "tags": [],
                "sharedWith": [],
            }
            self.documents.append(document)
            return _json(201, document)
        document = self._find(self.documents, rest[0])
        if document is None:
            return _json(404, {"message": "Document not found"})
        action = rest[1] if len(rest) > 1 else None
        if action is None and method == "GET":
            return _json(200, copy.deepcopy(document))
        if action is None and method == "DELETE":
            self.documents.remove(document)
            return _json(200, {"message": "Document deleted"})
        if action == "star" and method == "PUT":
            document["isStarred"] = bool(body["starred"])
            return _json(200, document)
        if action == "download":
            return httpx.Response(
                200,
                content=b"%PDF-1.4 fake",
                headers={
                    "content-type": document["mimeType"],
                    "content-disposition": f'attachment; filename="{document["originalName"]}"',
                },
            )
        if action == "share" and method == "PUT":
            document["sharedWith"] = list(body["userIds"])
            document["permissions"] = body["permissions"]
            return _json(200, document)
        return _json(404, {"message": "Route not found"})

    def _invoices(self, method, rest, body, request) -> httpx.Response:
        if not rest and method == "POST":
            document = self._find(self.documents, body["document"])
            invoice = dict(body, _id=self._next_id("inv"))
            invoice["document"] = (
                {k: document[k] for k in ("_id", "originalName", "mimeType")} if document else None
            )
            self.invoices.append(invoice)
            return _json(201, invoice)
        if method != "GET" or rest not in ([], ["export"]):
            return _json(404, {"message": "Route not found"})
        params = request.url.params
        records = self.invoices
        if params.get("startDate"):
            records = [i for i in records if i["invoiceDate"][:10] >= params["startDate"]]
        if params.get("endDate"):
            records = [i for i in records if i["invoiceDate"][:10] <= params["endDate"]]
        if params.get("vendorName"):
            needle = params["vendorName"].lower()
            records = [i for i in records if needle in i["vendorName"].lower()]
        if params.get("minValue"):
            records = [i for i in records if i["invoiceValue"] >= float(params["minValue"])]
        if params.get("maxValue"):
            records = [i for i in records if i["invoiceValue"] <= float(params["maxValue"])]
        if rest == ["export"]:
            return httpx.Response(
                200,
                content=b"PK\x03\x04" + ",".join(self._rid(i) for i in records).encode(),
                headers={
                    "content-type": (
                        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
                    ),
                },
            )
        return _json(200, copy.deepcopy(records))

    def _tags(self, method, rest, body, user_id) -> httpx.Response:
        if not rest:
            if method == "GET":
                return _json(200, copy.deepcopy(self.tags))
            tag = {"id": self._next_id("t"), "name": body["name"], "color": body["color"],
                   "owner": user_id}
            self.tags.append(tag)
            return _json(201, tag)
        tag = self._find(self.tags, rest[0])
        if tag is None:
            return _json(404, {"message": "Tag not found"})
        if method == "PUT":
            tag.update(name=body["name"], color=body["color"])
            return _json(200, tag)
        self.tags.remove(tag)
        return _json(200, {"message": "Tag deleted"})

    def _departments(self, method, rest, body, request) -> httpx.Response:
        if not rest:
            if method == "GET":
                page = int(request.url.params.get("page", 1))
                limit = int(request.url.params.get("limit", 10))
                start = (page - 1) * limit
                return _json(200, {
                    "departments": self.departments[start:start + limit],
                    "total": len(self.departments),
                })
            if any(d["name"] == body["name"] for d in self.departments):
                return _json(400, {"message": "Department name already exists"})
            department = dict(body, _id=self._next_id("d"), isActive=True, employeeCount=0)
            self.departments.append(department)
            return _json(201, department)
        department = self._find(self.departments, rest[0])
        if department is None:
            return _json(404, {"message": "Department not found"})
        if method == "PUT":
            department.update(body)
            return _json(200, department)
        count = department.get("employeeCount", 0)
        if count:
            return _json(400, {
                "message": f"Cannot delete department. {count} employees are assigned to it."
            })
        self.departments.remove(department)
        return _json(200, {"message": "Department deleted"})

    def _employees(self, method, rest, body) -> httpx.Response:
        if not rest:
            if method == "GET":
                return _json(200, [self._public_user(u) for u in self.users])
            user = dict(body, _id=self._next_id("u"))
            self.users.append(user)
            return _json(201, self._public_user(user))
        user = self._find(self.users, rest[0])
        if user is None:
            return _json(404, {"message": "Employee not found"})
        if method == "PUT":
            user.update(body)
            return _json(200, self._public_user(user))
        self.users.remove(user)
        return _json(200, {"message": "Employee deleted"})


@pytest.fixture
def fake_backend() -> FakeDocumentBackend:
    return FakeDocumentBackend()


@pytest.fixture
async def backend_client(fake_backend: FakeDocumentBackend) -> AsyncIterator[DocumentBackendClient]:
    """Real DocumentBackendClient talking to the fake backend over MockTransport."""
    http = httpx.AsyncClient(
        transport=httpx.MockTransport(fake_backend.handle), base_url=BACKEND_URL
    )
    client = DocumentBackendClient(BACKEND_URL, http_client=http)
    yield client
    await client.aclose()
    await http.aclose()


@pytest.fixture
def admin_credentials() -> Credentials:
    return Credentials(token="token-admin")


@pytest.fixture
def view_state_store() -> InMemoryViewStateStore:
    return InMemoryViewStateStore()


@pytest.fixture
def app(
    backend_client: DocumentBackendClient, view_state_store: InMemoryViewStateStore
) -> FastAPI:
    """Fresh app with the fake backend and an in-memory view-state store on app.state."""
    get_settings.cache_clear()
    from docshare.main import create_app

    application = create_app()
    application.state.backend = backend_client
    application.state.view_state_store = view_state_store
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Bearer headers for the seeded admin user."""
    return {"Authorization": "Bearer token-admin"}
