"""Convert backend JSON payloads into domain entities.

The backend identifies records as "_id" on some endpoints and "id" on
others, and returns references either populated (an object) or as a bare
id. Both are collapsed here so nothing past this module sees the raw shape.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from docshare.domain.entities import (
    DepartmentEntity,
    DocumentEntity,
    DocumentPermissions,
    FolderEntity,
    InvoiceDocument,
    InvoiceEntity,
    TagEntity,
    UserEntity,
)
from docshare.domain.enums import UserRole
from docshare.domain.value_objects import HexColor
from docshare.infrastructure.exceptions import BackendProtocolError

logger = logging.getLogger(__name__)

DEFAULT_TAG_COLOR = "#6b7280"


def entity_id(raw: dict[str, Any]) -> str | None:
    """Return the canonical id of a record ("id" first, then "_id")."""
    value = raw.get("id") or raw.get("_id")
    return str(value) if value else None


def ref_id(value: Any) -> str | None:
    """Return the id of a reference that is either populated or a bare id."""
    if value is None or value == "":
        return None
    if isinstance(value, dict):
        return entity_id(value)
    return str(value)


def ref_ids(values: Any) -> tuple[str, ...]:
    """Return ids of a reference list, dropping unresolvable entries and duplicates."""
    ids: list[str] = []
    for value in values or ():
        rid = ref_id(value)
        if rid and rid not in ids:
            ids.append(rid)
    return tuple(ids)


def parse_datetime(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp; a trailing Z is accepted. Unparseable values are None."""
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Ignoring unparseable timestamp %r", value)
        return None


def _require_id(raw: Any, kind: str) -> str:
    if not isinstance(raw, dict):
        raise BackendProtocolError(f"Expected {kind} object, got {type(raw).__name__}")
    rid = entity_id(raw)
    if not rid:
        raise BackendProtocolError(f"{kind} record without id")
    return rid


def to_department(raw: Any) -> DepartmentEntity:
    """Department from a populated object or a bare slug."""
    if isinstance(raw, str):
        return DepartmentEntity(id=raw, name=raw, display_name=raw)
    rid = _require_id(raw, "department")
    name = raw.get("name") or ""
    return DepartmentEntity(
        id=rid,
        name=name,
        display_name=raw.get("displayName") or name,
        description=raw.get("description") or None,
        is_active=bool(raw.get("isActive", True)),
        employee_count=int(raw.get("employeeCount") or 0),
    )


def to_user(raw: Any) -> UserEntity:
    rid = _require_id(raw, "user")
    try:
        role = UserRole(raw.get("role") or UserRole.EMPLOYEE.value)
    except ValueError:
        logger.warning("Unknown role %r for user %s; treating as employee", raw.get("role"), rid)
        role = UserRole.EMPLOYEE
    department = raw.get("department")
    return UserEntity(
        id=rid,
        name=raw.get("name") or "",
        email=raw.get("email") or "",
        role=role,
        department=to_department(department) if department else None,
    )


def _optional_flag(raw: dict[str, Any], key: str) -> bool | None:
    value = raw.get(key)
    return None if value is None else bool(value)


def to_folder(raw: Any) -> FolderEntity:
    rid = _require_id(raw, "folder")
    parent = raw.get("parent", raw.get("parentId"))
    return FolderEntity(
        id=rid,
        name=raw.get("name") or "",
        parent_id=ref_id(parent),
        owner_id=ref_id(raw.get("owner")),
        department_ids=ref_ids(raw.get("departmentAccess")),
        shared_user_ids=ref_ids(raw.get("sharedWith")),
        has_access=_optional_flag(raw, "hasAccess"),
        can_view_content=_optional_flag(raw, "canViewContent"),
        created_at=parse_datetime(raw.get("createdAt")),
        updated_at=parse_datetime(raw.get("updatedAt")),
    )


def to_tag(raw: Any) -> TagEntity:
    rid = _require_id(raw, "tag")
    try:
        color = HexColor(raw.get("color") or "")
    except ValueError:
        logger.warning(
            "Tag %s has invalid color %r; using %s", rid, raw.get("color"), DEFAULT_TAG_COLOR
        )
        color = HexColor(DEFAULT_TAG_COLOR)
    return TagEntity(
        id=rid,
        name=raw.get("name") or "",
        color=color,
        owner_id=ref_id(raw.get("owner")),
    )


def to_document(raw: Any) -> DocumentEntity:
    rid = _require_id(raw, "document")
    permissions = raw.get("permissions") or {}
    name = raw.get("name") or ""
    return DocumentEntity(
        id=rid,
        name=name,
        original_name=raw.get("originalName") or name,
        mime_type=raw.get("mimeType") or "application/octet-stream",
        size=int(raw.get("size") or 0),
        folder_id=ref_id(raw.get("folder")),
        tags=tuple(to_tag(t) for t in raw.get("tags") or () if isinstance(t, dict)),
        owner_id=ref_id(raw.get("owner")),
        is_starred=bool(raw.get("isStarred", False)),
        shared_user_ids=ref_ids(raw.get("sharedWith")),
        permissions=DocumentPermissions(
            read=ref_ids(permissions.get("read")),
            write=ref_ids(permissions.get("write")),
            delete=ref_ids(permissions.get("delete")),
        ),
        created_at=parse_datetime(raw.get("createdAt")),
        updated_at=parse_datetime(raw.get("updatedAt")),
    )


def list_payload(body: Any, key: str) -> tuple[list[Any], int]:
    """Return (items, total) from {key: [...], "total": n} or a bare list."""
    if isinstance(body, list):
        return body, len(body)
    if isinstance(body, dict):
        items = body.get(key)
        if isinstance(items, list):
            total = body.get("total")
            return items, int(total) if total is not None else len(items)
    raise BackendProtocolError(f"Expected a list of {key}")


def _invoice_document(raw: Any) -> InvoiceDocument | None:
    if not isinstance(raw, dict):
        return None
    rid = entity_id(raw)
    if not rid:
        return None
    return InvoiceDocument(
        id=rid,
        original_name=raw.get("originalName") or raw.get("name") or "",
        mime_type=raw.get("mimeType") or "application/octet-stream",
    )


def to_invoice(raw: Any) -> InvoiceEntity:
    """Invoice record; a bare or missing document reference leaves document None."""
    rid = _require_id(raw, "invoice")
    try:
        value = float(raw.get("invoiceValue") or 0)
        qty = int(raw.get("invoiceQty") or 0)
    except (TypeError, ValueError) as e:
        raise BackendProtocolError(f"invoice {rid} has a non-numeric value or quantity") from e
    return InvoiceEntity(
        id=rid,
        vendor_name=raw.get("vendorName") or "",
        invoice_date=parse_datetime(raw.get("invoiceDate")),
        invoice_value=value,
        invoice_qty=qty,
        document=_invoice_document(raw.get("document")),
        created_at=parse_datetime(raw.get("createdAt")),
    )
