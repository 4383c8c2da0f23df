"""Tests for domain entities and enums."""

import pytest

from docshare.domain.entities import (
    DepartmentEntity,
    DocumentEntity,
    DocumentPermissions,
    FolderEntity,
    UserEntity,
)
from docshare.domain.enums import DocumentFilter, FolderAccess, Permission, UserRole
from docshare.domain.exceptions import ValidationException


class TestEnums:
    def test_values(self) -> None:
        assert UserRole.values() == ["admin", "manager", "employee"]
        assert FolderAccess.values() == ["hidden", "locked", "full"]
        assert Permission.values() == ["read", "write", "delete"]
        assert DocumentFilter("mydrives") is DocumentFilter.MY_DRIVES
        assert DocumentFilter.values() == ["all", "starred", "shared", "mydrives", "invoices"]


class TestDepartmentEntity:
    def test_can_delete_only_without_employees(self) -> None:
        assert DepartmentEntity(id="d1", name="hr", display_name="HR").can_delete()
        assert not DepartmentEntity(
            id="d1", name="hr", display_name="HR", employee_count=3
        ).can_delete()

    def test_id_required(self) -> None:
        with pytest.raises(ValidationException, match="Department ID"):
            DepartmentEntity(id="", name="hr", display_name="HR")


class TestUserEntity:
    @pytest.mark.parametrize(
        ("role", "expected"),
        [(UserRole.ADMIN, True), (UserRole.MANAGER, True), (UserRole.EMPLOYEE, False)],
    )
    def test_department_sharing_by_role(self, role, expected) -> None:
        user = UserEntity(id="u1", name="U", email="u@example.com", role=role)
        assert user.can_share_with_departments() is expected


class TestFolderEntity:
    def test_root_and_owner(self) -> None:
        folder = FolderEntity(id="f1", name="Root", owner_id="u1")
        assert folder.is_root()
        assert folder.is_owned_by("u1")
        assert not folder.is_owned_by(None)
        assert FolderEntity(id="f2", name="Child", parent_id="f1").is_root() is False

    def test_flags_default_to_missing(self) -> None:
        folder = FolderEntity(id="f1", name="Root")
        assert folder.has_access is None
        assert folder.can_view_content is None


class TestDocumentEntity:
    def test_permissions_for_user(self) -> None:
        perms = DocumentPermissions(read=("u1", "u2"), write=("u1",))
        assert perms.for_user("u1") == {Permission.READ, Permission.WRITE}
        assert perms.for_user("u3") == set()
        assert perms.to_dict() == {"read": ["u1", "u2"], "write": ["u1"], "delete": []}

    def test_pdf_detection(self) -> None:
        document = DocumentEntity(
            id="doc", name="a.pdf", original_name="a.pdf", mime_type="application/pdf"
        )
        assert document.is_pdf()
