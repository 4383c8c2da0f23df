"""Tests for SharingService against the fake backend."""

import pytest

from docshare.application.services.share_selection import (
    DocumentShareSelection,
    FolderShareSelection,
)
from docshare.application.use_cases.sharing import SharingService
from docshare.domain.enums import NotificationLevel, Permission
from docshare.infrastructure.exceptions import BackendAccessDeniedError, BackendServerError


@pytest.fixture
def service(backend_client) -> SharingService:
    return SharingService(backend_client)


class TestFolderSharing:
    async def test_dialog_excludes_owner_and_checks_current(self, service, admin_credentials) -> None:
        dialog = await service.open_folder_share_dialog(admin_credentials, "f-restricted")
        assert dialog.department_ids == ("d-hr",)
        assert "u-bob" not in {u.id for u in dialog.users}
        assert [d.id for d in dialog.departments] == ["d-eng", "d-hr", "d-fin"]

    async def test_department_share_round_trip(
        self, service, admin_credentials, fake_backend
    ) -> None:
        result = await service.share_folder_with_departments(
            admin_credentials, "f-root", ["d-eng", "d-hr", "d-eng"]
        )
        assert fake_backend.calls("PUT", "/folders/f-root/share-department") == [
            {"departments": ["d-eng", "d-hr"]}
        ]
        assert result.value.department_ids == ("d-eng", "d-hr")
        assert result.notification.level == NotificationLevel.SUCCESS
        assert result.notification.message == "Folder shared with departments successfully"

        dialog = await service.open_folder_share_dialog(admin_credentials, "f-root")
        assert set(dialog.department_ids) == {"d-eng", "d-hr"}

    async def test_share_replaces_membership(self, service, admin_credentials) -> None:
        await service.share_folder_with_departments(admin_credentials, "f-shared", [])
        dialog = await service.open_folder_share_dialog(admin_credentials, "f-shared")
        assert dialog.department_ids == ()

    async def test_failure_leaves_selection_and_skips_reread(
        self, service, admin_credentials, fake_backend
    ) -> None:
        dialog = await service.open_folder_share_dialog(admin_credentials, "f-restricted")
        selection = FolderShareSelection.from_folder(dialog.folder)
        selection.department_ids.append("d-eng")
        fake_backend.requests.clear()
        fake_backend.fail_next("PUT", "/folders/f-restricted/share-department", 500)

        with pytest.raises(BackendServerError):
            await service.share_folder_with_departments(
                admin_credentials, "f-restricted", selection.department_ids
            )

        assert selection.department_ids == ["d-hr", "d-eng"]
        assert fake_backend.calls("GET", "/folders/f-restricted") == []
        assert len(fake_backend.calls("PUT", "/folders/f-restricted/share-department")) == 1

    async def test_user_share(self, service, admin_credentials) -> None:
        result = await service.share_folder_with_users(
            admin_credentials, "f-root", ["u-alice", "u-bob"]
        )
        assert result.value.shared_user_ids == ("u-alice", "u-bob")
        assert result.notification.message == "Folder shared with users successfully"


class TestDocumentSharing:
    async def test_dialog_repairs_permissions(self, service, admin_credentials) -> None:
        dialog = await service.open_document_share_dialog(admin_credentials, "doc-1")
        # u-bob holds write without being shared; it is dropped.
        assert dialog.selected_users == ("u-alice",)
        assert dialog.read == ("u-alice",)
        assert dialog.write == ("u-alice",)
        assert "u-admin" not in {u.id for u in dialog.users}

    async def test_commit_sends_full_state_and_rereads(
        self, service, admin_credentials, fake_backend
    ) -> None:
        selection = DocumentShareSelection.from_payload(["u-alice"], {"read": ["u-alice"]})
        selection.select_user("u-bob")
        selection.set_permission("u-bob", Permission.DELETE, True)

        result = await service.share_document(admin_credentials, "doc-1", selection)

        assert fake_backend.calls("PUT", "/documents/doc-1/share") == [
            {
                "userIds": ["u-alice", "u-bob"],
                "permissions": {"read": ["u-alice", "u-bob"], "write": [], "delete": ["u-bob"]},
            }
        ]
        assert result.value.permissions.delete == ("u-bob",)
        assert result.notification.message == "Document shared successfully"

    async def test_rejection_message_verbatim(
        self, service, admin_credentials, fake_backend
    ) -> None:
        fake_backend.fail_next(
            "PUT", "/documents/doc-1/share", 403, {"message": "Only the owner can share"}
        )
        selection = DocumentShareSelection.from_payload(["u-alice"])
        with pytest.raises(BackendAccessDeniedError, match="Only the owner can share"):
            await service.share_document(admin_credentials, "doc-1", selection)
        assert selection.selected_users == ["u-alice"]
