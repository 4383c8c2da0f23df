"""Selection state held by the folder and document share dialogs.

Both selections are edited locally and committed as a whole (the backend
replaces the stored membership with what is sent). A failed commit leaves
the selection untouched so the dialog can retry or cancel.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from docshare.domain.entities import DocumentEntity, FolderEntity
from docshare.domain.enums import Permission, SelectionOperation
from docshare.domain.exceptions import ValidationException


def _ordered_unique(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


@dataclass
class FolderShareSelection:
    """Checked departments and users of the folder share dialog."""

    department_ids: list[str] = field(default_factory=list)
    user_ids: list[str] = field(default_factory=list)

    @classmethod
    def from_folder(cls, folder: FolderEntity) -> "FolderShareSelection":
        return cls(
            department_ids=_ordered_unique(folder.department_ids),
            user_ids=_ordered_unique(folder.shared_user_ids),
        )


@dataclass
class DocumentShareSelection:
    """Users and per-user permissions of the document share dialog.

    After every operation: write and delete are subsets of read, and read is
    a subset of selected_users.
    """

    selected_users: list[str] = field(default_factory=list)
    read: list[str] = field(default_factory=list)
    write: list[str] = field(default_factory=list)
    delete: list[str] = field(default_factory=list)

    @classmethod
    def from_document(cls, document: DocumentEntity) -> "DocumentShareSelection":
        """Seed from the document, repairing lists that break the invariants."""
        perms = document.permissions
        return cls.from_payload(
            document.shared_user_ids,
            {
                Permission.READ: perms.read,
                Permission.WRITE: perms.write,
                Permission.DELETE: perms.delete,
            },
        )

    @classmethod
    def from_payload(
        cls,
        user_ids: Iterable[str],
        permissions: Mapping[Permission | str, Iterable[str]] | None = None,
    ) -> "DocumentShareSelection":
        """Build a normalized selection from raw id lists.

        Permissions of unselected users are dropped; write or delete holders
        gain read.
        """
        permissions = {Permission(k): list(v) for k, v in (permissions or {}).items()}
        selected = _ordered_unique(user_ids)
        members = set(selected)
        write = [u for u in _ordered_unique(permissions.get(Permission.WRITE, ())) if u in members]
        delete = [u for u in _ordered_unique(permissions.get(Permission.DELETE, ())) if u in members]
        read_set = set(permissions.get(Permission.READ, ())) | set(write) | set(delete)
        read = [u for u in selected if u in read_set]
        return cls(selected_users=selected, read=read, write=write, delete=delete)

    def is_selected(self, user_id: str) -> bool:
        return user_id in self.selected_users

    def select_user(self, user_id: str) -> None:
        """Add user_id and grant read."""
        if user_id not in self.selected_users:
            self.selected_users.append(user_id)
        if user_id not in self.read:
            self.read.append(user_id)

    def deselect_user(self, user_id: str) -> None:
        """Remove user_id from the selection and every permission list."""
        for ids in (self.selected_users, self.read, self.write, self.delete):
            if user_id in ids:
                ids.remove(user_id)

    def toggle_user(self, user_id: str) -> None:
        if self.is_selected(user_id):
            self.deselect_user(user_id)
        else:
            self.select_user(user_id)

    def set_permission(self, user_id: str, permission: Permission, checked: bool) -> None:
        """Check or uncheck one permission box for a selected user.

        Raises:
            ValidationException: If user_id is not selected.
        """
        if not self.is_selected(user_id):
            raise ValidationException(
                f"User {user_id} must be selected before changing permissions",
                field="user_id",
            )
        permission = Permission(permission)
        if checked:
            self._add(permission, user_id)
            if permission != Permission.READ:
                self._add(Permission.READ, user_id)
        else:
            self._discard(permission, user_id)
            if permission == Permission.READ:
                self._discard(Permission.WRITE, user_id)
                self._discard(Permission.DELETE, user_id)

    def apply(
        self,
        operation: SelectionOperation,
        user_id: str,
        permission: Permission | None = None,
    ) -> None:
        """Apply one dialog edit; grant and revoke require a permission."""
        operation = SelectionOperation(operation)
        if operation == SelectionOperation.SELECT:
            self.select_user(user_id)
        elif operation == SelectionOperation.DESELECT:
            self.deselect_user(user_id)
        elif operation == SelectionOperation.TOGGLE:
            self.toggle_user(user_id)
        else:
            if permission is None:
                raise ValidationException(
                    f"Operation '{operation.value}' requires a permission",
                    field="permission",
                )
            self.set_permission(user_id, permission, operation == SelectionOperation.GRANT)

    def permissions_for(self, user_id: str) -> set[Permission]:
        return {p for p in Permission if user_id in self._list(p)}

    def to_payload(self) -> dict:
        """Return the backend share body (the complete desired state)."""
        return {
            "userIds": list(self.selected_users),
            "permissions": {
                "read": list(self.read),
                "write": list(self.write),
                "delete": list(self.delete),
            },
        }

    def _list(self, permission: Permission) -> list[str]:
        if permission == Permission.READ:
            return self.read
        if permission == Permission.WRITE:
            return self.write
        return self.delete

    def _add(self, permission: Permission, user_id: str) -> None:
        ids = self._list(permission)
        if user_id not in ids:
            ids.append(user_id)

    def _discard(self, permission: Permission, user_id: str) -> None:
        ids = self._list(permission)
        if user_id in ids:
            ids.remove(user_id)
