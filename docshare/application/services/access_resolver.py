"""Classify folders for rendering from the access hints the backend computed.

Pure functions: no I/O, no role checks. The backend stays authoritative for
what a user may actually read; this only decides what to expose.
"""

from docshare.domain.entities import FolderEntity
from docshare.domain.enums import FolderAccess


def classify_folder(folder: FolderEntity) -> FolderAccess:
    """Return HIDDEN, LOCKED or FULL for folder.

    has_access False hides the folder regardless of can_view_content.
    A missing flag (None) counts as granted.
    """
    if folder.has_access is False:
        return FolderAccess.HIDDEN
    if folder.can_view_content is False:
        return FolderAccess.LOCKED
    return FolderAccess.FULL


def is_visible(folder: FolderEntity) -> bool:
    return classify_folder(folder) != FolderAccess.HIDDEN


def can_browse(folder: FolderEntity) -> bool:
    """Return whether the folder's contents may be fetched and shown."""
    return classify_folder(folder) == FolderAccess.FULL
