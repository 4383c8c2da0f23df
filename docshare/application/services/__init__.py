"""Application services: pure rules used by the use cases."""

from docshare.application.services.access_resolver import (
    can_browse,
    classify_folder,
    is_visible,
)
from docshare.application.services.folder_tree import compose_folder_tree, flatten_tree
from docshare.application.services.share_selection import (
    DocumentShareSelection,
    FolderShareSelection,
)

__all__ = [
    "DocumentShareSelection",
    "FolderShareSelection",
    "can_browse",
    "classify_folder",
    "compose_folder_tree",
    "flatten_tree",
    "is_visible",
]
