"""Compose the navigable folder tree from the flat folder list."""

import logging
from collections.abc import Collection, Iterable, Iterator, Sequence

from docshare.application.dtos.folder import FolderNode
from docshare.application.services.access_resolver import classify_folder
from docshare.domain.entities import FolderEntity
from docshare.domain.enums import FolderAccess

logger = logging.getLogger(__name__)


def compose_folder_tree(
    folders: Sequence[FolderEntity],
    expanded: Collection[str],
    parent_id: str | None = None,
    level: int = 0,
    selected_id: str | None = None,
) -> list[FolderNode]:
    """Build the tree rooted at parent_id.

    Children keep server order. Hidden folders are dropped together with
    their subtree; locked folders appear collapsed with no children even if
    expanded; full folders recurse only when expanded.
    """
    return _compose(folders, set(expanded), parent_id, level, selected_id, frozenset())


def _compose(
    folders: Sequence[FolderEntity],
    expanded: set[str],
    parent_id: str | None,
    level: int,
    selected_id: str | None,
    path: frozenset[str],
) -> list[FolderNode]:
    nodes: list[FolderNode] = []
    for folder in folders:
        if folder.parent_id != parent_id:
            continue
        if folder.id in path:
            logger.warning(
                "Folder cycle detected at %s (parent %s); skipping",
                folder.id,
                parent_id,
            )
            continue
        access = classify_folder(folder)
        if access == FolderAccess.HIDDEN:
            continue
        is_expanded = access == FolderAccess.FULL and folder.id in expanded
        children: list[FolderNode] = []
        if is_expanded:
            children = _compose(
                folders,
                expanded,
                folder.id,
                level + 1,
                selected_id,
                path | {folder.id},
            )
        nodes.append(
            FolderNode(
                folder=folder,
                level=level,
                access=access,
                expanded=is_expanded,
                selected=folder.id == selected_id,
                children=tuple(children),
            )
        )
    return nodes


def flatten_tree(nodes: Iterable[FolderNode]) -> Iterator[FolderNode]:
    """Yield nodes depth first, in display order."""
    for node in nodes:
        yield node
        yield from flatten_tree(node.children)
