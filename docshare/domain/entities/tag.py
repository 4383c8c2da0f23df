"""Tag domain entity. Tags group documents visually and carry no access semantics."""

from dataclasses import dataclass

from docshare.domain.value_objects.core import HexColor


@dataclass(frozen=True)
class TagEntity:
    """Domain entity for a user-owned tag."""

    id: str
    name: str
    color: HexColor
    owner_id: str | None = None
