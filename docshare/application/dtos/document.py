"""DTOs for document listing, upload and download."""

from dataclasses import dataclass

from docshare.domain.entities import DocumentEntity
from docshare.domain.enums import DocumentFilter


@dataclass(frozen=True)
class DocumentQuery:
    """Document list query built from the current folder, filter and search text."""

    folder_id: str | None = None
    filter: DocumentFilter = DocumentFilter.ALL
    search: str | None = None

    def to_params(self) -> dict[str, str]:
        """Return backend query parameters.

        The "my drives" filter lists the user's own top-level documents and
        ignores the current folder.
        """
        params: dict[str, str] = {}
        if self.folder_id and self.filter != DocumentFilter.MY_DRIVES:
            params["folder"] = self.folder_id
        if self.filter == DocumentFilter.STARRED:
            params["starred"] = "true"
        elif self.filter == DocumentFilter.SHARED:
            params["shared"] = "true"
        elif self.filter == DocumentFilter.MY_DRIVES:
            params["mydrives"] = "true"
        elif self.filter == DocumentFilter.INVOICES:
            params["invoices"] = "true"
        if self.search and self.search.strip():
            params["search"] = self.search.strip()
        return params


@dataclass(frozen=True)
class DocumentListing:
    """Documents of one listing. restricted is set when the folder denied access."""

    documents: tuple[DocumentEntity, ...] = ()
    folder_id: str | None = None
    restricted: bool = False


@dataclass(frozen=True)
class UploadedFile:
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class DocumentDownload:
    """Raw document bytes returned by the backend."""

    content: bytes
    content_type: str
    filename: str | None = None
