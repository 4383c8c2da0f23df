"""Invoice record entity: vendor, date, value and quantity captured for one document."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class InvoiceDocument:
    """The document an invoice record was captured from."""

    id: str
    original_name: str
    mime_type: str


@dataclass(frozen=True)
class InvoiceEntity:
    """Domain entity for an invoice record.

    document is None when the source document has since been deleted.
    """

    id: str
    vendor_name: str
    invoice_date: datetime | None = None
    invoice_value: float = 0.0
    invoice_qty: int = 0
    document: InvoiceDocument | None = None
    created_at: datetime | None = None
