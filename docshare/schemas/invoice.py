"""Invoice record API schemas."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from docshare.domain.entities import InvoiceEntity
from docshare.schemas.common import NotificationSchema


class InvoiceCreateRequest(BaseModel):
    document_id: str = Field(..., min_length=1)
    vendor_name: str = Field(..., min_length=1, max_length=200)
    invoice_date: date
    invoice_value: float = Field(..., ge=0)
    invoice_qty: int = Field(..., ge=0)


class InvoiceDocumentResponse(BaseModel):
    id: str
    original_name: str
    mime_type: str


class InvoiceResponse(BaseModel):
    id: str
    vendor_name: str
    invoice_date: datetime | None = None
    invoice_value: float
    invoice_qty: int
    document: InvoiceDocumentResponse | None = None
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, invoice: InvoiceEntity) -> "InvoiceResponse":
        document = invoice.document
        return cls(
            id=invoice.id,
            vendor_name=invoice.vendor_name,
            invoice_date=invoice.invoice_date,
            invoice_value=invoice.invoice_value,
            invoice_qty=invoice.invoice_qty,
            document=(
                InvoiceDocumentResponse(
                    id=document.id,
                    original_name=document.original_name,
                    mime_type=document.mime_type,
                )
                if document is not None
                else None
            ),
            created_at=invoice.created_at,
        )


class InvoiceCommandResponse(BaseModel):
    invoice: InvoiceResponse
    notification: NotificationSchema
