"""Invoice records: capture, filtered listing and spreadsheet export."""

from __future__ import annotations

from docshare.application.dtos.auth import Credentials
from docshare.application.dtos.document import DocumentDownload
from docshare.application.dtos.invoice import InvoiceCreate, InvoiceQuery
from docshare.application.dtos.notification import CommandResult, Notification
from docshare.application.interfaces.backend import IDocumentBackend
from docshare.domain.entities import InvoiceEntity
from docshare.domain.exceptions import ValidationException


def _checked_query(query: InvoiceQuery) -> InvoiceQuery:
    if query.start_date and query.end_date and query.start_date > query.end_date:
        raise ValidationException("Start date must not be after end date", field="start_date")
    if (
        query.min_value is not None
        and query.max_value is not None
        and query.min_value > query.max_value
    ):
        raise ValidationException("Min value must not exceed max value", field="min_value")
    return query


class InvoiceService:
    """Invoice records are stored and exported by the backend; this passes them through."""

    def __init__(self, backend: IDocumentBackend) -> None:
        self.backend = backend

    async def create_invoice(
        self, credentials: Credentials, data: InvoiceCreate
    ) -> CommandResult[InvoiceEntity]:
        document_id = (data.document_id or "").strip()
        if not document_id:
            raise ValidationException("Document is required", field="document_id")
        vendor_name = (data.vendor_name or "").strip()
        if not vendor_name:
            raise ValidationException("Vendor name is required", field="vendor_name")
        if data.invoice_value < 0:
            raise ValidationException("Invoice value must not be negative", field="invoice_value")
        if data.invoice_qty < 0:
            raise ValidationException("Invoice quantity must not be negative", field="invoice_qty")
        invoice = await self.backend.create_invoice(
            credentials,
            InvoiceCreate(
                document_id=document_id,
                vendor_name=vendor_name,
                invoice_date=data.invoice_date,
                invoice_value=data.invoice_value,
                invoice_qty=data.invoice_qty,
            ),
        )
        return CommandResult(invoice, Notification.success("Invoice record saved successfully"))

    async def list_invoices(
        self, credentials: Credentials, query: InvoiceQuery
    ) -> list[InvoiceEntity]:
        return await self.backend.list_invoices(credentials, _checked_query(query))

    async def export_invoices(
        self, credentials: Credentials, query: InvoiceQuery
    ) -> DocumentDownload:
        return await self.backend.export_invoices(credentials, _checked_query(query))
