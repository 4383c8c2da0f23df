"""Invoice record API: capture, filtered table and spreadsheet export."""

from datetime import date
from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from docshare.api.v1.dependencies import CredentialsDep, get_invoice_service
from docshare.application.dtos.invoice import EXPORT_FILENAME, InvoiceCreate, InvoiceQuery
from docshare.application.use_cases import InvoiceService
from docshare.schemas.common import NotificationSchema
from docshare.schemas.invoice import (
    InvoiceCommandResponse,
    InvoiceCreateRequest,
    InvoiceResponse,
)

router = APIRouter()


def invoice_filters(
    start_date: Annotated[date | None, Query()] = None,
    end_date: Annotated[date | None, Query()] = None,
    vendor_name: Annotated[str | None, Query(max_length=200)] = None,
    min_value: Annotated[float | None, Query(ge=0)] = None,
    max_value: Annotated[float | None, Query(ge=0)] = None,
) -> InvoiceQuery:
    return InvoiceQuery(
        start_date=start_date,
        end_date=end_date,
        vendor_name=vendor_name,
        min_value=min_value,
        max_value=max_value,
    )


InvoiceFiltersDep = Annotated[InvoiceQuery, Depends(invoice_filters)]


@router.post("", response_model=InvoiceCommandResponse, status_code=201)
async def create_invoice(
    body: InvoiceCreateRequest,
    credentials: CredentialsDep,
    invoices: Annotated[InvoiceService, Depends(get_invoice_service)],
):
    result = await invoices.create_invoice(
        credentials,
        InvoiceCreate(
            document_id=body.document_id,
            vendor_name=body.vendor_name,
            invoice_date=body.invoice_date,
            invoice_value=body.invoice_value,
            invoice_qty=body.invoice_qty,
        ),
    )
    return InvoiceCommandResponse(
        invoice=InvoiceResponse.from_entity(result.value),
        notification=NotificationSchema.from_dto(result.notification),
    )


@router.get("", response_model=list[InvoiceResponse])
async def list_invoices(
    filters: InvoiceFiltersDep,
    credentials: CredentialsDep,
    invoices: Annotated[InvoiceService, Depends(get_invoice_service)],
):
    records = await invoices.list_invoices(credentials, filters)
    return [InvoiceResponse.from_entity(i) for i in records]


@router.get("/export")
async def export_invoices(
    filters: InvoiceFiltersDep,
    credentials: CredentialsDep,
    invoices: Annotated[InvoiceService, Depends(get_invoice_service)],
) -> Response:
    """Spreadsheet of the records matching the same filters as the table."""
    export = await invoices.export_invoices(credentials, filters)
    filename = quote(export.filename or EXPORT_FILENAME)
    return Response(
        content=export.content,
        media_type=export.content_type,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{filename}"},
    )
