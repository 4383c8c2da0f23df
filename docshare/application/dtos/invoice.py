"""DTOs for invoice records: capture input and table filters."""

from dataclasses import dataclass
from datetime import date

EXPORT_FILENAME = "invoice-records.xlsx"


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


@dataclass(frozen=True)
class InvoiceCreate:
    document_id: str
    vendor_name: str
    invoice_date: date
    invoice_value: float
    invoice_qty: int


@dataclass(frozen=True)
class InvoiceQuery:
    """Invoice table filters; unset filters are not sent."""

    start_date: date | None = None
    end_date: date | None = None
    vendor_name: str | None = None
    min_value: float | None = None
    max_value: float | None = None

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.start_date is not None:
            params["startDate"] = self.start_date.isoformat()
        if self.end_date is not None:
            params["endDate"] = self.end_date.isoformat()
        if self.vendor_name and self.vendor_name.strip():
            params["vendorName"] = self.vendor_name.strip()
        if self.min_value is not None:
            params["minValue"] = _number(self.min_value)
        if self.max_value is not None:
            params["maxValue"] = _number(self.max_value)
        return params
