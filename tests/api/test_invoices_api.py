"""API tests for invoice records."""

from httpx import AsyncClient

from conftest import FakeDocumentBackend


async def test_create_invoice(
    client: AsyncClient, auth_headers: dict[str, str], fake_backend: FakeDocumentBackend
) -> None:
    response = await client.post(
        "/api/v1/invoices",
        json={
            "document_id": "doc-2",
            "vendor_name": "Initech",
            "invoice_date": "2024-05-01",
            "invoice_value": 42.0,
            "invoice_qty": 4,
        },
        headers=auth_headers,
    )
    assert response.status_code == 201
    data = response.json()
    assert data["invoice"]["vendor_name"] == "Initech"
    assert data["invoice"]["document"]["original_name"] == "notes.txt"
    assert data["notification"] == {
        "level": "success",
        "message": "Invoice record saved successfully",
    }
    assert fake_backend.calls("POST", "/invoices")[0]["invoiceDate"] == "2024-05-01"


async def test_negative_value_is_422(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.post(
        "/api/v1/invoices",
        json={
            "document_id": "doc-1",
            "vendor_name": "Acme",
            "invoice_date": "2024-05-01",
            "invoice_value": -1,
            "invoice_qty": 1,
        },
        headers=auth_headers,
    )
    assert response.status_code == 422


async def test_filtered_table(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.get(
        "/api/v1/invoices?vendor_name=acme&start_date=2024-01-01&max_value=2000",
        headers=auth_headers,
    )
    assert response.status_code == 200
    records = response.json()
    assert [r["id"] for r in records] == ["inv-1"]
    assert records[0]["invoice_qty"] == 3


async def test_reversed_dates_are_400(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.get(
        "/api/v1/invoices?start_date=2024-06-01&end_date=2024-01-01", headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "start_date"}


async def test_export(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.get("/api/v1/invoices/export?min_value=100", headers=auth_headers)
    assert response.status_code == 200
    assert response.content == b"PK\x03\x04inv-1"
    assert response.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert "invoice-records.xlsx" in response.headers["content-disposition"]


async def test_invoices_document_filter(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.get("/api/v1/documents?filter=invoices", headers=auth_headers)
    assert response.status_code == 200
    assert [d["id"] for d in response.json()["documents"]] == ["doc-1"]
