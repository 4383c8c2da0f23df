"""Document backend gateway (httpx)."""

from docshare.infrastructure.backend.client import DocumentBackendClient

__all__ = ["DocumentBackendClient"]
