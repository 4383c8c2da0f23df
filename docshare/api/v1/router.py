"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from docshare.api.v1.dependencies.
"""

from fastapi import APIRouter

from docshare.api.v1.endpoints import (
    admin,
    auth,
    documents,
    folders,
    health,
    invoices,
    tags,
    users,
    view_state,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(folders.router, prefix="/folders", tags=["folders"])
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
api_router.include_router(tags.router, prefix="/tags", tags=["tags"])
api_router.include_router(invoices.router, prefix="/invoices", tags=["invoices"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(view_state.router, prefix="/view-state", tags=["view-state"])
