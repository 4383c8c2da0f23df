"""View state API: remembered folder, filter and expanded folders per user."""

from typing import Annotated

from fastapi import APIRouter, Depends

from docshare.api.v1.dependencies import CurrentUserDep, get_view_state_service
from docshare.application.use_cases import ViewStateService
from docshare.schemas.view_state import ViewStateResponse, ViewStateUpdateRequest

router = APIRouter()

ViewStateDep = Annotated[ViewStateService, Depends(get_view_state_service)]


@router.get("", response_model=ViewStateResponse)
async def get_view_state(user: CurrentUserDep, view_state: ViewStateDep):
    return ViewStateResponse.from_state(await view_state.get(user.id))


@router.patch("", response_model=ViewStateResponse)
async def update_view_state(
    body: ViewStateUpdateRequest,
    user: CurrentUserDep,
    view_state: ViewStateDep,
):
    """Only fields present in the body change."""
    changes = {}
    if "current_folder" in body.model_fields_set:
        changes["current_folder"] = body.current_folder
    state = await view_state.update(user.id, current_filter=body.current_filter, **changes)
    return ViewStateResponse.from_state(state)


@router.post("/expanded/{folder_id}", response_model=ViewStateResponse)
async def toggle_expanded(folder_id: str, user: CurrentUserDep, view_state: ViewStateDep):
    """Expand or collapse a folder in the sidebar; the selection is unchanged."""
    return ViewStateResponse.from_state(await view_state.toggle_expanded(user.id, folder_id))
