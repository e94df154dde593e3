# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Directory view endpoints: snapshot, search, paging, mutations.
Thin HTTP layer: delegates ALL logic to DirectoryService.
DraftRejected and RemoteServiceError are mapped to 422 / 502 in main.py.
"""

from fastapi import APIRouter, Depends, HTTPException

from user_directory.core.dependencies import get_directory_service
from user_directory.models.domain import PageView
from user_directory.schemas.directory import (
    DirectoryResponse,
    DraftRequest,
    DraftResponse,
    MutationResponse,
    NavigationResponse,
    PageResponse,
    SearchRequest,
)
from user_directory.services.directory_service import DirectoryService

router = APIRouter(prefix="/api/v1/directory", tags=["Directory"])


def to_page_response(view: PageView) -> PageResponse:
    return PageResponse(
        users=view.users,
        page=view.page,
        filtered_count=view.filtered_count,
        total_pages=view.total_pages,
        has_prev_page=view.has_prev_page,
        has_next_page=view.has_next_page,
    )


# ── Snapshot ──

@router.get("", response_model=DirectoryResponse)
def get_directory(service: DirectoryService = Depends(get_directory_service)):
    """Current derived view plus the add-user draft."""
    draft = service.draft
    return DirectoryResponse(
        search_term=service.view_state.search_term,
        loaded=service.loaded,
        roster_size=len(service.roster()),
        view=to_page_response(service.current_page()),
        draft=DraftResponse(name=draft.name, email=draft.email, errors=draft.errors),
    )


# ── Search & Pagination ──

@router.put("/search", response_model=PageResponse)
def set_search(payload: SearchRequest, service: DirectoryService = Depends(get_directory_service)):
    return to_page_response(service.set_search(payload.term))


@router.post("/page/next", response_model=NavigationResponse)
def next_page(service: DirectoryService = Depends(get_directory_service)):
    """No-op on the last page."""
    moved = service.next_page()
    return NavigationResponse(moved=moved, view=to_page_response(service.current_page()))


@router.post("/page/prev", response_model=NavigationResponse)
def prev_page(service: DirectoryService = Depends(get_directory_service)):
    """No-op on page 1."""
    moved = service.prev_page()
    return NavigationResponse(moved=moved, view=to_page_response(service.current_page()))


# ── Users ──

@router.get("/users/{user_id}")
def get_user(user_id: str, service: DirectoryService = Depends(get_directory_service)):
    user = service.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail=f"User '{user_id}' not found")
    return user


@router.post("/users", status_code=201, response_model=MutationResponse)
async def add_user(payload: DraftRequest, service: DirectoryService = Depends(get_directory_service)):
    """Validate the draft, create it remotely, then append it to the roster."""
    user, notice = await service.add_user(payload.name, payload.email)
    return MutationResponse(
        user=user, notice=notice, view=to_page_response(service.current_page())
    )


@router.put("/users/{user_id}", response_model=MutationResponse)
async def update_user(
    user_id: str,
    payload: DraftRequest,
    service: DirectoryService = Depends(get_directory_service),
):
    user, notice = await service.update_user(user_id, payload.name, payload.email)
    return MutationResponse(
        user=user, notice=notice, view=to_page_response(service.current_page())
    )


@router.delete("/users/{user_id}", response_model=MutationResponse)
async def delete_user(user_id: str, service: DirectoryService = Depends(get_directory_service)):
    """Idempotent locally: an id already gone is simply not removed twice."""
    removed, notice = await service.delete_user(user_id)
    return MutationResponse(
        user=removed, notice=notice, view=to_page_response(service.current_page())
    )
