# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas: API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from typing import Optional

from pydantic import BaseModel, Field

from user_directory.models.domain import PAGE_SIZE, UserRecord


class DraftRequest(BaseModel):
    """Raw form fields; trimming and checks happen in the validator."""
    name: str = ""
    email: str = ""


class SearchRequest(BaseModel):
    term: str = Field(default="", description="Matches id, name or email")


class DraftResponse(BaseModel):
    name: str
    email: str
    errors: dict[str, str] = {}


class PageResponse(BaseModel):
    users: list[UserRecord]
    page: int
    page_size: int = PAGE_SIZE
    filtered_count: int
    total_pages: int
    has_prev_page: bool
    has_next_page: bool


class DirectoryResponse(BaseModel):
    search_term: str
    loaded: bool
    roster_size: int
    view: PageResponse
    draft: DraftResponse


class MutationResponse(BaseModel):
    user: Optional[UserRecord] = None
    notice: str
    view: PageResponse


class NavigationResponse(BaseModel):
    moved: bool
    view: PageResponse


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    fields: Optional[dict[str, str]] = None
