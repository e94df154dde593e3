# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models: pure data structures, NO FastAPI dependency.
"""

from dataclasses import dataclass, field
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

PAGE_SIZE = 5

UserId = Union[int, str]


class UserRecord(BaseModel):
    """One employee record as owned by the remote employees API."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: UserId = Field(..., description="Identifier assigned by the remote service")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address, unique case-insensitively")


@dataclass
class FormDraft:
    """Unsubmitted add-user form input plus its inline errors."""
    name: str = ""
    email: str = ""
    errors: dict[str, str] = field(default_factory=dict)

    def clear(self) -> None:
        self.name = ""
        self.email = ""
        self.errors = {}


@dataclass
class ViewState:
    search_term: str = ""
    current_page: int = 1


@dataclass(frozen=True)
class PageView:
    """Derived, read-only slice of the roster used for display."""
    users: list[UserRecord]
    page: int
    filtered_count: int
    total_pages: int
    has_prev_page: bool
    has_next_page: bool
