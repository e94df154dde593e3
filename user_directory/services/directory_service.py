# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: User directory view controller.
Owns the roster, the add-user draft and the search/page state for one view
activation. Local state changes only after the employees API confirms.
"""

import asyncio
from collections import deque
from typing import Optional

from user_directory.core.logging import get_logger
from user_directory.metrics.prometheus import (
    ROSTER_SIZE,
    USERS_ADDED,
    USERS_DELETED,
    USERS_UPDATED,
    VALIDATION_REJECTIONS,
)
from user_directory.models.domain import FormDraft, PageView, UserId, UserRecord, ViewState
from user_directory.repositories.roster_repository import RosterRepository
from user_directory.services.directory_view import build_page, has_next_page, has_prev_page, filter_users
from user_directory.services.employee_client import EmployeeClient, RemoteServiceError
from user_directory.services.validation import validate

logger = get_logger(__name__)

ADDED_NOTICE = "User added successfully!"
UPDATED_NOTICE = "User updated successfully!"
DELETED_NOTICE = "User deleted successfully!"


class DraftRejected(ValueError):
    """Submission blocked locally; never reaches the employees API."""

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = errors


class DirectoryService:
    """Business logic for the user directory view."""

    def __init__(
        self,
        roster_repo: RosterRepository,
        employee_client: EmployeeClient,
        max_notices: int = 50,
    ) -> None:
        self._roster = roster_repo
        self._client = employee_client
        self._draft = FormDraft()
        self._view = ViewState()
        self._notices: deque[str] = deque(maxlen=max_notices)
        self._load_attempted = False
        self._loaded = False
        self._write_lock = asyncio.Lock()

    @property
    def draft(self) -> FormDraft:
        return self._draft

    @property
    def view_state(self) -> ViewState:
        return self._view

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def notices(self) -> list[str]:
        return list(self._notices)

    @property
    def client(self) -> EmployeeClient:
        return self._client

    def roster(self) -> list[UserRecord]:
        return self._roster.get_all()

    def _notify(self, message: str) -> str:
        self._notices.append(message)
        logger.info(message)
        return message

    def _sync_gauge(self) -> None:
        ROSTER_SIZE.set(self._roster.count())

    # ── Roster Loader ──

    async def load_all(self) -> bool:
        """Populate the roster once per activation. Returns True if loaded."""
        if self._load_attempted:
            return self._loaded
        self._load_attempted = True
        try:
            users = await self._client.list_employees()
        except RemoteServiceError as exc:
            logger.warning("Roster load failed: %s", exc, extra={"operation": exc.operation})
            return False
        self._roster.replace_all(users)
        self._loaded = True
        self._sync_gauge()
        logger.info("Roster loaded: %d users", len(users))
        return True

    # ── Mutations ──
    # Add and update hold the lock from validation through the roster write,
    # so a second submission validates against the roster the first produced.

    async def add_user(self, name: str, email: str) -> tuple[UserRecord, str]:
        """
        Submit the add-user form. Returns the created record and its notice.
        Raises DraftRejected when validation blocks it, RemoteServiceError when
        the employees API fails; in both cases the roster is untouched.
        """
        async with self._write_lock:
            self._draft.name = name
            self._draft.email = email
            errors = validate(self._draft, self._roster.get_all())
            self._draft.errors = errors
            if errors:
                for field_name in errors:
                    VALIDATION_REJECTIONS.labels(field=field_name).inc()
                raise DraftRejected(errors)

            try:
                created = await self._client.create_employee(name.strip(), email.strip())
            except RemoteServiceError as exc:
                logger.warning("Add user failed: %s", exc, extra={"operation": exc.operation})
                raise

            self._roster.append(created)
            self._draft.clear()
        USERS_ADDED.inc()
        self._sync_gauge()
        return created, self._notify(ADDED_NOTICE)

    async def update_user(self, user_id: UserId, name: str, email: str) -> tuple[UserRecord, str]:
        """Edit an existing record; the add-user draft is left alone."""
        async with self._write_lock:
            candidate = FormDraft(name=name, email=email)
            errors = validate(candidate, self._roster.get_all(), exclude_id=user_id)
            if errors:
                for field_name in errors:
                    VALIDATION_REJECTIONS.labels(field=field_name).inc()
                raise DraftRejected(errors)

            try:
                updated = await self._client.update_employee(user_id, name.strip(), email.strip())
            except RemoteServiceError as exc:
                logger.warning(
                    "Update user %s failed: %s", user_id, exc, extra={"operation": exc.operation}
                )
                raise

            # The backend upserts unknown ids.
            if not self._roster.replace(updated):
                self._roster.append(updated)
        USERS_UPDATED.inc()
        self._sync_gauge()
        return updated, self._notify(UPDATED_NOTICE)

    async def delete_user(self, user_id: UserId) -> tuple[Optional[UserRecord], str]:
        """Delete remotely, then drop the local entry if it is still there."""
        try:
            await self._client.delete_employee(user_id)
        except RemoteServiceError as exc:
            logger.warning("Delete user %s failed: %s", user_id, exc, extra={"operation": exc.operation})
            raise

        removed = self._roster.delete(user_id)
        USERS_DELETED.inc()
        self._sync_gauge()
        return removed, self._notify(DELETED_NOTICE)

    # ── Reads ──

    def get_user(self, user_id: UserId) -> Optional[UserRecord]:
        return self._roster.get_by_id(user_id)

    def current_page(self) -> PageView:
        return build_page(self._roster.get_all(), self._view.search_term, self._view.current_page)

    # ── View state ──

    def set_search(self, term: str) -> PageView:
        # Page is not reset; narrowing a search can leave it past the last page.
        self._view.search_term = term
        return self.current_page()

    def next_page(self) -> bool:
        filtered = filter_users(self._roster.get_all(), self._view.search_term)
        if not has_next_page(self._view.current_page, len(filtered)):
            return False
        self._view.current_page += 1
        return True

    def prev_page(self) -> bool:
        if not has_prev_page(self._view.current_page):
            return False
        self._view.current_page -= 1
        return True
