# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Employees API client: the only code that talks to the remote store.
Every failure (transport, timeout, non-2xx, malformed body) surfaces as
RemoteServiceError; nothing here retries.
"""

import time
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from user_directory.core.config import settings
from user_directory.core.logging import get_logger
from user_directory.metrics.prometheus import REMOTE_CALLS, REMOTE_LATENCY
from user_directory.models.domain import UserId, UserRecord

logger = get_logger(__name__)

EMPLOYEES_PATH = "/api/employees"


class RemoteServiceError(RuntimeError):
    """The employees API could not complete an operation."""

    def __init__(self, operation: str, detail: str, status_code: Optional[int] = None) -> None:
        super().__init__(f"{operation} failed: {detail}")
        self.operation = operation
        self.detail = detail
        self.status_code = status_code


class EmployeeClient:
    """Async client for the employees REST API."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or settings.EMPLOYEE_API_URL).rstrip("/")
        self._timeout = settings.EMPLOYEE_API_TIMEOUT if timeout is None else timeout
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    def _client(self) -> httpx.AsyncClient:
        if self._http is None or self._http.is_closed:
            self._http = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._http

    async def aclose(self) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    # ── Low level ──

    async def _request(self, operation: str, method: str, path: str, **kwargs: Any) -> httpx.Response:
        start = time.monotonic()
        try:
            resp = await self._client().request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            REMOTE_CALLS.labels(operation=operation, outcome="unreachable").inc()
            raise RemoteServiceError(operation, f"{type(exc).__name__}: {exc}") from exc
        finally:
            REMOTE_LATENCY.labels(operation=operation).observe(time.monotonic() - start)

        if resp.status_code >= 400:
            REMOTE_CALLS.labels(operation=operation, outcome="error").inc()
            raise RemoteServiceError(
                operation,
                f"HTTP {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
            )
        REMOTE_CALLS.labels(operation=operation, outcome="ok").inc()
        return resp

    @staticmethod
    def _parse_user(operation: str, payload: Any) -> UserRecord:
        try:
            return UserRecord.model_validate(payload)
        except ValidationError as exc:
            raise RemoteServiceError(operation, f"malformed record: {exc.error_count()} error(s)") from exc

    @staticmethod
    def _json(operation: str, resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            raise RemoteServiceError(operation, "response body is not JSON", resp.status_code) from exc

    # ── Employees endpoints ──

    async def list_employees(self) -> list[UserRecord]:
        resp = await self._request("list", "GET", EMPLOYEES_PATH)
        payload = self._json("list", resp)
        if not isinstance(payload, list):
            raise RemoteServiceError("list", "expected a JSON array", resp.status_code)
        return [self._parse_user("list", item) for item in payload]

    async def get_employee(self, user_id: UserId) -> Optional[UserRecord]:
        """Fetch one record. The backend answers an empty body for unknown ids."""
        resp = await self._request("get", "GET", f"{EMPLOYEES_PATH}/{user_id}")
        if not resp.content:
            return None
        payload = self._json("get", resp)
        if payload is None:
            return None
        return self._parse_user("get", payload)

    async def create_employee(self, name: str, email: str) -> UserRecord:
        resp = await self._request("create", "POST", EMPLOYEES_PATH, json={"name": name, "email": email})
        return self._parse_user("create", self._json("create", resp))

    async def update_employee(self, user_id: UserId, name: str, email: str) -> UserRecord:
        resp = await self._request(
            "update", "PUT", f"{EMPLOYEES_PATH}/{user_id}", json={"name": name, "email": email}
        )
        return self._parse_user("update", self._json("update", resp))

    async def delete_employee(self, user_id: UserId) -> None:
        """Response body is not consumed."""
        await self._request("delete", "DELETE", f"{EMPLOYEES_PATH}/{user_id}")
