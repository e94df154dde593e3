# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Shared fixtures: an in-memory stand-in for the employees API served through
httpx.MockTransport, and a directory service wired to it.
"""

import asyncio
import json
import re

import httpx
import pytest
from fastapi.testclient import TestClient

from main import create_app
from user_directory.core.dependencies import build_directory_service
from user_directory.services.employee_client import EmployeeClient

BASE_URL = "http://employees.test"
_ITEM = re.compile(r"^/api/employees/(?P<id>[^/]+)$")


class FakeEmployeeAPI:
    """Mimics GET/POST/PUT/DELETE on /api/employees."""

    def __init__(self, users=None):
        self.users = [dict(u) for u in (users or [])]
        self.next_id = max((int(u["id"]) for u in self.users), default=0) + 1
        self.calls: list[tuple[str, str]] = []
        self.fail: dict[str, int] = {}
        self.unreachable: set[str] = set()
        self.timeouts: set[str] = set()

    def _find(self, user_id):
        return next((u for u in self.users if str(u["id"]) == str(user_id)), None)

    def handler(self, request: httpx.Request) -> httpx.Response:
        method, path = request.method, request.url.path
        self.calls.append((method, path))
        if method in self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        if method in self.timeouts:
            raise httpx.ReadTimeout("timed out", request=request)
        if method in self.fail:
            return httpx.Response(self.fail[method], json={"error": "boom"})

        if path == "/api/employees":
            if method == "GET":
                return httpx.Response(200, json=self.users)
            if method == "POST":
                body = json.loads(request.content)
                created = {"id": self.next_id, "name": body["name"], "email": body["email"]}
                self.next_id += 1
                self.users.append(created)
                return httpx.Response(200, json=created)

        match = _ITEM.match(path)
        if match:
            user_id = match.group("id")
            existing = self._find(user_id)
            if method == "GET":
                return httpx.Response(200, json=existing) if existing else httpx.Response(200)
            if method == "PUT":
                body = json.loads(request.content)
                updated = {"id": int(user_id), "name": body["name"], "email": body["email"], "salary": 0}
                if existing:
                    self.users[self.users.index(existing)] = updated
                else:
                    self.users.append(updated)
                return httpx.Response(200, json=updated)
            if method == "DELETE":
                if existing:
                    self.users.remove(existing)
                return httpx.Response(200, text=f"User with ID {user_id} deleted successfully!")

        return httpx.Response(404)

    async def yielding_handler(self, request: httpx.Request) -> httpx.Response:
        """Same answers, but the response arrives after other tasks get to run."""
        await asyncio.sleep(0.01)
        return self.handler(request)

    def count(self, method: str, path: str | None = None) -> int:
        return sum(1 for m, p in self.calls if m == method and (path is None or p == path))


def make_users(n: int) -> list[dict]:
    return [{"id": i, "name": f"User {i}", "email": f"user{i}@example.com"} for i in range(1, n + 1)]


@pytest.fixture
def fake_api(request):
    """Seed with @pytest.mark.users(n) or @pytest.mark.users([...])."""
    marker = request.node.get_closest_marker("users")
    if marker is None:
        return FakeEmployeeAPI()
    seed = marker.args[0]
    return FakeEmployeeAPI(make_users(seed) if isinstance(seed, int) else seed)


@pytest.fixture
def employee_client(fake_api):
    return EmployeeClient(base_url=BASE_URL, timeout=1.0, transport=httpx.MockTransport(fake_api.handler))


@pytest.fixture
def service(employee_client):
    return build_directory_service(employee_client)


@pytest.fixture
def client(service):
    """TestClient with the lifespan running, so the roster is loaded."""
    with TestClient(create_app(service)) as test_client:
        yield test_client


@pytest.fixture
def yielding_service(fake_api):
    """Directory service whose remote calls suspend, so requests can interleave."""
    transport = httpx.MockTransport(fake_api.yielding_handler)
    return build_directory_service(EmployeeClient(base_url=BASE_URL, timeout=1.0, transport=transport))
