# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection: wire repositories, clients and services.
"""

from fastapi import Request

from user_directory.repositories.roster_repository import RosterRepository
from user_directory.services.directory_service import DirectoryService
from user_directory.services.employee_client import EmployeeClient


def build_directory_service(employee_client: EmployeeClient | None = None) -> DirectoryService:
    """One service per view activation: fresh roster, fresh draft."""
    return DirectoryService(
        roster_repo=RosterRepository(),
        employee_client=employee_client or EmployeeClient(),
    )


# ── FastAPI dependency functions ──
def get_directory_service(request: Request) -> DirectoryService:
    return request.app.state.directory_service
