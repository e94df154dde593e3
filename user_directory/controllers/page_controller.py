# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: HTML page for operators.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from user_directory.core.dependencies import get_directory_service
from user_directory.services.directory_service import DirectoryService
from user_directory.ui.page import render_page

router = APIRouter(tags=["UI"])


@router.get("/", response_class=HTMLResponse)
def index(service: DirectoryService = Depends(get_directory_service)):
    return render_page(service.current_page(), service.view_state, service.draft)
