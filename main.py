# type: ignore
# pyright: reportGeneralTypeIssues=false
"""
User Directory Service
======================
Admin view over the remote employees API: list, search, paginate, add,
update and delete employee records.

The roster is fetched once at startup and kept in memory; searching and
paging never hit the network. Mutations are applied locally only after the
employees API confirms them.

Port: 8080
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from user_directory.controllers.directory_controller import router as directory_router
from user_directory.controllers.page_controller import router as page_router
from user_directory.controllers.system_controller import router as system_router
from user_directory.core.config import settings
from user_directory.core.dependencies import build_directory_service
from user_directory.core.logging import get_logger
from user_directory.middleware import MetricsMiddleware, RequestIDMiddleware
from user_directory.schemas.directory import ErrorResponse
from user_directory.services.directory_service import DirectoryService, DraftRejected
from user_directory.services.employee_client import RemoteServiceError

logger = get_logger(settings.SERVICE_NAME)


@asynccontextmanager
async def lifespan(application: FastAPI):
    """Load the roster once per activation; close the HTTP client on shutdown."""
    service: DirectoryService = application.state.directory_service
    await service.load_all()
    logger.info(
        "%s v%s started (employees API %s)",
        settings.SERVICE_NAME, settings.SERVICE_VERSION, service.client.base_url,
    )
    yield
    await service.client.aclose()
    logger.info("%s shutting down", settings.SERVICE_NAME)


def create_app(directory_service: DirectoryService | None = None) -> FastAPI:
    application = FastAPI(
        title="User Directory Service",
        version=settings.SERVICE_VERSION,
        description="Admin view over the employees API",
        lifespan=lifespan,
        responses={
            422: {"model": ErrorResponse, "description": "Validation error"},
            502: {"model": ErrorResponse, "description": "Employees API failure"},
        },
    )
    application.state.directory_service = directory_service or build_directory_service()

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(MetricsMiddleware)
    application.add_middleware(RequestIDMiddleware)

    @application.exception_handler(DraftRejected)
    async def draft_rejected_handler(request: Request, exc: DraftRejected):
        return JSONResponse(
            status_code=422,
            content={"error": "validation_failed", "detail": str(exc), "fields": exc.errors},
        )

    @application.exception_handler(RemoteServiceError)
    async def remote_error_handler(request: Request, exc: RemoteServiceError):
        return JSONResponse(
            status_code=502,
            content={"error": "employee_api_failure", "detail": str(exc)},
        )

    @application.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        req_id = getattr(request.state, "request_id", None)
        logger.exception("Unhandled exception", extra={"request_id": req_id})
        return JSONResponse(
            status_code=500,
            content={"error": "internal_server_error", "detail": str(exc)},
        )

    application.include_router(system_router)
    application.include_router(page_router)
    application.include_router(directory_router)
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT)
