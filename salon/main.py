"""FastAPI application for the salon manager.

Run with:
    python -m salon.main
or:
    uvicorn salon.main:create_app --factory
"""

from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api import adjustments, appointments, customers, services, settings
from .config import logger as log
from .config.env import get_api_host, get_api_port
from .container import Container, set_container
from .domain.errors import (
    InvalidStateTransitionError,
    NotFoundError,
    SalonError,
    StorageError,
    ValidationError,
)
from .repositories.json_store.factory import create_json_container

load_dotenv()

STATUS_CODES = {
    NotFoundError: 404,
    ValidationError: 400,
    InvalidStateTransitionError: 409,
    StorageError: 500,
}


def _status_for(exc: SalonError) -> int:
    for error_type, status_code in STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status_code
    return 500


async def handle_salon_error(request: Request, exc: SalonError) -> JSONResponse:
    status_code = _status_for(exc)
    if isinstance(exc, StorageError):
        log.error("api", "storage failure", path=request.url.path, error=exc.message)
        return JSONResponse(status_code=status_code, content={"error": "Storage failure"})

    log.warn("api", "request rejected", path=request.url.path, status=status_code, error=exc.message)
    return JSONResponse(status_code=status_code, content={"error": exc.message})


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    log.warn("api", "invalid request body", path=request.url.path, error=message)
    return JSONResponse(status_code=400, content={"error": message})


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Builds the application and installs the repository container.

    Args:
        container: Repositories to use. Defaults to JSON files in SALON_DATA_DIR.
    """
    set_container(container or create_json_container())

    app = FastAPI(
        title="Salon Manager API",
        description="Customers, services and appointments for a hair salon",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SalonError, handle_salon_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)

    app.include_router(services.router)
    app.include_router(customers.router)
    app.include_router(appointments.router)
    app.include_router(adjustments.router)
    app.include_router(settings.router)

    @app.get("/health")
    def health():
        return {"status": "healthy", "version": __version__}

    log.info("api", "application created", version=__version__)
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "salon.main:create_app",
        factory=True,
        host=get_api_host(),
        port=get_api_port(),
    )
