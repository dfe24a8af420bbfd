# Standard library imports
from contextlib import asynccontextmanager
from http import HTTPStatus
from pathlib import Path
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import user_router, hobby_router
from .core.config import get_settings
from .core.exceptions import UserHobbiesError, BadRequestError, InternalFaultError
from .core.logging_config import setup_logging
from .domain.exceptions import RepositoryError
from .infrastructure.db.mongo_connection import close_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    The MongoDB client is created lazily by the first request and closed here.
    """
    settings = get_settings()
    logger.info(f"User hobbies API starting with '{settings.storage_backend}' storage")
    
    yield
    
    close_client()
    logger.info("Application shutdown complete")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Render every error as ``{"status": <code>, "message": <text>}``.
    """
    
    @app.exception_handler(UserHobbiesError)
    async def handle_user_hobbies_error(request: Request, exc: UserHobbiesError):
        return JSONResponse(status_code=int(exc.status_code), content=exc.to_dict())
    
    @app.exception_handler(RepositoryError)
    async def handle_repository_error(request: Request, exc: RepositoryError):
        logger.error(f"Store fault on {request.method} {request.url.path}: {exc}", exc_info=exc)
        error = InternalFaultError()
        return JSONResponse(status_code=int(error.status_code), content=error.to_dict())
    
    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        error = BadRequestError()
        return JSONResponse(status_code=int(error.status_code), content=error.to_dict())
    
    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": exc.status_code, "message": HTTPStatus(exc.status_code).phrase},
            headers=getattr(exc, "headers", None),
        )
    
    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        error = InternalFaultError()
        return JSONResponse(status_code=int(error.status_code), content=error.to_dict())


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - CORS middleware configuration (browser form UI)
    - Error envelope handlers
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    setup_logging(settings.log_level)
    
    application = FastAPI(
        title="User Hobbies",
        version="1.0.0",
        description="API for a simple user hobbies application",
        lifespan=lifespan,
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_exception_handlers(application)
    
    application.include_router(user_router)
    application.include_router(hobby_router)
    
    return application


# Create application instance
app = create_application()
