"""
User API service.

Builds the FastAPI application: CORS, routers, and the error handler that
turns payload validation failures into 400 responses.

Serve directly with uvicorn's factory mode:

    uvicorn --factory user_api.main:create_app
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from user_api.config import Settings, load_settings
from user_api.errors import ValidationError
from user_api.handlers import docs, health, user
from user_api.store import IdGenerator, UserStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[UserStore] = None,
    id_generator: Optional[IdGenerator] = None,
) -> FastAPI:
    """
    Create the application with its own store.

    Args:
        settings: Service settings (read from the environment if omitted)
        store: User store (a fresh empty store if omitted)
        id_generator: Id generator for the fresh store; ignored when ``store`` is given

    Returns:
        Configured FastAPI app
    """
    if settings is None:
        settings = load_settings()
    if store is None:
        store = UserStore(id_generator=id_generator)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting server on port %s", settings.port)
        logger.info("Environment: %s", settings.env_name)
        yield

    app = FastAPI(
        title="User API",
        version="1.0.0",
        description="Create and list users held in memory",
        docs_url="/api-docs",
        openapi_url="/api-docs/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"error": exc.message})

    app.include_router(health.router)
    app.include_router(user.router)
    app.include_router(docs.router)

    return app
