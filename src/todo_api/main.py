from __future__ import annotations

import logging
import time
import uuid
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware

from .controllers import TodoController
from .errors import INTERNAL_ERROR_MESSAGE, error_response, register_exception_handlers
from .logging_utils import configure_logging, reset_request_id, set_request_id
from .repositories import InMemoryRepository, Repository
from .routers import simple as simple_router
from .routers import todos as todos_router
from .schemas import HealthOut
from .services import TodoService
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "todos", "description": "CRUD operations for Todo items, wrapped in a data envelope."},
    {"name": "todos-simple", "description": "List and create Todo items without an envelope."},
]


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None, repository: Optional[Repository] = None) -> FastAPI:
    """
    Build the FastAPI application.

    This is the composition root: the repository is constructed once, injected into the
    service, the service into the controller, and the controller is stored on app.state
    where the routers' dependency picks it up.

    Args:
        settings: Explicit settings; read from the environment when omitted.
        repository: Storage backend; a fresh InMemoryRepository when omitted.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Todo API",
        description="Layered in-memory Todo CRUD API (router, controller, service, repository).",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )

    repo = repository if repository is not None else InMemoryRepository()
    app.state.settings = settings
    app.state.todo_controller = TodoController(TodoService(repo))

    # Configure CORS based on settings (CORS_ORIGIN), '*' or empty allows any origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.allow_all_origins else settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        token = set_request_id(request_id)
        started = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception:
                # Handled here rather than in ServerErrorMiddleware so the request id is still set
                logger.exception("Unhandled error on %s %s", request.method, request.url.path)
                response = error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms
            )
        finally:
            reset_request_id(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    register_exception_handlers(app)

    # PUBLIC_INTERFACE
    @app.get("/health", response_model=HealthOut, summary="Health Check", tags=["health"])
    def health_check() -> HealthOut:
        """
        Health check endpoint.

        Returns:
            {"status": "ok"}
        """
        return HealthOut()

    app.include_router(todos_router.router)
    app.include_router(simple_router.router)

    logger.debug("Application created (env=%s, cors=%s)", settings.app_env, settings.cors_origins)
    return app


app = create_app()
