import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .errors import TodoApiError
from .logging_config import setup_logging
from .routers import data as data_router
from .routers import todos as todos_router
from .routers import users as users_router
from .services import DataService, TodoService, UserService
from .settings import Settings, get_settings
from .store import InMemoryDataStore

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "users", "description": "CRUD and search operations for users."},
    {"name": "todos", "description": "CRUD operations and date queries for todo items."},
    {"name": "data", "description": "Inspect, reset and seed the in-memory data store."},
]


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application together with the data store it owns.

    The store and the services are created here, once per application, and
    kept on ``app.state`` where the endpoint dependencies look them up.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title="Todo API",
        description="A simple API for managing users and their todo items, backed by an in-memory store.",
        version="1.0.0",
        openapi_tags=openapi_tags,
    )

    store = InMemoryDataStore.from_settings(settings)
    user_service = UserService(store)
    app.state.settings = settings
    app.state.store = store
    app.state.user_service = user_service
    app.state.todo_service = TodoService(store, user_service)
    app.state.data_service = DataService(store, settings)

    # '*' (or nothing configured) allows every origin
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """
        Return 400 with a consistent JSON structure for request validation errors.

        Response format:
            {
                "error": "ValidationError",
                "detail": [... pydantic/fastapi error details ...],
                "message": "Request validation failed"
            }
        """
        return JSONResponse(
            status_code=400,
            content={
                "error": "ValidationError",
                "message": "Request validation failed",
                # ValueErrors raised by validators sit in the error context
                "detail": jsonable_encoder(exc.errors(), custom_encoder={Exception: str}),
            },
        )

    @app.exception_handler(TodoApiError)
    async def domain_exception_handler(request: Request, exc: TodoApiError) -> JSONResponse:
        logger.warning("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": type(exc).__name__, "detail": exc.message},
        )

    @app.get("/", summary="Health Check", tags=["health"])
    def health_check():
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health.
        """
        return {"message": "Healthy"}

    app.include_router(users_router.router)
    app.include_router(todos_router.router)
    app.include_router(data_router.router)
    return app


app = create_app()
