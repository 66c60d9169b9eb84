import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .exceptions import TodoNotFoundError
from .rendering import render_fragment
from .repositories import InMemoryTodoRepository
from .routers import todos as todos_router
from .schemas import TodoListFilter
from .settings import get_settings

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "pages", "description": "Full HTML pages."},
    {
        "name": "todos",
        "description": "Todo mutations answered with HTML fragments for htmx to swap in.",
    },
]


# Global exception handlers
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for request validation errors.

    Response format:
        {
            "error": "ValidationError",
            "detail": [... pydantic/fastapi error details ...],
            "message": "Request validation failed"
        }
    """
    logger.info("Rejected %s %s: validation failed", request.method, request.url.path)
    return JSONResponse(
        status_code=422,
        content={
            "error": "ValidationError",
            "message": "Request validation failed",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


async def todo_not_found_handler(request: Request, exc: TodoNotFoundError) -> JSONResponse:
    """
    Map a reference to a todo that no longer exists to 404. The store is left untouched.
    """
    return JSONResponse(status_code=404, content={"detail": "Todo not found"})


# PUBLIC_INTERFACE
def create_app() -> FastAPI:
    """
    Build the application with a fresh, empty in-memory store.
    """
    settings = get_settings()

    app = FastAPI(
        title="TodoMVC",
        description="Server-rendered TodoMVC backed by server memory and driven by htmx.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.repository = InMemoryTodoRepository()
    app.state.selected_filter = TodoListFilter.ALL

    # Configure CORS based on settings (CORS_ALLOW_ORIGINS), with '*' fallback
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(TodoNotFoundError, todo_not_found_handler)

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/", response_class=HTMLResponse, summary="Index", tags=["pages"])
    def index(request: Request) -> HTMLResponse:
        """
        Full page shell holding the current list, counters and controls.
        """
        repo = app.state.repository
        selected = app.state.selected_filter
        return render_fragment(request, "index.html", repo, selected, todos=repo.list(selected.completed))

    @app.get("/health", summary="Health Check", tags=["health"])
    def health_check():
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health.
        """
        return {"message": "Healthy"}

    app.include_router(todos_router.router)
    return app


app = create_app()
