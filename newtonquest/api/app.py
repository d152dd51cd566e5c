"""
FastAPI Application - REST API for a front end.

Endpoints:
    GET    /api/v1/scene      Current scene, health, inventory, choices
    POST   /api/v1/choices    Pick a choice by index
    POST   /api/v1/reset      Start a new game
    GET    /health            Health check

One app serves one play-through; the save lives in the configured store.

Run with:
    uvicorn newtonquest.api.app:create_app --factory
"""

from typing import Union

from .. import __version__
from .. import config


def create_app(service=None, scenes_file=None, save_dir=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)
        scenes_file: Scene content file, overrides NEWTON_SCENES_FILE
        save_dir: Save directory, overrides NEWTON_SAVE_DIR

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI, Request
        from fastapi.exceptions import RequestValidationError
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .service import APIService
    from .schemas import (
        ChooseRequest,
        SceneResponse,
        ErrorResponse,
        HealthResponse,
        ErrorCode,
    )
    from ..session import ChoiceUnavailable

    app = FastAPI(
        title="Newton Quest API",
        description="""
Interactive fiction engine - walk a scene graph one choice at a time.

## Flow

1. `GET /api/v1/scene` to draw the current scene
2. `POST /api/v1/choices` with one of the listed `index` values
3. Draw the returned scene; repeat

Every choice is saved. `POST /api/v1/reset` starts over (saved with the
next choice).

## Error Codes

| Code | Description |
|------|-------------|
| `CHOICE_UNAVAILABLE` | The index is not one of the visible choices |
| `VALIDATION_ERROR` | The request body is malformed (HTTP 422) |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Service instance
    api_service = service or APIService(
        graph=config.build_graph(scenes_file),
        store=config.build_store(save_dir),
    )

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: dict | None = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Report malformed request bodies as VALIDATION_ERROR."""
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Request validation failed",
            status_code=422,
            details={
                "errors": [
                    {"loc": [str(part) for part in err["loc"]], "msg": err["msg"]}
                    for err in exc.errors()
                ],
            },
        )

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/scene",
        response_model=SceneResponse,
        tags=["Game"],
        summary="Get the current scene",
    )
    async def get_scene() -> SceneResponse:
        """Title, body, health, inventory and the visible choices."""
        return api_service.get_scene()

    @app.post(
        "/api/v1/choices",
        response_model=SceneResponse,
        responses={
            409: {"model": ErrorResponse, "description": "Choice not available"},
            422: {"model": ErrorResponse, "description": "Malformed request body"},
        },
        tags=["Game"],
        summary="Pick a choice in the current scene",
    )
    async def choose(body: ChooseRequest) -> Union[SceneResponse, JSONResponse]:
        """
        Resolve the chosen link and return the resulting scene.

        **Request Body:**
        ```json
        {"index": 1}
        ```
        """
        try:
            return api_service.choose(body.index)
        except ChoiceUnavailable as e:
            return make_error_response(
                ErrorCode.CHOICE_UNAVAILABLE,
                str(e),
                status_code=409,
                details={
                    "scene_id": e.scene_id,
                    "valid_indexes": [c.index for c in api_service.session.view().choices],
                },
            )

    @app.post(
        "/api/v1/reset",
        response_model=SceneResponse,
        tags=["Game"],
        summary="Start a new game",
    )
    async def reset_game() -> SceneResponse:
        """Replace the current progress with a new game."""
        return api_service.reset()

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="newtonquest",
            version=__version__,
            environment=config.NEWTON_ENV,
        )

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Newton Quest API",
            "version": __version__,
            "docs": "/api/docs",
            "health": "/health",
        }

    return app
