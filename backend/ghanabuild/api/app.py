"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from fastapi import Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ghanabuild import __version__
from ghanabuild.config import Settings
from ghanabuild.validation import Invalid, validate

if TYPE_CHECKING:
    from ghanabuild.engine import PricingEngine
    from ghanabuild.services.registry import ProjectRegistry

logger = logging.getLogger(__name__)

INVALID_SPECIFICATION_ERROR = "Invalid project specification"


def create_app(
    *,
    engine: PricingEngine | None = None,
    registry: ProjectRegistry | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built pricing engine (e.g. for tests). If not provided,
        one is created via create_default_engine on first request.
    registry
        Optional project registry. Defaults to a fresh in-memory registry.
    settings
        Optional settings; read from the environment when omitted.
    """
    settings = settings or Settings.from_env()
    app = FastAPI(title="Ghanabuild", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if registry is None:
        from ghanabuild.services.registry import InMemoryProjectRegistry

        registry = InMemoryProjectRegistry()

    # Store on app state so tests can inject mocks
    app.state.engine = engine
    app.state.registry = registry
    app.state.started_at = time.monotonic()

    def _get_engine() -> PricingEngine:
        eng: PricingEngine | None = app.state.engine
        if eng is not None:
            return eng
        from ghanabuild.factory import create_default_engine

        eng = create_default_engine()
        app.state.engine = eng
        return eng

    # ------------------------------------------------------------------
    # Error responses: every failure is {"error": "..."}
    # ------------------------------------------------------------------

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = "Route not found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": message})

    @app.exception_handler(RequestValidationError)
    async def malformed_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Malformed request body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(status_code=500, content={"error": "Something went wrong!"})

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, Any]:
        return {
            "status": "ok",
            "timestamp": datetime.now(UTC).isoformat(),
            "uptime": time.monotonic() - app.state.started_at,
            "environment": settings.environment,
            "version": __version__,
        }

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate", response_model=None)
    def estimate(payload: dict[str, Any] = Body(...)) -> dict[str, Any] | JSONResponse:
        result = validate(payload)
        if isinstance(result, Invalid):
            logger.warning("Rejected estimate request: %s", "; ".join(result.messages))
            return JSONResponse(status_code=400, content={"error": INVALID_SPECIFICATION_ERROR})

        try:
            cost_estimate = _get_engine().estimate(result.specification)
        except Exception:
            logger.exception("Error calculating estimate")
            return JSONResponse(
                status_code=500, content={"error": "Failed to calculate estimate"}
            )
        return cost_estimate.to_wire_dict()

    # ------------------------------------------------------------------
    # GET/POST /api/projects
    # ------------------------------------------------------------------

    @app.get("/api/projects")
    def list_projects() -> list[dict[str, Any]]:
        return [
            project.model_dump(mode="json", by_alias=True)
            for project in app.state.registry.list_projects()
        ]

    @app.post("/api/projects", status_code=201, response_model=None)
    def create_project(payload: dict[str, Any] = Body(...)) -> dict[str, Any] | JSONResponse:
        result = validate(payload)
        if isinstance(result, Invalid):
            logger.warning("Rejected project: %s", "; ".join(result.messages))
            return JSONResponse(status_code=400, content={"error": INVALID_SPECIFICATION_ERROR})

        project = app.state.registry.create(result.specification)
        return {
            "id": project.id,
            "project": project.model_dump(mode="json", by_alias=True),
        }

    return app
