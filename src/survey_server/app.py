"""Application factory and CLI entry point.

``create_app()`` builds the FastAPI application with:
  - Lifespan handler that loads the question set once
  - CORS middleware
  - Global exception handlers (InvalidStateError → 409, ConfigurationError → 500)
  - All API routes mounted under ``/api/v1``
  - The single-page survey widget at ``/``
  - A ``/health`` endpoint for readiness probes

The ``cli()`` function is the ``survey-server`` console-script entry point.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from survey_engine.errors import ConfigurationError, InvalidStateError
from survey_engine.questions import QuestionStore

from survey_server.config import ServerSettings, load_settings
from survey_server.errors import (
    configuration_error_handler,
    generic_error_handler,
    invalid_state_handler,
    value_error_handler,
)
from survey_server.routes import register_routes

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


# ------------------------------------------------------------------
# Lifespan, runs once at startup/shutdown
# ------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the question set at startup and stash it on ``app.state``.

    A missing or invalid question file raises ``ConfigurationError`` here,
    so the server refuses to start rather than serving a broken survey.
    """
    settings: ServerSettings = app.state.settings

    store = QuestionStore(settings.question_file)
    app.state.questions = store.load()
    logger.info("Survey ready: %d questions", app.state.questions.total)

    yield


# ------------------------------------------------------------------
# Factory
# ------------------------------------------------------------------

def create_app(settings: ServerSettings | None = None) -> FastAPI:
    """Build and return the configured FastAPI application."""
    if settings is None:
        settings = load_settings()

    # --- Configure logging ---
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title="Survey Widget",
        description="Single-page multiple-choice survey",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store settings so the lifespan handler can read them
    app.state.settings = settings

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Exception handlers ---
    app.add_exception_handler(InvalidStateError, invalid_state_handler)
    app.add_exception_handler(ConfigurationError, configuration_error_handler)
    app.add_exception_handler(ValueError, value_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    # --- Health check (outside /api/v1 prefix) ---
    @app.get("/health")
    async def health(request: Request) -> dict:
        """Readiness probe, reports how many questions are loaded."""
        return {"status": "ok", "questions": request.app.state.questions.total}

    # --- Widget ---
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/", response_class=HTMLResponse)
    def index() -> HTMLResponse:
        index_html = STATIC_DIR / "index.html"
        if not index_html.exists():
            raise HTTPException(status_code=500, detail="Missing widget index.html")
        return HTMLResponse(index_html.read_text(encoding="utf-8"))

    # --- Mount all API routes ---
    register_routes(app)

    return app


# ------------------------------------------------------------------
# Module-level ASGI export (for uvicorn survey_server.app:app)
# ------------------------------------------------------------------
app = create_app()


# ------------------------------------------------------------------
# CLI entry point
# ------------------------------------------------------------------

def cli() -> None:
    """Console-script entry point: ``survey-server``."""
    import uvicorn

    settings = load_settings()
    uvicorn.run(
        "survey_server.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=False,
    )
