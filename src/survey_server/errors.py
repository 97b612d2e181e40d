"""Global exception handlers — map SDK exceptions to HTTP status codes.

Rather than catching SDK errors in every route, we install global handlers
that pick the right HTTP status code.  This keeps route handlers focused on
the happy path.

  - InvalidStateError  → 409 (e.g. answering a completed survey)
  - ConfigurationError → 500 (the loaded survey is unusable)
  - ValueError         → 400
  - anything else      → 500
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from survey_engine.errors import ConfigurationError, InvalidStateError

logger = logging.getLogger(__name__)


async def invalid_state_handler(request: Request, exc: InvalidStateError) -> JSONResponse:
    """Map ``InvalidStateError`` to 409 Conflict.

    The message only describes the session state the client sent, so it is
    safe to return verbatim.
    """
    logger.warning("InvalidStateError at %s: %s", request.url, exc)
    return JSONResponse(status_code=409, content={"detail": str(exc)})


async def configuration_error_handler(
    request: Request, exc: ConfigurationError
) -> JSONResponse:
    """Map ``ConfigurationError`` to 500; file paths stay in the server log."""
    logger.error("ConfigurationError at %s: %s", request.url, exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Survey is misconfigured"},
    )


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Map a stray ``ValueError`` to 400 with a generic message."""
    logger.warning("ValueError at %s: %s", request.url, exc)
    return JSONResponse(status_code=400, content={"detail": "Invalid request"})


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions — log full traceback, return 500."""
    logger.exception("Unhandled exception at %s", request.url)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )
