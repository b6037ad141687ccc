"""FastAPI application exposing strip-tags over HTTP.

Exports ``app`` for use with ``uvicorn main:app``.
"""

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from extraction import __version__, extract
from extraction.logs import configure_logging
from extraction.settings import settings
from models.request import StripRequest
from models.response import ErrorResponse, StripResponse
from parsing.errors import StripError
from parsing.pruning import parse_html

logger = configure_logging(settings.log_level or logging.INFO)


# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(title="strip-tags", version=__version__)


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

@app.exception_handler(StripError)
async def strip_error_handler(request: Request, exc: StripError) -> JSONResponse:
    """Report parse and selector failures as a 400 with their error kind."""
    logger.info("strip failed", extra={"error_kind": exc.kind.value})
    body = ErrorResponse(error=exc.kind, detail=str(exc))
    return JSONResponse(status_code=400, content=body.model_dump(mode="json"))


@app.exception_handler(Exception)
async def catch_all_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected exceptions and return a generic 500."""
    logger.error(
        "Unhandled exception: %s: %s\n%s",
        type(exc).__name__,
        exc,
        traceback.format_exc(),
    )
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
async def health() -> dict:
    """Health check."""
    return {"status": "healthy"}


@app.post("/strip", response_model=StripResponse)
async def strip(request: StripRequest) -> StripResponse:
    """Strip tags from the submitted markup.

    Every request parses its own tree, so concurrent requests never share
    mutable state.
    """
    logger.info(
        "strip request",
        extra={"selector": ",".join(request.selectors), "chars": len(request.html)},
    )

    soup = parse_html(request.html, settings.parser)
    text = extract(soup, request.to_config())

    logger.info("strip response", extra={"chars": len(text)})

    return StripResponse(text=text)
