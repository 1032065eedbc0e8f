# src/greenrun/api/app.py
"""
FastAPI application factory for the GreenRun API.

The estimation route is exposed both at the root (`/estimate`, as used by
the web client) and under the versioned `/api/v1` prefix.
"""

import logging
import math

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from greenrun import __version__
from greenrun.api.routers import config as config_router
from greenrun.api.routers import estimate
from greenrun.core.config import config
from greenrun.core.exceptions import InvalidEstimateRequestError

logger = logging.getLogger(__name__)


def _renderable(err: dict) -> dict:
    # NaN and infinities have no JSON form, so the rejected input is echoed as text.
    value = err.get("input")
    if isinstance(value, float) and not math.isfinite(value):
        return {**err, "input": str(value)}
    return err


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    """Undecodable JSON is a plain 400; schema mismatches keep FastAPI's 422."""
    json_errors = [err for err in exc.errors() if err.get("type") == "json_invalid"]
    if json_errors:
        detail = (json_errors[0].get("ctx") or {}).get("error") or json_errors[0].get("msg", "")
        logger.info("Rejected malformed JSON payload on %s: %s", request.url.path, detail)
        return PlainTextResponse(f"invalid json: {detail}", status_code=400)
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder([_renderable(err) for err in exc.errors()])})


async def _invalid_request_handler(request: Request, exc: InvalidEstimateRequestError):
    return PlainTextResponse(str(exc), status_code=400)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        A configured FastAPI application instance.
    """
    app = FastAPI(
        title="GreenRun API",
        description="Estimate energy, carbon footprint and cost of request-driven container workloads.",
        version=__version__,
        docs_url="/api/v1/docs",
        openapi_url="/api/v1/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_methods=["POST", "OPTIONS", "GET"],
        allow_headers=["Content-Type"],
    )
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(InvalidEstimateRequestError, _invalid_request_handler)

    # Register API routers
    app.include_router(estimate.router, tags=["Estimate"])
    app.include_router(estimate.router, prefix="/api/v1", tags=["Estimate"])
    app.include_router(config_router.router, prefix="/api/v1", tags=["Config"])

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root():
        return "GreenRun estimation API"

    @app.get("/healthz", response_class=PlainTextResponse, include_in_schema=False)
    async def healthz():
        """Liveness check."""
        return "ok"

    return app


def main():
    """Entry point for the greenrun-api console script."""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    app = create_app()
    logger.info("listening on %s:%s", config.API_HOST, config.API_PORT)
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
