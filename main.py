"""Greet Service - FastAPI Application Entry Point

A single-endpoint HTTP service that validates a JSON body carrying a
``name`` and answers with a greeting.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.errors import BODY_MUST_BE_JSON, ROUTE_NOT_FOUND, InvalidJSONBodyError
from app.routers import greet_router
from config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger("greet")

VERSION = __version__


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    # Startup
    logger.info(
        "Starting Greet Service",
        extra={"environment": settings.environment, "port": settings.port},
    )
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"Server started and listening on port {settings.port}.")

    yield

    # Shutdown
    logger.info("Shutting down Greet Service")


app = FastAPI(
    title="Greet Service",
    description="Validates a name and greets it",
    version=VERSION,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
)

app.include_router(greet_router)


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring and load balancer probes."""
    return {
        "status": "healthy",
        "version": VERSION,
        "environment": settings.environment,
    }


@app.exception_handler(InvalidJSONBodyError)
async def invalid_json_body_handler(request: Request, exc: InvalidJSONBodyError):
    """Reject bodies that are not decodable JSON."""
    logger.info(f"Undecodable body on {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content=BODY_MUST_BE_JSON)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as ``_errors`` bodies.

    Unknown paths and unsupported methods on known paths both answer 404.
    """
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content=ROUTE_NOT_FOUND)
    return JSONResponse(
        status_code=exc.status_code,
        content={"_errors": [str(exc.detail)]},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors.

    Logs the error and returns a user-friendly message.
    Never exposes internal error details to clients.
    """
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={
            "path": request.url.path,
            "method": request.method,
        },
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"_errors": ["An unexpected error occurred. Please try again."]},
    )


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
