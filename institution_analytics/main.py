"""
FastAPI application: middleware, error envelopes and router registration.

Run with: uvicorn institution_analytics.main:app
"""
import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import ALLOWED_ORIGINS
from .errors import INTERNAL_ERROR, ServiceError
from .routers import (
    analytics_router,
    export_router,
    health_router,
    tracker_router,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Institution Analytics", version="1.0.0")


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Custom exception handler to log all errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("=== UNHANDLED EXCEPTION ===")
    logger.error(f"Path: {request.url.path}")
    logger.error(f"Method: {request.method}")
    logger.error(f"Exception type: {type(exc).__name__}")
    logger.error(f"Exception message: {str(exc)}")
    logger.error(f"Traceback: {traceback.format_exc()}")
    return JSONResponse(
        status_code=500,
        content={"error": {"code": INTERNAL_ERROR, "message": str(exc)}}
    )


# Log all requests
@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.debug("=== INCOMING REQUEST ===")
    logger.debug(f"Method: {request.method}")
    logger.debug(f"Path: {request.url.path}")

    response = await call_next(request)

    logger.debug("=== RESPONSE ===")
    logger.debug(f"Status code: {response.status_code}")

    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(analytics_router)
app.include_router(tracker_router)
app.include_router(export_router)
