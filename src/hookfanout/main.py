"""
Module: main.py
Description: FastAPI application entry point for the hook dispatcher.

Initializes the FastAPI application with all routes, middleware,
and error handlers. Importing this module validates the dispatch
configuration, so an invalid batch size or retry count stops startup.
"""

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mangum import Mangum

from hookfanout.config.settings import settings
from hookfanout.handlers.hooks import router as hooks_router
from hookfanout.utils.logger import configure_logging, get_logger

configure_logging(settings.log_level)
logger = get_logger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Batched fan-out of trigger notifications to registered hooks",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(hooks_router)


@app.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns basic application health information.
    """
    logger.info("Health check requested")

    return {
        "status": "ok",
        "message": "Hook Fanout API is healthy",
        "version": settings.app_version,
        "environment": settings.stage
    }


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """
    Global HTTP exception handler.

    Logs HTTP exceptions and returns structured error responses.
    """
    logger.warning(
        "HTTP exception occurred",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
        method=request.method
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": exc.status_code,
                "message": exc.detail,
                "type": "http_exception"
            }
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unhandled errors.

    Logs unexpected exceptions and returns generic error responses.
    """
    logger.error(
        "Unhandled exception occurred",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
        method=request.method
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": 500,
                "message": "Internal server error",
                "type": "internal_error"
            }
        }
    )


@app.on_event("startup")
async def startup_event():
    """Application startup event handler."""
    logger.info(
        "Starting Hook Fanout API",
        version=settings.app_version,
        stage=settings.stage,
        batch_size=settings.batch_size,
        retry_count=settings.retry_count
    )


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown event handler."""
    logger.info("Shutting down Hook Fanout API")


# Lambda handler
handler = Mangum(app, lifespan="off")
