"""
EconoTrends - Main Application.

FastAPI application exposing the analytics engine with feature flags.
"""

import logging
import sys
import traceback
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from econotrends import __version__
from econotrends.api.routes.metrics import router as metrics_router
from econotrends.config import get_settings
from econotrends.exceptions import EconoTrendsException
from econotrends.modules import analytics_router, forecast_router, indicators_router
from econotrends.observability import get_metrics_store
from econotrends.schemas import HealthResponse

# Configure standard logging
logging.basicConfig(
    level=get_settings().app_log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger("econotrends")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    logger.info(
        f"Starting EconoTrends API v{__version__} "
        f"[env={settings.app_env}] "
        f"[randomness={settings.analytics.randomness}] "
        f"[features={settings.features.to_dict()}]"
    )
    yield
    logger.info("Shutting down EconoTrends API")


# Create FastAPI application
app = FastAPI(
    title="EconoTrends API",
    description="Statistics, trend analysis, and short-horizon forecasts for economic indicators.",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Middleware
# =============================================================================


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    request_id = getattr(request.state, "request_id", "unknown")
    logger.info(f"[{request_id}] {request.method} {request.url.path}")

    response = await call_next(request)

    logger.info(f"[{request_id}] {request.method} {request.url.path} -> {response.status_code}")

    return response


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID to all requests."""
    request_id = request.headers.get("X-Request-ID") or str(uuid4())
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id

    return response


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(EconoTrendsException)
async def econotrends_exception_handler(request: Request, exc: EconoTrendsException):
    """Handle EconoTrends custom exceptions."""
    request_id = getattr(request.state, "request_id", None)

    logger.warning(f"EconoTrendsException: {exc.code} - {exc.message}")
    get_metrics_store().record_error(exc.code)

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": exc.code,
                "message": exc.message,
                "details": exc.details,
                "request_id": request_id,
            }
        },
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render request validation failures as INVALID_PARAMETER, naming the fields."""
    request_id = getattr(request.state, "request_id", None)
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in exc.errors()
    ]

    logger.warning(f"Request validation failed on {request.url.path}: {errors}")
    get_metrics_store().record_error("INVALID_PARAMETER")

    return JSONResponse(
        status_code=422,
        content={
            "error": {
                "code": "INVALID_PARAMETER",
                "message": "Request parameters failed validation",
                "details": {"errors": errors},
                "request_id": request_id,
            }
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    request_id = getattr(request.state, "request_id", None)

    # Log the full traceback
    logger.error(f"Unhandled exception on {request.url.path}")
    logger.error(f"Exception type: {type(exc).__name__}")
    logger.error(f"Exception message: {str(exc)}")
    logger.error(f"Traceback:\n{traceback.format_exc()}")
    get_metrics_store().record_error("INTERNAL_ERROR")

    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": str(exc) if get_settings().app_debug else "An unexpected error occurred",
                "request_id": request_id,
            }
        },
    )


# =============================================================================
# Health Check
# =============================================================================


@app.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check():
    """Health check endpoint."""
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        version=__version__,
        features=settings.features.to_dict(),
        app_env=settings.app_env,
        is_production=settings.is_production,
        randomness=settings.analytics.randomness,
    )


# =============================================================================
# Register Module Routers
# =============================================================================

app.include_router(indicators_router)
app.include_router(analytics_router)
app.include_router(forecast_router)
app.include_router(metrics_router)


# =============================================================================
# Root Endpoint
# =============================================================================


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint redirect to docs."""
    return {"message": "Welcome to EconoTrends API", "docs": "/docs"}


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("econotrends.main:app", host="0.0.0.0", port=8000)
