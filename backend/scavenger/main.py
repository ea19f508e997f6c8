"""
Data Risk Scavenger API Application

Main FastAPI application entry point.
"""

# Load environment variables FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from scavenger.api.routes import get_api_router
from scavenger.config import get_settings
from scavenger.services.scan import get_scan_coordinator
from scavenger.utils.constants import APP_DESCRIPTION, SERVICE_METADATA
from scavenger.utils.exceptions import ValidationError, ScanFailedError

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(f"Starting {settings.app_name} API...")

    coordinator = get_scan_coordinator()
    status = coordinator.get_provider_status()

    logger.info("=== Source Configuration ===")
    for source in status.values():
        display_name = SERVICE_METADATA.get(source["name"], {}).get("display_name", source["name"])
        logger.info(f"  {display_name}: {'✓' if source['configured'] else '✗'}")
    logger.info(
        f"  Timeouts: adapter {coordinator.adapter_timeout}s, pass {coordinator.pass_timeout}s"
    )

    logger.info(f"{settings.app_name} API started successfully")

    yield

    # Shutdown
    logger.info(f"{settings.app_name} API shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=f"{settings.app_name} API",
    description=APP_DESCRIPTION,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

logger.info(f"CORS allowed origins: {settings.cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Include API routes
app.include_router(get_api_router())


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint - API info."""
    return {
        "name": f"{settings.app_name} API",
        "description": APP_DESCRIPTION,
        "version": settings.app_version,
        "docs": "/docs",
    }


# Root-level health check (for Docker/K8s)
@app.get("/health")
async def health():
    """Basic health check."""
    return {
        "status": "healthy",
        "service": "data-risk-scavenger",
        "version": settings.app_version,
    }


# Error handlers
@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: ValidationError):
    """Invalid identity input."""
    return JSONResponse(status_code=400, content={"error": "Invalid input", "detail": exc.message})


@app.exception_handler(ScanFailedError)
async def scan_failed_exception_handler(request: Request, exc: ScanFailedError):
    """Every email pass failed."""
    logger.error(f"Scan failed: {exc.message}")
    return JSONResponse(
        status_code=502,
        content={"error": "Scan failed", "detail": "Scan failed for every email. Please try again."},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if settings.debug else "An error occurred",
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "scavenger.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
