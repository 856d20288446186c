"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.slips.router import router as slips_router
from app.slips.schemas import ErrorResponse
from slipprint import __version__
from slipprint.printing import PrinterError

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events.

    Args:
        app: FastAPI application instance.
    """
    logger.info(f"{settings.app_name} started")
    logger.info(f"Organization: {settings.org_name}")
    logger.info(f"Default Printer: {settings.printer_name or 'Auto-detect'}")
    logger.info(f"Page Width: {settings.page_width}")
    logger.info(f"Print Method: {settings.print_method}")
    yield


app = FastAPI(
    title=settings.app_name,
    description="Prints fixed-width order slips on the local printer",
    version=__version__,
    lifespan=lifespan,
    debug=settings.debug,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path and duration of every request."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.0f} ms)"
    )
    return response


@app.exception_handler(PrinterError)
async def printer_error_handler(request: Request, exc: PrinterError):
    """Return printer failures as JSON errors."""
    logger.error(f"Print error: {exc}")
    return JSONResponse(status_code=500, content=ErrorResponse(error=str(exc)).model_dump())


app.include_router(slips_router, tags=["slips"])
