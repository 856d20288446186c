"""Slip printing API routes."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from app.dependencies import AppSettings, Dispatcher
from app.slips.schemas import (
    HealthResponse,
    PreviewResponse,
    PrintersResponse,
    PrintRequest,
    PrintResponse,
)
from app.slips.service import SlipService, get_slip_service
from slipprint import __version__
from slipprint.layout import SAMPLE_ROWS

router = APIRouter()


def get_service(settings: AppSettings, dispatcher: Dispatcher) -> SlipService:
    """Get slip service dependency."""
    return get_slip_service(settings, dispatcher)


@router.get("/health", response_model=HealthResponse)
async def health():
    """Report that the server is running."""
    return HealthResponse(
        message="Server is running",
        timestamp=datetime.now(),
        version=__version__,
    )


@router.get("/printers", response_model=PrintersResponse)
def list_printers(dispatcher: Dispatcher):
    """List printers known to the host spooler.

    Args:
        dispatcher: Print dispatcher.

    Returns:
        PrintersResponse: Printer names, empty if the spooler is unreachable.
    """
    names = dispatcher.directory.names()
    return PrintersResponse(printers=names, count=len(names))


@router.post("/print", response_model=PrintResponse)
def print_slip(
    payload: PrintRequest,
    service: Annotated[SlipService, Depends(get_service)],
):
    """Render and print an order slip.

    Declared sync so the blocking spooler call runs in the threadpool.

    Args:
        payload: Rows to print.
        service: Slip service.

    Returns:
        PrintResponse: Job id and the backend that handled it.
    """
    result = service.print_slip(payload.rows())
    return PrintResponse(
        job_id=result.job_id,
        message=result.message or "Print job sent successfully",
        backend=result.backend,
        fallback_reason=result.fallback_reason,
    )


@router.post("/preview", response_model=PreviewResponse)
async def preview_slip(
    payload: PrintRequest,
    service: Annotated[SlipService, Depends(get_service)],
):
    """Render an order slip without printing it."""
    document = service.render(payload.rows())
    return PreviewResponse(lines=list(document.lines), text=document.render())


@router.get("/payload-test")
async def payload_test():
    """Return a sample payload mixing Latin and Devanagari titles."""
    return {
        "success": True,
        "message": "Payload test endpoint hit successfully",
        "payload": {"data": [list(row) for row in SAMPLE_ROWS]},
    }
