"""Cross-platform printing abstraction.

Provides a unified spooler interface across Linux/macOS (CUPS) and Windows
(PowerShell). Use get_native_backend() to get the appropriate backend for the
current platform and PrintDispatcher to print with automatic fallback to a
mock backend.
"""

from slipprint.printing.base import (
    Backend,
    PrinterBackend,
    PrinterDescriptor,
    PrinterError,
    PrintJobResult,
    StagingError,
    SubmissionError,
)
from slipprint.printing.dispatcher import DispatchState, PrintDispatcher, PrintMethod
from slipprint.printing.factory import get_native_backend

__all__ = [
    "Backend",
    "DispatchState",
    "PrintDispatcher",
    "PrintJobResult",
    "PrintMethod",
    "PrinterBackend",
    "PrinterDescriptor",
    "PrinterError",
    "StagingError",
    "SubmissionError",
    "get_native_backend",
]
