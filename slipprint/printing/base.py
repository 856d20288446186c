"""Printer backend interface, results and errors."""

import logging
import tempfile
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class PrinterError(Exception):
    """Error during printing operation."""

    pass


class SubmissionError(PrinterError):
    """The spooler rejected the job or could not be invoked."""

    pass


class StagingError(SubmissionError):
    """Content could not be written to its staging file."""

    pass


class Backend(str, Enum):
    """Destination strategy a job was submitted through."""

    NATIVE_SPOOLER = "native_spooler"
    FILE_CAPTURE = "file_capture"
    MOCK = "mock"


@dataclass(frozen=True)
class PrinterDescriptor:
    """A printer known to the host."""

    name: str


@dataclass(frozen=True)
class PrintJobResult:
    """Outcome of a print request.

    Attributes:
        job_id: Spooler job identifier, or a synthesized one.
        message: Human readable summary.
        backend: Backend that handled the job.
        output: Stdout of the spooler command, if any.
        file_path: Written file (file capture only).
        fallback_reason: Why auto mode fell back to mock, if it did.
    """

    job_id: str
    message: str
    backend: Backend
    output: str = ""
    file_path: Path | None = None
    fallback_reason: str | None = None


@runtime_checkable
class PrinterBackend(Protocol):
    """Protocol defining the native spooler interface.

    All platform-specific printer implementations must satisfy this protocol.
    """

    # Whether staged content should start with a UTF-8 byte-order mark
    add_bom: bool

    def list_printers(self) -> list[PrinterDescriptor]:
        """Get printers known to the spooler.

        Returns:
            list[PrinterDescriptor]: Printer names, possibly empty.

        Raises:
            PrinterError: If the enumeration command fails.
        """
        ...

    def submit(self, data: bytes, printer_name: str | None = None) -> PrintJobResult:
        """Submit encoded content to the spooler.

        Args:
            data: Normalized bytes to print.
            printer_name: Destination printer (None = configured default).

        Returns:
            PrintJobResult: Result with the job identifier.

        Raises:
            SubmissionError: If staging or submission fails.
        """
        ...


def timestamp_ms() -> int:
    """Milliseconds since the epoch, used in synthesized job ids."""
    return int(time.time() * 1000)


@contextmanager
def staged_file(data: bytes, directory: Path, suffix: str = ".txt") -> Iterator[Path]:
    """Write data to a temporary file and remove it on exit.

    The name combines a millisecond timestamp with a random token so
    concurrent requests sharing ``directory`` never collide.

    Args:
        data: Bytes to stage.
        directory: Staging directory (created if missing).
        suffix: File suffix.

    Yields:
        Path: The staged file.

    If the block raises, a file that cannot be removed is only logged so
    the original error propagates. After a clean exit the same failure
    raises StagingError.

    Raises:
        StagingError: If the file cannot be written or removed.
    """
    temp_path = None
    try:
        directory.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            prefix=f"print_{timestamp_ms()}_", suffix=suffix, dir=directory, delete=False
        ) as f:
            temp_path = Path(f.name)
            f.write(data)
    except OSError as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise StagingError(f"Failed to write temp file: {e}") from e

    try:
        yield temp_path
    except BaseException:
        try:
            temp_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove temp file {temp_path}: {e}")
        raise

    try:
        temp_path.unlink(missing_ok=True)
    except OSError as e:
        raise StagingError(f"Failed to remove temp file: {e}") from e
