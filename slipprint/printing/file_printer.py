"""Capture print jobs to files instead of a printer."""

import logging
import uuid
from datetime import datetime
from pathlib import Path

from slipprint.printing.base import Backend, PrintJobResult, StagingError, timestamp_ms

logger = logging.getLogger(__name__)


class FilePrinter:
    """Write encoded slips to disk for local verification."""

    add_bom = True

    def __init__(self, output_directory: Path):
        """Initialize the file backend.

        Args:
            output_directory: Where files go when no filename is given.
        """
        self.output_directory = output_directory

    def default_path(self) -> Path:
        # Reason: ISO time alone collides when two requests land in the same millisecond
        stamp = datetime.now().isoformat().replace(":", "-").replace(".", "-")
        return self.output_directory / f"print_output_{stamp}_{uuid.uuid4().hex[:8]}.txt"

    def submit(self, data: bytes, filename: str | Path | None = None) -> PrintJobResult:
        """Write data to a file.

        Args:
            data: Encoded slip text.
            filename: Destination path (None = generated in output_directory).

        Returns:
            PrintJobResult: Result whose file_path is the written file.

        Raises:
            StagingError: If the file cannot be written.
        """
        path = Path(filename) if filename else self.default_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            raise StagingError(f"Failed to write to file: {e}") from e

        logger.info(f"Print output saved to {path}")
        return PrintJobResult(
            job_id=f"file_{timestamp_ms()}",
            message=f"Content saved to {path}",
            backend=Backend.FILE_CAPTURE,
            file_path=path,
        )
