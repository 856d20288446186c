"""CUPS printing backend for Linux and macOS (lpstat / lp)."""

import logging
import re
import subprocess
from pathlib import Path

from slipprint.printing.base import (
    Backend,
    PrinterDescriptor,
    PrinterError,
    PrintJobResult,
    SubmissionError,
    staged_file,
    timestamp_ms,
)

logger = logging.getLogger(__name__)

JOB_ID_PATTERN = re.compile(r"request id is (\S+)")


def parse_lpstat_output(stdout: str) -> list[PrinterDescriptor]:
    """Parse ``lpstat -p`` output.

    Lines look like ``printer Office_Laser is idle.  enabled since ...``;
    anything not starting with ``printer`` is ignored.

    Args:
        stdout: Command output.

    Returns:
        list[PrinterDescriptor]: Printers in listing order.
    """
    printers = []
    for line in stdout.splitlines():
        if line.startswith("printer"):
            parts = line.split()
            if len(parts) >= 2:
                printers.append(PrinterDescriptor(parts[1]))
    return printers


def parse_job_id(stdout: str) -> str | None:
    """Extract the job id from ``lp`` output (``request id is Office-42 (1 file(s))``)."""
    match = JOB_ID_PATTERN.search(stdout)
    return match.group(1) if match else None


class CupsPrinter:
    """Submit plain text through the CUPS command line tools."""

    # Reason: CUPS text filters treat a leading BOM as printable garbage
    add_bom = False

    def __init__(
        self,
        staging_directory: Path,
        default_printer_name: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize the CUPS backend.

        Args:
            staging_directory: Directory for temporary print files.
            default_printer_name: Printer used when submit() gets none
                (None = CUPS default destination).
            timeout: Seconds to wait for lp/lpstat (None = no limit).
        """
        self.staging_directory = staging_directory
        self.default_printer_name = default_printer_name
        self.timeout = timeout

    def list_printers(self) -> list[PrinterDescriptor]:
        """Get printers from ``lpstat -p``.

        Returns:
            list[PrinterDescriptor]: Known printers.

        Raises:
            PrinterError: If lpstat cannot be started, times out or exits non-zero.
        """
        try:
            result = subprocess.run(
                ["lpstat", "-p"], capture_output=True, text=True, timeout=self.timeout
            )
        except (subprocess.TimeoutExpired, OSError) as e:
            raise PrinterError(f"lpstat failed: {e}") from e

        if result.returncode != 0:
            raise PrinterError(f"lpstat failed: {result.stderr.strip()}")
        return parse_lpstat_output(result.stdout)

    def build_command(self, path: Path, printer_name: str | None) -> list[str]:
        cmd = ["lp"]
        if printer_name:
            cmd.extend(["-d", printer_name])
        # 10 characters per inch, 6 lines per inch
        cmd.extend(["-o", "cpi=10", "-o", "lpi=6"])
        cmd.append(str(path))
        return cmd

    def submit(self, data: bytes, printer_name: str | None = None) -> PrintJobResult:
        """Print text via ``lp``.

        Args:
            data: Encoded slip text.
            printer_name: Override printer name.

        Returns:
            PrintJobResult: Result with the CUPS request id.

        Raises:
            SubmissionError: If staging or lp fails.
        """
        name = printer_name or self.default_printer_name

        with staged_file(data, self.staging_directory) as temp_path:
            cmd = self.build_command(temp_path, name)
            logger.debug(f"Print command: {' '.join(cmd)}")
            try:
                result = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
            except subprocess.TimeoutExpired as err:
                raise SubmissionError("Print command timed out") from err
            except FileNotFoundError as err:
                raise SubmissionError("lp command not found - is CUPS installed?") from err
            except OSError as err:
                raise SubmissionError(f"Could not run lp: {err}") from err

        if result.returncode != 0:
            raise SubmissionError(f"CUPS print command failed: {result.stderr.strip()}")

        output = result.stdout.strip()
        job_id = parse_job_id(output) or f"cups_job_{timestamp_ms()}"
        logger.info(f"Print job {job_id} submitted to {name or 'default printer'}")
        return PrintJobResult(
            job_id=job_id,
            message=f"Printed to {name or 'default printer'}",
            backend=Backend.NATIVE_SPOOLER,
            output=output,
        )
