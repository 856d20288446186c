"""Windows printing backend using PowerShell and print.exe."""

import logging
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

LIST_PRINTERS_SCRIPT = "Get-Printer | Select-Object Name | ForEach-Object { $_.Name }"


def _ps_quote(value: str) -> str:
    """Quote a value as a PowerShell single-quoted string."""
    return "'" + value.replace("'", "''") + "'"


def parse_get_printer_output(stdout: str) -> list[PrinterDescriptor]:
    """Parse ``Get-Printer`` output, one name per line.

    Blank lines, the ``Name`` column header and ``----`` rules are dropped.

    Args:
        stdout: Command output.

    Returns:
        list[PrinterDescriptor]: Printers in listing order.
    """
    printers = []
    for line in stdout.splitlines():
        name = line.strip()
        if not name or name == "Name" or "---" in name:
            continue
        printers.append(PrinterDescriptor(name))
    return printers


class Win32Printer:
    """Windows spooler backend.

    Windows does not echo a job id for either submission path, so one is
    synthesized from the current time.
    """

    # Reason: Get-Content only detects UTF-8 reliably with a BOM on older hosts
    add_bom = True

    def __init__(
        self,
        staging_directory: Path,
        default_printer_name: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize Windows printer.

        Args:
            staging_directory: Directory for temporary print files.
            default_printer_name: Printer name (None = default printer).
            timeout: Seconds to wait for PowerShell (None = no limit).
        """
        self.staging_directory = staging_directory
        self.default_printer_name = default_printer_name
        self.timeout = timeout

    def list_printers(self) -> list[PrinterDescriptor]:
        """Get printers via ``Get-Printer``.

        Returns:
            list[PrinterDescriptor]: Known printers.

        Raises:
            PrinterError: If PowerShell cannot be started, times out or exits non-zero.
        """
        try:
            result = subprocess.run(
                ["powershell", "-NoProfile", "-Command", LIST_PRINTERS_SCRIPT],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (subprocess.TimeoutExpired, OSError) as e:
            raise PrinterError(f"Get-Printer failed: {e}") from e

        if result.returncode != 0:
            raise PrinterError(f"Get-Printer failed: {result.stderr.strip()}")
        return parse_get_printer_output(result.stdout)

    def build_command(self, path: Path, printer_name: str | None) -> list[str]:
        if not printer_name:
            return ["print", str(path)]
        script = (
            "& {[Console]::OutputEncoding = [System.Text.Encoding]::UTF8; "
            f"Get-Content -Path {_ps_quote(str(path))} -Encoding UTF8 | "
            f"Out-Printer -Name {_ps_quote(printer_name)}}}"
        )
        return ["powershell", "-NoProfile", "-Command", script]

    def submit(self, data: bytes, printer_name: str | None = None) -> PrintJobResult:
        """Print text through the Windows spooler.

        Args:
            data: Encoded slip text.
            printer_name: Override printer name.

        Returns:
            PrintJobResult: Result with a synthesized job id.

        Raises:
            SubmissionError: If staging or the print command fails.
        """
        name = printer_name or self.default_printer_name

        with staged_file(data, self.staging_directory) as temp_path:
            cmd = self.build_command(temp_path, name)
            try:
                result = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
            except subprocess.TimeoutExpired as err:
                raise SubmissionError("Print command timed out") from err
            except FileNotFoundError as err:
                raise SubmissionError(f"{cmd[0]} not found") from err
            except OSError as err:
                raise SubmissionError(f"Could not run {cmd[0]}: {err}") from err

        if result.returncode != 0:
            raise SubmissionError(f"Windows print command failed: {result.stderr.strip()}")

        job_id = f"win_job_{timestamp_ms()}"
        logger.info(f"Print job {job_id} submitted to {name or 'default printer'}")
        return PrintJobResult(
            job_id=job_id,
            message=f"Printed to {name or 'default printer'}",
            backend=Backend.NATIVE_SPOOLER,
            output=result.stdout.strip(),
        )
