"""No-op printer used when no real destination is available."""

import logging
import time

from slipprint.printing.base import Backend, PrintJobResult, timestamp_ms

logger = logging.getLogger(__name__)


class MockPrinter:
    """Log the job instead of printing it."""

    def __init__(self, encoding: str, default_printer_name: str | None = None, delay: float = 0.1):
        self.encoding = encoding
        self.default_printer_name = default_printer_name
        self.delay = delay

    def submit(
        self,
        content: str,
        printer_name: str | None = None,
        fallback_reason: str | None = None,
    ) -> PrintJobResult:
        """Pretend to print content.

        Args:
            content: Slip text.
            printer_name: Printer the job was meant for.
            fallback_reason: Recorded on the result when this is a fallback.

        Returns:
            PrintJobResult: Result with a ``mock_`` job id.
        """
        name = printer_name or self.default_printer_name or "Default Printer"
        logger.info(f"Mock print to {name} (encoding {self.encoding}):\n{content}")

        if self.delay > 0:
            time.sleep(self.delay)

        return PrintJobResult(
            job_id=f"mock_{timestamp_ms()}",
            message="Mock print completed successfully",
            backend=Backend.MOCK,
            fallback_reason=fallback_reason,
        )
