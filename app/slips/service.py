"""Slip rendering and printing service layer."""

import logging
from collections.abc import Iterable
from datetime import datetime

from app.config import Settings
from slipprint.layout import DisplayWidthMeasurer, SlipDocument, SlipFormatter, SlipRow
from slipprint.printing import PrintDispatcher, PrintJobResult

logger = logging.getLogger(__name__)


class SlipService:
    """Service class for slip operations."""

    def __init__(self, settings: Settings, dispatcher: PrintDispatcher):
        """Initialize slip service.

        Args:
            settings: Application settings.
            dispatcher: Print dispatcher.
        """
        self.settings = settings
        self.dispatcher = dispatcher
        self.formatter = SlipFormatter(DisplayWidthMeasurer(dispatcher.config.wide_range))

    def render(self, rows: Iterable[SlipRow], timestamp: datetime | None = None) -> SlipDocument:
        """Render rows into a slip.

        Args:
            rows: Order rows.
            timestamp: Time printed in the header (None = now).

        Returns:
            SlipDocument: The rendered slip.
        """
        return self.formatter.build_slip(
            self.settings.org_name,
            timestamp or datetime.now(),
            rows,
            self.dispatcher.config.page_width,
        )

    def print_slip(self, rows: Iterable[SlipRow]) -> PrintJobResult:
        """Render rows and print the slip.

        Args:
            rows: Order rows.

        Returns:
            PrintJobResult: Result from the dispatcher.

        Raises:
            PrinterError: If an explicitly configured print method fails.
        """
        content = self.render(rows).render()
        logger.info(f"Content to print:\n{content}")

        result = self.dispatcher.print(content)
        logger.info(f"Print job completed: {result.job_id} via {result.backend.value}")
        return result


def get_slip_service(settings: Settings, dispatcher: PrintDispatcher) -> SlipService:
    """Factory function for SlipService.

    Args:
        settings: Application settings.
        dispatcher: Print dispatcher.

    Returns:
        SlipService: Slip service instance.
    """
    return SlipService(settings, dispatcher)
