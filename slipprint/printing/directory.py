"""Printer enumeration."""

import logging

from slipprint.printing.base import PrinterBackend, PrinterDescriptor, PrinterError

logger = logging.getLogger(__name__)


class PrinterDirectory:
    """List printers known to the host spooler.

    Nothing is cached; every call asks the spooler again so printers added
    or removed on the host show up immediately.
    """

    def __init__(self, backend: PrinterBackend):
        self.backend = backend

    def list_printers(self) -> list[PrinterDescriptor]:
        """Get available printers.

        Returns:
            list[PrinterDescriptor]: Printers, or an empty list if the
                spooler could not be queried.
        """
        try:
            return self.backend.list_printers()
        except PrinterError as e:
            logger.warning(f"Could not get printer list: {e}")
            return []

    def names(self) -> list[str]:
        return [printer.name for printer in self.list_printers()]
