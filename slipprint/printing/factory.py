"""Spooler backend selection by platform."""

import platform

from slipprint.config import PrintConfiguration
from slipprint.printing.base import PrinterBackend


def get_native_backend(config: PrintConfiguration, system: str | None = None) -> PrinterBackend:
    """Factory function that returns the appropriate spooler backend.

    Args:
        config: Print configuration.
        system: Platform name as reported by platform.system()
            (None = current host).

    Returns:
        PrinterBackend: Platform-specific printer instance.
    """
    system = system or platform.system()

    if system == "Windows":
        from slipprint.printing.win32_printer import Win32Printer

        return Win32Printer(
            config.staging_directory, config.default_printer_name, config.command_timeout
        )
    else:
        # Linux and macOS both use CUPS
        from slipprint.printing.cups_printer import CupsPrinter

        return CupsPrinter(
            config.staging_directory, config.default_printer_name, config.command_timeout
        )
