"""Print dispatch with backend selection and fallback to mock."""

import logging
from enum import Enum
from pathlib import Path

from slipprint.config import PrintConfiguration
from slipprint.layout import DisplayWidthMeasurer
from slipprint.printing.base import PrinterBackend, PrinterDescriptor, PrinterError, PrintJobResult
from slipprint.printing.directory import PrinterDirectory
from slipprint.printing.encoding import TextEncodingNormalizer
from slipprint.printing.factory import get_native_backend
from slipprint.printing.file_printer import FilePrinter
from slipprint.printing.mock_printer import MockPrinter

logger = logging.getLogger(__name__)


class PrintMethod(str, Enum):
    """Requested print strategy."""

    AUTO = "auto"
    NATIVE = "native"
    CUPS = "cups"
    WINDOWS = "windows"
    FILE = "file"
    MOCK = "mock"


class DispatchState(str, Enum):
    """Stages a print request moves through."""

    SELECTING_BACKEND = "selecting_backend"
    NORMALIZING = "normalizing"
    STAGING = "staging"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FELL_BACK_TO_MOCK = "fell_back_to_mock"


# Platform names as reported by platform.system()
_EXPLICIT_SYSTEMS = {PrintMethod.CUPS: "Linux", PrintMethod.WINDOWS: "Windows"}


class PrintDispatcher:
    """Route print requests to a spooler, a file or the mock backend.

    With ``auto``, the host spooler is used only when it reports at least one
    printer, and any spooler failure falls back to the mock backend with the
    cause recorded on the result. Explicitly requested methods never fall
    back: their failures are raised to the caller.

    A dispatcher holds no per-request state and can be shared between
    concurrent requests.
    """

    def __init__(
        self,
        config: PrintConfiguration,
        native: PrinterBackend | None = None,
        directory: PrinterDirectory | None = None,
        default_method: PrintMethod | str = PrintMethod.AUTO,
    ):
        """Initialize the dispatcher.

        Args:
            config: Print configuration.
            native: Host spooler backend (default: chosen by platform).
            directory: Printer directory (default: backed by ``native``).
            default_method: Method used when print() is called without one.
        """
        self.config = config
        self.default_method = PrintMethod(default_method)
        self.normalizer = TextEncodingNormalizer(
            config.text_encoding, DisplayWidthMeasurer(config.wide_range)
        )
        self.native = native or get_native_backend(config)
        self.directory = directory or PrinterDirectory(self.native)
        self.file_printer = FilePrinter(config.staging_directory)
        self.mock = MockPrinter(config.text_encoding, config.default_printer_name, config.mock_delay)

    def list_printers(self) -> list[PrinterDescriptor]:
        return self.directory.list_printers()

    def print(
        self,
        content: str,
        method: PrintMethod | str | None = None,
        printer_name: str | None = None,
        filename: str | Path | None = None,
    ) -> PrintJobResult:
        """Print slip text.

        Args:
            content: Text to print.
            method: Print method (None = dispatcher default).
            printer_name: Destination printer (None = configured default).
            filename: Output path for the ``file`` method.

        Returns:
            PrintJobResult: Result of the backend that handled the job.

        Raises:
            ValueError: If method is not a known print method.
            PrinterError: If an explicitly requested backend fails.
        """
        method = PrintMethod(method) if method else self.default_method
        self._transition(DispatchState.SELECTING_BACKEND, method.value)

        if method is PrintMethod.MOCK:
            result = self.mock.submit(content, printer_name)
            self._transition(DispatchState.SUCCEEDED, result.job_id)
            return result

        if method is PrintMethod.AUTO:
            if not self.directory.list_printers():
                return self._fall_back(content, printer_name, "No printers found")
            backend = self.native
        elif method is PrintMethod.FILE:
            backend = self.file_printer
        elif method is PrintMethod.NATIVE:
            backend = self.native
        else:
            backend = get_native_backend(self.config, _EXPLICIT_SYSTEMS[method])

        try:
            result = self._submit(backend, content, printer_name, filename)
        except PrinterError as e:
            if method is not PrintMethod.AUTO:
                logger.error(f"Print via {method.value} failed: {e}")
                raise
            return self._fall_back(content, printer_name, f"Native printing failed: {e}")

        self._transition(DispatchState.SUCCEEDED, result.job_id)
        return result

    def _submit(
        self,
        backend: PrinterBackend | FilePrinter,
        content: str,
        printer_name: str | None,
        filename: str | Path | None,
    ) -> PrintJobResult:
        self._transition(DispatchState.NORMALIZING, type(backend).__name__)
        data = self.normalizer.normalize(content, add_bom=backend.add_bom)

        # Staging and submission both happen inside the backend
        self._transition(DispatchState.STAGING, f"{len(data)} bytes")
        if isinstance(backend, FilePrinter):
            return backend.submit(data, filename)
        self._transition(DispatchState.SUBMITTING, printer_name or "default printer")
        return backend.submit(data, printer_name)

    def _fall_back(self, content: str, printer_name: str | None, reason: str) -> PrintJobResult:
        logger.warning(f"{reason}, using mock print")
        result = self.mock.submit(content, printer_name, fallback_reason=reason)
        self._transition(DispatchState.FELL_BACK_TO_MOCK, result.job_id)
        return result

    @staticmethod
    def _transition(state: DispatchState, detail: str) -> None:
        logger.debug(f"Print dispatch -> {state.value} ({detail})")
