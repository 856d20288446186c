"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator

# Set test environment before importing app
os.environ["ORG_NAME"] = "Test Org"
os.environ["PRINT_METHOD"] = "auto"
os.environ["PRINTER_NAME"] = ""
os.environ["MOCK_DELAY"] = "0"
os.environ["DEBUG"] = "false"

import pytest
from fastapi.testclient import TestClient

from slipprint.config import PrintConfiguration
from slipprint.printing import (
    Backend,
    PrintDispatcher,
    PrinterDescriptor,
    PrinterError,
    PrintJobResult,
    SubmissionError,
)


class FakeSpooler:
    """In-memory stand-in for a native spooler backend."""

    add_bom = False

    def __init__(
        self,
        printers: list[str] | None = None,
        list_error: bool = False,
        submit_error: str | None = None,
    ):
        self.printers = printers or []
        self.list_error = list_error
        self.submit_error = submit_error
        self.list_calls = 0
        self.submitted: list[tuple[bytes, str | None]] = []

    def list_printers(self) -> list[PrinterDescriptor]:
        self.list_calls += 1
        if self.list_error:
            raise PrinterError("lpstat failed: scheduler is not running")
        return [PrinterDescriptor(name) for name in self.printers]

    def submit(self, data: bytes, printer_name: str | None = None) -> PrintJobResult:
        self.submitted.append((data, printer_name))
        if self.submit_error:
            raise SubmissionError(self.submit_error)
        return PrintJobResult(
            job_id="Office-42",
            message=f"Printed to {printer_name or 'default printer'}",
            backend=Backend.NATIVE_SPOOLER,
            output="request id is Office-42 (1 file(s))",
        )


@pytest.fixture
def staging_dir(tmp_path):
    """Empty staging directory."""
    path = tmp_path / "staging"
    path.mkdir()
    return path


@pytest.fixture
def print_config(staging_dir) -> PrintConfiguration:
    """Print configuration writing into the test staging directory."""
    return PrintConfiguration(staging_directory=staging_dir, mock_delay=0)


@pytest.fixture
def spooler() -> FakeSpooler:
    """Spooler reporting a single printer."""
    return FakeSpooler(printers=["Office"])


@pytest.fixture
def dispatcher(print_config, spooler) -> PrintDispatcher:
    """Dispatcher using the fake spooler."""
    return PrintDispatcher(print_config, native=spooler)


@pytest.fixture
def client(dispatcher) -> Generator[TestClient, None, None]:
    """Create a test client with the dispatcher overridden."""
    # Import here to ensure env vars are set
    from app.dependencies import get_dispatcher
    from app.main import app

    app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
