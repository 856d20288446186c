"""Tests for the command-line interface."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from app.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def use_test_dispatcher(dispatcher):
    """Route CLI commands through the fake spooler."""
    with patch("app.cli.get_dispatcher", return_value=dispatcher):
        yield


class TestCli:
    """Tests for slipprint commands."""

    def test_printers(self, runner):
        result = runner.invoke(main, ["printers"])
        assert result.exit_code == 0
        assert "Office" in result.output

    def test_preview(self, runner):
        result = runner.invoke(main, ["preview"])
        assert result.exit_code == 0
        assert "Test Org" in result.output
        assert "दूध पाउडर" in result.output

    def test_print_to_file(self, runner, tmp_path):
        target = tmp_path / "slip.txt"
        result = runner.invoke(main, ["test", "--method", "file", "--filename", str(target)])
        assert result.exit_code == 0
        assert "file_capture" in result.output
        assert target.exists()

    def test_print_failure_exits_nonzero(self, runner, dispatcher):
        dispatcher.native.submit_error = "lp: printer is offline"
        result = runner.invoke(main, ["test", "--method", "native"])
        assert result.exit_code == 1
        assert "offline" in result.output
