"""Command-line interface for the slip printer."""

import logging
import sys
from datetime import datetime

import click

from app.config import get_settings
from app.dependencies import get_dispatcher
from app.slips.service import get_slip_service
from slipprint import __version__
from slipprint.layout import SAMPLE_ROWS, SlipRow
from slipprint.printing import PrinterError, PrintMethod


def setup_logging(level: str) -> None:
    """Set up logging configuration.

    Args:
        level: Log level string.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def _sample_rows() -> list[SlipRow]:
    return [SlipRow.from_values(values) for values in SAMPLE_ROWS]


@click.group()
@click.version_option(version=__version__)
def main():
    """SlipPrint - order slip printing server.

    Renders order rows as fixed-width slips and prints them on the local
    printer, falling back to a mock printer when none is available.
    """
    pass


@main.command()
def printers():
    """List available printers."""
    names = get_dispatcher().directory.names()

    click.echo("\n=== Available Printers ===\n")

    if not names:
        click.echo("No printers found.")
        return

    default = get_settings().printer_name
    for name in names:
        marker = "* " if name == default else "  "
        click.echo(f"{marker}{name}")

    if default:
        click.echo("\n(* = configured printer)")


@main.command()
def preview():
    """Show the sample slip without printing it."""
    service = get_slip_service(get_settings(), get_dispatcher())
    click.echo(service.render(_sample_rows()).render())


@main.command()
@click.option(
    "--method",
    "-m",
    type=click.Choice([m.value for m in PrintMethod]),
    default=None,
    help="Print method (default: PRINT_METHOD setting)",
)
@click.option("--printer", "-p", default=None, help="Printer name (default: PRINTER_NAME)")
@click.option("--filename", "-f", default=None, help="Output file for --method file")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def test(method: str | None, printer: str | None, filename: str | None, verbose: bool):
    """Print the sample slip."""
    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level)

    dispatcher = get_dispatcher()
    document = get_slip_service(settings, dispatcher).render(_sample_rows(), datetime.now())

    try:
        result = dispatcher.print(
            document.render(), method=method, printer_name=printer, filename=filename
        )
    except PrinterError as e:
        click.echo(f"x Print failed: {e}")
        sys.exit(1)

    click.echo(f"+ Job {result.job_id} via {result.backend.value}: {result.message}")
    if result.fallback_reason:
        click.echo(f"! Fell back to mock: {result.fallback_reason}")
    if result.file_path:
        click.echo(f"  Output: {result.file_path}")


@main.command()
@click.option("--host", default=None, help="Bind address (default: HOST setting)")
@click.option("--port", type=int, default=None, help="Port (default: PORT setting)")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str | None, port: int | None, reload: bool):
    """Run the HTTP print server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


if __name__ == "__main__":
    main()
