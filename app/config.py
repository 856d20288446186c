"""Application configuration using pydantic-settings."""

import tempfile
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from slipprint.config import DEVANAGARI_RANGE, PrintConfiguration


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Attributes:
        app_name: Name of the application.
        debug: Enable debug mode.
        log_level: Root log level.
        org_name: Organization printed at the top of every slip.
        printer_name: Default printer (None = spooler default).
        print_method: Default print method.
        page_width: Slip width in character cells.
        text_encoding: Encoding for slips without Devanagari text.
        staging_dir: Directory for temporary and captured print files.
        command_timeout: Seconds to wait for spooler commands.
        mock_delay: Simulated latency of mock printing.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Simple Print Server"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS (the print page is usually opened from a file:// URL or another host)
    cors_origins: list[str] = ["*"]

    # Slip layout
    org_name: str = "Your Organization"
    page_width: int = Field(32, ge=1)

    # Printing
    printer_name: str | None = None
    print_method: Literal["auto", "native", "cups", "windows", "file", "mock"] = "auto"
    text_encoding: str = "utf-8"
    staging_dir: Path = Path(tempfile.gettempdir())
    command_timeout: float | None = 30.0
    mock_delay: float = 0.1

    def print_configuration(self) -> PrintConfiguration:
        """Build the immutable configuration used by the printing layer.

        Returns:
            PrintConfiguration: Printing configuration.
        """
        return PrintConfiguration(
            default_printer_name=self.printer_name or None,
            text_encoding=self.text_encoding,
            staging_directory=self.staging_dir,
            page_width=self.page_width,
            wide_range=DEVANAGARI_RANGE,
            command_timeout=self.command_timeout,
            mock_delay=self.mock_delay,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings.
    """
    return Settings()
