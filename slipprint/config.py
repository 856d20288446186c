"""Print configuration shared by the layout and printing layers."""

import tempfile
from dataclasses import dataclass, field
from pathlib import Path

# Devanagari block; glyphs here occupy two cells on the target printers
DEVANAGARI_RANGE = (0x0900, 0x097F)

DEFAULT_PAGE_WIDTH = 32
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class PrintConfiguration:
    """Immutable configuration for the printing layer.

    Built once at startup and handed to every component that needs it;
    nothing in the printing layer reads the environment directly.

    Attributes:
        default_printer_name: Printer used when a request names none
            (None = host default).
        text_encoding: Encoding for content without wide-script characters.
        staging_directory: Where temporary artifacts and captured files go.
        page_width: Slip width in character cells.
        wide_range: Inclusive (first, last) code point range rendered two
            cells wide.
        command_timeout: Seconds to wait for spooler commands (None = no limit).
        mock_delay: Simulated latency of the mock backend in seconds.
    """

    default_printer_name: str | None = None
    text_encoding: str = DEFAULT_ENCODING
    staging_directory: Path = field(default_factory=lambda: Path(tempfile.gettempdir()))
    page_width: int = DEFAULT_PAGE_WIDTH
    wide_range: tuple[int, int] = DEVANAGARI_RANGE
    command_timeout: float | None = None
    mock_delay: float = 0.1

    def __post_init__(self) -> None:
        if self.page_width < 1:
            raise ValueError(f"page_width must be >= 1, got {self.page_width}")
        # Reason: accept str paths from settings while keeping the field a Path
        if not isinstance(self.staging_directory, Path):
            object.__setattr__(self, "staging_directory", Path(self.staging_directory))
