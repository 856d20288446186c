"""Fixed-width slip layout.

Thermal and dot-matrix printers render Devanagari glyphs roughly two cells
wide, so padding by ``len()`` misaligns every column that follows a
Devanagari title. All widths here are measured in display cells through
:class:`DisplayWidthMeasurer` instead.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime

from slipprint.config import DEFAULT_PAGE_WIDTH, DEVANAGARI_RANGE

ELLIPSIS = "…"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Column labels
SN_LABEL = "SN"
TITLE_LABEL = "  शीर्षक"
QUANTITY_LABEL = "सं"

SN_WIDTH = 3
QUANTITY_WIDTH = 4

# Rows served by /payload-test and used by the CLI test print
SAMPLE_ROWS = [
    (1, "Test Item 1", 5),
    (2, "Test Item 2", 3),
    (3, "Sample Product", 10),
    (4, "चिया पत्ती", 2),
    (5, "दूध पाउडर", 1),
]


class DisplayWidthMeasurer:
    """Measure strings in printer display cells.

    Code points inside ``wide_range`` (inclusive) count as two cells, every
    other code point as one.
    """

    def __init__(self, wide_range: tuple[int, int] = DEVANAGARI_RANGE):
        self.first, self.last = wide_range

    def is_wide(self, char: str) -> bool:
        return self.first <= ord(char) <= self.last

    def char_width(self, char: str) -> int:
        return 2 if self.is_wide(char) else 1

    def visual_width(self, text: str) -> int:
        """Get the rendered width of text.

        Args:
            text: Any string.

        Returns:
            int: Number of display cells the text occupies.
        """
        return sum(self.char_width(char) for char in text)

    def contains_wide(self, text: str) -> bool:
        return any(self.is_wide(char) for char in text)

    def clip(self, text: str, width: int) -> str:
        """Return the longest prefix of text that fits in width cells."""
        used = 0
        for index, char in enumerate(text):
            used += self.char_width(char)
            if used > width:
                return text[:index]
        return text

    def shorten(self, text: str, width: int) -> str:
        """Shorten text to width cells, marking the cut with an ellipsis.

        Args:
            text: Text to shorten.
            width: Available cells.

        Returns:
            str: text unchanged if it fits, otherwise a prefix of
                ``width - 1`` cells or less followed by ``…``.
        """
        if width <= 0:
            return ""
        if self.visual_width(text) <= width:
            return text
        return self.clip(text, width - 1) + ELLIPSIS

    def fit(self, text: str, width: int) -> str:
        """Shorten or right-pad text so it fills exactly width cells."""
        text = self.shorten(text, width)
        return text + " " * max(0, width - self.visual_width(text))


@dataclass(frozen=True)
class SlipRow:
    """One order line: sequence number, item title and quantity."""

    sequence_number: int
    title: str
    quantity: int

    @classmethod
    def from_values(cls, values: Sequence) -> "SlipRow":
        """Build a row from a ``[sn, title, qty]`` triple."""
        sequence_number, title, quantity = values
        return cls(int(sequence_number), str(title), int(quantity))


@dataclass(frozen=True)
class SlipDocument:
    """Rendered slip as an ordered tuple of lines."""

    lines: tuple[str, ...]

    def render(self) -> str:
        """Join the lines into printable text ending with a newline."""
        return "\n".join(self.lines) + "\n"

    def __str__(self) -> str:
        return self.render()


class SlipFormatter:
    """Lay out order rows as a fixed-width slip.

    Every line produced is at most ``page_width`` display cells wide.
    """

    def __init__(
        self,
        measurer: DisplayWidthMeasurer | None = None,
        sn_label: str = SN_LABEL,
        title_label: str = TITLE_LABEL,
        quantity_label: str = QUANTITY_LABEL,
    ):
        """Initialize the formatter.

        Args:
            measurer: Width measurer (default: Devanagari counted as wide).
            sn_label: Heading for the sequence number column.
            title_label: Heading for the title column.
            quantity_label: Heading for the quantity column.
        """
        self.measurer = measurer or DisplayWidthMeasurer()
        self.sn_label = sn_label
        self.title_label = title_label
        self.quantity_label = quantity_label

    def build_slip(
        self,
        organization_name: str,
        timestamp: datetime,
        rows: Iterable[SlipRow],
        page_width: int = DEFAULT_PAGE_WIDTH,
    ) -> SlipDocument:
        """Build the slip document.

        Args:
            organization_name: First header line.
            timestamp: Printed on the second header line.
            rows: Order rows, printed in the given order. May be empty.
            page_width: Slip width in display cells.

        Returns:
            SlipDocument: Header, separator, column headings, one line per
                row and a closing separator.

        Raises:
            ValueError: If page_width is less than 1.
        """
        if page_width < 1:
            raise ValueError(f"page_width must be >= 1, got {page_width}")

        separator = "-" * page_width
        lines = [
            self.measurer.shorten(organization_name, page_width),
            self.measurer.shorten(timestamp.strftime(TIMESTAMP_FORMAT), page_width),
            separator,
            self.format_columns(page_width),
        ]
        lines.extend(self.format_row(row, page_width) for row in rows)
        lines.append(separator)
        return SlipDocument(tuple(lines))

    def format_columns(self, page_width: int) -> str:
        """Format the column heading line to exactly page_width cells."""
        used = sum(
            self.measurer.visual_width(label)
            for label in (self.sn_label, self.title_label, self.quantity_label)
        )
        gap = " " * max(0, page_width - used)
        line = f"{self.sn_label}{self.title_label}{gap}{self.quantity_label}"
        return self.measurer.clip(line, page_width)

    def format_row(self, row: SlipRow, page_width: int) -> str:
        """Format one data line.

        The sequence number is left-justified in 3 cells and the quantity
        right-justified in 4; the title takes what is left after the two
        separating spaces.
        """
        sn = str(row.sequence_number).ljust(SN_WIDTH)
        quantity = str(row.quantity).rjust(QUANTITY_WIDTH)
        title_width = page_width - len(sn) - len(quantity) - 2
        title = self.measurer.fit(row.title, title_width)
        # Reason: oversized numbers or tiny pages can still overflow
        return self.measurer.clip(f"{sn} {title} {quantity}", page_width)


def build_slip(
    organization_name: str,
    timestamp: datetime,
    rows: Iterable[SlipRow],
    page_width: int = DEFAULT_PAGE_WIDTH,
    wide_range: tuple[int, int] = DEVANAGARI_RANGE,
) -> SlipDocument:
    """Build a slip with the default column labels.

    Args:
        organization_name: First header line.
        timestamp: Printed on the second header line.
        rows: Order rows.
        page_width: Slip width in display cells.
        wide_range: Code point range counted as two cells.

    Returns:
        SlipDocument: The rendered slip.
    """
    formatter = SlipFormatter(DisplayWidthMeasurer(wide_range))
    return formatter.build_slip(organization_name, timestamp, rows, page_width)
