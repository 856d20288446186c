"""Outgoing text encoding."""

import codecs
import logging

from slipprint.config import DEFAULT_ENCODING
from slipprint.layout import DisplayWidthMeasurer

logger = logging.getLogger(__name__)


class TextEncodingNormalizer:
    """Encode slip text for a spooler.

    Text containing wide-script characters is always sent as UTF-8 since
    legacy code pages cannot represent it; anything else uses the configured
    encoding.
    """

    def __init__(
        self,
        encoding: str = DEFAULT_ENCODING,
        measurer: DisplayWidthMeasurer | None = None,
    ):
        """Initialize the normalizer.

        Args:
            encoding: Encoding for narrow-only text (e.g. 'utf-8', 'cp437').
            measurer: Measurer whose wide range triggers forced UTF-8.
        """
        self.encoding = encoding
        self.measurer = measurer or DisplayWidthMeasurer()

    def target_encoding(self, text: str) -> str:
        return "utf-8" if self.measurer.contains_wide(text) else self.encoding

    def normalize(self, text: str, add_bom: bool = False) -> bytes:
        """Encode text, never raising.

        Args:
            text: Slip text.
            add_bom: Prefix a UTF-8 byte-order mark. Only applied when the
                chosen encoding is UTF-8.

        Returns:
            bytes: Encoded content. If encoding fails, the text as plain
                UTF-8 without a byte-order mark.
        """
        encoding = self.target_encoding(text)
        try:
            is_utf8 = codecs.lookup(encoding).name == "utf-8"
            data = text.encode(encoding)
        except (LookupError, UnicodeError) as e:
            logger.warning(f"Encoding to {encoding} failed, sending raw text: {e}")
            return text.encode("utf-8", errors="replace")

        if add_bom and is_utf8:
            return codecs.BOM_UTF8 + data
        return data
