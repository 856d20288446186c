"""Tests for outgoing text encoding."""

import codecs

import pytest

from slipprint.layout import DisplayWidthMeasurer
from slipprint.printing.encoding import TextEncodingNormalizer


class TestTargetEncoding:
    """Tests for encoding selection."""

    def test_narrow_text_uses_declared_encoding(self):
        """Text without Devanagari keeps the configured encoding."""
        normalizer = TextEncodingNormalizer("cp437")
        assert normalizer.target_encoding("Milk x2") == "cp437"

    def test_devanagari_forces_utf8(self):
        """Devanagari text is always UTF-8."""
        normalizer = TextEncodingNormalizer("cp437")
        assert normalizer.target_encoding("दूध x2") == "utf-8"

    def test_uses_measurer_range(self):
        """The wide range of the measurer decides what forces UTF-8."""
        normalizer = TextEncodingNormalizer("latin-1", DisplayWidthMeasurer((0x4E00, 0x9FFF)))
        assert normalizer.target_encoding("中文") == "utf-8"
        assert normalizer.target_encoding("café") == "latin-1"


class TestNormalize:
    """Tests for TextEncodingNormalizer.normalize."""

    def test_declared_encoding_applied(self):
        """Narrow text is encoded with the declared codec."""
        normalizer = TextEncodingNormalizer("latin-1")
        assert normalizer.normalize("café") == "café".encode("latin-1")

    def test_devanagari_encoded_as_utf8(self):
        """Devanagari text ignores a legacy declared codec."""
        normalizer = TextEncodingNormalizer("cp437")
        assert normalizer.normalize("चिया") == "चिया".encode("utf-8")

    def test_bom_added_on_request(self):
        """A BOM is prefixed only when asked for."""
        normalizer = TextEncodingNormalizer("utf-8")
        assert normalizer.normalize("Milk", add_bom=True) == codecs.BOM_UTF8 + b"Milk"
        assert normalizer.normalize("Milk", add_bom=False) == b"Milk"

    def test_bom_independent_of_script(self):
        """Devanagari content alone does not add a BOM."""
        normalizer = TextEncodingNormalizer("utf-8")
        assert not normalizer.normalize("चिया").startswith(codecs.BOM_UTF8)

    def test_no_bom_for_non_utf8_encoding(self):
        """A UTF-8 BOM is never glued onto legacy code page bytes."""
        normalizer = TextEncodingNormalizer("cp437")
        assert normalizer.normalize("Milk", add_bom=True) == b"Milk"

    def test_utf8_alias_gets_bom(self):
        """Aliases such as 'utf8' count as UTF-8."""
        normalizer = TextEncodingNormalizer("utf8")
        assert normalizer.normalize("Milk", add_bom=True).startswith(codecs.BOM_UTF8)

    @pytest.mark.parametrize("encoding", ["no-such-codec", "ascii"])
    def test_failure_falls_back_to_raw_text(self, encoding):
        """Unknown codecs and unencodable text fall back to plain UTF-8."""
        normalizer = TextEncodingNormalizer(encoding)
        assert normalizer.normalize("café ☕", add_bom=True) == "café ☕".encode("utf-8")
