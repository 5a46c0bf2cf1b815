"""Tests for glyph coverage checks."""

import pytest

from fontawesome_qt.exceptions import FontRegistrationError
from fontawesome_qt.models import FontAwesome
from fontawesome_qt.services import find_missing_glyphs, read_codepoints


class TestReadCodepoints:
    """Tests for read_codepoints."""

    def test_reads_cmap(self, make_font_bytes):
        data = make_font_bytes([FontAwesome.GLASS, FontAwesome.HEART])
        assert read_codepoints(data) == {0xF000, 0xF004}

    def test_rejects_garbage(self):
        with pytest.raises(FontRegistrationError):
            read_codepoints(b"definitely not a font file")

    def test_rejects_truncated_data(self):
        with pytest.raises(FontRegistrationError):
            read_codepoints(b"\x00\x01")


class TestFindMissingGlyphs:
    """Tests for find_missing_glyphs."""

    def test_complete_font(self, make_font_bytes):
        assert find_missing_glyphs(make_font_bytes()) == []

    def test_partial_font(self, make_font_bytes):
        data = make_font_bytes([FontAwesome.GLASS, FontAwesome.MUSIC])

        missing = find_missing_glyphs(data)

        assert FontAwesome.GLASS not in missing
        assert FontAwesome.MUSIC not in missing
        assert FontAwesome.HEART in missing
        assert len(missing) == len(FontAwesome) - 2

    def test_subset_of_icons(self, make_font_bytes):
        data = make_font_bytes([FontAwesome.GLASS])

        missing = find_missing_glyphs(data, [FontAwesome.GLASS, FontAwesome.STAR])

        assert missing == [FontAwesome.STAR]
