"""Check that a font file actually contains the icon glyphs."""

import io
import struct
from collections.abc import Iterable

from fontTools.ttLib import TTFont, TTLibError

from fontawesome_qt.exceptions import FontRegistrationError
from fontawesome_qt.models import FontAwesome, IconBase


def read_codepoints(font_data: bytes) -> set[int]:
    """Return every code point mapped by the font's best cmap.

    Raises:
        FontRegistrationError: If the data is not a readable font.
    """
    try:
        font = TTFont(io.BytesIO(font_data), lazy=True)
        try:
            cmap = font.getBestCmap() or {}
        finally:
            font.close()
    except (TTLibError, struct.error) as e:
        raise FontRegistrationError(f"Font data could not be parsed: {e}") from e
    return {int(cp) for cp in cmap}


def find_missing_glyphs(
    font_data: bytes, icons: Iterable[IconBase] = FontAwesome
) -> list[IconBase]:
    """Find icons whose code point the font does not map to a glyph.

    Args:
        font_data: Raw font file contents.
        icons: Icons to check (defaults to the whole FontAwesome set).

    Returns:
        Icons that would render as a missing-glyph box, in iteration order.

    Raises:
        FontRegistrationError: If the data is not a readable font.
    """
    available = read_codepoints(font_data)
    return [icon for icon in icons if icon.codepoint not in available]
