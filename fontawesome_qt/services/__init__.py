"""Font registration, lookup and rendering services."""

from .font_registrar import FontRegistrar, get_font_registrar
from .glyph_coverage import find_missing_glyphs, read_codepoints
from .icon_renderer import FONT_ASPECT_RATIO, IconRenderer, icon_font_size
from .icon_resolver import glyph_for_code, glyph_for_icon, icon_for_code

__all__ = [
    "FontRegistrar",
    "get_font_registrar",
    "find_missing_glyphs",
    "read_codepoints",
    "IconRenderer",
    "FONT_ASPECT_RATIO",
    "icon_font_size",
    "glyph_for_icon",
    "glyph_for_code",
    "icon_for_code",
]
