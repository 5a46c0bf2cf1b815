"""
FontAwesome for Qt - FontAwesome glyph icons through Qt's native text APIs

Registers the bundled FontAwesome font with Qt's application font database,
maps icon identifiers and legacy CSS codes to glyph strings, and rasterizes
icons into fixed-size images.
"""

__version__ = "1.0.0"
__author__ = "FontAwesome for Qt Contributors"

from .api import font_of_size, glyph_string_for_code, glyph_string_for_icon, icon_image
from .config import FontAwesomeConfig, create_default_config
from .exceptions import (
    FontAssetNotFoundError,
    FontAwesomeException,
    FontRegistrationError,
    IconDataError,
)
from .models import ICON_CODES, FontAwesome

__all__ = [
    "FontAwesome",
    "ICON_CODES",
    "FontAwesomeConfig",
    "create_default_config",
    "font_of_size",
    "glyph_string_for_icon",
    "glyph_string_for_code",
    "icon_image",
    "FontAwesomeException",
    "FontAssetNotFoundError",
    "FontRegistrationError",
    "IconDataError",
]
