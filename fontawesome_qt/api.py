"""Module-level convenience API over the default registrar."""

from typing import Any

from PyQt6.QtCore import QSize
from PyQt6.QtGui import QFont, QImage

from fontawesome_qt.models import IconBase
from fontawesome_qt.services import (
    IconRenderer,
    get_font_registrar,
    glyph_for_code,
    glyph_for_icon,
)


def font_of_size(size: float) -> QFont:
    """Get the FontAwesome font at a point size, registering it on first use.

    Raises:
        FontAssetNotFoundError: If the bundled font file is missing.
        FontRegistrationError: If Qt rejects the font.
    """
    return get_font_registrar().font(size)


def glyph_string_for_icon(icon: IconBase) -> str:
    """Get a string that will appear as the icon with FontAwesome."""
    return glyph_for_icon(icon)


def glyph_string_for_code(code: str) -> str | None:
    """Get the icon string for a CSS icon code like ``fa-glass``, or None."""
    return glyph_for_code(code)


def icon_image(
    icon: IconBase,
    color: Any,
    size: QSize | tuple[int, int],
    background_color: Any = None,
) -> QImage:
    """Render an icon into an image of exactly the requested size.

    Args:
        icon: Icon to draw.
        color: Glyph color.
        size: Image size as a QSize or (width, height).
        background_color: Optional fill color (transparent by default).
    """
    registrar = get_font_registrar()
    renderer = IconRenderer(registrar, registrar.config.font_aspect_ratio)
    return renderer.render(icon, color, size, background_color)
