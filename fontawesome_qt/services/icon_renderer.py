"""Rasterize icons into fixed-size images."""

import math
from typing import Any

from PyQt6.QtCore import QRectF, QSize, Qt
from PyQt6.QtGui import QColor, QImage, QPainter, QTextOption

from fontawesome_qt.models import IconBase

from .font_registrar import FontRegistrar
from .icon_resolver import glyph_for_icon

# Taken from FontAwesome.io's Fixed Width Icon CSS
FONT_ASPECT_RATIO = 1.28571429


def icon_font_size(width: float, height: float, aspect_ratio: float = FONT_ASPECT_RATIO) -> float:
    """Largest font size whose fixed-width icon box fits in width x height."""
    return min(width / aspect_ratio, height)


def _as_dimensions(size: QSize | tuple[int, int]) -> tuple[int, int]:
    if isinstance(size, QSize):
        width, height = size.width(), size.height()
    else:
        width, height = size
    if width <= 0 or height <= 0:
        raise ValueError(f"Image size must be positive, got {width}x{height}")
    return int(width), int(height)


class IconRenderer:
    """Draws icon glyphs centered in new images."""

    def __init__(self, registrar: FontRegistrar, aspect_ratio: float = FONT_ASPECT_RATIO):
        """Initialize the renderer.

        Args:
            registrar: Registrar providing the icon font.
            aspect_ratio: Width to height ratio of an icon box.
        """
        self._registrar = registrar
        self._aspect_ratio = aspect_ratio

    def font_pixel_size(self, width: int, height: int) -> int:
        """Pixel size used for the glyph in a width x height image.

        Zero when the box is too narrow for a one-pixel glyph.
        """
        return math.floor(icon_font_size(width, height, self._aspect_ratio))

    def render(
        self,
        icon: IconBase,
        color: Any,
        size: QSize | tuple[int, int],
        background_color: Any = None,
    ) -> QImage:
        """Render an icon into a new image.

        Args:
            icon: Icon to draw.
            color: Glyph color (anything QColor accepts).
            size: Image size as a QSize or (width, height).
            background_color: Fill color; transparent when None.

        Returns:
            A width x height ARGB image with the glyph centered.

        Raises:
            ValueError: If a dimension is not positive.
            FontAssetNotFoundError: If the font file cannot be found.
            FontRegistrationError: If the host rejects the font.
        """
        width, height = _as_dimensions(size)
        pixel_size = self.font_pixel_size(width, height)

        image = QImage(width, height, QImage.Format.Format_ARGB32_Premultiplied)
        if background_color is None:
            image.fill(Qt.GlobalColor.transparent)
        else:
            image.fill(QColor(background_color))

        if pixel_size < 1:
            # Box narrower than a one-pixel glyph: background only
            self._registrar.ensure_registered()
            return image

        font = self._registrar.font(pixel_size)
        font.setPixelSize(pixel_size)

        painter = QPainter(image)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
            painter.setFont(font)
            painter.setPen(QColor(color))
            painter.drawText(
                QRectF(0, 0, width, height),
                glyph_for_icon(icon),
                QTextOption(Qt.AlignmentFlag.AlignCenter),
            )
        finally:
            painter.end()
        return image
