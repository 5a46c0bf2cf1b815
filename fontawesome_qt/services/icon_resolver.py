"""Translate icon identifiers and legacy codes into glyph strings."""

from collections.abc import Mapping

from fontawesome_qt.models import ICON_CODES, FontAwesome, IconBase


def glyph_for_icon(icon: IconBase) -> str:
    """Get the string that renders as the icon with the icon font.

    Args:
        icon: Icon identifier, e.g. ``FontAwesome.GLASS``.

    Returns:
        A single-character string.
    """
    return icon.value[0]


def icon_for_code(
    code: str, codes: Mapping[str, str] = ICON_CODES, icons: type[IconBase] = FontAwesome
) -> IconBase | None:
    """Look up the icon for a legacy CSS code such as ``fa-glass``.

    Returns:
        The icon, or None if the code is unknown.
    """
    if not isinstance(code, str):
        return None
    raw = codes.get(code)
    if raw is None:
        return None
    try:
        return icons(raw)
    except ValueError:
        return None


def glyph_for_code(
    code: str, codes: Mapping[str, str] = ICON_CODES, icons: type[IconBase] = FontAwesome
) -> str | None:
    """Get the glyph string for a legacy CSS code.

    Icon codes are the FontAwesome 4 CSS classes (http://fontawesome.io/icons/).

    Args:
        code: Code such as ``fa-glass``; may be untrusted input.
        codes: Code table to look the code up in.
        icons: Icon enumeration the table's raw values belong to.

    Returns:
        A single-character string, or None if the code is unknown.
    """
    icon = icon_for_code(code, codes, icons)
    if icon is None:
        return None
    return glyph_for_icon(icon)
