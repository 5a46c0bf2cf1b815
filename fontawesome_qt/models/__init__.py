"""Data models for FontAwesome for Qt."""

from .icon import (
    ICON_CODES,
    ICON_SET_VERSION,
    FontAwesome,
    IconBase,
    IconData,
    IconEntry,
    load_icon_data,
)

__all__ = [
    "FontAwesome",
    "ICON_CODES",
    "ICON_SET_VERSION",
    "IconBase",
    "IconData",
    "IconEntry",
    "load_icon_data",
]
