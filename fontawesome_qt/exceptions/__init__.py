"""Custom exceptions for FontAwesome for Qt."""

from .base import FontAwesomeException
from .data import IconDataError
from .font import FontAssetNotFoundError, FontRegistrationError

__all__ = [
    "FontAwesomeException",
    "FontAssetNotFoundError",
    "FontRegistrationError",
    "IconDataError",
]
