"""Icon data asset exceptions."""

from .base import FontAwesomeException


class IconDataError(FontAwesomeException):
    """Raised when the icon data asset is missing or malformed."""

    pass
