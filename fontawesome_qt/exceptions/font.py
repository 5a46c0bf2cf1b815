"""Font asset and font registration exceptions."""

from .base import FontAwesomeException


class FontAssetNotFoundError(FontAwesomeException):
    """Raised when the bundled font file cannot be located or read."""

    pass


class FontRegistrationError(FontAwesomeException):
    """Raised when Qt rejects the font or registers it under another family."""

    pass
