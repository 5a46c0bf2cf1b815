"""Base exception classes for FontAwesome for Qt."""


class FontAwesomeException(Exception):
    """Base exception for all FontAwesome for Qt errors.

    All custom exceptions in the fontawesome_qt package should inherit
    from this base class for consistent error handling.
    """

    pass
