"""Interface protocols for FontAwesome for Qt."""

from .font_backend import FontBackend

__all__ = ["FontBackend"]
