"""Configuration management for FontAwesome for Qt."""

from .config import FontAwesomeConfig
from .defaults import create_default_config

__all__ = ["FontAwesomeConfig", "create_default_config"]
