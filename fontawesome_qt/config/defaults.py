"""Default configuration values for FontAwesome for Qt."""

from .config import FontAwesomeConfig


def create_default_config(**overrides) -> FontAwesomeConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        FontAwesomeConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            font_search_paths=[Path("/opt/myapp/fonts")],
            verify_glyph_coverage=False,
        )
    """
    return FontAwesomeConfig(**overrides)
