"""Configuration classes for FontAwesome for Qt."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FontAwesomeConfig:
    """Immutable configuration for icon font registration and rendering.

    All configuration is frozen (immutable) so a registrar can share it
    across threads without copying.
    """

    # Font asset settings
    family_name: str = "FontAwesome"
    font_file_name: str = "FontAwesome.otf"
    font_search_paths: list[Path] = field(default_factory=list)  # Probed before the resources
    bundle_subdirectory: str = "fonts"  # Distribution-specific location under resources

    # Rendering settings
    font_aspect_ratio: float = 1.28571429  # FontAwesome fixed-width icon metric

    # Registration settings
    verify_glyph_coverage: bool = True

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if any(isinstance(p, str) for p in self.font_search_paths):
            object.__setattr__(
                self, "font_search_paths", [Path(p) for p in self.font_search_paths]
            )
