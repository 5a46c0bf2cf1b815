"""Protocol for the host font system."""

from typing import Any, Protocol


class FontBackend(Protocol):
    """Interface for the host font database that icon fonts are registered with.

    The Qt implementation is used in applications; tests substitute a
    recording fake so registration can be exercised without a display.
    """

    def has_family(self, family: str) -> bool:
        """Check whether the host already knows a font family by this name."""
        ...

    def register_font_data(self, data: bytes) -> tuple[int, list[str]]:
        """Register in-memory font data with the host.

        Args:
            data: Raw font file contents.

        Returns:
            The host font id and the family names it registered the font under.

        Raises:
            FontRegistrationError: If the host rejects the font.
        """
        ...

    def remove_font(self, font_id: int) -> None:
        """Undo a registration made by register_font_data."""
        ...

    def create_font(self, family: str, size: float) -> Any:
        """Create a font handle for a registered family at a point size."""
        ...
