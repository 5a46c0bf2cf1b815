"""Service that makes the icon font available to the host font system."""

import logging
import threading
from pathlib import Path
from typing import Any

from fontawesome_qt.config import FontAwesomeConfig, create_default_config
from fontawesome_qt.exceptions import FontAssetNotFoundError, FontRegistrationError
from fontawesome_qt.interfaces import FontBackend
from fontawesome_qt.resources import get_resource_dir

from .glyph_coverage import find_missing_glyphs
from .qt_font_backend import QtFontBackend

logger = logging.getLogger(__name__)

# Number of missing icons named in the coverage warning
_MISSING_PREVIEW = 5


class FontRegistrar:
    """Registers the icon font once and hands out font handles.

    Registration happens lazily on the first font request. Concurrent first
    requests are serialized, so the host sees exactly one registration.
    """

    def __init__(self, config: FontAwesomeConfig, backend: FontBackend | None = None):
        """Initialize the registrar.

        Args:
            config: Font asset and registration settings.
            backend: Host font system (defaults to Qt's font database).
        """
        self._config = config
        self._backend = backend or QtFontBackend()
        self._lock = threading.Lock()
        self._registered = False

    @property
    def config(self) -> FontAwesomeConfig:
        return self._config

    @property
    def family_name(self) -> str:
        return self._config.family_name

    @property
    def is_registered(self) -> bool:
        """True once the family is known to be available to the host."""
        return self._registered

    def font(self, size: float) -> Any:
        """Get the icon font at the given point size.

        Args:
            size: Positive point size.

        Returns:
            Host font handle (a QFont with the Qt backend).

        Raises:
            ValueError: If size is not a positive number.
            FontAssetNotFoundError: If the font file cannot be found.
            FontRegistrationError: If the host rejects the font.
        """
        if isinstance(size, bool) or not isinstance(size, (int, float)) or size <= 0:
            raise ValueError(f"Font size must be a positive number, got {size!r}")
        self.ensure_registered()
        return self._backend.create_font(self.family_name, size)

    def ensure_registered(self) -> None:
        """Register the font with the host unless it is already available."""
        if self._registered:
            return
        with self._lock:
            if self._registered:
                return
            if self._backend.has_family(self.family_name):
                logger.debug(f"Font family '{self.family_name}' already available")
            else:
                self._register()
            self._registered = True

    def candidate_font_paths(self) -> list[Path]:
        """List every location the font file is looked for, in probe order."""
        file_name = self._config.font_file_name
        resource_dir = get_resource_dir()
        paths = [Path(directory) / file_name for directory in self._config.font_search_paths]
        paths.append(resource_dir / file_name)
        paths.append(resource_dir / self._config.bundle_subdirectory / file_name)
        return paths

    def locate_font_file(self) -> Path:
        """Find the font file.

        Returns:
            Path to the first existing candidate.

        Raises:
            FontAssetNotFoundError: If no candidate exists.
        """
        candidates = self.candidate_font_paths()
        for path in candidates:
            if path.is_file():
                return path
        searched = ", ".join(str(p) for p in candidates)
        raise FontAssetNotFoundError(
            f"Font file '{self._config.font_file_name}' not found. Searched: {searched}"
        )

    def _register(self) -> None:
        path = self.locate_font_file()
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FontAssetNotFoundError(f"Cannot read font file {path}: {e}") from e

        if self._config.verify_glyph_coverage:
            self._check_coverage(path, data)

        font_id, families = self._backend.register_font_data(data)
        if self.family_name not in families:
            self._backend.remove_font(font_id)
            raise FontRegistrationError(
                f"Font {path} registered as {families or 'no families'}, "
                f"expected '{self.family_name}'"
            )
        logger.info(f"Registered font family '{self.family_name}' from {path}")

    def _check_coverage(self, path: Path, data: bytes) -> None:
        missing = find_missing_glyphs(data)
        if missing:
            preview = ", ".join(icon.css_code for icon in missing[:_MISSING_PREVIEW])
            logger.warning(
                f"Font {path} is missing {len(missing)} icon glyphs (e.g. {preview}); "
                f"they will render as empty boxes"
            )


_registrars: dict[str, FontRegistrar] = {}
_registrars_lock = threading.Lock()


def get_font_registrar(config: FontAwesomeConfig | None = None) -> FontRegistrar:
    """Get the process-wide registrar for a font family.

    Args:
        config: Settings used if the registrar has to be created
            (defaults to the default configuration).

    Returns:
        The single registrar for ``config.family_name``.
    """
    config = config or create_default_config()
    with _registrars_lock:
        registrar = _registrars.get(config.family_name)
        if registrar is None:
            registrar = FontRegistrar(config)
            _registrars[config.family_name] = registrar
        return registrar
