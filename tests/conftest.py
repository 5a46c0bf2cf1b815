"""Pytest configuration and shared fixtures."""

import io
import os
import threading
import time

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from fontawesome_qt.config import create_default_config
from fontawesome_qt.exceptions import FontRegistrationError
from fontawesome_qt.models import FontAwesome

# Qt tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def _square_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((900, 0))
    pen.lineTo((900, 800))
    pen.lineTo((100, 800))
    pen.closePath()
    return pen.glyph()


def build_icon_font(codepoints, family="FontAwesome") -> bytes:
    """Build a TrueType font with a filled square glyph at each code point."""
    names = {cp: f"uni{cp:04X}" for cp in codepoints}
    glyph_order = [".notdef", *names.values()]

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(names)
    fb.setupGlyf({name: _square_glyph() for name in glyph_order})
    fb.setupHorizontalMetrics({name: (1000, 100) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=850, descent=-150)
    fb.setupNameTable({"familyName": family, "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=850, sTypoDescender=-150, usWinAscent=850, usWinDescent=150)
    fb.setupPost()
    fb.setupMaxp()

    buffer = io.BytesIO()
    fb.save(buffer)
    return buffer.getvalue()


@pytest.fixture(scope="session")
def make_font_bytes():
    """Factory fixture for generated icon fonts."""

    def _make(icons=None, family="FontAwesome"):
        icons = list(FontAwesome) if icons is None else icons
        return build_icon_font([icon.codepoint for icon in icons], family=family)

    return _make


@pytest.fixture
def font_dir(tmp_path):
    """Provide a directory holding placeholder FontAwesome.otf contents."""
    directory = tmp_path / "fonts"
    directory.mkdir()
    (directory / "FontAwesome.otf").write_bytes(b"placeholder font data")
    return directory


@pytest.fixture
def test_config(font_dir):
    """Provide a configuration that finds the placeholder font and skips coverage checks."""
    return create_default_config(font_search_paths=[font_dir], verify_glyph_coverage=False)


class RecordingFontBackend:
    """A FontBackend that records registrations instead of talking to Qt."""

    def __init__(self, known_families=(), registered_families=None, reject=False, delay=0.0):
        self.known_families = set(known_families)
        self.registered_families = (
            ["FontAwesome"] if registered_families is None else registered_families
        )
        self.reject = reject
        self.delay = delay
        self.registrations: list[bytes] = []
        self.live: dict[int, list[str]] = {}
        self.removed: list[int] = []
        self.fonts: list[tuple[str, float]] = []
        self._lock = threading.Lock()

    def has_family(self, family):
        with self._lock:
            if family in self.known_families:
                return True
            return any(family in families for families in self.live.values())

    def register_font_data(self, data):
        # Widen the window in which an unguarded caller would register twice
        time.sleep(self.delay)
        with self._lock:
            self.registrations.append(data)
            if self.reject:
                raise FontRegistrationError("Host rejected the font data")
            font_id = len(self.registrations)
            self.live[font_id] = list(self.registered_families)
            return font_id, list(self.registered_families)

    def remove_font(self, font_id):
        with self._lock:
            del self.live[font_id]
            self.removed.append(font_id)

    def create_font(self, family, size):
        self.fonts.append((family, size))
        return (family, size)


@pytest.fixture
def fake_backend():
    """Provide a recording font backend."""
    return RecordingFontBackend()


@pytest.fixture(scope="session")
def qt_app():
    """Provide a QGuiApplication, skipping the test if Qt cannot start."""
    try:
        from PyQt6.QtGui import QGuiApplication
    except ImportError:
        pytest.skip("PyQt6 not available")
    try:
        return QGuiApplication.instance() or QGuiApplication([])
    except RuntimeError:
        pytest.skip("Qt platform not available")


@pytest.fixture
def make_backend():
    """Factory fixture for recording font backends with custom behaviour."""
    return RecordingFontBackend
