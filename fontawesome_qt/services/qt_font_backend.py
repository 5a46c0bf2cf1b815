"""Qt implementation of the host font backend."""

from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QFont, QFontDatabase, QGuiApplication

from fontawesome_qt.exceptions import FontRegistrationError


class QtFontBackend:
    """Registers fonts with Qt's application font database."""

    @staticmethod
    def _require_application() -> None:
        """Qt's font database is only usable once a QGuiApplication exists."""
        if QGuiApplication.instance() is None:
            raise FontRegistrationError(
                "Cannot use the Qt font database before a QGuiApplication "
                "(or QApplication) has been created"
            )

    def has_family(self, family: str) -> bool:
        self._require_application()
        return family in QFontDatabase.families()

    def register_font_data(self, data: bytes) -> tuple[int, list[str]]:
        self._require_application()
        font_id = QFontDatabase.addApplicationFontFromData(QByteArray(data))
        if font_id == -1:
            raise FontRegistrationError(
                "Qt rejected the font data (malformed font or unsupported format)"
            )
        return font_id, list(QFontDatabase.applicationFontFamilies(font_id))

    def remove_font(self, font_id: int) -> None:
        self._require_application()
        QFontDatabase.removeApplicationFont(font_id)

    def create_font(self, family: str, size: float) -> QFont:
        font = QFont(family)
        font.setPointSizeF(float(size))
        return font
