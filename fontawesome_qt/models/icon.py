"""FontAwesome icon identifiers and the legacy CSS code table.

Both structures are built from one data asset
(``resources/data/fontawesome-4.7.0-icons.json``) so they cannot drift apart.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from fontawesome_qt.exceptions import IconDataError
from fontawesome_qt.resources import get_resource_dir

ICON_DATA_FILE = "fontawesome-4.7.0-icons.json"
CSS_PREFIX = "fa-"

# Private Use Area, where every FontAwesome glyph lives
PUA_START = 0xE000
PUA_END = 0xF8FF


@dataclass(frozen=True)
class IconEntry:
    """One icon from the data asset."""

    id: str
    codepoint: int
    aliases: tuple[str, ...] = ()

    @property
    def member_name(self) -> str:
        return member_name_for_id(self.id)

    @property
    def raw_value(self) -> str:
        """Glyph character followed by the descriptive id."""
        return chr(self.codepoint) + self.id


@dataclass(frozen=True)
class IconData:
    """Parsed contents of the icon data asset."""

    version: str
    icons: tuple[IconEntry, ...]


def member_name_for_id(icon_id: str) -> str:
    """Convert a CSS icon id to an enum member name.

    Ids that start with a digit get a leading underscore.

    Example:
        member_name_for_id("arrow-circle-o-down") == "ARROW_CIRCLE_O_DOWN"
        member_name_for_id("500px") == "_500PX"
    """
    name = icon_id.replace("-", "_").upper()
    if name[:1].isdigit():
        name = "_" + name
    return name


def _parse_entry(raw: object, index: int) -> IconEntry:
    if not isinstance(raw, dict):
        raise IconDataError(f"Icon entry #{index} is not an object")
    try:
        icon_id = raw["id"]
        unicode_hex = raw["unicode"]
    except KeyError as e:
        raise IconDataError(f"Icon entry #{index} is missing field {e}") from e

    aliases = raw.get("aliases", [])
    if not isinstance(icon_id, str) or not isinstance(aliases, list):
        raise IconDataError(f"Icon entry #{index} has an invalid id or alias list")

    try:
        codepoint = int(unicode_hex, 16)
    except (TypeError, ValueError) as e:
        raise IconDataError(f"Icon '{icon_id}' has an invalid code point: {unicode_hex!r}") from e

    if not PUA_START <= codepoint <= PUA_END:
        raise IconDataError(
            f"Icon '{icon_id}' code point U+{codepoint:04X} is outside the Private Use Area"
        )

    for name in [icon_id, *aliases]:
        if not isinstance(name, str) or not member_name_for_id(name).isidentifier():
            raise IconDataError(f"Icon id {name!r} cannot be used as an identifier")

    return IconEntry(id=icon_id, codepoint=codepoint, aliases=tuple(aliases))


def load_icon_data(path: Path) -> IconData:
    """Load and validate an icon data asset.

    Args:
        path: Path to the JSON data file.

    Returns:
        Parsed icon data.

    Raises:
        IconDataError: If the file is missing, unparseable, or inconsistent.
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise IconDataError(f"Icon data not found at: {path}") from e
    except json.JSONDecodeError as e:
        raise IconDataError(f"Icon data at {path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict) or not isinstance(raw.get("icons"), list):
        raise IconDataError(f"Icon data at {path} has no 'icons' list")

    entries = tuple(_parse_entry(item, i) for i, item in enumerate(raw["icons"]))

    seen_names: set[str] = set()
    seen_codepoints: set[int] = set()
    for entry in entries:
        if entry.codepoint in seen_codepoints:
            raise IconDataError(f"Duplicate code point U+{entry.codepoint:04X} ('{entry.id}')")
        seen_codepoints.add(entry.codepoint)
        for name in (entry.id, *entry.aliases):
            if member_name_for_id(name) in seen_names:
                raise IconDataError(f"Duplicate icon id '{name}'")
            seen_names.add(member_name_for_id(name))

    return IconData(version=str(raw.get("version", "")), icons=entries)


class IconBase(Enum):
    """Behaviour shared by icon enumerations built from an icon data asset."""

    @property
    def glyph(self) -> str:
        """The single character the icon font renders as this icon."""
        return self.value[0]

    @property
    def codepoint(self) -> int:
        return ord(self.value[0])

    @property
    def css_code(self) -> str:
        """Legacy CSS class of the icon, e.g. ``fa-glass``."""
        return CSS_PREFIX + self.value[1:]


def build_icon_enum(name: str, data: IconData) -> type[IconBase]:
    """Build an icon enumeration from parsed icon data.

    Aliases share the raw value of their primary icon, so they become enum
    aliases of that member.
    """
    members: list[tuple[str, str]] = []
    for entry in data.icons:
        members.append((entry.member_name, entry.raw_value))
        members.extend((member_name_for_id(alias), entry.raw_value) for alias in entry.aliases)
    return IconBase(name, members, module=__name__, qualname=name)


def build_code_table(data: IconData) -> Mapping[str, str]:
    """Build the read-only legacy code table (``fa-<id>`` to raw value)."""
    table: dict[str, str] = {}
    for entry in data.icons:
        for icon_id in (entry.id, *entry.aliases):
            table[CSS_PREFIX + icon_id] = entry.raw_value
    return MappingProxyType(table)


_ICON_DATA = load_icon_data(get_resource_dir() / "data" / ICON_DATA_FILE)

ICON_SET_VERSION = _ICON_DATA.version

FontAwesome = build_icon_enum("FontAwesome", _ICON_DATA)

ICON_CODES = build_code_table(_ICON_DATA)
