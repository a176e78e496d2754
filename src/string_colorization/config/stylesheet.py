# topmark:header:start
#
#   project      : String Colorization
#   file         : stylesheet.py
#   file_relpath : src/string_colorization/config/stylesheet.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Load named styles from TOML style sheets.

A style sheet maps names to style descriptors and optionally records the
user's styling preference:

```toml
[styling]
color = "auto"            # auto | always | never

[styles.error]
foreground = "bright_red" # color name, "#rrggbb", "#rgb" or [r, g, b]
attributes = ["bold"]

[styles.location]
background = [200, 200, 200]
```

The same tables are read from ``[tool.string_colorization]`` when the file
is a ``pyproject.toml``. Parsing is done with `tomlkit`; every problem is
reported as a `StyleConfigError` naming the offending key.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from string_colorization import control
from string_colorization.config.logging import get_logger
from string_colorization.constants import (
    STYLESHEET_SECTION_STYLES,
    STYLESHEET_SECTION_STYLING,
)
from string_colorization.descriptor import StyleDescriptor
from string_colorization.errors import StyleConfigError
from string_colorization.types import Attribute, NamedColor, TrueColor

if TYPE_CHECKING:
    from pathlib import Path

    from string_colorization.config.logging import ColorizationLogger
    from string_colorization.types import Color


logger: ColorizationLogger = get_logger(__name__)

KEY_COLOR: Final[str] = "color"
KEY_FOREGROUND: Final[str] = "foreground"
KEY_BACKGROUND: Final[str] = "background"
KEY_ATTRIBUTES: Final[str] = "attributes"
STYLE_KEYS: Final[frozenset[str]] = frozenset({KEY_FOREGROUND, KEY_BACKGROUND, KEY_ATTRIBUTES})

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_PATH: Final[tuple[str, str]] = ("tool", "string_colorization")


@dataclass(frozen=True)
class StyleSheet:
    """Named styles plus the styling preference read from a style sheet.

    Attributes:
        color_mode (control.ColorMode): Styling preference (``auto`` by default).
        styles (Mapping[str, StyleDescriptor]): Read-only mapping of style names.
    """

    color_mode: control.ColorMode = control.ColorMode.AUTO
    styles: Mapping[str, StyleDescriptor] = field(
        default_factory=lambda: MappingProxyType({}),
    )

    def __getitem__(self, name: str) -> StyleDescriptor:
        return self.styles[name]

    def __contains__(self, name: object) -> bool:
        return name in self.styles

    def get(self, name: str, default: StyleDescriptor | None = None) -> StyleDescriptor | None:
        """Return the style called ``name``, or ``default`` when undefined."""
        return self.styles.get(name, default)

    def apply_color_mode(self) -> None:
        """Push the configured preference into the process-wide styling switch.

        ``always`` and ``never`` set the override; ``auto`` clears it.
        """
        if self.color_mode == control.ColorMode.AUTO:
            control.unset_override()
        else:
            control.set_override(self.color_mode == control.ColorMode.ALWAYS)


def _is_table(obj: object) -> bool:
    return isinstance(obj, Mapping)


def parse_color(value: object, *, key: str | None = None) -> Color:
    """Interpret a TOML value as a color.

    Accepted forms:
        - a color name (``"red"``, ``"bright-red"``, ``"grey"``...),
        - hex notation (``"#ffa000"`` or ``"#fa0"``),
        - a list of three ints (``[255, 160, 0]``).

    Args:
        value (object): The raw TOML value.
        key (str | None): Dotted key path used in error messages.

    Returns:
        Color: The parsed color.

    Raises:
        StyleConfigError: If the value is not a recognizable color.
    """
    if isinstance(value, str):
        if value.startswith("#"):
            try:
                return TrueColor.from_hex(value)
            except ValueError as exc:
                raise StyleConfigError(str(exc), key=key) from exc
        named: NamedColor | None = NamedColor.parse(value)
        if named is None:
            raise StyleConfigError(f"unknown color name {value!r}", key=key)
        return named
    if isinstance(value, list):
        channels: list[Any] = cast("list[Any]", value)
        if len(channels) != 3:
            raise StyleConfigError(
                f"RGB colors need exactly 3 channels, got {len(channels)}", key=key
            )
        try:
            return TrueColor(channels[0], channels[1], channels[2])
        except ValueError as exc:
            raise StyleConfigError(str(exc), key=key) from exc
    raise StyleConfigError(
        f"expected a color name, hex string or [r, g, b] list, got {type(value).__name__}",
        key=key,
    )


def _parse_attributes(value: object, *, key: str) -> list[Attribute]:
    if not isinstance(value, list):
        raise StyleConfigError("expected a list of attribute names", key=key)
    attributes: list[Attribute] = []
    for item in cast("list[Any]", value):
        if not isinstance(item, str):
            raise StyleConfigError(f"attribute names must be strings, got {item!r}", key=key)
        attribute: Attribute | None = Attribute.parse(item)
        if attribute is None:
            raise StyleConfigError(f"unknown attribute {item!r}", key=key)
        attributes.append(attribute)
    return attributes


def style_from_table(table: Mapping[str, Any], *, key: str | None = None) -> StyleDescriptor:
    """Build a style descriptor from one ``[styles.<name>]`` table.

    Attributes are added in the listed order through `StyleDescriptor.with_attribute`,
    so a ``"clear"`` entry discards the colors set in the same table. An
    explicitly empty ``attributes = []`` produces an empty-but-present
    attribute set, which blocks nothing but is distinct from leaving the key out.

    Args:
        table (Mapping[str, Any]): The style table.
        key (str | None): Dotted key path of the table, used in error messages.

    Returns:
        StyleDescriptor: The described style.

    Raises:
        StyleConfigError: On unknown keys or invalid values.
    """
    prefix: str = f"{key}." if key else ""
    unknown: list[str] = sorted(set(table) - STYLE_KEYS)
    if unknown:
        raise StyleConfigError(f"unknown style key(s): {', '.join(unknown)}", key=key)

    style = StyleDescriptor()
    if KEY_FOREGROUND in table:
        style = style.with_foreground(
            parse_color(table[KEY_FOREGROUND], key=f"{prefix}{KEY_FOREGROUND}")
        )
    if KEY_BACKGROUND in table:
        style = style.with_background(
            parse_color(table[KEY_BACKGROUND], key=f"{prefix}{KEY_BACKGROUND}")
        )
    if KEY_ATTRIBUTES in table:
        attributes: list[Attribute] = _parse_attributes(
            table[KEY_ATTRIBUTES], key=f"{prefix}{KEY_ATTRIBUTES}"
        )
        if not attributes:
            style = StyleDescriptor(style.foreground, style.background, frozenset())
        style = style.with_attributes(attributes)
    return style


def stylesheet_from_dict(data: Mapping[str, Any]) -> StyleSheet:
    """Build a `StyleSheet` from already parsed TOML data.

    Args:
        data (Mapping[str, Any]): Top-level table holding ``styling`` and ``styles``.

    Returns:
        StyleSheet: The style sheet.

    Raises:
        StyleConfigError: On malformed sections or values.
    """
    color_mode: control.ColorMode = control.ColorMode.AUTO
    styling: object = data.get(STYLESHEET_SECTION_STYLING, {})
    if not _is_table(styling):
        raise StyleConfigError("expected a table", key=STYLESHEET_SECTION_STYLING)
    raw_mode: object = cast("Mapping[str, Any]", styling).get(KEY_COLOR)
    if raw_mode is not None:
        try:
            color_mode = control.ColorMode(str(raw_mode).strip().lower())
        except ValueError as exc:
            raise StyleConfigError(
                f"expected one of auto, always, never; got {raw_mode!r}",
                key=f"{STYLESHEET_SECTION_STYLING}.{KEY_COLOR}",
            ) from exc

    section: object = data.get(STYLESHEET_SECTION_STYLES, {})
    if not _is_table(section):
        raise StyleConfigError("expected a table", key=STYLESHEET_SECTION_STYLES)
    styles: dict[str, StyleDescriptor] = {}
    for name, table in cast("Mapping[str, Any]", section).items():
        style_key: str = f"{STYLESHEET_SECTION_STYLES}.{name}"
        if not _is_table(table):
            raise StyleConfigError("expected a table", key=style_key)
        styles[name] = style_from_table(cast("Mapping[str, Any]", table), key=style_key)
        logger.trace("Loaded style %r: %r", name, styles[name])

    logger.debug("Loaded %d style(s), color mode %s", len(styles), color_mode.value)
    return StyleSheet(color_mode=color_mode, styles=MappingProxyType(styles))


def load_stylesheet_text(text: str) -> StyleSheet:
    """Parse TOML text into a `StyleSheet`.

    Args:
        text (str): TOML document text.

    Returns:
        StyleSheet: The parsed style sheet.

    Raises:
        StyleConfigError: On TOML syntax errors or invalid style definitions.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise StyleConfigError(f"invalid TOML: {exc}") from exc
    data_any: Any = doc.unwrap()
    return stylesheet_from_dict(cast("dict[str, Any]", data_any))


def load_stylesheet_file(path: Path) -> StyleSheet:
    """Load a style sheet from a TOML file.

    For a ``pyproject.toml`` the style sheet is read from
    ``[tool.string_colorization]``; a pyproject without that table yields an
    empty style sheet.

    Args:
        path (Path): Path to the TOML file (UTF-8).

    Returns:
        StyleSheet: The parsed style sheet.

    Raises:
        StyleConfigError: If the file cannot be read or holds invalid content.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Error reading style sheet %s: %s", path, exc)
        raise StyleConfigError(f"cannot read style sheet: {exc}", key=str(path)) from exc

    if path.name != PYPROJECT_FILENAME:
        return load_stylesheet_text(text)

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise StyleConfigError(f"invalid TOML: {exc}", key=str(path)) from exc
    data: Any = doc.unwrap()
    for part in PYPROJECT_TOOL_PATH:
        data = data.get(part, {}) if _is_table(data) else {}
    if not _is_table(data):
        raise StyleConfigError("expected a table", key=".".join(PYPROJECT_TOOL_PATH))
    return stylesheet_from_dict(cast("Mapping[str, Any]", data))
