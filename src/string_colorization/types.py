# topmark:header:start
#
#   project      : String Colorization
#   file         : types.py
#   file_relpath : src/string_colorization/types.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Value types describing colors and text attributes.

Sections:
    * NamedColor: the 16 basic and bright terminal colors.
    * TrueColor: an explicit (red, green, blue) byte triple.
    * Color: union of both color flavours.
    * Attribute: text attributes plus the distinguished ``CLEAR`` marker.

All types are immutable values without identity; equality is structural.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Union

from string_colorization.core.enum_mixins import KeyedStrEnum

_HEX_COLOR_RE: Final[re.Pattern[str]] = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class NamedColor(KeyedStrEnum):
    """One of the 16 basic/bright terminal colors.

    The member key is the configuration token (``"bright_red"``); the yachalk
    builder name is exposed via `chalk_name` (``"red_bright"``).
    """

    BLACK = ("black", "Black")
    RED = ("red", "Red")
    GREEN = ("green", "Green")
    YELLOW = ("yellow", "Yellow")
    BLUE = ("blue", "Blue")
    MAGENTA = ("magenta", "Magenta", ("purple",))
    CYAN = ("cyan", "Cyan")
    WHITE = ("white", "White")
    BRIGHT_BLACK = ("bright_black", "Bright black", ("black_bright", "gray", "grey"))
    BRIGHT_RED = ("bright_red", "Bright red", ("red_bright",))
    BRIGHT_GREEN = ("bright_green", "Bright green", ("green_bright",))
    BRIGHT_YELLOW = ("bright_yellow", "Bright yellow", ("yellow_bright",))
    BRIGHT_BLUE = ("bright_blue", "Bright blue", ("blue_bright",))
    BRIGHT_MAGENTA = ("bright_magenta", "Bright magenta", ("magenta_bright",))
    BRIGHT_CYAN = ("bright_cyan", "Bright cyan", ("cyan_bright",))
    BRIGHT_WHITE = ("bright_white", "Bright white", ("white_bright",))

    @property
    def is_bright(self) -> bool:
        """Whether this is one of the eight bright variants."""
        return self.key.startswith("bright_")

    @property
    def chalk_name(self) -> str:
        """Name of the matching yachalk foreground builder (e.g. ``red_bright``)."""
        if self.is_bright:
            return f"{self.key.removeprefix('bright_')}_bright"
        return self.key


@dataclass(frozen=True)
class TrueColor:
    """An explicit 24-bit color.

    Raises:
        ValueError: If any channel is not an int in ``0..255``.
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            channel: object = getattr(self, name)
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise ValueError(f"{name} channel must be an int, got {channel!r}")
            if not 0 <= channel <= 255:
                raise ValueError(f"{name} channel must be within 0..255, got {channel}")

    @classmethod
    def from_hex(cls, value: str) -> TrueColor:
        """Parse ``#rgb`` or ``#rrggbb`` (the leading ``#`` is optional).

        Args:
            value (str): Hex color notation.

        Returns:
            TrueColor: The parsed color.

        Raises:
            ValueError: If ``value`` is not valid hex color notation.
        """
        if not _HEX_COLOR_RE.match(value):
            raise ValueError(f"not a hex color: {value!r}")
        digits: str = value.lstrip("#")
        if len(digits) == 3:
            digits = "".join(d * 2 for d in digits)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the channels as ``(red, green, blue)``."""
        return (self.red, self.green, self.blue)


Color = Union[NamedColor, TrueColor]


class Attribute(KeyedStrEnum):
    """Text attributes, in rendering order.

    ``CLEAR`` is not a visual attribute: it only affects composition, where it
    discards every color and attribute accumulated before it.
    """

    CLEAR = ("clear", "Clear", ("reset",))
    BOLD = ("bold", "Bold")
    DIMMED = ("dimmed", "Dimmed", ("dim", "faint"))
    UNDERLINE = ("underline", "Underline", ("underlined",))
    REVERSED = ("reversed", "Reversed", ("reverse", "inverse"))
    ITALIC = ("italic", "Italic")
    BLINK = ("blink", "Blink")
    HIDDEN = ("hidden", "Hidden", ("conceal", "concealed"))
    STRIKETHROUGH = ("strikethrough", "Strikethrough", ("strike",))

    @property
    def is_visual(self) -> bool:
        """Whether the attribute produces escape codes of its own."""
        return self is not Attribute.CLEAR


VISUAL_ATTRIBUTES: Final[tuple[Attribute, ...]] = tuple(a for a in Attribute if a.is_visual)
