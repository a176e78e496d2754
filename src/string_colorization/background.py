# topmark:header:start
#
#   project      : String Colorization
#   file         : background.py
#   file_relpath : src/string_colorization/background.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Background style descriptors for the 16 named colors, plus `true_color`."""

from __future__ import annotations

from typing import Final

from string_colorization.descriptor import StyleDescriptor
from string_colorization.types import NamedColor, TrueColor

BLACK: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.BLACK)
RED: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.RED)
GREEN: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.GREEN)
YELLOW: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.YELLOW)
BLUE: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.BLUE)
MAGENTA: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.MAGENTA)
CYAN: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.CYAN)
WHITE: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.WHITE)
BRIGHT_BLACK: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.BRIGHT_BLACK)
BRIGHT_RED: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.BRIGHT_RED)
BRIGHT_GREEN: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.BRIGHT_GREEN)
BRIGHT_YELLOW: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.BRIGHT_YELLOW)
BRIGHT_BLUE: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.BRIGHT_BLUE)
BRIGHT_MAGENTA: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.BRIGHT_MAGENTA)
BRIGHT_CYAN: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.BRIGHT_CYAN)
BRIGHT_WHITE: Final[StyleDescriptor] = StyleDescriptor(background=NamedColor.BRIGHT_WHITE)


def true_color(red: int, green: int, blue: int) -> StyleDescriptor:
    """Return a descriptor setting the background to an explicit RGB color.

    Args:
        red (int): Red channel, ``0..255``.
        green (int): Green channel, ``0..255``.
        blue (int): Blue channel, ``0..255``.

    Returns:
        StyleDescriptor: A descriptor with only the background set.
    """
    return StyleDescriptor(background=TrueColor(red, green, blue))
