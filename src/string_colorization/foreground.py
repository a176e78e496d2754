# topmark:header:start
#
#   project      : String Colorization
#   file         : foreground.py
#   file_relpath : src/string_colorization/foreground.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Foreground style descriptors for the 16 named colors, plus `true_color`.

Example:
    ```python
    from string_colorization import foreground

    foreground.RED.apply("Red foreground")
    (foreground.BLUE + foreground.GREEN) == foreground.GREEN
    ```
"""

from __future__ import annotations

from typing import Final

from string_colorization.descriptor import StyleDescriptor
from string_colorization.types import NamedColor, TrueColor

BLACK: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.BLACK)
RED: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.RED)
GREEN: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.GREEN)
YELLOW: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.YELLOW)
BLUE: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.BLUE)
MAGENTA: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.MAGENTA)
CYAN: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.CYAN)
WHITE: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.WHITE)
BRIGHT_BLACK: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.BRIGHT_BLACK)
BRIGHT_RED: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.BRIGHT_RED)
BRIGHT_GREEN: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.BRIGHT_GREEN)
BRIGHT_YELLOW: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.BRIGHT_YELLOW)
BRIGHT_BLUE: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.BRIGHT_BLUE)
BRIGHT_MAGENTA: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.BRIGHT_MAGENTA)
BRIGHT_CYAN: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.BRIGHT_CYAN)
BRIGHT_WHITE: Final[StyleDescriptor] = StyleDescriptor(foreground=NamedColor.BRIGHT_WHITE)


def true_color(red: int, green: int, blue: int) -> StyleDescriptor:
    """Return a descriptor setting the lettering to an explicit RGB color."""
    return StyleDescriptor(foreground=TrueColor(red, green, blue))
