# topmark:header:start
#
#   project      : String Colorization
#   file         : style.py
#   file_relpath : src/string_colorization/style.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Attribute-only style descriptors.

`CLEAR` is the reset marker: merged after other styles it discards every
color and attribute accumulated before it.
"""

from __future__ import annotations

from typing import Final

from string_colorization.descriptor import StyleDescriptor
from string_colorization.types import Attribute

_EMPTY: Final[StyleDescriptor] = StyleDescriptor()

CLEAR: Final[StyleDescriptor] = _EMPTY.with_attribute(Attribute.CLEAR)
BOLD: Final[StyleDescriptor] = _EMPTY.with_attribute(Attribute.BOLD)
DIMMED: Final[StyleDescriptor] = _EMPTY.with_attribute(Attribute.DIMMED)
UNDERLINE: Final[StyleDescriptor] = _EMPTY.with_attribute(Attribute.UNDERLINE)
REVERSED: Final[StyleDescriptor] = _EMPTY.with_attribute(Attribute.REVERSED)
ITALIC: Final[StyleDescriptor] = _EMPTY.with_attribute(Attribute.ITALIC)
BLINK: Final[StyleDescriptor] = _EMPTY.with_attribute(Attribute.BLINK)
HIDDEN: Final[StyleDescriptor] = _EMPTY.with_attribute(Attribute.HIDDEN)
STRIKETHROUGH: Final[StyleDescriptor] = _EMPTY.with_attribute(Attribute.STRIKETHROUGH)
