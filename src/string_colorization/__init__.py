# topmark:header:start
#
#   project      : String Colorization
#   file         : __init__.py
#   file_relpath : src/string_colorization/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""String Colorization package.

Styles substrings of a text with terminal escape sequences. Each rule pairs a
slice of the input with a `StyleDescriptor`; overlapping rules are resolved
by precedence (later rules win) and the result is spliced back into the text.

Typical use:
    ```python
    from string_colorization import SourceText, colorize, foreground, style

    text = SourceText("error: file not found")
    print(colorize(text, None, [(text[0:5], foreground.RED + style.BOLD)]))
    ```
"""

from __future__ import annotations

from string_colorization import background, control, foreground, style
from string_colorization.config.stylesheet import (
    StyleSheet,
    load_stylesheet_file,
    load_stylesheet_text,
)
from string_colorization.constants import PACKAGE_VERSION
from string_colorization.descriptor import EMPTY_STYLE, StyleDescriptor, merge
from string_colorization.engine import colorize, splice_segments
from string_colorization.errors import StringColorizationError, StyleConfigError
from string_colorization.renderer import render
from string_colorization.resolver import Rule, Segment, resolve_segments
from string_colorization.source import IdentityRange, SourceText, TextSlice
from string_colorization.types import Attribute, Color, NamedColor, TrueColor

__version__: str = PACKAGE_VERSION

__all__ = [
    "EMPTY_STYLE",
    "Attribute",
    "Color",
    "IdentityRange",
    "NamedColor",
    "Rule",
    "Segment",
    "SourceText",
    "StringColorizationError",
    "StyleConfigError",
    "StyleDescriptor",
    "StyleSheet",
    "TextSlice",
    "TrueColor",
    "__version__",
    "background",
    "colorize",
    "control",
    "foreground",
    "load_stylesheet_file",
    "load_stylesheet_text",
    "merge",
    "render",
    "resolve_segments",
    "splice_segments",
    "style",
]
