# topmark:header:start
#
#   project      : String Colorization
#   file         : renderer.py
#   file_relpath : src/string_colorization/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Turn a text slice and a style descriptor into an escape-coded string.

Escape sequences are produced by yachalk builders. The nesting order is a
fixed contract, since ANSI resets are positional and a different order
changes what adjacent styled runs look like:

1. every visual attribute wraps the text on its own, in `Attribute`
   enumeration order (Bold, Dimmed, Underline, Reversed, Italic, Blink,
   Hidden, Strikethrough); ``CLEAR`` emits nothing;
2. the background wraps the result;
3. the foreground wraps the result.

In the emitted bytes the foreground codes are therefore outermost, with the
background codes inside them and the attribute codes innermost, next to the
text. For ``fg=RED, bg=BLUE, {BOLD}``:

    ESC[31m ESC[44m ESC[1m text ESC[22m ESC[49m ESC[39m

This layout is fixed; do not reorder it so the foreground sits innermost.

A descriptor with no colors and no visual attributes returns the text
unchanged, without a single escape byte.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from yachalk import chalk
from yachalk.types import ColorMode as ChalkColorMode

from string_colorization.types import Attribute, NamedColor, TrueColor

if TYPE_CHECKING:
    from collections.abc import Callable

    from string_colorization.descriptor import StyleDescriptor
    from string_colorization.types import Color

# yachalk builder names per attribute. Blink has no yachalk builder.
_ATTRIBUTE_BUILDERS: Final[dict[Attribute, str]] = {
    Attribute.BOLD: "bold",
    Attribute.DIMMED: "dim",
    Attribute.UNDERLINE: "underline",
    Attribute.REVERSED: "inverse",
    Attribute.ITALIC: "italic",
    Attribute.HIDDEN: "hidden",
    Attribute.STRIKETHROUGH: "strikethrough",
}

BLINK_OPEN: Final[str] = "\x1b[5m"
BLINK_CLOSE: Final[str] = "\x1b[25m"


def _blink(text: str) -> str:
    """Wrap ``text`` in SGR 5/25 unless yachalk has color output switched off."""
    if chalk.get_color_mode() == ChalkColorMode.AllOff:
        return text
    # Re-open blink after any nested close so the whole run keeps blinking.
    return BLINK_OPEN + text.replace(BLINK_CLOSE, BLINK_CLOSE + BLINK_OPEN) + BLINK_CLOSE


def attribute_styler(attribute: Attribute) -> Callable[[str], str]:
    """Return the callable that wraps a string with ``attribute``.

    Args:
        attribute (Attribute): A visual attribute.

    Returns:
        Callable[[str], str]: The styler for the attribute.

    Raises:
        ValueError: If ``attribute`` is `Attribute.CLEAR`, which has no escapes.
    """
    if attribute is Attribute.CLEAR:
        raise ValueError("CLEAR is a composition marker and has no escape sequence")
    if attribute is Attribute.BLINK:
        return _blink
    return getattr(chalk, _ATTRIBUTE_BUILDERS[attribute])


def foreground_styler(color: Color) -> Callable[[str], str]:
    """Return the yachalk builder setting ``color`` as lettering color."""
    if isinstance(color, TrueColor):
        return chalk.rgb(color.red, color.green, color.blue)
    return getattr(chalk, NamedColor(color).chalk_name)


def background_styler(color: Color) -> Callable[[str], str]:
    """Return the yachalk builder setting ``color`` as background color."""
    if isinstance(color, TrueColor):
        return chalk.bg_rgb(color.red, color.green, color.blue)
    return getattr(chalk, f"bg_{NamedColor(color).chalk_name}")


def render(text: str, descriptor: StyleDescriptor) -> str:
    """Wrap ``text`` with the escape sequences described by ``descriptor``.

    Args:
        text (str): Plain (or already styled) text.
        descriptor (StyleDescriptor): Style to apply.

    Returns:
        str: The styled text; ``text`` itself when the descriptor is plain.
    """
    if not text or descriptor.is_plain:
        return text

    output: str = text
    for attribute in descriptor.visual_attributes:
        output = attribute_styler(attribute)(output)
    if descriptor.background is not None:
        output = background_styler(descriptor.background)(output)
    if descriptor.foreground is not None:
        output = foreground_styler(descriptor.foreground)(output)
    return output
