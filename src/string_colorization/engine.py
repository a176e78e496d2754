# topmark:header:start
#
#   project      : String Colorization
#   file         : engine.py
#   file_relpath : src/string_colorization/engine.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Colorize substrings of a text according to overlapping style rules.

Example:
    ```python
    from string_colorization import SourceText, colorize, foreground

    rainbow = SourceText("Rainbow")
    colored = colorize(
        rainbow,
        foreground.WHITE,
        [
            (rainbow[0:6], foreground.RED),
            (rainbow[1:6], foreground.true_color(255, 160, 0)),
            (rainbow[2:6], foreground.YELLOW),
            (rainbow[3:6], foreground.GREEN),
            (rainbow[4:6], foreground.BLUE),
            (rainbow[5:6], foreground.MAGENTA),
        ],
    )
    # R is red, a orange, i yellow, n green, b blue, o magenta, w white.
    ```

A rule whose range was carved from another text is ignored, even if that text
has the same content:

    ```python
    text = SourceText("Red, no red")
    other = SourceText("Red, no red")
    colorize(text, None, [(text[0:3], foreground.RED), (other[8:], foreground.GREEN)])
    # Only "Red" is styled; "red" stays plain.
    ```
"""

from __future__ import annotations

from operator import attrgetter
from typing import TYPE_CHECKING

from string_colorization.control import rendering_mode, should_colorize
from string_colorization.renderer import render
from string_colorization.resolver import resolve_segments
from string_colorization.source import as_text_slice

if TYPE_CHECKING:
    from collections.abc import Iterable

    from string_colorization.descriptor import StyleDescriptor
    from string_colorization.resolver import Segment
    from string_colorization.source import RangeRef, SourceText, TextSlice


def splice_segments(text: str, segments: Iterable[Segment]) -> str:
    """Render each segment of ``text`` and splice it back in place.

    Segments are processed rightmost first: inserting escapes changes the
    length of everything after the insertion point, so offsets of segments
    further left stay valid.

    Args:
        text (str): The plain input text.
        segments (Iterable[Segment]): Disjoint segments with input-relative offsets.

    Returns:
        str: The styled text.
    """
    output: str = text
    for segment in sorted(segments, key=attrgetter("start"), reverse=True):
        styled: str = render(output[segment.start : segment.end], segment.style)
        output = output[: segment.start] + styled + output[segment.end :]
    return output


def colorize(
    text: str | SourceText | TextSlice,
    general: StyleDescriptor | None = None,
    rules: Iterable[tuple[RangeRef, StyleDescriptor]] = (),
    *,
    enabled: bool | None = None,
) -> str:
    """Colorize every rule's substring of ``text`` and return the styled string.

    When several rules cover the same characters the later rule wins (see
    `StyleDescriptor.merge`). ``general`` applies where no rule reaches and has
    the lowest precedence. Rules whose range does not alias ``text`` are
    silently ignored; this function never raises for any rule set.

    Escapes are emitted whenever styling is enabled, whatever color mode
    yachalk detected for the terminal (see `string_colorization.control.rendering_mode`).

    Args:
        text (str | SourceText | TextSlice): Text to colorize. Rules can only alias a
            `SourceText` or a `TextSlice`; with a plain ``str`` only ``general`` applies.
        general (StyleDescriptor | None): Style for characters no rule reaches.
        rules (Iterable[tuple[RangeRef, StyleDescriptor]]): ``(range, style)`` pairs in
            precedence order (later wins).
        enabled (bool | None): Explicit styling switch. ``None`` consults
            `string_colorization.control.should_colorize`.

    Returns:
        str: The styled text, or the plain text when styling is disabled.
    """
    if enabled is None:
        enabled = should_colorize()
    if not enabled:
        return text if isinstance(text, str) else text.text

    target: TextSlice = as_text_slice(text)
    segments: list[Segment] = resolve_segments(target, general, rules)
    with rendering_mode(True):
        return splice_segments(target.text, segments)
