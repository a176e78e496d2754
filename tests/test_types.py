# topmark:header:start
#
#   project      : String Colorization
#   file         : test_types.py
#   file_relpath : tests/test_types.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Color and attribute value types."""

from __future__ import annotations

import pytest

from string_colorization.types import VISUAL_ATTRIBUTES, Attribute, NamedColor, TrueColor
from tests.conftest import parametrize


@parametrize(
    "token, expected",
    [
        ("red", NamedColor.RED),
        ("RED", NamedColor.RED),
        ("bright_red", NamedColor.BRIGHT_RED),
        ("bright-red", NamedColor.BRIGHT_RED),
        ("red_bright", NamedColor.BRIGHT_RED),
        ("grey", NamedColor.BRIGHT_BLACK),
        ("purple", NamedColor.MAGENTA),
        ("orange", None),
    ],
)
def test_named_color_parse(token: str, expected: NamedColor | None) -> None:
    """Keys, member names and aliases are accepted case-insensitively."""
    assert NamedColor.parse(token) is expected


def test_named_color_chalk_names() -> None:
    """Bright colors map to yachalk's ``<base>_bright`` builders."""
    assert NamedColor.RED.chalk_name == "red"
    assert NamedColor.BRIGHT_RED.chalk_name == "red_bright"
    assert NamedColor.BRIGHT_BLACK.chalk_name == "black_bright"
    assert len(NamedColor) == 16
    assert sum(1 for c in NamedColor if c.is_bright) == 8


def test_true_color_from_hex() -> None:
    """Six- and three-digit hex notation is accepted."""
    assert TrueColor.from_hex("#ffa000") == TrueColor(255, 160, 0)
    assert TrueColor.from_hex("fa0") == TrueColor(255, 170, 0)
    assert TrueColor(1, 2, 3).as_tuple() == (1, 2, 3)


@parametrize("value", ["#ff", "#gggggg", "", "#ff00ff00"])
def test_true_color_from_hex_rejects_garbage(value: str) -> None:
    """Malformed hex raises ValueError."""
    with pytest.raises(ValueError):
        TrueColor.from_hex(value)


@parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5), (True, 0, 0)])
def test_true_color_validates_channels(channels: tuple[object, object, object]) -> None:
    """Channels must be ints within 0..255."""
    with pytest.raises(ValueError):
        TrueColor(*channels)  # type: ignore[arg-type]


def test_attribute_order_and_clear() -> None:
    """CLEAR is the only non-visual attribute; visual order is fixed."""
    assert not Attribute.CLEAR.is_visual
    assert VISUAL_ATTRIBUTES == (
        Attribute.BOLD,
        Attribute.DIMMED,
        Attribute.UNDERLINE,
        Attribute.REVERSED,
        Attribute.ITALIC,
        Attribute.BLINK,
        Attribute.HIDDEN,
        Attribute.STRIKETHROUGH,
    )
    assert Attribute.parse("dim") is Attribute.DIMMED
    assert Attribute.parse("inverse") is Attribute.REVERSED
