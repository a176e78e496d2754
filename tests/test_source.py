# topmark:header:start
#
#   project      : String Colorization
#   file         : test_source.py
#   file_relpath : tests/test_source.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Provenance-tagged texts, slices and identity ranges."""

from __future__ import annotations

import pytest

from string_colorization import IdentityRange, SourceText, TextSlice
from string_colorization.source import as_text_slice, identity_range_of, overlaps
from tests.conftest import parametrize


def test_slicing_records_absolute_offsets() -> None:
    """Slices of slices keep absolute offsets into the root text."""
    text = SourceText("Hello, world")
    outer = text[7:]
    inner = outer[1:3]

    assert outer == TextSlice(text, 7, 12)
    assert inner == TextSlice(text, 8, 10)
    assert inner.text == "or"
    assert str(inner) == "or"
    assert len(inner) == 2


def test_negative_and_open_slices() -> None:
    """Slicing follows ``str`` semantics, clamping included."""
    text = SourceText("abcdef")
    assert text[-2:].text == "ef"
    assert text[:100].text == "abcdef"
    assert text[4:2].text == ""
    assert len(text[4:2]) == 0


def test_integer_index_yields_one_character_slice() -> None:
    """An int index is a one-character slice; out of range raises."""
    text = SourceText("abc")
    assert text[-1] == TextSlice(text, 2, 3)
    with pytest.raises(IndexError):
        _ = text[3]


def test_stepped_slice_is_rejected() -> None:
    """Only contiguous slices have an identity range."""
    with pytest.raises(ValueError):
        _ = SourceText("abcdef")[::2]


def test_bad_index_type() -> None:
    """Non-integer indices raise TypeError."""
    with pytest.raises(TypeError):
        _ = SourceText("abc")["a"]  # type: ignore[index]


def test_source_text_equality_is_identity() -> None:
    """Two sources with the same content are distinct."""
    first = SourceText("same")
    second = SourceText("same")
    assert first != second
    assert first[0:2] != second[0:2]
    assert first[0:2] == first[0:2]


def test_span_and_identity_range() -> None:
    """`span` covers the whole text."""
    text = SourceText("xyz")
    assert text.span == TextSlice(text, 0, 3)
    assert text.identity_range == IdentityRange(text, 0, 3)
    assert text[1:].identity_range == IdentityRange(text, 1, 3)
    assert len(text.identity_range) == 3


@parametrize(
    "a, b, expected",
    [
        ((0, 5), (3, 8), True),
        ((0, 5), (5, 8), False),
        ((3, 8), (0, 3), False),
        ((0, 10), (4, 5), True),
        ((2, 2), (0, 10), False),
        ((0, 10), (2, 2), False),
    ],
)
def test_strict_overlap(a: tuple[int, int], b: tuple[int, int], expected: bool) -> None:
    """Touching and empty ranges never overlap."""
    assert overlaps(*a, *b) is expected
    assert overlaps(*b, *a) is expected


def test_identity_overlap_requires_same_origin() -> None:
    """Equal content in a different source never aliases."""
    text = SourceText("Red, no red")
    other = SourceText("Red, no red")
    assert text[0:3].identity_range.overlaps(text.identity_range)
    assert not other[0:3].identity_range.overlaps(text.identity_range)


def test_as_text_slice_and_identity_range_of() -> None:
    """Plain strings get a fresh source and have no identity for rules."""
    text = SourceText("abc")
    piece = text[1:]
    assert as_text_slice(piece) is piece
    assert as_text_slice(text) == text.span
    assert as_text_slice("abc").text == "abc"
    assert as_text_slice("abc").source is not as_text_slice("abc").source

    assert identity_range_of(piece) == IdentityRange(text, 1, 3)
    assert identity_range_of(text) == IdentityRange(text, 0, 3)
    assert identity_range_of("abc") is None


def test_code_point_offsets() -> None:
    """Offsets count code points, so multi-byte characters are one unit each."""
    text = SourceText("héllo wörld")
    assert text[6:11].text == "wörld"
    assert len(text) == 11
