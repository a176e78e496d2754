# topmark:header:start
#
#   project      : String Colorization
#   file         : source.py
#   file_relpath : src/string_colorization/source.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Provenance-tagged text and slices.

A rule may only style the text it was carved from. Python strings carry no
usable provenance (equal strings are interchangeable), so texts that take part
in colorization are wrapped in a `SourceText`. Slicing a `SourceText`, or a
slice of one, yields a `TextSlice` that remembers its root text and its
absolute offsets into it.

Key types:
    - `SourceText`: one text instance. Equality is identity: two instances
      with the same content are different sources.
    - `TextSlice`: a contiguous region ``[start, end)`` of a `SourceText`.
    - `IdentityRange`: ``(origin, start, end)``, the value compared by the
      resolver to decide whether a rule belongs to the input being styled.

Example:
    ```python
    text = SourceText("Red, no red")
    other = SourceText("Red, no red")

    assert text[0:3].identity_range.overlaps(text.identity_range)
    assert not other[0:3].identity_range.overlaps(text.identity_range)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


def overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    """Return True if ``[a_start, a_end)`` and ``[b_start, b_end)`` share at least one offset.

    Touching ranges (``a_end == b_start``) do not overlap, and an empty range
    overlaps nothing.
    """
    return b_end > a_start and b_start < a_end


@dataclass(frozen=True)
class IdentityRange:
    """Where a piece of text lives: its root `SourceText` and absolute offsets."""

    origin: SourceText
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def overlaps(self, other: IdentityRange) -> bool:
        """Return True if both ranges come from the same source and share an offset."""
        return other.origin is self.origin and overlaps(self.start, self.end, other.start, other.end)


def _resolve_slice(key: slice | int, length: int) -> tuple[int, int]:
    """Normalize ``key`` against ``length`` the way ``str.__getitem__`` does.

    Raises:
        ValueError: If ``key`` is a slice with a step other than 1.
        IndexError: If ``key`` is an out-of-range integer index.
        TypeError: If ``key`` is neither a slice nor an int.
    """
    if isinstance(key, slice):
        start, stop, step = key.indices(length)
        if step != 1:
            raise ValueError("text slices must be contiguous (step 1)")
        return start, max(start, stop)
    if isinstance(key, int):
        index: int = key + length if key < 0 else key
        if not 0 <= index < length:
            raise IndexError("text index out of range")
        return index, index + 1
    raise TypeError(f"text indices must be slices or integers, not {type(key).__name__}")


class SourceText:
    """A text instance whose slices remember where they were carved from.

    Instances compare and hash by identity, never by content.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        self._text = text

    @property
    def text(self) -> str:
        """The wrapped string."""
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SourceText({self._text!r})"

    def __len__(self) -> int:
        return len(self._text)

    def __getitem__(self, key: slice | int) -> TextSlice:
        start, end = _resolve_slice(key, len(self._text))
        return TextSlice(self, start, end)

    @property
    def span(self) -> TextSlice:
        """The slice covering the whole text."""
        return TextSlice(self, 0, len(self._text))

    @property
    def identity_range(self) -> IdentityRange:
        """Identity range covering the whole text."""
        return IdentityRange(self, 0, len(self._text))


@dataclass(frozen=True)
class TextSlice:
    """A contiguous region ``[start, end)`` of a `SourceText`.

    Offsets are absolute in the root text. Slicing a `TextSlice` is relative to
    the slice (like slicing a string) and yields another slice of the same
    root.
    """

    source: SourceText
    start: int
    end: int

    @property
    def text(self) -> str:
        """The characters covered by the slice."""
        return self.source.text[self.start : self.end]

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return self.end - self.start

    def __getitem__(self, key: slice | int) -> TextSlice:
        start, end = _resolve_slice(key, len(self))
        return TextSlice(self.source, self.start + start, self.start + end)

    @property
    def identity_range(self) -> IdentityRange:
        """Identity range of the slice within its root text."""
        return IdentityRange(self.source, self.start, self.end)


# Anything a rule may use to point at the text it styles. Plain strings have no
# provenance and therefore never alias an input.
RangeRef = Union[TextSlice, SourceText, str]


def as_text_slice(value: str | SourceText | TextSlice) -> TextSlice:
    """Coerce an input text to a `TextSlice`.

    A plain ``str`` is wrapped in a fresh `SourceText`, so no existing slice can
    alias it.
    """
    if isinstance(value, TextSlice):
        return value
    if isinstance(value, SourceText):
        return value.span
    return SourceText(value).span


def identity_range_of(ref: RangeRef) -> IdentityRange | None:
    """Return the identity range of a rule range reference, or None for a plain string."""
    if isinstance(ref, (TextSlice, SourceText)):
        return ref.identity_range
    return None
