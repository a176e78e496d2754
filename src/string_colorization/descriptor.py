# topmark:header:start
#
#   project      : String Colorization
#   file         : descriptor.py
#   file_relpath : src/string_colorization/descriptor.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Immutable style descriptors and their composition.

A `StyleDescriptor` bundles an optional foreground color, an optional
background color and an optional attribute set. The attribute set has three
states that must not be conflated:

- ``None``: no attribute information; composition inherits from older styles.
- ``frozenset()``: explicitly no attributes, yet still "present" for merging.
- a non-empty frozenset: the attributes to apply.

Composition (`StyleDescriptor.merge`, also spelled ``old + new``) is ordered:
the newer operand wins every field it sets, attribute sets are unioned, and a
newer operand carrying `Attribute.CLEAR` replaces the whole result.

Example:
    ```python
    from string_colorization import NamedColor, StyleDescriptor, background, foreground

    style = background.BLUE + foreground.GREEN
    assert style == StyleDescriptor().with_background(NamedColor.BLUE).with_foreground(
        NamedColor.GREEN
    )
    assert foreground.BLUE + foreground.GREEN == foreground.GREEN
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from string_colorization.renderer import render
from string_colorization.types import VISUAL_ATTRIBUTES, Attribute

if TYPE_CHECKING:
    from collections.abc import Iterable

    from string_colorization.types import Color


@dataclass(frozen=True)
class StyleDescriptor:
    """Foreground, background and attributes to apply to a piece of text.

    Attributes:
        foreground (Color | None): Lettering color.
        background (Color | None): Background color.
        attributes (frozenset[Attribute] | None): Attribute set; ``None`` means
            "no attribute information", which is distinct from an empty set.
    """

    foreground: Color | None = None
    background: Color | None = None
    attributes: frozenset[Attribute] | None = None

    def __post_init__(self) -> None:
        # Accept any iterable of attributes but always store a frozenset.
        if self.attributes is not None and not isinstance(self.attributes, frozenset):
            object.__setattr__(self, "attributes", frozenset(self.attributes))

    def __add__(self, other: StyleDescriptor) -> StyleDescriptor:
        if not isinstance(other, StyleDescriptor):
            return NotImplemented
        return self.merge(other)

    # --- Builders ---

    def with_foreground(self, color: Color) -> StyleDescriptor:
        """Return a copy whose foreground is ``color``."""
        return replace(self, foreground=color)

    def with_background(self, color: Color) -> StyleDescriptor:
        """Return a copy whose background is ``color``."""
        return replace(self, background=color)

    def with_attribute(self, attribute: Attribute) -> StyleDescriptor:
        """Return a copy with ``attribute`` added.

        Adding `Attribute.CLEAR` resets everything set earlier in the builder
        chain: the result has no colors and exactly ``{CLEAR}`` as attributes.
        Any other attribute is inserted into the set, which is created empty
        first when it was absent.

        Args:
            attribute (Attribute): Attribute to add.

        Returns:
            StyleDescriptor: The updated descriptor.
        """
        if attribute is Attribute.CLEAR:
            return StyleDescriptor(attributes=frozenset({Attribute.CLEAR}))
        current: frozenset[Attribute] = self.attributes or frozenset()
        return replace(self, attributes=current | {attribute})

    def with_attributes(self, attributes: Iterable[Attribute]) -> StyleDescriptor:
        """Apply `with_attribute` for each item, in order."""
        result: StyleDescriptor = self
        for attribute in attributes:
            result = result.with_attribute(attribute)
        return result

    # --- Composition ---

    def merge(self, other: StyleDescriptor) -> StyleDescriptor:
        """Compose ``self`` (older) with ``other`` (newer, takes precedence).

        - Colors: ``other``'s color when set, otherwise ``self``'s.
        - Attributes: when only one side carries an attribute set, that set is
          kept; when both do, they are unioned.
        - When ``other`` carries `Attribute.CLEAR`, the result is exactly
          ``other``: colors and attributes accumulated in ``self`` are dropped.

        Merge is not commutative: ``fg(RED).merge(fg(GREEN))`` is green while
        ``fg(GREEN).merge(fg(RED))`` is red.

        Args:
            other (StyleDescriptor): The newer descriptor.

        Returns:
            StyleDescriptor: The composed descriptor.
        """
        if other.attributes is not None and Attribute.CLEAR in other.attributes:
            return StyleDescriptor(other.foreground, other.background, other.attributes)

        foreground: Color | None = (
            other.foreground if other.foreground is not None else self.foreground
        )
        background: Color | None = (
            other.background if other.background is not None else self.background
        )
        if self.attributes is not None and other.attributes is not None:
            attributes: frozenset[Attribute] | None = self.attributes | other.attributes
        elif other.attributes is not None:
            attributes = other.attributes
        else:
            attributes = self.attributes
        return StyleDescriptor(foreground, background, attributes)

    # --- Introspection / rendering ---

    @property
    def visual_attributes(self) -> tuple[Attribute, ...]:
        """Attributes that produce escapes, in rendering order (``CLEAR`` excluded)."""
        if not self.attributes:
            return ()
        return tuple(a for a in VISUAL_ATTRIBUTES if a in self.attributes)

    @property
    def is_plain(self) -> bool:
        """True when rendering with this descriptor adds no escape sequences."""
        return self.foreground is None and self.background is None and not self.visual_attributes

    def apply(self, text: str) -> str:
        """Render ``text`` with this descriptor (see `string_colorization.renderer.render`)."""
        return render(text, self)


EMPTY_STYLE: StyleDescriptor = StyleDescriptor()


def merge(old: StyleDescriptor, new: StyleDescriptor) -> StyleDescriptor:
    """Functional spelling of `StyleDescriptor.merge`."""
    return old.merge(new)
