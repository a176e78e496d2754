# topmark:header:start
#
#   project      : String Colorization
#   file         : resolver.py
#   file_relpath : src/string_colorization/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Resolve overlapping style rules into disjoint, fully composed segments.

Given the input text, an optional general style and an ordered list of rules,
the resolver:

1. keeps only the rules whose range aliases the input (same `SourceText`,
   strictly overlapping offsets) and translates them to offsets relative to
   the input, clamped to ``[0, len(input)]``;
2. prepends the general style as a rule spanning the whole input, so it has the
   lowest precedence;
3. collects every rule start and end into sorted, distinct breakpoints;
4. folds `StyleDescriptor.merge` over the rules overlapping each pair of
   consecutive breakpoints, in the order the rules were supplied.

Rules that do not alias the input, and rules left empty after clamping, are
dropped without any error. They are only visible in TRACE logs.

Sections:
    * Rule: a range reference paired with a style.
    * PlacedRule: a retained rule in input-relative offsets.
    * Segment: a disjoint input range with its composed style.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from string_colorization.config.logging import get_logger
from string_colorization.descriptor import EMPTY_STYLE, StyleDescriptor
from string_colorization.source import as_text_slice, identity_range_of, overlaps

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from string_colorization.config.logging import ColorizationLogger
    from string_colorization.source import IdentityRange, RangeRef, SourceText, TextSlice


logger: ColorizationLogger = get_logger(__name__)


class Rule(NamedTuple):
    """A range of some text paired with the style to apply there.

    Plain ``(ref, style)`` tuples are accepted wherever a `Rule` is.
    """

    ref: RangeRef
    style: StyleDescriptor


@dataclass(frozen=True)
class PlacedRule:
    """A retained rule, in offsets relative to the input being styled."""

    start: int
    end: int
    style: StyleDescriptor


@dataclass(frozen=True)
class Segment:
    """A disjoint half-open range ``[start, end)`` of the input with its composed style."""

    start: int
    end: int
    style: StyleDescriptor


def place_rules(
    input_range: IdentityRange,
    general: StyleDescriptor | None,
    rules: Iterable[tuple[RangeRef, StyleDescriptor]],
) -> list[PlacedRule]:
    """Keep the rules aliasing ``input_range`` and translate them to relative offsets.

    The general style, when given, becomes the first placed rule and spans the
    whole input.

    Args:
        input_range (IdentityRange): Identity range of the input.
        general (StyleDescriptor | None): Style for text no rule reaches.
        rules (Iterable[tuple[RangeRef, StyleDescriptor]]): Rules in precedence order
            (later wins).

    Returns:
        list[PlacedRule]: Retained rules, general style first, in supplied order.
    """
    length: int = len(input_range)
    candidates: list[tuple[IdentityRange | None, StyleDescriptor]] = []
    if general is not None:
        candidates.append((input_range, general))
    candidates.extend((identity_range_of(ref), style) for ref, style in rules)

    placed: list[PlacedRule] = []
    for index, (rule_range, style) in enumerate(candidates):
        if rule_range is None or not input_range.overlaps(rule_range):
            logger.trace("Dropping rule #%d: range does not alias the input", index)
            continue
        start: int = min(max(rule_range.start - input_range.start, 0), length)
        end: int = min(max(rule_range.end - input_range.start, 0), length)
        if end <= start:
            logger.trace("Dropping rule #%d: empty after clamping", index)
            continue
        placed.append(PlacedRule(start, end, style))
    return placed


def collect_breakpoints(placed: Sequence[PlacedRule]) -> list[int]:
    """Return every rule edge, sorted ascending and without duplicates."""
    return sorted({edge for rule in placed for edge in (rule.start, rule.end)})


def compose_segments(placed: Sequence[PlacedRule]) -> list[Segment]:
    """Partition the placed rules into disjoint segments with composed styles.

    One segment is produced per pair of consecutive breakpoints. Its style is
    the left fold of `StyleDescriptor.merge` over every placed rule that
    overlaps it, seeded with an empty descriptor. A segment inside a gap
    between rules gets the empty descriptor and renders as plain text.

    Args:
        placed (Sequence[PlacedRule]): Retained rules in precedence order.

    Returns:
        list[Segment]: Segments in ascending offset order.
    """
    bounds: list[int] = collect_breakpoints(placed)
    segments: list[Segment] = []
    for start, end in zip(bounds, bounds[1:]):
        style: StyleDescriptor = EMPTY_STYLE
        for rule in placed:
            if overlaps(start, end, rule.start, rule.end):
                style = style.merge(rule.style)
        segments.append(Segment(start, end, style))
    return segments


def resolve_segments(
    text: str | SourceText | TextSlice,
    general: StyleDescriptor | None,
    rules: Iterable[tuple[RangeRef, StyleDescriptor]],
) -> list[Segment]:
    """Compute the disjoint styled segments of ``text``.

    This is a pure function: it neither renders nor consults the styling switch.

    Args:
        text (str | SourceText | TextSlice): The input. A plain ``str`` has no
            provenance, so only the general style can apply to it.
        general (StyleDescriptor | None): Style for text no rule reaches.
        rules (Iterable[tuple[RangeRef, StyleDescriptor]]): Rules in precedence order.

    Returns:
        list[Segment]: Segments in ascending offset order, offsets relative to ``text``.
    """
    target: TextSlice = as_text_slice(text)
    placed: list[PlacedRule] = place_rules(target.identity_range, general, rules)
    segments: list[Segment] = compose_segments(placed)
    logger.trace(
        "Resolved %d rule(s) into %d segment(s) over %d character(s)",
        len(placed),
        len(segments),
        len(target),
    )
    return segments
