# topmark:header:start
#
#   project      : String Colorization
#   file         : control.py
#   file_relpath : src/string_colorization/control.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Process-wide styling switch.

`colorize` reads this switch once per call (unless the caller injects an
explicit ``enabled`` flag) and never writes it. This module provides:

- `ColorMode`: user intent (``auto`` / ``always`` / ``never``).
- `resolve_color_mode`: maps intent, environment and TTY status to a bool.
- `set_override` / `unset_override` / `override`: an explicit switch that wins
  over everything else.
- `should_colorize`: the predicate consumed by the engine.
- `rendering_mode`: keeps yachalk's output mode in line with that predicate
  while the engine renders.

Forcing styling on also puts yachalk in true-color mode so rendered segments
actually carry escapes; forcing it off puts yachalk in ``AllOff`` mode.
`unset_override` restores the yachalk mode that was active before the first
override.
"""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from enum import Enum
from threading import RLock
from typing import TYPE_CHECKING

from yachalk import chalk
from yachalk.types import ColorMode as ChalkColorMode

from string_colorization.config.logging import get_logger
from string_colorization.constants import FORCE_COLOR_ENV_VAR, NO_COLOR_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Iterator

    from string_colorization.config.logging import ColorizationLogger


logger: ColorizationLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for styled terminal output.

    Attributes:
        AUTO: Enable styling only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable styling regardless of TTY status.
        NEVER: Disable styling entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether styled output should be enabled.

    Decision precedence:
        1. **Explicit intent**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: If none of the above decide, return `stdout.isatty()`.

    Args:
        color_mode_override (ColorMode | None): Caller intent; `None` or `AUTO`
            means "decide from the environment".
        stdout_isatty (bool | None): Optional override for TTY detection. When `None`,
            the function calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        bool: True if ANSI styling should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv(FORCE_COLOR_ENV_VAR)
    if force_color and force_color != "0":
        return True
    if os.getenv(NO_COLOR_ENV_VAR) is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError, AttributeError):
            stdout_isatty = False
    return bool(stdout_isatty)


class _StylingSwitch:
    """Holder for the override state. Writes are guarded by a lock."""

    _lock = RLock()
    override: bool | None = None
    # yachalk mode before the first override, restored by `unset_override`.
    saved_chalk_mode: ChalkColorMode | None = None


def set_override(enabled: bool) -> None:
    """Force styling on or off for the whole process.

    Args:
        enabled (bool): True to always style, False to never style.
    """
    with _StylingSwitch._lock:
        if _StylingSwitch.saved_chalk_mode is None:
            _StylingSwitch.saved_chalk_mode = chalk.get_color_mode()
        _StylingSwitch.override = enabled
        chalk.set_color_mode(ChalkColorMode.FullTrueColor if enabled else ChalkColorMode.AllOff)
    logger.debug("Styling override set to %s", enabled)


def unset_override() -> None:
    """Drop the override and return to environment/TTY based detection."""
    with _StylingSwitch._lock:
        _StylingSwitch.override = None
        if _StylingSwitch.saved_chalk_mode is not None:
            chalk.set_color_mode(_StylingSwitch.saved_chalk_mode)
            _StylingSwitch.saved_chalk_mode = None
    logger.debug("Styling override cleared")


def get_override() -> bool | None:
    """Return the current override, or None when styling is auto-detected."""
    return _StylingSwitch.override


@contextmanager
def override(enabled: bool) -> Iterator[None]:
    """Temporarily force styling on or off, restoring the previous state on exit.

    Args:
        enabled (bool): True to always style, False to never style.

    Yields:
        None: Control returns to the caller with the override active.
    """
    with _StylingSwitch._lock:
        previous: bool | None = _StylingSwitch.override
        previous_mode: ChalkColorMode = chalk.get_color_mode()
        set_override(enabled)
    try:
        yield
    finally:
        with _StylingSwitch._lock:
            if previous is None:
                unset_override()
            else:
                _StylingSwitch.override = previous
                chalk.set_color_mode(previous_mode)


@contextmanager
def rendering_mode(enabled: bool) -> Iterator[None]:
    """Hold yachalk in an output mode that agrees with ``enabled``.

    yachalk picks its color mode once, at import, from its own terminal
    detection. `colorize` decides separately (override, environment, TTY or an
    explicit flag), so it renders inside this context to make yachalk follow
    that decision. When enabled, a detected ``AllOff`` mode is raised to
    true color and any richer detected mode is kept. When disabled, yachalk is
    switched off. The previous mode is restored on exit.

    Args:
        enabled (bool): Whether rendered text must carry escapes.

    Yields:
        None: Control returns to the caller with the matching yachalk mode.
    """
    with _StylingSwitch._lock:
        previous: ChalkColorMode = chalk.get_color_mode()
        if not enabled:
            chalk.set_color_mode(ChalkColorMode.AllOff)
        elif previous == ChalkColorMode.AllOff:
            chalk.set_color_mode(ChalkColorMode.FullTrueColor)
        try:
            yield
        finally:
            chalk.set_color_mode(previous)


def should_colorize() -> bool:
    """Return True if styled output is currently enabled.

    The override wins when set; otherwise `resolve_color_mode` decides from
    the environment and stdout.
    """
    current: bool | None = _StylingSwitch.override
    if current is not None:
        return current
    return resolve_color_mode(color_mode_override=None)
