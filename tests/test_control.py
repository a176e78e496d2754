# topmark:header:start
#
#   project      : String Colorization
#   file         : test_control.py
#   file_relpath : tests/test_control.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Process-wide styling switch and color mode resolution."""

from __future__ import annotations

import pytest
from yachalk import chalk
from yachalk.types import ColorMode as ChalkColorMode

from string_colorization import control
from string_colorization.constants import FORCE_COLOR_ENV_VAR, NO_COLOR_ENV_VAR
from string_colorization.control import ColorMode, resolve_color_mode
from tests.conftest import parametrize


@parametrize(
    "mode, isatty, expected",
    [
        (ColorMode.ALWAYS, False, True),
        (ColorMode.NEVER, True, False),
        (ColorMode.AUTO, True, True),
        (ColorMode.AUTO, False, False),
        (None, True, True),
    ],
)
def test_resolve_color_mode_explicit_and_tty(
    mode: ColorMode | None, isatty: bool, expected: bool
) -> None:
    """Explicit intent wins; AUTO falls back to the TTY check."""
    assert resolve_color_mode(color_mode_override=mode, stdout_isatty=isatty) is expected


def test_force_color_beats_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """FORCE_COLOR is checked before NO_COLOR."""
    monkeypatch.setenv(FORCE_COLOR_ENV_VAR, "1")
    monkeypatch.setenv(NO_COLOR_ENV_VAR, "1")
    assert resolve_color_mode(color_mode_override=None, stdout_isatty=False) is True


def test_force_color_zero_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    """FORCE_COLOR=0 does not force styling."""
    monkeypatch.setenv(FORCE_COLOR_ENV_VAR, "0")
    assert resolve_color_mode(color_mode_override=None, stdout_isatty=False) is False


def test_no_color_disables_even_on_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    """NO_COLOR set to any value disables styling."""
    monkeypatch.setenv(NO_COLOR_ENV_VAR, "")
    assert resolve_color_mode(color_mode_override=None, stdout_isatty=True) is False


def test_explicit_never_beats_force_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """Explicit intent outranks the environment."""
    monkeypatch.setenv(FORCE_COLOR_ENV_VAR, "1")
    assert resolve_color_mode(color_mode_override=ColorMode.NEVER, stdout_isatty=True) is False


def test_set_and_unset_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """The override wins over the environment until it is cleared."""
    monkeypatch.setenv(NO_COLOR_ENV_VAR, "1")
    before = chalk.get_color_mode()

    control.set_override(True)
    assert control.get_override() is True
    assert control.should_colorize() is True
    assert chalk.get_color_mode() == ChalkColorMode.FullTrueColor

    control.set_override(False)
    assert control.should_colorize() is False
    assert chalk.get_color_mode() == ChalkColorMode.AllOff

    control.unset_override()
    assert control.get_override() is None
    assert control.should_colorize() is False
    assert chalk.get_color_mode() == before


def test_override_context_manager_restores_previous_state() -> None:
    """Nested overrides unwind to the enclosing state."""
    before = chalk.get_color_mode()
    with control.override(True):
        assert control.should_colorize() is True
        with control.override(False):
            assert control.should_colorize() is False
            assert chalk.get_color_mode() == ChalkColorMode.AllOff
        assert control.get_override() is True
        assert chalk.get_color_mode() == ChalkColorMode.FullTrueColor
    assert control.get_override() is None
    assert chalk.get_color_mode() == before


def test_override_restores_on_exception() -> None:
    """The previous state comes back even when the body raises."""
    with pytest.raises(RuntimeError), control.override(True):
        raise RuntimeError("boom")
    assert control.get_override() is None


@pytest.mark.usefixtures("chalk_detected_off")
def test_rendering_mode_raises_yachalk_out_of_all_off() -> None:
    """Enabled rendering lifts an ``AllOff`` detection to true color, then restores it."""
    with control.rendering_mode(True):
        assert chalk.get_color_mode() == ChalkColorMode.FullTrueColor
        assert chalk.red("x") == "\x1b[31mx\x1b[39m"
    assert chalk.get_color_mode() == ChalkColorMode.AllOff


def test_rendering_mode_keeps_detected_mode_when_enabled() -> None:
    """A mode that already emits escapes is left as detected."""
    with control.override(True), control.rendering_mode(True):
        assert chalk.get_color_mode() == ChalkColorMode.FullTrueColor


def test_rendering_mode_disabled_switches_yachalk_off() -> None:
    """Disabled rendering silences yachalk for the duration of the block only."""
    with control.override(True):
        with control.rendering_mode(False):
            assert chalk.red("x") == "x"
        assert chalk.get_color_mode() == ChalkColorMode.FullTrueColor


@pytest.mark.usefixtures("chalk_detected_off")
def test_rendering_mode_restores_on_exception() -> None:
    """The detected mode comes back even when the body raises."""
    with pytest.raises(RuntimeError), control.rendering_mode(True):
        raise RuntimeError("boom")
    assert chalk.get_color_mode() == ChalkColorMode.AllOff
