# topmark:header:start
#
#   project      : String Colorization
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Pytest configuration for the String Colorization test suite.

This file sets up global fixtures, typed wrappers around pytest decorators and
small helpers shared by the test modules.

Notes:
    Escape output depends on the process-wide styling switch and on yachalk's
    color mode. Tests that compare escapes must use the ``styled`` fixture,
    which forces styling on in true-color mode; the switch is always restored
    after each test.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from typing import Any, Final, TypeVar, cast

import pytest
from yachalk import chalk
from yachalk.types import ColorMode as ChalkColorMode

from string_colorization import control
from string_colorization.config import logging
from string_colorization.constants import FORCE_COLOR_ENV_VAR, LOG_LEVEL_ENV_VAR, NO_COLOR_ENV_VAR

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

ANSI_SGR_RE: Final[re.Pattern[str]] = re.compile(r"\x1b\[[0-9;]*m")


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def strip_ansi(text: str) -> str:
    """Remove every SGR escape sequence from ``text``."""
    return ANSI_SGR_RE.sub("", text)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell does not leak log level or color settings into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv(FORCE_COLOR_ENV_VAR, raising=False)
    monkeypatch.delenv(NO_COLOR_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def restore_styling_switch() -> Iterator[None]:
    """Clear any styling override a test may have set.

    Yields:
        None: Control returns to the test.
    """
    yield
    control.unset_override()


@pytest.fixture
def styled() -> Iterator[None]:
    """Force styling on (yachalk true-color mode) for the duration of a test.

    Yields:
        None: Control returns to the test with styling enabled.
    """
    with control.override(True):
        yield


@pytest.fixture
def unstyled() -> Iterator[None]:
    """Force styling off for the duration of a test.

    Yields:
        None: Control returns to the test with styling disabled.
    """
    with control.override(False):
        yield


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure package logging at TRACE level for the test suite.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def chalk_detected_off() -> Iterator[None]:
    """Put yachalk in ``AllOff`` mode, as its import-time detection does off a TTY.

    No styling override is set, so the switch still decides from the
    environment (or from an explicit ``enabled`` flag).

    Yields:
        None: Control returns to the test with yachalk switched off.
    """
    previous: ChalkColorMode = chalk.get_color_mode()
    chalk.set_color_mode(ChalkColorMode.AllOff)
    try:
        yield
    finally:
        chalk.set_color_mode(previous)
