# topmark:header:start
#
#   project      : String Colorization
#   file         : errors.py
#   file_relpath : src/string_colorization/errors.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Exceptions for String Colorization.

The colorization engine itself never raises: foreign or degenerate rules are
dropped silently. These exceptions are raised by the configuration layer when
a style sheet cannot be turned into style descriptors.
"""

from __future__ import annotations


class StringColorizationError(Exception):
    """Base class for all String Colorization errors."""


class StyleConfigError(StringColorizationError):
    """A style sheet contains a value that cannot be interpreted.

    Attributes:
        key (str | None): Dotted path of the offending TOML key, if known.
    """

    def __init__(self, message: str, *, key: str | None = None) -> None:
        self.key = key
        super().__init__(f"{key}: {message}" if key else message)
