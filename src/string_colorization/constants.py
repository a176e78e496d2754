# topmark:header:start
#
#   project      : String Colorization
#   file         : constants.py
#   file_relpath : src/string_colorization/constants.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""String Colorization constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    PACKAGE_VERSION: str = get_version("string-colorization")
except PackageNotFoundError:  # running from a source checkout
    PACKAGE_VERSION = "0.0.0"

LOG_LEVEL_ENV_VAR: str = "STRING_COLORIZATION_LOG_LEVEL"

FORCE_COLOR_ENV_VAR: str = "FORCE_COLOR"
NO_COLOR_ENV_VAR: str = "NO_COLOR"

# Top-level TOML tables of a style sheet.
STYLESHEET_SECTION_STYLING: str = "styling"
STYLESHEET_SECTION_STYLES: str = "styles"
