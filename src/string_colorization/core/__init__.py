# topmark:header:start
#
#   project      : String Colorization
#   file         : __init__.py
#   file_relpath : src/string_colorization/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""UI-agnostic helpers shared across String Colorization."""

from __future__ import annotations
