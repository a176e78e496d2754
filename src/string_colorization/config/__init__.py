# topmark:header:start
#
#   project      : String Colorization
#   file         : __init__.py
#   file_relpath : src/string_colorization/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 String Colorization contributors
#
# topmark:header:end

"""Configuration layer: logging setup and TOML style sheets.

Submodules:
    - `string_colorization.config.logging`: TRACE level, colored formatter, env log level.
    - `string_colorization.config.stylesheet`: named styles loaded from TOML.

Nothing is re-exported here so that the logging module can be imported by every
other module without pulling in the style-sheet layer.
"""

from __future__ import annotations
