# topmark:header:start
#
#   project      : ColorTag
#   file         : constants.py
#   file_relpath : src/colortag/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ColorTag Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

COLORTAG_VERSION: str = get_version("colortag")

# The only markup delimiter: `#NAME#` opens a tag, the next `#` closes it.
TAG_DELIMITER: Final[str] = "#"

# Longest tag name the renderer will try to resolve. Longer candidates are
# rejected and left in the output verbatim.
MAX_TAG_NAME_LEN: Final[int] = 31

# Environment signals, read once per process:
ENV_NO_COLOR: Final[str] = "NO_COLOR"
ENV_COLOR_OVERRIDE: Final[str] = "COLORTAG_COLOR"
ENV_LOG_LEVEL: Final[str] = "COLORTAG_LOG_LEVEL"
