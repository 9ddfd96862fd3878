# topmark:header:start
#
#   project      : NullMeta
#   file         : constants.py
#   file_relpath : src/nullmeta/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NullMeta Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

NULLMETA_VERSION: str = get_version("nullmeta")

# Project-local configuration file, looked up in the working directory:
NULLMETA_TOML_NAME: str = "nullmeta.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "tool.nullmeta"

# Environment variable that forces the internal log level (e.g. "DEBUG", "TRACE"):
NULLMETA_LOG_LEVEL_ENV: str = "NULLMETA_LOG_LEVEL"

# Fallback position of a class whose declaration location is unknown:
DEFAULT_CLASS_LINE: int = 1
DEFAULT_CLASS_COL: int = 0
