# topmark:header:start
#
#   project      : NullMeta
#   file         : __init__.py
#   file_relpath : src/nullmeta/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for NullMeta.

`Config` is immutable. Build it with `Config.from_defaults()`,
`Config.from_toml_dict()` or `load_config()` and pass it explicitly to the
components that need it.
"""

from __future__ import annotations

from nullmeta.config.io import load_config, load_toml_dict
from nullmeta.config.model import Config

__all__ = [
    "Config",
    "load_config",
    "load_toml_dict",
]
