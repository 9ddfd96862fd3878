# topmark:header:start
#
#   project      : NullMeta
#   file         : keys.py
#   file_relpath : src/nullmeta/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for NullMeta configuration.

Keys defined here are the external configuration API as it appears in
``nullmeta.toml`` and in ``[tool.nullmeta]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by NullMeta configuration."""

    # [issues]
    SECTION_ISSUES: Final[str] = "issues"

    # When false, every meta-issue type is reported regardless of `disabled`.
    KEY_FILTERING: Final[str] = "filtering"
    KEY_DISABLED: Final[str] = "disabled"

    # [reporting]
    SECTION_REPORTING: Final[str] = "reporting"

    KEY_SUPPRESSED_KINDS: Final[str] = "suppressed_kinds"
