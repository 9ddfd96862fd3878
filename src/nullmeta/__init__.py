# topmark:header:start
#
#   project      : NullMeta
#   file         : __init__.py
#   file_relpath : src/nullmeta/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NullMeta package.

NullMeta is the class-level aggregation step of a nullability checker. It rolls
per-method nullability findings up into one *meta-issue* per class, classifies
the class, and recommends the strictest enforcement mode the class could
declare without introducing violations. It exposes both a CLI and a small typed
API for automation.
"""

from __future__ import annotations
