# topmark:header:start
#
#   project      : NullMeta
#   file         : errors.py
#   file_relpath : src/nullmeta/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exception hierarchy for NullMeta.

Two families are kept strictly apart:

* `NullmetaError` and its subclasses describe user-facing conditions (bad
  configuration, malformed input). The CLI translates them into exit codes.
* `NullmetaInternalError` signals a broken internal invariant. It does **not**
  derive from `NullmetaError`, is never caught by NullMeta itself, and aborts
  the run.
"""

from __future__ import annotations


class NullmetaError(Exception):
    """Base class for user-facing NullMeta errors."""


class NullmetaConfigError(NullmetaError):
    """Configuration is missing, unreadable, or contains unknown values."""


class NullmetaBundleError(NullmetaError):
    """An analysis bundle is unreadable or does not follow the expected shape."""


class NullmetaInternalError(RuntimeError):
    """A logic defect: an internal contract between components was broken.

    Raised, for example, when a promotion recommendation is requested for a mode
    outside the sanctioned promotion targets.
    """
