# topmark:header:start
#
#   project      : NullMeta
#   file         : __init__.py
#   file_relpath : src/nullmeta/bundle/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Analysis bundles: the JSON input format of the command-line interface."""

from __future__ import annotations

from nullmeta.bundle.environment import BundleEnvironment
from nullmeta.bundle.loader import (
    AnalysisBundle,
    ClassEntry,
    load_bundle,
    parse_bundle,
    parse_mode,
)

__all__ = [
    "AnalysisBundle",
    "BundleEnvironment",
    "ClassEntry",
    "load_bundle",
    "parse_bundle",
    "parse_mode",
]
