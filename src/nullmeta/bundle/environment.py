# topmark:header:start
#
#   project      : NullMeta
#   file         : environment.py
#   file_relpath : src/nullmeta/bundle/environment.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Class table and mode resolver backed by an `AnalysisBundle`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nullmeta.config.logging import get_logger
from nullmeta.model.mode import EnforcementMode

if TYPE_CHECKING:
    from nullmeta.bundle.loader import AnalysisBundle
    from nullmeta.config.logging import NullmetaLogger
    from nullmeta.model.classes import ClassName, ClassStructInfo

logger: NullmetaLogger = get_logger(__name__)


class BundleEnvironment:
    """Answers class lookups and mode queries from the ``classes`` of a bundle.

    Implements both `ClassTable` and `ModeResolver`.
    """

    def __init__(self, bundle: AnalysisBundle) -> None:
        self._bundle = bundle

    def lookup_class(self, class_name: ClassName) -> ClassStructInfo | None:
        entry = self._bundle.classes.get(class_name)
        return entry.struct if entry is not None else None

    def resolve_current_mode(self, class_name: ClassName) -> EnforcementMode:
        """Return the declared mode of ``class_name`` (Default when unknown)."""
        entry = self._bundle.classes.get(class_name)
        if entry is None:
            logger.trace("%s: no declared mode, assuming Default", class_name)
            return EnforcementMode.default()
        return entry.mode
