# topmark:header:start
#
#   project      : NullMeta
#   file         : mode.py
#   file_relpath : src/nullmeta/model/mode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enforcement modes and their strictness order.

A class declares how strictly its nullability is checked:

* ``Default``: the class has not opted in.
* ``Local(trust)``: the class is checked, but values coming from the identifiers
  covered by ``trust`` are taken at face value. ``Trust.all()`` covers every
  dependency; ``Trust.only_these({...})`` covers only the listed ones.
* ``Strict``: nothing is trusted.

`is_stricter_than` implements the strict partial order between modes. Over the
four canonical modes of `PROMOTION_CHAIN` it is a total order:
``Strict > Local(only {}) > Local(all) > Default``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable


class ModeKind(Enum):
    """Tag of an `EnforcementMode`, ranked from weakest to strictest."""

    DEFAULT = "default"
    LOCAL = "local"
    STRICT = "strict"

    @property
    def rank(self) -> int:
        """Position in the Default < Local < Strict chain."""
        return _KIND_RANK[self]


_KIND_RANK: Final[dict[ModeKind, int]] = {
    ModeKind.DEFAULT: 0,
    ModeKind.LOCAL: 1,
    ModeKind.STRICT: 2,
}


@dataclass(frozen=True)
class Trust:
    """Trust payload of a Local mode.

    ``only is None`` means *trust all*; otherwise ``only`` holds the identifiers
    that are trusted. Equality compares set membership.
    """

    only: frozenset[str] | None = None

    @classmethod
    def all(cls) -> Trust:
        """Trust every dependency."""
        return cls(only=None)

    @classmethod
    def none(cls) -> Trust:
        """Trust no dependency (an empty trust list)."""
        return cls(only=frozenset())

    @classmethod
    def only_these(cls, identifiers: Iterable[str]) -> Trust:
        """Trust exactly ``identifiers``."""
        return cls(only=frozenset(identifiers))

    @property
    def is_all(self) -> bool:
        """True for ``Trust.all()``."""
        return self.only is None

    def trusts(self, identifier: str) -> bool:
        """Return True if values originating from ``identifier`` are trusted."""
        return self.only is None or identifier in self.only

    def is_stricter_than(self, other: Trust) -> bool:
        """Return True if this trust set trusts strictly fewer identifiers than ``other``."""
        if self.only is None:
            return False
        if other.only is None:
            return True
        return self.only < other.only

    def __str__(self) -> str:
        if self.only is None:
            return "all"
        return "{" + ", ".join(sorted(self.only)) + "}"


@dataclass(frozen=True)
class EnforcementMode:
    """A class-level nullability enforcement mode.

    Build instances through `default`, `local` and `strict` (or the module
    constants) so that ``trust`` is present exactly for Local modes.
    """

    kind: ModeKind
    trust: Trust | None = None

    def __post_init__(self) -> None:
        if (self.kind is ModeKind.LOCAL) != (self.trust is not None):
            raise ValueError(f"Mode {self.kind.value!r} cannot carry trust={self.trust!r}")

    @classmethod
    def default(cls) -> EnforcementMode:
        return cls(ModeKind.DEFAULT)

    @classmethod
    def local(cls, trust: Trust | None = None) -> EnforcementMode:
        return cls(ModeKind.LOCAL, trust if trust is not None else Trust.all())

    @classmethod
    def strict(cls) -> EnforcementMode:
        return cls(ModeKind.STRICT)

    @property
    def is_default(self) -> bool:
        return self.kind is ModeKind.DEFAULT

    @property
    def key(self) -> str:
        """Stable machine key, as written to structured issue metadata."""
        if self.kind is ModeKind.DEFAULT:
            return "Default"
        if self.kind is ModeKind.STRICT:
            return "Strict"
        assert self.trust is not None
        if self.trust.is_all:
            return "LocalTrustAll"
        if not self.trust.only:
            return "LocalTrustNone"
        return "LocalTrustSome"

    def is_stricter_than(self, weaker: EnforcementMode) -> bool:
        """Return True if this mode is strictly stricter than ``weaker``."""
        return is_stricter_than(self, weaker)

    def __str__(self) -> str:
        if self.kind is ModeKind.LOCAL:
            return f"Local(trust={self.trust})"
        return self.kind.value.capitalize()


def is_stricter_than(stricter: EnforcementMode, weaker: EnforcementMode) -> bool:
    """Return True if ``stricter`` is strictly stricter than ``weaker``.

    Modes of different kinds compare by kind rank. Two Local modes compare by
    their trust sets: trusting fewer identifiers is stricter, and unrelated
    trust sets are incomparable (both directions return False).

    Args:
        stricter (EnforcementMode): Candidate stricter mode.
        weaker (EnforcementMode): Candidate weaker mode.

    Returns:
        bool: True when ``stricter`` is strictly above ``weaker``.
    """
    if stricter.kind is not weaker.kind:
        return stricter.kind.rank > weaker.kind.rank
    if stricter.kind is ModeKind.LOCAL:
        assert stricter.trust is not None and weaker.trust is not None
        return stricter.trust.is_stricter_than(weaker.trust)
    return False


DEFAULT: Final[EnforcementMode] = EnforcementMode.default()
LOCAL_TRUST_ALL: Final[EnforcementMode] = EnforcementMode.local(Trust.all())
LOCAL_TRUST_NONE: Final[EnforcementMode] = EnforcementMode.local(Trust.none())
STRICT: Final[EnforcementMode] = EnforcementMode.strict()

# Probed in this exact order: the first clean mode is the strictest clean one.
PROMOTION_CHAIN: Final[tuple[EnforcementMode, ...]] = (
    STRICT,
    LOCAL_TRUST_NONE,
    LOCAL_TRUST_ALL,
    DEFAULT,
)
