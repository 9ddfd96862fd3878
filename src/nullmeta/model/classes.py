# topmark:header:start
#
#   project      : NullMeta
#   file         : classes.py
#   file_relpath : src/nullmeta/model/classes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Class names, per-procedure summaries and per-class summary aggregation.

A class owns the summaries of its own procedures plus those of every anonymous
unit nested in it (``Outer$1``, ``Outer$1$2``, ...). Named nested classes
(``Outer$Inner``) are classes in their own right and are aggregated separately.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nullmeta.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from nullmeta.config.logging import NullmetaLogger
    from nullmeta.model.finding import Finding, Location

logger: NullmetaLogger = get_logger(__name__)

NESTED_SEPARATOR = "$"


@dataclass(frozen=True)
class ClassName:
    """Fully-qualified class name split into package and simple class name."""

    package: str | None
    classname: str

    @classmethod
    def parse(cls, fqn: str) -> ClassName:
        """Split ``"com.example.Foo"`` into package ``"com.example"`` and ``"Foo"``.

        Raises:
            ValueError: If ``fqn`` is empty or ends with a dot.
        """
        fqn = fqn.strip()
        package, _, classname = fqn.rpartition(".")
        if not classname:
            raise ValueError(f"Not a class name: {fqn!r}")
        return cls(package=package or None, classname=classname)

    @property
    def is_anonymous(self) -> bool:
        """True for anonymous units such as ``Foo$1`` or ``Foo$Bar$2``."""
        return _last_segment(self.classname).isdigit()

    def outer(self) -> ClassName | None:
        """Return the directly enclosing class, or None for a top-level class."""
        head, sep, _ = self.classname.rpartition(NESTED_SEPARATOR)
        if not sep or not head:
            return None
        return ClassName(package=self.package, classname=head)

    def __str__(self) -> str:
        if self.package:
            return f"{self.package}.{self.classname}"
        return self.classname


def _last_segment(classname: str) -> str:
    return classname.rpartition(NESTED_SEPARATOR)[2]


@dataclass(frozen=True)
class ClassStructInfo:
    """Structural metadata of a class, as resolved from the class table.

    ``location`` is optional: some producers do not record where a class is
    declared.
    """

    name: ClassName
    location: Location | None = None


@dataclass(frozen=True)
class NullsafePayload:
    """Nullability part of a procedure summary."""

    issues: tuple[Finding, ...] = ()


@dataclass(frozen=True)
class Summary:
    """Analysis summary of one procedure."""

    procedure: str
    nullsafe: NullsafePayload | None = None

    def findings(self) -> tuple[Finding, ...]:
        """Project this summary to its findings (none without a nullsafe payload)."""
        if self.nullsafe is None:
            return ()
        return self.nullsafe.issues


@dataclass
class ClassInfo:
    """Summaries of a class together with the anonymous units nested in it."""

    name: ClassName
    source_file: str
    summaries: list[Summary] = field(default_factory=lambda: [])
    nested_anonymous: dict[ClassName, ClassInfo] = field(default_factory=lambda: {})

    def all_summaries(self) -> Iterator[Summary]:
        """Yield own summaries, then those of nested anonymous units (depth first)."""
        yield from self.summaries
        for nested in self.nested_anonymous.values():
            yield from nested.all_summaries()

    def all_findings(self) -> list[Finding]:
        """Flatten every finding belonging to this class."""
        return [finding for summary in self.all_summaries() for finding in summary.findings()]


def aggregate_summaries(
    entries: Iterable[tuple[ClassName, str, Summary]],
) -> dict[ClassName, ClassInfo]:
    """Group ``(class, source file, summary)`` entries into top-level class infos.

    Anonymous units are attached under their nearest named owner, keeping the
    nesting chain (``Foo$1$2`` lives under ``Foo$1`` which lives under ``Foo``).

    Args:
        entries (Iterable[tuple[ClassName, str, Summary]]): Summaries keyed by the
            class that declares the procedure, with that class's source file.

    Returns:
        dict[ClassName, ClassInfo]: One entry per named class, in first-seen order.
    """
    result: dict[ClassName, ClassInfo] = {}
    for class_name, source_file, summary in entries:
        info = _class_info_for(result, class_name, source_file)
        info.summaries.append(summary)
    logger.debug("Aggregated summaries into %d class(es)", len(result))
    return result


def _class_info_for(
    roots: dict[ClassName, ClassInfo],
    class_name: ClassName,
    source_file: str,
) -> ClassInfo:
    if not class_name.is_anonymous:
        if class_name not in roots:
            roots[class_name] = ClassInfo(name=class_name, source_file=source_file)
        return roots[class_name]

    outer = class_name.outer()
    if outer is None:
        # An anonymous unit without an enclosing class: treat it as a class of its own
        if class_name not in roots:
            roots[class_name] = ClassInfo(name=class_name, source_file=source_file)
        return roots[class_name]

    parent = _class_info_for(roots, outer, source_file)
    if class_name not in parent.nested_anonymous:
        logger.trace("Attaching anonymous unit %s to %s", class_name, parent.name)
        parent.nested_anonymous[class_name] = ClassInfo(name=class_name, source_file=source_file)
    return parent.nested_anonymous[class_name]
