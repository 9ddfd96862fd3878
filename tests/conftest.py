# topmark:header:start
#
#   project      : NullMeta
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the NullMeta test suite.

Provides typed wrappers around pytest decorators, forces TRACE logging for the
run, and exposes small factories for findings, class infos and collaborators
used across the analysis tests.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from nullmeta.config import logging
from nullmeta.config.model import Config
from nullmeta.constants import NULLMETA_LOG_LEVEL_ENV
from nullmeta.model.classes import (
    ClassInfo,
    ClassName,
    ClassStructInfo,
    NullsafePayload,
    Summary,
)
from nullmeta.model.finding import Finding, FindingKind, Location
from nullmeta.model.mode import DEFAULT

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from nullmeta.analysis.collaborators import TraceElement
    from nullmeta.model.meta_issue import MetaIssueCategory, MetaIssueType, Severity
    from nullmeta.model.mode import EnforcementMode

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_nullmeta_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure NullMeta's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove the environment variable.
    """
    monkeypatch.delenv(NULLMETA_LOG_LEVEL_ENV, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


# --- Factories -------------------------------------------------------------------------

SOURCE_FILE = "src/com/example/Foo.java"


def make_finding(
    kind: FindingKind = FindingKind.NULLABLE_DEREFERENCE,
    *,
    line: int = 10,
    origin: str | None = None,
    origin_is_nullsafe: bool = False,
    nullsafe_only: bool = False,
) -> Finding:
    """Return a finding located in `SOURCE_FILE`."""
    return Finding(
        kind=kind,
        location=Location(file=SOURCE_FILE, line=line, col=4),
        description=f"{kind.label} at line {line}",
        origin=origin,
        origin_is_nullsafe=origin_is_nullsafe,
        nullsafe_only=nullsafe_only,
    )


def make_class_info(
    fqn: str = "com.example.Foo",
    findings: Sequence[Finding] = (),
    *,
    source_file: str = SOURCE_FILE,
) -> ClassInfo:
    """Return a `ClassInfo` with a single summary carrying ``findings``."""
    name = ClassName.parse(fqn)
    summary = Summary(
        procedure=f"void {name.classname}.run()",
        nullsafe=NullsafePayload(tuple(findings)),
    )
    return ClassInfo(name=name, source_file=source_file, summaries=[summary])


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and keyword overrides."""
    return Config(**overrides)


@dataclass
class FakeClassTable:
    """`ClassTable` answering from a dict; unknown classes resolve to None."""

    structs: dict[ClassName, ClassStructInfo] = field(default_factory=lambda: {})

    def lookup_class(self, class_name: ClassName) -> ClassStructInfo | None:
        return self.structs.get(class_name)


@dataclass
class FakeModeResolver:
    """`ModeResolver` answering from a dict; unknown classes are Default."""

    modes: dict[ClassName, EnforcementMode] = field(default_factory=lambda: {})

    def resolve_current_mode(self, class_name: ClassName) -> EnforcementMode:
        return self.modes.get(class_name, DEFAULT)


@dataclass
class RecordingSink:
    """`MetaIssueSink` that records the keyword arguments of every call."""

    calls: list[dict[str, Any]] = field(default_factory=lambda: [])

    def log_meta_issue(
        self,
        *,
        class_name: ClassName,
        location: Location,
        severity: Severity,
        trace: Sequence[TraceElement],
        extra: Mapping[str, object],
        issue_type: MetaIssueType,
        category: MetaIssueCategory,
        message: str,
    ) -> None:
        self.calls.append(
            {
                "class_name": class_name,
                "location": location,
                "severity": severity,
                "trace": list(trace),
                "extra": dict(extra),
                "issue_type": issue_type,
                "category": category,
                "message": message,
            }
        )


def sample_bundle() -> dict[str, Any]:
    """Return a bundle with one class per meta-issue category plus an unknown class.

    =========================  ===================  ========================
    class                      declared mode        expected category
    =========================  ===================  ========================
    ``com.example.Clean``      default              can_become_strict
    ``com.example.Dirty``      default              needs_improvement
    ``com.example.Regressed``  strict               has_regressions
    ``com.example.Good``       local, trusts Alpha  already_compliant
    ``com.example.Ghost``      (not in classes)     skipped
    =========================  ===================  ========================
    """
    return {
        "classes": [
            {
                "name": "com.example.Clean",
                "source_file": "src/com/example/Clean.java",
                "location": {"line": 5, "col": 0},
                "mode": "default",
            },
            {
                "name": "com.example.Dirty",
                "source_file": "src/com/example/Dirty.java",
                "location": {"line": 3},
                "mode": "default",
            },
            {
                "name": "com.example.Regressed",
                "source_file": "src/com/example/Regressed.java",
                "location": {"line": 9, "col": 1},
                "mode": "strict",
            },
            {
                "name": "com.example.Good",
                "source_file": "src/com/example/Good.java",
                "mode": {"local": {"trust_only": ["com.lib.Alpha"]}},
            },
        ],
        "summaries": [
            {"class": "com.example.Clean", "procedure": "void Clean.run()", "issues": []},
            {"class": "com.example.Clean$1", "procedure": "void Clean$1.run()", "issues": None},
            {
                "class": "com.example.Dirty",
                "procedure": "void Dirty.run()",
                "issues": [
                    {"kind": "nullable_dereference", "line": 12, "col": 4, "origin": None},
                    {"kind": "bad_assignment", "line": 14, "col": 8},
                    {"kind": "condition_redundant", "line": 15},
                ],
            },
            {
                "class": "com.example.Regressed",
                "procedure": "void Regressed.run()",
                "issues": [
                    {
                        "kind": "nullable_dereference",
                        "line": 20,
                        "col": 2,
                        "description": "`x` could be null",
                        "origin": "com.lib.Alpha",
                        "origin_is_nullsafe": True,
                    }
                ],
            },
            {
                "class": "com.example.Good",
                "procedure": "void Good.run()",
                "issues": [{"kind": "field_not_initialized", "line": 4, "origin": "com.lib.Alpha"}],
            },
            {"class": "com.example.Ghost", "procedure": "void Ghost.run()"},
        ],
    }
