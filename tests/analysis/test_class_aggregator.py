# topmark:header:start
#
#   project      : NullMeta
#   file         : test_class_aggregator.py
#   file_relpath : tests/analysis/test_class_aggregator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `ClassAggregator`: per-class driving, skips and sink calls."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pytest

from nullmeta.analysis.aggregator import ClassAggregator
from nullmeta.analysis.collaborators import TraceElement
from nullmeta.analysis.reportability import TrustBasedReportability
from nullmeta.model.classes import (
    ClassInfo,
    ClassName,
    ClassStructInfo,
    NullsafePayload,
    Summary,
)
from nullmeta.model.finding import FindingKind, Location
from nullmeta.model.meta_issue import MetaIssueCategory, MetaIssueInfo, MetaIssueType, Severity
from nullmeta.model.mode import LOCAL_TRUST_NONE, STRICT
from tests.conftest import (
    SOURCE_FILE,
    FakeClassTable,
    FakeModeResolver,
    RecordingSink,
    make_class_info,
    make_config,
    make_finding,
)

if TYPE_CHECKING:
    from nullmeta.model.mode import EnforcementMode

FOO = ClassName.parse("com.example.Foo")
DECLARED_AT = Location(file=SOURCE_FILE, line=7, col=2)


def _aggregator(
    *,
    structs: dict[ClassName, ClassStructInfo] | None = None,
    modes: dict[ClassName, EnforcementMode] | None = None,
    **config_overrides: Any,
) -> tuple[ClassAggregator, RecordingSink]:
    sink = RecordingSink()
    if structs is None:
        structs = {FOO: ClassStructInfo(FOO, DECLARED_AT)}
    table = FakeClassTable(structs)
    resolver = FakeModeResolver(modes or {})
    aggregator = ClassAggregator(
        make_config(**config_overrides),
        class_table=table,
        mode_resolver=resolver,
        sink=sink,
    )
    return aggregator, sink


def test_reports_exactly_one_meta_issue_per_class() -> None:
    aggregator, sink = _aggregator()

    meta = aggregator.analyze_class(FOO, make_class_info())

    assert meta is not None
    assert len(sink.calls) == 1
    call = sink.calls[0]
    assert call["class_name"] == FOO
    assert call["location"] == DECLARED_AT
    assert call["severity"] is Severity.ADVICE
    assert call["issue_type"] is MetaIssueType.CAN_BE_NULLSAFE
    assert call["category"] is MetaIssueCategory.CAN_BECOME_STRICT
    assert call["message"] == meta.message
    assert call["trace"] == [TraceElement(level=0, location=DECLARED_AT, description=meta.message)]
    assert call["extra"]["class_name"] == "Foo"
    assert call["extra"]["package"] == "com.example"
    info = call["extra"]["meta_issue_info"]
    assert isinstance(info, MetaIssueInfo)
    assert info.promotable_to == LOCAL_TRUST_NONE


def test_missing_class_definition_is_skipped(caplog: pytest.LogCaptureFixture) -> None:
    aggregator, sink = _aggregator(structs={})

    with caplog.at_level(logging.DEBUG, logger="nullmeta.analysis.aggregator"):
        meta = aggregator.analyze_class(FOO, make_class_info())

    assert meta is None
    assert sink.calls == []
    assert "could not load class info in environment: skipping class analysis" in caplog.text


def test_missing_declaration_location_falls_back_to_first_line() -> None:
    aggregator, sink = _aggregator(structs={FOO: ClassStructInfo(FOO, None)})

    aggregator.analyze_class(FOO, make_class_info(source_file="src/Other.java"))

    assert sink.calls[0]["location"] == Location(file="src/Other.java", line=1, col=0)


def test_all_types_disabled_skips_analysis() -> None:
    aggregator, sink = _aggregator(disabled_issue_types=frozenset(MetaIssueType))

    assert not aggregator.enabled
    assert aggregator.analyze_class(FOO, make_class_info()) is None
    assert aggregator.analyze_all([make_class_info()]) == []
    assert sink.calls == []


def test_disabled_types_without_filtering_still_analyze() -> None:
    aggregator, sink = _aggregator(
        filtering=False,
        disabled_issue_types=frozenset(MetaIssueType),
    )

    assert aggregator.enabled
    assert aggregator.analyze_class(FOO, make_class_info()) is not None
    assert len(sink.calls) == 1


def test_findings_of_anonymous_units_count_for_their_owner() -> None:
    anon = ClassName.parse("com.example.Foo$1")
    info = make_class_info()
    info.nested_anonymous[anon] = ClassInfo(
        name=anon,
        source_file=SOURCE_FILE,
        summaries=[Summary("void Foo$1.run()", NullsafePayload((make_finding(),)))],
    )
    aggregator, sink = _aggregator(modes={FOO: STRICT})

    meta = aggregator.analyze_class(FOO, info)

    assert meta is not None
    assert meta.category is MetaIssueCategory.HAS_REGRESSIONS
    assert meta.info.violation_count_in_current_mode == 1


def test_suppressed_kinds_from_config_are_ignored() -> None:
    info = make_class_info(findings=[make_finding(FindingKind.FIELD_NOT_INITIALIZED)])
    aggregator, _ = _aggregator(
        modes={FOO: STRICT},
        suppressed_kinds=frozenset({FindingKind.FIELD_NOT_INITIALIZED}),
    )

    meta = aggregator.analyze_class(FOO, info)

    assert meta is not None
    assert meta.category is MetaIssueCategory.ALREADY_COMPLIANT


def test_explicit_policy_overrides_config() -> None:
    sink = RecordingSink()
    aggregator = ClassAggregator(
        make_config(),
        class_table=FakeClassTable({FOO: ClassStructInfo(FOO, DECLARED_AT)}),
        mode_resolver=FakeModeResolver({FOO: STRICT}),
        sink=sink,
        policy=TrustBasedReportability(suppressed_kinds=list(FindingKind)),
    )

    meta = aggregator.analyze_class(FOO, make_class_info(findings=[make_finding()]))

    assert meta is not None
    assert meta.category is MetaIssueCategory.ALREADY_COMPLIANT


def test_analyze_all_continues_past_unresolvable_classes() -> None:
    bar = ClassName.parse("com.example.Bar")
    aggregator, sink = _aggregator()

    reported = aggregator.analyze_all(
        [make_class_info("com.example.Bar"), make_class_info(), make_class_info("com.example.Bar")]
    )

    assert len(reported) == 1
    assert [c["class_name"] for c in sink.calls] == [FOO]
    assert bar not in {c["class_name"] for c in sink.calls}


def test_classes_are_analyzed_independently() -> None:
    aggregator, _ = _aggregator(modes={FOO: STRICT})
    dirty = make_class_info(findings=[make_finding()])
    clean = make_class_info()

    first = aggregator.analyze_class(FOO, clean)
    aggregator.analyze_class(FOO, dirty)
    again = aggregator.analyze_class(FOO, clean)

    assert first == again
