# topmark:header:start
#
#   project      : NullMeta
#   file         : test_meta_issue_builder.py
#   file_relpath : tests/analysis/test_meta_issue_builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `MetaIssueBuilder`: classification, messages and metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import given

from nullmeta.analysis.builder import (
    LOCAL_TRUST_ALL_ANNOTATION,
    LOCAL_TRUST_NONE_ANNOTATION,
    MetaIssueBuilder,
    promotion_recommendation,
)
from nullmeta.analysis.classifier import ViolationClassifier
from nullmeta.analysis.promotion import PromotionAnalyzer
from nullmeta.analysis.reportability import TrustBasedReportability
from nullmeta.core.errors import NullmetaError, NullmetaInternalError
from nullmeta.model.classes import ClassName
from nullmeta.model.finding import FindingKind
from nullmeta.model.meta_issue import MetaIssueCategory, MetaIssueType, Severity
from nullmeta.model.mode import (
    DEFAULT,
    LOCAL_TRUST_ALL,
    LOCAL_TRUST_NONE,
    STRICT,
    EnforcementMode,
    Trust,
)
from tests.conftest import make_finding, parametrize
from tests.strategies_nullmeta import s_findings, s_mode

if TYPE_CHECKING:
    from nullmeta.model.finding import Finding

FOO = ClassName.parse("com.example.Foo")


def _builder() -> MetaIssueBuilder:
    return MetaIssueBuilder(PromotionAnalyzer(ViolationClassifier(TrustBasedReportability())))


def test_default_class_without_findings_can_become_strict() -> None:
    meta = _builder().build([], DEFAULT, FOO)

    assert meta.category is MetaIssueCategory.CAN_BECOME_STRICT
    assert meta.issue_type is MetaIssueType.CAN_BE_NULLSAFE
    assert meta.severity is Severity.ADVICE
    assert meta.info.violation_count_in_current_mode == 0
    assert meta.info.current_mode == DEFAULT
    assert meta.info.promotable_to == LOCAL_TRUST_NONE
    assert meta.message == (
        f"Congrats! `Foo` is free of nullability issues. Mark it {LOCAL_TRUST_NONE_ANNOTATION} "
        "to prevent regressions."
    )


def test_default_class_with_violations_only_after_opting_in_needs_improvement() -> None:
    findings = [make_finding(nullsafe_only=True, line=3), make_finding(nullsafe_only=True, line=4)]

    meta = _builder().build(findings, DEFAULT, FOO)

    assert meta.category is MetaIssueCategory.NEEDS_IMPROVEMENT
    assert meta.issue_type is MetaIssueType.NEEDS_IMPROVEMENT
    assert meta.severity is Severity.INFO
    assert meta.message == "`Foo` needs 2 issues to be fixed in order to be marked @Nullsafe."
    assert meta.info.violation_count_in_current_mode == 0
    assert meta.info.promotable_to is None


def test_strict_class_with_a_violation_has_regressions() -> None:
    meta = _builder().build([make_finding()], STRICT, FOO)

    assert meta.category is MetaIssueCategory.HAS_REGRESSIONS
    assert meta.issue_type is MetaIssueType.NEEDS_IMPROVEMENT
    assert meta.severity is Severity.INFO
    assert meta.info.violation_count_in_current_mode == 1
    assert meta.info.promotable_to is None
    assert meta.message == (
        "@Nullsafe classes should have exactly zero nullability issues. `Foo` has 1."
    )


def test_local_class_without_findings_is_already_compliant() -> None:
    meta = _builder().build([], LOCAL_TRUST_ALL, FOO)

    assert meta.category is MetaIssueCategory.ALREADY_COMPLIANT
    assert meta.issue_type is MetaIssueType.IS_NULLSAFE
    assert meta.severity is Severity.INFO
    assert meta.message == "Class com.example.Foo is free of nullability issues."
    assert meta.info.violation_count_in_current_mode == 0
    # Metadata is computed whatever the category.
    assert meta.info.promotable_to == LOCAL_TRUST_NONE


@parametrize(
    "target",
    [
        DEFAULT,
        EnforcementMode.local(Trust.only_these(["com.lib.Alpha"])),
    ],
)
def test_promotion_recommendation_rejects_non_canonical_targets(target: EnforcementMode) -> None:
    with pytest.raises(NullmetaInternalError, match="Unexpected promotion mode"):
        promotion_recommendation(target)


def test_internal_error_is_not_a_user_facing_error() -> None:
    assert not issubclass(NullmetaInternalError, NullmetaError)


@parametrize(
    "target, annotation",
    [
        (LOCAL_TRUST_ALL, LOCAL_TRUST_ALL_ANNOTATION),
        (LOCAL_TRUST_NONE, LOCAL_TRUST_NONE_ANNOTATION),
        (STRICT, LOCAL_TRUST_NONE_ANNOTATION),
    ],
)
def test_promotion_recommendation(target: EnforcementMode, annotation: str) -> None:
    assert promotion_recommendation(target) == annotation


def test_third_party_findings_recommend_local_trusting_all() -> None:
    meta = _builder().build([make_finding(origin="com.lib.Alpha")], DEFAULT, FOO)

    assert meta.category is MetaIssueCategory.CAN_BECOME_STRICT
    assert LOCAL_TRUST_ALL_ANNOTATION in meta.message
    assert meta.info.promotable_to == LOCAL_TRUST_ALL


def test_non_violation_kinds_do_not_block_promotion() -> None:
    findings = [
        make_finding(FindingKind.CONDITION_REDUNDANT),
        make_finding(FindingKind.OVER_ANNOTATION),
    ]

    meta = _builder().build(findings, DEFAULT, FOO)

    assert meta.category is MetaIssueCategory.CAN_BECOME_STRICT


def test_regression_count_honors_trust() -> None:
    trusted = EnforcementMode.local(Trust.only_these(["com.lib.Alpha"]))
    findings = [
        make_finding(origin="com.lib.Alpha"),
        make_finding(origin="com.lib.Beta"),
        make_finding(FindingKind.BAD_ASSIGNMENT),
    ]

    meta = _builder().build(findings, trusted, FOO)

    assert meta.category is MetaIssueCategory.HAS_REGRESSIONS
    assert meta.info.violation_count_in_current_mode == 2


@pytest.mark.hypothesis_slow
@given(findings=s_findings(), mode=s_mode())
def test_build_is_idempotent(findings: list[Finding], mode: EnforcementMode) -> None:
    builder = _builder()
    assert builder.build(findings, mode, FOO) == builder.build(findings, mode, FOO)


@pytest.mark.hypothesis_slow
@given(findings=s_findings(), mode=s_mode())
def test_category_agrees_with_mode_and_count(
    findings: list[Finding],
    mode: EnforcementMode,
) -> None:
    meta = _builder().build(findings, mode, FOO)

    if mode.is_default:
        assert meta.category in (
            MetaIssueCategory.CAN_BECOME_STRICT,
            MetaIssueCategory.NEEDS_IMPROVEMENT,
        )
    elif meta.info.violation_count_in_current_mode > 0:
        assert meta.category is MetaIssueCategory.HAS_REGRESSIONS
    else:
        assert meta.category is MetaIssueCategory.ALREADY_COMPLIANT
