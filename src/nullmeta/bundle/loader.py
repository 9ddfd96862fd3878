# topmark:header:start
#
#   project      : NullMeta
#   file         : loader.py
#   file_relpath : src/nullmeta/bundle/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read an analysis bundle (JSON) into the NullMeta data model.

A bundle has two top-level arrays:

* ``classes``: structural info of each class (name, source file, optional
  declaration location, declared mode);
* ``summaries``: per-procedure summaries, each naming the class that declares
  the procedure and, optionally, its nullability findings.

Every shape error is reported as `NullmetaBundleError` with a JSON-path-like
pointer to the offending value.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

from nullmeta.config.logging import get_logger
from nullmeta.core.errors import NullmetaBundleError
from nullmeta.model.classes import (
    ClassInfo,
    ClassName,
    ClassStructInfo,
    NullsafePayload,
    Summary,
    aggregate_summaries,
)
from nullmeta.model.finding import Finding, FindingKind, Location
from nullmeta.model.mode import EnforcementMode, Trust

if TYPE_CHECKING:
    from pathlib import Path

    from nullmeta.config.logging import NullmetaLogger

logger: NullmetaLogger = get_logger(__name__)


@dataclass(frozen=True)
class ClassEntry:
    """One element of the ``classes`` array."""

    struct: ClassStructInfo
    source_file: str
    mode: EnforcementMode


@dataclass(frozen=True)
class AnalysisBundle:
    """A parsed bundle.

    Attributes:
        classes (dict[ClassName, ClassEntry]): Classes with structural info.
        class_infos (dict[ClassName, ClassInfo]): Aggregated summaries, one per
            named class, in first-seen order. May contain classes that are absent
            from ``classes``.
    """

    classes: dict[ClassName, ClassEntry]
    class_infos: dict[ClassName, ClassInfo]


def _expect_dict(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise NullmetaBundleError(f"{where}: expected an object, got {type(value).__name__}")
    return cast("dict[str, Any]", value)


def _expect_list(value: Any, where: str) -> list[Any]:
    if not isinstance(value, list):
        raise NullmetaBundleError(f"{where}: expected an array, got {type(value).__name__}")
    return cast("list[Any]", value)


def _expect_str(value: Any, where: str) -> str:
    if not isinstance(value, str) or not value:
        raise NullmetaBundleError(f"{where}: expected a non-empty string")
    return value


def _expect_int(value: Any, where: str, default: int | None = None) -> int:
    if value is None and default is not None:
        return default
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise NullmetaBundleError(f"{where}: expected an integer")
    return value


def _expect_bool(value: Any, where: str, default: bool = False) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise NullmetaBundleError(f"{where}: expected a boolean, got {type(value).__name__}")
    return value


def _class_name(value: Any, where: str) -> ClassName:
    raw = _expect_str(value, where)
    try:
        return ClassName.parse(raw)
    except ValueError as exc:
        raise NullmetaBundleError(f"{where}: {exc}") from exc


def parse_mode(value: Any, where: str = "mode") -> EnforcementMode:
    """Parse the declared mode of a class.

    Accepted forms: ``"default"``, ``"strict"``, ``"local"`` (trusting all), and
    ``{"local": {"trust_only": [ids...]}}``. A missing mode is Default.

    Raises:
        NullmetaBundleError: For any other value.
    """
    if value is None:
        return EnforcementMode.default()
    if isinstance(value, str):
        token = value.strip().lower()
        if token == "default":
            return EnforcementMode.default()
        if token == "strict":
            return EnforcementMode.strict()
        if token == "local":
            return EnforcementMode.local(Trust.all())
        raise NullmetaBundleError(f"{where}: unknown mode {value!r}")

    table = _expect_dict(value, where)
    if set(table) != {"local"}:
        raise NullmetaBundleError(f"{where}: expected a single 'local' key")
    local = _expect_dict(table["local"], f"{where}.local")
    trust_only = _expect_list(local.get("trust_only"), f"{where}.local.trust_only")
    ids = [_expect_str(item, f"{where}.local.trust_only[{i}]") for i, item in enumerate(trust_only)]
    return EnforcementMode.local(Trust.only_these(ids))


def _parse_class_entry(value: Any, where: str) -> tuple[ClassName, ClassEntry]:
    table = _expect_dict(value, where)
    name = _class_name(table.get("name"), f"{where}.name")
    source_file = _expect_str(table.get("source_file"), f"{where}.source_file")

    location: Location | None = None
    raw_loc = table.get("location")
    if raw_loc is not None:
        loc = _expect_dict(raw_loc, f"{where}.location")
        location = Location(
            file=source_file,
            line=_expect_int(loc.get("line"), f"{where}.location.line"),
            col=_expect_int(loc.get("col"), f"{where}.location.col", default=0),
        )

    entry = ClassEntry(
        struct=ClassStructInfo(name=name, location=location),
        source_file=source_file,
        mode=parse_mode(table.get("mode"), f"{where}.mode"),
    )
    return name, entry


def _parse_finding(value: Any, source_file: str, where: str) -> Finding:
    table = _expect_dict(value, where)
    raw_kind = _expect_str(table.get("kind"), f"{where}.kind")
    kind = FindingKind.parse(raw_kind)
    if kind is None:
        raise NullmetaBundleError(f"{where}.kind: unknown finding kind {raw_kind!r}")

    origin = table.get("origin")
    if origin is not None:
        origin = _expect_str(origin, f"{where}.origin")

    description = table.get("description", "")
    if not isinstance(description, str):
        raise NullmetaBundleError(f"{where}.description: expected a string")

    return Finding(
        kind=kind,
        location=Location(
            file=source_file,
            line=_expect_int(table.get("line"), f"{where}.line"),
            col=_expect_int(table.get("col"), f"{where}.col", default=0),
        ),
        description=description,
        origin=origin,
        origin_is_nullsafe=_expect_bool(
            table.get("origin_is_nullsafe"), f"{where}.origin_is_nullsafe"
        ),
        nullsafe_only=_expect_bool(table.get("nullsafe_only"), f"{where}.nullsafe_only"),
    )


def _source_file_for(name: ClassName, classes: dict[ClassName, ClassEntry]) -> str:
    current: ClassName | None = name
    while current is not None:
        entry = classes.get(current)
        if entry is not None:
            return entry.source_file
        current = current.outer()
    return ""


def _parse_summary(
    value: Any,
    classes: dict[ClassName, ClassEntry],
    where: str,
) -> tuple[ClassName, str, Summary]:
    table = _expect_dict(value, where)
    name = _class_name(table.get("class"), f"{where}.class")
    procedure = _expect_str(table.get("procedure"), f"{where}.procedure")
    source_file = _source_file_for(name, classes)

    payload: NullsafePayload | None = None
    raw_issues = table.get("issues")
    if raw_issues is not None:
        issues = _expect_list(raw_issues, f"{where}.issues")
        payload = NullsafePayload(
            issues=tuple(
                _parse_finding(item, source_file, f"{where}.issues[{i}]")
                for i, item in enumerate(issues)
            )
        )
    return name, source_file, Summary(procedure=procedure, nullsafe=payload)


def parse_bundle(data: Any) -> AnalysisBundle:
    """Build an `AnalysisBundle` from already-decoded JSON data.

    Raises:
        NullmetaBundleError: If ``data`` does not follow the bundle shape.
    """
    root = _expect_dict(data, "$")

    classes: dict[ClassName, ClassEntry] = {}
    for i, item in enumerate(_expect_list(root.get("classes", []), "$.classes")):
        name, entry = _parse_class_entry(item, f"$.classes[{i}]")
        if name in classes:
            raise NullmetaBundleError(f"$.classes[{i}].name: duplicate class {name}")
        classes[name] = entry

    entries = [
        _parse_summary(item, classes, f"$.summaries[{i}]")
        for i, item in enumerate(_expect_list(root.get("summaries", []), "$.summaries"))
    ]
    class_infos = aggregate_summaries(entries)
    logger.debug(
        "Parsed bundle: %d class entr(ies), %d summar(ies), %d class info(s)",
        len(classes),
        len(entries),
        len(class_infos),
    )
    return AnalysisBundle(classes=classes, class_infos=class_infos)


def load_bundle(path: Path) -> AnalysisBundle:
    """Read and parse a bundle file.

    Args:
        path (Path): JSON file (UTF-8).

    Returns:
        AnalysisBundle: The parsed bundle.

    Raises:
        NullmetaBundleError: If the file cannot be read, is not JSON, or does not
            follow the bundle shape.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise NullmetaBundleError(f"Cannot read bundle {path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise NullmetaBundleError(f"Invalid JSON in {path}: {exc}") from exc
    logger.info("Loaded bundle %s", path)
    return parse_bundle(data)
