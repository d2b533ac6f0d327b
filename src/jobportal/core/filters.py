"""Generic attribute filter engine for portal records."""

from __future__ import annotations

import json
import math
from enum import Enum
from typing import Any, Callable, Mapping, Sequence, TypeVar

RecordT = TypeVar("RecordT", bound=Mapping[str, Any])


class FieldKind(str, Enum):
    """Matching policy applied to a record field."""

    STRING = "string"
    STRING_LIST = "string_list"
    STRUCT = "struct"
    NUMBER = "number"
    OTHER = "other"


FieldTable = Mapping[str, FieldKind]

PROFILE_FIELDS: dict[str, FieldKind] = {
    "id": FieldKind.NUMBER,
    "name": FieldKind.STRING,
    "email": FieldKind.STRING,
    "phone": FieldKind.STRING,
    "skills": FieldKind.STRING_LIST,
    "experience": FieldKind.STRUCT,
    "location": FieldKind.STRING,
}

JOB_FIELDS: dict[str, FieldKind] = {
    "id": FieldKind.NUMBER,
    "title": FieldKind.STRING,
    "company": FieldKind.STRING,
    "location": FieldKind.STRING,
    "experienceRequired": FieldKind.STRING,
    "salary": FieldKind.NUMBER,
    "description": FieldKind.STRING,
    "skillsRequired": FieldKind.STRING_LIST,
}


def infer_kind(value: Any) -> FieldKind:
    """Classify a runtime value for fields missing from the declared table."""
    if isinstance(value, bool):
        return FieldKind.OTHER
    if isinstance(value, str):
        return FieldKind.STRING
    if isinstance(value, (int, float)):
        return FieldKind.NUMBER
    if isinstance(value, (list, tuple)):
        if all(isinstance(item, str) for item in value):
            return FieldKind.STRING_LIST
        return FieldKind.STRUCT
    if isinstance(value, Mapping):
        return FieldKind.STRUCT
    return FieldKind.OTHER


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def _match_string(value: Any, target: str) -> bool:
    return _contains(str(value), target)


def _match_string_list(value: Any, target: str) -> bool:
    if isinstance(value, (str, Mapping)) or not isinstance(value, (list, tuple)):
        return _match_struct(value, target)
    for item in value:
        if isinstance(item, str):
            if _contains(item, target):
                return True
        elif str(item) == target:
            return True
    return False


def _match_struct(value: Any, target: str) -> bool:
    serialized = json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    return _contains(serialized, target)


def _match_number(value: Any, target: str) -> bool:
    try:
        number = float(target.strip())
    except ValueError:
        return False
    if math.isnan(number):
        return False
    try:
        return float(value) == number
    except (TypeError, ValueError):
        return False


def _match_other(value: Any, target: str) -> bool:
    if isinstance(value, bool):
        return json.dumps(value) == target
    return str(value) == target


_MATCHERS: dict[FieldKind, Callable[[Any, str], bool]] = {
    FieldKind.STRING: _match_string,
    FieldKind.STRING_LIST: _match_string_list,
    FieldKind.STRUCT: _match_struct,
    FieldKind.NUMBER: _match_number,
    FieldKind.OTHER: _match_other,
}


def _match_subfield(value: Any, subfield: str, target: str) -> bool:
    entries = [value] if isinstance(value, Mapping) else value
    if not isinstance(entries, (list, tuple)):
        return False
    for entry in entries:
        if not isinstance(entry, Mapping):
            continue
        item = entry.get(subfield)
        if item is not None and _contains(str(item), target):
            return True
    return False


def matches(
    record: Mapping[str, Any],
    field: str,
    target: str,
    fields: FieldTable | None = None,
) -> bool:
    """Return True when ``record`` satisfies a single criterion.

    ``field`` may be dotted (``experience.company``) to search one sub-field of
    the entries in a sub-record list.
    """
    if field not in record and "." in field:
        name, subfield = field.split(".", 1)
        value = record.get(name)
        return value is not None and _match_subfield(value, subfield, target)

    value = record.get(field)
    if value is None:
        return False
    kind = (fields or {}).get(field) or infer_kind(value)
    return _MATCHERS[kind](value, target)


def filter_records(
    records: Sequence[RecordT],
    criteria: Mapping[str, str] | None,
    fields: FieldTable | None = None,
) -> Sequence[RecordT]:
    """Return the records satisfying every criterion, in their original order.

    With no criteria the input sequence itself is returned. Neither the
    sequence nor the records are mutated.
    """
    if not criteria:
        return records
    return [
        record
        for record in records
        if all(matches(record, field, target, fields) for field, target in criteria.items())
    ]


__all__ = [
    "FieldKind",
    "FieldTable",
    "JOB_FIELDS",
    "PROFILE_FIELDS",
    "filter_records",
    "infer_kind",
    "matches",
]
