"""Student profile validation.

Rules are kept as an ordered table of (field, check, message) entries. Every
rule runs on every call, so a single submission reports all of its problems
at once, in the order the form declares the fields.
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable, Mapping, NamedTuple, Optional

from advisor.config import settings
from advisor.models import StudentProfile, ValidationResult

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class FieldRule(NamedTuple):
    field: str
    check: Callable[[str], bool]
    message: str
    # Used instead of ``message`` when split parse errors are requested
    # and the value is not a number at all.
    parse_message: Optional[str] = None
    parse: Optional[Callable[[str], Any]] = None


def parse_float(raw: str) -> Optional[float]:
    """Return a float for plain decimal numbers, otherwise None.

    Surrounding whitespace is allowed. ``nan``, ``inf`` and digit separators
    are not.
    """
    text = raw.strip()
    if not _DECIMAL.fullmatch(text):
        return None
    value = float(text)
    return value if math.isfinite(value) else None


def parse_int(raw: str) -> Optional[int]:
    """Return an int for whole decimal numbers, otherwise None."""
    text = raw.strip()
    if not _INTEGER.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # Longer than the interpreter's int string conversion limit.
        return None


def _non_empty(value: str) -> bool:
    return value != ""


def _non_blank(value: str) -> bool:
    return value.strip() != ""


def _gpa_in_range(value: str) -> bool:
    gpa = parse_float(value)
    return gpa is not None and 0 <= gpa <= 4.0


def _credits_positive(value: str) -> bool:
    credits = parse_int(value)
    return credits is not None and credits > 0


def _grade_points_non_negative(value: str) -> bool:
    points = parse_float(value)
    return points is not None and points >= 0


PROFILE_RULES: tuple[FieldRule, ...] = (
    FieldRule("specialization", _non_blank, "Specialization is required"),
    FieldRule(
        "gpa",
        _gpa_in_range,
        "GPA must be a number between 0 and 4.0",
        parse_message="GPA must be a number",
        parse=parse_float,
    ),
    FieldRule(
        "credits",
        _credits_positive,
        "Credits must be a whole number greater than 0",
        parse_message="Credits must be a whole number",
        parse=parse_int,
    ),
    FieldRule(
        "gradePoints",
        _grade_points_non_negative,
        "Grade points must be a number of 0 or more",
        parse_message="Grade points must be a number",
        parse=parse_float,
    ),
    FieldRule("faculty", _non_empty, "Faculty is required"),
    FieldRule("careerInterest", _non_empty, "Career interest is required"),
    FieldRule("strongSubjects", _non_empty, "Strong subjects are required"),
    FieldRule("weakSubjects", _non_empty, "Weak subjects are required"),
    FieldRule("difficulty", _non_empty, "Preferred difficulty is required"),
    FieldRule("language", _non_empty, "Preferred language is required"),
)

PROFILE_FIELDS: tuple[str, ...] = tuple(rule.field for rule in PROFILE_RULES)


def _error_for(rule: FieldRule, value: Any, split_parse_errors: bool) -> Optional[str]:
    if not isinstance(value, str):
        return rule.message
    if rule.check(value):
        return None
    if split_parse_errors and rule.parse is not None and rule.parse(value) is None:
        return rule.parse_message
    return rule.message


def validate(
    fields: Mapping[str, Any],
    *,
    split_parse_errors: Optional[bool] = None,
) -> ValidationResult:
    """Validate raw form values against the profile rules.

    Missing keys and ``None`` count as empty strings; unknown keys are
    ignored. Never raises.
    """
    if split_parse_errors is None:
        split_parse_errors = settings.SPLIT_PARSE_ERRORS

    errors: dict[str, str] = {}
    for rule in PROFILE_RULES:
        value = fields.get(rule.field)
        if value is None:
            value = ""
        message = _error_for(rule, value, split_parse_errors)
        if message is not None:
            errors[rule.field] = message

    if errors:
        return ValidationResult(valid=False, errors=errors)

    profile = StudentProfile.model_validate({name: fields[name] for name in PROFILE_FIELDS})
    return ValidationResult(valid=True, value=profile)
