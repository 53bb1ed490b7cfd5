"""Tests for student profile validation."""

import pytest

from advisor.validation import PROFILE_FIELDS, parse_float, parse_int, validate

VALID_FIELDS = {
    "specialization": "IT",
    "gpa": "3.5",
    "credits": "80",
    "gradePoints": "300",
    "faculty": "Computing",
    "careerInterest": "AI",
    "strongSubjects": "Coding",
    "weakSubjects": "None",
    "difficulty": "Moderate",
    "language": "English",
}


def with_fields(**overrides):
    fields = dict(VALID_FIELDS)
    fields.update(overrides)
    return fields


def test_validate_accepts_well_formed_profile():
    result = validate(VALID_FIELDS)

    assert result.valid is True
    assert result.errors == {}
    assert result.value.specialization == "IT"
    assert result.value.grade_points == "300"
    assert result.value.career_interest == "AI"


def test_validate_keeps_values_as_strings():
    result = validate(with_fields(gpa=" 3.5 "))

    assert result.valid is True
    assert result.value.gpa == " 3.5 "
    assert result.value.credits == "80"


def test_validate_rejects_gpa_out_of_range_only():
    result = validate(with_fields(gpa="5.0"))

    assert result.valid is False
    assert result.value is None
    assert list(result.errors) == ["gpa"]


def test_validate_rejects_empty_specialization():
    result = validate(with_fields(specialization=""))

    assert result.valid is False
    assert list(result.errors) == ["specialization"]


def test_validate_trims_specialization():
    assert validate(with_fields(specialization="   ")).errors == {
        "specialization": "Specialization is required"
    }


def test_validate_reports_every_field_when_empty():
    result = validate({field: "" for field in PROFILE_FIELDS})

    assert result.valid is False
    assert len(result.errors) == 10
    assert list(result.errors) == list(PROFILE_FIELDS)


def test_validate_missing_keys_count_as_empty():
    result = validate({"gpa": "5.0"})

    assert result.valid is False
    assert len(result.errors) == 10


def test_validate_none_counts_as_empty():
    result = validate(with_fields(faculty=None))

    assert result.errors == {"faculty": "Faculty is required"}


def test_validate_ignores_unknown_keys():
    assert validate(with_fields(nickname="Ada")).valid is True


def test_validate_rejects_non_string_values():
    result = validate(with_fields(gpa=3.5))

    assert list(result.errors) == ["gpa"]


@pytest.mark.parametrize(
    "field, value, valid",
    [
        ("gpa", "4.0", True),
        ("gpa", "0", True),
        ("gpa", "4.01", False),
        ("gpa", "-0.01", False),
        ("credits", "0", False),
        ("credits", "1", True),
        ("credits", "-5", False),
        ("credits", "80.5", False),
        ("gradePoints", "0", True),
        ("gradePoints", "316.4", True),
        ("gradePoints", "-1", False),
        ("credits", "\u0668\u0660", False),
        ("gpa", "\u0663.\u0665", False),
        ("gradePoints", "\uff13\uff10\uff10", False),
    ],
)
def test_validate_numeric_boundaries(field, value, valid):
    result = validate(with_fields(**{field: value}))

    assert result.valid is valid
    if not valid:
        assert list(result.errors) == [field]


@pytest.mark.parametrize("value", ["abc", "", "nan", "inf", "3,5", "3_5"])
def test_validate_unparseable_gpa_shares_range_message(value):
    result = validate(with_fields(gpa=value), split_parse_errors=False)

    assert result.errors == {"gpa": "GPA must be a number between 0 and 4.0"}


def test_validate_split_parse_errors():
    result = validate(
        with_fields(gpa="abc", credits="1.5", gradePoints="-3"),
        split_parse_errors=True,
    )

    assert result.errors == {
        "gpa": "GPA must be a number",
        "credits": "Credits must be a whole number",
        "gradePoints": "Grade points must be a number of 0 or more",
    }


def test_validate_split_parse_errors_keeps_range_message():
    result = validate(with_fields(gpa="4.5", credits="0"), split_parse_errors=True)

    assert result.errors == {
        "gpa": "GPA must be a number between 0 and 4.0",
        "credits": "Credits must be a whole number greater than 0",
    }


def test_parse_float():
    assert parse_float("3.77") == 3.77
    assert parse_float(" .5 ") == 0.5
    assert parse_float("1e0") == 1.0
    assert parse_float("") is None
    assert parse_float("nan") is None
    assert parse_float("1e999") is None


def test_parse_int():
    assert parse_int("80") == 80
    assert parse_int(" +7 ") == 7
    assert parse_int("80.0") is None
    assert parse_int("eighty") is None


def test_validate_rejects_overlong_credits_without_raising():
    result = validate(with_fields(credits="9" * 5000))

    assert result.valid is False
    assert list(result.errors) == ["credits"]


def test_validate_overlong_credits_is_a_parse_error_when_split():
    result = validate(with_fields(credits="9" * 5000), split_parse_errors=True)

    assert result.errors == {"credits": "Credits must be a whole number"}


def test_parse_numbers_reject_non_ascii_digits():
    assert parse_int("٨٠") is None
    assert parse_float("٣.٥") is None
