"""Unit tests for the field validation rules."""

from datetime import date

import pytest

from core.exceptions import ValidationFailedError
from domain.services.validation import (
    EDUCATION_RULES,
    EXPERIENCE_RULES,
    PROFILE_CREATE_RULES,
    FieldError,
    ensure_valid,
    is_blank,
    validate,
)


class TestIsBlank:
    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_blank_values(self, value):
        assert is_blank(value)

    @pytest.mark.parametrize("value", ["x", " x ", date(2020, 1, 1), False, 0])
    def test_non_blank_values(self, value):
        assert not is_blank(value)


class TestProfileCreateRules:
    def test_valid(self):
        assert validate(PROFILE_CREATE_RULES, {"status": "Dev", "skills": "python"}) == []

    def test_skills_as_list(self):
        assert validate(PROFILE_CREATE_RULES, {"status": "Dev", "skills": ["go"]}) == []

    def test_whitespace_status_is_missing(self):
        errors = validate(PROFILE_CREATE_RULES, {"status": "   ", "skills": "python"})

        assert errors == [FieldError("status", "Status is required")]

    def test_empty_skills_list_is_missing(self):
        errors = validate(PROFILE_CREATE_RULES, {"status": "Dev", "skills": []})

        assert errors == [FieldError("skills", "Skills is required")]


class TestExperienceRules:
    def test_all_missing_in_order(self):
        errors = validate(EXPERIENCE_RULES, {})

        assert [e.to_dict() for e in errors] == [
            {"field": "title", "message": "Title is required"},
            {"field": "company", "message": "Company is required"},
            {"field": "from", "message": "From date is required"},
        ]

    def test_valid(self):
        values = {"title": "Dev", "company": "Acme", "from": date(2020, 1, 1)}

        assert validate(EXPERIENCE_RULES, values) == []


class TestEducationRules:
    def _values(self, **overrides):
        values = {
            "school": "Uni",
            "degree": "BSc",
            "fieldofstudy": "CS",
            "from": date(2015, 9, 1),
            "to": date(2019, 6, 30),
        }
        values.update(overrides)
        return values

    def test_valid(self):
        assert validate(EDUCATION_RULES, self._values()) == []

    def test_open_ended_is_valid(self):
        assert validate(EDUCATION_RULES, self._values(to=None)) == []

    def test_equal_dates_rejected(self):
        errors = validate(EDUCATION_RULES, self._values(to=date(2015, 9, 1)))

        assert errors == [FieldError("from", "From date must be before the to date")]

    def test_missing_from_skips_ordering_check(self):
        errors = validate(EDUCATION_RULES, self._values(**{"from": None}))

        assert errors == [FieldError("from", "From date is required")]


class TestEnsureValid:
    def test_passes_silently(self):
        ensure_valid(EXPERIENCE_RULES, {"title": "Dev", "company": "Acme", "from": "2020-01-01"})

    def test_raises_with_every_error(self):
        with pytest.raises(ValidationFailedError) as exc_info:
            ensure_valid(EXPERIENCE_RULES, {"title": "Dev"})

        error = exc_info.value
        assert error.status_code == 400
        assert error.details == [
            {"field": "company", "message": "Company is required"},
            {"field": "from", "message": "From date is required"},
        ]
