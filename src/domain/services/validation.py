"""Declarative field rules checked before any profile mutation."""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from core.exceptions import ValidationFailedError
from domain.entities.profile_patch import parse_skills


@dataclass(frozen=True, slots=True)
class FieldError:
    """A single failed rule."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True, slots=True)
class Rule:
    """A named check over the whole set of submitted values."""

    field: str
    message: str
    check: Callable[[Mapping[str, Any]], bool]


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def required(name: str, message: str) -> Rule:
    return Rule(name, message, lambda values: not is_blank(values.get(name)))


def required_skills(name: str, message: str) -> Rule:
    """Require at least one non-empty item after splitting on commas."""

    def check(values: Mapping[str, Any]) -> bool:
        raw = values.get(name)
        return raw is not None and bool(parse_skills(raw))

    return Rule(name, message, check)


def before(name: str, other: str, message: str) -> Rule:
    """``name`` must sort strictly before ``other`` when both are given."""

    def check(values: Mapping[str, Any]) -> bool:
        start, end = values.get(name), values.get(other)
        if is_blank(start) or is_blank(end):
            return True
        return bool(start < end)

    return Rule(name, message, check)


PROFILE_CREATE_RULES: tuple[Rule, ...] = (
    required("status", "Status is required"),
    required_skills("skills", "Skills is required"),
)

EXPERIENCE_RULES: tuple[Rule, ...] = (
    required("title", "Title is required"),
    required("company", "Company is required"),
    required("from", "From date is required"),
)

EDUCATION_RULES: tuple[Rule, ...] = (
    required("school", "School is required"),
    required("degree", "Degree is required"),
    required("fieldofstudy", "Field of study is required"),
    required("from", "From date is required"),
    before("from", "to", "From date must be before the to date"),
)


def validate(rules: Sequence[Rule], values: Mapping[str, Any]) -> list[FieldError]:
    """Run every rule in order and collect the failures."""
    return [FieldError(rule.field, rule.message) for rule in rules if not rule.check(values)]


def ensure_valid(rules: Sequence[Rule], values: Mapping[str, Any]) -> None:
    """Raise ValidationFailedError listing every failed rule."""
    errors = validate(rules, values)
    if errors:
        raise ValidationFailedError([error.to_dict() for error in errors])
