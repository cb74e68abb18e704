"""
Field rules for game request bodies.

The rules are declared once in GAME_FIELD_RULES and evaluated together by validate_game_request(),
so a client gets every failing field back in a single 400 response.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Protocol

from pydantic.alias_generators import to_camel

from src.api.models import GameFields
from src.core.exceptions import FieldError, RequestValidationFailedError


class FieldRule(Protocol):
    def check(self, request: GameFields) -> list[FieldError]: ...


@dataclass(frozen=True)
class StringRule:
    """Required / maximum length constraint on a text field."""

    attribute: str
    label: str
    max_length: int
    required: bool = False

    def check(self, request: GameFields) -> list[FieldError]:
        value: Optional[str] = getattr(request, self.attribute)
        field = to_camel(self.attribute)

        # whitespace-only counts as missing
        if self.required and (value is None or not value.strip()):
            return [FieldError(field, f"{self.label} is required")]
        if value is not None and len(value) > self.max_length:
            return [
                FieldError(
                    field, f"{self.label} cannot exceed {self.max_length} characters"
                )
            ]
        return []


@dataclass(frozen=True)
class RangeRule:
    """Inclusive lower bound on a numeric field."""

    attribute: str
    label: str
    minimum: Decimal

    def check(self, request: GameFields) -> list[FieldError]:
        value: Decimal = getattr(request, self.attribute)
        if value < self.minimum:
            return [
                FieldError(
                    to_camel(self.attribute), f"{self.label} must be a non-negative value"
                )
            ]
        return []


GAME_FIELD_RULES: tuple[FieldRule, ...] = (
    StringRule("name", "Name", max_length=200, required=True),
    StringRule("genre", "Genre", max_length=100),
    StringRule("age_rating", "AgeRating", max_length=10),
    RangeRule("price", "Price", minimum=Decimal("0")),
    StringRule("description", "Description", max_length=1000),
    StringRule("author", "Author", max_length=200),
)


def validate_game_request(request: GameFields) -> list[FieldError]:
    """Evaluate every rule and collect all failures (empty list means valid)."""
    failures: list[FieldError] = []
    for rule in GAME_FIELD_RULES:
        failures.extend(rule.check(request))
    return failures


def ensure_valid(request: GameFields) -> None:
    """Raise RequestValidationFailedError when any rule fails."""
    failures = validate_game_request(request)
    if failures:
        raise RequestValidationFailedError(failures)
