"""Input checks applied before any calculation runs."""

import math
import re
from datetime import date
from enum import StrEnum

from balance_life.domain.errors import ValidationError, Violation
from balance_life.domain.users import ActivityLevel, Gender, GoalType

PORTION_MULTIPLIER_RANGE = (0.1, 3.0)
INTENSITY_MULTIPLIER_RANGE = (0.5, 2.0)
DURATION_MINUTES_RANGE = (5, 180)
MAX_HEIGHT_CM = 300.0
MAX_WEIGHT_KG = 700.0

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
_ALL_FILTER_VALUES = {"", "ALL"}


def check_range(
    field: str, value: float, bounds: tuple[float, float]
) -> Violation | None:
    """Return a violation unless ``value`` lies within the inclusive bounds."""
    low, high = bounds
    if isinstance(value, bool) or not isinstance(value, int | float):
        return Violation(field, "must be a number", value)
    if not low <= value <= high:
        return Violation(field, f"must be between {low} and {high}", value)
    return None


def check_portion_multiplier(value: float) -> Violation | None:
    return check_range("portionMultiplier", value, PORTION_MULTIPLIER_RANGE)


def check_intensity_multiplier(value: float) -> Violation | None:
    return check_range("intensityMultiplier", value, INTENSITY_MULTIPLIER_RANGE)


def check_duration_minutes(value: int) -> Violation | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return Violation("durationMinutes", "must be a whole number", value)
    return check_range("durationMinutes", value, DURATION_MINUTES_RANGE)


def check_positive(
    field: str, value: float, maximum: float | None = None
) -> Violation | None:
    """Return a violation unless ``value`` is a finite number above zero.

    With ``maximum`` the value must also not exceed it.
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        return Violation(field, "must be a number", value)
    if not math.isfinite(value):
        return Violation(field, "must be a finite number", value)
    if not value > 0:
        return Violation(field, "must be positive", value)
    if maximum is not None and value > maximum:
        return Violation(field, f"must not exceed {maximum:g}", value)
    return None


def check_choice(
    field: str, value: object, allowed: tuple[StrEnum, ...]
) -> Violation | None:
    """Return a violation unless ``value`` is one of the allowed members."""
    if isinstance(value, str) and value in {member.value for member in allowed}:
        return None
    choices = ", ".join(member.value or '""' for member in allowed)
    return Violation(field, f"must be one of {choices}", value)


def check_date(field: str, value: object) -> Violation | None:
    """Return a violation unless ``value`` is a real date in YYYY-MM-DD form."""
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        return Violation(field, "must use YYYY-MM-DD format", value)
    try:
        date.fromisoformat(value)
    except ValueError:
        return Violation(field, "must be a valid calendar date", value)
    return None


def require(violation: Violation | None) -> None:
    """Raise ValidationError for a failed check."""
    if violation is not None:
        raise ValidationError(violation)


def parse_date(field: str, value: object) -> date:
    require(check_date(field, value))
    return date.fromisoformat(str(value))


def parse_gender(value: object) -> Gender:
    require(check_choice("gender", value, tuple(Gender)))
    return Gender(value)


def parse_activity_level(value: object) -> ActivityLevel:
    require(check_choice("activityLevel", value, tuple(ActivityLevel)))
    return ActivityLevel(value)


def parse_goal_type(value: object) -> GoalType:
    """Parse a registration goal; only LOSE and GAIN are accepted."""
    require(check_choice("goal", value, (GoalType.LOSE, GoalType.GAIN)))
    return GoalType(value)


def parse_goal_filter(value: str | None) -> GoalType:
    """Parse a package filter where empty, missing or ALL means no filter."""
    if value is None or value.upper() in _ALL_FILTER_VALUES:
        return GoalType.ALL
    require(check_choice("goalType", value, tuple(GoalType)))
    return GoalType(value)


def parse_date_range(
    start: str | None, end: str | None, default: date
) -> tuple[date, date]:
    """Parse optional range bounds, falling back to ``default`` for either side."""
    start_date = default if not start else parse_date("startDate", start)
    end_date = default if not end else parse_date("endDate", end)
    return start_date, end_date


def require_id(field: str, value: str | None) -> str:
    """Return a stripped identifier, rejecting missing or blank values."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(Violation(field, "is required", value))
    return cleaned
