"""Domain models for users and their goals."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class Gender(StrEnum):
    """Gender used to select the BMR equation."""

    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class ActivityLevel(StrEnum):
    """Self-reported physical activity level."""

    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"


class GoalType(StrEnum):
    """Fitness objective; ALL tags packages suitable for either goal."""

    LOSE = "LOSE"
    GAIN = "GAIN"
    ALL = ""


@dataclass(frozen=True)
class GoalTargets:
    """Daily calorie and macro targets derived from a goal."""

    calories: int
    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class GoalInfo:
    """A user's goal with its derived targets."""

    type: GoalType
    target_calories: int
    target_protein: int
    target_carbs: int
    target_fat: int
    start_date: datetime
    start_weight: float
    target_weight: float | None = None


@dataclass(frozen=True)
class User:
    """Registered user with biometrics."""

    id: str | None
    name: str
    email: str
    gender: Gender
    birth_date: date
    height: float
    weight: float
    activity_level: ActivityLevel
    goal: GoalInfo
    created_at: datetime
    last_login_at: datetime
