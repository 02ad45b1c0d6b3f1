"""Domain models for meal packages and logged meals."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum

from balance_life.domain.users import GoalType


class MealType(StrEnum):
    """Time-of-day slot a meal package belongs to."""

    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"
    SNACK = "SNACK"


@dataclass(frozen=True)
class MealPackage:
    """Predefined meal with base nutrition for a single portion."""

    id: str
    name: str
    description: str
    goal_type: GoalType
    meal_type: MealType
    base_calories: int
    base_protein: int
    base_carbs: int
    base_fat: int
    image_url: str = ""
    preparation_steps: list[str] = field(default_factory=list)
    ingredients: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class MealEntry:
    """A meal logged by a user, with nutrition scaled at creation time."""

    user_id: str
    package_id: str
    portion_multiplier: float
    calories: int
    protein: int
    carbs: int
    fat: int
    meal_type: MealType
    date: date
    id: str | None = None
    created_at: datetime | None = None
