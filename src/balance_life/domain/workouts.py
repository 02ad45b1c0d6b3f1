"""Domain models for workout packages and logged workouts."""

from dataclasses import dataclass, field
from datetime import date, datetime

from balance_life.domain.users import GoalType


@dataclass(frozen=True)
class WorkoutPackage:
    """Predefined workout with a reference duration and calorie burn."""

    id: str
    name: str
    description: str
    goal_type: GoalType
    workout_type: str
    base_duration_minutes: int
    base_calories_burn: int
    calories_burn_formula: str = ""
    image_url: str = ""
    instructions: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class WorkoutEntry:
    """A workout logged by a user, with calories burned computed at creation."""

    user_id: str
    package_id: str
    intensity_multiplier: float
    duration_minutes: int
    calories_burned: int
    date: date
    id: str | None = None
    created_at: datetime | None = None
