"""Scaling of packages into logged meal and workout entries."""

from datetime import date

from balance_life.domain.errors import DataIntegrityError
from balance_life.domain.meals import MealEntry, MealPackage
from balance_life.domain.users import User
from balance_life.domain.workouts import WorkoutEntry, WorkoutPackage

REFERENCE_WEIGHT_KG = 70.0


def build_meal_entry(
    package: MealPackage,
    portion_multiplier: float,
    entry_date: date,
    user_id: str,
) -> MealEntry:
    """Scale a meal package by a portion multiplier.

    Each nutrient is truncated independently. The entry has no id or
    creation time until it is stored.
    """
    return MealEntry(
        user_id=user_id,
        package_id=package.id,
        portion_multiplier=portion_multiplier,
        calories=int(package.base_calories * portion_multiplier),
        protein=int(package.base_protein * portion_multiplier),
        carbs=int(package.base_carbs * portion_multiplier),
        fat=int(package.base_fat * portion_multiplier),
        meal_type=package.meal_type,
        date=entry_date,
    )


def build_workout_entry(
    package: WorkoutPackage,
    user: User,
    intensity_multiplier: float,
    duration_minutes: int,
    entry_date: date,
) -> WorkoutEntry:
    """Scale a workout package by duration, intensity and body weight."""
    if user.id is None:
        raise ValueError("Workout entries require a stored user")
    calories_burned = compute_calories_burned(
        package, user.weight, intensity_multiplier, duration_minutes
    )
    return WorkoutEntry(
        user_id=user.id,
        package_id=package.id,
        intensity_multiplier=intensity_multiplier,
        duration_minutes=duration_minutes,
        calories_burned=calories_burned,
        date=entry_date,
    )


def compute_calories_burned(
    package: WorkoutPackage,
    weight_kg: float,
    intensity_multiplier: float,
    duration_minutes: int,
) -> int:
    """Return calories burned, truncated, for a workout session."""
    if package.base_duration_minutes <= 0:
        raise DataIntegrityError(
            f"Workout package {package.id} has invalid base duration "
            f"{package.base_duration_minutes}"
        )
    return int(
        package.base_calories_burn
        * (duration_minutes / package.base_duration_minutes)
        * intensity_multiplier
        * (weight_kg / REFERENCE_WEIGHT_KG)
    )
