"""Calorie and macro target calculations from a biometric profile.

The equations are the revised Harris-Benedict BMR scaled by a fixed activity
factor. They are simplified placeholders, not clinical guidance.
"""

from datetime import date

from balance_life.domain.users import ActivityLevel, Gender, GoalTargets, GoalType

GOAL_CALORIE_ADJUSTMENT = 500

PROTEIN_SHARE = 0.25
CARBS_SHARE = 0.5
FAT_SHARE = 0.25

CALORIES_PER_GRAM_PROTEIN = 4
CALORIES_PER_GRAM_CARBS = 4
CALORIES_PER_GRAM_FAT = 9

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.LOW: 1.2,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.HIGH: 1.9,
}


def compute_age(birth_date: date, as_of: date) -> int:
    """Return whole years between the dates.

    A year is subtracted when the day-of-year of ``as_of`` falls before the
    day-of-year of ``birth_date``.
    """
    age = as_of.year - birth_date.year
    if as_of.timetuple().tm_yday < birth_date.timetuple().tm_yday:
        age -= 1
    return age


def compute_bmr(weight_kg: float, height_cm: float, age: int, gender: Gender) -> float:
    """Return the basal metabolic rate in kcal/day."""
    if gender is Gender.MALE:
        return 88.362 + (13.397 * weight_kg) + (4.799 * height_cm) - (5.677 * age)
    # FEMALE and OTHER share the same equation.
    return 447.593 + (9.247 * weight_kg) + (3.098 * height_cm) - (4.330 * age)


def compute_base_calories(  # noqa: PLR0913
    weight_kg: float,
    height_cm: float,
    birth_date: date,
    gender: Gender,
    activity_level: ActivityLevel,
    as_of: date,
) -> int:
    """Return daily calorie need: BMR times activity factor, truncated."""
    age = compute_age(birth_date, as_of)
    bmr = compute_bmr(weight_kg, height_cm, age, gender)
    return int(bmr * ACTIVITY_MULTIPLIERS[activity_level])


def compute_goal(base_calories: int, goal_type: GoalType) -> GoalTargets:
    """Return calorie and macro targets for a LOSE or GAIN goal."""
    if goal_type is GoalType.LOSE:
        target_calories = base_calories - GOAL_CALORIE_ADJUSTMENT
    elif goal_type is GoalType.GAIN:
        target_calories = base_calories + GOAL_CALORIE_ADJUSTMENT
    else:
        raise ValueError(f"Goal targets need LOSE or GAIN, got {goal_type!r}")
    return GoalTargets(
        calories=target_calories,
        protein=int(target_calories * PROTEIN_SHARE / CALORIES_PER_GRAM_PROTEIN),
        carbs=int(target_calories * CARBS_SHARE / CALORIES_PER_GRAM_CARBS),
        fat=int(target_calories * FAT_SHARE / CALORIES_PER_GRAM_FAT),
    )
