"""Tests for meal and workout entry scaling."""

import math
from datetime import date

import pytest

from balance_life.domain.entries import build_meal_entry, build_workout_entry
from balance_life.domain.errors import DataIntegrityError
from balance_life.domain.meals import MealType
from tests.conftest import make_meal_package, make_user, make_workout_package

ENTRY_DATE = date(2024, 6, 1)


def test_meal_entry_scales_each_nutrient() -> None:
    package = make_meal_package(
        base_calories=450, base_protein=25, base_carbs=55, base_fat=15
    )

    entry = build_meal_entry(package, 1.5, ENTRY_DATE, user_id="usr1")

    assert entry.calories == 675
    assert entry.protein == 37
    assert entry.carbs == 82
    assert entry.fat == 22
    assert entry.meal_type is MealType.BREAKFAST
    assert entry.package_id == package.id
    assert entry.user_id == "usr1"
    assert entry.date == ENTRY_DATE
    assert entry.id is None
    assert entry.created_at is None


def test_meal_entry_truncates_rather_than_rounds() -> None:
    package = make_meal_package(
        base_calories=333, base_protein=7, base_carbs=9, base_fat=3
    )

    entry = build_meal_entry(package, 0.5, ENTRY_DATE, user_id="usr1")

    assert (entry.calories, entry.protein, entry.carbs, entry.fat) == (166, 3, 4, 1)


def test_meal_entry_scaling_is_linear() -> None:
    package = make_meal_package()

    half = build_meal_entry(package, 0.5, ENTRY_DATE, user_id="usr1")
    whole = build_meal_entry(package, 1.0, ENTRY_DATE, user_id="usr1")

    assert whole.calories == 2 * half.calories
    assert whole.protein == 2 * half.protein
    assert whole.carbs == 2 * half.carbs
    assert whole.fat == 2 * half.fat


def test_workout_entry_reference_conditions_return_base_burn() -> None:
    package = make_workout_package(base_duration_minutes=40, base_calories_burn=355)
    user = make_user(weight=70.0)

    entry = build_workout_entry(package, user, 1.0, 40, ENTRY_DATE)

    assert entry.calories_burned == 355


def test_workout_entry_scales_by_duration_intensity_and_weight() -> None:
    package = make_workout_package(base_duration_minutes=30, base_calories_burn=300)
    user = make_user(weight=90.0)

    entry = build_workout_entry(package, user, 1.2, 45, ENTRY_DATE)

    assert entry.calories_burned == 694
    assert entry.user_id == user.id
    assert entry.duration_minutes == 45
    assert entry.intensity_multiplier == 1.2


@pytest.mark.parametrize("base_duration", [0, -10])
def test_workout_entry_rejects_invalid_base_duration(base_duration: int) -> None:
    package = make_workout_package(base_duration_minutes=base_duration)

    with pytest.raises(DataIntegrityError, match="invalid base duration"):
        build_workout_entry(package, make_user(), 1.0, 30, ENTRY_DATE)


def test_workout_entry_result_is_finite_integer() -> None:
    package = make_workout_package(base_duration_minutes=1, base_calories_burn=10)

    entry = build_workout_entry(package, make_user(weight=200.0), 2.0, 180, ENTRY_DATE)

    assert isinstance(entry.calories_burned, int)
    assert math.isfinite(entry.calories_burned)
