"""JSON serialization of domain objects for API responses."""

from datetime import datetime

from balance_life.domain.meals import MealEntry, MealPackage
from balance_life.domain.users import User
from balance_life.domain.workouts import WorkoutEntry, WorkoutPackage


def serialize_user(user: User) -> dict[str, object]:
    """Serialize a user; credentials are never part of the payload."""
    return {
        "userId": user.id,
        "name": user.name,
        "email": user.email,
        "gender": user.gender.value,
        "birthDate": user.birth_date.isoformat(),
        "height": user.height,
        "weight": user.weight,
        "activityLevel": user.activity_level.value,
        "goal": {
            "type": user.goal.type.value,
            "targetCalories": user.goal.target_calories,
            "targetProtein": user.goal.target_protein,
            "targetCarbs": user.goal.target_carbs,
            "targetFat": user.goal.target_fat,
            "startDate": user.goal.start_date.isoformat(),
            "startWeight": user.goal.start_weight,
            "targetWeight": user.goal.target_weight,
        },
        "createdAt": user.created_at.isoformat(),
        "lastLoginAt": user.last_login_at.isoformat(),
    }


def serialize_meal_package(package: MealPackage) -> dict[str, object]:
    return {
        "packageId": package.id,
        "name": package.name,
        "description": package.description,
        "goalType": package.goal_type.value,
        "mealType": package.meal_type.value,
        "baseCalories": package.base_calories,
        "baseProtein": package.base_protein,
        "baseCarbs": package.base_carbs,
        "baseFat": package.base_fat,
        "imageUrl": package.image_url,
        "preparationSteps": package.preparation_steps,
        "ingredients": package.ingredients,
    }


def serialize_meal_entry(entry: MealEntry) -> dict[str, object]:
    return {
        "entryId": entry.id,
        "userId": entry.user_id,
        "packageId": entry.package_id,
        "portionMultiplier": entry.portion_multiplier,
        "calories": entry.calories,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fat": entry.fat,
        "mealType": entry.meal_type.value,
        "date": entry.date.isoformat(),
        "createdAt": _format_timestamp(entry.created_at),
    }


def serialize_workout_package(package: WorkoutPackage) -> dict[str, object]:
    return {
        "packageId": package.id,
        "name": package.name,
        "description": package.description,
        "goalType": package.goal_type.value,
        "workoutType": package.workout_type,
        "baseDurationMinutes": package.base_duration_minutes,
        "baseCaloriesBurn": package.base_calories_burn,
        "caloriesBurnFormula": package.calories_burn_formula,
        "imageUrl": package.image_url,
        "instructions": package.instructions,
    }


def serialize_workout_entry(entry: WorkoutEntry) -> dict[str, object]:
    return {
        "entryId": entry.id,
        "userId": entry.user_id,
        "packageId": entry.package_id,
        "intensityMultiplier": entry.intensity_multiplier,
        "durationMinutes": entry.duration_minutes,
        "caloriesBurned": entry.calories_burned,
        "date": entry.date.isoformat(),
        "createdAt": _format_timestamp(entry.created_at),
    }


def _format_timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
