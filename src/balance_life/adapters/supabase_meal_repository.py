"""Supabase repository for meal packages and meal entries."""

from dataclasses import dataclass
from datetime import date, datetime

from supabase import Client

from balance_life.adapters.supabase_queries import execute
from balance_life.domain.errors import PersistenceError
from balance_life.domain.meals import MealEntry, MealPackage, MealType
from balance_life.domain.users import GoalType
from balance_life.services.meals import MealRepository

_PACKAGE_COLUMNS = (
    "id, name, description, goal_type, meal_type, base_calories, base_protein, "
    "base_carbs, base_fat, image_url, preparation_steps, ingredients"
)
_ENTRY_COLUMNS = (
    "id, user_id, package_id, portion_multiplier, calories, protein, carbs, fat, "
    "meal_type, entry_date, created_at"
)


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal persistence."""

    client: Client

    def list_meal_packages(self, goal_type: GoalType) -> list[MealPackage]:
        """Return packages tagged with the goal or with no goal."""
        query = self.client.table("meal_packages").select(_PACKAGE_COLUMNS)
        if goal_type is not GoalType.ALL:
            query = query.in_("goal_type", [goal_type.value, GoalType.ALL.value])
        response = execute(query.order("name", desc=False), "list meal packages")
        return [_parse_package(row) for row in response.data or []]

    def get_meal_package(self, package_id: str) -> MealPackage | None:
        """Return a meal package by id."""
        query = (
            self.client.table("meal_packages")
            .select(_PACKAGE_COLUMNS)
            .eq("id", package_id)
            .limit(1)
        )
        response = execute(query, "fetch meal package")
        if response.data:
            return _parse_package(response.data[0])
        return None

    def create_meal_entry(self, entry: MealEntry) -> MealEntry:
        """Insert a meal entry and return the stored row."""
        query = self.client.table("meal_entries").insert(
            {
                "user_id": entry.user_id,
                "package_id": entry.package_id,
                "portion_multiplier": entry.portion_multiplier,
                "calories": entry.calories,
                "protein": entry.protein,
                "carbs": entry.carbs,
                "fat": entry.fat,
                "meal_type": entry.meal_type.value,
                "entry_date": entry.date.isoformat(),
            }
        )
        response = execute(query, "create meal entry")
        if not response.data:
            raise PersistenceError("Failed to create meal entry in Supabase")
        return _parse_entry(response.data[0])

    def list_meal_entries(
        self, user_id: str, start: date, end: date
    ) -> list[MealEntry]:
        """Return entries dated within [start, end]."""
        query = (
            self.client.table("meal_entries")
            .select(_ENTRY_COLUMNS)
            .eq("user_id", user_id)
            .gte("entry_date", start.isoformat())
            .lte("entry_date", end.isoformat())
            .order("entry_date", desc=False)
        )
        response = execute(query, "list meal entries")
        return [_parse_entry(row) for row in response.data or []]


def _parse_package(row: dict[str, object]) -> MealPackage:
    return MealPackage(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        description=str(row.get("description") or ""),
        goal_type=GoalType(row.get("goal_type") or ""),
        meal_type=MealType(row["meal_type"]),
        base_calories=int(row.get("base_calories") or 0),
        base_protein=int(row.get("base_protein") or 0),
        base_carbs=int(row.get("base_carbs") or 0),
        base_fat=int(row.get("base_fat") or 0),
        image_url=str(row.get("image_url") or ""),
        preparation_steps=list(row.get("preparation_steps") or []),
        ingredients=list(row.get("ingredients") or []),
    )


def _parse_entry(row: dict[str, object]) -> MealEntry:
    created_raw = row.get("created_at")
    return MealEntry(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        package_id=str(row["package_id"]),
        portion_multiplier=float(row.get("portion_multiplier") or 0.0),
        calories=int(row.get("calories") or 0),
        protein=int(row.get("protein") or 0),
        carbs=int(row.get("carbs") or 0),
        fat=int(row.get("fat") or 0),
        meal_type=MealType(row["meal_type"]),
        date=date.fromisoformat(str(row["entry_date"])[:10]),
        created_at=datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None,
    )
