"""Supabase repository for workout packages and workout entries."""

from dataclasses import dataclass
from datetime import date, datetime

from supabase import Client

from balance_life.adapters.supabase_queries import execute
from balance_life.domain.errors import PersistenceError
from balance_life.domain.users import GoalType
from balance_life.domain.workouts import WorkoutEntry, WorkoutPackage
from balance_life.services.workouts import WorkoutRepository

_PACKAGE_COLUMNS = (
    "id, name, description, goal_type, workout_type, base_duration_minutes, "
    "base_calories_burn, calories_burn_formula, image_url, instructions"
)
_ENTRY_COLUMNS = (
    "id, user_id, package_id, intensity_multiplier, duration_minutes, "
    "calories_burned, entry_date, created_at"
)


@dataclass
class SupabaseWorkoutRepository(WorkoutRepository):
    """Supabase implementation for workout persistence."""

    client: Client

    def list_workout_packages(self, goal_type: GoalType) -> list[WorkoutPackage]:
        """Return packages tagged with the goal or with no goal."""
        query = self.client.table("workout_packages").select(_PACKAGE_COLUMNS)
        if goal_type is not GoalType.ALL:
            query = query.in_("goal_type", [goal_type.value, GoalType.ALL.value])
        response = execute(query.order("name", desc=False), "list workout packages")
        return [_parse_package(row) for row in response.data or []]

    def get_workout_package(self, package_id: str) -> WorkoutPackage | None:
        """Return a workout package by id."""
        query = (
            self.client.table("workout_packages")
            .select(_PACKAGE_COLUMNS)
            .eq("id", package_id)
            .limit(1)
        )
        response = execute(query, "fetch workout package")
        if response.data:
            return _parse_package(response.data[0])
        return None

    def create_workout_entry(self, entry: WorkoutEntry) -> WorkoutEntry:
        """Insert a workout entry and return the stored row."""
        query = self.client.table("workout_entries").insert(
            {
                "user_id": entry.user_id,
                "package_id": entry.package_id,
                "intensity_multiplier": entry.intensity_multiplier,
                "duration_minutes": entry.duration_minutes,
                "calories_burned": entry.calories_burned,
                "entry_date": entry.date.isoformat(),
            }
        )
        response = execute(query, "create workout entry")
        if not response.data:
            raise PersistenceError("Failed to create workout entry in Supabase")
        return _parse_entry(response.data[0])

    def list_workout_entries(
        self, user_id: str, start: date, end: date
    ) -> list[WorkoutEntry]:
        """Return entries dated within [start, end]."""
        query = (
            self.client.table("workout_entries")
            .select(_ENTRY_COLUMNS)
            .eq("user_id", user_id)
            .gte("entry_date", start.isoformat())
            .lte("entry_date", end.isoformat())
            .order("entry_date", desc=False)
        )
        response = execute(query, "list workout entries")
        return [_parse_entry(row) for row in response.data or []]


def _parse_package(row: dict[str, object]) -> WorkoutPackage:
    return WorkoutPackage(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        description=str(row.get("description") or ""),
        goal_type=GoalType(row.get("goal_type") or ""),
        workout_type=str(row.get("workout_type") or ""),
        base_duration_minutes=int(row.get("base_duration_minutes") or 0),
        base_calories_burn=int(row.get("base_calories_burn") or 0),
        calories_burn_formula=str(row.get("calories_burn_formula") or ""),
        image_url=str(row.get("image_url") or ""),
        instructions=list(row.get("instructions") or []),
    )


def _parse_entry(row: dict[str, object]) -> WorkoutEntry:
    created_raw = row.get("created_at")
    return WorkoutEntry(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        package_id=str(row["package_id"]),
        intensity_multiplier=float(row.get("intensity_multiplier") or 0.0),
        duration_minutes=int(row.get("duration_minutes") or 0),
        calories_burned=int(row.get("calories_burned") or 0),
        date=date.fromisoformat(str(row["entry_date"])[:10]),
        created_at=datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None,
    )
