"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import date, datetime

from supabase import Client

from balance_life.adapters.supabase_queries import execute
from balance_life.domain.errors import PersistenceError
from balance_life.domain.users import ActivityLevel, Gender, GoalInfo, GoalType, User
from balance_life.services.users import UserRepository

_USER_COLUMNS = (
    "id, name, email, gender, birth_date, height, weight, activity_level, "
    "goal_type, target_calories, target_protein, target_carbs, target_fat, "
    "goal_start_date, start_weight, target_weight, created_at, last_login_at"
)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def list_users(self) -> list[User]:
        """Return all users ordered by creation time."""
        query = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .order("created_at", desc=False)
        )
        response = execute(query, "list users")
        return [_parse_user(row) for row in response.data or []]

    def get_user(self, user_id: str) -> User | None:
        """Return a user by id, if present."""
        query = (
            self.client.table("users").select(_USER_COLUMNS).eq("id", user_id).limit(1)
        )
        response = execute(query, "fetch user")
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, user: User) -> User:
        """Insert a user row and return the stored user."""
        query = self.client.table("users").insert(_user_payload(user))
        response = execute(query, "create user")
        if not response.data:
            raise PersistenceError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def delete_user(self, user_id: str) -> User | None:
        """Delete a user row and return it."""
        existing = self.get_user(user_id)
        if existing is None:
            return None
        execute(self.client.table("users").delete().eq("id", user_id), "delete user")
        return existing


def _user_payload(user: User) -> dict[str, object]:
    return {
        "name": user.name,
        "email": user.email,
        "gender": user.gender.value,
        "birth_date": user.birth_date.isoformat(),
        "height": user.height,
        "weight": user.weight,
        "activity_level": user.activity_level.value,
        "goal_type": user.goal.type.value,
        "target_calories": user.goal.target_calories,
        "target_protein": user.goal.target_protein,
        "target_carbs": user.goal.target_carbs,
        "target_fat": user.goal.target_fat,
        "goal_start_date": user.goal.start_date.isoformat(),
        "start_weight": user.goal.start_weight,
        "target_weight": user.goal.target_weight,
        "created_at": user.created_at.isoformat(),
        "last_login_at": user.last_login_at.isoformat(),
    }


def _parse_user(row: dict[str, object]) -> User:
    target_weight = row.get("target_weight")
    return User(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        email=str(row.get("email") or ""),
        gender=Gender(row["gender"]),
        birth_date=date.fromisoformat(str(row["birth_date"])[:10]),
        height=float(row.get("height") or 0.0),
        weight=float(row.get("weight") or 0.0),
        activity_level=ActivityLevel(row["activity_level"]),
        goal=GoalInfo(
            type=GoalType(row["goal_type"]),
            target_calories=int(row.get("target_calories") or 0),
            target_protein=int(row.get("target_protein") or 0),
            target_carbs=int(row.get("target_carbs") or 0),
            target_fat=int(row.get("target_fat") or 0),
            start_date=datetime.fromisoformat(str(row["goal_start_date"])),
            start_weight=float(row.get("start_weight") or 0.0),
            target_weight=float(target_weight)
            if isinstance(target_weight, int | float)
            else None,
        ),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        last_login_at=datetime.fromisoformat(str(row["last_login_at"])),
    )
