"""User registration and lookup."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

from balance_life.domain.metabolism import compute_base_calories, compute_goal
from balance_life.domain.users import GoalInfo, User
from balance_life.domain.validation import (
    MAX_HEIGHT_CM,
    MAX_WEIGHT_KG,
    check_positive,
    parse_activity_level,
    parse_date,
    parse_gender,
    parse_goal_type,
    require,
)

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for users."""

    def list_users(self) -> list[User]:
        """Return all users."""

    def get_user(self, user_id: str) -> User | None:
        """Return a user by id, if present."""

    def create_user(self, user: User) -> User:
        """Store a new user and return it with its id."""

    def delete_user(self, user_id: str) -> User | None:
        """Delete a user and return the removed record, if it existed."""


@dataclass(frozen=True)
class UserRegistration:
    """Unvalidated registration input."""

    name: str
    email: str
    gender: str
    birth_date: str
    height: float
    weight: float
    activity_level: str
    goal: str
    target_weight: float | None = None


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository
    clock: Callable[[], datetime] = field(default=_utcnow)

    def register(self, registration: UserRegistration) -> User:
        """Validate biometrics, derive goal targets and store the user."""
        birth_date = parse_date("birthDate", registration.birth_date)
        gender = parse_gender(registration.gender)
        activity_level = parse_activity_level(registration.activity_level)
        goal_type = parse_goal_type(registration.goal)
        require(check_positive("height", registration.height, MAX_HEIGHT_CM))
        require(check_positive("weight", registration.weight, MAX_WEIGHT_KG))
        if registration.target_weight is not None:
            require(
                check_positive(
                    "targetWeight", registration.target_weight, MAX_WEIGHT_KG
                )
            )

        now = self.clock()
        base_calories = compute_base_calories(
            weight_kg=registration.weight,
            height_cm=registration.height,
            birth_date=birth_date,
            gender=gender,
            activity_level=activity_level,
            as_of=now.date(),
        )
        targets = compute_goal(base_calories, goal_type)
        user = User(
            id=None,
            name=registration.name,
            email=registration.email,
            gender=gender,
            birth_date=birth_date,
            height=registration.height,
            weight=registration.weight,
            activity_level=activity_level,
            goal=GoalInfo(
                type=goal_type,
                target_calories=targets.calories,
                target_protein=targets.protein,
                target_carbs=targets.carbs,
                target_fat=targets.fat,
                start_date=now,
                start_weight=registration.weight,
                target_weight=registration.target_weight,
            ),
            created_at=now,
            last_login_at=now,
        )
        created = self.repository.create_user(user)
        _logger.info(
            "Registered user %s with target %s kcal", created.id, targets.calories
        )
        return created

    def get_user(self, user_id: str) -> User | None:
        """Return a user by id."""
        return self.repository.get_user(user_id)

    def list_users(self) -> list[User]:
        """Return all users."""
        return self.repository.list_users()

    def delete_user(self, user_id: str) -> User | None:
        """Delete a user, returning the removed record."""
        deleted = self.repository.delete_user(user_id)
        if deleted is not None:
            _logger.info("Deleted user %s", user_id)
        return deleted
