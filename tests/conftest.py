"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

from balance_life.config import Settings
from balance_life.containers import AppContainer
from balance_life.domain.meals import MealEntry, MealPackage, MealType
from balance_life.domain.users import (
    ActivityLevel,
    Gender,
    GoalInfo,
    GoalType,
    User,
)
from balance_life.domain.workouts import WorkoutEntry, WorkoutPackage
from balance_life.services.cache import TTLPackageCache
from balance_life.services.meals import MealRepository, MealService
from balance_life.services.users import UserRepository, UserService
from balance_life.services.workouts import WorkoutRepository, WorkoutService

FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[str, User] = field(default_factory=dict)

    def list_users(self) -> list[User]:
        return list(self.users.values())

    def get_user(self, user_id: str) -> User | None:
        return self.users.get(user_id)

    def create_user(self, user: User) -> User:
        created = replace(user, id=str(uuid4()))
        self.users[created.id] = created
        return created

    def delete_user(self, user_id: str) -> User | None:
        return self.users.pop(user_id, None)


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    packages: dict[str, MealPackage] = field(default_factory=dict)
    entries: list[MealEntry] = field(default_factory=list)
    package_lookups: int = 0

    def list_meal_packages(self, goal_type: GoalType) -> list[MealPackage]:
        return [
            package
            for package in self.packages.values()
            if goal_type is GoalType.ALL
            or package.goal_type in {goal_type, GoalType.ALL}
        ]

    def get_meal_package(self, package_id: str) -> MealPackage | None:
        self.package_lookups += 1
        return self.packages.get(package_id)

    def create_meal_entry(self, entry: MealEntry) -> MealEntry:
        created = replace(entry, id=str(uuid4()), created_at=datetime.now(tz=UTC))
        self.entries.append(created)
        return created

    def list_meal_entries(
        self, user_id: str, start: date, end: date
    ) -> list[MealEntry]:
        return [
            entry
            for entry in self.entries
            if entry.user_id == user_id and start <= entry.date <= end
        ]


@dataclass
class InMemoryWorkoutRepository(WorkoutRepository):
    """In-memory workout repository for tests."""

    packages: dict[str, WorkoutPackage] = field(default_factory=dict)
    entries: list[WorkoutEntry] = field(default_factory=list)

    def list_workout_packages(self, goal_type: GoalType) -> list[WorkoutPackage]:
        return [
            package
            for package in self.packages.values()
            if goal_type is GoalType.ALL
            or package.goal_type in {goal_type, GoalType.ALL}
        ]

    def get_workout_package(self, package_id: str) -> WorkoutPackage | None:
        return self.packages.get(package_id)

    def create_workout_entry(self, entry: WorkoutEntry) -> WorkoutEntry:
        created = replace(entry, id=str(uuid4()), created_at=datetime.now(tz=UTC))
        self.entries.append(created)
        return created

    def list_workout_entries(
        self, user_id: str, start: date, end: date
    ) -> list[WorkoutEntry]:
        return [
            entry
            for entry in self.entries
            if entry.user_id == user_id and start <= entry.date <= end
        ]


def make_meal_package(**overrides: object) -> MealPackage:
    values: dict[str, object] = {
        "id": "meal1",
        "name": "Oatmeal Bowl",
        "description": "Oats with berries",
        "goal_type": GoalType.LOSE,
        "meal_type": MealType.BREAKFAST,
        "base_calories": 400,
        "base_protein": 20,
        "base_carbs": 60,
        "base_fat": 10,
    }
    values.update(overrides)
    return MealPackage(**values)


def make_workout_package(**overrides: object) -> WorkoutPackage:
    values: dict[str, object] = {
        "id": "workout1",
        "name": "Interval Run",
        "description": "Alternating sprints",
        "goal_type": GoalType.LOSE,
        "workout_type": "CARDIO",
        "base_duration_minutes": 30,
        "base_calories_burn": 300,
    }
    values.update(overrides)
    return WorkoutPackage(**values)


def make_user(**overrides: object) -> User:
    values: dict[str, object] = {
        "id": "usr1",
        "name": "John Doe",
        "email": "john@example.com",
        "gender": Gender.MALE,
        "birth_date": date(1990, 1, 10),
        "height": 180.0,
        "weight": 70.0,
        "activity_level": ActivityLevel.MODERATE,
        "goal": GoalInfo(
            type=GoalType.LOSE,
            target_calories=2337,
            target_protein=146,
            target_carbs=292,
            target_fat=64,
            start_date=FIXED_NOW,
            start_weight=70.0,
        ),
        "created_at": FIXED_NOW,
        "last_login_at": FIXED_NOW,
    }
    values.update(overrides)
    return User(**values)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository(packages={"meal1": make_meal_package()})


@pytest.fixture
def workout_repository() -> InMemoryWorkoutRepository:
    return InMemoryWorkoutRepository(packages={"workout1": make_workout_package()})


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    meal_repository: InMemoryMealRepository,
    workout_repository: InMemoryWorkoutRepository,
) -> AppContainer:
    cache = TTLPackageCache()
    user_service = UserService(user_repository, clock=lambda: FIXED_NOW)
    meal_service = MealService(
        repository=meal_repository,
        cache=cache,
        today=lambda: FIXED_NOW.date(),
    )
    workout_service = WorkoutService(
        repository=workout_repository,
        user_repository=user_repository,
        cache=cache,
        today=lambda: FIXED_NOW.date(),
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=user_service,
        meal_service=meal_service,
        workout_service=workout_service,
        close_resources=close_resources,
    )
