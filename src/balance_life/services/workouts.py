"""Workout package browsing and workout logging."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Protocol

from balance_life.domain.entries import build_workout_entry
from balance_life.domain.errors import ReferenceNotFound
from balance_life.domain.users import GoalType
from balance_life.domain.validation import (
    check_duration_minutes,
    check_intensity_multiplier,
    parse_date,
    parse_date_range,
    parse_goal_filter,
    require,
    require_id,
)
from balance_life.domain.workouts import WorkoutEntry, WorkoutPackage
from balance_life.services.cache import PackageCache, TTLPackageCache
from balance_life.services.users import UserRepository

_logger = logging.getLogger(__name__)


class WorkoutRepository(Protocol):
    """Persistence interface for workout packages and entries."""

    def list_workout_packages(self, goal_type: GoalType) -> list[WorkoutPackage]:
        """Return packages for a goal; ALL returns every package."""

    def get_workout_package(self, package_id: str) -> WorkoutPackage | None:
        """Return a workout package by id, if present."""

    def create_workout_entry(self, entry: WorkoutEntry) -> WorkoutEntry:
        """Store a workout entry and return it with id and creation time."""

    def list_workout_entries(
        self, user_id: str, start: date, end: date
    ) -> list[WorkoutEntry]:
        """Return a user's entries dated within [start, end]."""


def _today() -> date:
    return datetime.now(tz=UTC).date()


@dataclass
class WorkoutService:
    """Service that scales workout packages into logged entries."""

    repository: WorkoutRepository
    user_repository: UserRepository
    cache: PackageCache = field(default_factory=TTLPackageCache)
    today: Callable[[], date] = field(default=_today)

    def list_packages(self, goal_type: str | None = None) -> list[WorkoutPackage]:
        """Return packages matching a goal filter."""
        return self.repository.list_workout_packages(parse_goal_filter(goal_type))

    def get_package(self, package_id: str) -> WorkoutPackage | None:
        """Return a package by id, served from cache when fresh."""
        cached = self.cache.lookup("workout", package_id)
        if isinstance(cached, WorkoutPackage):
            return cached
        package = self.repository.get_workout_package(package_id)
        if package is not None:
            self.cache.store("workout", package_id, package)
        return package

    def log_workout(  # noqa: PLR0913
        self,
        user_id: str,
        package_id: str,
        intensity_multiplier: float,
        duration_minutes: int,
        entry_date: str,
    ) -> WorkoutEntry:
        """Validate input, compute calories burned and store the entry."""
        user_id = require_id("userId", user_id)
        package_id = require_id("packageId", package_id)
        require(check_intensity_multiplier(intensity_multiplier))
        require(check_duration_minutes(duration_minutes))
        parsed_date = parse_date("date", entry_date)

        package = self.get_package(package_id)
        if package is None:
            raise ReferenceNotFound("workout package", package_id)
        user = self.user_repository.get_user(user_id)
        if user is None:
            raise ReferenceNotFound("user", user_id)

        entry = build_workout_entry(
            package, user, intensity_multiplier, duration_minutes, parsed_date
        )
        created = self.repository.create_workout_entry(entry)
        _logger.info(
            "Logged workout %s for user %s: %s kcal burned",
            created.id,
            user_id,
            created.calories_burned,
        )
        return created

    def list_entries(
        self, user_id: str | None, start: str | None = None, end: str | None = None
    ) -> list[WorkoutEntry]:
        """Return a user's workout entries in an inclusive date range."""
        user_id = require_id("userId", user_id)
        start_date, end_date = parse_date_range(start, end, self.today())
        return self.repository.list_workout_entries(user_id, start_date, end_date)
