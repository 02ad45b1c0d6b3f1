"""Meal package browsing and meal logging."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Protocol

from balance_life.domain.entries import build_meal_entry
from balance_life.domain.errors import ReferenceNotFound
from balance_life.domain.meals import MealEntry, MealPackage
from balance_life.domain.users import GoalType
from balance_life.domain.validation import (
    check_portion_multiplier,
    parse_date,
    parse_date_range,
    parse_goal_filter,
    require,
    require_id,
)
from balance_life.services.cache import PackageCache, TTLPackageCache

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meal packages and entries."""

    def list_meal_packages(self, goal_type: GoalType) -> list[MealPackage]:
        """Return packages for a goal; ALL returns every package."""

    def get_meal_package(self, package_id: str) -> MealPackage | None:
        """Return a meal package by id, if present."""

    def create_meal_entry(self, entry: MealEntry) -> MealEntry:
        """Store a meal entry and return it with id and creation time."""

    def list_meal_entries(
        self, user_id: str, start: date, end: date
    ) -> list[MealEntry]:
        """Return a user's entries dated within [start, end]."""


def _today() -> date:
    return datetime.now(tz=UTC).date()


@dataclass
class MealService:
    """Service that scales meal packages into logged entries."""

    repository: MealRepository
    cache: PackageCache = field(default_factory=TTLPackageCache)
    today: Callable[[], date] = field(default=_today)

    def list_packages(self, goal_type: str | None = None) -> list[MealPackage]:
        """Return packages matching a goal filter."""
        return self.repository.list_meal_packages(parse_goal_filter(goal_type))

    def get_package(self, package_id: str) -> MealPackage | None:
        """Return a package by id, served from cache when fresh."""
        cached = self.cache.lookup("meal", package_id)
        if isinstance(cached, MealPackage):
            return cached
        package = self.repository.get_meal_package(package_id)
        if package is not None:
            self.cache.store("meal", package_id, package)
        return package

    def log_meal(
        self,
        user_id: str,
        package_id: str,
        portion_multiplier: float,
        entry_date: str,
    ) -> MealEntry:
        """Validate input, scale the package and store the entry."""
        user_id = require_id("userId", user_id)
        package_id = require_id("packageId", package_id)
        require(check_portion_multiplier(portion_multiplier))
        parsed_date = parse_date("date", entry_date)

        package = self.get_package(package_id)
        if package is None:
            raise ReferenceNotFound("meal package", package_id)

        entry = build_meal_entry(package, portion_multiplier, parsed_date, user_id)
        created = self.repository.create_meal_entry(entry)
        _logger.info(
            "Logged meal %s for user %s: %s kcal",
            created.id,
            user_id,
            created.calories,
        )
        return created

    def list_entries(
        self, user_id: str | None, start: str | None = None, end: str | None = None
    ) -> list[MealEntry]:
        """Return a user's meal entries in an inclusive date range."""
        user_id = require_id("userId", user_id)
        start_date, end_date = parse_date_range(start, end, self.today())
        return self.repository.list_meal_entries(user_id, start_date, end_date)
