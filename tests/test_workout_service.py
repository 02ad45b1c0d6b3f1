"""Tests for workout service."""

from datetime import date

import pytest

from balance_life.domain.errors import (
    DataIntegrityError,
    ReferenceNotFound,
    ValidationError,
)
from balance_life.services.cache import TTLPackageCache
from balance_life.services.workouts import WorkoutService
from tests.conftest import (
    InMemoryUserRepository,
    InMemoryWorkoutRepository,
    make_user,
    make_workout_package,
)


def _service(
    repository: InMemoryWorkoutRepository, users: InMemoryUserRepository
) -> WorkoutService:
    return WorkoutService(
        repository=repository,
        user_repository=users,
        cache=TTLPackageCache(),
        today=lambda: date(2024, 6, 1),
    )


def _users(**overrides: object) -> InMemoryUserRepository:
    user = make_user(**overrides)
    return InMemoryUserRepository(users={user.id: user})


def test_log_workout_uses_user_weight() -> None:
    repository = InMemoryWorkoutRepository(
        packages={"workout1": make_workout_package()}
    )
    service = _service(repository, _users(weight=90.0))

    entry = service.log_workout("usr1", "workout1", 1.2, 45, "2024-06-01")

    assert entry.id is not None
    assert entry.calories_burned == 694
    assert entry.date == date(2024, 6, 1)
    assert repository.entries == [entry]


def test_log_workout_unknown_user_is_reference_error() -> None:
    repository = InMemoryWorkoutRepository(
        packages={"workout1": make_workout_package()}
    )
    service = _service(repository, InMemoryUserRepository())

    with pytest.raises(ReferenceNotFound) as exc_info:
        service.log_workout("ghost", "workout1", 1.0, 30, "2024-06-01")

    assert exc_info.value.kind == "user"
    assert repository.entries == []


def test_log_workout_unknown_package_is_reference_error() -> None:
    service = _service(InMemoryWorkoutRepository(), _users())

    with pytest.raises(ReferenceNotFound) as exc_info:
        service.log_workout("usr1", "missing", 1.0, 30, "2024-06-01")

    assert exc_info.value.kind == "workout package"


@pytest.mark.parametrize(
    ("intensity", "duration", "field"),
    [
        (0.4, 30, "intensityMultiplier"),
        (2.1, 30, "intensityMultiplier"),
        (1.0, 4, "durationMinutes"),
        (1.0, 181, "durationMinutes"),
    ],
)
def test_log_workout_rejects_out_of_range(
    intensity: float, duration: int, field: str
) -> None:
    repository = InMemoryWorkoutRepository(
        packages={"workout1": make_workout_package()}
    )
    service = _service(repository, _users())

    with pytest.raises(ValidationError) as exc_info:
        service.log_workout("usr1", "workout1", intensity, duration, "2024-06-01")

    assert exc_info.value.field == field


def test_log_workout_zero_base_duration_is_integrity_error() -> None:
    repository = InMemoryWorkoutRepository(
        packages={"broken": make_workout_package(id="broken", base_duration_minutes=0)}
    )
    service = _service(repository, _users())

    with pytest.raises(DataIntegrityError):
        service.log_workout("usr1", "broken", 1.0, 30, "2024-06-01")

    assert repository.entries == []


def test_list_entries_inclusive_range() -> None:
    repository = InMemoryWorkoutRepository(
        packages={"workout1": make_workout_package()}
    )
    service = _service(repository, _users())
    service.log_workout("usr1", "workout1", 1.0, 30, "2024-05-31")
    service.log_workout("usr1", "workout1", 1.0, 30, "2024-06-01")

    entries = service.list_entries("usr1", "2024-05-31", "2024-05-31")

    assert len(entries) == 1
    assert entries[0].date == date(2024, 5, 31)
    assert len(service.list_entries("usr1")) == 1
