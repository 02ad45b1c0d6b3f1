"""Workout package and workout entry endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from balance_life.api.models import WorkoutEntryRequest
from balance_life.api.serializers import (
    serialize_workout_entry,
    serialize_workout_package,
)

if TYPE_CHECKING:
    from balance_life.containers import AppContainer

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.get("/packages")
async def list_packages(
    request: Request,
    goal_type: str | None = Query(default=None, alias="goalType"),
) -> list[dict[str, object]]:
    """Return workout packages, optionally filtered by goal type."""
    container: AppContainer = request.app.state.container
    packages = container.workout_service.list_packages(goal_type)
    return [serialize_workout_package(package) for package in packages]


@router.get("/packages/{package_id}")
async def get_package(package_id: str, request: Request) -> dict[str, object]:
    """Return a single workout package."""
    container: AppContainer = request.app.state.container
    package = container.workout_service.get_package(package_id)
    if package is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="workout package not found"
        )
    return serialize_workout_package(package)


@router.post("/entries", status_code=status.HTTP_201_CREATED)
async def create_entry(
    payload: WorkoutEntryRequest, request: Request
) -> dict[str, object]:
    """Log a workout scaled by duration, intensity and body weight."""
    container: AppContainer = request.app.state.container
    entry = container.workout_service.log_workout(
        user_id=payload.user_id,
        package_id=payload.package_id,
        intensity_multiplier=payload.intensity_multiplier,
        duration_minutes=payload.duration_minutes,
        entry_date=payload.date,
    )
    return serialize_workout_entry(entry)


@router.get("/entries")
async def list_entries(
    request: Request,
    user_id: str | None = Query(default=None, alias="userId"),
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
) -> list[dict[str, object]]:
    """Return a user's workout entries between startDate and endDate inclusive."""
    container: AppContainer = request.app.state.container
    entries = container.workout_service.list_entries(user_id, start_date, end_date)
    return [serialize_workout_entry(entry) for entry in entries]
