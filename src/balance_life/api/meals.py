"""Meal package and meal entry endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from balance_life.api.models import MealEntryRequest
from balance_life.api.serializers import serialize_meal_entry, serialize_meal_package

if TYPE_CHECKING:
    from balance_life.containers import AppContainer

router = APIRouter(prefix="/meals", tags=["meals"])


@router.get("/packages")
async def list_packages(
    request: Request,
    goal_type: str | None = Query(default=None, alias="goalType"),
) -> list[dict[str, object]]:
    """Return meal packages, optionally filtered by goal type."""
    container: AppContainer = request.app.state.container
    packages = container.meal_service.list_packages(goal_type)
    return [serialize_meal_package(package) for package in packages]


@router.get("/packages/{package_id}")
async def get_package(package_id: str, request: Request) -> dict[str, object]:
    """Return a single meal package."""
    container: AppContainer = request.app.state.container
    package = container.meal_service.get_package(package_id)
    if package is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="meal package not found"
        )
    return serialize_meal_package(package)


@router.post("/entries", status_code=status.HTTP_201_CREATED)
async def create_entry(
    payload: MealEntryRequest, request: Request
) -> dict[str, object]:
    """Log a meal scaled by the portion multiplier."""
    container: AppContainer = request.app.state.container
    entry = container.meal_service.log_meal(
        user_id=payload.user_id,
        package_id=payload.package_id,
        portion_multiplier=payload.portion_multiplier,
        entry_date=payload.date,
    )
    return serialize_meal_entry(entry)


@router.get("/entries")
async def list_entries(
    request: Request,
    user_id: str | None = Query(default=None, alias="userId"),
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
) -> list[dict[str, object]]:
    """Return a user's meal entries between startDate and endDate inclusive."""
    container: AppContainer = request.app.state.container
    entries = container.meal_service.list_entries(user_id, start_date, end_date)
    return [serialize_meal_entry(entry) for entry in entries]
