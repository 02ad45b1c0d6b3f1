"""User endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from balance_life.api.models import UserRegistrationRequest
from balance_life.api.serializers import serialize_user
from balance_life.services.users import UserRegistration

if TYPE_CHECKING:
    from balance_life.containers import AppContainer

router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
async def list_users(request: Request) -> list[dict[str, object]]:
    """Return every registered user."""
    container: AppContainer = request.app.state.container
    return [serialize_user(user) for user in container.user_service.list_users()]


@router.get("/{user_id}")
async def get_user(user_id: str, request: Request) -> dict[str, object]:
    """Return a single user."""
    container: AppContainer = request.app.state.container
    user = container.user_service.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="user not found"
        )
    return serialize_user(user)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserRegistrationRequest, request: Request
) -> dict[str, object]:
    """Register a user and compute their calorie and macro targets."""
    container: AppContainer = request.app.state.container
    user = container.user_service.register(
        UserRegistration(
            name=payload.name,
            email=payload.email,
            gender=payload.gender,
            birth_date=payload.birth_date,
            height=payload.height,
            weight=payload.weight,
            activity_level=payload.activity_level,
            goal=payload.goal,
            target_weight=payload.target_weight,
        )
    )
    return serialize_user(user)


@router.delete("/{user_id}")
async def delete_user(user_id: str, request: Request) -> dict[str, object]:
    """Delete a user and return the removed record."""
    container: AppContainer = request.app.state.container
    user = container.user_service.delete_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="user not found"
        )
    return serialize_user(user)
