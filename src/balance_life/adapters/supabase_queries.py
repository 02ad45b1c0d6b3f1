"""Shared execution of Supabase queries."""

from typing import Any

from postgrest.exceptions import APIError

from balance_life.domain.errors import PersistenceError


def execute(query: Any, action: str) -> Any:
    """Run a PostgREST query, reporting backend failures as PersistenceError."""
    try:
        return query.execute()
    except APIError as exc:
        message = f"Failed to {action} in Supabase: {exc.message}"
        raise PersistenceError(message) from exc
