"""Query execution shared by the Supabase repositories."""

from typing import Any

from postgrest.exceptions import APIError

from library_backend.domain.errors import StorageError


def execute(query: Any, failure: str) -> Any:
    """Run a query builder, turning PostgREST errors into StorageError."""
    try:
        return query.execute()
    except APIError as exc:
        raise StorageError(failure) from exc


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value only matches itself."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
