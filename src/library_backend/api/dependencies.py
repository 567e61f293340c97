"""Shared FastAPI dependencies."""

from fastapi import Depends, Header, HTTPException, Request, status

from library_backend.containers import AppContainer
from library_backend.domain.errors import AuthenticationMissingError
from library_backend.services.identity import resolve_principal


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def require_principal(
    x_api_token: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> str:
    """Resolve the calling principal from the X-Api-Token header."""
    try:
        return resolve_principal(container.api_tokens, x_api_token)
    except AuthenticationMissingError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)
        ) from exc
