"""Resolve the acting principal of a request."""

from library_backend.domain.errors import AuthenticationMissingError


def resolve_principal(api_tokens: dict[str, str], token: str | None) -> str:
    """Return the principal name registered for an API token."""
    if not token:
        raise AuthenticationMissingError("Missing API token")
    principal = api_tokens.get(token)
    if principal is None:
        raise AuthenticationMissingError("Unknown API token")
    return principal
