"""Domain exceptions shared across services and adapters."""


class ElementNotFoundError(LookupError):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity: str, entity_id: object) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class StorageError(RuntimeError):
    """Raised when the database rejects or loses a write."""


class AuthenticationMissingError(PermissionError):
    """Raised when a request carries no recognised principal."""


class CopyUnavailableError(ValueError):
    """Raised when renting a copy that is not available."""
