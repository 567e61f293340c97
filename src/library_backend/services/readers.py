"""Reader registration and lookup."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol

from library_backend.domain.errors import ElementNotFoundError
from library_backend.domain.readers import Reader


class ReaderRepository(Protocol):
    """Persistence interface for readers."""

    def create_reader(
        self,
        first_name: str,
        last_name: str,
        email: str | None,
        account_created: date,
    ) -> Reader:
        """Create a reader and return it."""

    def get_reader(self, reader_id: int) -> Reader | None:
        """Return a reader by id, if present."""

    def list_readers(self) -> list[Reader]:
        """Return all readers."""

    def delete_reader(self, reader_id: int) -> bool:
        """Delete a reader, returning false when nothing was removed."""

    def count_readers(self) -> int:
        """Return the number of readers."""


@dataclass
class ReaderService:
    """Application service for readers."""

    repository: ReaderRepository

    def register_reader(
        self, first_name: str, last_name: str, email: str | None = None
    ) -> Reader:
        """Register a new reader with today's account date."""
        return self.repository.create_reader(
            first_name,
            last_name,
            email,
            account_created=datetime.now(tz=UTC).date(),
        )

    def get_reader(self, reader_id: int) -> Reader:
        """Return a reader or raise when it does not exist."""
        reader = self.repository.get_reader(reader_id)
        if reader is None:
            raise ElementNotFoundError("Reader", reader_id)
        return reader

    def list_readers(self) -> list[Reader]:
        return self.repository.list_readers()

    def delete_reader(self, reader_id: int) -> None:
        if not self.repository.delete_reader(reader_id):
            raise ElementNotFoundError("Reader", reader_id)
