"""Services for physical copies."""

from dataclasses import dataclass
from typing import Protocol

from library_backend.domain.copies import Copy, CopyStatus
from library_backend.domain.errors import ElementNotFoundError
from library_backend.services.books import BookRepository


class CopyRepository(Protocol):
    """Persistence interface for copies."""

    def create_copy(self, book_id: int, status: CopyStatus) -> Copy:
        """Create a copy and return it."""

    def get_copy(self, copy_id: int) -> Copy | None:
        """Return a copy by id, if present."""

    def list_copies(self) -> list[Copy]:
        """Return all copies."""

    def list_copies_for_books(
        self, book_ids: list[int], status: CopyStatus
    ) -> list[Copy]:
        """Return copies of the given books that have the given status."""

    def update_status(self, copy_id: int, status: CopyStatus) -> Copy:
        """Set the status of a copy and return it."""

    def delete_copy(self, copy_id: int) -> bool:
        """Delete a copy, returning false when nothing was removed."""

    def count_by_status(self) -> dict[CopyStatus, int]:
        """Return the number of copies for each status."""


@dataclass
class CopyService:
    """Application service for copies."""

    repository: CopyRepository
    book_repository: BookRepository

    def save_copy(
        self, book_id: int, status: CopyStatus = CopyStatus.AVAILABLE
    ) -> Copy:
        """Add a copy of an existing book."""
        if self.book_repository.get_book(book_id) is None:
            raise ElementNotFoundError("Book", book_id)
        return self.repository.create_copy(book_id, status)

    def find_copy(self, copy_id: int) -> Copy:
        """Return a copy or raise when it does not exist."""
        copy = self.repository.get_copy(copy_id)
        if copy is None:
            raise ElementNotFoundError("Copy", copy_id)
        return copy

    def find_all_copies(self) -> list[Copy]:
        """Return every copy."""
        return self.repository.list_copies()

    def available_copies_for_title(self, title: str) -> list[Copy]:
        """Return available copies of books with the given title."""
        books = self.book_repository.find_by_title(title)
        if not books:
            return []
        return self.repository.list_copies_for_books(
            [book.id for book in books], CopyStatus.AVAILABLE
        )

    def change_status(self, copy_id: int, status: CopyStatus) -> Copy:
        """Change the status of an existing copy."""
        self.find_copy(copy_id)
        return self.repository.update_status(copy_id, status)

    def delete_copy(self, copy_id: int) -> None:
        """Remove a copy."""
        if not self.repository.delete_copy(copy_id):
            raise ElementNotFoundError("Copy", copy_id)
