"""Services for the book catalogue."""

from dataclasses import dataclass
from typing import Protocol

from library_backend.domain.books import Book
from library_backend.domain.errors import ElementNotFoundError


class BookRepository(Protocol):
    """Persistence interface for books."""

    def create_book(self, title: str, author: str, publication_year: int) -> Book:
        """Create a book and return it."""

    def get_book(self, book_id: int) -> Book | None:
        """Return a book by id, if present."""

    def list_books(self) -> list[Book]:
        """Return all books."""

    def find_by_title(self, title: str) -> list[Book]:
        """Return books whose title matches, ignoring case."""

    def delete_book(self, book_id: int) -> bool:
        """Delete a book, returning false when nothing was removed."""

    def count_books(self) -> int:
        """Return the number of books."""


@dataclass
class BookService:
    """Application service for the book catalogue."""

    repository: BookRepository

    def add_book(self, title: str, author: str, publication_year: int) -> Book:
        """Add a book to the catalogue."""
        return self.repository.create_book(title, author, publication_year)

    def get_book(self, book_id: int) -> Book:
        """Return a book or raise when it does not exist."""
        book = self.repository.get_book(book_id)
        if book is None:
            raise ElementNotFoundError("Book", book_id)
        return book

    def list_books(self) -> list[Book]:
        """Return every book in the catalogue."""
        return self.repository.list_books()

    def delete_book(self, book_id: int) -> None:
        """Remove a book from the catalogue."""
        if not self.repository.delete_book(book_id):
            raise ElementNotFoundError("Book", book_id)
