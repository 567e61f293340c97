"""Supabase repository for books."""

from dataclasses import dataclass

from supabase import Client

from library_backend.adapters.supabase_queries import escape_like, execute
from library_backend.domain.books import Book
from library_backend.domain.errors import StorageError
from library_backend.services.books import BookRepository


@dataclass
class SupabaseBookRepository(BookRepository):
    """Supabase-backed book repository."""

    client: Client

    def create_book(self, title: str, author: str, publication_year: int) -> Book:
        """Create a book row and return it."""
        query = self.client.table("books").insert(
            {
                "title": title,
                "author": author,
                "publication_year": publication_year,
            }
        )
        response = execute(query, "Failed to create book")
        if not response.data:
            raise StorageError("Failed to create book")
        return _parse_book(response.data[0])

    def get_book(self, book_id: int) -> Book | None:
        """Return a book by id, if present."""
        query = self.client.table("books").select("*").eq("id", book_id).limit(1)
        response = execute(query, "Failed to load book")
        if not response.data:
            return None
        return _parse_book(response.data[0])

    def list_books(self) -> list[Book]:
        """Return all books ordered by title."""
        query = self.client.table("books").select("*").order("title")
        response = execute(query, "Failed to list books")
        return [_parse_book(row) for row in response.data or []]

    def find_by_title(self, title: str) -> list[Book]:
        """Return books whose title matches exactly, ignoring case."""
        query = (
            self.client.table("books").select("*").ilike("title", escape_like(title))
        )
        response = execute(query, "Failed to search books")
        return [_parse_book(row) for row in response.data or []]

    def delete_book(self, book_id: int) -> bool:
        """Delete a book row."""
        query = self.client.table("books").delete().eq("id", book_id)
        response = execute(query, "Failed to delete book")
        return bool(response.data)

    def count_books(self) -> int:
        """Return the number of books."""
        query = self.client.table("books").select("id")
        response = execute(query, "Failed to count books")
        return len(response.data or [])


def _parse_book(row: dict[str, object]) -> Book:
    return Book(
        id=int(row["id"]),
        title=str(row.get("title", "")),
        author=str(row.get("author", "")),
        publication_year=int(row.get("publication_year", 0)),
    )
