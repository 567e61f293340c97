"""Supabase repository for readers."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from library_backend.adapters.supabase_queries import execute
from library_backend.domain.errors import StorageError
from library_backend.domain.readers import Reader
from library_backend.services.readers import ReaderRepository


@dataclass
class SupabaseReaderRepository(ReaderRepository):
    """Supabase-backed reader repository."""

    client: Client

    def create_reader(
        self,
        first_name: str,
        last_name: str,
        email: str | None,
        account_created: date,
    ) -> Reader:
        """Create a reader row and return it."""
        query = self.client.table("readers").insert(
            {
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "account_created": account_created.isoformat(),
            }
        )
        response = execute(query, "Failed to create reader")
        if not response.data:
            raise StorageError("Failed to create reader")
        return _parse_reader(response.data[0])

    def get_reader(self, reader_id: int) -> Reader | None:
        """Return a reader by id, if present."""
        query = (
            self.client.table("readers").select("*").eq("id", reader_id).limit(1)
        )
        response = execute(query, "Failed to load reader")
        if not response.data:
            return None
        return _parse_reader(response.data[0])

    def list_readers(self) -> list[Reader]:
        """Return all readers ordered by last name."""
        query = self.client.table("readers").select("*").order("last_name")
        response = execute(query, "Failed to list readers")
        return [_parse_reader(row) for row in response.data or []]

    def delete_reader(self, reader_id: int) -> bool:
        """Delete a reader row."""
        query = self.client.table("readers").delete().eq("id", reader_id)
        response = execute(query, "Failed to delete reader")
        return bool(response.data)

    def count_readers(self) -> int:
        """Return the number of readers."""
        query = self.client.table("readers").select("id")
        response = execute(query, "Failed to count readers")
        return len(response.data or [])


def _parse_reader(row: dict[str, object]) -> Reader:
    return Reader(
        id=int(row["id"]),
        first_name=str(row.get("first_name", "")),
        last_name=str(row.get("last_name", "")),
        email=row.get("email"),
        account_created=date.fromisoformat(str(row["account_created"])),
    )
