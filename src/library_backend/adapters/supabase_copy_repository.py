"""Supabase repository for copies."""

from collections import Counter
from dataclasses import dataclass

from supabase import Client

from library_backend.adapters.supabase_queries import execute
from library_backend.domain.copies import Copy, CopyStatus
from library_backend.domain.errors import StorageError
from library_backend.services.copies import CopyRepository


@dataclass
class SupabaseCopyRepository(CopyRepository):
    """Supabase-backed copy repository."""

    client: Client

    def create_copy(self, book_id: int, status: CopyStatus) -> Copy:
        """Create a copy row and return it."""
        query = self.client.table("copies").insert(
            {"book_id": book_id, "status": status.value}
        )
        response = execute(query, "Failed to create copy")
        if not response.data:
            raise StorageError("Failed to create copy")
        return _parse_copy(response.data[0])

    def get_copy(self, copy_id: int) -> Copy | None:
        """Return a copy by id, if present."""
        query = self.client.table("copies").select("*").eq("id", copy_id).limit(1)
        response = execute(query, "Failed to load copy")
        if not response.data:
            return None
        return _parse_copy(response.data[0])

    def list_copies(self) -> list[Copy]:
        """Return all copies."""
        query = self.client.table("copies").select("*").order("id")
        response = execute(query, "Failed to list copies")
        return [_parse_copy(row) for row in response.data or []]

    def list_copies_for_books(
        self, book_ids: list[int], status: CopyStatus
    ) -> list[Copy]:
        """Return copies of the given books with the given status."""
        query = (
            self.client.table("copies")
            .select("*")
            .in_("book_id", book_ids)
            .eq("status", status.value)
        )
        response = execute(query, "Failed to list copies")
        return [_parse_copy(row) for row in response.data or []]

    def update_status(self, copy_id: int, status: CopyStatus) -> Copy:
        """Set the status of a copy."""
        query = (
            self.client.table("copies")
            .update({"status": status.value})
            .eq("id", copy_id)
        )
        response = execute(query, "Failed to update copy status")
        if not response.data:
            raise StorageError("Failed to update copy status")
        return _parse_copy(response.data[0])

    def delete_copy(self, copy_id: int) -> bool:
        """Delete a copy row."""
        query = self.client.table("copies").delete().eq("id", copy_id)
        response = execute(query, "Failed to delete copy")
        return bool(response.data)

    def count_by_status(self) -> dict[CopyStatus, int]:
        """Return the number of copies for each status."""
        query = self.client.table("copies").select("status")
        response = execute(query, "Failed to count copies")
        counts = Counter(CopyStatus(row["status"]) for row in response.data or [])
        return dict(counts)


def _parse_copy(row: dict[str, object]) -> Copy:
    return Copy(
        id=int(row["id"]),
        book_id=int(row["book_id"]),
        status=CopyStatus(row.get("status", CopyStatus.AVAILABLE.value)),
    )
