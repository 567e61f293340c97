"""Supabase repository for rentals."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from library_backend.adapters.supabase_queries import execute
from library_backend.domain.errors import StorageError
from library_backend.domain.rentals import Rental
from library_backend.services.rentals import RentalRepository


@dataclass
class SupabaseRentalRepository(RentalRepository):
    """Supabase-backed rental repository."""

    client: Client

    def create_rental(
        self, copy_id: int, reader_id: int, rented_from: date, rented_to: date
    ) -> Rental:
        """Create a rental row and return it."""
        query = self.client.table("rentals").insert(
            {
                "copy_id": copy_id,
                "reader_id": reader_id,
                "rented_from": rented_from.isoformat(),
                "rented_to": rented_to.isoformat(),
            }
        )
        response = execute(query, "Failed to create rental")
        if not response.data:
            raise StorageError("Failed to create rental")
        return _parse_rental(response.data[0])

    def get_rental(self, rental_id: int) -> Rental | None:
        """Return a rental by id, if present."""
        query = (
            self.client.table("rentals").select("*").eq("id", rental_id).limit(1)
        )
        response = execute(query, "Failed to load rental")
        if not response.data:
            return None
        return _parse_rental(response.data[0])

    def exists(self, rental_id: int) -> bool:
        """Return true when the rental row exists."""
        query = (
            self.client.table("rentals").select("id").eq("id", rental_id).limit(1)
        )
        response = execute(query, "Failed to look up rental")
        return bool(response.data)

    def list_rentals(self, reader_id: int | None = None) -> list[Rental]:
        """Return rentals, newest first."""
        query = self.client.table("rentals").select("*")
        if reader_id is not None:
            query = query.eq("reader_id", reader_id)
        response = execute(
            query.order("rented_from", desc=True), "Failed to list rentals"
        )
        return [_parse_rental(row) for row in response.data or []]

    def latest_rental_for_copy(self, copy_id: int) -> Rental | None:
        """Return the most recently created rental of a copy."""
        query = (
            self.client.table("rentals")
            .select("*")
            .eq("copy_id", copy_id)
            .order("id", desc=True)
            .limit(1)
        )
        response = execute(query, "Failed to load rentals of copy")
        if not response.data:
            return None
        return _parse_rental(response.data[0])

    def update_rental(self, rental: Rental) -> Rental | None:
        """Overwrite the stored fields of a rental."""
        query = (
            self.client.table("rentals")
            .update(
                {
                    "copy_id": rental.copy_id,
                    "reader_id": rental.reader_id,
                    "rented_from": rental.rented_from.isoformat(),
                    "rented_to": rental.rented_to.isoformat(),
                }
            )
            .eq("id", rental.id)
        )
        response = execute(query, "Failed to update rental")
        if not response.data:
            return None
        return _parse_rental(response.data[0])

    def delete_rental(self, rental_id: int) -> Rental | None:
        """Delete a rental row and return it."""
        query = self.client.table("rentals").delete().eq("id", rental_id)
        response = execute(query, "Failed to delete rental")
        if not response.data:
            return None
        return _parse_rental(response.data[0])

    def count_rentals(self) -> int:
        """Return the number of rentals."""
        query = self.client.table("rentals").select("id")
        response = execute(query, "Failed to count rentals")
        return len(response.data or [])


def _parse_rental(row: dict[str, object]) -> Rental:
    """Parse a rental row into a domain model."""
    return Rental(
        id=int(row["id"]),
        copy_id=int(row["copy_id"]),
        reader_id=int(row["reader_id"]),
        rented_from=date.fromisoformat(str(row["rented_from"])),
        rented_to=date.fromisoformat(str(row["rented_to"])),
    )
