"""Supabase repository for rental audit records."""

from dataclasses import dataclass
from datetime import date, datetime

from supabase import Client

from library_backend.adapters.supabase_queries import execute
from library_backend.domain.audit import AuditEventType, RentalAuditRecord
from library_backend.domain.errors import StorageError
from library_backend.services.audit import RentalAuditRepository

_TABLE = "rents_aud"


@dataclass
class SupabaseRentalAuditRepository(RentalAuditRepository):
    """Supabase-backed, insert-only store for rental audit records."""

    client: Client

    def append(self, record: RentalAuditRecord) -> None:
        """Insert an audit record row."""
        query = self.client.table(_TABLE).insert(_to_row(record))
        response = execute(query, "Failed to store rental audit record")
        if not response.data:
            raise StorageError("Failed to store rental audit record")

    def list_for_rental(
        self, rental_id: int, limit: int
    ) -> list[RentalAuditRecord]:
        """Return records for a rental, newest first."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("rental_id", rental_id)
            .order("event_date", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_record(row) for row in response.data or []]

    def list_recent(self, limit: int) -> list[RentalAuditRecord]:
        """Return the latest records across all rentals."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .order("event_date", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_record(row) for row in response.data or []]


def _to_row(record: RentalAuditRecord) -> dict[str, object]:
    return {
        "rental_id": record.rental_id,
        "event_type": record.event_type.value,
        "event_date": record.event_date.isoformat(),
        "aud_owner": record.actor,
        "old_copy_id": record.old_copy_id,
        "new_copy_id": record.new_copy_id,
        "old_reader_id": record.old_reader_id,
        "new_reader_id": record.new_reader_id,
        "old_rent_from": _iso(record.old_rent_from),
        "new_rent_from": _iso(record.new_rent_from),
        "old_return": _iso(record.old_return_date),
        "new_return": _iso(record.new_return_date),
    }


def _parse_record(row: dict[str, object]) -> RentalAuditRecord:
    """Parse a rents_aud row into a domain model."""
    return RentalAuditRecord(
        id=int(row["id"]),
        rental_id=int(row["rental_id"]),
        event_type=AuditEventType(row["event_type"]),
        event_date=datetime.fromisoformat(str(row["event_date"])),
        actor=str(row.get("aud_owner", "")),
        old_copy_id=row.get("old_copy_id"),
        new_copy_id=row.get("new_copy_id"),
        old_reader_id=row.get("old_reader_id"),
        new_reader_id=row.get("new_reader_id"),
        old_rent_from=_parse_date(row.get("old_rent_from")),
        new_rent_from=_parse_date(row.get("new_rent_from")),
        old_return_date=_parse_date(row.get("old_return")),
        new_return_date=_parse_date(row.get("new_return")),
    )


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value else None


def _parse_date(value: object) -> date | None:
    if isinstance(value, str) and value:
        return date.fromisoformat(value)
    return None
