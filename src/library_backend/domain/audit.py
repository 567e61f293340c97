"""Audit records for the rental lifecycle."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from library_backend.domain.rentals import Rental


class AuditEventType(Enum):
    """Kind of rental lifecycle change."""

    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RentalAuditRecord:
    """Point-in-time snapshot of a rental change.

    INSERT records carry only the ``new_*`` fields, DELETE records only the
    ``old_*`` fields, and UPDATE records carry both. Build them through the
    ``for_insert``/``for_update``/``for_delete`` factories.
    """

    rental_id: int
    event_type: AuditEventType
    event_date: datetime
    actor: str
    old_copy_id: int | None = None
    new_copy_id: int | None = None
    old_reader_id: int | None = None
    new_reader_id: int | None = None
    old_rent_from: date | None = None
    new_rent_from: date | None = None
    old_return_date: date | None = None
    new_return_date: date | None = None
    id: int | None = None

    @classmethod
    def for_insert(
        cls, rental: Rental, actor: str, event_date: datetime
    ) -> "RentalAuditRecord":
        """Record a newly created rental."""
        _require_actor(actor)
        return cls(
            rental_id=rental.id,
            event_type=AuditEventType.INSERT,
            event_date=event_date,
            actor=actor,
            new_copy_id=rental.copy_id,
            new_reader_id=rental.reader_id,
            new_rent_from=rental.rented_from,
            new_return_date=rental.rented_to,
        )

    @classmethod
    def for_update(
        cls, old: Rental, new: Rental, actor: str, event_date: datetime
    ) -> "RentalAuditRecord":
        """Record the diff between the stored and the incoming rental."""
        _require_actor(actor)
        if old.id != new.id:
            raise ValueError(
                f"Cannot diff rental {old.id} against rental {new.id}"
            )
        return cls(
            rental_id=new.id,
            event_type=AuditEventType.UPDATE,
            event_date=event_date,
            actor=actor,
            old_copy_id=old.copy_id,
            new_copy_id=new.copy_id,
            old_reader_id=old.reader_id,
            new_reader_id=new.reader_id,
            old_rent_from=old.rented_from,
            new_rent_from=new.rented_from,
            old_return_date=old.rented_to,
            new_return_date=new.rented_to,
        )

    @classmethod
    def for_delete(
        cls, rental: Rental, actor: str, event_date: datetime
    ) -> "RentalAuditRecord":
        """Record the last known state of a rental about to be removed."""
        _require_actor(actor)
        return cls(
            rental_id=rental.id,
            event_type=AuditEventType.DELETE,
            event_date=event_date,
            actor=actor,
            old_copy_id=rental.copy_id,
            old_reader_id=rental.reader_id,
            old_rent_from=rental.rented_from,
            old_return_date=rental.rented_to,
        )


def _require_actor(actor: str) -> None:
    if not actor or not actor.strip():
        raise ValueError("Audit records require an actor")
