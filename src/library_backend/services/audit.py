"""Audit trail for rental lifecycle operations."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

from library_backend.domain.audit import RentalAuditRecord
from library_backend.domain.errors import ElementNotFoundError
from library_backend.domain.rentals import Rental

_logger = logging.getLogger(__name__)


class RentalLookup(Protocol):
    """Read access to stored rentals."""

    def get_rental(self, rental_id: int) -> Rental | None:
        """Return a rental by id, if present."""

    def exists(self, rental_id: int) -> bool:
        """Return true when a rental with the id is stored."""


class RentalAuditRepository(Protocol):
    """Append-only persistence for rental audit records."""

    def append(self, record: RentalAuditRecord) -> None:
        """Persist a new audit record."""

    def list_for_rental(
        self, rental_id: int, limit: int
    ) -> list[RentalAuditRecord]:
        """Return records for a rental, newest first."""

    def list_recent(self, limit: int) -> list[RentalAuditRecord]:
        """Return the most recent records across all rentals."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class RentalAuditor:
    """Records an audit entry around each rental create, complete and delete.

    The rental service calls these hooks at fixed points: ``after_create``
    once the rental is stored, ``before_complete`` and ``before_delete``
    before the write lands so the prior state can still be read.
    """

    lookup: RentalLookup
    repository: RentalAuditRepository
    clock: Callable[[], datetime] = field(default=_utc_now)

    def after_create(self, rental: Rental, actor: str) -> None:
        """Record an INSERT for a rental that was just created."""
        _logger.info("Rental INSERT caught: rental_id=%s", rental.id)
        record = RentalAuditRecord.for_insert(rental, actor, self.clock())
        self.repository.append(record)
        _logger.info("Rental INSERT recorded: rental_id=%s", rental.id)

    def before_delete(self, rental_id: int, actor: str) -> None:
        """Record a DELETE, failing when the rental does not exist."""
        _logger.info("Rental DELETE caught: rental_id=%s", rental_id)
        rental = self.lookup.get_rental(rental_id)
        if rental is None:
            raise ElementNotFoundError("Rental", rental_id)
        record = RentalAuditRecord.for_delete(rental, actor, self.clock())
        self.repository.append(record)
        _logger.info("Rental DELETE recorded: rental_id=%s", rental_id)

    def before_complete(self, rental: Rental, actor: str) -> None:
        """Record an UPDATE against the stored rental; skip unknown rentals."""
        _logger.info("Rental UPDATE caught: rental_id=%s", rental.id)
        # Unknown rentals are not audited and not reported here.
        if not self.lookup.exists(rental.id):
            _logger.info("Rental UPDATE skipped: rental_id=%s", rental.id)
            return
        current = self.lookup.get_rental(rental.id)
        if current is None:
            raise ElementNotFoundError("Rental", rental.id)
        record = RentalAuditRecord.for_update(current, rental, actor, self.clock())
        self.repository.append(record)
        _logger.info("Rental UPDATE recorded: rental_id=%s", rental.id)

    def trail(self, rental_id: int, limit: int = 50) -> list[RentalAuditRecord]:
        """Return audit records for a rental, newest first."""
        return self.repository.list_for_rental(rental_id, limit)

    def recent(self, limit: int = 50) -> list[RentalAuditRecord]:
        """Return the most recent audit records."""
        return self.repository.list_recent(limit)
