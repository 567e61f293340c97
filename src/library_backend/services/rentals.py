"""Rental lifecycle: lending copies to readers and taking them back."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime, timedelta
from typing import Protocol

from library_backend.domain.audit import RentalAuditRecord
from library_backend.domain.copies import CopyStatus
from library_backend.domain.errors import CopyUnavailableError, ElementNotFoundError
from library_backend.domain.rentals import Rental
from library_backend.services.audit import RentalAuditor
from library_backend.services.copies import CopyRepository
from library_backend.services.readers import ReaderRepository

_logger = logging.getLogger(__name__)


class RentalRepository(Protocol):
    """Persistence interface for rentals."""

    def create_rental(
        self, copy_id: int, reader_id: int, rented_from: date, rented_to: date
    ) -> Rental:
        """Create a rental and return it."""

    def get_rental(self, rental_id: int) -> Rental | None:
        """Return a rental by id, if present."""

    def exists(self, rental_id: int) -> bool:
        """Return true when a rental with the id is stored."""

    def list_rentals(self, reader_id: int | None = None) -> list[Rental]:
        """Return rentals, optionally only those of one reader."""

    def latest_rental_for_copy(self, copy_id: int) -> Rental | None:
        """Return the most recently created rental of a copy, if any."""

    def update_rental(self, rental: Rental) -> Rental | None:
        """Overwrite a stored rental; return None when it does not exist."""

    def delete_rental(self, rental_id: int) -> Rental | None:
        """Delete a rental and return what was removed, if anything."""

    def count_rentals(self) -> int:
        """Return the number of rentals."""


@dataclass
class RentalService:
    """Application service for rentals.

    Every mutating call takes the acting principal explicitly and hands it to
    the auditor, which records the change.
    """

    repository: RentalRepository
    copy_repository: CopyRepository
    reader_repository: ReaderRepository
    auditor: RentalAuditor
    rental_period_days: int = 14

    def create_rental(
        self,
        copy_id: int,
        reader_id: int,
        actor: str,
        rented_from: date | None = None,
    ) -> Rental:
        """Lend an available copy to a reader."""
        copy = self.copy_repository.get_copy(copy_id)
        if copy is None:
            raise ElementNotFoundError("Copy", copy_id)
        if copy.status is not CopyStatus.AVAILABLE:
            raise CopyUnavailableError(
                f"Copy {copy_id} is {copy.status.value.lower()}"
            )
        if self.reader_repository.get_reader(reader_id) is None:
            raise ElementNotFoundError("Reader", reader_id)
        start = rented_from or _today()
        rental = self.repository.create_rental(
            copy_id,
            reader_id,
            rented_from=start,
            rented_to=start + timedelta(days=self.rental_period_days),
        )
        self.copy_repository.update_status(copy_id, CopyStatus.RENTED)
        self.auditor.after_create(rental, actor)
        return rental

    def complete_rental(self, rental: Rental, actor: str) -> Rental:
        """Persist the completed state of a rental and release its copy."""
        self.auditor.before_complete(rental, actor)
        updated = self.repository.update_rental(rental)
        if updated is None:
            raise ElementNotFoundError("Rental", rental.id)
        self._release_copy(updated)
        return updated

    def return_rental(
        self, rental_id: int, actor: str, returned_on: date | None = None
    ) -> Rental:
        """Complete a rental with the given (or today's) return date."""
        current = self.get_rental(rental_id)
        completed = replace(current, rented_to=returned_on or _today())
        return self.complete_rental(completed, actor)

    def delete_rental(self, rental_id: int, actor: str) -> None:
        """Delete a rental after recording its final state."""
        self.auditor.before_delete(rental_id, actor)
        removed = self.repository.delete_rental(rental_id)
        if removed is None:
            raise ElementNotFoundError("Rental", rental_id)
        self._release_copy(removed)

    def get_rental(self, rental_id: int) -> Rental:
        """Return a rental or raise when it does not exist."""
        rental = self.repository.get_rental(rental_id)
        if rental is None:
            raise ElementNotFoundError("Rental", rental_id)
        return rental

    def list_rentals(self, reader_id: int | None = None) -> list[Rental]:
        """Return all rentals, or the rentals of one reader."""
        return self.repository.list_rentals(reader_id)

    def audit_trail(self, rental_id: int) -> list[RentalAuditRecord]:
        """Return the audit records of a rental, newest first.

        Works for deleted rentals too, since their records are kept.
        """
        return self.auditor.trail(rental_id)

    def _release_copy(self, rental: Rental) -> None:
        # A later rental of the same copy holds it now.
        latest = self.repository.latest_rental_for_copy(rental.copy_id)
        if latest is not None and latest.id > rental.id:
            _logger.info(
                "Copy %s held by rental %s; rental %s leaves it as is",
                rental.copy_id,
                latest.id,
                rental.id,
            )
            return
        copy = self.copy_repository.get_copy(rental.copy_id)
        if copy is None:
            _logger.warning(
                "Rental references missing copy: copy_id=%s", rental.copy_id
            )
            return
        if copy.status is CopyStatus.RENTED:
            self.copy_repository.update_status(rental.copy_id, CopyStatus.AVAILABLE)


def _today() -> date:
    return datetime.now(tz=UTC).date()
