"""Tests for the rental audit trail."""

from datetime import date

import pytest

from library_backend.domain.audit import AuditEventType, RentalAuditRecord
from library_backend.domain.errors import ElementNotFoundError, StorageError
from library_backend.domain.rentals import Rental
from library_backend.services.audit import RentalAuditor
from tests.conftest import (
    FIXED_NOW,
    InMemoryRentalAuditRepository,
    InMemoryRentalRepository,
)


def _rental(**overrides: object) -> Rental:
    values: dict[str, object] = {
        "id": 1,
        "copy_id": 10,
        "reader_id": 5,
        "rented_from": date(2024, 1, 1),
        "rented_to": date(2024, 1, 14),
    }
    values.update(overrides)
    return Rental(**values)  # type: ignore[arg-type]


def test_after_create_records_insert_with_new_fields_only(
    auditor: RentalAuditor, audit_repository: InMemoryRentalAuditRepository
) -> None:
    auditor.after_create(_rental(), actor="alice")

    assert len(audit_repository.records) == 1
    record = audit_repository.records[0]
    assert record.event_type is AuditEventType.INSERT
    assert record.rental_id == 1
    assert record.new_copy_id == 10
    assert record.new_reader_id == 5
    assert record.new_rent_from == date(2024, 1, 1)
    assert record.new_return_date == date(2024, 1, 14)
    assert record.old_copy_id is None
    assert record.old_reader_id is None
    assert record.old_rent_from is None
    assert record.old_return_date is None
    assert record.actor == "alice"
    assert record.event_date == FIXED_NOW


def test_before_complete_records_diff_against_stored_rental(
    auditor: RentalAuditor,
    rental_repository: InMemoryRentalRepository,
    audit_repository: InMemoryRentalAuditRepository,
) -> None:
    rental_repository.add(_rental())

    auditor.before_complete(_rental(rented_to=date(2024, 1, 20)), actor="bob")

    [record] = audit_repository.records
    assert record.event_type is AuditEventType.UPDATE
    assert record.old_return_date == date(2024, 1, 14)
    assert record.new_return_date == date(2024, 1, 20)
    assert (record.old_copy_id, record.new_copy_id) == (10, 10)
    assert (record.old_reader_id, record.new_reader_id) == (5, 5)
    assert record.old_rent_from == record.new_rent_from == date(2024, 1, 1)
    assert record.actor == "bob"


def test_before_complete_skips_unknown_rental(
    auditor: RentalAuditor, audit_repository: InMemoryRentalAuditRepository
) -> None:
    auditor.before_complete(_rental(id=99), actor="alice")

    assert audit_repository.records == []


def test_before_delete_records_old_fields_only(
    auditor: RentalAuditor,
    rental_repository: InMemoryRentalRepository,
    audit_repository: InMemoryRentalAuditRepository,
) -> None:
    rental_repository.add(_rental())

    auditor.before_delete(1, actor="alice")

    [record] = audit_repository.records
    assert record.event_type is AuditEventType.DELETE
    assert record.old_copy_id == 10
    assert record.old_reader_id == 5
    assert record.old_rent_from == date(2024, 1, 1)
    assert record.old_return_date == date(2024, 1, 14)
    assert record.new_copy_id is None
    assert record.new_reader_id is None
    assert record.new_rent_from is None
    assert record.new_return_date is None


def test_before_delete_of_missing_rental_raises_without_recording(
    auditor: RentalAuditor, audit_repository: InMemoryRentalAuditRepository
) -> None:
    with pytest.raises(ElementNotFoundError):
        auditor.before_delete(42, actor="alice")

    assert audit_repository.records == []


def test_repeated_invocations_are_not_deduplicated(
    auditor: RentalAuditor, audit_repository: InMemoryRentalAuditRepository
) -> None:
    auditor.after_create(_rental(), actor="alice")
    auditor.after_create(_rental(), actor="alice")

    assert len(audit_repository.records) == 2


def test_storage_failure_propagates(
    rental_repository: InMemoryRentalRepository,
) -> None:
    auditor = RentalAuditor(
        lookup=rental_repository,
        repository=InMemoryRentalAuditRepository(fail=True),
    )

    with pytest.raises(StorageError):
        auditor.after_create(_rental(), actor="alice")


def test_trail_returns_newest_first_and_survives_delete(
    auditor: RentalAuditor, rental_repository: InMemoryRentalRepository
) -> None:
    rental_repository.add(_rental())
    auditor.after_create(_rental(), actor="alice")
    auditor.before_delete(1, actor="alice")
    rental_repository.delete_rental(1)

    trail = auditor.trail(1)

    assert [record.event_type for record in trail] == [
        AuditEventType.DELETE,
        AuditEventType.INSERT,
    ]


def test_factories_reject_blank_actor() -> None:
    with pytest.raises(ValueError):
        RentalAuditRecord.for_insert(_rental(), actor=" ", event_date=FIXED_NOW)


def test_update_factory_rejects_different_rentals() -> None:
    with pytest.raises(ValueError):
        RentalAuditRecord.for_update(
            _rental(id=1), _rental(id=2), actor="alice", event_date=FIXED_NOW
        )


def test_audit_records_are_immutable() -> None:
    record = RentalAuditRecord.for_insert(_rental(), "alice", FIXED_NOW)

    with pytest.raises(AttributeError):
        record.new_copy_id = 11  # type: ignore[misc]
