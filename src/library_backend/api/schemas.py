"""Request models and response serializers for the REST API."""

from datetime import date

from pydantic import BaseModel, Field

from library_backend.domain.audit import RentalAuditRecord
from library_backend.domain.books import Book
from library_backend.domain.copies import Copy, CopyStatus
from library_backend.domain.readers import Reader
from library_backend.domain.rentals import Rental
from library_backend.services.notifications import LibrarySummary


class BookCreate(BaseModel):
    """Payload for adding a book."""

    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    publication_year: int


class CopyCreate(BaseModel):
    """Payload for adding a copy of a book."""

    book_id: int
    status: CopyStatus = CopyStatus.AVAILABLE


class CopyStatusUpdate(BaseModel):
    """Payload for changing a copy's status."""

    status: CopyStatus


class ReaderCreate(BaseModel):
    """Payload for registering a reader."""

    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str | None = None


class RentalCreate(BaseModel):
    """Payload for renting a copy."""

    copy_id: int
    reader_id: int
    rented_from: date | None = None


class RentalComplete(BaseModel):
    """Payload for completing a rental."""

    returned_on: date | None = None


def serialize_book(book: Book) -> dict[str, object]:
    return {
        "id": book.id,
        "title": book.title,
        "author": book.author,
        "publication_year": book.publication_year,
    }


def serialize_copy(copy: Copy) -> dict[str, object]:
    return {"id": copy.id, "book_id": copy.book_id, "status": copy.status.value}


def serialize_reader(reader: Reader) -> dict[str, object]:
    return {
        "id": reader.id,
        "first_name": reader.first_name,
        "last_name": reader.last_name,
        "email": reader.email,
        "account_created": reader.account_created.isoformat(),
    }


def serialize_rental(rental: Rental) -> dict[str, object]:
    return {
        "id": rental.id,
        "copy_id": rental.copy_id,
        "reader_id": rental.reader_id,
        "rented_from": rental.rented_from.isoformat(),
        "rented_to": rental.rented_to.isoformat(),
    }


def serialize_audit_record(record: RentalAuditRecord) -> dict[str, object]:
    """Serialize an audit record, keeping unset snapshot fields as null."""
    return {
        "id": record.id,
        "rental_id": record.rental_id,
        "event_type": record.event_type.value,
        "event_date": record.event_date.isoformat(),
        "actor": record.actor,
        "old_copy_id": record.old_copy_id,
        "new_copy_id": record.new_copy_id,
        "old_reader_id": record.old_reader_id,
        "new_reader_id": record.new_reader_id,
        "old_rent_from": _iso(record.old_rent_from),
        "new_rent_from": _iso(record.new_rent_from),
        "old_return_date": _iso(record.old_return_date),
        "new_return_date": _iso(record.new_return_date),
    }


def serialize_summary(summary: LibrarySummary) -> dict[str, object]:
    return {
        "books": summary.books,
        "readers": summary.readers,
        "rentals": summary.rentals,
        "copies": summary.copies,
        "copies_by_status": {
            status.value: count for status, count in summary.copies_by_status.items()
        },
    }


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value else None
