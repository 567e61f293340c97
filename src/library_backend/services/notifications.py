"""Scheduled email notifications."""

import logging
from dataclasses import dataclass
from typing import Protocol

from library_backend.domain.copies import CopyStatus
from library_backend.domain.mail import Mail
from library_backend.services.books import BookRepository
from library_backend.services.copies import CopyRepository
from library_backend.services.readers import ReaderRepository
from library_backend.services.rentals import RentalRepository

_logger = logging.getLogger(__name__)

SUMMARY_SUBJECT = "Library: Books info"


class MailClient(Protocol):
    """Interface for sending email."""

    def send(self, mail: Mail) -> None:
        """Deliver a mail message."""


@dataclass(frozen=True)
class LibrarySummary:
    """Counts describing the current state of the library."""

    books: int
    readers: int
    rentals: int
    copies_by_status: dict[CopyStatus, int]

    @property
    def copies(self) -> int:
        return sum(self.copies_by_status.values())


@dataclass
class SummaryService:
    """Collect library-wide counts."""

    book_repository: BookRepository
    copy_repository: CopyRepository
    reader_repository: ReaderRepository
    rental_repository: RentalRepository

    def summarize(self) -> LibrarySummary:
        """Return current counts for books, readers, rentals and copies."""
        counts = self.copy_repository.count_by_status()
        return LibrarySummary(
            books=self.book_repository.count_books(),
            readers=self.reader_repository.count_readers(),
            rentals=self.rental_repository.count_rentals(),
            copies_by_status={status: counts.get(status, 0) for status in CopyStatus},
        )


@dataclass
class WeeklySummaryJob:
    """Email the weekly library summary to the administrator."""

    summary_service: SummaryService
    mail_client: MailClient
    admin_mail: str

    def run(self) -> Mail:
        """Build and send the summary email, returning the sent message."""
        _logger.info("Preparing weekly summary email for %s", self.admin_mail)
        mail = Mail(
            mail_to=self.admin_mail,
            subject=SUMMARY_SUBJECT,
            message=format_summary(self.summary_service.summarize()),
        )
        self.mail_client.send(mail)
        _logger.info("Weekly summary email sent")
        return mail


def format_summary(summary: LibrarySummary) -> str:
    """Format the summary as a plain-text email body."""
    lines = [
        "Weekly summary of books status in the database.",
        "",
        f"Books: {summary.books}",
        f"Copies: {summary.copies}",
    ]
    for status, count in summary.copies_by_status.items():
        lines.append(f"- {status.value.lower()}: {count}")
    lines.append(f"Readers: {summary.readers}")
    lines.append(f"Rentals: {summary.rentals}")
    return "\n".join(lines)
