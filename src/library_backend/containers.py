"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from library_backend.adapters.smtp_mail_client import SmtpMailClient
from library_backend.adapters.supabase_audit_repository import (
    SupabaseRentalAuditRepository,
)
from library_backend.adapters.supabase_book_repository import SupabaseBookRepository
from library_backend.adapters.supabase_copy_repository import SupabaseCopyRepository
from library_backend.adapters.supabase_reader_repository import (
    SupabaseReaderRepository,
)
from library_backend.adapters.supabase_rental_repository import (
    SupabaseRentalRepository,
)
from library_backend.config import Settings, parse_api_tokens
from library_backend.services.audit import RentalAuditor
from library_backend.services.books import BookService
from library_backend.services.copies import CopyService
from library_backend.services.notifications import SummaryService, WeeklySummaryJob
from library_backend.services.readers import ReaderService
from library_backend.services.rentals import RentalService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    api_tokens: dict[str, str]
    book_service: BookService
    copy_service: CopyService
    reader_service: ReaderService
    rental_service: RentalService
    rental_auditor: RentalAuditor
    summary_service: SummaryService
    weekly_summary_job: WeeklySummaryJob


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    book_repository = SupabaseBookRepository(supabase_client)
    copy_repository = SupabaseCopyRepository(supabase_client)
    reader_repository = SupabaseReaderRepository(supabase_client)
    rental_repository = SupabaseRentalRepository(supabase_client)
    audit_repository = SupabaseRentalAuditRepository(supabase_client)

    rental_auditor = RentalAuditor(
        lookup=rental_repository,
        repository=audit_repository,
    )
    rental_service = RentalService(
        repository=rental_repository,
        copy_repository=copy_repository,
        reader_repository=reader_repository,
        auditor=rental_auditor,
        rental_period_days=resolved_settings.rental_period_days,
    )
    summary_service = SummaryService(
        book_repository=book_repository,
        copy_repository=copy_repository,
        reader_repository=reader_repository,
        rental_repository=rental_repository,
    )
    mail_client = SmtpMailClient(
        host=resolved_settings.smtp_host,
        port=resolved_settings.smtp_port,
        sender=resolved_settings.mail_from,
        username=resolved_settings.smtp_username,
        password=resolved_settings.smtp_password,
        use_tls=resolved_settings.smtp_use_tls,
    )
    weekly_summary_job = WeeklySummaryJob(
        summary_service=summary_service,
        mail_client=mail_client,
        admin_mail=resolved_settings.admin_mail,
    )

    return AppContainer(
        settings=resolved_settings,
        api_tokens=parse_api_tokens(resolved_settings.api_tokens),
        book_service=BookService(book_repository),
        copy_service=CopyService(copy_repository, book_repository),
        reader_service=ReaderService(reader_repository),
        rental_service=rental_service,
        rental_auditor=rental_auditor,
        summary_service=summary_service,
        weekly_summary_job=weekly_summary_job,
    )
