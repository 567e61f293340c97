"""Outgoing mail message."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Mail:
    """A plain-text email."""

    mail_to: str
    subject: str
    message: str
    to_cc: str | None = None
