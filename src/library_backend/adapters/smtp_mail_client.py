"""SMTP mail client adapter."""

import smtplib
from collections.abc import Callable
from dataclasses import dataclass, field
from email.message import EmailMessage

from library_backend.domain.mail import Mail


@dataclass
class SmtpMailClient:
    """Mail client that delivers through an SMTP relay."""

    host: str
    port: int
    sender: str
    username: str | None = None
    password: str | None = None
    use_tls: bool = True
    timeout: float = 10
    smtp_factory: Callable[..., smtplib.SMTP] = field(default=smtplib.SMTP)

    def send(self, mail: Mail) -> None:
        """Send a plain-text message."""
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = mail.mail_to
        if mail.to_cc:
            message["Cc"] = mail.to_cc
        message["Subject"] = mail.subject
        message.set_content(mail.message)
        with self.smtp_factory(self.host, self.port, timeout=self.timeout) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.username and self.password:
                smtp.login(self.username, self.password)
            smtp.send_message(message)
