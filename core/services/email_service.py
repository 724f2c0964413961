"""Email service for sending admin notifications via SMTP."""

import re
import smtplib
from collections.abc import Iterator
from contextlib import contextmanager
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from django.conf import settings
from django.utils.html import linebreaks

import structlog

logger = structlog.get_logger(__name__)

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class EmailService:
    """Service for sending emails via SMTP.

    Admin notifications are plain text; each message carries the text and an
    HTML rendering of it with paragraphs and line breaks preserved.
    """

    def __init__(self) -> None:
        """Initialize email service with SMTP configuration."""
        self.smtp_host = settings.EMAIL_HOST
        self.smtp_port = settings.EMAIL_PORT
        self.smtp_user = settings.EMAIL_HOST_USER
        self.smtp_password = settings.EMAIL_HOST_PASSWORD
        self.use_tls = settings.EMAIL_USE_TLS
        self.from_email = settings.DEFAULT_FROM_EMAIL

    def send_batch(self, addresses: list[str], subject: str, body: str) -> list[str]:
        """Send the same email to many addresses over one SMTP connection.

        Invalid addresses are logged and dropped; they would fail on every
        retry.

        Args:
            addresses: Recipient email addresses
            subject: Email subject line
            body: Plain text message content

        Returns:
            Addresses whose delivery failed and may be retried.

        Raises:
            smtplib.SMTPException: If the connection or login fails
            OSError: If the SMTP server cannot be reached
        """
        valid = []
        for address in addresses:
            if self.is_valid_email(address):
                valid.append(address)
            else:
                logger.warning("email_address_invalid_skipped", to_email=address)

        failed: list[str] = []
        if not valid:
            return failed

        with self._connect() as server:
            for address in valid:
                try:
                    server.send_message(self._build_message(address, subject, body))
                except smtplib.SMTPException as e:
                    logger.error(
                        "email_send_failed",
                        to_email=address,
                        subject=subject,
                        error=str(e),
                    )
                    failed.append(address)

        logger.info(
            "email_batch_sent",
            subject=subject,
            sent_count=len(valid) - len(failed),
            failed_count=len(failed),
        )
        return failed

    @staticmethod
    def is_valid_email(email: str) -> bool:
        """Check email address format."""
        return bool(EMAIL_PATTERN.match(email or ""))

    @contextmanager
    def _connect(self) -> Iterator[smtplib.SMTP]:
        with smtplib.SMTP(self.smtp_host, self.smtp_port) as server:
            if self.use_tls:
                server.starttls()
            if self.smtp_user and self.smtp_password:
                server.login(self.smtp_user, self.smtp_password)
            yield server

    def _build_message(self, to_email: str, subject: str, body: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self.from_email
        msg["To"] = to_email
        msg.attach(MIMEText(body, "plain"))
        msg.attach(MIMEText(linebreaks(body, autoescape=True), "html"))
        return msg
