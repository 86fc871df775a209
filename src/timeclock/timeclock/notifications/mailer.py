from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Optional, Protocol

from ..core.exceptions import MailDeliveryError
from ..reports.model import RenderedEmail

logger = logging.getLogger(__name__)


class Mailer(Protocol):
    def send(self, email: RenderedEmail) -> None:
        raise NotImplementedError


@dataclass
class SMTPConfig:
    host: str
    port: int
    sender: str
    username: Optional[str] = None
    password: Optional[str] = None
    use_tls: bool = True


class SMTPMailer(Mailer):
    """Sends multipart (plain text + HTML) mail; one connection per message."""

    def __init__(self, config: SMTPConfig):
        self._config = config

    def _build_message(self, email: RenderedEmail) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = self._config.sender
        msg["To"] = ", ".join(email.recipients)
        msg["Subject"] = email.subject
        msg.set_content(email.text_body)
        msg.add_alternative(email.html_body, subtype="html")
        return msg

    def send(self, email: RenderedEmail) -> None:
        if not email.recipients:
            raise MailDeliveryError("No report recipients configured")

        msg = self._build_message(email)
        try:
            with smtplib.SMTP(self._config.host, int(self._config.port), timeout=30) as smtp:
                if self._config.use_tls:
                    smtp.starttls()
                if self._config.username:
                    smtp.login(self._config.username, self._config.password or "")
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Report email to %s failed: %s", msg["To"], e)
            raise MailDeliveryError(f"Failed to send email: {e}") from e

        logger.info("Report email sent to %s", msg["To"])
