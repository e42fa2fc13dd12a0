from __future__ import annotations

import logging
from dataclasses import dataclass

from salon_booking.application.ports.email_sender import EmailSenderPort


@dataclass(frozen=True)
class SentEmail:
    to_email: str
    subject: str
    html_content: str
    text_content: str


class MockEmailSender(EmailSenderPort):
    def __init__(self) -> None:
        self.outbox: list[SentEmail] = []
        self._logger = logging.getLogger(__name__)

    def send(self, to_email: str, subject: str, html_content: str, text_content: str) -> None:
        self.outbox.append(SentEmail(to_email, subject, html_content, text_content))
        self._logger.info("WOULD_SEND_EMAIL to=%s subject=%s", to_email, subject)
