from __future__ import annotations

import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import parseaddr

from salon_booking.application.ports.email_sender import EmailSenderPort


class SmtpEmailSender(EmailSenderPort):
    def __init__(
        self,
        host: str,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
        from_address: str = "no-reply@salonbooking.local",
        timeout: float = 30.0,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._use_tls = use_tls
        self._from_address = from_address
        self._timeout = timeout
        self._logger = logging.getLogger(__name__)

    def build_message(self, to_email: str, subject: str, html_content: str, text_content: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self._from_address
        msg["To"] = to_email
        msg.attach(MIMEText(text_content, "plain", "utf-8"))
        msg.attach(MIMEText(html_content, "html", "utf-8"))
        return msg

    def send(self, to_email: str, subject: str, html_content: str, text_content: str) -> None:
        msg = self.build_message(to_email, subject, html_content, text_content)

        if self._port == 465:
            server = smtplib.SMTP_SSL(self._host, self._port, context=ssl.create_default_context(), timeout=self._timeout)
        else:
            server = smtplib.SMTP(self._host, self._port, timeout=self._timeout)
            if self._use_tls:
                server.starttls(context=ssl.create_default_context())

        try:
            if self._username and self._password:
                server.login(self._username, self._password)
            server.sendmail(parseaddr(self._from_address)[1], [to_email], msg.as_string())
        finally:
            server.quit()

        self._logger.info(f"SMTP email sent via {self._host}")
