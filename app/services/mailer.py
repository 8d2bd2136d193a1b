"""Outbound mail for verification codes: HTTP mail API (Brevo-style) or console logging in dev."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

import httpx

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

VERIFICATION_SUBJECT = "[Idea Graveyard] Email verification code"


class MailTransportError(Exception):
    """Raised when a message could not be handed to the mail provider."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class MailTransport(Protocol):
    def send(self, to: str, subject: str, text: str) -> None: ...

    def close(self) -> None: ...


def verification_message(code: str) -> str:
    return f"Your verification code is: {code}"


class HttpMailTransport:
    """Send plain-text mail through a transactional mail HTTP API."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        sender: str,
        sender_name: str,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.api_url = api_url
        self.sender = sender
        self.sender_name = sender_name
        self._headers = {
            "accept": "application/json",
            "api-key": api_key,
            "content-type": "application/json",
        }
        self._client = client or httpx.Client(timeout=timeout)

    def send(self, to: str, subject: str, text: str) -> None:
        data = {
            "sender": {"name": self.sender_name, "email": self.sender},
            "to": [{"email": to}],
            "subject": subject,
            "textContent": text,
        }
        try:
            response = self._client.post(self.api_url, json=data, headers=self._headers)
        except httpx.HTTPError as e:
            raise MailTransportError(f"Mail provider unreachable: {e}") from e
        if response.status_code >= 400:
            raise MailTransportError(
                f"Mail provider returned status {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

    def close(self) -> None:
        self._client.close()


class ConsoleMailTransport:
    """Dev transport: logs the message instead of sending it."""

    def send(self, to: str, subject: str, text: str) -> None:
        logger.info("Mail (console backend) to=%s subject=%s body=%s", to, subject, text)

    def close(self) -> None:
        pass


def build_mail_transport(settings: "Settings") -> HttpMailTransport | ConsoleMailTransport:
    """Select the transport for MAIL_BACKEND; http requires MAIL_API_KEY and MAIL_SENDER."""
    if settings.MAIL_BACKEND == "console":
        return ConsoleMailTransport()
    if settings.MAIL_API_KEY is None or not settings.MAIL_SENDER:
        raise ValueError("MAIL_BACKEND=http requires MAIL_API_KEY and MAIL_SENDER")
    return HttpMailTransport(
        api_url=settings.MAIL_API_URL,
        api_key=settings.MAIL_API_KEY.get_secret_value(),
        sender=settings.MAIL_SENDER,
        sender_name=settings.MAIL_SENDER_NAME,
        timeout=settings.MAIL_REQUEST_TIMEOUT_SEC,
    )
