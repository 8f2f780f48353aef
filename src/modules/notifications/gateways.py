"""WhatsApp gateway client (Fonnte).

``FonnteClient.send_message`` never raises: every failure (missing
token, HTTP error, gateway rejection, network or decoding error)
is reported as a ``FAILED`` ``SendResult`` and logged.  Callers record
the status and move on; there is no retry here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
import structlog
from django.conf import settings

from modules.orders.constants import NotificationStatus

logger = structlog.get_logger(__name__)

_NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True)
class SendResult:
    status: str
    message: str

    @property
    def sent(self) -> bool:
        return self.status == NotificationStatus.SENT


def format_phone(phone: str, country_code: Optional[str] = None) -> str:
    """Normalise a local phone number to international digits.

    ``0812-3456-7890`` → ``6281234567890``.  Non-digits and leading zeros
    are dropped and the country code is prefixed when absent.
    """
    code = country_code or settings.FONNTE_COUNTRY_CODE
    digits = _NON_DIGITS.sub("", phone).lstrip("0")
    if not digits.startswith(code):
        digits = code + digits
    return digits


class FonnteClient:
    """Thin client for Fonnte's ``/send`` endpoint."""

    def __init__(
        self,
        url: Optional[str] = None,
        token: Optional[str] = None,
        country_code: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url or settings.FONNTE_URL
        self.token = settings.FONNTE_TOKEN if token is None else token
        self.country_code = country_code or settings.FONNTE_COUNTRY_CODE
        self.timeout = timeout or settings.FONNTE_TIMEOUT
        self._session = session or requests.Session()

    def send_message(self, phone: str, message: str) -> SendResult:
        if not self.token:
            logger.warning("fonnte.token_missing")
            return SendResult(NotificationStatus.FAILED, "Fonnte token not configured")

        target = format_phone(phone, self.country_code)
        log = logger.bind(phone=target)

        try:
            response = self._session.post(
                self.url,
                headers={"Authorization": self.token},
                json={
                    "target": target,
                    "message": message,
                    "countryCode": self.country_code,
                },
                timeout=self.timeout,
            )
            body = self._decode(response)
        except (requests.RequestException, ValueError) as exc:
            log.error("fonnte.request_failed", error=str(exc))
            return SendResult(NotificationStatus.FAILED, str(exc))

        if response.ok and body.get("status") is True:
            log.info("fonnte.message_sent")
            return SendResult(NotificationStatus.SENT, "Message sent successfully")

        log.error(
            "fonnte.message_rejected",
            status_code=response.status_code,
            response=body,
        )
        return SendResult(
            NotificationStatus.FAILED,
            str(body.get("reason") or "Failed to send message"),
        )

    @staticmethod
    def _decode(response: requests.Response) -> Dict[str, Any]:
        """Parse the JSON body; a non-object body counts as empty."""
        body = response.json()
        return body if isinstance(body, dict) else {}
