from __future__ import annotations

import logging

import httpx

from insights.services.notification.base import Notifier

logger = logging.getLogger(__name__)


class SendGridNotifier(Notifier):
    """HTML email through the SendGrid v3 ``mail/send`` endpoint."""

    def __init__(
        self,
        api_key: str,
        sender: str,
        base_url: str = "https://api.sendgrid.com/v3",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.sender = sender
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def name(self) -> str:
        return "sendgrid"

    def _payload(self, recipient: str, subject: str, html_body: str) -> dict:
        return {
            "personalizations": [{"to": [{"email": recipient}]}],
            "from": {"email": self.sender},
            "subject": subject,
            "content": [{"type": "text/html", "value": html_body}],
        }

    async def notify(self, recipient: str, subject: str, html_body: str) -> bool:
        logger.info("Sending '%s' to %s", subject, recipient)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(
                    f"{self.base_url}/mail/send",
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    json=self._payload(recipient, subject, html_body),
                )
        except httpx.HTTPError:
            logger.error("SendGrid request failed", exc_info=True)
            return False

        if resp.status_code >= 400:
            logger.error("SendGrid returned %d: %s", resp.status_code, resp.text[:500])
            return False
        logger.info("SendGrid accepted message (status %d)", resp.status_code)
        return True
