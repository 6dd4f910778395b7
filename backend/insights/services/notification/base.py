from __future__ import annotations

import abc
import logging

logger = logging.getLogger(__name__)


class Notifier(abc.ABC):
    @property
    @abc.abstractmethod
    def name(self) -> str: ...

    @abc.abstractmethod
    async def notify(self, recipient: str, subject: str, html_body: str) -> bool:
        """Deliver a message. Best-effort: returns False on failure, never raises."""


class LoggingNotifier(Notifier):
    """Writes notifications to the log instead of sending them."""

    @property
    def name(self) -> str:
        return "log"

    async def notify(self, recipient: str, subject: str, html_body: str) -> bool:
        logger.info("Notification for %s: %s (%d chars)", recipient, subject, len(html_body))
        return True


def build_notifier() -> Notifier:
    """Pick the notifier from settings: SendGrid when an API key is configured."""
    from insights.config import settings

    if settings.sendgrid_api_key:
        from insights.services.notification.sendgrid_notifier import SendGridNotifier

        return SendGridNotifier(
            api_key=settings.sendgrid_api_key,
            sender=settings.sender_email,
            base_url=settings.sendgrid_base_url,
            timeout=settings.notification_timeout,
        )
    return LoggingNotifier()
