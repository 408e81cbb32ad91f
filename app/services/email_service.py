# File: app/services/email_service.py

"""
Email notifier.

There is no mail transport wired up; messages are logged and the most
recent ones are kept in a bounded in-memory outbox so they can be
inspected (tests, local runs).
"""

import logging
from collections import deque
from typing import Deque, Tuple

from app.core.config import settings
from app.services.interfaces import Notifier

logger = logging.getLogger(__name__)

WELCOME = "welcome"
GOODBYE = "goodbye"


class LoggingEmailService(Notifier):
    def __init__(self, sender: str | None = None, outbox_size: int | None = None):
        self.sender = sender or settings.mail_sender
        # Oldest entries drop off once the outbox is full
        self.sent: Deque[Tuple[str, str]] = deque(maxlen=outbox_size or settings.outbox_size)

    def send_welcome_email(self, email: str) -> None:
        self._send(WELCOME, email)

    def send_goodbye_email(self, email: str) -> None:
        self._send(GOODBYE, email)

    def _send(self, kind: str, recipient: str) -> None:
        logger.info("Sending %s email from %s to %s", kind, self.sender, recipient)
        self.sent.append((kind, recipient))
