"""Success/error notification sinks used by the API client."""

from __future__ import annotations

from typing import Protocol

from topoclient.utils.logging import get_logger

logger = get_logger(__name__)


class Notifier(Protocol):
    def notify_success(self, message: str) -> None: ...

    def notify_error(self, message: str) -> None: ...


class LoggingNotifier:
    """Default notifier: forwards messages to the structured log."""

    def notify_success(self, message: str) -> None:
        logger.info("notify_success", message=message)

    def notify_error(self, message: str) -> None:
        logger.error("notify_error", message=message)
