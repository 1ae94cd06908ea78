"""
Name: Notifiers

Responsibilities:
  - Deliver single-line status messages to the user

Notes:
  - LoggingNotifier is the default when no host surface is wired in
"""

import logging


class LoggingNotifier:
    """R: Notifier that forwards notices to the cardify logger."""

    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger("cardify.notices")

    def notify(self, message: str) -> None:
        self._logger.info(message, extra={"notice": True})
