"""
Name: Logging Notifier Unit Tests
"""

import logging

import pytest

from cardify.infrastructure.notifications import LoggingNotifier


pytestmark = pytest.mark.unit


def test_notice_is_logged_at_info(caplog):
    notifier = LoggingNotifier(logging.getLogger("cardify.notices.test"))

    with caplog.at_level(logging.INFO, logger="cardify.notices.test"):
        notifier.notify("2 new files stored in Deck")

    assert caplog.records[-1].getMessage() == "2 new files stored in Deck"
    assert caplog.records[-1].notice is True


def test_default_logger_name():
    assert LoggingNotifier()._logger.name == "cardify.notices"
