"""Tests for logging setup."""

import logging

from opentdb.logger import configure_logging


def test_configure_logging_installs_one_handler() -> None:
    log = logging.getLogger("opentdb")
    before = list(log.handlers)
    try:
        configure_logging(logging.DEBUG)
        configure_logging(logging.INFO)
        added = [h for h in log.handlers if h not in before]
        assert len(added) == 1
        assert log.level == logging.INFO
    finally:
        log.handlers = before
        log.setLevel(logging.NOTSET)
