"""Tests for CLI logging setup."""

from __future__ import annotations

import logging

from twotouch.utils.logging_setup import setup_logging


class TestSetupLogging:
    def test_package_logger_only(self):
        root_handlers = list(logging.getLogger().handlers)
        logger = setup_logging("warning")
        assert logger.name == "twotouch"
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert logging.getLogger().handlers == root_handlers

    def test_repeated_calls_replace_handler(self):
        setup_logging("DEBUG")
        logger = setup_logging("INFO")
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO

    def test_unknown_level_falls_back_to_info(self):
        assert setup_logging("chatty").level == logging.INFO
