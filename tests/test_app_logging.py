"""Tests for logging configuration."""

import logging

from fitness_tracker.app_logging import LOGGER_NAME, configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.propagate is False


def test_service_loggers_are_children_of_package_logger() -> None:
    child = logging.getLogger("fitness_tracker.services.sessions")

    assert child.parent is logging.getLogger(LOGGER_NAME)
