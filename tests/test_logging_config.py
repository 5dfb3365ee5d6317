"""Tests for root logger setup."""

import logging

from coffee_api.logging_config import setup_logging


def test_setup_logging_is_idempotent(mocker):
    root = logging.Logger("test-root")
    mocker.patch("coffee_api.logging_config.logging.getLogger", return_value=root)

    setup_logging("debug")
    setup_logging("warning")

    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG


def test_setup_logging_unknown_level_defaults_to_info(mocker):
    root = logging.Logger("test-root")
    mocker.patch("coffee_api.logging_config.logging.getLogger", return_value=root)

    setup_logging("chatty")

    assert root.level == logging.INFO
