import logging

import pytest

from sitelang.utils.app_logger import LOG_FORMAT, configure_logging


@pytest.mark.unit
def test_configure_logging_sets_root_level():
    previous = logging.root.level
    try:
        configure_logging("warning")
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.setLevel(previous)


@pytest.mark.unit
def test_configure_logging_unknown_level_defaults_to_info():
    previous = logging.root.level
    try:
        configure_logging("verbose")
        assert logging.root.level == logging.INFO
    finally:
        logging.root.setLevel(previous)


@pytest.mark.unit
def test_configure_logging_adds_handler_only_once():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    previous = root.level
    root.handlers = []
    try:
        configure_logging("DEBUG")
        configure_logging("DEBUG")
        assert len(root.handlers) == 1
        assert root.handlers[0].formatter._fmt == LOG_FORMAT
    finally:
        root.handlers = saved_handlers
        root.setLevel(previous)
