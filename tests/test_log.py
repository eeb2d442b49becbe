# Tests for log.py

import logging

from log import get_logger


def test_logger_hierarchy():
    logger = get_logger("demo")
    assert logger.name == "freemodule.demo"
    assert logger.parent is logging.getLogger("freemodule")


def test_package_loggers_are_not_double_prefixed():
    assert get_logger("freemodule.module").name == "freemodule.module"
