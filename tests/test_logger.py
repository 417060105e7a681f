"""
Tests for logger setup.
"""

import logging

from astrax.utils.logger import get_logger


def test_handler_attached_once():
    first = get_logger("astrax.tests.once")
    second = get_logger("astrax.tests.once")
    assert first is second
    assert len(first.handlers) == 1


def test_explicit_level():
    logger = get_logger("astrax.tests.level", level=logging.DEBUG)
    assert logger.level == logging.DEBUG


def test_format_has_name_and_level():
    handler = get_logger("astrax.tests.fmt").handlers[0]
    record = logging.LogRecord("astrax.tests.fmt", logging.INFO, __file__, 1, "hello", None, None)
    line = handler.format(record)
    assert " | astrax.tests.fmt | INFO | hello" in line
