"""Pytest configuration and fixtures."""

import logging

import pytest

from shouldbe.exceptions import AssertionFailedException
from shouldbe.extensions import assertion, registered_assertions, unregister_assertion
from shouldbe.formatting import formatters
from shouldbe.testable import Testable, reset_label_provider


@pytest.fixture(autouse=True)
def reset_process_state():
    """Restore formatters, label provider, registered assertions and shouldbe loggers after each test."""
    before = {name: getattr(Testable, name) for name in registered_assertions()}

    yield

    for name in registered_assertions():
        if name not in before:
            unregister_assertion(name)
    for name, func in before.items():
        if getattr(Testable, name, None) is not func:
            assertion(func, name=name, replace=True)

    formatters.clear()
    reset_label_provider()

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name == "shouldbe" or name.startswith("shouldbe_test")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


def _normalize(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n").strip().replace("\t", "    ")


@pytest.fixture
def assert_exn_msg():
    """Assert that calling *f* raises AssertionFailedException with message *msg*.

    Both sides are compared after line-ending normalization, trimming and
    expanding tabs to four spaces.
    """

    def _check(f, msg: str) -> AssertionFailedException:
        with pytest.raises(AssertionFailedException) as exc_info:
            f()
        assert _normalize(exc_info.value.message) == _normalize(msg)
        return exc_info.value

    return _check
