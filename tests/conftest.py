"""Pytest configuration and fixtures."""

import logging

import pytest

from fluentcheck.config import configure


@pytest.fixture(autouse=True)
def reset_config():
    """Give every test the default configuration."""
    configure()
    yield
    configure()


def _close_handlers(logger):
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up fluentcheck loggers after each test so handlers don't leak."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("fluentcheck_")
    ]

    for name in loggers_to_remove:
        _close_handlers(logging.getLogger(name))
        del logging.Logger.manager.loggerDict[name]

    _close_handlers(logging.getLogger("fluentcheck"))


class Unformattable:
    """A value that blows up if anything tries to render it."""

    def __str__(self) -> str:
        raise RuntimeError("formatted on the success path")

    def __repr__(self) -> str:
        raise RuntimeError("formatted on the success path")


@pytest.fixture
def unformattable():
    return Unformattable()
