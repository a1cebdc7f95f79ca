"""Two-phase assertion evaluation: decide first, format only on failure."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from fluentcheck.config import get_config
from fluentcheck.execution.base import AssertionFailure
from fluentcheck.execution.formatting import render
from fluentcheck.execution.reason import format_reason

logger = logging.getLogger(__name__)


class AssertionScope:
    """Holds the outcome of a single assertion until ``fail_with`` is reached.

    Call sites chain the three steps as one unit::

        assertion().for_condition(ok).because_of(because, *args).fail_with(
            "Expected {0}{reason}, but found {1}.", expected, actual
        )

    Nothing is formatted unless the condition is false. A scope that is
    dropped before ``fail_with`` has no effect.
    """

    def __init__(self, context: Mapping[str, str] | None = None) -> None:
        self._succeeded = True
        self._reason: str | None = None
        self._reason_args: tuple[Any, ...] = ()
        self._context = context

    @property
    def succeeded(self) -> bool:
        return self._succeeded

    def for_condition(self, condition: bool) -> AssertionScope:
        self._succeeded = bool(condition)
        return self

    def because_of(self, reason: str | None, *args: Any) -> AssertionScope:
        # Stored as-is; formatted only on the failure path
        self._reason = reason
        self._reason_args = args
        return self

    def fail_with(self, template: str, *values: Any) -> bool:
        """Raise ``AssertionFailure`` if the condition was false.

        Returns True when the condition held, without touching the template
        or any of the values.
        """
        if self._succeeded:
            return True

        reason = format_reason(self._reason, self._reason_args)
        message = render(template, values, self._context, reason)

        if get_config().log_failures:
            logger.debug(f"Assertion failed: {message}")
        raise AssertionFailure(message)


def assertion(context: Mapping[str, str] | None = None) -> AssertionScope:
    """Start evaluating a new assertion."""
    return AssertionScope(context)
