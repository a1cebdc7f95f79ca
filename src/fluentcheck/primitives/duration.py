"""Assertions over ``datetime.timedelta`` subjects."""

from __future__ import annotations

import operator
from datetime import timedelta
from typing import Any, Callable, Mapping

from fluentcheck.config import get_config
from fluentcheck.constraint import AndConstraint
from fluentcheck.execution.formatting import duration_fields
from fluentcheck.execution.scope import assertion
from fluentcheck.option import Option, Some, to_option

_ZERO = timedelta(0)


class DurationAssertions:
    """Contains a number of methods to assert that a duration is in the expected state.

    The subject may be absent; every comparison against an absent subject
    fails with ``<null>`` reported as the actual value.
    """

    def __init__(
        self,
        value: timedelta | Option | None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        self.subject: Option = to_option(value)
        self.context = context

    def _holds(self, op: Callable[[Any, Any], bool], other: timedelta) -> bool:
        return isinstance(self.subject, Some) and op(self.subject.value, other)

    def be_positive(
        self, because: str | None = None, *because_args: Any
    ) -> AndConstraint[DurationAssertions]:
        """Asserts that the duration is greater than zero."""
        assertion(self.context).for_condition(
            self._holds(operator.gt, _ZERO)
        ).because_of(because, *because_args).fail_with(
            "Expected positive value{reason}, but found {0}", self.subject
        )
        return AndConstraint(self)

    def be_negative(
        self, because: str | None = None, *because_args: Any
    ) -> AndConstraint[DurationAssertions]:
        """Asserts that the duration is less than zero."""
        assertion(self.context).for_condition(
            self._holds(operator.lt, _ZERO)
        ).because_of(because, *because_args).fail_with(
            "Expected negative value{reason}, but found {0}", self.subject
        )
        return AndConstraint(self)

    def be(
        self,
        expected: timedelta | Option | None,
        because: str | None = None,
        *because_args: Any,
    ) -> AndConstraint[DurationAssertions]:
        """Asserts that the duration equals *expected*.

        An absent *expected* only matches an absent subject.
        """
        expected = to_option(expected)
        assertion(self.context).for_condition(
            self.subject == expected
        ).because_of(because, *because_args).fail_with(
            "Expected {0}{reason}, but found {1}.", expected, self.subject
        )
        return AndConstraint(self)

    def not_be(
        self, unexpected: timedelta, because: str | None = None, *because_args: Any
    ) -> AndConstraint[DurationAssertions]:
        assertion(self.context).for_condition(
            self._holds(operator.ne, unexpected)
        ).because_of(because, *because_args).fail_with(
            "Did not expect {0}{reason}.", unexpected
        )
        return AndConstraint(self)

    def be_less_than(
        self, expected: timedelta, because: str | None = None, *because_args: Any
    ) -> AndConstraint[DurationAssertions]:
        assertion(self.context).for_condition(
            self._holds(operator.lt, expected)
        ).because_of(because, *because_args).fail_with(
            "Expected a value less than {0}{reason}, but found {1}.",
            expected,
            self.subject,
        )
        return AndConstraint(self)

    def be_less_or_equal_to(
        self, expected: timedelta, because: str | None = None, *because_args: Any
    ) -> AndConstraint[DurationAssertions]:
        assertion(self.context).for_condition(
            self._holds(operator.le, expected)
        ).because_of(because, *because_args).fail_with(
            "Expected a value less or equal to {0}{reason}, but found {1}.",
            expected,
            self.subject,
        )
        return AndConstraint(self)

    def be_greater_than(
        self, expected: timedelta, because: str | None = None, *because_args: Any
    ) -> AndConstraint[DurationAssertions]:
        assertion(self.context).for_condition(
            self._holds(operator.gt, expected)
        ).because_of(because, *because_args).fail_with(
            "Expected a value greater than {0}{reason}, but found {1}.",
            expected,
            self.subject,
        )
        return AndConstraint(self)

    def be_greater_or_equal_to(
        self, expected: timedelta, because: str | None = None, *because_args: Any
    ) -> AndConstraint[DurationAssertions]:
        assertion(self.context).for_condition(
            self._holds(operator.ge, expected)
        ).because_of(because, *because_args).fail_with(
            "Expected a value greater or equal to {0}{reason}, but found {1}.",
            expected,
            self.subject,
        )
        return AndConstraint(self)

    def be_close_to(
        self,
        nearby: timedelta,
        precision: int | None = None,
        because: str | None = None,
        *because_args: Any,
    ) -> AndConstraint[DurationAssertions]:
        """Asserts that the duration is within *precision* milliseconds of *nearby*.

        Args:
            nearby: The expected duration.
            precision: Maximum difference in whole milliseconds. Defaults to
                the configured ``default_precision_ms`` (20).
            because: Optional phrase explaining why the assertion is needed.
            because_args: Values for ``{n}`` placeholders in *because*.

        The bounds are rebuilt from the day, hour, minute and second fields of
        *nearby* with only the millisecond field moved by *precision*, so any
        sub-millisecond part of *nearby* does not widen or shift the window.
        """
        if precision is None:
            precision = get_config().default_precision_ms

        fields = duration_fields(nearby)
        minimum = timedelta(
            days=fields.days,
            hours=fields.hours,
            minutes=fields.minutes,
            seconds=fields.seconds,
            milliseconds=fields.milliseconds - precision,
        )
        maximum = timedelta(
            days=fields.days,
            hours=fields.hours,
            minutes=fields.minutes,
            seconds=fields.seconds,
            milliseconds=fields.milliseconds + precision,
        )

        assertion(self.context).for_condition(
            self._holds(operator.ge, minimum) and self._holds(operator.le, maximum)
        ).because_of(because, *because_args).fail_with(
            "Expected {context:time} to be within {0} ms from {1}{reason}, but found {2}.",
            precision,
            nearby,
            self.subject,
        )
        return AndConstraint(self)
