"""Assertions over boolean subjects that may be absent."""

from __future__ import annotations

from typing import Any, Mapping

from fluentcheck.constraint import AndConstraint
from fluentcheck.execution.scope import assertion
from fluentcheck.option import Option, Some, to_option


class BooleanAssertions:
    def __init__(
        self,
        value: bool | Option | None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        self.subject: Option = to_option(value)
        self.context = context

    def _is(self, expected: Any) -> bool:
        if not isinstance(self.subject, Some):
            return False
        value = self.subject.value
        return isinstance(value, bool) and isinstance(expected, bool) and value == expected

    def _matches(self, expected: Option) -> bool:
        if isinstance(expected, Some):
            return self._is(expected.value)
        return not isinstance(self.subject, Some)

    def be_true(
        self, because: str | None = None, *because_args: Any
    ) -> AndConstraint[BooleanAssertions]:
        assertion(self.context).for_condition(self._is(True)).because_of(
            because, *because_args
        ).fail_with("Expected True{reason}, but found {0}.", self.subject)
        return AndConstraint(self)

    def be_false(
        self, because: str | None = None, *because_args: Any
    ) -> AndConstraint[BooleanAssertions]:
        assertion(self.context).for_condition(self._is(False)).because_of(
            because, *because_args
        ).fail_with("Expected False{reason}, but found {0}.", self.subject)
        return AndConstraint(self)

    def be(
        self,
        expected: bool | Option | None,
        because: str | None = None,
        *because_args: Any,
    ) -> AndConstraint[BooleanAssertions]:
        """Asserts that the value equals *expected*, which may itself be absent."""
        expected = to_option(expected)
        assertion(self.context).for_condition(self._matches(expected)).because_of(
            because, *because_args
        ).fail_with("Expected {0}{reason}, but found {1}.", expected, self.subject)
        return AndConstraint(self)

    def not_be_false(
        self, because: str | None = None, *because_args: Any
    ) -> AndConstraint[BooleanAssertions]:
        """Asserts that the value is not False; an absent value passes."""
        assertion(self.context).for_condition(not self._is(False)).because_of(
            because, *because_args
        ).fail_with(
            "Expected nullable boolean not to be {0}{reason}, but found {1}.",
            False,
            self.subject,
        )
        return AndConstraint(self)

    def not_be_true(
        self, because: str | None = None, *because_args: Any
    ) -> AndConstraint[BooleanAssertions]:
        """Asserts that the value is not True; an absent value passes."""
        assertion(self.context).for_condition(not self._is(True)).because_of(
            because, *because_args
        ).fail_with(
            "Expected nullable boolean not to be {0}{reason}, but found {1}.",
            True,
            self.subject,
        )
        return AndConstraint(self)
