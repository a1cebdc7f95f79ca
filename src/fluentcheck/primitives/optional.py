"""Presence checks layered over any subject-holding assertion helper."""

from __future__ import annotations

import functools
from typing import Any, Generic, TypeVar

from fluentcheck.constraint import AndConstraint
from fluentcheck.execution.scope import assertion
from fluentcheck.option import Option, is_present

H = TypeVar("H")


class OptionalAssertions(Generic[H]):
    """Adds ``have_value``/``not_have_value`` to an inner helper.

    Any other attribute is looked up on the inner helper. Chaining results
    returned by the inner helper are re-pointed at this wrapper so that
    ``and_`` keeps exposing the presence checks.
    """

    def __init__(self, inner: H) -> None:
        self._inner = inner

    @property
    def inner(self) -> H:
        return self._inner

    @property
    def subject(self) -> Option:
        return self._inner.subject

    def have_value(
        self, because: str | None = None, *because_args: Any
    ) -> AndConstraint[OptionalAssertions[H]]:
        assertion(self._inner.context).for_condition(
            is_present(self.subject)
        ).because_of(because, *because_args).fail_with("Expected a value{reason}.")
        return AndConstraint(self)

    def not_have_value(
        self, because: str | None = None, *because_args: Any
    ) -> AndConstraint[OptionalAssertions[H]]:
        assertion(self._inner.context).for_condition(
            not is_present(self.subject)
        ).because_of(because, *because_args).fail_with(
            "Did not expect a value{reason}, but found {0}.", self.subject
        )
        return AndConstraint(self)

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not defined on the wrapper itself
        if name == "_inner":
            raise AttributeError(name)
        attr = getattr(self._inner, name)
        if not callable(attr):
            return attr

        @functools.wraps(attr)
        def _delegate(*args: Any, **kwargs: Any) -> Any:
            result = attr(*args, **kwargs)
            if isinstance(result, AndConstraint) and result.and_ is self._inner:
                return AndConstraint(self)
            return result

        return _delegate

    def __repr__(self) -> str:
        return f"OptionalAssertions({self._inner!r})"
