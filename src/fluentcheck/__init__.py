"""Fluent assertions with lazily rendered, human-readable failure messages."""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Mapping

from fluentcheck.config import AssertionConfig, configure, get_config, load_config
from fluentcheck.constraint import AndConstraint
from fluentcheck.execution import (
    AssertionFailure,
    AssertionScope,
    Deferred,
    TemplateError,
    assertion,
    format_reason,
    format_value,
    render,
)
from fluentcheck.option import NOTHING, Nothing, Option, Some, to_option
from fluentcheck.primitives import (
    BooleanAssertions,
    DurationAssertions,
    OptionalAssertions,
)

_HELPERS: dict[type, type] = {
    bool: BooleanAssertions,
    timedelta: DurationAssertions,
}


def should(
    value: Any,
    kind: type | None = None,
    *,
    context: Mapping[str, str] | None = None,
) -> OptionalAssertions:
    """Start a chain of assertions about *value*.

    The helper is picked from the value's type, or from *kind* when given.
    *kind* is required for absent values since there is nothing to inspect.
    """
    option = to_option(value)
    if kind is None:
        if not isinstance(option, Some):
            raise TypeError(
                "Cannot infer assertion type for an absent value; pass kind="
            )
        kind = type(option.value)

    for base in kind.__mro__:
        cls = _HELPERS.get(base)
        if cls is not None:
            return OptionalAssertions(cls(option, context))

    raise TypeError(
        f"No assertions available for {kind.__name__!r}. "
        f"Available: {', '.join(sorted(t.__name__ for t in _HELPERS))}"
    )


__all__ = [
    "NOTHING",
    "AndConstraint",
    "AssertionConfig",
    "AssertionFailure",
    "AssertionScope",
    "BooleanAssertions",
    "Deferred",
    "DurationAssertions",
    "Nothing",
    "Option",
    "OptionalAssertions",
    "Some",
    "TemplateError",
    "assertion",
    "configure",
    "format_reason",
    "format_value",
    "get_config",
    "load_config",
    "render",
    "should",
    "to_option",
]
