"""Message templates and value formatting for failure messages."""

from __future__ import annotations

import re
from datetime import timedelta
from functools import singledispatch
from typing import Any, Callable, Mapping, NamedTuple, Sequence

from fluentcheck.config import get_config
from fluentcheck.execution.base import TemplateError
from fluentcheck.option import Nothing, Some

_TOKEN_RE = re.compile(
    r"(?P<open>\{\{)|(?P<close>\}\})"
    r"|\{(?:(?P<index>\d+)|(?P<reason>reason)|context:(?P<context>[^{}]*))\}"
)

_ONE_MICROSECOND = timedelta(microseconds=1)


class Deferred:
    """A substitution value computed only when a failure message is rendered."""

    def __init__(self, supplier: Callable[[], Any]) -> None:
        self._supplier = supplier

    def resolve(self) -> Any:
        return self._supplier()

    def __repr__(self) -> str:
        return f"Deferred({self._supplier!r})"


class DurationFields(NamedTuple):
    """Components of a duration, each truncated toward zero and sharing its sign."""

    days: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int
    microseconds: int


def duration_fields(value: timedelta) -> DurationFields:
    total = value // _ONE_MICROSECOND
    sign = -1 if total < 0 else 1
    rest, microseconds = divmod(abs(total), 1000)
    rest, milliseconds = divmod(rest, 1000)
    rest, seconds = divmod(rest, 60)
    rest, minutes = divmod(rest, 60)
    days, hours = divmod(rest, 24)
    return DurationFields(
        sign * days,
        sign * hours,
        sign * minutes,
        sign * seconds,
        sign * milliseconds,
        sign * microseconds,
    )


def format_duration(value: timedelta) -> str:
    """Render a duration as ``[-][d.]hh:mm:ss[.ffffff]``.

    >>> format_duration(timedelta(seconds=-5))
    '-00:00:05'
    >>> format_duration(timedelta(days=1, milliseconds=250))
    '1.00:00:00.250000'
    """
    fields = duration_fields(abs(value))
    text = f"{fields.hours:02d}:{fields.minutes:02d}:{fields.seconds:02d}"
    if fields.days:
        text = f"{fields.days}.{text}"
    fraction = fields.milliseconds * 1000 + fields.microseconds
    if fraction:
        text = f"{text}.{fraction:06d}"
    return f"-{text}" if value < timedelta(0) else text


@singledispatch
def format_value(value: Any) -> str:
    """Render a substitution value for a failure message.

    Register additional types with ``@format_value.register``.
    """
    return str(value)


@format_value.register(type(None))
@format_value.register(Nothing)
def _format_absent(value: Any) -> str:
    return get_config().formatting.null_token


@format_value.register(Some)
def _format_some(value: Some) -> str:
    return format_value(value.value)


@format_value.register(Deferred)
def _format_deferred(value: Deferred) -> str:
    return format_value(value.resolve())


@format_value.register(str)
def _format_str(value: str) -> str:
    if get_config().formatting.quote_strings:
        return f'"{value}"'
    return value


@format_value.register(timedelta)
def _format_timedelta(value: timedelta) -> str:
    return format_duration(value)


def format_plain(value: Any) -> str:
    """Render a value by its natural ``str()`` form, keeping the null token for absence."""
    if isinstance(value, Deferred):
        value = value.resolve()
    if isinstance(value, Some):
        value = value.value
    if value is None or isinstance(value, Nothing):
        return get_config().formatting.null_token
    if isinstance(value, timedelta):
        return format_duration(value)
    return str(value)


def expand(
    template: str,
    values: Sequence[Any],
    formatter: Callable[[Any], str] = format_value,
    *,
    reason: str | None = None,
    context: Mapping[str, str] | None = None,
) -> str:
    """Substitute placeholders in *template*.

    ``{reason}`` and ``{context:...}`` tokens are only resolved when *reason*
    and *context* are given; otherwise they are kept verbatim.
    """

    def _replace(m: re.Match) -> str:
        if m.group("open"):
            return "{"
        if m.group("close"):
            return "}"
        if m.group("reason") is not None:
            if reason is None:
                return m.group(0)
            if not reason or reason[:1].isspace():
                return reason
            return f" {reason}"
        if m.group("context") is not None:
            if context is None:
                return m.group(0)
            label = m.group("context")
            return context.get(label, label)
        index = int(m.group("index"))
        if index >= len(values):
            raise TemplateError(template, index, len(values))
        return formatter(values[index])

    return _TOKEN_RE.sub(_replace, template)


def render(
    template: str,
    values: Sequence[Any] = (),
    context: Mapping[str, str] | None = None,
    reason: str = "",
) -> str:
    """Produce the final failure message.

    *reason* is the already formatted "because ..." clause; it is inserted
    with a single leading space unless it already starts with whitespace,
    or dropped entirely when empty.
    """
    return expand(template, values, format_value, reason=reason, context=context or {})
