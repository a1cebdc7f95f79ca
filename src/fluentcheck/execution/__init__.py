"""Assertion execution engine: scopes, reasons and failure messages."""

from fluentcheck.execution.base import AssertionFailure, TemplateError
from fluentcheck.execution.formatting import Deferred, format_value, render
from fluentcheck.execution.reason import format_reason
from fluentcheck.execution.scope import AssertionScope, assertion

__all__ = [
    "AssertionFailure",
    "AssertionScope",
    "Deferred",
    "TemplateError",
    "assertion",
    "format_reason",
    "format_value",
    "render",
]
