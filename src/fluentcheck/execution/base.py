"""Base error types for the assertion engine."""


class AssertionFailure(AssertionError):
    """Raised when an assertion's condition does not hold.

    Attributes:
        message: The fully rendered failure message. Consumers should treat it
            as opaque display text; failures carry no other structured fields.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TemplateError(LookupError):
    """A message template referenced a positional value that was not supplied.

    This signals a mismatch between a call site's template and its arguments,
    not a failed assertion, so it is never raised as ``AssertionFailure``.
    """

    def __init__(self, template: str, index: int, supplied: int) -> None:
        super().__init__(
            f"Template {template!r} references {{{index}}} "
            f"but only {supplied} value(s) were supplied"
        )
        self.template = template
        self.index = index
        self.supplied = supplied
