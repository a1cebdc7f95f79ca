from fluentcheck.primitives.boolean import BooleanAssertions
from fluentcheck.primitives.duration import DurationAssertions
from fluentcheck.primitives.optional import OptionalAssertions

__all__ = [
    "BooleanAssertions",
    "DurationAssertions",
    "OptionalAssertions",
]
