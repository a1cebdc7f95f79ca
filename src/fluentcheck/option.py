"""Tagged optional values used as assertion subjects.

``Some(value)`` marks a present value, ``NOTHING`` an absent one. Keeping the
tag separate from the value means "absent" never collides with a present zero
value such as ``timedelta(0)`` or ``False``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Some(Generic[T]):
    value: T


class Nothing:
    _instance: Nothing | None = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOTHING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "NOTHING"


NOTHING = Nothing()

Option = Union[Some[T], Nothing]


def to_option(value: Any) -> Option:
    """Wrap a raw value, treating ``None`` as absent.

    Values that are already tagged are returned unchanged.
    """
    if isinstance(value, (Some, Nothing)):
        return value
    if value is None:
        return NOTHING
    return Some(value)


def is_present(option: Option) -> bool:
    return isinstance(option, Some)
