from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class AndConstraint(Generic[T]):
    """Returned by every assertion so further checks can chain off ``and_``."""

    __slots__ = ("_helper",)

    def __init__(self, helper: T) -> None:
        self._helper = helper

    @property
    def and_(self) -> T:
        return self._helper

    def __repr__(self) -> str:
        return f"AndConstraint({self._helper!r})"
