"""Deferred values.

A Supplier wraps a zero-argument callable that produces a temporal value
on demand, such as "the current instant". Coercion and interval functions
resolve a Supplier before working with its value. Plain callables are
never treated as suppliers.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Supplier(Generic[T]):
    """A deferred, zero-argument source of a value.

    Examples:
        >>> from tempus.core.year import Year
        >>> s = Supplier(lambda: Year(2017))
        >>> s.resolve()
        Year(2017)
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[], T]) -> None:
        if not callable(fn):
            raise TypeError(f"Supplier needs a zero-argument callable, got {type(fn).__name__}")
        self._fn = fn

    @classmethod
    def of_value(cls, value: T) -> Supplier[T]:
        """Create a Supplier that always returns the same value."""
        return cls(lambda: value)

    def resolve(self) -> T:
        """Invoke the wrapped callable and return its value."""
        return self._fn()

    def __repr__(self) -> str:
        name = getattr(self._fn, "__name__", type(self._fn).__name__)
        return f"Supplier({name})"


def resolve(value: object) -> object:
    """Return the supplied value for a Supplier, or the value itself.

    Examples:
        >>> resolve(Supplier(lambda: 42))
        42
        >>> resolve(42)
        42
    """
    if isinstance(value, Supplier):
        return value.resolve()
    return value


__all__ = ["Supplier", "resolve"]
