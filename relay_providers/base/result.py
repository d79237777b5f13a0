"""Outcome type returned by every network-touching provider operation.

A :data:`Result` is exactly one of :class:`Ok` (carrying a value) or
:class:`Err` (carrying a :class:`ProviderError`). Provider clients return
results instead of raising so that no transport or parsing failure reaches a
caller unclassified.

Example::

    result = await provider.query_chat_model(messages)
    if result.is_ok():
        print(result.value)
    else:
        print(result.error.message)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from .errors import ProviderError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying a classified provider error."""

    error: ProviderError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[object], object]) -> "Err":
        return self

    def unwrap(self):
        """Raise the carried error."""
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err]


__all__ = ["Ok", "Err", "Result"]
