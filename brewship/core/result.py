"""Result type used by every release step.

Steps return ``Ok(value)`` or ``Err(error)`` instead of raising, so the
pipeline driver can short-circuit on the first failure while the temporary
directory cleanup still runs.

Usage:
    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Err(f"not a port: {raw}")
        return Ok(int(raw))

    match parse_port("8080"):
        case Ok(port):
            print(port)
        case Err(message):
            print(message)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        """Transform the carried value."""
        return Ok(f(self.value))

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E

    def map(self, f: Callable[[T], U]) -> Err[E]:
        """Errors pass through ``map`` untouched."""
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]

