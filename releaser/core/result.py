"""Result type for explicit error handling.

Every git call and every release step can fail, and the release pipeline
must stop at the first failure and hand that failure back untouched.
Returning ``Ok``/``Err`` values keeps those failure paths visible at each
call site instead of hiding them in exception handlers.

Usage:
    match repo_result:
        case Ok(repo):
            print(repo.path)
        case Err(error):
            print(error.pretty())
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
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def unwrap(self) -> T:
        """Returns the contained value."""
        return self.value

    def unwrap_err(self) -> None:
        """Raises ValueError since this is Ok."""
        raise ValueError(f"called unwrap_err on Ok: {self.value}")

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chains a fallible step onto this value."""
        return f(self.value)

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The error payload.
    """

    error: E

    def unwrap(self) -> None:
        """Raises ValueError carrying the error."""
        raise ValueError(f"called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E:
        """Returns the contained error."""
        return self.error

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Err[E]:
        """Short-circuits: f is never called."""
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]
