"""Ok/Err values for operations that can fail.

Planning and execution both return a Result instead of raising, so the CLI
is the only place that decides how a failure terminates the process:

    match load_inputs(os.environ):
        case Ok(inputs):
            ...
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result holding a value."""

    value: T

    def map_err(self, f: Callable[[E], F]) -> Ok[T]:
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result holding an error."""

    error: E

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Convert the error, e.g. an InputError into an ActionError."""
        return Err(f(self.error))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
