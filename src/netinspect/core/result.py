"""
Result type for net construction.

Loading a net either yields a validated ``PetriNet`` or a
``NetValidationError``. Returning ``Ok``/``Err`` keeps that decision explicit
at the call site instead of letting validation errors escape through
unrelated code paths.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful computation."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed computation carrying the exception that explains it."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise self.error

    def unwrap_or(self, default):
        return default


Result = Union[Ok[T], Err[E]]


def map_ok(result: Result, func: Callable[[T], U]) -> Result:
    """Apply ``func`` to the value of an ``Ok``; pass an ``Err`` through."""
    if isinstance(result, Ok):
        return Ok(func(result.value))
    return result
