"""
Two-variant result type for domain operations.

Rule violations are expected outcomes, so domain operations return a
``Failure`` instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeGuard, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class DomainError:
    """Rule violation reported by a domain operation."""

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    error: DomainError

    @property
    def is_success(self) -> bool:
        return False


Result = Success[T] | Failure


def is_success(result: Success[T] | Failure) -> TypeGuard[Success[T]]:
    return isinstance(result, Success)


def is_failure(result: Success[T] | Failure) -> TypeGuard[Failure]:
    return isinstance(result, Failure)


def fail(code: str, message: str, field: str | None = None) -> Failure:
    """Shorthand for building a Failure."""
    return Failure(DomainError(code=code, message=message, field=field))
