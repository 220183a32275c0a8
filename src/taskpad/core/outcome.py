# src/taskpad/core/outcome.py

"""
Uniform result type returned by every repository operation.

Failures travel by value. The view only ever sees Failure.reason; kind and
status_code are kept so callers can tell validation, server and transport
errors apart without changing the string contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")


class ErrorKind(StrEnum):
    VALIDATION = "validation"
    SERVER = "server"
    TRANSPORT = "transport"


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    reason: str
    kind: ErrorKind = ErrorKind.TRANSPORT
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return False


Outcome: TypeAlias = Success[T] | Failure
