"""Typed outcome of an operation that can fail at the infrastructure level.

Repositories return ``Success(value)`` or ``Failure(cause)`` instead of
letting data-access exceptions travel through the service and view
layers.  Callers branch with ``isinstance`` (or ``match``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """The operation completed and produced ``value``."""

    value: T


@dataclass(frozen=True)
class Failure:
    """The operation failed; ``cause`` is a human-readable reason."""

    cause: str
    error: BaseException | None = None


Result = Union[Success[T], Failure]


def most_specific_cause(exc: BaseException) -> BaseException:
    """Walk the ``__cause__`` / ``__context__`` chain down to the root error.

    Driver errors are usually wrapped by the ORM (``IntegrityError`` raised
    ``from`` ``sqlite3.IntegrityError``); the innermost one carries the
    most precise message.
    """
    seen = {id(exc)}
    current = exc
    while True:
        nxt = current.__cause__ or current.__context__
        if nxt is None or id(nxt) in seen:
            return current
        seen.add(id(nxt))
        current = nxt
