from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Protocol

from .data import ProgressionData
from ..errors import ProgressionPreconditionError

# (resolution_level, component) -> nombre de précincts (>= 0, pur)
PrecinctCountFn = Callable[[int, int], int]

class ProgressionIterator(Protocol):
    def has_next(self) -> bool: ...
    def take_next(self) -> ProgressionData: ...

class IteratorBase(ABC):
    """Protocole d'itération Python au-dessus de has_next()/take_next()."""

    @abstractmethod
    def has_next(self) -> bool: ...

    @abstractmethod
    def take_next(self) -> ProgressionData: ...

    def _require_next(self) -> None:
        if not self.has_next():
            raise ProgressionPreconditionError(
                f"{type(self).__name__}.take_next() called on an exhausted progression"
            )

    def __iter__(self) -> "IteratorBase":
        return self

    def __next__(self) -> ProgressionData:
        if not self.has_next():
            raise StopIteration
        return self.take_next()

def drain(it: ProgressionIterator) -> list[ProgressionData]:
    out = []
    while it.has_next():
        out.append(it.take_next())
    return out
