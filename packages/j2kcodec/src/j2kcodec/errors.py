from __future__ import annotations

from dataclasses import dataclass


class ProgressionPreconditionError(AssertionError):
    """take_next() appelé alors que has_next() est faux (bug appelant)."""


class UnknownProgressionOrderError(ValueError):
    pass


@dataclass(frozen=True)
class UnsupportedProgressionOrderError(NotImplementedError):
    order: object
    supported: tuple[str, ...] = ("LRCP", "RLCP")

    def __str__(self) -> str:
        name = getattr(self.order, "name", self.order)
        return f"progression order {name} not supported (supported: {', '.join(self.supported)})"


def check_non_negative(**bounds: int) -> None:
    for name, v in bounds.items():
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"{name} must be an int (got {v!r})")
        if v < 0:
            raise ValueError(f"{name} must be >= 0 (got {v})")


__all__ = [
    "ProgressionPreconditionError",
    "UnknownProgressionOrderError",
    "UnsupportedProgressionOrderError",
    "check_non_negative",
]
