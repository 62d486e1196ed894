"""Validation helpers shared by the application use cases."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


class MissingFieldError(ValueError):
    """Raised when an entity lacks a field required to build federated data."""

    def __init__(self, entity: str, field: str) -> None:
        self.entity = entity
        self.field = field
        super().__init__(f"{entity}.{field} is required to build federated data")


def require(value: T | None, *, entity: str, field: str) -> T:
    """Return ``value`` or raise :class:`MissingFieldError` when it is empty."""

    if value is None:
        raise MissingFieldError(entity, field)
    if isinstance(value, str) and not value.strip():
        raise MissingFieldError(entity, field)
    return value


__all__ = ["MissingFieldError", "require"]
