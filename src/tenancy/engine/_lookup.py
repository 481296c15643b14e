# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import List, Sequence, Tuple, TypeVar

from ..core.base import Property
from ..core.errors import InvalidRequestError, RecordNotFoundError
from ..core.primitives import RentalType

T = TypeVar("T")


def locate(items: Sequence[T], record_id: str, kind: str) -> Tuple[int, T]:
    """Index and record with ``record_id``; raises RecordNotFoundError."""
    for index, item in enumerate(items):
        if item.id == record_id:
            return index, item
    raise RecordNotFoundError(f"No {kind} with id {record_id!r}")


def replaced(items: Sequence[T], index: int, item: T) -> List[T]:
    """Copy of ``items`` with position ``index`` swapped for ``item``."""
    out = list(items)
    out[index] = item
    return out


def require_rental_type(prop: Property, rental_type: RentalType, action: str) -> None:
    if prop.rental_type != rental_type:
        raise InvalidRequestError(
            f"Cannot {action} on a {prop.rental_type.value} property "
            f"(requires {rental_type.value})"
        )


def require_text(value: str, field: str) -> str:
    """Stripped ``value``; raises InvalidRequestError when blank."""
    text = (value or "").strip()
    if not text:
        raise InvalidRequestError(f"{field} must not be empty")
    return text


def require_positive(value: float, field: str) -> float:
    if value is None or value <= 0:
        raise InvalidRequestError(f"{field} must be greater than 0 (got {value!r})")
    return float(value)
