# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Engine error taxonomy.

Every error is raised before any change is made; since snapshots are
immutable the caller's property is always left exactly as it was passed in.

- InvalidRequestError: the request itself is malformed (blank reason,
  non-positive cost, zero-night booking, wrong rental type).
- StateError: the request is well-formed but the record is in a state that
  does not allow it. AlreadySatisfiedError marks the no-op case where the
  record is already in the requested state.
- PermissionDeniedError: the actor's role may not perform the transition.
- RecordNotFoundError: an id does not belong to the property.
"""

from __future__ import annotations

from typing import Optional


class TenancyError(Exception):
    """Base class for all engine errors."""


class InvalidRequestError(TenancyError, ValueError):
    """Request rejected by validation before any mutation."""


class StateError(TenancyError):
    """Transition not allowed from the record's current state."""

    def __init__(self, message: str, current_state: Optional[str] = None):
        super().__init__(message)
        self.current_state = current_state


class AlreadySatisfiedError(StateError):
    """The record is already in the requested state; nothing to do."""


class BookingConflictError(StateError):
    """A new booking overlaps an active booking on the same property."""

    def __init__(self, message: str, conflicting_ids: tuple = ()):
        super().__init__(message)
        self.conflicting_ids = conflicting_ids


class PermissionDeniedError(TenancyError, PermissionError):
    """The acting role is not authorized for this transition."""

    def __init__(self, message: str, role: Optional[str] = None):
        super().__init__(message)
        self.role = role


class RecordNotFoundError(TenancyError, KeyError):
    """No record with the given id exists on the property."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""
