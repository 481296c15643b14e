# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tenancy Core

Primitives (model base, enums, dates, settings), domain records and the
engine error taxonomy.
"""

from .errors import (
    AlreadySatisfiedError,
    BookingConflictError,
    InvalidRequestError,
    PermissionDeniedError,
    RecordNotFoundError,
    StateError,
    TenancyError,
)

__all__ = [
    "AlreadySatisfiedError",
    "BookingConflictError",
    "InvalidRequestError",
    "PermissionDeniedError",
    "RecordNotFoundError",
    "StateError",
    "TenancyError",
]
