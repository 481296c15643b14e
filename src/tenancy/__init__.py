# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
Tenancy - Rental Property Occupancy & Lifecycle Engine

Derives a property's occupancy from contract windows and daily bookings,
and drives the contract, booking, payment-verification and repair
workflows over immutable Property snapshots.

Key Entry Points:
- tenancy.engine.* - Status derivation and every lifecycle operation
- tenancy.reporting.* - Portfolio summaries and calendar frames
- tenancy.integrations.* - Retry policy and external-model adapters

Example Usage:
    ```python
    from datetime import date
    from tenancy.core.base import BookingDraft
    from tenancy.core.primitives import RentalType
    from tenancy.engine import check_in, create_property

    today = date(2024, 6, 1)
    room = create_property("Beach Studio 3", RentalType.DAILY, today, rent_amount=1200).property
    result = check_in(room, BookingDraft(check_in_date=today, duration_nights=2), today)
    print(result.status)  # PropertyStatus.OCCUPIED
    ```
"""

# Libraries should not configure logging; applications attach their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "core",
    "engine",
    "integrations",
    "reporting",
]


_LAZY_MODULES = {
    "core": "tenancy.core",
    "engine": "tenancy.engine",
    "integrations": "tenancy.integrations",
    "reporting": "tenancy.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'tenancy' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
