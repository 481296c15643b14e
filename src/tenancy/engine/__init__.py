# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property occupancy and lifecycle engine.

Pure, synchronous operations over Property snapshots. Every mutation takes
``today`` explicitly and returns a `MutationResult` carrying the
replacement Property and its freshly derived status.

Example Usage:
    ```python
    from datetime import date
    from tenancy.core.primitives import RentalType
    from tenancy.engine import create_property, renew_contract

    today = date(2024, 6, 1)
    created = create_property(
        "Riverside 12A",
        RentalType.MONTHLY,
        today,
        rent_amount=15000,
        contract_start_date=date(2024, 1, 1),
        contract_end_date=date(2024, 12, 31),
        tenant_name="K. Somchai",
    )
    renewed = renew_contract(created.property, 12, today)
    print(renewed.status, renewed.property.contract_end_date)
    ```
"""

from .bookings import cancel_booking, check_in, check_out, reserve
from .calendar import (
    booking_on_day,
    build_booking,
    find_booking,
    find_conflicts,
    month_calendar,
)
from .contract import (
    ContractStats,
    cancel_contract,
    contract_stats,
    is_expiring_soon,
    renew_contract,
)
from .editing import create_property, edit_contract, edit_details
from .payments import (
    create_payment_record,
    mark_overdue,
    outstanding_payments,
    payment_status_on,
    record_payment,
    verify_payment,
)
from .repairs import (
    add_inspection,
    confirm_repair,
    quote_repair,
    remove_inspection,
    set_repair_status,
)
from .status import MutationResult, commit, derive_status, refresh_status

__all__ = [
    # Status
    "MutationResult",
    "commit",
    "derive_status",
    "refresh_status",
    # Properties
    "create_property",
    "edit_contract",
    "edit_details",
    # Contract lifecycle
    "ContractStats",
    "cancel_contract",
    "contract_stats",
    "is_expiring_soon",
    "renew_contract",
    # Booking calendar
    "booking_on_day",
    "build_booking",
    "cancel_booking",
    "check_in",
    "check_out",
    "find_booking",
    "find_conflicts",
    "month_calendar",
    "reserve",
    # Payments
    "create_payment_record",
    "mark_overdue",
    "outstanding_payments",
    "payment_status_on",
    "record_payment",
    "verify_payment",
    # Repairs
    "add_inspection",
    "confirm_repair",
    "quote_repair",
    "remove_inspection",
    "set_repair_status",
]
