# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
End-to-end property lifecycles through the public engine API.

Each scenario walks one property across several days, persisting only the
snapshot returned by each operation, the way an application would.
"""

from __future__ import annotations

from datetime import date

import pytest

from tenancy.core.base import BookingDraft, InspectionDraft
from tenancy.core.errors import BookingConflictError, PermissionDeniedError, StateError
from tenancy.core.primitives import (
    BookingStatus,
    ItemRepairStatus,
    PaymentStatus,
    PropertyStatus,
    RentalType,
    RepairStatus,
    UserRole,
)
from tenancy.engine import (
    add_inspection,
    cancel_contract,
    check_in,
    check_out,
    confirm_repair,
    contract_stats,
    create_payment_record,
    create_property,
    record_payment,
    refresh_status,
    renew_contract,
    reserve,
    verify_payment,
)
from tenancy.reporting import portfolio_summary


def test_monthly_tenancy_lifecycle():
    """Lease signed, rent collected, repair handled, renewed, expired, cancelled."""
    signed = date(2024, 1, 1)
    prop = create_property(
        "Riverside 12A",
        RentalType.MONTHLY,
        signed,
        rent_amount=15000,
        contract_start_date=date(2024, 2, 1),
        contract_end_date=date(2025, 1, 31),
        tenant_name="Somchai P.",
    ).property
    assert prop.status == PropertyStatus.BOOKED

    # Tenant moves in
    feb = date(2024, 2, 1)
    prop = refresh_status(prop, feb).property
    assert prop.status == PropertyStatus.OCCUPIED

    # Rent for February: tenant uploads, tenant cannot verify, owner can
    prop = create_payment_record(prop, "2024-02", 15000, date(2024, 2, 5), feb).property
    payment_id = prop.payment_history[0].id
    prop = record_payment(prop, payment_id, "slips/feb.jpg", date(2024, 2, 4)).property
    with pytest.raises(PermissionDeniedError):
        verify_payment(prop, payment_id, UserRole.TENANT, "Somchai P.", date(2024, 2, 4))
    assert prop.payment_history[0].status == PaymentStatus.VERIFYING
    prop = verify_payment(prop, payment_id, UserRole.OWNER, "Owner A", date(2024, 2, 6)).property
    assert prop.payment_history[0].status == PaymentStatus.PAID

    # Mid-tenancy inspection finds a leak; repair confirmed at 1500
    june = date(2024, 6, 15)
    prop = add_inspection(
        prop,
        InspectionDraft(description="Bathroom leak", is_ok=False, repair_needed=True),
        june,
    ).property
    assert prop.repair_status == RepairStatus.PENDING_REPAIR
    prop = confirm_repair(prop, prop.inspections[0].id, 1500, june).property
    assert len(prop.expenses) == 1
    assert prop.inspections[0].repair_status == ItemRepairStatus.DONE
    assert prop.repair_status == RepairStatus.COMPLETED
    # occupancy untouched by the repair workflow
    assert prop.status == PropertyStatus.OCCUPIED

    # Renewal one month out from the 2025-01-31 end date
    renewal_day = date(2025, 1, 10)
    assert contract_stats(prop, renewal_day).days_left == 21
    prop = renew_contract(prop, 12, renewal_day).property
    assert prop.contract_end_date == date(2026, 1, 31)

    # Left to lapse, then cancelled for good
    lapsed = date(2026, 3, 1)
    prop = refresh_status(prop, lapsed).property
    assert prop.status == PropertyStatus.VACANT
    prop = cancel_contract(prop, "Owner sold the unit", lapsed).property
    assert prop.status == PropertyStatus.CANCELED
    with pytest.raises(StateError):
        renew_contract(prop, 12, lapsed)
    assert refresh_status(prop, date(2027, 1, 1)).status == PropertyStatus.CANCELED


def test_daily_rental_lifecycle():
    """Walk-in, a reservation behind it, a rejected overlap, then turnover."""
    day1 = date(2024, 6, 14)
    room = create_property("Beach Studio 3", RentalType.DAILY, day1, rent_amount=1200).property
    assert room.status == PropertyStatus.VACANT

    room = check_in(room, BookingDraft(check_in_date=day1, duration_nights=3), day1).property
    assert room.status == PropertyStatus.OCCUPIED
    assert room.bookings[0].total_price == 3600

    # Next guest arrives on the current guest's check-out day
    room = reserve(
        room,
        BookingDraft(check_in_date=date(2024, 6, 17), duration_nights=2, guest_name="Ms. Lee"),
        day1,
    ).property

    with pytest.raises(BookingConflictError):
        reserve(room, BookingDraft(check_in_date=date(2024, 6, 16), duration_nights=2), day1)

    # First guest leaves; the reservation keeps the room BOOKED
    day3 = date(2024, 6, 16)
    room = check_out(room, None, day3).property
    assert room.status == PropertyStatus.BOOKED
    assert [b.status for b in room.bookings] == [
        BookingStatus.CHECKED_OUT,
        BookingStatus.CONFIRMED,
    ]

    # The reservation day arrives
    assert refresh_status(room, date(2024, 6, 17)).status == PropertyStatus.BOOKED
    assert refresh_status(room, date(2024, 6, 19)).status == PropertyStatus.VACANT

    summary = portfolio_summary([room], day3)
    assert summary.status_counts[PropertyStatus.BOOKED] == 1
