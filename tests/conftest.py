# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for tenancy tests.

Every test pins ``today`` explicitly; nothing here reads the system clock.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

import pytest

from tenancy.core.base import Booking, DailyBookingSet, Property, RentalContract
from tenancy.core.primitives import BookingStatus, PropertyStatus


@pytest.fixture
def today() -> date:
    return date(2024, 6, 15)


@pytest.fixture
def make_monthly():
    """Factory for MONTHLY properties with a contract window."""

    def _make(
        start: Optional[date] = date(2024, 1, 1),
        end: Optional[date] = date(2024, 12, 31),
        tenant_name: Optional[str] = "Somchai P.",
        status: PropertyStatus = PropertyStatus.VACANT,
        **kwargs,
    ) -> Property:
        return Property(
            name=kwargs.pop("name", "Riverside 12A"),
            rent_amount=kwargs.pop("rent_amount", 15000.0),
            rental=RentalContract(
                contract_start_date=start,
                contract_end_date=end,
                tenant_name=tenant_name,
            ),
            status=status,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_daily():
    """Factory for DAILY properties; bookings are given as (check_in, nights, status)."""

    def _make(*stays, **kwargs) -> Property:
        bookings = [
            Booking(
                guest_name=f"Guest {i + 1}",
                check_in_date=check_in,
                check_out_date=check_in + timedelta(days=nights),
                status=status,
            )
            for i, (check_in, nights, status) in enumerate(stays)
        ]
        return Property(
            name=kwargs.pop("name", "Beach Studio 3"),
            rent_amount=kwargs.pop("rent_amount", 1200.0),
            rental=DailyBookingSet(bookings=bookings),
            **kwargs,
        )

    return _make


@pytest.fixture
def monthly_property(make_monthly) -> Property:
    return make_monthly()


@pytest.fixture
def daily_property(make_daily) -> Property:
    return make_daily()


@pytest.fixture
def checked_in_daily(make_daily) -> Property:
    """A daily unit with a guest checked in for 2024-06-14 .. 2024-06-17."""
    return make_daily((date(2024, 6, 14), 3, BookingStatus.CHECKED_IN))
