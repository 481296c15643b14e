# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Booking calendar: which booking holds a daily-rental property on a day.

`find_booking` is the single scan used both by status derivation (for
today) and by calendar rendering (for every day of a month), so the
colour of a calendar cell and the property's status can never disagree.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Optional

from ..core.base import Booking, BookingDraft, Property
from ..core.errors import InvalidRequestError
from ..core.primitives import (
    BookingStatus,
    EngineSettings,
    add_days,
    as_day,
    day_overlap,
    month_days,
    ranges_intersect,
)
from ..core.primitives.dates import DayLike


def find_booking(
    bookings: Iterable[Booking],
    day: DayLike,
    include_checked_out: bool = True,
) -> Optional[Booking]:
    """
    First booking whose ``[check_in, check_out)`` range contains ``day``.

    CANCELLED bookings are always skipped. CHECKED_OUT bookings are skipped
    when ``include_checked_out`` is False, which is how status derivation
    asks "who holds the unit right now".
    """
    d = as_day(day)
    for booking in bookings:
        if booking.status == BookingStatus.CANCELLED:
            continue
        if not include_checked_out and booking.status == BookingStatus.CHECKED_OUT:
            continue
        if day_overlap(booking.check_in_date, booking.check_out_date, d):
            return booking
    return None


def booking_on_day(prop: Property, day: DayLike) -> Optional[Booking]:
    """The non-cancelled booking covering ``day``, or None."""
    return find_booking(prop.bookings, day)


def month_calendar(prop: Property, year: int, month: int) -> Dict[date, Optional[Booking]]:
    """Booking (or None) for every day of a calendar month."""
    return {d: booking_on_day(prop, d) for d in month_days(year, month)}


def find_conflicts(prop: Property, check_in: DayLike, check_out: DayLike) -> List[Booking]:
    """Active (CONFIRMED / CHECKED_IN) bookings sharing a day with the range."""
    return [
        b
        for b in prop.bookings
        if b.is_active
        and ranges_intersect(b.check_in_date, b.check_out_date, check_in, check_out)
    ]


def build_booking(
    prop: Property,
    draft: BookingDraft,
    status: BookingStatus,
    settings: Optional[EngineSettings] = None,
) -> Booking:
    """
    Materialize a draft into a Booking.

    ``check_out_date`` is ``check_in_date + duration_nights`` and
    ``total_price`` defaults to ``rent_amount * duration_nights``. A draft
    without ``duration_nights`` stays ``settings.booking.default_nights``.

    Raises:
        InvalidRequestError: If ``duration_nights`` is below 1
    """
    settings = settings or EngineSettings()
    nights = draft.duration_nights
    if nights is None:
        nights = settings.booking.default_nights
    if nights < 1:
        raise InvalidRequestError(f"duration_nights must be at least 1 (got {nights})")

    total_price = draft.total_price
    if total_price is None:
        total_price = prop.rent_amount * nights

    return Booking(
        guest_name=(draft.guest_name or "").strip() or settings.booking.default_guest_name,
        guest_phone=(draft.guest_phone or "").strip() or settings.booking.default_guest_phone,
        check_in_date=draft.check_in_date,
        check_out_date=add_days(draft.check_in_date, nights),
        total_price=total_price,
        deposit=draft.deposit,
        payment_method=draft.payment_method,
        status=status,
    )
