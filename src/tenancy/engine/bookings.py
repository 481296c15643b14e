# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Daily-rental booking transitions.

    check_in / reserve ──> CHECKED_IN / CONFIRMED
    CONFIRMED  ──cancel_booking──> CANCELLED
    CHECKED_IN ──check_out──────> CHECKED_OUT
    CHECKED_IN ──cancel_booking──> CANCELLED

New bookings may not share a night with an active (CONFIRMED or
CHECKED_IN) booking. Because ranges are half-open, a guest checking out on
a day never blocks a guest checking in that day.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.base import Booking, BookingDraft, DailyBookingSet, Property
from ..core.errors import AlreadySatisfiedError, BookingConflictError, StateError
from ..core.primitives import BookingStatus, EngineSettings, MutationEvent, RentalType
from ..core.primitives.dates import DayLike
from ._lookup import locate, replaced, require_rental_type
from .calendar import build_booking, find_booking, find_conflicts
from .status import MutationResult, commit

logger = logging.getLogger(__name__)


def _booking_set(bookings: list) -> DailyBookingSet:
    return DailyBookingSet(bookings=bookings)


def _add_booking(
    prop: Property,
    draft: BookingDraft,
    today: DayLike,
    status: BookingStatus,
    event: MutationEvent,
    settings: Optional[EngineSettings],
) -> MutationResult:
    require_rental_type(prop, RentalType.DAILY, "add a booking")
    if prop.is_canceled:
        raise StateError(
            f"Property {prop.id} is CANCELED and takes no new bookings",
            current_state=prop.status.value,
        )

    booking = build_booking(prop, draft, status, settings)
    conflicts = find_conflicts(prop, booking.check_in_date, booking.check_out_date)
    if conflicts:
        ids = tuple(b.id for b in conflicts)
        raise BookingConflictError(
            f"Stay {booking.check_in_date} to {booking.check_out_date} overlaps "
            f"active booking(s) {', '.join(ids)} on property {prop.id}",
            conflicting_ids=ids,
        )

    logger.debug(
        f"Adding {status.value} booking {booking.id} to property {prop.id} "
        f"({booking.nights} nights from {booking.check_in_date})"
    )
    return commit(
        prop, today, event, rental=_booking_set(prop.bookings + [booking])
    )


def check_in(
    prop: Property,
    draft: BookingDraft,
    today: DayLike,
    settings: Optional[EngineSettings] = None,
) -> MutationResult:
    """
    Register a guest arriving now: appends a CHECKED_IN booking.

    Raises:
        InvalidRequestError: On a MONTHLY property or a duration below 1
        BookingConflictError: If the stay overlaps an active booking
        StateError: If the property is CANCELED
    """
    return _add_booking(
        prop, draft, today, BookingStatus.CHECKED_IN, MutationEvent.CHECKED_IN, settings
    )


def reserve(
    prop: Property,
    draft: BookingDraft,
    today: DayLike,
    settings: Optional[EngineSettings] = None,
) -> MutationResult:
    """Record a future stay as a CONFIRMED booking. Same guards as `check_in`."""
    return _add_booking(
        prop,
        draft,
        today,
        BookingStatus.CONFIRMED,
        MutationEvent.BOOKING_RESERVED,
        settings,
    )


def _set_booking_status(
    prop: Property, index: int, booking: Booking, status: BookingStatus
) -> DailyBookingSet:
    updated = booking.model_copy(update={"status": status})
    return _booking_set(replaced(prop.bookings, index, updated))


def check_out(
    prop: Property, booking_id: Optional[str], today: DayLike
) -> MutationResult:
    """
    Close a CHECKED_IN stay and re-derive status.

    With ``booking_id=None`` the CHECKED_IN booking covering ``today`` is
    closed, or the first CHECKED_IN booking when none covers it. The
    property goes VACANT unless another booking also covers today.

    Raises:
        RecordNotFoundError: If ``booking_id`` is not on the property
        AlreadySatisfiedError: If the booking is already CHECKED_OUT
        StateError: If the booking is CONFIRMED or CANCELLED, or no guest
            is checked in when ``booking_id`` is None
    """
    require_rental_type(prop, RentalType.DAILY, "check out")
    if booking_id is None:
        staying = [b for b in prop.bookings if b.status == BookingStatus.CHECKED_IN]
        if not staying:
            raise StateError(
                f"No guest is checked in at property {prop.id}",
                current_state=prop.status.value,
            )
        current = find_booking(staying, today, include_checked_out=False)
        booking_id = (current or staying[0]).id
    index, booking = locate(prop.bookings, booking_id, "booking")

    if booking.status == BookingStatus.CHECKED_OUT:
        raise AlreadySatisfiedError(
            f"Booking {booking_id} is already checked out",
            current_state=booking.status.value,
        )
    if booking.status != BookingStatus.CHECKED_IN:
        raise StateError(
            f"Only CHECKED_IN bookings can be checked out; booking {booking_id} "
            f"is {booking.status.value}",
            current_state=booking.status.value,
        )

    return commit(
        prop,
        today,
        MutationEvent.CHECKED_OUT,
        rental=_set_booking_status(prop, index, booking, BookingStatus.CHECKED_OUT),
    )


def cancel_booking(prop: Property, booking_id: str, today: DayLike) -> MutationResult:
    """
    Cancel a CONFIRMED or CHECKED_IN booking, freeing its nights.

    Raises:
        RecordNotFoundError: If ``booking_id`` is not on the property
        AlreadySatisfiedError: If the booking is already CANCELLED
        StateError: If the booking is CHECKED_OUT
    """
    require_rental_type(prop, RentalType.DAILY, "cancel a booking")
    index, booking = locate(prop.bookings, booking_id, "booking")

    if booking.status == BookingStatus.CANCELLED:
        raise AlreadySatisfiedError(
            f"Booking {booking_id} is already cancelled",
            current_state=booking.status.value,
        )
    if booking.status == BookingStatus.CHECKED_OUT:
        raise StateError(
            f"Booking {booking_id} is finished and cannot be cancelled",
            current_state=booking.status.value,
        )

    return commit(
        prop,
        today,
        MutationEvent.BOOKING_CANCELLED,
        rental=_set_booking_status(prop, index, booking, BookingStatus.CANCELLED),
    )
