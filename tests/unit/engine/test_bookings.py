# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for daily-rental booking transitions.
"""

from __future__ import annotations

from datetime import date

import pytest

from tenancy.core.base import BookingDraft
from tenancy.core.errors import (
    AlreadySatisfiedError,
    BookingConflictError,
    InvalidRequestError,
    RecordNotFoundError,
    StateError,
)
from tenancy.core.primitives import BookingStatus, MutationEvent, PropertyStatus
from tenancy.engine import cancel_booking, cancel_contract, check_in, check_out, reserve


class TestCheckIn:
    def test_check_in_occupies(self, daily_property, today):
        result = check_in(daily_property, BookingDraft(check_in_date=today, duration_nights=2), today)

        assert result.event == MutationEvent.CHECKED_IN
        assert result.status == PropertyStatus.OCCUPIED
        (booking,) = result.property.bookings
        assert booking.status == BookingStatus.CHECKED_IN
        assert booking.check_out_date == date(2024, 6, 17)

    def test_overlap_rejected(self, checked_in_daily, today):
        draft = BookingDraft(check_in_date=date(2024, 6, 16), duration_nights=2)
        with pytest.raises(BookingConflictError) as excinfo:
            check_in(checked_in_daily, draft, today)
        assert excinfo.value.conflicting_ids == (checked_in_daily.bookings[0].id,)

    def test_back_to_back_stay_allowed(self, checked_in_daily, today):
        draft = BookingDraft(check_in_date=date(2024, 6, 17), duration_nights=2)
        result = reserve(checked_in_daily, draft, today)
        assert len(result.property.bookings) == 2
        # the current guest still holds the unit
        assert result.status == PropertyStatus.OCCUPIED

    def test_cancelled_nights_can_be_rebooked(self, make_daily, today):
        prop = make_daily((today, 2, BookingStatus.CANCELLED))
        result = check_in(prop, BookingDraft(check_in_date=today), today)
        assert result.status == PropertyStatus.OCCUPIED

    def test_monthly_property_rejected(self, monthly_property, today):
        with pytest.raises(InvalidRequestError, match="requires DAILY"):
            check_in(monthly_property, BookingDraft(check_in_date=today), today)

    def test_canceled_property_rejected(self, daily_property, today):
        canceled = cancel_contract(daily_property, "Closed", today).property
        with pytest.raises(StateError):
            check_in(canceled, BookingDraft(check_in_date=today), today)


def test_reserve_future_stay_books(daily_property, today):
    draft = BookingDraft(check_in_date=date(2024, 7, 1), duration_nights=3, guest_name="Ms. Lee")
    result = reserve(daily_property, draft, today)

    assert result.event == MutationEvent.BOOKING_RESERVED
    assert result.status == PropertyStatus.BOOKED
    assert result.property.bookings[0].status == BookingStatus.CONFIRMED


class TestCheckOut:
    def test_check_out_frees_unit(self, checked_in_daily, today):
        booking_id = checked_in_daily.bookings[0].id
        result = check_out(checked_in_daily, booking_id, today)

        assert result.status == PropertyStatus.VACANT
        assert result.property.bookings[0].status == BookingStatus.CHECKED_OUT

    def test_check_out_without_id_picks_checked_in_guest(self, checked_in_daily, today):
        result = check_out(checked_in_daily, None, today)
        assert result.property.bookings[0].status == BookingStatus.CHECKED_OUT

    def test_check_out_without_guest(self, daily_property, today):
        with pytest.raises(StateError, match="No guest is checked in"):
            check_out(daily_property, None, today)

    def test_check_out_without_id_prefers_guest_staying_today(self, make_daily, today):
        prop = make_daily(
            (date(2024, 6, 10), 2, BookingStatus.CHECKED_IN),  # never closed
            (today, 3, BookingStatus.CHECKED_IN),
        )
        result = check_out(prop, None, today)

        assert [b.status for b in result.property.bookings] == [
            BookingStatus.CHECKED_IN,
            BookingStatus.CHECKED_OUT,
        ]
        assert result.status == PropertyStatus.VACANT

    def test_check_out_without_id_falls_back_to_first_stay(self, make_daily, today):
        prop = make_daily((date(2024, 6, 10), 2, BookingStatus.CHECKED_IN))
        result = check_out(prop, None, today)
        assert result.property.bookings[0].status == BookingStatus.CHECKED_OUT

    def test_check_out_keeps_upcoming_booking(self, checked_in_daily, today):
        upcoming = reserve(
            checked_in_daily, BookingDraft(check_in_date=date(2024, 7, 1)), today
        ).property
        result = check_out(upcoming, upcoming.bookings[0].id, today)
        assert result.status == PropertyStatus.BOOKED

    def test_double_check_out(self, checked_in_daily, today):
        booking_id = checked_in_daily.bookings[0].id
        done = check_out(checked_in_daily, booking_id, today).property
        with pytest.raises(AlreadySatisfiedError):
            check_out(done, booking_id, today)

    def test_confirmed_booking_cannot_check_out(self, make_daily, today):
        prop = make_daily((today, 1, BookingStatus.CONFIRMED))
        with pytest.raises(StateError) as excinfo:
            check_out(prop, prop.bookings[0].id, today)
        assert excinfo.value.current_state == "CONFIRMED"

    def test_unknown_booking(self, checked_in_daily, today):
        with pytest.raises(RecordNotFoundError, match="No booking with id"):
            check_out(checked_in_daily, "missing", today)


class TestCancelBooking:
    def test_cancel_confirmed(self, make_daily, today):
        prop = make_daily((date(2024, 7, 1), 2, BookingStatus.CONFIRMED))
        result = cancel_booking(prop, prop.bookings[0].id, today)

        assert result.status == PropertyStatus.VACANT
        assert result.property.bookings[0].status == BookingStatus.CANCELLED

    def test_cancel_twice(self, make_daily, today):
        prop = make_daily((date(2024, 7, 1), 2, BookingStatus.CANCELLED))
        with pytest.raises(AlreadySatisfiedError):
            cancel_booking(prop, prop.bookings[0].id, today)

    def test_finished_stay_cannot_be_cancelled(self, make_daily, today):
        prop = make_daily((date(2024, 6, 1), 2, BookingStatus.CHECKED_OUT))
        with pytest.raises(StateError):
            cancel_booking(prop, prop.bookings[0].id, today)
