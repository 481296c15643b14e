# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field, model_validator

from ..primitives.dates import days_between
from ..primitives.enums import BookingStatus, PaymentMethodEnum
from ..primitives.model import Model, new_id
from ..primitives.types import PositiveFloat
from ..primitives.validation import ValidationMixin

# Bookings still holding the unit; CHECKED_OUT and CANCELLED no longer do
ACTIVE_BOOKING_STATUSES = frozenset({BookingStatus.CONFIRMED, BookingStatus.CHECKED_IN})


class Booking(Model, ValidationMixin):
    """
    A stay on a daily-rental property.

    The stay occupies the half-open range ``[check_in_date, check_out_date)``:
    the check-out day itself is free for the next arrival.
    """

    id: str = Field(default_factory=new_id)
    guest_name: str
    guest_phone: str = "-"
    check_in_date: date
    check_out_date: date
    total_price: PositiveFloat = 0.0
    deposit: PositiveFloat = 0.0
    payment_method: PaymentMethodEnum = PaymentMethodEnum.TRANSFER
    status: BookingStatus = BookingStatus.CONFIRMED

    @model_validator(mode="after")
    def check_stay_dates(self) -> "Booking":
        return self.validate_date_ordering(
            self,
            "check_in_date",
            "check_out_date",
            strict=True,
            error_message="check_out_date must be after check_in_date",
        )

    @property
    def nights(self) -> int:
        return days_between(self.check_in_date, self.check_out_date)

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_BOOKING_STATUSES


class BookingDraft(Model):
    """
    Caller input for a new booking.

    ``total_price`` defaults to nightly rent times ``duration_nights`` when
    left unset; guest fields fall back to `BookingSettings` defaults.
    """

    check_in_date: date
    duration_nights: Optional[int] = None
    guest_name: Optional[str] = None
    guest_phone: Optional[str] = None
    total_price: Optional[PositiveFloat] = None
    deposit: PositiveFloat = 0.0
    payment_method: PaymentMethodEnum = PaymentMethodEnum.TRANSFER
