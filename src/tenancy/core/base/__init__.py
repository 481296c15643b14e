# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Domain records owned by a Property: the rental payload (monthly contract or
daily booking set), bookings, payment records, inspections, expenses,
linked members and documents.
"""

from .booking import ACTIVE_BOOKING_STATUSES, Booking, BookingDraft
from .contract import DailyBookingSet, RentalContract, RentalPayload
from .expense import Expense
from .inspection import InspectionDraft, InspectionItem
from .members import Document, LinkedMember
from .payment import PaymentRecord
from .property import Property

__all__ = [
    "ACTIVE_BOOKING_STATUSES",
    "Booking",
    "BookingDraft",
    "DailyBookingSet",
    "Document",
    "Expense",
    "InspectionDraft",
    "InspectionItem",
    "LinkedMember",
    "PaymentRecord",
    "Property",
    "RentalContract",
    "RentalPayload",
]
