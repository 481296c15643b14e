# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import Field, model_validator

from ..primitives.enums import PropertyStatus, RentalType, RepairStatus
from ..primitives.model import Model, new_id
from ..primitives.types import DayOfMonth, PositiveFloat
from ..primitives.validation import ValidationMixin
from .booking import Booking
from .contract import DailyBookingSet, RentalContract, RentalPayload
from .expense import Expense
from .inspection import InspectionItem
from .members import Document, LinkedMember
from .payment import PaymentRecord


class Property(Model, ValidationMixin):
    """
    Aggregate root: one rentable unit and everything it owns.

    ``status`` is a cache of `tenancy.engine.status.derive_status` and is
    only written through the engine's commit path. The one exception is
    CANCELED, which is set by cancellation together with
    ``cancellation_reason`` and ``cancellation_date`` and is never
    recomputed afterwards.
    """

    # Identity
    id: str = Field(default_factory=new_id)
    name: str
    address: str = ""
    building: Optional[str] = None
    floor: Optional[str] = None
    room_number: Optional[str] = None
    unit_number: Optional[str] = None

    # Terms
    rent_amount: PositiveFloat = 0.0
    payment_due_day: DayOfMonth = 1
    rental: RentalPayload = Field(default_factory=RentalContract)

    # Derived occupancy and lifecycle
    status: PropertyStatus = PropertyStatus.VACANT
    cancellation_reason: Optional[str] = None
    cancellation_date: Optional[date] = None
    repair_status: RepairStatus = RepairStatus.NORMAL

    # Owned collections
    payment_history: List[PaymentRecord] = Field(default_factory=list)
    inspections: List[InspectionItem] = Field(default_factory=list)
    expenses: List[Expense] = Field(default_factory=list)
    linked_members: List[LinkedMember] = Field(default_factory=list)
    documents: List[Document] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_cancellation(self) -> "Property":
        self.validate_together(self, ("cancellation_reason", "cancellation_date"))
        if self.status == PropertyStatus.CANCELED and self.cancellation_date is None:
            raise ValueError("CANCELED properties require cancellation_reason and cancellation_date")
        if self.status != PropertyStatus.CANCELED and self.cancellation_date is not None:
            raise ValueError("cancellation fields may only be set on CANCELED properties")
        return self

    @property
    def rental_type(self) -> RentalType:
        return RentalType(self.rental.rental_type)

    @property
    def is_canceled(self) -> bool:
        return self.status == PropertyStatus.CANCELED

    @property
    def contract(self) -> Optional[RentalContract]:
        """The monthly contract payload, or None for a daily property."""
        return self.rental if isinstance(self.rental, RentalContract) else None

    @property
    def bookings(self) -> List[Booking]:
        """Bookings of a daily property; always empty for a monthly one."""
        return list(self.rental.bookings) if isinstance(self.rental, DailyBookingSet) else []

    @property
    def contract_end_date(self) -> Optional[date]:
        contract = self.contract
        return contract.contract_end_date if contract else None
