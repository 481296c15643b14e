# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rental payloads carried by a Property.

A property is let either on a monthly contract or by the night. The two
shapes share nothing, so each lives in its own payload model and the
Property envelope holds exactly one of them, discriminated by
``rental_type``. A monthly property therefore cannot carry bookings and a
daily property cannot carry contract dates.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field, model_validator

from ..primitives.enums import RentalType
from ..primitives.model import Model
from ..primitives.validation import ValidationMixin
from .booking import Booking


class RentalContract(Model, ValidationMixin):
    """Monthly tenancy: an inclusive contract window and the tenant holding it."""

    rental_type: Literal["MONTHLY"] = RentalType.MONTHLY.value
    contract_start_date: Optional[date] = None
    contract_end_date: Optional[date] = None
    tenant_name: Optional[str] = None
    tenant_phone: Optional[str] = None

    @model_validator(mode="after")
    def check_contract_window(self) -> "RentalContract":
        return self.validate_date_ordering(
            self, "contract_start_date", "contract_end_date"
        )

    @property
    def has_tenant(self) -> bool:
        return bool(self.tenant_name and self.tenant_name.strip())

    @property
    def has_contract(self) -> bool:
        """Start, end and a tenant are all present."""
        return (
            self.contract_start_date is not None
            and self.contract_end_date is not None
            and self.has_tenant
        )


class DailyBookingSet(Model):
    """Nightly letting: the property's bookings, oldest first."""

    rental_type: Literal["DAILY"] = RentalType.DAILY.value
    bookings: List[Booking] = Field(default_factory=list)


RentalPayload = Annotated[
    Union[RentalContract, DailyBookingSet],
    Field(discriminator="rental_type"),
]
