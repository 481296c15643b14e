# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import FrozenSet

from pydantic import Field, field_validator

from .enums import UserRole
from .model import Model
from .types import PositiveInt, PositiveIntGt0


class BookingSettings(Model):
    """Defaults applied when a booking draft leaves fields blank."""

    default_guest_name: str = "Anonymous Guest"
    default_guest_phone: str = "-"
    default_nights: PositiveIntGt0 = Field(
        default=1, description="Nights booked when a draft gives no duration."
    )


class EngineSettings(Model):
    """
    Configuration for the occupancy and lifecycle engine.

    Passed explicitly to the operations that need it; every operation falls
    back to `EngineSettings()` when none is given.

    Usage Examples:
        # Defaults: 30-day expiry alerts, ADMIN/STAFF/OWNER verify payments
        settings = EngineSettings()

        # Wider alert window and co-agents allowed to verify
        settings = EngineSettings(
            expiring_soon_days=60,
            verification_roles={UserRole.ADMIN, UserRole.STAFF, UserRole.CO_AGENT},
        )
    """

    expiring_soon_days: PositiveInt = Field(
        default=30,
        description="A contract ending within this many days is flagged as expiring soon.",
    )
    verification_roles: FrozenSet[UserRole] = Field(
        default=frozenset({UserRole.ADMIN, UserRole.STAFF, UserRole.OWNER}),
        description="Roles allowed to confirm a payment as PAID.",
    )
    enforce_unique_billing_month: bool = Field(
        default=True,
        description="Reject a second payment record for the same YYYY-MM period.",
    )
    require_tenant_for_renewal: bool = Field(
        default=True,
        description="Reject renewal of a monthly contract with no tenant name.",
    )
    booking: BookingSettings = Field(default_factory=BookingSettings)

    @field_validator("verification_roles")
    @classmethod
    def validate_verification_roles(cls, v: FrozenSet[UserRole]) -> FrozenSet[UserRole]:
        if not v:
            raise ValueError("verification_roles must contain at least one role")
        return v
