# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Any


class PropertyStatus(str, Enum):
    """
    Occupancy state of a property.

    VACANT, BOOKED and OCCUPIED are always derived from contract and booking
    facts. CANCELED is the only state set directly, and it is terminal.

    Options:
        VACANT: Available, no current or upcoming occupancy
        BOOKED: Occupancy starts in the future (or a reservation covers today)
        OCCUPIED: A tenant or checked-in guest holds the unit today
        CANCELED: Contract cancelled; never recomputed
    """

    VACANT = "VACANT"
    BOOKED = "BOOKED"
    OCCUPIED = "OCCUPIED"
    CANCELED = "CANCELED"


class RentalType(str, Enum):
    """How a property is let: by monthly contract or by the night."""

    MONTHLY = "MONTHLY"
    DAILY = "DAILY"


class BookingStatus(str, Enum):
    """
    Lifecycle of a daily booking.

    Options:
        CONFIRMED: Reserved, guest has not arrived
        CHECKED_IN: Guest is in the unit
        CHECKED_OUT: Stay finished
        CANCELLED: Terminal; excluded from every occupancy calculation
    """

    CONFIRMED = "CONFIRMED"
    CHECKED_IN = "CHECKED_IN"
    CHECKED_OUT = "CHECKED_OUT"
    CANCELLED = "CANCELLED"


class PaymentMethodEnum(str, Enum):
    TRANSFER = "TRANSFER"
    CASH = "CASH"


class PaymentStatus(str, Enum):
    """
    Verification state of a billing-period payment.

    Options:
        PENDING: Created, no proof uploaded
        VERIFYING: Proof uploaded, awaiting confirmation
        PAID: Confirmed by an authorized actor
        OVERDUE: PENDING past its due date (derived)
    """

    PENDING = "PENDING"
    VERIFYING = "VERIFYING"
    PAID = "PAID"
    OVERDUE = "OVERDUE"


class RepairStatus(str, Enum):
    """Property-level repair flag, distinct from per-item repair progress."""

    NORMAL = "NORMAL"
    PENDING_REPAIR = "PENDING_REPAIR"
    UNDER_REPAIR = "UNDER_REPAIR"
    COMPLETED = "COMPLETED"


class ItemRepairStatus(str, Enum):
    """Repair progress of a single inspection item."""

    PENDING = "PENDING"
    QUOTED = "QUOTED"
    CONFIRMED = "CONFIRMED"
    DONE = "DONE"


class InspectionCategory(str, Enum):
    ARCHITECTURAL = "ARCHITECTURAL"
    PLUMBING = "PLUMBING"
    ELECTRICAL = "ELECTRICAL"
    FURNITURE = "FURNITURE"
    CURTAINS = "CURTAINS"
    DECOR = "DECOR"
    OTHER = "OTHER"


class ExpenseCategory(str, Enum):
    """
    Category of a property expense.

    REPAIR expenses are created automatically when a repair quote is
    confirmed; COMMISSION expenses feed the dashboard commission total.
    """

    COMMON_FEE = "COMMON_FEE"
    REPAIR = "REPAIR"
    UTILITY = "UTILITY"
    COMMISSION = "COMMISSION"
    MANAGEMENT_FEE = "MANAGEMENT_FEE"
    LAND_TAX = "LAND_TAX"
    OTHER_SERVICE = "OTHER_SERVICE"
    OTHER = "OTHER"


class ExpenseStatus(str, Enum):
    UNPAID = "UNPAID"
    PAID = "PAID"


class UserRole(str, Enum):
    """
    Roles an actor can hold on a property.

    STAFF is the agent role. Only ADMIN, STAFF and OWNER may verify payments
    by default (see EngineSettings.verification_roles).
    """

    ADMIN = "ADMIN"
    STAFF = "STAFF"
    OWNER = "OWNER"
    TENANT = "TENANT"
    CO_AGENT = "CO_AGENT"
    CO_TENANT = "CO_TENANT"
    LAWYER = "LAWYER"


class DocumentTypeEnum(str, Enum):
    PDF = "PDF"
    IMAGE = "IMAGE"


class DocumentCategoryEnum(str, Enum):
    CONTRACT = "CONTRACT"
    TENANT_ID = "TENANT_ID"
    OWNER_DOCS = "OWNER_DOCS"
    POA = "POA"
    TM30 = "TM30"
    OTHER = "OTHER"


class ContractPhase(str, Enum):
    """
    Display phase of a monthly contract, used for progress bars and alerts.

    Options:
        ACTIVE: More than the expiring-soon window remains
        EXPIRING_SOON: Ends within the expiring-soon window
        EXPIRED: End date has passed
        NO_CONTRACT: Start or end date missing
        CANCELED: Property cancelled
    """

    ACTIVE = "ACTIVE"
    EXPIRING_SOON = "EXPIRING_SOON"
    EXPIRED = "EXPIRED"
    NO_CONTRACT = "NO_CONTRACT"
    CANCELED = "CANCELED"


class MutationEvent(str, Enum):
    """Which engine operation produced a committed snapshot."""

    CREATED = "CREATED"
    EDITED = "EDITED"
    STATUS_REFRESHED = "STATUS_REFRESHED"
    CONTRACT_EDITED = "CONTRACT_EDITED"
    CONTRACT_RENEWED = "CONTRACT_RENEWED"
    CONTRACT_CANCELED = "CONTRACT_CANCELED"
    BOOKING_RESERVED = "BOOKING_RESERVED"
    CHECKED_IN = "CHECKED_IN"
    CHECKED_OUT = "CHECKED_OUT"
    BOOKING_CANCELLED = "BOOKING_CANCELLED"
    PAYMENT_CREATED = "PAYMENT_CREATED"
    PAYMENT_RECORDED = "PAYMENT_RECORDED"
    PAYMENT_VERIFIED = "PAYMENT_VERIFIED"
    PAYMENTS_MARKED_OVERDUE = "PAYMENTS_MARKED_OVERDUE"
    INSPECTION_ADDED = "INSPECTION_ADDED"
    INSPECTION_REMOVED = "INSPECTION_REMOVED"
    REPAIR_QUOTED = "REPAIR_QUOTED"
    REPAIR_CONFIRMED = "REPAIR_CONFIRMED"
    REPAIR_STATUS_CHANGED = "REPAIR_STATUS_CHANGED"


class PropertyView(str, Enum):
    """Portfolio list filters."""

    ALL = "ALL"
    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"


def enum_to_string(value: Any) -> str:
    """
    Convert enum values to their string representation.

    Examples:
        >>> enum_to_string(PropertyStatus.VACANT)
        'VACANT'
        >>> enum_to_string("already_string")
        'already_string'
    """
    if isinstance(value, Enum):
        return value.value
    return str(value)
