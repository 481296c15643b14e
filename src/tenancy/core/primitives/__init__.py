# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tenancy Core Primitives

Essential building blocks shared by every engine module: the immutable
base model, enums, constrained types, calendar-day helpers, settings and
validation utilities.
"""

from .dates import (
    ContractProgress,
    add_days,
    add_months,
    as_day,
    contract_progress,
    day_overlap,
    days_between,
    month_days,
    month_key,
    ranges_intersect,
)
from .enums import (
    BookingStatus,
    ContractPhase,
    DocumentCategoryEnum,
    DocumentTypeEnum,
    ExpenseCategory,
    ExpenseStatus,
    InspectionCategory,
    ItemRepairStatus,
    MutationEvent,
    PaymentMethodEnum,
    PaymentStatus,
    PropertyStatus,
    PropertyView,
    RentalType,
    RepairStatus,
    UserRole,
    enum_to_string,
)
from .model import Model, new_id
from .settings import BookingSettings, EngineSettings
from .types import (
    DayOfMonth,
    MonthKey,
    NonBlankStr,
    PositiveFloat,
    PositiveInt,
    PositiveIntGt0,
)
from .validation import ValidationMixin

__all__ = [
    # Core model
    "Model",
    "new_id",
    # Settings
    "BookingSettings",
    "EngineSettings",
    # Enums
    "BookingStatus",
    "ContractPhase",
    "DocumentCategoryEnum",
    "DocumentTypeEnum",
    "ExpenseCategory",
    "ExpenseStatus",
    "InspectionCategory",
    "ItemRepairStatus",
    "MutationEvent",
    "PaymentMethodEnum",
    "PaymentStatus",
    "PropertyStatus",
    "PropertyView",
    "RentalType",
    "RepairStatus",
    "UserRole",
    "enum_to_string",
    # Dates
    "ContractProgress",
    "add_days",
    "add_months",
    "as_day",
    "contract_progress",
    "day_overlap",
    "days_between",
    "month_days",
    "month_key",
    "ranges_intersect",
    # Types
    "DayOfMonth",
    "MonthKey",
    "NonBlankStr",
    "PositiveFloat",
    "PositiveInt",
    "PositiveIntGt0",
    # Validation
    "ValidationMixin",
]
