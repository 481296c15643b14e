# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field

from ..primitives.enums import ExpenseCategory, ExpenseStatus
from ..primitives.model import Model, new_id
from ..primitives.types import PositiveFloat


class Expense(Model):
    """A cost booked against a property. Immutable financial history once created."""

    id: str = Field(default_factory=new_id)
    title: str
    amount: PositiveFloat
    category: ExpenseCategory = ExpenseCategory.OTHER
    incurred_on: date
    status: ExpenseStatus = ExpenseStatus.PAID
    receipt_url: Optional[str] = None
