# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import Field, model_validator

from ..primitives.enums import InspectionCategory, ItemRepairStatus
from ..primitives.model import Model, new_id
from ..primitives.types import PositiveFloat
from ..primitives.validation import ValidationMixin


class InspectionItem(Model, ValidationMixin):
    """
    One finding from a unit inspection.

    A failed item (``is_ok=False``) may be flagged ``repair_needed``, which
    starts its repair at PENDING. ``repair_actual_cost`` and
    ``linked_expense_id`` are written together with DONE when the repair
    quote is confirmed.
    """

    id: str = Field(default_factory=new_id)
    category: InspectionCategory = InspectionCategory.ARCHITECTURAL
    description: str
    is_ok: bool = True
    damage_details: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    inspected_on: date
    inspector_name: Optional[str] = None

    # Repair tracking
    repair_needed: bool = False
    repair_estimated_cost: Optional[PositiveFloat] = None
    repair_actual_cost: Optional[PositiveFloat] = None
    repair_status: Optional[ItemRepairStatus] = None
    linked_expense_id: Optional[str] = None

    @model_validator(mode="after")
    def check_repair_fields(self) -> "InspectionItem":
        if self.linked_expense_id is not None and self.repair_status != ItemRepairStatus.DONE:
            raise ValueError("linked_expense_id may only be set once the repair is DONE")
        return self.validate_conditional_requirement(
            self,
            "repair_status",
            ItemRepairStatus.DONE,
            "linked_expense_id",
        )

    @property
    def repair_outstanding(self) -> bool:
        return self.repair_needed and self.repair_status != ItemRepairStatus.DONE


class InspectionDraft(Model):
    """Caller input for a new inspection item."""

    category: InspectionCategory = InspectionCategory.ARCHITECTURAL
    description: str = ""
    is_ok: bool = True
    damage_details: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    inspector_name: Optional[str] = None
    repair_needed: bool = False
    repair_estimated_cost: Optional[PositiveFloat] = None
