# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field, model_validator

from ..primitives.enums import PaymentStatus
from ..primitives.model import Model, new_id
from ..primitives.types import MonthKey, PositiveFloat
from ..primitives.validation import ValidationMixin


class PaymentRecord(Model, ValidationMixin):
    """
    Rent due for one billing period, with its evidence and confirmation.

    ``paid_date`` and ``verified_by`` are only ever set by verification, so a
    PAID record must carry both.
    """

    id: str = Field(default_factory=new_id)
    month: MonthKey
    amount: PositiveFloat
    due_date: date
    status: PaymentStatus = PaymentStatus.PENDING
    proof_url: Optional[str] = None
    paid_date: Optional[date] = None
    verified_by: Optional[str] = None

    @model_validator(mode="after")
    def check_verification_fields(self) -> "PaymentRecord":
        self.validate_together(self, ("paid_date", "verified_by"))
        return self.validate_conditional_requirement(
            self,
            "status",
            PaymentStatus.PAID,
            "paid_date",
            "paid_date and verified_by are required when status is PAID",
        )

    @property
    def has_proof(self) -> bool:
        return bool(self.proof_url)
