# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Payment verification workflow.

    PENDING ──record_payment──> VERIFYING ──verify_payment──> PAID
       │                            ↑
       └── past due, no proof ──> OVERDUE (derived; record_payment still allowed)

Anyone with write access may upload proof. Only the roles in
`EngineSettings.verification_roles` (ADMIN, STAFF, OWNER by default) may
confirm a payment as PAID. OVERDUE is derived from PENDING and never
replaces VERIFYING or PAID.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Tuple

from pydantic import ValidationError

from ..core.base import PaymentRecord, Property
from ..core.errors import (
    AlreadySatisfiedError,
    InvalidRequestError,
    PermissionDeniedError,
    StateError,
)
from ..core.primitives import (
    EngineSettings,
    MutationEvent,
    PaymentStatus,
    UserRole,
    as_day,
    month_key,
)
from ..core.primitives.dates import DayLike
from ._lookup import locate, replaced, require_text
from .status import MutationResult, commit

logger = logging.getLogger(__name__)


def payment_status_on(record: PaymentRecord, today: DayLike) -> PaymentStatus:
    """
    Effective status of a payment record on ``today``.

    A PENDING record whose due date has passed without proof reads as
    OVERDUE. Every other status is returned as stored.
    """
    if (
        record.status == PaymentStatus.PENDING
        and not record.has_proof
        and record.due_date < as_day(today)
    ):
        return PaymentStatus.OVERDUE
    return record.status


def create_payment_record(
    prop: Property,
    month: Optional[str],
    amount: float,
    due_date: date,
    today: DayLike,
    settings: Optional[EngineSettings] = None,
) -> MutationResult:
    """
    Open a PENDING payment record for one billing period (``YYYY-MM``).

    With ``month=None`` the period is taken from ``due_date``.

    Raises:
        InvalidRequestError: If the amount is negative or, with
            `enforce_unique_billing_month`, the month already has a record
    """
    settings = settings or EngineSettings()
    if month is None:
        month = month_key(due_date)
    if amount is None or amount < 0:
        raise InvalidRequestError(f"amount must not be negative (got {amount!r})")
    if settings.enforce_unique_billing_month and any(
        r.month == month for r in prop.payment_history
    ):
        raise InvalidRequestError(
            f"Property {prop.id} already has a payment record for {month}"
        )

    try:
        record = PaymentRecord(month=month, amount=amount, due_date=due_date)
    except ValidationError as e:
        raise InvalidRequestError(f"Invalid payment record: {e}") from e
    return commit(
        prop,
        today,
        MutationEvent.PAYMENT_CREATED,
        payment_history=prop.payment_history + [record],
    )


def record_payment(
    prop: Property, payment_id: str, proof_ref: str, today: DayLike
) -> MutationResult:
    """
    Attach payment evidence and move the record to VERIFYING.

    Uploading again while VERIFYING replaces the proof.

    Raises:
        InvalidRequestError: If ``proof_ref`` is blank
        RecordNotFoundError: If ``payment_id`` is not on the property
        StateError: If the payment is already PAID
    """
    proof_ref = require_text(proof_ref, "proof reference")
    index, record = locate(prop.payment_history, payment_id, "payment record")

    if record.status == PaymentStatus.PAID:
        raise StateError(
            f"Payment {payment_id} is already PAID; proof can no longer change",
            current_state=record.status.value,
        )

    updated = record.model_copy(
        update={"status": PaymentStatus.VERIFYING, "proof_url": proof_ref}
    )
    logger.debug(f"Proof uploaded for payment {payment_id} ({record.month})")
    return commit(
        prop,
        today,
        MutationEvent.PAYMENT_RECORDED,
        payment_history=replaced(prop.payment_history, index, updated),
    )


def verify_payment(
    prop: Property,
    payment_id: str,
    actor_role: UserRole,
    actor_name: str,
    today: DayLike,
    settings: Optional[EngineSettings] = None,
) -> MutationResult:
    """
    Confirm a VERIFYING payment as PAID.

    The permission check comes first, so an unauthorized actor learns
    nothing about the record's state.

    Raises:
        PermissionDeniedError: If ``actor_role`` may not verify payments
        InvalidRequestError: If ``actor_name`` is blank
        RecordNotFoundError: If ``payment_id`` is not on the property
        AlreadySatisfiedError: If the payment is already PAID
        StateError: If the payment is not VERIFYING
    """
    settings = settings or EngineSettings()
    try:
        role = UserRole(actor_role)
    except ValueError:
        role = None
    if role not in settings.verification_roles:
        logger.warning(
            f"Payment verification refused for role {actor_role!r} on property {prop.id}"
        )
        raise PermissionDeniedError(
            f"Role {actor_role!r} may not verify payments", role=str(actor_role)
        )

    actor_name = require_text(actor_name, "actor name")
    index, record = locate(prop.payment_history, payment_id, "payment record")

    if record.status == PaymentStatus.PAID:
        raise AlreadySatisfiedError(
            f"Payment {payment_id} was already verified by {record.verified_by}",
            current_state=record.status.value,
        )
    if record.status != PaymentStatus.VERIFYING:
        raise StateError(
            f"Only VERIFYING payments can be confirmed; payment {payment_id} "
            f"is {record.status.value}",
            current_state=record.status.value,
        )

    updated = record.model_copy(
        update={
            "status": PaymentStatus.PAID,
            "paid_date": as_day(today),
            "verified_by": actor_name,
        }
    )
    return commit(
        prop,
        today,
        MutationEvent.PAYMENT_VERIFIED,
        payment_history=replaced(prop.payment_history, index, updated),
    )


def mark_overdue(prop: Property, today: DayLike) -> MutationResult:
    """Store OVERDUE on every record that `payment_status_on` reports overdue."""
    history = [
        r.model_copy(update={"status": PaymentStatus.OVERDUE})
        if r.status == PaymentStatus.PENDING
        and payment_status_on(r, today) == PaymentStatus.OVERDUE
        else r
        for r in prop.payment_history
    ]
    return commit(
        prop, today, MutationEvent.PAYMENTS_MARKED_OVERDUE, payment_history=history
    )


def outstanding_payments(
    prop: Property, today: DayLike
) -> List[Tuple[PaymentRecord, PaymentStatus]]:
    """Unpaid records with their effective status, oldest billing month first."""
    pending = [
        (r, payment_status_on(r, today))
        for r in prop.payment_history
        if r.status != PaymentStatus.PAID
    ]
    return sorted(pending, key=lambda item: item[0].month)
