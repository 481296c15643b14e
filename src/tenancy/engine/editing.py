# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Creating properties and editing their details or monthly contract terms."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..core.base import DailyBookingSet, Property, RentalContract
from ..core.errors import InvalidRequestError
from ..core.primitives import MutationEvent, RentalType
from ..core.primitives.dates import DayLike
from ._lookup import require_rental_type
from .status import MutationResult, commit

# Envelope fields only the engine may write
_PROTECTED_FIELDS = frozenset(
    {
        "id",
        "status",
        "rental",
        "cancellation_reason",
        "cancellation_date",
        "repair_status",
        "payment_history",
        "inspections",
        "expenses",
    }
)

_CONTRACT_FIELDS = frozenset(
    {"contract_start_date", "contract_end_date", "tenant_name", "tenant_phone"}
)


def _require_editable(fields) -> None:
    protected = _PROTECTED_FIELDS.intersection(fields)
    if protected:
        raise InvalidRequestError(
            f"Fields cannot be edited directly: {', '.join(sorted(protected))}"
        )
    unknown = set(fields) - set(Property.model_fields)
    if unknown:
        raise InvalidRequestError(f"Unknown property fields: {', '.join(sorted(unknown))}")


def create_property(
    name: str,
    rental_type: RentalType,
    today: DayLike,
    rent_amount: float = 0.0,
    contract_start_date: Optional[date] = None,
    contract_end_date: Optional[date] = None,
    tenant_name: Optional[str] = None,
    tenant_phone: Optional[str] = None,
    **details: Any,
) -> MutationResult:
    """
    Build a new property with its initial status derived.

    Contract arguments apply to MONTHLY properties only; passing them for a
    DAILY property is rejected. ``details`` takes the same envelope fields
    as `edit_details`; status, cancellation and the workflow collections
    always start empty.

    Raises:
        InvalidRequestError: If ``name`` is blank, contract terms are
            given for a DAILY property, or ``details`` names a protected or
            unknown field
    """
    if not (name or "").strip():
        raise InvalidRequestError("name must not be empty")
    _require_editable(details)

    rental_type = RentalType(rental_type)
    if rental_type == RentalType.MONTHLY:
        rental = RentalContract(
            contract_start_date=contract_start_date,
            contract_end_date=contract_end_date,
            tenant_name=tenant_name,
            tenant_phone=tenant_phone,
        )
    else:
        if any(v is not None for v in (contract_start_date, contract_end_date, tenant_name)):
            raise InvalidRequestError("DAILY properties do not carry contract terms")
        rental = DailyBookingSet()

    prop = Property(name=name.strip(), rent_amount=rent_amount, rental=rental, **details)
    return commit(prop, today, MutationEvent.CREATED)


def edit_details(prop: Property, today: DayLike, **changes: Any) -> MutationResult:
    """
    Edit envelope fields (name, address, rent, due day, members, documents).

    Status, rental type, cancellation and the workflow collections are
    owned by their own operations and cannot be edited here.

    Raises:
        InvalidRequestError: If a protected or unknown field is named
    """
    _require_editable(changes)
    return commit(prop, today, MutationEvent.EDITED, **changes)


def edit_contract(prop: Property, today: DayLike, **changes: Any) -> MutationResult:
    """
    Edit the monthly contract window or tenant and re-derive status.

    Raises:
        InvalidRequestError: On a DAILY property or an unknown contract field
    """
    require_rental_type(prop, RentalType.MONTHLY, "edit contract terms")
    unknown = set(changes) - _CONTRACT_FIELDS
    if unknown:
        raise InvalidRequestError(f"Unknown contract fields: {', '.join(sorted(unknown))}")

    contract = RentalContract.model_validate({**dict(prop.contract), **changes})
    return commit(prop, today, MutationEvent.CONTRACT_EDITED, rental=contract)
