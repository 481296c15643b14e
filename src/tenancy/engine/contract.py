# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Monthly contract lifecycle: renewal, cancellation and expiry reporting.

Expiry is not a transition. Once ``contract_end_date`` passes, derivation
simply reports VACANT while the historical dates stay on the record.
Cancellation is the only terminal transition and there is no way back.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.base import Property, RentalContract
from ..core.errors import AlreadySatisfiedError, InvalidRequestError, StateError
from ..core.primitives import (
    ContractPhase,
    EngineSettings,
    Model,
    MutationEvent,
    PropertyStatus,
    RentalType,
    add_months,
    as_day,
    contract_progress,
    days_between,
)
from ..core.primitives.dates import DayLike
from ._lookup import require_rental_type, require_text
from .status import MutationResult, commit

logger = logging.getLogger(__name__)


def renew_contract(
    prop: Property,
    months: int,
    today: DayLike,
    settings: Optional[EngineSettings] = None,
) -> MutationResult:
    """
    Renew a monthly contract by ``months`` calendar months.

    With no end date on record a fresh window ``[today, today + months]``
    is opened; otherwise the existing end date is pushed out by ``months``
    using calendar-month arithmetic (Jan 31 + 1 month lands on the last
    day of February). A missing start date is filled with ``today``, or
    with the old end date when that is already past.

    Raises:
        InvalidRequestError: If ``months`` is below 1, the property is
            DAILY, or (by default) no tenant name is on the contract
        StateError: If the property is CANCELED
    """
    settings = settings or EngineSettings()
    require_rental_type(prop, RentalType.MONTHLY, "renew a contract")
    if prop.is_canceled:
        raise StateError(
            f"Property {prop.id} is CANCELED; cancelled contracts cannot be renewed",
            current_state=PropertyStatus.CANCELED.value,
        )
    if not isinstance(months, int) or isinstance(months, bool) or months < 1:
        raise InvalidRequestError(f"months must be a positive integer (got {months!r})")

    contract = prop.contract
    if settings.require_tenant_for_renewal and not contract.has_tenant:
        raise InvalidRequestError("Cannot renew a contract with no tenant name")

    day = as_day(today)
    if contract.contract_end_date is None:
        window = {"contract_start_date": day, "contract_end_date": add_months(day, months)}
    else:
        window = {"contract_end_date": add_months(contract.contract_end_date, months)}
        if contract.contract_start_date is None:
            window["contract_start_date"] = min(day, contract.contract_end_date)
    renewed = RentalContract.model_validate({**dict(contract), **window})

    logger.debug(
        f"Renewing property {prop.id} by {months} months: "
        f"{contract.contract_end_date} -> {renewed.contract_end_date}"
    )
    return commit(prop, day, MutationEvent.CONTRACT_RENEWED, rental=renewed)


def cancel_contract(prop: Property, reason: str, today: DayLike) -> MutationResult:
    """
    Cancel a property's contract. Terminal: derivation never overrides it.

    Raises:
        InvalidRequestError: If ``reason`` is blank
        AlreadySatisfiedError: If the property is already CANCELED
    """
    reason = require_text(reason, "cancellation reason")
    if prop.is_canceled:
        raise AlreadySatisfiedError(
            f"Property {prop.id} was already cancelled on {prop.cancellation_date}",
            current_state=PropertyStatus.CANCELED.value,
        )

    return commit(
        prop,
        today,
        MutationEvent.CONTRACT_CANCELED,
        status=PropertyStatus.CANCELED,
        cancellation_reason=reason,
        cancellation_date=as_day(today),
    )


def is_expiring_soon(
    prop: Property, today: DayLike, settings: Optional[EngineSettings] = None
) -> bool:
    """OCCUPIED with an end date between today and the expiring-soon window."""
    settings = settings or EngineSettings()
    end = prop.contract_end_date
    if prop.status != PropertyStatus.OCCUPIED or end is None:
        return False
    return 0 <= days_between(today, end) <= settings.expiring_soon_days


class ContractStats(Model):
    """Progress through a monthly contract, for progress bars and alerts."""

    phase: ContractPhase
    progress: int = 0
    days_left: int = 0
    total_days: int = 0


def contract_stats(
    prop: Property, today: DayLike, settings: Optional[EngineSettings] = None
) -> ContractStats:
    """
    Progress figures and display phase of a property's contract.

    CANCELED properties and properties without both contract dates report
    zeroed figures with phase CANCELED / NO_CONTRACT.
    """
    settings = settings or EngineSettings()
    if prop.is_canceled:
        return ContractStats(phase=ContractPhase.CANCELED)

    contract = prop.contract
    if (
        contract is None
        or contract.contract_start_date is None
        or contract.contract_end_date is None
    ):
        return ContractStats(phase=ContractPhase.NO_CONTRACT)

    p = contract_progress(contract.contract_start_date, contract.contract_end_date, today)
    if p.days_left < 0:
        phase = ContractPhase.EXPIRED
    elif p.days_left <= settings.expiring_soon_days:
        phase = ContractPhase.EXPIRING_SOON
    else:
        phase = ContractPhase.ACTIVE

    return ContractStats(
        phase=phase,
        progress=p.progress,
        days_left=p.days_left,
        total_days=p.total_days,
    )
