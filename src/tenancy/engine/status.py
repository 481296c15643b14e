# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Status derivation and the single commit path for property mutations.

`derive_status` is a total, pure function of a property's rental facts and
a caller-supplied ``today``. `Property.status` caches its result; to keep
the cache honest every engine mutation returns through `commit`, which
applies the changes, revalidates the envelope and re-derives the status in
one step. No other code writes `status` (cancellation writes CANCELED as
one of its updates, and derivation preserves it).
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..core.base import Booking, Property
from ..core.primitives import (
    BookingStatus,
    Model,
    MutationEvent,
    PropertyStatus,
    RentalType,
    as_day,
)
from ..core.primitives.dates import DayLike
from .calendar import find_booking

logger = logging.getLogger(__name__)


class MutationResult(Model):
    """
    Outcome of an engine mutation.

    Attributes:
        property: Replacement snapshot to persist
        status: Status derived for the replacement (equals ``property.status``)
        previous_status: Status of the snapshot the mutation started from
        event: Which operation produced this result
    """

    property: Property
    status: PropertyStatus
    previous_status: PropertyStatus
    event: MutationEvent

    @property
    def status_changed(self) -> bool:
        return self.status != self.previous_status


def _derive_daily(bookings: list, today) -> PropertyStatus:
    current: Optional[Booking] = find_booking(bookings, today, include_checked_out=False)
    if current is not None:
        if current.status == BookingStatus.CHECKED_IN:
            return PropertyStatus.OCCUPIED
        return PropertyStatus.BOOKED

    upcoming = any(
        b.status == BookingStatus.CONFIRMED and b.check_in_date > today for b in bookings
    )
    return PropertyStatus.BOOKED if upcoming else PropertyStatus.VACANT


def _derive_monthly(prop: Property, today) -> PropertyStatus:
    contract = prop.contract
    if contract is None or not contract.has_contract:
        return PropertyStatus.VACANT

    if contract.contract_start_date <= today <= contract.contract_end_date:
        return PropertyStatus.OCCUPIED
    if today < contract.contract_start_date:
        return PropertyStatus.BOOKED
    # Expired contracts revert to availability; dates stay on record
    return PropertyStatus.VACANT


def derive_status(prop: Property, today: DayLike) -> PropertyStatus:
    """
    Compute the authoritative occupancy status of a property on ``today``.

    Rules:
    - CANCELED is terminal and returned unchanged.
    - DAILY: the booking holding today (CHECKED_OUT and CANCELLED ignored)
      gives OCCUPIED when checked in, BOOKED when only confirmed. Otherwise
      any confirmed future arrival gives BOOKED, else VACANT.
    - MONTHLY: a full contract (start, end, tenant) covering today
      (inclusive on both ends) gives OCCUPIED; one that has not started yet
      gives BOOKED; anything else, including an expired contract, VACANT.

    Args:
        prop: Property snapshot
        today: The calendar day to evaluate

    Returns:
        The derived PropertyStatus
    """
    if prop.status == PropertyStatus.CANCELED:
        return PropertyStatus.CANCELED

    day = as_day(today)
    if prop.rental_type == RentalType.DAILY:
        status = _derive_daily(prop.bookings, day)
    else:
        status = _derive_monthly(prop, day)

    logger.debug(f"Derived status {status.value} for property {prop.id} on {day}")
    return status


def commit(
    prop: Property,
    today: DayLike,
    event: MutationEvent,
    **updates: Any,
) -> MutationResult:
    """
    Apply ``updates`` to ``prop``, re-derive its status and wrap the result.

    The updated envelope is revalidated, so an update that breaks a model
    invariant raises `pydantic.ValidationError` and nothing is returned.
    """
    previous_status = prop.status

    data = dict(prop)
    data.update(updates)
    candidate = Property.model_validate(data)

    status = derive_status(candidate, today)
    if status != candidate.status:
        candidate = candidate.model_copy(update={"status": status})

    if status != previous_status:
        logger.info(
            f"{event.value}: property {prop.id} status {previous_status.value} -> {status.value}"
        )
    else:
        logger.info(f"{event.value}: property {prop.id} status {status.value}")

    return MutationResult(
        property=candidate,
        status=status,
        previous_status=previous_status,
        event=event,
    )


def refresh_status(prop: Property, today: DayLike) -> MutationResult:
    """Re-derive status with no other change (e.g. when the day rolls over)."""
    return commit(prop, today, MutationEvent.STATUS_REFRESHED)
