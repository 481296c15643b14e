# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio-level figures for dashboards.

Reports read the cached `Property.status`; callers are expected to pass
snapshots that went through the engine's commit path (or
`refresh_status`) for the same ``today``. Reports only aggregate and
format, they never mutate.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import pandas as pd
from pydantic import Field

from ..core.base import Property
from ..core.primitives import (
    EngineSettings,
    ExpenseCategory,
    ExpenseStatus,
    Model,
    PropertyStatus,
    PropertyView,
    RentalType,
    month_days,
)
from ..core.primitives.dates import DayLike
from ..engine.calendar import booking_on_day
from ..engine.contract import is_expiring_soon

# Statuses plotted on the occupancy chart; CANCELED is reported apart
CHART_STATUSES = (PropertyStatus.VACANT, PropertyStatus.BOOKED, PropertyStatus.OCCUPIED)


class PortfolioSummary(Model):
    """Headline dashboard numbers for a set of properties."""

    total_rent: float = 0.0
    total_commission: float = 0.0
    active_contracts: int = 0
    expiring_soon: List[str] = Field(default_factory=list)
    status_counts: Dict[PropertyStatus, int] = Field(default_factory=dict)


def filter_properties(
    properties: Iterable[Property], view: PropertyView = PropertyView.ALL
) -> List[Property]:
    """Property list for the ALL / ACTIVE / CANCELED tabs."""
    view = PropertyView(view)
    if view == PropertyView.ACTIVE:
        return [p for p in properties if not p.is_canceled]
    if view == PropertyView.CANCELED:
        return [p for p in properties if p.is_canceled]
    return list(properties)


def portfolio_summary(
    properties: Iterable[Property],
    today: DayLike,
    settings: Optional[EngineSettings] = None,
) -> PortfolioSummary:
    """
    Aggregate occupancy, rent and commission figures.

    - ``total_rent`` and ``active_contracts`` count OCCUPIED properties.
    - ``total_commission`` sums PAID COMMISSION expenses on every property.
    - ``expiring_soon`` lists ids of OCCUPIED properties whose contract ends
      within the settings window.
    """
    settings = settings or EngineSettings()
    properties = list(properties)

    occupied = [p for p in properties if p.status == PropertyStatus.OCCUPIED]
    commission = sum(
        e.amount
        for p in properties
        for e in p.expenses
        if e.category == ExpenseCategory.COMMISSION and e.status == ExpenseStatus.PAID
    )
    counts = {status: 0 for status in PropertyStatus}
    for p in properties:
        counts[p.status] += 1

    return PortfolioSummary(
        total_rent=sum(p.rent_amount for p in occupied),
        total_commission=commission,
        active_contracts=len(occupied),
        expiring_soon=[p.id for p in properties if is_expiring_soon(p, today, settings)],
        status_counts=counts,
    )


def status_frame(properties: Iterable[Property]) -> pd.DataFrame:
    """
    Status counts for the occupancy chart.

    Returns:
        DataFrame indexed by status name with a single ``count`` column;
        VACANT, BOOKED and OCCUPIED always appear, even at zero.
    """
    counts = pd.Series(
        [p.status.value for p in properties if p.status in CHART_STATUSES],
        dtype="object",
    ).value_counts()
    index = [s.value for s in CHART_STATUSES]
    frame = counts.reindex(index, fill_value=0).astype(int).to_frame(name="count")
    frame.index.name = "status"
    return frame


def calendar_frame(properties: Iterable[Property], year: int, month: int) -> pd.DataFrame:
    """
    Month grid of daily-rental occupancy.

    One row per DAILY property (indexed by id), one column per day of the
    month; each cell holds the status value of the booking covering that
    day, or None. Uses the same day scan as status derivation.
    """
    days = month_days(year, month)
    daily = [p for p in properties if p.rental_type == RentalType.DAILY]

    rows = []
    for p in daily:
        cells = []
        for d in days:
            booking = booking_on_day(p, d)
            cells.append(booking.status.value if booking else None)
        rows.append(cells)

    frame = pd.DataFrame(
        rows,
        index=pd.Index([p.id for p in daily], name="property_id"),
        columns=[d.day for d in days],
        dtype="object",
    )
    return frame
