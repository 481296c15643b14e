# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from tenancy.core.base import Expense
from tenancy.core.primitives import (
    BookingStatus,
    ExpenseCategory,
    ExpenseStatus,
    PropertyStatus,
    PropertyView,
)
from tenancy.engine import cancel_contract, refresh_status
from tenancy.reporting import (
    calendar_frame,
    filter_properties,
    portfolio_summary,
    status_frame,
)


@pytest.fixture
def portfolio(make_monthly, make_daily):
    """Four units as of 2024-12-10: one expiring, one long-term, one daily, one cancelled."""
    today = date(2024, 12, 10)
    commission = Expense(
        title="Agent commission",
        amount=7500,
        category=ExpenseCategory.COMMISSION,
        incurred_on=date(2024, 1, 1),
    )
    unpaid = Expense(
        title="Agent commission",
        amount=999,
        category=ExpenseCategory.COMMISSION,
        incurred_on=date(2024, 1, 1),
        status=ExpenseStatus.UNPAID,
    )
    expiring = make_monthly(name="A", expenses=[commission, unpaid])
    long_term = make_monthly(
        name="B", rent_amount=20000, start=date(2024, 6, 1), end=date(2025, 5, 31)
    )
    daily = make_daily(
        (date(2024, 12, 9), 3, BookingStatus.CHECKED_IN),
        (date(2024, 12, 20), 2, BookingStatus.CONFIRMED),
        name="C",
    )
    canceled = cancel_contract(make_monthly(name="D"), "Sold", today).property
    return today, [
        refresh_status(p, today).property for p in (expiring, long_term, daily, canceled)
    ]


def test_portfolio_summary(portfolio):
    today, props = portfolio
    summary = portfolio_summary(props, today)

    assert summary.active_contracts == 3
    assert summary.total_rent == 15000 + 20000 + 1200
    assert summary.total_commission == 7500
    assert summary.expiring_soon == [props[0].id]
    assert summary.status_counts[PropertyStatus.OCCUPIED] == 3
    assert summary.status_counts[PropertyStatus.CANCELED] == 1
    assert summary.status_counts[PropertyStatus.BOOKED] == 0


def test_filter_views(portfolio):
    _, props = portfolio
    assert len(filter_properties(props)) == 4
    assert [p.name for p in filter_properties(props, PropertyView.ACTIVE)] == ["A", "B", "C"]
    assert [p.name for p in filter_properties(props, "CANCELED")] == ["D"]


def test_status_frame_has_every_chart_status(portfolio):
    _, props = portfolio
    frame = status_frame(props)

    assert list(frame.index) == ["VACANT", "BOOKED", "OCCUPIED"]
    assert frame.index.name == "status"
    assert frame.loc["OCCUPIED", "count"] == 3
    assert frame.loc["VACANT", "count"] == 0


def test_status_frame_empty_portfolio():
    frame = status_frame([])
    assert frame["count"].sum() == 0
    assert len(frame) == 3


def test_calendar_frame_daily_units_only(portfolio):
    _, props = portfolio
    frame = calendar_frame(props, 2024, 12)
    daily = props[2]

    assert isinstance(frame, pd.DataFrame)
    assert list(frame.index) == [daily.id]
    assert frame.shape == (1, 31)
    assert frame.loc[daily.id, 9] == "CHECKED_IN"
    assert frame.loc[daily.id, 11] == "CHECKED_IN"
    assert frame.loc[daily.id, 12] is None
    assert frame.loc[daily.id, 21] == "CONFIRMED"
