# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio reporting: dashboard figures and pandas frames for charts and
booking calendars. Reports only aggregate engine output.
"""

from .portfolio import (
    CHART_STATUSES,
    PortfolioSummary,
    calendar_frame,
    filter_properties,
    portfolio_summary,
    status_frame,
)

__all__ = [
    "CHART_STATUSES",
    "PortfolioSummary",
    "calendar_frame",
    "filter_properties",
    "portfolio_summary",
    "status_frame",
]
