"""
Reporting Package

Pure functions that derive dashboard metrics, the profit series, the
P&L statement and the activity feed from record lists. Nothing here
touches storage or keeps state between calls.
"""

from shopledger.reports.activity import describe_activity, recent_activities
from shopledger.reports.aggregator import (
    compute_metrics,
    pending_payments,
    total_expenses,
    total_revenue,
)
from shopledger.reports.statement import build_statement
from shopledger.reports.timeseries import build_profit_series, chart_bounds
from shopledger.reports.window import TimeWindow, cutoff_for, filter_by_cutoff

__all__ = [
    "TimeWindow",
    "build_profit_series",
    "build_statement",
    "chart_bounds",
    "compute_metrics",
    "cutoff_for",
    "describe_activity",
    "filter_by_cutoff",
    "pending_payments",
    "recent_activities",
    "total_expenses",
    "total_revenue",
]
