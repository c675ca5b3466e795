"""
Time-Series Builder

Builds the running profit line shown on the dashboard.

Algorithm:
1. Merge the window's sales and expenses into one tagged stream
2. Bucket by calendar day, summing revenue and expense separately
3. Walk the days in ascending order, accumulating revenue - expense
4. Emit one point per day carrying the running total

Revenue here is every sale in the window, paid or pending: the chart
follows sales activity, while the revenue metric follows cash received.
"""

import datetime as dt
from collections import defaultdict
from decimal import Decimal
from typing import Sequence

from shopledger.models.activity import (
    ExpenseActivity,
    SaleActivity,
    merge_activities,
)
from shopledger.models.records import Expense, Sale
from shopledger.models.reports import ZERO, ChartBounds, ProfitPoint, ProfitSeries


class _DayTotals:
    __slots__ = ("revenue", "expense")

    def __init__(self) -> None:
        self.revenue = ZERO
        self.expense = ZERO


def build_profit_series(
    sales: Sequence[Sale],
    expenses: Sequence[Expense],
) -> ProfitSeries:
    """
    Cumulative profit per day for already-filtered records.

    The result may have fewer than two points. Check series.has_trend
    before drawing it as a line.
    """
    days: dict[dt.date, _DayTotals] = defaultdict(_DayTotals)

    for activity in merge_activities(list(sales), list(expenses)):
        totals = days[activity.date]
        if isinstance(activity, SaleActivity):
            totals.revenue += activity.data.line_total
        elif isinstance(activity, ExpenseActivity):
            totals.expense += activity.data.amount

    points = []
    cumulative = ZERO
    for day in sorted(days):
        totals = days[day]
        cumulative += totals.revenue - totals.expense
        points.append(ProfitPoint(date=day, profit=cumulative))

    return ProfitSeries(points=points)


def chart_bounds(series: ProfitSeries) -> ChartBounds:
    """
    Y-axis range for the series, always stretched to include zero so the
    baseline is visible whether profit is all positive or all negative.
    """
    profits: list[Decimal] = [point.profit for point in series.points]
    return ChartBounds(
        minimum=min(profits + [ZERO]),
        maximum=max(profits + [ZERO]),
    )
