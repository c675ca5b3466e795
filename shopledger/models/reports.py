"""
Report Models

Plain data handed from the reporting layer to whatever renders it: dashboard
metrics, the cumulative profit series, and the profit-and-loss statement.

Every value here is derived. None of it is persisted, and all of it can be
rebuilt at any time from the record store plus a period token.
"""

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from shopledger.models.activity import Activity


ZERO = Decimal("0")


class Period(str, Enum):
    """
    Reporting window selected on the dashboard and the P&L page.

    ALL has no lower bound.
    """
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    LAST_YEAR = "1y"
    ALL = "all"

    @classmethod
    def parse(cls, token: str) -> "Period":
        """Accept a token as shown on the period buttons ("7D") or stored ("7d")."""
        try:
            return cls(token.strip().lower())
        except ValueError:
            allowed = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown period: {token!r}. Allowed: {allowed}")


# =============================================================================
# DASHBOARD METRICS
# =============================================================================

class DashboardMetrics(BaseModel):
    """
    The four headline numbers on the dashboard.

    pending_payments is the odd one out: it is computed over ALL sales,
    not the period window. Outstanding receivables are a fact about today,
    independent of the reporting period.
    """
    model_config = ConfigDict(frozen=True)

    total_revenue: Decimal = ZERO
    total_expenses: Decimal = ZERO
    profit: Decimal = ZERO
    pending_payments: Decimal = ZERO


# =============================================================================
# PROFIT TREND
# =============================================================================

class ProfitPoint(BaseModel):
    """Running profit at the end of one day."""
    model_config = ConfigDict(frozen=True)

    date: dt.date
    profit: Decimal


class ChartBounds(BaseModel):
    """Y-axis range for the profit chart. Always includes zero."""
    model_config = ConfigDict(frozen=True)

    minimum: Decimal
    maximum: Decimal

    @property
    def span(self) -> Decimal:
        return self.maximum - self.minimum


class ProfitSeries(BaseModel):
    """
    Cumulative profit, one point per distinct day with activity,
    ordered by date.
    """
    model_config = ConfigDict(frozen=True)

    points: list[ProfitPoint] = Field(default_factory=list)

    # A trend line needs at least two points
    MIN_TREND_POINTS: ClassVar[int] = 2

    @property
    def has_trend(self) -> bool:
        """False when there is too little data to draw a line."""
        return len(self.points) >= self.MIN_TREND_POINTS

    def daily_change(self, index: int) -> Decimal:
        """Revenue minus expenses of the day at index."""
        if index == 0:
            return self.points[0].profit
        return self.points[index].profit - self.points[index - 1].profit


# =============================================================================
# PROFIT AND LOSS
# =============================================================================

class StatementLine(BaseModel):
    """One revenue or expense row of the P&L."""
    model_config = ConfigDict(frozen=True)

    record_id: int
    date: dt.date
    label: str
    amount: Decimal


class ProfitAndLossStatement(BaseModel):
    """
    Profit-and-loss breakdown for a period.

    Revenue lines come from PAID sales only. Expense lines include every
    category.
    """
    model_config = ConfigDict(frozen=True)

    period: Period
    cutoff: Optional[dt.date] = None
    revenue_lines: list[StatementLine] = Field(default_factory=list)
    expense_lines: list[StatementLine] = Field(default_factory=list)
    total_revenue: Decimal = ZERO
    total_expenses: Decimal = ZERO
    net_profit: Decimal = ZERO


# =============================================================================
# DASHBOARD
# =============================================================================

class DashboardView(BaseModel):
    """Everything the dashboard page shows for one period."""
    model_config = ConfigDict(frozen=True)

    period: Period
    cutoff: Optional[dt.date] = None
    metrics: DashboardMetrics
    series: ProfitSeries
    bounds: Optional[ChartBounds] = None
    recent_activity: list[Activity] = Field(default_factory=list)
