"""
Data Models Package

This package contains all Pydantic models used by Shop Ledger.
Records are parsed into these models once, when they are loaded from
storage, and every layer above works with them.
"""

from shopledger.models.records import (
    Expense,
    ExpenseCategory,
    ExpenseDraft,
    ExpenseUnit,
    PlasticContainers,
    Sale,
    SaleDraft,
    SaleStatus,
    Vendor,
    VendorDraft,
)
from shopledger.models.activity import (
    Activity,
    ActivityKind,
    ExpenseActivity,
    SaleActivity,
    merge_activities,
)
from shopledger.models.reports import (
    ChartBounds,
    DashboardMetrics,
    DashboardView,
    Period,
    ProfitAndLossStatement,
    ProfitPoint,
    ProfitSeries,
    StatementLine,
)
from shopledger.models.state import AppState, View

__all__ = [
    # Record models
    "Expense",
    "ExpenseCategory",
    "ExpenseDraft",
    "ExpenseUnit",
    "PlasticContainers",
    "Sale",
    "SaleDraft",
    "SaleStatus",
    "Vendor",
    "VendorDraft",
    # Activity models
    "Activity",
    "ActivityKind",
    "ExpenseActivity",
    "SaleActivity",
    "merge_activities",
    # Report models
    "ChartBounds",
    "DashboardMetrics",
    "DashboardView",
    "Period",
    "ProfitAndLossStatement",
    "ProfitPoint",
    "ProfitSeries",
    "StatementLine",
    # State
    "AppState",
    "View",
]
