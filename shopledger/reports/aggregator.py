"""
Financial Aggregator

Computes the four dashboard metrics.

All sums are Decimal and start from zero, so empty inputs give zero
metrics rather than an error.
"""

from decimal import Decimal
from typing import Sequence

from shopledger.models.records import Expense, Sale, SaleStatus
from shopledger.models.reports import ZERO, DashboardMetrics


def total_revenue(sales: Sequence[Sale]) -> Decimal:
    """Sum of line totals of PAID sales. Pending sales count for nothing."""
    return sum(
        (sale.line_total for sale in sales if sale.status == SaleStatus.PAID),
        ZERO,
    )


def total_expenses(expenses: Sequence[Expense]) -> Decimal:
    """Sum of expense amounts, any category."""
    return sum((expense.amount for expense in expenses), ZERO)


def pending_payments(sales: Sequence[Sale]) -> Decimal:
    """Sum of line totals of PENDING sales."""
    return sum(
        (sale.line_total for sale in sales if sale.status == SaleStatus.PENDING),
        ZERO,
    )


def compute_metrics(
    window_sales: Sequence[Sale],
    window_expenses: Sequence[Expense],
    all_sales: Sequence[Sale],
) -> DashboardMetrics:
    """
    Dashboard metrics for one window.

    Args:
        window_sales: Sales inside the reporting window
        window_expenses: Expenses inside the reporting window
        all_sales: Every sale, unfiltered. Only used for pending payments,
                   which do not depend on the reporting period.
    """
    revenue = total_revenue(window_sales)
    expenses = total_expenses(window_expenses)
    return DashboardMetrics(
        total_revenue=revenue,
        total_expenses=expenses,
        profit=revenue - expenses,
        pending_payments=pending_payments(all_sales),
    )
