"""
Recent Activity Feed

The newest sales and expenses, across all time, for the dashboard sidebar.
"""

from typing import Callable, Optional, Sequence, Union

from shopledger.formatting import format_money
from shopledger.models.activity import (
    ExpenseActivity,
    SaleActivity,
    merge_activities,
)
from shopledger.models.records import Expense, Sale


AnyActivity = Union[SaleActivity, ExpenseActivity]


def _newest_first(activity: AnyActivity) -> tuple:
    # Same day: higher id first (created later), then sales before expenses
    is_sale = isinstance(activity, SaleActivity)
    return (activity.date, activity.data.id, is_sale)


def recent_activities(
    sales: Sequence[Sale],
    expenses: Sequence[Expense],
    limit: int = 5,
) -> list[AnyActivity]:
    """The `limit` most recent activities, newest first."""
    merged = merge_activities(list(sales), list(expenses))
    merged.sort(key=_newest_first, reverse=True)
    return merged[:limit]


def describe_activity(
    activity: AnyActivity,
    vendor_name: Callable[[Optional[int]], str],
    symbol: str = "$",
) -> str:
    """
    One-line summary of an activity.

    Sale:    "2x Chocolate Cheesecake to Cake Supplies Co. - $50.00"
    Expense: "Electricity Bill - $100.00"
    """
    if isinstance(activity, SaleActivity):
        sale = activity.data
        return (
            f"{sale.quantity}x {sale.item} to {vendor_name(sale.vendor_id)}"
            f" - {format_money(sale.line_total, symbol)}"
        )
    expense = activity.data
    return f"{expense.description} - {format_money(expense.amount, symbol)}"
