"""
Profit and Loss Statement

Read-only projection of the ledger for a period. Only PAID sales are
revenue here; every expense in the window is a cost.
"""

from typing import Sequence

from shopledger.models.records import Expense, Sale, SaleStatus
from shopledger.models.reports import ProfitAndLossStatement, StatementLine
from shopledger.reports.aggregator import total_expenses, total_revenue
from shopledger.reports.window import TimeWindow


def revenue_line(sale: Sale) -> StatementLine:
    return StatementLine(
        record_id=sale.id,
        date=sale.date,
        label=f"{sale.date.isoformat()} - {sale.item}",
        amount=sale.line_total,
    )


def expense_line(expense: Expense) -> StatementLine:
    return StatementLine(
        record_id=expense.id,
        date=expense.date,
        label=f"{expense.date.isoformat()} - {expense.description}",
        amount=expense.amount,
    )


def build_statement(
    sales: Sequence[Sale],
    expenses: Sequence[Expense],
    window: TimeWindow,
) -> ProfitAndLossStatement:
    """
    Build the P&L from the full, unfiltered record lists.

    Lines keep the order records have in the store.
    """
    paid_sales = [
        sale for sale in window.sales(sales) if sale.status == SaleStatus.PAID
    ]
    window_expenses = window.expenses(expenses)

    revenue = total_revenue(paid_sales)
    costs = total_expenses(window_expenses)

    return ProfitAndLossStatement(
        period=window.period,
        cutoff=window.cutoff,
        revenue_lines=[revenue_line(sale) for sale in paid_sales],
        expense_lines=[expense_line(expense) for expense in window_expenses],
        total_revenue=revenue,
        total_expenses=costs,
        net_profit=revenue - costs,
    )
