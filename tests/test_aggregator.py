"""
Tests for dashboard metrics.

Expected figures are for the seed dataset.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from shopledger.models import Period, SaleStatus
from shopledger.reports import (
    TimeWindow,
    compute_metrics,
    pending_payments,
    total_expenses,
    total_revenue,
)
from shopledger.store import SEED_EXPENSES, SEED_SALES
from tests.factories import NOW, make_expense, make_sale


def metrics_at(now, period):
    window = TimeWindow.resolve(period, now)
    return compute_metrics(
        window.sales(SEED_SALES),
        window.expenses(SEED_EXPENSES),
        SEED_SALES,
    )


class TestTotals:
    """Tests for the individual sums."""

    def test_revenue_counts_paid_only(self):
        sales = [
            make_sale(id=1, quantity=2, price="25"),
            make_sale(id=2, quantity=1, price="30", status=SaleStatus.PENDING),
        ]
        assert total_revenue(sales) == Decimal("50")
        assert pending_payments(sales) == Decimal("30")

    def test_expenses_sum_all_categories(self):
        assert total_expenses(SEED_EXPENSES) == Decimal("200")

    def test_empty_inputs_are_zero(self):
        assert total_revenue([]) == 0
        assert total_expenses([]) == 0
        assert pending_payments([]) == 0

    def test_cents_exact(self):
        sales = [make_sale(id=i, price="0.10") for i in range(3)]
        assert total_revenue(sales) == Decimal("0.30")


class TestComputeMetrics:
    """Tests for the four dashboard numbers."""

    def test_seed_all_time(self):
        metrics = metrics_at(NOW, Period.ALL)
        assert metrics.total_revenue == Decimal("190")
        assert metrics.total_expenses == Decimal("200")
        assert metrics.profit == Decimal("-10")
        assert metrics.pending_payments == Decimal("30")

    def test_seed_last_7_days(self):
        metrics = metrics_at(datetime(2024, 7, 28), Period.LAST_7_DAYS)
        assert metrics.total_revenue == Decimal("140")
        assert metrics.total_expenses == Decimal("20")
        assert metrics.profit == Decimal("120")
        assert metrics.pending_payments == Decimal("30")

    def test_window_with_no_records(self):
        metrics = metrics_at(datetime(2024, 9, 1), Period.LAST_7_DAYS)
        assert metrics.total_revenue == 0
        assert metrics.total_expenses == 0
        assert metrics.profit == 0
        assert metrics.pending_payments == Decimal("30")

    @pytest.mark.parametrize("period", list(Period))
    def test_profit_is_revenue_minus_expenses(self, period):
        metrics = metrics_at(NOW, period)
        assert metrics.profit == metrics.total_revenue - metrics.total_expenses

    def test_pending_independent_of_period(self):
        values = {
            metrics_at(now, period).pending_payments
            for now in (NOW, datetime(2024, 9, 1), datetime(2030, 1, 1))
            for period in Period
        }
        assert values == {Decimal("30")}

    def test_paid_to_pending_moves_revenue_to_pending(self):
        sales = [make_sale(id=1, quantity=2, price="25", day=date(2024, 7, 20))]
        before = compute_metrics(sales, [], sales)
        pending = [sales[0].model_copy(update={"status": SaleStatus.PENDING})]
        after = compute_metrics(pending, [], pending)
        assert before.total_revenue - after.total_revenue == Decimal("50")
        assert after.pending_payments - before.pending_payments == Decimal("50")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
