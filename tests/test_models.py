"""
Tests for Shop Ledger models

Test strategy:
1. Unit tests for individual components (models, reports, stores)
2. Integration tests for the controller over in-memory storage
3. No real files outside pytest's tmp_path
"""

import pytest
from datetime import date
from decimal import Decimal

from pydantic import ValidationError

from shopledger.models import (
    ActivityKind,
    Expense,
    ExpenseActivity,
    ExpenseCategory,
    ExpenseDraft,
    ExpenseUnit,
    Period,
    PlasticContainers,
    Sale,
    SaleActivity,
    SaleDraft,
    SaleStatus,
    Vendor,
    VendorDraft,
    merge_activities,
)
from tests.factories import make_expense, make_sale


class TestSaleModels:
    """Tests for sale models."""

    def test_sale_draft_creation(self):
        """Test SaleDraft defaults."""
        draft = SaleDraft(
            item="Chocolate Cheesecake",
            quantity=2,
            price=Decimal("25"),
            date=date(2024, 7, 20),
        )
        assert draft.status == SaleStatus.PAID
        assert draft.vendor_id is None
        assert draft.plastic_containers.given == 0
        assert draft.plastic_containers.returned == 0

    def test_sale_strips_whitespace(self):
        """Test that whitespace is stripped from the item name."""
        draft = SaleDraft(
            item="  Chocolate Cheesecake  ",
            quantity=1,
            price=Decimal("25"),
            date=date(2024, 7, 20),
        )
        assert draft.item == "Chocolate Cheesecake"

    def test_sale_line_total(self):
        """Test line total is quantity times unit price."""
        sale = make_sale(quantity=5, price="28")
        assert sale.line_total == Decimal("140")

    def test_sale_rejects_zero_quantity(self):
        """Test that quantity must be positive."""
        with pytest.raises(ValidationError):
            SaleDraft(item="Cake", quantity=0, price=Decimal("1"), date=date(2024, 7, 20))

    def test_sale_rejects_negative_price(self):
        """Test that negative prices are rejected."""
        with pytest.raises(ValidationError):
            SaleDraft(item="Cake", quantity=1, price=Decimal("-1"), date=date(2024, 7, 20))

    def test_sale_rejects_empty_item(self):
        """Test that an item name is required."""
        with pytest.raises(ValidationError):
            SaleDraft(item="   ", quantity=1, price=Decimal("1"), date=date(2024, 7, 20))

    def test_sale_parses_camel_case_json(self):
        """Test the saved wire format loads into a Sale."""
        sale = Sale.model_validate({
            "id": 2,
            "item": "Strawberry Cheesecake",
            "quantity": 1,
            "price": 30,
            "date": "2024-07-21",
            "status": "Pending",
            "vendorId": 2,
            "plasticContainers": {"given": 1, "returned": 0},
        })
        assert sale.vendor_id == 2
        assert sale.status == SaleStatus.PENDING
        assert sale.date == date(2024, 7, 21)
        assert sale.price == Decimal("30")
        assert sale.plastic_containers.given == 1

    def test_sale_empty_vendor_id(self):
        """Test an empty vendorId loads as no vendor, a numeric string as an id."""
        base = {
            "id": 4,
            "item": "Plain Cheesecake",
            "quantity": 1,
            "price": 20,
            "date": "2024-07-23",
            "status": "Paid",
            "plasticContainers": {"given": 0, "returned": 0},
        }
        assert Sale.model_validate({**base, "vendorId": ""}).vendor_id is None
        assert Sale.model_validate({**base, "vendorId": "2"}).vendor_id == 2

    def test_sale_dumps_camel_case_json(self):
        """Test serialization keeps the camelCase keys."""
        sale = make_sale(vendor_id=3)
        data = sale.model_dump(mode="json", by_alias=True)
        assert data["vendorId"] == 3
        assert "plasticContainers" in data
        assert data["date"] == "2024-07-20"

    def test_sale_is_immutable(self):
        """Test records cannot be changed in place."""
        sale = make_sale()
        with pytest.raises(ValidationError):
            sale.quantity = 3

    def test_outstanding_containers(self):
        """Test outstanding containers, including over-returns."""
        assert PlasticContainers(given=5, returned=3).outstanding == 2
        assert PlasticContainers(given=1, returned=2).outstanding == -1

    def test_containers_reject_negative_counts(self):
        """Test container counts are non-negative."""
        with pytest.raises(ValidationError):
            PlasticContainers(given=-1, returned=0)


class TestExpenseModels:
    """Tests for expense models."""

    def test_expense_details_for_ingredients(self):
        """Test ingredient quantity shows in the details label."""
        expense = Expense(
            id=1,
            description="Cream Cheese",
            category=ExpenseCategory.INGREDIENTS,
            amount=Decimal("50"),
            date=date(2024, 7, 19),
            quantity=Decimal("5"),
            unit=ExpenseUnit.KG,
        )
        assert expense.details == "Cream Cheese (5 kg)"

    def test_expense_details_fractional_quantity(self):
        """Test fractional quantities drop trailing zeros."""
        draft = ExpenseDraft(
            description="Butter",
            amount=Decimal("12"),
            date=date(2024, 7, 19),
            quantity=Decimal("2.50"),
            unit=ExpenseUnit.KG,
        )
        assert draft.details == "Butter (2.5 kg)"

    def test_expense_details_other_category(self):
        """Test quantity is ignored outside Ingredients."""
        draft = ExpenseDraft(
            description="Electricity Bill",
            category=ExpenseCategory.MISCELLANEOUS,
            amount=Decimal("100"),
            date=date(2024, 7, 20),
            quantity=Decimal("1"),
            unit=ExpenseUnit.PCS,
        )
        assert draft.details == "Electricity Bill"

    def test_expense_rejects_negative_quantity(self):
        """Test quantity, when given, must be positive."""
        with pytest.raises(ValidationError):
            ExpenseDraft(
                description="Sugar",
                amount=Decimal("20"),
                date=date(2024, 7, 21),
                quantity=Decimal("-1"),
            )

    def test_expense_blank_quantity_and_unit(self):
        """Test empty form values load as no quantity and no unit."""
        expense = Expense.model_validate({
            "id": 5,
            "description": "Gas",
            "category": "Miscellaneous",
            "amount": 40,
            "date": "2024-07-23",
            "quantity": "",
            "unit": "",
        })
        assert expense.quantity is None
        assert expense.unit is None
        assert expense.details == "Gas"

    def test_expense_zero_quantity_means_none(self):
        """Test a cleared number input (0) is treated as no quantity."""
        draft = ExpenseDraft(
            description="Sugar",
            amount=Decimal("20"),
            date=date(2024, 7, 21),
            quantity=0,
            unit="kg",
        )
        assert draft.quantity is None
        assert draft.details == "Sugar"

    def test_category_values(self):
        """Test category string values match the saved data."""
        assert ExpenseCategory("Plastic container") == ExpenseCategory.PLASTIC_CONTAINER
        assert ExpenseUnit("L") == ExpenseUnit.L


class TestVendorModels:
    """Tests for vendor models."""

    def test_vendor_defaults_active(self):
        """Test a vendor is active unless told otherwise."""
        vendor = Vendor(id=1, name="Cake Supplies Co.")
        assert vendor.is_active is True
        assert vendor.contact == ""

    def test_vendor_parses_is_active_alias(self):
        """Test isActive from saved data."""
        vendor = Vendor.model_validate(
            {"id": 4, "name": "Old Supplier", "contact": "555-0000", "isActive": False}
        )
        assert vendor.is_active is False

    def test_vendor_requires_name(self):
        """Test an empty vendor name is rejected."""
        with pytest.raises(ValidationError):
            VendorDraft(name="")


class TestActivityModels:
    """Tests for the tagged sale/expense variant."""

    def test_merge_tags_each_record(self):
        """Test each record gets its kind tag."""
        merged = merge_activities([make_sale()], [make_expense()])
        assert isinstance(merged[0], SaleActivity)
        assert merged[0].kind == ActivityKind.SALE
        assert isinstance(merged[1], ExpenseActivity)
        assert merged[1].kind == ActivityKind.EXPENSE

    def test_activity_date(self):
        """Test activities expose their record's date."""
        activity = SaleActivity(data=make_sale(day=date(2024, 7, 1)))
        assert activity.date == date(2024, 7, 1)


class TestPeriod:
    """Tests for the period token."""

    def test_parse_display_tokens(self):
        """Test upper-case button labels parse."""
        assert Period.parse("7D") == Period.LAST_7_DAYS
        assert Period.parse("all") == Period.ALL
        assert Period.parse(" 1y ") == Period.LAST_YEAR

    def test_parse_rejects_unknown(self):
        """Test unknown tokens raise."""
        with pytest.raises(ValueError, match="Unknown period"):
            Period.parse("90d")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
