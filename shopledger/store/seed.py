"""
Seed dataset.

A fresh install never starts empty: any collection that is missing, empty
or unreadable in storage is replaced by these records.
"""

from datetime import date
from decimal import Decimal

from shopledger.models.records import (
    Expense,
    ExpenseCategory,
    ExpenseUnit,
    PlasticContainers,
    Sale,
    SaleStatus,
    Vendor,
)


SEED_VENDORS: tuple[Vendor, ...] = (
    Vendor(id=1, name="Cake Supplies Co.", contact="555-1234", is_active=True),
    Vendor(id=2, name="Farm Fresh Dairy", contact="555-5678", is_active=True),
    Vendor(id=3, name="Packaging Pros", contact="555-8765", is_active=True),
    Vendor(id=4, name="Old Supplier", contact="555-0000", is_active=False),
)

SEED_SALES: tuple[Sale, ...] = (
    Sale(
        id=1,
        item="Chocolate Cheesecake",
        quantity=2,
        price=Decimal("25"),
        date=date(2024, 7, 20),
        status=SaleStatus.PAID,
        vendor_id=1,
        plastic_containers=PlasticContainers(given=2, returned=2),
    ),
    Sale(
        id=2,
        item="Strawberry Cheesecake",
        quantity=1,
        price=Decimal("30"),
        date=date(2024, 7, 21),
        status=SaleStatus.PENDING,
        vendor_id=2,
        plastic_containers=PlasticContainers(given=1, returned=0),
    ),
    Sale(
        id=3,
        item="Blueberry Cheesecake",
        quantity=5,
        price=Decimal("28"),
        date=date(2024, 7, 22),
        status=SaleStatus.PAID,
        vendor_id=1,
        plastic_containers=PlasticContainers(given=5, returned=3),
    ),
)

SEED_EXPENSES: tuple[Expense, ...] = (
    Expense(
        id=1,
        description="Cream Cheese",
        category=ExpenseCategory.INGREDIENTS,
        amount=Decimal("50"),
        date=date(2024, 7, 19),
        quantity=Decimal("5"),
        unit=ExpenseUnit.KG,
    ),
    Expense(
        id=2,
        description="8-inch containers",
        category=ExpenseCategory.PLASTIC_CONTAINER,
        amount=Decimal("30"),
        date=date(2024, 7, 18),
    ),
    Expense(
        id=3,
        description="Electricity Bill",
        category=ExpenseCategory.MISCELLANEOUS,
        amount=Decimal("100"),
        date=date(2024, 7, 20),
    ),
    Expense(
        id=4,
        description="Sugar",
        category=ExpenseCategory.INGREDIENTS,
        amount=Decimal("20"),
        date=date(2024, 7, 21),
        quantity=Decimal("10"),
        unit=ExpenseUnit.KG,
    ),
)
