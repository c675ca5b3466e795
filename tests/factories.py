"""Record builders and storage doubles for tests."""

from datetime import date, datetime
from decimal import Decimal

from shopledger.models import (
    Expense,
    ExpenseCategory,
    Sale,
    SaleStatus,
)
from shopledger.services.storage import InMemoryKeyValueStore, StorageWriteError


# A few days after the last seed record (2024-07-22)
NOW = datetime(2024, 7, 25, 15, 30)


class FailingKeyValueStore(InMemoryKeyValueStore):
    """Reads work, every write fails like a full disk would."""

    def set(self, key, value):
        raise StorageWriteError(f"quota exceeded writing {key}")


class RejectingKeyValueStore(InMemoryKeyValueStore):
    """Writes report failure without raising."""

    def set(self, key, value):
        return False


def make_sale(
    id=1,
    item="Cheesecake",
    quantity=1,
    price="10",
    day=date(2024, 7, 20),
    status=SaleStatus.PAID,
    vendor_id=None,
):
    return Sale(
        id=id,
        item=item,
        quantity=quantity,
        price=Decimal(price),
        date=day,
        status=status,
        vendor_id=vendor_id,
    )


def make_expense(
    id=1,
    description="Cream Cheese",
    amount="5",
    day=date(2024, 7, 20),
    category=ExpenseCategory.INGREDIENTS,
):
    return Expense(
        id=id,
        description=description,
        category=category,
        amount=Decimal(amount),
        date=day,
    )
