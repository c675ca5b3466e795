"""
Ledger Record Store

Owns the three collections the dashboard works from. Each is persisted
independently under its own key:

    app-sales     -> list of sales
    app-expenses  -> list of expenses
    app-vendors   -> list of vendors

The key names match what the dashboard has always written, so data saved
by earlier versions loads unchanged.
"""

from datetime import datetime
from typing import Optional

from shopledger.models.records import (
    Expense,
    ExpenseDraft,
    Sale,
    SaleDraft,
    Vendor,
)
from shopledger.services.storage import KeyValueStoreInterface
from shopledger.store.collection import RecordCollection, VendorCollection
from shopledger.store.ids import Clock
from shopledger.store.seed import SEED_EXPENSES, SEED_SALES, SEED_VENDORS


SALES_KEY = "app-sales"
EXPENSES_KEY = "app-expenses"
VENDORS_KEY = "app-vendors"

# Shown wherever a sale has no vendor or points at an unknown one
UNKNOWN_VENDOR = "N/A"


class LedgerStore:
    """
    Authoritative in-memory ledger.

    Use LedgerStore.load() to build one from a key-value store.
    """

    def __init__(
        self,
        sales: RecordCollection[SaleDraft, Sale],
        expenses: RecordCollection[ExpenseDraft, Expense],
        vendors: VendorCollection,
    ):
        self.sales = sales
        self.expenses = expenses
        self.vendors = vendors

    @classmethod
    def load(
        cls,
        kv_store: KeyValueStoreInterface,
        clock: Clock = datetime.now,
    ) -> "LedgerStore":
        """
        Load all three collections.

        Never raises: anything unusable in storage is replaced by seed data.
        """
        return cls(
            sales=RecordCollection(
                SALES_KEY, Sale, kv_store, clock, seed=SEED_SALES
            ),
            expenses=RecordCollection(
                EXPENSES_KEY, Expense, kv_store, clock, seed=SEED_EXPENSES
            ),
            vendors=VendorCollection(
                VENDORS_KEY, Vendor, kv_store, clock, seed=SEED_VENDORS
            ),
        )

    def vendor_name(self, vendor_id: Optional[int]) -> str:
        """
        Display name for a sale's vendor.

        None or an id with no vendor behind it gives "N/A", never an error.
        Inactive vendors still resolve to their name.
        """
        if vendor_id is None:
            return UNKNOWN_VENDOR
        vendor = self.vendors.get(vendor_id)
        return vendor.name if vendor else UNKNOWN_VENDOR
