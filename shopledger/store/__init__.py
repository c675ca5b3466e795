"""
Record Store Package

In-memory sales, expenses and vendors, persisted through a key-value store.
"""

from shopledger.store.collection import RecordCollection, VendorCollection
from shopledger.store.ids import Clock, IdSequence
from shopledger.store.ledger import (
    EXPENSES_KEY,
    SALES_KEY,
    UNKNOWN_VENDOR,
    VENDORS_KEY,
    LedgerStore,
)
from shopledger.store.seed import SEED_EXPENSES, SEED_SALES, SEED_VENDORS

__all__ = [
    "Clock",
    "EXPENSES_KEY",
    "IdSequence",
    "LedgerStore",
    "RecordCollection",
    "SALES_KEY",
    "SEED_EXPENSES",
    "SEED_SALES",
    "SEED_VENDORS",
    "UNKNOWN_VENDOR",
    "VENDORS_KEY",
    "VendorCollection",
]
