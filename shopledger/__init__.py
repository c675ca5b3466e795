"""
Shop Ledger - Source Package

Bookkeeping dashboard for a small food business: sales, expenses,
vendors, and the profit and loss they add up to.

DESIGN PRINCIPLES:
1. Records are the only stored state; every number on screen is derived
2. Storage failures never stop the user from working
3. Vendors are never lost, only deactivated
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Shop Ledger Team"
