"""Application state owned by the controller."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class View(str, Enum):
    """Pages of the dashboard. The value is what gets persisted."""
    DASHBOARD = "dashboard"
    SALES = "sales"
    EXPENSES = "expenses"
    VENDORS = "vendors"
    PROFIT_AND_LOSS = "p&l"


class AppState(BaseModel):
    """
    UI state that survives a restart.

    Record collections live in the record store, not here.
    """
    model_config = ConfigDict(frozen=True)

    view: View = View.DASHBOARD
