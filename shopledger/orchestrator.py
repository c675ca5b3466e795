"""
Application Controller for Shop Ledger

This module ties together the record store, the reporting functions and
the persisted UI state. It is the only object the front-end talks to.

DESIGN DECISION: One controller owns all application state:
- The LedgerStore (sales, expenses, vendors)
- The AppState (which page is open), persisted under "app-view"
- The clock used for id generation and period cutoffs

Derived values (metrics, series, statement) are recomputed from scratch on
every call. The data is small and recomputing keeps them from going stale.
"""

from datetime import datetime
from typing import Optional, Union

from shopledger.config import AppSettings, get_settings
from shopledger.config.settings import StorageSettings
from shopledger.logs import configure_logging, get_logger
from shopledger.models.activity import ExpenseActivity, SaleActivity
from shopledger.models.records import (
    Expense,
    ExpenseDraft,
    Sale,
    SaleDraft,
    Vendor,
    VendorDraft,
)
from shopledger.models.reports import DashboardView, Period, ProfitAndLossStatement
from shopledger.models.state import AppState, View
from shopledger.reports import (
    TimeWindow,
    build_profit_series,
    build_statement,
    chart_bounds,
    compute_metrics,
    describe_activity,
    recent_activities,
)
from shopledger.services.storage import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStoreInterface,
    StorageError,
)
from shopledger.store import Clock, LedgerStore


logger = get_logger(__name__)

VIEW_KEY = "app-view"


class BookkeepingApp:
    """
    Controller behind every page of the dashboard.

    Flow for a page render:
    1. Resolve the selected period against the clock -> TimeWindow
    2. Filter the store's records through the window
    3. Aggregate / build series / build statement
    4. Hand back plain models for rendering

    CRUD calls go straight to the store, which persists after every change.
    """

    def __init__(
        self,
        store: LedgerStore,
        kv_store: KeyValueStoreInterface,
        clock: Clock = datetime.now,
        settings: Optional[AppSettings] = None,
    ):
        self._store = store
        self._kv_store = kv_store
        self._clock = clock
        self._settings = settings or AppSettings()
        self._state = AppState(view=self._load_view())

    @property
    def store(self) -> LedgerStore:
        return self._store

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def settings(self) -> AppSettings:
        return self._settings

    # -------------------------
    # View selector
    # -------------------------
    def _load_view(self) -> View:
        try:
            raw = self._kv_store.get(VIEW_KEY)
        except StorageError as e:
            logger.warning("view_load_failed", error=str(e))
            return View.DASHBOARD

        if raw is None:
            return View.DASHBOARD
        try:
            return View(raw)
        except ValueError:
            logger.warning("unknown_view", value=repr(raw))
            return View.DASHBOARD

    def set_view(self, view: View) -> AppState:
        """Switch page and remember it for the next session."""
        self._state = self._state.model_copy(update={"view": view})
        try:
            self._kv_store.set(VIEW_KEY, view.value)
        except StorageError as e:
            logger.error("persist_failed", key=VIEW_KEY, error=str(e))
        return self._state

    # -------------------------
    # Derived views
    # -------------------------
    def window(self, period: Period) -> TimeWindow:
        return TimeWindow.resolve(period, self._clock())

    def dashboard(self, period: Optional[Period] = None) -> DashboardView:
        """Metrics, profit trend and recent activity for a period."""
        window = self.window(period or self._settings.default_period)
        all_sales = self._store.sales.list_all()
        all_expenses = self._store.expenses.list_all()

        window_sales = window.sales(all_sales)
        window_expenses = window.expenses(all_expenses)

        series = build_profit_series(window_sales, window_expenses)
        return DashboardView(
            period=window.period,
            cutoff=window.cutoff,
            metrics=compute_metrics(window_sales, window_expenses, all_sales),
            series=series,
            bounds=chart_bounds(series) if series.has_trend else None,
            recent_activity=recent_activities(
                all_sales,
                all_expenses,
                limit=self._settings.recent_activity_limit,
            ),
        )

    def statement(self, period: Optional[Period] = None) -> ProfitAndLossStatement:
        """Profit-and-loss breakdown for a period."""
        window = self.window(period or self._settings.default_period)
        return build_statement(
            self._store.sales.list_all(),
            self._store.expenses.list_all(),
            window,
        )

    def describe(self, activity: Union[SaleActivity, ExpenseActivity]) -> str:
        """One-line summary of a recent activity entry."""
        return describe_activity(
            activity,
            self._store.vendor_name,
            self._settings.currency_symbol,
        )

    def vendor_name(self, vendor_id: Optional[int]) -> str:
        return self._store.vendor_name(vendor_id)

    def vendor_choices(self, current_vendor_id: Optional[int] = None) -> list[Optional[int]]:
        """
        Vendor ids offered by the sale form, None first for "no vendor".

        Only active vendors are offered, except the vendor the sale already
        points at, which stays selectable after it was soft-deleted.
        """
        choices: list[Optional[int]] = [None]
        choices.extend(v.id for v in self._store.vendors.list_active())
        if current_vendor_id is not None and current_vendor_id not in choices:
            choices.append(current_vendor_id)
        return choices

    # -------------------------
    # Sales
    # -------------------------
    def add_sale(self, draft: SaleDraft) -> Sale:
        return self._store.sales.add(draft)

    def update_sale(self, sale: Sale) -> bool:
        return self._store.sales.update(sale)

    def delete_sale(self, sale_id: int) -> bool:
        return self._store.sales.delete(sale_id)

    # -------------------------
    # Expenses
    # -------------------------
    def add_expense(self, draft: ExpenseDraft) -> Expense:
        return self._store.expenses.add(draft)

    def update_expense(self, expense: Expense) -> bool:
        return self._store.expenses.update(expense)

    def delete_expense(self, expense_id: int) -> bool:
        return self._store.expenses.delete(expense_id)

    # -------------------------
    # Vendors
    # -------------------------
    def add_vendor(self, draft: VendorDraft) -> Vendor:
        return self._store.vendors.add(draft)

    def update_vendor(self, vendor: Vendor) -> bool:
        return self._store.vendors.update(vendor)

    def delete_vendor(self, vendor_id: int) -> bool:
        """Soft delete: the vendor becomes inactive."""
        return self._store.vendors.delete(vendor_id)

    def restore_vendor(self, vendor_id: int) -> bool:
        return self._store.vendors.restore(vendor_id)


def option_index(options: list, value, default: int = 0) -> int:
    """Position of value in a selectbox's options, or default if absent."""
    try:
        return options.index(value)
    except ValueError:
        return default


def create_kv_store(settings: StorageSettings) -> KeyValueStoreInterface:
    """Build the configured key-value backend."""
    if settings.backend == "memory":
        return InMemoryKeyValueStore()
    return JsonFileKeyValueStore(
        settings.data_dir,
        write_attempts=settings.write_attempts,
    )


def create_app(
    kv_store: Optional[KeyValueStoreInterface] = None,
    clock: Clock = datetime.now,
    app_settings: Optional[AppSettings] = None,
) -> BookkeepingApp:
    """
    Factory function to create the application controller.

    Args:
        kv_store: Storage to use. If None, built from StorageSettings.
        clock: Source of "now". Tests pass a fixed clock.
        app_settings: Settings to use. If None, loaded from the environment.

    Returns:
        A ready BookkeepingApp. Never fails because of storage contents.
    """
    settings = get_settings()
    app_settings = app_settings or settings.app
    configure_logging(app_settings.effective_log_level)

    if kv_store is None:
        kv_store = create_kv_store(settings.storage)

    store = LedgerStore.load(kv_store, clock)
    logger.info(
        "app_created",
        environment=app_settings.app_environment,
        sales=len(store.sales),
        expenses=len(store.expenses),
        vendors=len(store.vendors),
    )
    return BookkeepingApp(store, kv_store, clock=clock, settings=app_settings)
