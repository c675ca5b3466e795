"""
Streamlit Frontend for Shop Ledger

A thin page layer over BookkeepingApp. Pages never compute anything
themselves: they ask the controller for plain models and render them.

DESIGN PRINCIPLES:
1. One page per view: Dashboard, Sales, Expenses, Vendors, P&L
2. Every form validates through the Pydantic draft models
3. The selected page survives a restart (persisted by the controller)
"""

from datetime import date
from decimal import Decimal

import streamlit as st
from pydantic import ValidationError

from shopledger.config import get_settings, validate_all_settings
from shopledger.formatting import format_money
from shopledger.models import (
    ActivityKind,
    Expense,
    ExpenseCategory,
    ExpenseDraft,
    ExpenseUnit,
    Period,
    PlasticContainers,
    Sale,
    SaleDraft,
    SaleStatus,
    Vendor,
    VendorDraft,
    View,
)
from shopledger.orchestrator import BookkeepingApp, create_app, option_index


# Page configuration
st.set_page_config(
    page_title="Shop Ledger",
    page_icon="🧁",
    layout="wide",
    initial_sidebar_state="expanded",
)

PAGE_LABELS = {
    View.DASHBOARD: "📊 Dashboard",
    View.SALES: "🏷️ Sales",
    View.EXPENSES: "🧾 Expenses",
    View.VENDORS: "👥 Vendors",
    View.PROFIT_AND_LOSS: "📈 P&L",
}


@st.cache_resource
def get_app() -> BookkeepingApp:
    """Get or create the application controller (cached)."""
    return create_app()


def money(app: BookkeepingApp, value) -> str:
    return format_money(value, app.settings.currency_symbol)


def show_validation_error(error: ValidationError) -> None:
    """List each invalid field in plain words."""
    for issue in error.errors():
        field = ".".join(str(part) for part in issue["loc"])
        st.error(f"{field}: {issue['msg']}")


def period_selector(app: BookkeepingApp, key: str) -> Period:
    """Period buttons shared by the dashboard and the P&L page."""
    options = [p.value.upper() for p in Period]
    default = options.index(app.settings.default_period.value.upper())
    choice = st.radio("Period", options, index=default, horizontal=True, key=key)
    return Period.parse(choice)


def main():
    """Main application entry point."""
    app = get_app()

    st.sidebar.title("🧁 Shop Ledger")
    st.sidebar.markdown("---")

    views = list(PAGE_LABELS)
    page = st.sidebar.radio(
        "Navigate to:",
        views,
        index=views.index(app.state.view),
        format_func=PAGE_LABELS.get,
    )
    if page != app.state.view:
        app.set_view(page)

    render_settings_status(app)

    if page == View.DASHBOARD:
        render_dashboard_page(app)
    elif page == View.SALES:
        render_sales_page(app)
    elif page == View.EXPENSES:
        render_expenses_page(app)
    elif page == View.VENDORS:
        render_vendors_page(app)
    elif page == View.PROFIT_AND_LOSS:
        render_statement_page(app)


def render_settings_status(app: BookkeepingApp):
    """Sidebar check of the configuration, with details in debug mode."""
    st.sidebar.markdown("---")
    status = validate_all_settings()

    for name, key in [("Storage", "storage"), ("App", "app")]:
        if status.get(key, False):
            st.sidebar.caption(f"✅ {name} settings OK")
        else:
            error = status.get(f"{key}_error", "Not configured")
            st.sidebar.error(f"❌ {name} settings - {error}")

    if app.settings.debug_mode:
        with st.sidebar.expander("Configuration"):
            st.write(f"Environment: {app.settings.app_environment}")
            if status.get("storage", False):
                storage = get_settings().storage
                st.write(f"Storage backend: {storage.backend}")
                st.write(f"Data directory: {storage.data_dir}")
            st.write(f"Log level: {app.settings.effective_log_level}")


def render_dashboard_page(app: BookkeepingApp):
    """Render metrics, the profit trend and recent activity."""
    st.title("📊 Dashboard")
    period = period_selector(app, key="dashboard_period")
    view = app.dashboard(period)

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Revenue", money(app, view.metrics.total_revenue))
    col2.metric("Total Expenses", money(app, view.metrics.total_expenses))
    col3.metric("Profit", money(app, view.metrics.profit))
    col4.metric("Pending Payments", money(app, view.metrics.pending_payments))

    left, right = st.columns(2)
    with left:
        st.subheader("Profit Trend")
        if not view.series.has_trend:
            st.info("Not enough data to display chart.")
        else:
            st.vega_lite_chart(
                spec={
                    "data": {
                        "values": [
                            {"date": p.date.isoformat(), "profit": float(p.profit)}
                            for p in view.series.points
                        ]
                    },
                    "mark": {"type": "line", "point": True},
                    "encoding": {
                        "x": {"field": "date", "type": "temporal", "title": None},
                        "y": {
                            "field": "profit",
                            "type": "quantitative",
                            "title": "Cumulative profit",
                            "scale": {
                                "domain": [
                                    float(view.bounds.minimum),
                                    float(view.bounds.maximum),
                                ]
                            },
                        },
                    },
                },
                use_container_width=True,
            )
    with right:
        st.subheader("Recent Activities")
        for activity in view.recent_activity:
            label = "Sale" if activity.kind == ActivityKind.SALE else "Expense"
            st.markdown(f"**{label}:** {app.describe(activity)}")
            st.caption(activity.date.isoformat())


def render_sales_page(app: BookkeepingApp):
    """Render the sales table and the add/edit/delete forms."""
    st.title("🏷️ Sales")
    sales = app.store.sales.list_all()

    st.table([
        {
            "Date": sale.date.isoformat(),
            "Item": sale.item,
            "Qty": sale.quantity,
            "Total Price": money(app, sale.line_total),
            "Vendor": app.vendor_name(sale.vendor_id),
            "Status": sale.status.value,
            "Containers": f"{sale.plastic_containers.outstanding} outstanding",
        }
        for sale in sales
    ])

    by_id = {sale.id: sale for sale in sales}
    editing_id = st.selectbox(
        "Edit or delete a sale",
        options=[None] + list(by_id),
        format_func=lambda i: "➕ New sale" if i is None else f"{by_id[i].date} - {by_id[i].item}",
    )
    existing = by_id.get(editing_id)

    vendor_options = app.vendor_choices(existing.vendor_id if existing else None)

    with st.form("sale_form", clear_on_submit=existing is None):
        item = st.text_input("Item", value=existing.item if existing else "")
        quantity = st.number_input("Quantity", min_value=1, step=1, value=existing.quantity if existing else 1)
        price = st.number_input("Price per item", min_value=0.0, step=0.5, value=float(existing.price) if existing else 0.0)
        sale_date = st.date_input("Date", value=existing.date if existing else date.today())
        status = st.selectbox("Status", list(SaleStatus), format_func=lambda s: s.value,
                              index=list(SaleStatus).index(existing.status) if existing else 0)
        vendor_id = st.selectbox(
            "Vendor",
            vendor_options,
            format_func=lambda i: "Select Vendor" if i is None else app.vendor_name(i),
            index=option_index(vendor_options, existing.vendor_id) if existing else 0,
        )
        given = st.number_input("Containers Given", min_value=0, step=1,
                                value=existing.plastic_containers.given if existing else 0)
        returned = st.number_input("Containers Returned", min_value=0, step=1,
                                   value=existing.plastic_containers.returned if existing else 0)
        submitted = st.form_submit_button("Save Sale", type="primary")

    if submitted:
        try:
            draft = SaleDraft(
                item=item,
                quantity=int(quantity),
                price=Decimal(str(price)),
                date=sale_date,
                status=status,
                vendor_id=vendor_id,
                plastic_containers=PlasticContainers(given=int(given), returned=int(returned)),
            )
        except ValidationError as e:
            show_validation_error(e)
        else:
            if existing:
                app.update_sale(Sale.model_validate({**draft.model_dump(), "id": existing.id}))
            else:
                app.add_sale(draft)
            st.rerun()

    if existing and st.button("🗑️ Delete Sale"):
        app.delete_sale(existing.id)
        st.rerun()


def render_expenses_page(app: BookkeepingApp):
    """Render the expenses table and the add/edit/delete forms."""
    st.title("🧾 Expenses")
    expenses = app.store.expenses.list_all()

    st.table([
        {
            "Date": expense.date.isoformat(),
            "Details": expense.details,
            "Category": expense.category.value,
            "Amount": money(app, expense.amount),
        }
        for expense in expenses
    ])

    by_id = {expense.id: expense for expense in expenses}
    editing_id = st.selectbox(
        "Edit or delete an expense",
        options=[None] + list(by_id),
        format_func=lambda i: "➕ New expense" if i is None else f"{by_id[i].date} - {by_id[i].description}",
    )
    existing = by_id.get(editing_id)

    categories = list(ExpenseCategory)
    category = st.selectbox(
        "Category",
        categories,
        format_func=lambda c: c.value,
        index=categories.index(existing.category) if existing else 0,
    )

    with st.form("expense_form", clear_on_submit=existing is None):
        description = st.text_input("Description", value=existing.description if existing else "")
        quantity = None
        unit = None
        if category == ExpenseCategory.INGREDIENTS:
            quantity = st.number_input(
                "Quantity", min_value=0.0, step=0.5,
                value=float(existing.quantity) if existing and existing.quantity else 0.0,
            )
            unit_options = [None] + list(ExpenseUnit)
            unit = st.selectbox(
                "Unit",
                unit_options,
                format_func=lambda u: "N/A" if u is None else u.value,
                index=option_index(unit_options, existing.unit) if existing else 0,
            )
        amount = st.number_input("Total Amount", min_value=0.0, step=1.0,
                                 value=float(existing.amount) if existing else 0.0)
        expense_date = st.date_input("Date", value=existing.date if existing else date.today())
        submitted = st.form_submit_button("Save Expense", type="primary")

    if submitted:
        try:
            draft = ExpenseDraft(
                description=description,
                category=category,
                amount=Decimal(str(amount)),
                date=expense_date,
                quantity=Decimal(str(quantity)) if quantity else None,
                unit=unit,
            )
        except ValidationError as e:
            show_validation_error(e)
        else:
            if existing:
                app.update_expense(Expense.model_validate({**draft.model_dump(), "id": existing.id}))
            else:
                app.add_expense(draft)
            st.rerun()

    if existing and st.button("🗑️ Delete Expense"):
        app.delete_expense(existing.id)
        st.rerun()


def render_vendors_page(app: BookkeepingApp):
    """Render active and inactive vendors with add/edit/delete/restore."""
    st.title("👥 Vendors")

    show = st.radio("Show", ["Active", "Inactive"], horizontal=True)
    if show == "Active":
        vendors = app.store.vendors.list_active()
    else:
        vendors = app.store.vendors.list_inactive()

    for vendor in vendors:
        col1, col2, col3 = st.columns([3, 3, 2])
        col1.markdown(f"**{vendor.name}**")
        col2.markdown(vendor.contact or "-")
        if vendor.is_active:
            if col3.button("Delete", key=f"delete_vendor_{vendor.id}"):
                app.delete_vendor(vendor.id)
                st.rerun()
        elif col3.button("Restore", key=f"restore_vendor_{vendor.id}"):
            app.restore_vendor(vendor.id)
            st.rerun()

    st.markdown("---")
    active = app.store.vendors.list_active()
    by_id = {vendor.id: vendor for vendor in active}
    editing_id = st.selectbox(
        "Edit a vendor",
        options=[None] + list(by_id),
        format_func=lambda i: "➕ New vendor" if i is None else by_id[i].name,
    )
    existing = by_id.get(editing_id)

    with st.form("vendor_form", clear_on_submit=existing is None):
        name = st.text_input("Vendor Name", value=existing.name if existing else "",
                             placeholder="e.g., Cake Supplies Co.")
        contact = st.text_input("Contact", value=existing.contact if existing else "",
                                placeholder="e.g., 555-1234")
        submitted = st.form_submit_button("Save Vendor", type="primary")

    if submitted:
        try:
            draft = VendorDraft(name=name, contact=contact)
        except ValidationError as e:
            show_validation_error(e)
        else:
            if existing:
                app.update_vendor(Vendor.model_validate({**draft.model_dump(), "id": existing.id, "is_active": existing.is_active}))
            else:
                app.add_vendor(draft)
            st.rerun()


def render_statement_page(app: BookkeepingApp):
    """Render the profit-and-loss statement."""
    st.title("📈 Profit & Loss Statement")
    period = period_selector(app, key="statement_period")
    statement = app.statement(period)

    st.subheader(f"Total Revenue: {money(app, statement.total_revenue)}")
    for line in statement.revenue_lines:
        col1, col2 = st.columns([4, 1])
        col1.write(line.label)
        col2.write(money(app, line.amount))

    st.subheader(f"Total Expenses: {money(app, statement.total_expenses)}")
    for line in statement.expense_lines:
        col1, col2 = st.columns([4, 1])
        col1.write(line.label)
        col2.write(money(app, line.amount))

    st.markdown("---")
    st.subheader(f"Net Profit: {money(app, statement.net_profit)}")


if __name__ == "__main__":
    main()
