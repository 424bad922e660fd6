"""Dashboard statistics engine.

Turns an AppData snapshot into DashboardStats. Stateless: the current time
is passed in so "today" results are reproducible.
"""

from datetime import datetime

from src.core.domain_models import AppData, DashboardStats, PaymentMethod
from src.core.formatting import is_today, is_weekend


class StatsEngine:
    """Calculates the dashboard aggregates for the ledger."""

    def calculate_dashboard_stats(self, data: AppData, now: datetime) -> DashboardStats:
        """Derive the dashboard snapshot.

        Args:
            data: Ledger snapshot
            now: Local "now" defining which calendar day is today

        Returns:
            DashboardStats for the snapshot

        Notes:
        - "today" and "weekend" are independent lenses; one sale may count in both.
        - Expenses, revenue and sales count are all-time totals.
        """
        total_today = 0.0
        total_weekend = 0.0
        total_pix = 0.0
        total_cash = 0.0

        for sale in data.sales:
            if is_today(sale.timestamp, now):
                total_today += sale.amount
            if is_weekend(sale.timestamp):
                total_weekend += sale.amount
            if sale.payment_method == PaymentMethod.PIX:
                total_pix += sale.amount
            else:
                total_cash += sale.amount

        total_expenses = sum((expense.amount for expense in data.expenses), 0.0)
        total_revenue = total_pix + total_cash
        profit = total_revenue - (data.initial_capital + total_expenses)

        return DashboardStats(
            initial_capital=data.initial_capital,
            total_sales_today=total_today,
            total_sales_weekend=total_weekend,
            total_pix=total_pix,
            total_cash=total_cash,
            total_expenses=total_expenses,
            profit=profit,
            sales_count=len(data.sales),
        )
