"""Logic layer for the dashboard page.

Prepares chart-ready frames from DashboardStats.
"""

import polars as pl

from src.core.domain_models import DashboardStats, PaymentMethod


def get_payment_distribution(stats: DashboardStats) -> pl.DataFrame:
    """Revenue per payment method with its share of the total.

    Without revenue both methods get an even share so the bar stays balanced.
    """
    pix_share = stats.pix_share_percentage
    return pl.DataFrame(
        {
            "payment_method": [PaymentMethod.PIX.value, PaymentMethod.CASH.value],
            "amount": [stats.total_pix, stats.total_cash],
            "share": [pix_share, 100.0 - pix_share],
        }
    )


def get_break_even_split(stats: DashboardStats) -> pl.DataFrame:
    """Recovered vs. missing part of the break-even goal, in percent."""
    recovered = stats.break_even_percentage
    return pl.DataFrame(
        {
            "segment": ["recovered", "missing"],
            "value": [recovered, 100.0 - recovered],
        }
    )
