"""Logic layer for the sales history page.

Groups sales by local calendar day with daily totals.
"""

from dataclasses import dataclass

import polars as pl

from src.core.domain_models import Sale
from src.core.formatting import format_date, format_time, get_day_name

SALE_SCHEMA = {
    "id": pl.Utf8,
    "amount": pl.Float64,
    "payment_method": pl.Utf8,
    "observation": pl.Utf8,
    "timestamp": pl.Int64,
    "date": pl.Utf8,
    "day_name": pl.Utf8,
    "time": pl.Utf8,
}


@dataclass
class DayGroup:
    """Sales registered on one day."""

    date_label: str
    day_name: str
    total: float
    sales: list[Sale]


def sales_to_frame(sales: list[Sale]) -> pl.DataFrame:
    """Tabular view of the sales, keeping the input order."""
    return pl.DataFrame(
        [
            {
                "id": sale.id,
                "amount": sale.amount,
                "payment_method": sale.payment_method.value,
                "observation": sale.observation,
                "timestamp": sale.timestamp,
                "date": format_date(sale.timestamp),
                "day_name": get_day_name(sale.timestamp),
                "time": format_time(sale.timestamp),
            }
            for sale in sales
        ],
        schema=SALE_SCHEMA,
    )


def group_sales_by_day(sales: list[Sale]) -> list[DayGroup]:
    """Group sales per day in order of first appearance (newest first for ledger order)."""
    df_sales = sales_to_frame(sales)
    if df_sales.is_empty():
        return []

    df_days = df_sales.group_by("date", maintain_order=True).agg(
        pl.col("amount").sum().alias("total"),
        pl.col("day_name").first(),
        pl.col("id"),
    )

    sales_by_id = {sale.id: sale for sale in sales}
    return [
        DayGroup(
            date_label=row["date"],
            day_name=row["day_name"],
            total=row["total"],
            sales=[sales_by_id[sale_id] for sale_id in row["id"]],
        )
        for row in df_days.iter_rows(named=True)
    ]
