"""Logic layer for the capital and expenses page."""

import polars as pl

from src.core.domain_models import Expense
from src.core.formatting import format_time

EXPENSE_SCHEMA = {
    "id": pl.Utf8,
    "description": pl.Utf8,
    "amount": pl.Float64,
    "timestamp": pl.Int64,
    "time": pl.Utf8,
}


def is_valid_expense(description: str | None, amount: float | None) -> bool:
    """Guard applied before an expense reaches the ledger."""
    return bool(description and description.strip()) and amount is not None and round(amount, 2) > 0


def expenses_to_frame(expenses: list[Expense]) -> pl.DataFrame:
    """Tabular view of the expenses, newest first."""
    return pl.DataFrame(
        [
            {
                "id": expense.id,
                "description": expense.description,
                "amount": expense.amount,
                "timestamp": expense.timestamp,
                "time": format_time(expense.timestamp),
            }
            for expense in expenses
        ],
        schema=EXPENSE_SCHEMA,
    )
