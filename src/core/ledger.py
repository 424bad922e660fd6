"""Ledger mutation API.

All writes go through `Ledger`: each operation builds the next AppData
snapshot, persists it through the DataStore and returns once both are done.
"""

import uuid
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from loguru import logger

from src.analysis.stats import StatsEngine
from src.core.data_store import DEFAULT_STORAGE_KEY, DataStore
from src.core.domain_models import AppData, DashboardStats, Expense, PaymentMethod, Sale
from src.core.formatting import to_epoch_ms
from src.core.storage import FileKeyValueStore


def new_entry_id() -> str:
    return str(uuid.uuid4())


class Ledger:
    """Single-writer owner of the stall's sales, expenses and capital."""

    def __init__(
        self,
        store: DataStore,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = new_entry_id,
        stats_engine: StatsEngine | None = None,
    ) -> None:
        """Initialize with explicit collaborators.

        Args:
            store: Loaded data store
            clock: Source of the current local time
            id_factory: Generator of unique entry ids
            stats_engine: Engine used by `stats()`
        """
        self.store = store
        self.clock = clock
        self.id_factory = id_factory
        self.stats_engine = stats_engine or StatsEngine()

    @classmethod
    def open(cls, data_dir: Path, key: str = DEFAULT_STORAGE_KEY) -> "Ledger":
        """Open the file-backed ledger stored in `data_dir`."""
        store = DataStore(FileKeyValueStore(data_dir), key=key)
        store.load()
        return cls(store)

    @property
    def data(self) -> AppData:
        return self.store.data

    def stats(self) -> DashboardStats:
        """Dashboard statistics for the current snapshot."""
        return self.stats_engine.calculate_dashboard_stats(self.data, self.clock())

    def _now_ms(self) -> int:
        return to_epoch_ms(self.clock())

    def add_sale(
        self,
        amount: float,
        payment_method: PaymentMethod,
        observation: str | None = None,
    ) -> Sale:
        """Register a sale as the newest entry."""
        sale = Sale(
            id=self.id_factory(),
            amount=amount,
            payment_method=payment_method,
            observation=observation,
            timestamp=self._now_ms(),
        )
        current = self.data
        self.store.commit(current.model_copy(update={"sales": [sale, *current.sales]}))
        logger.info(f"Added sale {sale.id}: {amount:.2f} via {payment_method.value}")
        return sale

    def delete_sale(self, sale_id: str) -> None:
        """Remove a sale. Unknown ids are ignored."""
        current = self.data
        remaining = [sale for sale in current.sales if sale.id != sale_id]
        if len(remaining) == len(current.sales):
            logger.debug(f"Sale '{sale_id}' not found. Nothing to delete.")
            return
        self.store.commit(current.model_copy(update={"sales": remaining}))
        logger.info(f"Deleted sale {sale_id}")

    def update_capital(self, amount: float) -> None:
        """Replace the initial capital. Any value is accepted as given."""
        self.store.commit(self.data.model_copy(update={"initial_capital": float(amount)}))
        logger.info(f"Initial capital set to {amount:.2f}")

    def add_expense(self, description: str, amount: float) -> Expense:
        """Register an expense as the newest entry."""
        expense = Expense(
            id=self.id_factory(),
            description=description,
            amount=amount,
            timestamp=self._now_ms(),
        )
        current = self.data
        self.store.commit(current.model_copy(update={"expenses": [expense, *current.expenses]}))
        logger.info(f"Added expense {expense.id}: '{description}' {amount:.2f}")
        return expense

    def delete_expense(self, expense_id: str) -> None:
        """Remove an expense. Unknown ids are ignored."""
        current = self.data
        remaining = [expense for expense in current.expenses if expense.id != expense_id]
        if len(remaining) == len(current.expenses):
            logger.debug(f"Expense '{expense_id}' not found. Nothing to delete.")
            return
        self.store.commit(current.model_copy(update={"expenses": remaining}))
        logger.info(f"Deleted expense {expense_id}")
