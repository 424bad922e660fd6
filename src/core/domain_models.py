from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.core.formatting import from_epoch_ms

# --- Enums ---


class PaymentMethod(str, Enum):
    """Payment methods accepted at the stall.

    Values are the persisted wire values.
    """

    PIX = "PIX"
    CASH = "DINHEIRO"


# --- Domain Models ---

# Persisted keys are camelCase ("initialCapital", "paymentMethod").
LEDGER_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


def _check_timestamp(value: int) -> int:
    """Reject epoch-ms values that cannot be turned into a local datetime."""
    try:
        from_epoch_ms(value)
    except (OverflowError, OSError, ValueError) as e:
        raise ValueError(f"timestamp {value} is out of range") from e
    return value


class Sale(BaseModel):
    """A single registered sale (money in).

    `timestamp` is the creation instant in epoch milliseconds.
    `observation` is None when the seller gave no details.
    """

    model_config = LEDGER_MODEL_CONFIG

    id: str
    amount: float
    payment_method: PaymentMethod
    observation: str | None = None
    timestamp: int

    @field_validator("timestamp")
    @classmethod
    def validate_timestamp(cls, value: int) -> int:
        return _check_timestamp(value)


class Expense(BaseModel):
    """A cash outflow (ice, drinks, charcoal...)."""

    model_config = LEDGER_MODEL_CONFIG

    id: str
    description: str
    amount: float
    timestamp: int

    @field_validator("timestamp")
    @classmethod
    def validate_timestamp(cls, value: int) -> int:
        return _check_timestamp(value)


class AppData(BaseModel):
    """
    Root aggregate of the ledger and the only persisted entity.

    Sales and expenses are ordered newest first. The model is frozen:
    mutations replace the whole snapshot instead of editing it in place.
    """

    model_config = LEDGER_MODEL_CONFIG

    initial_capital: float = 0.0
    sales: list[Sale] = Field(default_factory=list)
    expenses: list[Expense] = Field(default_factory=list)


class DashboardStats(BaseModel):
    """
    Derived dashboard snapshot. Never persisted.

    Design Choice:
    - Only the aggregates are stored as fields.
    - Presentation metrics (break-even, average ticket) are computed properties
      so they can never drift from the aggregates.
    """

    model_config = LEDGER_MODEL_CONFIG

    initial_capital: float
    total_sales_today: float
    total_sales_weekend: float
    total_pix: float
    total_cash: float
    total_expenses: float
    profit: float
    sales_count: int

    @property
    def total_revenue(self) -> float:
        """All-time revenue (PIX + cash)."""
        return self.total_pix + self.total_cash

    @property
    def total_out(self) -> float:
        """Costs to recover: initial capital plus expenses."""
        return self.initial_capital + self.total_expenses

    @property
    def break_even_percentage(self) -> float:
        """
        Share of the costs already recovered by revenue, capped at 100%.
        Without costs, any revenue counts as 100%.
        """
        total_in = self.total_revenue
        total_out = self.total_out
        if total_out > 0:
            return min(max(total_in / total_out * 100, 0.0), 100.0)
        return 100.0 if total_in > 0 else 0.0

    @property
    def average_ticket(self) -> float:
        """Average sale amount ("ticket médio")."""
        if self.sales_count == 0:
            return 0.0
        return self.total_revenue / self.sales_count

    @property
    def pix_share_percentage(self) -> float:
        """PIX share of revenue; 50% when there is no revenue yet."""
        total_in = self.total_revenue
        if total_in <= 0:
            return 50.0
        return self.total_pix / total_in * 100
