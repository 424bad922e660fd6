"""Logic layer for the sale registration form."""

from src.config.sale_form import SaleFormConfig


def is_valid_sale_amount(amount: float | None, config: SaleFormConfig | None = None) -> bool:
    """Guard applied before a sale reaches the ledger."""
    # Sub-cent amounts would be stored but display as R$ 0,00
    if amount is None or round(amount, 2) <= 0:
        return False
    max_amount = (config or SaleFormConfig()).max_amount
    return amount <= max_amount


def build_sale_observation(
    skewer_count: int,
    drink_quantities: dict[str, int],
    config: SaleFormConfig,
) -> str:
    """Summarize the itemized sale, e.g. `2 Espetinho(s) • Bebidas: 1x Suco`.

    Drinks follow the configured order; unknown ids and zero counts are skipped.
    """
    parts = []
    if skewer_count > 0:
        parts.append(f"{skewer_count} {config.skewer_label}")

    drink_parts = [
        f"{drink_quantities[option.id]}x {option.label}"
        for option in config.drinks
        if drink_quantities.get(option.id, 0) > 0
    ]
    if drink_parts:
        parts.append(f"{config.drinks_label}: {', '.join(drink_parts)}")

    return " • ".join(parts) or config.default_observation
