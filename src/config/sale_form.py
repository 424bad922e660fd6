from pathlib import Path

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field


class DrinkOption(BaseModel):
    """A drink the seller can count on the sale form."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str


def _default_drinks() -> list[DrinkOption]:
    return [
        DrinkOption(id="suco", label="Suco"),
        DrinkOption(id="refri_lat_f", label="Refri Latinha"),
        DrinkOption(id="refri_1l", label="Refri 1L"),
        DrinkOption(id="refri_2l", label="Refri 2L"),
    ]


class SaleFormConfig(BaseModel):
    """
    Options offered on the sale registration form.
    """

    model_config = ConfigDict(frozen=True)

    skewer_label: str = Field(default="Espetinho(s)", description="Suffix for the skewer count")
    drinks_label: str = Field(default="Bebidas", description="Prefix of the drinks summary")
    default_observation: str = Field(
        default="Venda simples", description="Observation used when nothing is itemized"
    )
    max_amount: float = Field(default=999_999.99, gt=0)
    drinks: list[DrinkOption] = Field(default_factory=_default_drinks)


def load_sale_form_config(config_path: Path) -> SaleFormConfig:
    if not config_path.exists():
        logger.warning(f"Sale form config not found at {config_path}. Using defaults.")
        return SaleFormConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            raw_data = yaml.safe_load(f) or {}
        return SaleFormConfig(**raw_data)

    except Exception as e:
        logger.error(f"Failed to load sale form config: {e}")
        return SaleFormConfig()
