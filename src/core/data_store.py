"""Data store holding the single AppData aggregate.

Loads the persisted snapshot once and rewrites it in full on every commit.
Loading is defensive: a missing or broken snapshot never prevents startup.
"""

import json
from typing import Any, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from src.core.domain_models import AppData, Expense, Sale
from src.core.storage import KeyValueStore

DEFAULT_STORAGE_KEY = "cb_controle_data"

EntryT = TypeVar("EntryT", Sale, Expense)


def _parse_capital(raw: Any) -> float:
    # bool is an int subclass, but True is not a capital
    if isinstance(raw, bool) or not isinstance(raw, int | float):
        if raw is not None:
            logger.warning(f"Ignoring non-numeric initialCapital: {raw!r}")
        return 0.0
    return float(raw)


def _parse_entries(raw: Any, model: type[EntryT], label: str) -> list[EntryT]:
    """Validate persisted entries one by one, dropping invalid and duplicate ones."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        logger.warning(f"Ignoring persisted {label} list of type {type(raw).__name__}")
        return []

    entries: list[EntryT] = []
    seen_ids: set[str] = set()
    for item in raw:
        try:
            entry = model.model_validate(item)
        except ValidationError as e:
            logger.warning(f"Dropping malformed {label} entry: {e.error_count()} error(s)")
            continue
        if entry.id in seen_ids:
            logger.warning(f"Dropping duplicate {label} id '{entry.id}'")
            continue
        seen_ids.add(entry.id)
        entries.append(entry)
    return entries


def parse_app_data(raw: str | None) -> AppData:
    """Build an AppData from a persisted blob.

    Every field degrades to its empty value independently, so a partially
    broken blob keeps whatever is still readable.
    """
    if not raw:
        return AppData()
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"Persisted data is not valid JSON ({e}). Starting empty.")
        return AppData()
    if not isinstance(payload, dict):
        logger.warning("Persisted data is not an object. Starting empty.")
        return AppData()

    return AppData(
        initial_capital=_parse_capital(payload.get("initialCapital")),
        sales=_parse_entries(payload.get("sales"), Sale, "sale"),
        expenses=_parse_entries(payload.get("expenses"), Expense, "expense"),
    )


def serialize_app_data(data: AppData) -> str:
    """Serialize to the persisted camelCase layout."""
    payload = data.model_dump(mode="json", by_alias=True)
    # Absent observation is omitted rather than stored as null
    for sale in payload["sales"]:
        if sale.get("observation") is None:
            sale.pop("observation", None)
    return json.dumps(payload, ensure_ascii=False)


class DataStore:
    """Owns the AppData snapshot and its durable copy."""

    def __init__(self, storage: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key
        self._data = AppData()

    @property
    def data(self) -> AppData:
        return self._data

    def load(self) -> AppData:
        """Rehydrate from storage. Never fails on bad data; falls back to an empty ledger."""
        try:
            raw = self.storage.get(self.key)
        except (UnicodeDecodeError, OSError) as e:
            logger.warning(f"Persisted data for '{self.key}' is unreadable ({e}). Starting empty.")
            raw = None
        self._data = parse_app_data(raw)
        logger.info(
            f"Loaded ledger '{self.key}': {len(self._data.sales)} sales, "
            f"{len(self._data.expenses)} expenses, capital {self._data.initial_capital:.2f}"
        )
        return self._data

    def commit(self, data: AppData) -> None:
        """Persist the full snapshot, then make it current."""
        self.storage.set(self.key, serialize_app_data(data))
        self._data = data
        logger.debug(f"Persisted ledger '{self.key}'")
