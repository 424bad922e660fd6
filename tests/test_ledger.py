"""Tests for the ledger mutation API and its persistence."""

import json

import pytest

from src.core.data_store import DEFAULT_STORAGE_KEY, DataStore
from src.core.domain_models import PaymentMethod
from src.core.formatting import to_epoch_ms
from src.core.ledger import Ledger
from src.core.storage import FileKeyValueStore
from tests.factories import FRIDAY, MONDAY, FakeClock


def _persisted(storage: FileKeyValueStore) -> dict:
    raw = storage.get(DEFAULT_STORAGE_KEY)
    assert raw is not None
    return json.loads(raw)


def test_add_sale_prepends_with_id_and_timestamp(ledger: Ledger, clock: FakeClock) -> None:
    first = ledger.add_sale(10.0, PaymentMethod.PIX, "1 Espetinho(s)")
    clock.now = MONDAY.replace(hour=15)
    second = ledger.add_sale(5.0, PaymentMethod.CASH)

    assert [s.id for s in ledger.data.sales] == [second.id, first.id]
    assert first.id == "id-1"
    assert first.timestamp == to_epoch_ms(MONDAY)
    assert second.timestamp == to_epoch_ms(MONDAY.replace(hour=15))
    assert second.observation is None


def test_add_sale_is_persisted_in_wire_layout(ledger: Ledger, storage: FileKeyValueStore) -> None:
    ledger.add_sale(12.5, PaymentMethod.CASH)
    ledger.add_sale(3.0, PaymentMethod.PIX, "Venda simples")

    payload = _persisted(storage)

    assert payload["initialCapital"] == 0
    newest, oldest = payload["sales"]
    assert newest == {
        "id": "id-2",
        "amount": 3.0,
        "paymentMethod": "PIX",
        "observation": "Venda simples",
        "timestamp": to_epoch_ms(MONDAY),
    }
    assert oldest["paymentMethod"] == "DINHEIRO"
    assert "observation" not in oldest
    assert payload["expenses"] == []


def test_add_then_delete_sale_restores_previous_list(ledger: Ledger) -> None:
    ledger.add_sale(8.0, PaymentMethod.PIX)
    before = list(ledger.data.sales)

    sale = ledger.add_sale(4.0, PaymentMethod.CASH)
    ledger.delete_sale(sale.id)

    assert ledger.data.sales == before


def test_delete_unknown_sale_is_a_no_op(ledger: Ledger) -> None:
    ledger.add_sale(8.0, PaymentMethod.PIX)
    before = list(ledger.data.sales)

    ledger.delete_sale("does-not-exist")

    assert ledger.data.sales == before


def test_delete_unknown_expense_is_a_no_op(ledger: Ledger) -> None:
    ledger.add_expense("Gelo", 12.0)
    before = list(ledger.data.expenses)

    ledger.delete_expense("does-not-exist")

    assert ledger.data.expenses == before


def test_add_and_delete_expense(ledger: Ledger, storage: FileKeyValueStore) -> None:
    gelo = ledger.add_expense("Gelo", 12.0)
    carvao = ledger.add_expense("Carvão", 30.0)

    assert [e.id for e in ledger.data.expenses] == [carvao.id, gelo.id]

    ledger.delete_expense(gelo.id)

    assert [e.id for e in ledger.data.expenses] == [carvao.id]
    assert [e["description"] for e in _persisted(storage)["expenses"]] == ["Carvão"]


@pytest.mark.parametrize("amount", [250.0, 0.0, -20.0])
def test_update_capital_accepts_any_value(
    ledger: Ledger, storage: FileKeyValueStore, amount: float
) -> None:
    ledger.update_capital(amount)

    assert ledger.data.initial_capital == amount
    assert _persisted(storage)["initialCapital"] == amount


def test_generated_ids_are_unique_with_default_factory(storage: FileKeyValueStore) -> None:
    store = DataStore(storage)
    store.load()
    ledger = Ledger(store, clock=FakeClock(MONDAY))

    ids = {ledger.add_sale(1.0, PaymentMethod.PIX).id for _ in range(50)}
    ids |= {ledger.add_expense("x", 1.0).id for _ in range(50)}

    assert len(ids) == 100


def test_ledger_reopens_with_persisted_state(
    ledger: Ledger, data_dir, clock: FakeClock
) -> None:
    ledger.update_capital(100.0)
    clock.now = FRIDAY
    ledger.add_sale(30.0, PaymentMethod.CASH)
    clock.now = MONDAY
    ledger.add_sale(50.0, PaymentMethod.PIX)
    ledger.add_expense("Gelo", 20.0)

    reopened = Ledger.open(data_dir)
    reopened.clock = FakeClock(MONDAY)

    assert reopened.data == ledger.data
    stats = reopened.stats()
    assert stats.total_pix == pytest.approx(50.0)
    assert stats.total_cash == pytest.approx(30.0)
    assert stats.total_sales_today == pytest.approx(50.0)
    assert stats.total_sales_weekend == pytest.approx(30.0)
    assert stats.profit == pytest.approx(-40.0)


def test_stats_follow_mutations(ledger: Ledger) -> None:
    ledger.update_capital(0.0)
    assert ledger.stats().break_even_percentage == 0.0

    ledger.add_sale(5.0, PaymentMethod.PIX)

    stats = ledger.stats()
    assert stats.sales_count == 1
    assert stats.break_even_percentage == 100.0
