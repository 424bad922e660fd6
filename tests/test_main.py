"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest

from src.main import main


def run(data_dir: Path, *args: str) -> None:
    main(["--data-dir", str(data_dir), *args])


def test_cli_round_trip(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    run(tmp_path, "capital", "100")
    run(tmp_path, "sale", "50", "--method", "PIX", "--observation", "2 Espetinho(s)")
    run(tmp_path, "sale", "30", "--method", "DINHEIRO")
    run(tmp_path, "expense", "Gelo", "20")
    capsys.readouterr()

    run(tmp_path, "stats", "--json")
    stats = json.loads(capsys.readouterr().out)

    assert stats["initialCapital"] == 100.0
    assert stats["totalPix"] == 50.0
    assert stats["totalCash"] == 30.0
    assert stats["totalExpenses"] == 20.0
    assert stats["profit"] == -40.0
    assert stats["salesCount"] == 2


def test_cli_delete_sale(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    run(tmp_path, "sale", "12.5")
    sale_id = capsys.readouterr().out.strip()

    run(tmp_path, "delete-sale", sale_id)
    run(tmp_path, "delete-sale", "unknown-id")
    run(tmp_path, "stats", "--json")

    assert json.loads(capsys.readouterr().out)["salesCount"] == 0


def test_cli_history_lists_sales(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    run(tmp_path, "sale", "8", "--method", "DINHEIRO")
    sale_id = capsys.readouterr().out.strip()

    run(tmp_path, "history")
    out = capsys.readouterr().out

    assert "R$ 8,00" in out
    assert "DINHEIRO" in out
    assert "Sem detalhes" in out
    assert sale_id in out


@pytest.mark.parametrize(
    "args",
    [
        ("sale", "0"),
        ("sale", "-5"),
        ("sale", "0.004"),
        ("expense", "", "10"),
        ("expense", "Gelo", "0"),
    ],
)
def test_cli_rejects_invalid_input(tmp_path: Path, args: tuple[str, ...]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(tmp_path, *args)

    assert excinfo.value.code == 1
