"""Tests for the pt-BR currency and date helpers."""

import pytest

from src.core.formatting import (
    format_currency,
    format_date,
    format_time,
    from_epoch_ms,
    get_day_name,
    is_today,
    is_weekend,
    to_epoch_ms,
)
from tests.factories import FRIDAY, MONDAY, SATURDAY, SUNDAY, THURSDAY


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "R$ 0,00"),
        (5, "R$ 5,00"),
        (12.5, "R$ 12,50"),
        (1234.56, "R$ 1.234,56"),
        (1234567.8, "R$ 1.234.567,80"),
        (-40, "-R$ 40,00"),
        (-0.001, "R$ 0,00"),
    ],
)
def test_format_currency(value, expected) -> None:
    assert format_currency(value) == expected


def test_epoch_ms_conversion_keeps_local_time() -> None:
    assert from_epoch_ms(to_epoch_ms(FRIDAY)) == FRIDAY


def test_is_today_compares_calendar_days() -> None:
    assert is_today(to_epoch_ms(MONDAY.replace(hour=0, minute=0)), MONDAY)
    assert is_today(to_epoch_ms(MONDAY.replace(hour=23, minute=59)), MONDAY)
    assert not is_today(to_epoch_ms(SUNDAY), MONDAY)
    assert not is_today(to_epoch_ms(MONDAY.replace(year=2025)), MONDAY)


@pytest.mark.parametrize(
    ("moment", "expected"),
    [(THURSDAY, False), (FRIDAY, True), (SATURDAY, True), (SUNDAY, True), (MONDAY, False)],
)
def test_is_weekend(moment, expected) -> None:
    assert is_weekend(to_epoch_ms(moment)) is expected


def test_day_name_in_portuguese() -> None:
    assert get_day_name(to_epoch_ms(FRIDAY)) == "sexta-feira"
    assert get_day_name(to_epoch_ms(SATURDAY)) == "sábado"
    assert get_day_name(to_epoch_ms(MONDAY)) == "segunda-feira"


def test_date_and_time_labels() -> None:
    assert format_date(to_epoch_ms(FRIDAY)) == "16/10/2026"
    assert format_time(to_epoch_ms(SATURDAY)) == "19:15"
