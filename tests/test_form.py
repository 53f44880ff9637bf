from decimal import Decimal
import pytest

from tipcalculator.form import TipForm, parse_flag, parse_number


@pytest.mark.parametrize(
    "text,expected",
    [
        ("50", 50.0),
        ("33.33", 33.33),
        (" 12.5 ", 12.5),
        ("-4", -4.0),
        ("", 0.0),
        (None, 0.0),
        ("abc", 0.0),
        ("12,50", 0.0),
        ("1.2.3", 0.0),
    ],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [("on", True), ("true", True), ("1", True), ("YES", True), ("off", False), ("", False), (None, False)],
)
def test_parse_flag(text, expected):
    assert parse_flag(text) is expected


def test_empty_form_shows_zero_tip():
    form = TipForm(locale="en_US")
    assert form.amount == 0.0
    assert form.tip_percent == 0.0
    assert form.tip == "$0.00"


def test_form_computes_tip_from_text():
    form = TipForm(amount_input="33.33", tip_input="20", round_up=True, locale="en_US")
    assert form.tip_value == Decimal("7")
    assert form.tip == "$7.00"


def test_form_updates_as_fields_change():
    form = TipForm(amount_input="50", locale="en_US")
    assert form.tip == "$0.00"
    form.tip_input = "18"
    assert form.tip == "$9.00"
    form.amount_input = "50x"
    assert form.tip == "$0.00"
