import math

import pytest

from BackEnd.services.fee_calc import compute_fees, fmt_money, parse_rate, round2


def test_half_hour_at_default_rate():
    assert compute_fees(1800, 200) == 100.00


def test_fees_round_to_two_decimals():
    # 1 s at 200/h = 0.0555...
    assert compute_fees(1, 200) == 0.06
    assert compute_fees(100, 150) == 4.17
    assert compute_fees(0, 200) == 0.0


def test_round2_half_up():
    assert round2(2.675) == 2.68
    assert round2(0.125) == 0.13


def test_zero_rate_bills_nothing():
    assert compute_fees(7200, 0) == 0.0


@pytest.mark.parametrize("text, expected", [("200", 200.0), (" 150.5 ", 150.5), ("1,200", 1200.0), ("0", 0.0)])
def test_parse_rate_accepts_numbers(text, expected):
    assert parse_rate(text) == expected


@pytest.mark.parametrize("text", ["", "   ", None, "abc", "nan", "inf", "-5"])
def test_parse_rate_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_rate(text)


def test_fmt_money():
    assert fmt_money(100) == "100.00"
    assert fmt_money(0) == "0.00"
    assert fmt_money(4.166666) == "4.17"
    assert not math.isnan(float(fmt_money(1e-9)))
