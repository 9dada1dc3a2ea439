from decimal import Decimal

import pytest

from src.timebank.timebank.common.duration import format_duration, format_hours, hours_to_seconds, parse_duration
from src.timebank.timebank.core.exceptions import ValidationError


def test_format_zero():
    assert format_duration(0) == "00:00:00"


def test_format_pads_and_signs():
    assert format_duration(3661) == "01:01:01"
    assert format_duration(-8 * 3600) == "-08:00:00"
    assert format_duration(-59) == "-00:00:59"


def test_format_hours_not_wrapped_at_24():
    assert format_duration(173 * 3600 + 20 * 60) == "173:20:00"


def test_parse_inverts_format_for_wide_range():
    samples = [0, 1, -1, 59, 60, -3600, 86399, 86400, -86401, 5 * 3600, 999_999, -12_345_678]
    samples += list(range(-7200, 7201, 997))
    for x in samples:
        assert parse_duration(format_duration(x)) == x


def test_hours_to_seconds_rounds_half_up_to_the_second():
    assert hours_to_seconds(Decimal("1.5")) == 5400
    assert hours_to_seconds("0.0001388") == 0
    assert hours_to_seconds("0.000139") == 1
    assert hours_to_seconds(-0.25) == -900
    assert format_hours(Decimal("-8")) == "-08:00:00"


@pytest.mark.parametrize("value", ["", "1:00:00", "01:60:00", "01:00", "+01:00:00", "abc", "01:00:00:00"])
def test_parse_rejects_malformed(value):
    with pytest.raises(ValidationError):
        parse_duration(value)
