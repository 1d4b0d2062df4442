import math
from datetime import timedelta

import pytest

from paxkit.seconds import seconds_to_float, seconds_to_string


def test_seconds_to_float():
    assert seconds_to_float(timedelta(seconds=90)) == 90.0
    assert seconds_to_float(7) == 7.0
    assert seconds_to_float(2.5) == 2.5


@pytest.mark.parametrize("secs", [0, -1, -1e9])
def test_zero_or_negative(secs):
    assert seconds_to_string(secs) == "~zero time"


def test_simple_seconds():
    assert seconds_to_string(5) == "5 s"


def test_special_values():
    assert seconds_to_string(math.inf) == "inf time"
    assert seconds_to_string(math.nan) == "nan"


@pytest.mark.parametrize(
    "secs, unit",
    [
        (42, " s"),
        (600, " min"),
        (5 * 3600, " h"),
        (2 * 86400, " days"),
        (60 * 86400, " weeks"),
        (1e9, " years"),
    ],
)
def test_units(secs, unit):
    assert seconds_to_string(secs).endswith(unit)


def test_digits_normalisation():
    assert seconds_to_string(12.3456, 0) == seconds_to_string(12.3456, 3)
    assert seconds_to_string(12.3456, 1) == seconds_to_string(12.3456, 2)
    assert seconds_to_string(12.3456, -1) == seconds_to_string(12.3456, -2)


@pytest.mark.parametrize("digits", [-2, -3, -5])
@pytest.mark.parametrize("secs", [5, 2.5, 600, 0])
def test_aligned_width(secs, digits):
    text = seconds_to_string(secs, digits)
    assert len(text) == 13 - digits
    assert text.strip() == seconds_to_string(secs, -digits).strip()