from datetime import date

import pytest

from resort_booking.domain.value_objects.stay_range import StayRange


def _stay(check_in: str, check_out: str) -> StayRange:
    return StayRange(date.fromisoformat(check_in), date.fromisoformat(check_out))


def test_nights_counts_calendar_days():
    assert _stay("2030-06-10", "2030-06-12").nights == 2
    assert _stay("2030-06-30", "2030-07-01").nights == 1


@pytest.mark.parametrize(
    "check_in, check_out",
    [("2030-06-10", "2030-06-10"), ("2030-06-12", "2030-06-10")],
)
def test_empty_or_inverted_range_is_rejected(check_in, check_out):
    with pytest.raises(ValueError):
        _stay(check_in, check_out)


def test_touching_ranges_do_not_overlap():
    first = _stay("2030-06-10", "2030-06-12")
    second = _stay("2030-06-12", "2030-06-14")

    assert not first.overlaps_with(second)
    assert not second.overlaps_with(first)


@pytest.mark.parametrize(
    "other",
    [
        ("2030-06-11", "2030-06-13"),  # starts inside
        ("2030-06-08", "2030-06-11"),  # ends inside
        ("2030-06-09", "2030-06-15"),  # encloses
        ("2030-06-10", "2030-06-12"),  # identical
    ],
)
def test_overlapping_ranges(other):
    base = _stay("2030-06-10", "2030-06-12")
    assert base.overlaps_with(_stay(*other))
    assert _stay(*other).overlaps_with(base)


def test_check_out_day_is_not_contained():
    stay = _stay("2030-06-10", "2030-06-12")
    assert stay.contains(date(2030, 6, 10))
    assert stay.contains(date(2030, 6, 11))
    assert not stay.contains(date(2030, 6, 12))
