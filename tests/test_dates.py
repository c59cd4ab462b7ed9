from datetime import datetime, timezone

import pytest

from dormantusers.dates import DateError, get_iso_date, parse_date, validate_date


def test_iso_date_of_reference_date():
    assert get_iso_date("Jan 2 2006") == "2006-01-02T00:00:00Z"


def test_iso_date_round_trips_through_parse():
    iso = get_iso_date("Mar 15 2024")
    back = datetime.strptime(iso, "%Y-%m-%dT%H:%M:%SZ").replace(tzinfo=timezone.utc)
    assert back == parse_date("Mar 15 2024")


def test_parse_date_is_utc_midnight():
    parsed = parse_date("Jul 4 2024")
    assert parsed.tzinfo == timezone.utc
    assert (parsed.year, parsed.month, parsed.day) == (2024, 7, 4)
    assert (parsed.hour, parsed.minute, parsed.second) == (0, 0, 0)


@pytest.mark.parametrize("text", ["2024-01-02", "Foo 2 2024", "", "Jan 2"])
def test_unparseable_dates_raise(text):
    with pytest.raises(DateError):
        parse_date(text)
    with pytest.raises(DateError):
        get_iso_date(text)


def test_recent_date_is_valid():
    now = datetime(2024, 5, 1, tzinfo=timezone.utc)
    assert validate_date("Mar 1 2024", now) is True


def test_old_date_is_rejected():
    now = datetime(2024, 5, 1, tzinfo=timezone.utc)
    with pytest.raises(DateError, match="within the last 3 months"):
        validate_date("Jan 1 2024", now)


def test_month_overflow_rolls_forward():
    now = datetime(2024, 5, 31, tzinfo=timezone.utc)
    assert validate_date("Mar 2 2024", now) is True
    with pytest.raises(DateError):
        validate_date("Mar 1 2024", now)


def test_validate_rejects_garbage():
    with pytest.raises(DateError):
        validate_date("not a date")