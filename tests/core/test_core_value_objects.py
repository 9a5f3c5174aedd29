from datetime import datetime, timedelta, timezone

import pytest

from history_view.core.value_objects import END_OF_TIME_SECONDS, Timestamp


def test_timestamp_accepts_valid():
    assert Timestamp(5).seconds == 5
    assert int(Timestamp(5)) == 5


@pytest.mark.parametrize("value", [-1, END_OF_TIME_SECONDS + 1, 1.5, True, "10"])
def test_timestamp_rejects_invalid(value):
    with pytest.raises(ValueError):
        Timestamp(value)


def test_timestamps_are_ordered():
    assert Timestamp(1) < Timestamp(2) <= Timestamp(2)
    assert sorted([Timestamp(3), Timestamp(1)]) == [Timestamp(1), Timestamp(3)]


def test_end_of_time_is_greater_than_real_timestamps():
    eot = Timestamp.end_of_time()

    assert eot.is_end_of_time is True
    assert eot > Timestamp(END_OF_TIME_SECONDS - 1)
    assert eot > Timestamp.from_iso("2099-12-31T23:59:59Z")
    assert Timestamp(0).is_end_of_time is False


def test_iso_round_trip():
    ts = Timestamp.from_iso("2021-03-04T05:06:07Z")

    assert ts.to_iso() == "2021-03-04T05:06:07Z"
    assert str(ts) == "2021-03-04T05:06:07Z"
    assert ts.to_datetime() == datetime(2021, 3, 4, 5, 6, 7, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "text", ["2021-03-04 05:06:07", "2021-13-01T00:00:00Z", "ayer", "1969-12-31T23:59:59Z"]
)
def test_from_iso_rejects_invalid_text(text):
    with pytest.raises(ValueError):
        Timestamp.from_iso(text)


def test_from_datetime_handles_naive_and_aware():
    naive = datetime(1970, 1, 1, 0, 1, 0)
    aware = datetime(1970, 1, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=1)))

    assert Timestamp.from_datetime(naive) == Timestamp(60)
    assert Timestamp.from_datetime(aware) == Timestamp(60)


def test_coerce_accepts_supported_types():
    ts = Timestamp(60)

    assert Timestamp.coerce(ts) is ts
    assert Timestamp.coerce(60) == ts
    assert Timestamp.coerce("1970-01-01T00:01:00Z") == ts
    assert Timestamp.coerce(datetime(1970, 1, 1, 0, 1, tzinfo=timezone.utc)) == ts
