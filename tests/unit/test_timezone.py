"""Unit tests for the world clock"""

import pytest
from datetime import datetime, timedelta, timezone
from calc_hub.domain.exceptions import InvalidInputError
from calc_hub.domain.timezone import (
    CITIES,
    SEOUL,
    describe_difference,
    find_city,
    flight_arrival,
    offset_difference,
    time_in_city,
)


def test_city_table():
    assert len(CITIES) == 27
    assert SEOUL.tz_name == "Asia/Seoul"
    assert find_city("델리").utc_offset_hours == 5.5


def test_find_city_by_zone_name_returns_first_match():
    assert find_city("America/New_York").name == "뉴욕"
    assert find_city("America/Los_Angeles").name == "로스앤젤레스"


def test_unknown_city_rejected():
    with pytest.raises(InvalidInputError) as exc_info:
        find_city("Atlantis")
    assert exc_info.value.field == "city"


def test_half_hour_offset(fixed_utc_now: datetime):
    assert time_in_city(find_city("델리"), fixed_utc_now) == datetime(2026, 1, 1, 5, 30)


def test_time_in_city_from_aware_local_time():
    seoul_morning = datetime(2026, 1, 1, 9, 0, tzinfo=timezone(timedelta(hours=9)))
    assert time_in_city(find_city("뉴욕"), seoul_morning) == datetime(2025, 12, 31, 19, 0)


def test_naive_instant_is_utc():
    assert time_in_city(SEOUL, datetime(2026, 1, 1, 20, 0)) == datetime(2026, 1, 2, 5, 0)


@pytest.mark.parametrize(
    "city,hours,text",
    [
        ("도쿄", 0, "시차 없음"),
        ("뉴욕", -14, "서울보다 14시간 느림"),
        ("델리", -3.5, "서울보다 3.5시간 느림"),
        ("오클랜드", 4, "서울보다 4시간 빠름"),
    ],
)
def test_difference_from_seoul(city: str, hours: float, text: str):
    assert offset_difference(find_city(city)) == hours
    assert describe_difference(find_city(city)) == text


def test_difference_from_other_reference():
    london = find_city("런던")
    assert offset_difference(find_city("파리"), london) == 1
    assert describe_difference(find_city("파리"), london) == "런던보다 1시간 빠름"


def test_flight_arrival(fixed_utc_now: datetime):
    arrival = flight_arrival(fixed_utc_now, 14, 5, find_city("뉴욕"))
    # 00:00 UTC + 14h05m = 14:05 UTC = 09:05 in New York
    assert arrival == datetime(2026, 1, 1, 9, 5)


def test_flight_requires_duration(fixed_utc_now: datetime):
    with pytest.raises(InvalidInputError):
        flight_arrival(fixed_utc_now, 0, 0, SEOUL)
