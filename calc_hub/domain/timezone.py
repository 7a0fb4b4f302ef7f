"""World clock with fixed UTC offsets and flight arrival times"""

from datetime import datetime, timedelta
from typing import List, Optional

from calc_hub.domain.exceptions import InvalidInputError
from calc_hub.domain.models import City
from calc_hub.utils.date_utils import to_utc

# Standard-time offsets; daylight saving is not applied
CITIES: List[City] = [
    # Asia
    City("서울", "대한민국", "Asia/Seoul", 9),
    City("도쿄", "일본", "Asia/Tokyo", 9),
    City("베이징", "중국", "Asia/Shanghai", 8),
    City("홍콩", "중국", "Asia/Hong_Kong", 8),
    City("싱가포르", "싱가포르", "Asia/Singapore", 8),
    City("방콕", "태국", "Asia/Bangkok", 7),
    City("하노이", "베트남", "Asia/Ho_Chi_Minh", 7),
    City("델리", "인도", "Asia/Kolkata", 5.5),
    City("두바이", "UAE", "Asia/Dubai", 4),
    # Europe
    City("런던", "영국", "Europe/London", 0),
    City("파리", "프랑스", "Europe/Paris", 1),
    City("베를린", "독일", "Europe/Berlin", 1),
    City("로마", "이탈리아", "Europe/Rome", 1),
    City("마드리드", "스페인", "Europe/Madrid", 1),
    City("암스테르담", "네덜란드", "Europe/Amsterdam", 1),
    City("모스크바", "러시아", "Europe/Moscow", 3),
    # Americas
    City("뉴욕", "미국", "America/New_York", -5),
    City("로스앤젤레스", "미국", "America/Los_Angeles", -8),
    City("시카고", "미국", "America/Chicago", -6),
    City("라스베이거스", "미국", "America/Los_Angeles", -8),
    City("샌프란시스코", "미국", "America/Los_Angeles", -8),
    City("토론토", "캐나다", "America/Toronto", -5),
    City("밴쿠버", "캐나다", "America/Vancouver", -8),
    City("멕시코시티", "멕시코", "America/Mexico_City", -6),
    # Oceania
    City("시드니", "호주", "Australia/Sydney", 11),
    City("멜버른", "호주", "Australia/Melbourne", 11),
    City("오클랜드", "뉴질랜드", "Pacific/Auckland", 13),
]

SEOUL = CITIES[0]


def find_city(key: str) -> City:
    """Look up a city by display name or IANA zone name (first match wins)"""
    for city in CITIES:
        if key in (city.name, city.tz_name):
            return city
    raise InvalidInputError(f"city: unknown city {key!r}", field="city")


def time_in_city(city: City, instant: datetime) -> datetime:
    """
    Wall-clock time in ``city`` at ``instant``.

    The result is naive: UTC plus the city's fixed offset. Naive inputs are
    taken to be UTC.
    """
    utc = to_utc(instant).replace(tzinfo=None)
    return utc + timedelta(hours=city.utc_offset_hours)


def offset_difference(city: City, reference: Optional[City] = None) -> float:
    """Hours ``city`` is ahead of ``reference`` (negative when behind)"""
    reference = reference or SEOUL
    return city.utc_offset_hours - reference.utc_offset_hours


def _format_hours(hours: float) -> str:
    return f"{hours:g}"


def describe_difference(city: City, reference: Optional[City] = None) -> str:
    """Human-readable difference, e.g. "서울보다 14시간 느림" """
    reference = reference or SEOUL
    diff = offset_difference(city, reference)

    if diff == 0:
        return "시차 없음"
    if diff > 0:
        return f"{reference.name}보다 {_format_hours(diff)}시간 빠름"
    return f"{reference.name}보다 {_format_hours(abs(diff))}시간 느림"


def flight_arrival(departure: datetime, hours: int, minutes: int, destination: City) -> datetime:
    """Local arrival time at ``destination`` for a flight leaving at ``departure``"""
    if hours < 0 or minutes < 0:
        raise InvalidInputError("flight duration must not be negative", field="hours" if hours < 0 else "minutes")
    if hours == 0 and minutes == 0:
        raise InvalidInputError("flight duration is required", field="hours")

    arrival = to_utc(departure) + timedelta(hours=hours, minutes=minutes)
    return time_in_city(destination, arrival)
