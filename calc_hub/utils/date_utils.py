"""Date and time manipulation utilities"""

from datetime import date, datetime, timedelta, timezone


def now_like(reference: datetime) -> datetime:
    """Current time, aware in the reference's timezone if it is aware, naive local time otherwise"""
    if reference.tzinfo is None:
        return datetime.now()
    return datetime.now(reference.tzinfo)


def local_date(moment: datetime, reference: datetime) -> date:
    """Calendar date of ``moment`` as seen on the wall clock of ``reference``"""
    if moment.tzinfo is not None and reference.tzinfo is not None:
        moment = moment.astimezone(reference.tzinfo)
    return moment.date()


def to_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC, convert aware ones"""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def split_duration(delta: timedelta) -> tuple[int, int, int, int]:
    """Break a non-negative duration into (days, hours, minutes, seconds), dropping fractions"""
    hours, remainder = divmod(delta.seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return delta.days, hours, minutes, seconds
