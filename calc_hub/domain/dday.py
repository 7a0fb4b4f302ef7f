"""D-Day countdown"""

from datetime import datetime
from typing import Optional

from calc_hub.domain.exceptions import InvalidInputError
from calc_hub.domain.models import DdayInput, DdayResult
from calc_hub.utils.date_utils import local_date, now_like, split_duration


def calculate_dday(countdown: DdayInput, now: Optional[datetime] = None) -> DdayResult:
    """
    Days until (or since) the target, plus the exact remaining time.

    - dday: difference in calendar days between the target's date and today,
      so a target later today is D-Day regardless of the hour
    - days/hours/minutes/seconds: |target - now| broken down, truncated
    - is_past: target lies before now

    ``now`` defaults to the current time; pass it explicitly for repeatable
    results (the live countdown re-invokes this once per tick).
    """
    target = countdown.target
    if now is None:
        now = now_like(target)

    if (target.tzinfo is None) != (now.tzinfo is None):
        raise InvalidInputError("target: cannot compare timezone-aware and naive datetimes", field="target")

    dday = (local_date(target, target) - local_date(now, target)).days

    delta = target - now
    is_past = delta.total_seconds() < 0
    days, hours, minutes, seconds = split_duration(abs(delta))

    return DdayResult(
        dday=dday,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        is_past=is_past,
    )
