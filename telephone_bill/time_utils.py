"""Whole-minute arithmetic on naive datetimes and times of day."""
from datetime import date, datetime, time, timedelta
from typing import Union

_MICROS_PER_MINUTE = 60 * 1_000_000

def minutes_between(start: Union[datetime, time], end: Union[datetime, time]) -> int:
    """Whole minutes from `start` to `end`; negative when `end` is earlier."""
    if isinstance(start, time):
        start = datetime.combine(date.min, start)
        end = datetime.combine(date.min, end)
    delta: timedelta = end - start
    micros = (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds
    minutes = abs(micros) // _MICROS_PER_MINUTE
    return minutes if micros >= 0 else -minutes
