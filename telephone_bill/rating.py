"""
Per-call pricing.

Two layers:
  • `rate_cost` prices a time span by the day/night tariff, no discount.
  • `call_cost` applies the long-call discount on top of it: the first
    `discount_threshold_minutes` are priced by `rate_cost`, the rest at the
    flat `discount_rate` whatever the time of day.

All minute counts are whole minutes, truncated toward zero, so a call of
2 min 42 s is billed as 2 minutes.
"""
import logging
from datetime import datetime, time, timedelta
from decimal import Decimal

from .datatypes import CallRecord, PhoneAccount, Tariff, Money, DEFAULT_TARIFF
from .time_utils import minutes_between

logger = logging.getLogger(__name__)

MIDNIGHT = time(0, 0, 0)
LAST_SECOND = time(23, 59, 59)   # end of a day spanned in full

def _segment_cost(seg_start: time, seg_end: time, tariff: Tariff) -> Money:
    """Cost of one span inside a single calendar day."""
    total = minutes_between(seg_start, seg_end)

    # intersection with the day window [day_start, day_end)
    overlap_start = max(seg_start, tariff.day_start)
    overlap_end = min(seg_end, tariff.day_end)
    day_minutes = max(minutes_between(overlap_start, overlap_end), 0)
    reduced_minutes = total - day_minutes

    return reduced_minutes * tariff.reduced_rate + day_minutes * tariff.base_rate

def rate_cost(start: datetime, end: datetime, tariff: Tariff = DEFAULT_TARIFF) -> Money:
    """
    Price [start, end] at the day/night rates.

    The span is cut into one segment per calendar date it touches. The first
    segment starts at `start`'s time of day, the last one ends at `end`'s,
    and every day in between counts from 00:00:00 to 23:59:59.
    """
    segments = (end.date() - start.date()).days + 1
    cost = Money(0)
    for day in range(segments):
        seg_start = start.time() if day == 0 else MIDNIGHT
        seg_end = end.time() if day == segments - 1 else LAST_SECOND
        cost += _segment_cost(seg_start, seg_end, tariff)
    return cost

def call_cost(call: CallRecord, tariff: Tariff = DEFAULT_TARIFF) -> Money:
    """Price a single call, applying the long-call discount."""
    threshold = tariff.discount_threshold_minutes
    if call.duration_minutes <= threshold:
        return rate_cost(call.start, call.end, tariff)

    discount_from = call.start + timedelta(minutes=threshold)
    head = rate_cost(call.start, discount_from, tariff)
    # the discounted tail is flat; the day window does not apply to it
    tail = tariff.discount_rate * minutes_between(discount_from, call.end)
    return head + tail

def account_cost(account: PhoneAccount, tariff: Tariff = DEFAULT_TARIFF) -> Money:
    """Full price of every call made from `account`."""
    total = sum((call_cost(c, tariff) for c in account.calls), Decimal(0))
    logger.debug(f"{account.number}: {account.call_count} calls, cost {total}")
    return total
