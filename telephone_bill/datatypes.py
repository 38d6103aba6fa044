from dataclasses import dataclass, field
from decimal import Decimal
from typing import List
from datetime import datetime, time

from .time_utils import minutes_between

Money = Decimal       # exact per-minute arithmetic, truncated only at the very end

@dataclass(frozen=True)
class CallRecord:
    number: str                  # digits only, e.g. "420774577453"
    start: datetime              # naive local time
    end: datetime                # naive local time

    @property
    def duration_minutes(self) -> int:
        return minutes_between(self.start, self.end)

@dataclass
class PhoneAccount:
    number: str
    calls: List[CallRecord] = field(default_factory=list)

    def add_call(self, call: CallRecord) -> None:
        if call is None:
            raise ValueError(f'Cannot add an empty call to {self.number}')
        self.calls.append(call)

    @property
    def call_count(self) -> int:
        return len(self.calls)

@dataclass(frozen=True)
class Tariff:
    base_rate: Money = Money('1')                # per minute inside [day_start, day_end)
    reduced_rate: Money = Money('0.5')           # per minute outside the day window
    discount_rate: Money = Money('0.2')          # flat per minute after the threshold
    promo_rate: Money = Money('0')               # multiplier for the promo number's calls
    discount_threshold_minutes: int = 5
    day_start: time = time(8, 0, 0)
    day_end: time = time(16, 0, 0)
    timestamp_format: str = '%d-%m-%Y %H:%M:%S'  # 13-01-2020 18:10:15

DEFAULT_TARIFF = Tariff()

@dataclass
class AccountCharge:
    number: str
    call_count: int
    cost: Money                 # full price of every call on the number
    promo: bool = False
    billed: Money = Money(0)    # what actually lands on the bill
