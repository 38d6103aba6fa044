"""
Bill calculation.

calculate() is the whole pipeline:
  1. parse the log (unless records are passed in already)
  2. group the calls by phone number
  3. pick the promo number, if there is one
  4. price every number; the promo number pays `promo_rate` × its cost
  5. add everything up and drop the fractional part
"""
import logging
from decimal import Decimal
from typing import Iterable, List, Union

from .datatypes import AccountCharge, CallRecord, Tariff, DEFAULT_TARIFF
from .grouper import group_calls
from .log_parser import parse_log
from .promo import select_promo
from .rating import account_cost

logger = logging.getLogger(__name__)

CallLog = Union[str, Iterable[CallRecord]]

def bill_breakdown(log: CallLog, tariff: Tariff = DEFAULT_TARIFF) -> List[AccountCharge]:
    """One AccountCharge per phone number, in first-seen order."""
    records = parse_log(log, tariff) if isinstance(log, str) else log
    accounts = list(group_calls(records).values())
    promo = select_promo(accounts)

    charges = []
    for account in accounts:
        cost = account_cost(account, tariff)
        is_promo = promo is not None and account.number == promo.number
        charges.append(AccountCharge(
            number=account.number,
            call_count=account.call_count,
            cost=cost,
            promo=is_promo,
            billed=tariff.promo_rate * cost if is_promo else cost,
        ))
    return charges

def total_of(charges: Iterable[AccountCharge]) -> int:
    """Sum the billed amounts, truncated toward zero."""
    return int(sum((c.billed for c in charges), Decimal(0)))

def calculate(log: CallLog, tariff: Tariff = DEFAULT_TARIFF) -> int:
    """Amount to pay for the calls in `log`."""
    charges = bill_breakdown(log, tariff)
    total = total_of(charges)
    logger.debug(f"Billed {len(charges)} numbers, total {total}")
    return total
