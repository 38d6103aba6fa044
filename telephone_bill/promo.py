"""
Promotion rule: the number with the most calls gets them for free.

If several numbers share the highest call count, the one with the largest
arithmetic value wins ("420776562353" beats "420774577453").
"""
import logging
from typing import List, Optional, Sequence

from .datatypes import PhoneAccount

logger = logging.getLogger(__name__)

def most_frequent(accounts: Sequence[PhoneAccount]) -> List[PhoneAccount]:
    """Accounts sharing the highest call count, in input order; [] for no accounts."""
    if not accounts:
        return []
    top = max(a.call_count for a in accounts)
    return [a for a in accounts if a.call_count == top]

def select_promo(accounts: Sequence[PhoneAccount]) -> Optional[PhoneAccount]:
    """
    Pick the promo account, or None when there are no accounts at all.

    Accounts without any calls still tie at zero and one of them is
    returned.
    """
    candidates = most_frequent(accounts)
    if not candidates:
        return None
    if len(candidates) == 1:
        promo = candidates[0]
    else:
        # python ints are unbounded, long numbers compare exactly
        promo = max(candidates, key=lambda a: int(a.number))
    logger.debug(f"Promo number {promo.number} ({promo.call_count} calls, "
                 f"{len(candidates)} candidate(s))")
    return promo
