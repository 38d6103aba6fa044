from typing import Dict, Iterable
from .datatypes import CallRecord, PhoneAccount

def group_calls(records: Iterable[CallRecord]) -> Dict[str, PhoneAccount]:
    """
    Collect calls into one PhoneAccount per number.

    Numbers keep the order in which they first appear in the log and each
    account keeps its calls in log order.
    """
    accounts: Dict[str, PhoneAccount] = {}
    for record in records:
        account = accounts.get(record.number)
        if account is None:
            account = accounts[record.number] = PhoneAccount(record.number)
        account.add_call(record)
    return accounts
