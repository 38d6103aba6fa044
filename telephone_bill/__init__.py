from .calculator import bill_breakdown, calculate
from .datatypes import AccountCharge, CallRecord, PhoneAccount, Tariff, DEFAULT_TARIFF

__all__ = [
    'bill_breakdown', 'calculate',
    'AccountCharge', 'CallRecord', 'PhoneAccount', 'Tariff', 'DEFAULT_TARIFF',
]
