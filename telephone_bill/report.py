import pandas as pd
from pathlib import Path
from decimal import Decimal, ROUND_HALF_UP
from typing import List
import logging

from .datatypes import AccountCharge, Money

logger = logging.getLogger(__name__)

# Column order of the breakdown CSV
COLUMNS = [
    'Phone Number',
    'Calls',
    'Cost',
    'Promo',
    'Billed',
]

def write_breakdown(csv_path: Path, charges: List[AccountCharge]) -> None:
    """Write the per-number breakdown to CSV, replacing any existing file"""
    logger.info(f"Writing {len(charges)} phone numbers to {csv_path}")

    rows_data = [_charge_to_dict(c) for c in charges]
    df = pd.DataFrame(rows_data, columns=COLUMNS)
    df.to_csv(csv_path, index=False)
    logger.debug(f"Successfully wrote breakdown to {csv_path}")

def read_breakdown(csv_path: Path) -> pd.DataFrame:
    """Read a breakdown CSV back, keeping phone numbers and amounts as text"""
    return pd.read_csv(csv_path, dtype={'Phone Number': str, 'Cost': str, 'Billed': str})

def _charge_to_dict(charge: AccountCharge) -> dict:
    return {
        'Phone Number': charge.number,
        'Calls': charge.call_count,
        'Cost': _format_money(charge.cost),
        'Promo': 'yes' if charge.promo else '',
        'Billed': _format_money(charge.billed),
    }

def _format_money(amount: Money) -> str:
    return str(Decimal(amount).quantize(Decimal('0.01'), ROUND_HALF_UP))

def format_bill_report(charges: List[AccountCharge], total: int) -> str:
    """
    Format the bill as plain text, one line per phone number.
    """
    report_lines = []
    report_lines.append("=== TELEPHONE BILL ===")
    report_lines.append("")

    for charge in charges:
        line = (f"{charge.number}: {charge.call_count} call(s), "
                f"cost {_format_money(charge.cost)}")
        if charge.promo:
            line += f" (promo, billed {_format_money(charge.billed)})"
        report_lines.append(line)

    if not charges:
        report_lines.append("No calls in the log.")

    report_lines.append("")
    report_lines.append(f"Total: {total}")

    return "\n".join(report_lines)
