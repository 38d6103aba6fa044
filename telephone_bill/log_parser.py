"""
Call log parsing.

The log is CSV text, one call per line, no header:

    420774577453,13-01-2020 18:10:15,13-01-2020 18:12:57

  • phone number, digits only
  • start of the call, dd-MM-yyyy HH:mm:ss
  • end of the call, same format

Blank lines are ignored. Anything else that does not fit raises
`LogParseError`; a log is either parsed completely or not at all.
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import List

from .datatypes import CallRecord, Tariff, DEFAULT_TARIFF

logger = logging.getLogger(__name__)

FIELD_COUNT = 3

class LogParseError(ValueError):
    """A call log line could not be turned into a CallRecord."""

    def __init__(self, line_no: int, line: str, reason: str):
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_no}: {reason}: {line!r}")

def _parse_timestamp(value: str, fmt: str, line_no: int, line: str) -> datetime:
    try:
        return datetime.strptime(value, fmt)
    except ValueError as e:
        raise LogParseError(line_no, line, f"bad timestamp {value!r}") from e

def parse_line(line: str, line_no: int = 1, tariff: Tariff = DEFAULT_TARIFF) -> CallRecord:
    parts = [p.strip() for p in line.split(',')]
    if len(parts) != FIELD_COUNT:
        raise LogParseError(line_no, line, f"expected {FIELD_COUNT} fields, got {len(parts)}")

    number, start_str, end_str = parts
    if not (number.isascii() and number.isdigit()):
        raise LogParseError(line_no, line, f"phone number {number!r} is not all digits")

    start = _parse_timestamp(start_str, tariff.timestamp_format, line_no, line)
    end = _parse_timestamp(end_str, tariff.timestamp_format, line_no, line)
    return CallRecord(number=number, start=start, end=end)

def parse_log(text: str, tariff: Tariff = DEFAULT_TARIFF) -> List[CallRecord]:
    records = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        records.append(parse_line(line, line_no, tariff))
    logger.debug(f"Parsed {len(records)} call records")
    return records

def read_log(path: Path, tariff: Tariff = DEFAULT_TARIFF) -> List[CallRecord]:
    """Read and parse a call log file."""
    records = parse_log(Path(path).read_text(encoding='utf-8'), tariff)
    logger.info(f"Loaded {len(records)} calls from {path}")
    return records
