import pytest
from datetime import datetime

from telephone_bill import log_parser
from telephone_bill.log_parser import LogParseError, parse_log, read_log

from generator import random_phones, to_log


def test_parse_single_line():
    records = parse_log("420774577453,13-01-2020 18:10:15,13-01-2020 18:12:57")

    assert len(records) == 1
    assert records[0].number == "420774577453"
    assert records[0].start == datetime(2020, 1, 13, 18, 10, 15)
    assert records[0].end == datetime(2020, 1, 13, 18, 12, 57)


def test_parse_empty_string():
    assert parse_log("") == []


def test_blank_lines_are_skipped():
    text = ("420774577453,13-01-2020 18:10:15,13-01-2020 18:12:57\n"
            "\n"
            "420776562353,18-01-2020 08:59:20,18-01-2020 09:10:00\n"
            "\n")
    records = parse_log(text)

    # a blank line in the middle does not stop parsing
    assert [r.number for r in records] == ["420774577453", "420776562353"]


def test_windows_line_endings():
    text = "420774577453,13-01-2020 18:10:15,13-01-2020 18:12:57\r\n"
    records = parse_log(text)
    assert records[0].end == datetime(2020, 1, 13, 18, 12, 57)


def test_generated_log_roundtrips_in_order():
    phones = random_phones(seed=7)
    records = parse_log(to_log(phones))

    expected = [c for p in phones for c in p.calls]
    assert records == expected


@pytest.mark.parametrize("line, reason", [
    ("420774577453,13-01-2020 18:10:15", "expected 3 fields"),
    ("420774577453,13-01-2020 18:10:15,13-01-2020 18:12:57,extra", "expected 3 fields"),
    ("420774577453,2020-01-13 18:10:15,13-01-2020 18:12:57", "bad timestamp"),
    ("420774577453,13-01-2020 18:10:15,13-01-2020 25:12:57", "bad timestamp"),
    ("+420774577453,13-01-2020 18:10:15,13-01-2020 18:12:57", "not all digits"),
    (",13-01-2020 18:10:15,13-01-2020 18:12:57", "not all digits"),
])
def test_malformed_lines_raise(line, reason):
    with pytest.raises(LogParseError, match=reason):
        parse_log(line)


def test_error_reports_line_number():
    text = ("420774577453,13-01-2020 18:10:15,13-01-2020 18:12:57\n"
            "\n"
            "420774577453,13-01-2020 18:10:15\n")
    with pytest.raises(LogParseError) as exc_info:
        parse_log(text)

    assert exc_info.value.line_no == 3
    assert exc_info.value.line == "420774577453,13-01-2020 18:10:15"


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_log("garbage")


def test_read_log(tmp_path):
    log_file = tmp_path / "calls.csv"
    log_file.write_text("420774577453,13-01-2020 18:10:15,13-01-2020 18:12:57\n")

    records = read_log(log_file)
    assert len(records) == 1
    assert records[0].number == "420774577453"


def test_custom_timestamp_format():
    from telephone_bill.datatypes import Tariff
    tariff = Tariff(timestamp_format='%Y-%m-%dT%H:%M:%S')

    records = log_parser.parse_log("42,2020-01-13T18:10:15,2020-01-13T18:12:57", tariff)
    assert records[0].start == datetime(2020, 1, 13, 18, 10, 15)
