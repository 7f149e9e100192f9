from __future__ import annotations

import pytest

from eternus_advcopy_check.core.formats import COLUMNS, AdvancedCopySessionParser


def test_parser_extracts_fields_in_column_order() -> None:
    parser = AdvancedCopySessionParser()
    record = parser.parse("1 x EC y 2 z 3 w Active dst a b")
    assert record is not None
    assert record.sid == 1
    assert record.type == "EC"
    assert record.source == "z"
    assert record.destination == "w"
    assert record.state == "Active"
    assert record.fields == ("1", "x", "EC", "y", "2", "z", "3", "w", "Active", "dst", "a", "b")
    assert len(record.fields) == len(COLUMNS) == 12


def test_parser_tolerates_padded_columns() -> None:
    parser = AdvancedCopySessionParser()
    line = "    2 1/2    SnapOPC+   TPV          12 FS_HOME        22 FS_SNAP1     Error Suspend  Copying         0x02   CLI"
    record = parser.parse(line)
    assert record is not None
    assert record.sid == 2
    assert record.type == "SnapOPC+"
    assert record.source == "FS_HOME"
    assert record.destination == "FS_SNAP1"
    assert record.state == "Error Suspend"
    assert record.fields[9] == "Copying"
    assert record.raw == line


def test_parser_keeps_multi_word_state_on_single_spaced_rows() -> None:
    parser = AdvancedCopySessionParser()
    record = parser.parse("7 x REC y 2 z 3 w Error Suspend dst a b")
    assert record is not None
    assert record.state == "Error Suspend"
    assert record.fields[9] == "dst"


def test_parser_takes_type_from_third_column() -> None:
    parser = AdvancedCopySessionParser()
    record = parser.parse("    0 1/1   EC       Standard   10 DB_DATA   20 DB_MIRROR  Active   Equivalent  0x00  GUI")
    assert record is not None
    assert record.type == "EC"
    assert record.fields[3] == "Standard"
    assert record.source == "DB_DATA"
    assert record.destination == "DB_MIRROR"


def test_parser_accepts_multi_word_volume_type() -> None:
    parser = AdvancedCopySessionParser()
    record = parser.parse("4 x SnapOPC+ Thin Provisioning 2 z 3 w Active dst a b")
    assert record is not None
    assert record.type == "SnapOPC+"
    assert record.fields[3] == "Thin Provisioning"
    assert record.source == "z"


def test_parser_ignores_trailing_carriage_return() -> None:
    parser = AdvancedCopySessionParser()
    record = parser.parse("1 x EC y 2 z 3 w Active dst a b\r")
    assert record is not None
    assert record.fields[-1] == "b"


@pytest.mark.parametrize(
    "line",
    [
        "",
        "   ",
        "CLI> ",
        "CLI> show advanced-copy-sessions -type all",
        "SID   Gene-  Type   Volume Type   Source Volume   Destination Volume  Status  Phase  Error  Requestor",
        "----- ------ ---------- ---------- ---- ------------ ---- ------------",
        "1 x EC y 2 z 3 w Active dst a",  # too few fields
        "a x EC y 2 z 3 w Active dst a b",  # non-numeric id
        "1 x EC y two z 3 w Active dst a b",  # non-numeric source number
    ],
)
def test_parser_rejects_non_session_lines(line: str) -> None:
    assert AdvancedCopySessionParser().parse(line) is None
