from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

HEADER_LINES = [
    "CLI> show advanced-copy-sessions -type all",
    "SID   Gene-  Type       Volume     Source Volume     Destination Volume  Status         Phase           Error  Requestor",
    "      ration            Type       No.  Name         No.  Name                                          Code",
    "----- ------ ---------- ---------- ---- ------------ ---- ------------ -------------- --------------- ------ ---------",
]
PROMPT_LINE = "CLI> "


def make_capture(rows: list[str]) -> str:
    """Wrap session rows the way the device prints them."""
    return "\r\n".join([*HEADER_LINES, *rows, PROMPT_LINE])


@pytest.fixture
def capture_text() -> str:
    return make_capture(
        [
            "    0 -/-    EC         Standard     10 DB_DATA        20 DB_MIRROR    Active         Equivalent      0x00   GUI",
            "    1 -/-    REC        Standard     11 DB_LOG         21 DR_LOG       Halt           Tracking        0xBA   GUI",
            "    2 1/2    SnapOPC+   TPV          12 FS_HOME        22 FS_SNAP1     Error Suspend  Copying         0x02   CLI",
            "    3 -/-    ODX        TPV          13 VM_SRC         23 VM_DST       Unknown        Copying         0x00   SMI-S",
        ]
    )


@pytest.fixture
def write_capture() -> Callable[[Path, str], None]:
    def _write(path: Path, text: str) -> None:
        path.write_text(text, encoding="utf-8")

    return _write
