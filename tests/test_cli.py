from __future__ import annotations

from pathlib import Path

import pytest

from eternus_advcopy_check import cli
from eternus_advcopy_check.core.aggregator import transport_failure


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)
    return exc_info.value.code


def test_cli_input_file(tmp_path: Path, write_capture, capture_text: str, capsys) -> None:
    path = tmp_path / "advcopy.txt"
    write_capture(path, capture_text)

    code = _run(["-f", str(path)])

    out = capsys.readouterr().out
    assert code == 2
    assert out.splitlines() == [
        "Advanced Copy CRITICAL: 4 session(s)",
        "EC (DB_DATA > DB_MIRROR) is Active",
        "CRITICAL - REC (DB_LOG > DR_LOG) is Halt",
        "CRITICAL - SnapOPC+ (FS_HOME > FS_SNAP1) is Error Suspend",
        "WARNING - ODX (VM_SRC > VM_DST) is Unknown",
    ]


def test_cli_ok_exit_code(tmp_path: Path, write_capture, capsys) -> None:
    path = tmp_path / "advcopy.txt"
    write_capture(path, "1 x EC y 2 z 3 w Active dst a b\n")
    assert _run(["--input-file", str(path)]) == 0
    assert capsys.readouterr().out == "Advanced Copy OK: 1 session(s)\nEC (z > w) is Active\n"


def test_cli_missing_input_file(tmp_path: Path, capsys) -> None:
    code = _run(["-f", str(tmp_path / "nope.txt")])
    assert code == 3
    assert capsys.readouterr().out.startswith("Advanced Copy UNKNOWN: Capture file not found")


def test_cli_requires_credentials(capsys) -> None:
    code = _run(["-H", "10.0.0.5"])
    assert code == 3
    assert "required" in capsys.readouterr().err


def test_cli_invalid_port_is_usage_error(capsys) -> None:
    code = _run(["-H", "10.0.0.5", "-U", "monitor", "-P", "secret", "-p", "0"])
    assert code == 3
    assert "usage:" in capsys.readouterr().err


def test_cli_version_exits_unknown(capsys) -> None:
    assert _run(["-V"]) == 3
    assert capsys.readouterr().out.startswith("check_eternus_advcopy ")


def test_cli_help_exits_unknown(capsys) -> None:
    assert _run(["-h"]) == 3
    assert "usage:" in capsys.readouterr().out


def test_cli_live_check_connection_failure(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    seen = {}

    def fake_run_check(settings, **kwargs):
        seen["settings"] = settings
        return transport_failure("Unable to establish connection")

    monkeypatch.setattr(cli, "run_check", fake_run_check)

    code = _run(["-H", "10.0.0.5", "-p", "2222", "-U", "monitor", "-P", "secret", "-w", "4"])

    assert code == 1
    assert capsys.readouterr().out == "Advanced Copy WARNING: Unable to establish connection\n"
    assert seen["settings"].port == 2222
    assert seen["settings"].shell_wait == 4.0
