from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from eternus_advcopy_check import __version__
from eternus_advcopy_check.core.check_service import evaluate_output, load_capture, run_check
from eternus_advcopy_check.core.config import ConnectionSettings, configure_logging
from eternus_advcopy_check.core.models import AggregateResult, Severity
from eternus_advcopy_check.core.report import render, render_summary

PROG = "check_eternus_advcopy"


class _PluginArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits UNKNOWN (3) on usage errors, help and version."""

    def exit(self, status: int = 0, message: str | None = None):
        super().exit(status or Severity.UNKNOWN.exit_code, message)

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(Severity.UNKNOWN.exit_code, f"{self.prog}: error: {message}\n")


def _non_negative_int(s: str) -> int:
    value = int(s)
    if value < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = _PluginArgumentParser(
        prog=PROG,
        description="Check FUJITSU ETERNUS DX Advanced Copy sessions over SSH.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -H 10.0.0.5 -U monitor -P secret
  %(prog)s -H 10.0.0.5 -p 2222 -U monitor -P secret -w 5
  %(prog)s -f captured-output.txt
""",
    )
    p.add_argument("-H", "--hostname", help="IP address/hostname of the ETERNUS device")
    p.add_argument("-p", "--port", type=int, default=22, help="SSH port (default: 22)")
    p.add_argument("-U", "--username", help="Username (at least Monitor user role)")
    p.add_argument("-P", "--password", help="Password")
    p.add_argument(
        "-f",
        "--input-file",
        help="Evaluate a captured command output (plain or .gz) instead of connecting",
    )
    p.add_argument(
        "-w", "--wait", type=float, default=None, help="Seconds to wait for the listing (default: 2)"
    )
    p.add_argument(
        "-t", "--timeout", type=float, default=None, help="Connect timeout in seconds (default: 10)"
    )
    p.add_argument("--skip-head", type=_non_negative_int, default=0, help="Ignore N leading lines")
    p.add_argument("--skip-tail", type=_non_negative_int, default=0, help="Ignore N trailing lines")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Log to stderr (-vv for debug)")
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _settings_from_args(args: argparse.Namespace) -> ConnectionSettings:
    values = {
        "hostname": args.hostname,
        "port": args.port,
        "username": args.username,
        "password": args.password,
    }
    if args.wait is not None:
        values["shell_wait"] = args.wait
    if args.timeout is not None:
        values["connect_timeout"] = args.timeout
    return ConnectionSettings(**values)


def _evaluate(args: argparse.Namespace, parser: argparse.ArgumentParser) -> AggregateResult:
    if args.input_file:
        text = asyncio.run(load_capture(args.input_file))
        return evaluate_output(text, skip_head=args.skip_head, skip_tail=args.skip_tail)

    if not (args.hostname and args.username and args.password):
        parser.error("-H, -U and -P are required unless --input-file is given")
    try:
        settings = _settings_from_args(args)
    except ValidationError as e:
        parser.error(str(e))
    return run_check(settings, skip_head=args.skip_head, skip_tail=args.skip_tail)


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging("DEBUG" if args.verbose > 1 else "INFO")
    else:
        configure_logging()

    try:
        result = _evaluate(args, parser)
    except FileNotFoundError as e:
        print(render_summary(AggregateResult(severity=Severity.UNKNOWN, summary=str(e))))
        raise SystemExit(Severity.UNKNOWN.exit_code)
    except ValueError as e:
        print(render_summary(AggregateResult(severity=Severity.UNKNOWN, summary=f"Error: {e}")))
        raise SystemExit(Severity.UNKNOWN.exit_code)

    sys.stdout.write(render(result))
    raise SystemExit(result.severity.exit_code)


if __name__ == "__main__":
    main()
