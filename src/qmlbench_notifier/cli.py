from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .accumulate import collect
from .compare import find_discrepancies
from .config import DEFAULT_ERROR_MARGIN, DEFAULT_SENDER, DEFAULT_SMTP_SERVER, NotifierConfig
from .dispatch import send_report
from .errors import ScriptError, usage_error
from .exit_codes import ERR_USAGE, OK
from .formatting import compose_message, format_findings
from .logging import log_event
from .scan import scan_directory

PROG = "qmlbench-notifier"


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise usage_error(message)


def usage_text(prog: str = PROG) -> str:
    return (
        f"Usage: {prog} <directory> <recipient e-mail> [options]\n\n"
        "Parses .json files in the given directory for qmlbench output and compares the\n"
        "most recent result of every benchmark to the previous one. If the results\n"
        "differ significantly, a mail is sent to the given address.\n\n"
        "Options:\n"
        f"   -s <smtp-server>    Default: {DEFAULT_SMTP_SERVER}\n"
        f"   -f <sender e-mail>  Default: {DEFAULT_SENDER}\n"
        f"   -e <error margin>   Default: {DEFAULT_ERROR_MARGIN}\n"
        "   -b <branch>         Qt branch being tested\n"
        "   --close-parens      Close the (was: ...) annotations in the report\n"
        "   --log-json          Emit diagnostics as JSON lines\n"
        "   --quiet             Only emit warnings and errors\n"
        "   --verbose           Also emit debug diagnostics\n"
        "   -h                  Show this message\n"
    )


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(prog=PROG, add_help=False, allow_abbrev=False)
    p.add_argument("directory", nargs="?")
    p.add_argument("recipient", nargs="?")
    p.add_argument("-s", "--smtp-server", dest="smtp_server")
    p.add_argument("-f", "--from", dest="sender")
    p.add_argument("-e", "--error-margin", dest="error_margin")
    p.add_argument("-b", "--branch")
    p.add_argument("-h", "--help", action="store_true")
    p.add_argument("--close-parens", action="store_true")
    p.add_argument("--log-json", action="store_true")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true")
    vg.add_argument("--quiet", action="store_true")
    return p


def parse_config(argv: list[str] | None = None) -> NotifierConfig:
    ns = build_parser().parse_intermixed_args(argv)
    if ns.help:
        raise ScriptError("help requested", ERR_USAGE, "help")
    if not ns.directory or not ns.recipient:
        raise usage_error("missing <directory> or <recipient e-mail>")
    return NotifierConfig.from_args(
        ns.directory,
        ns.recipient,
        smtp_server=ns.smtp_server,
        sender=ns.sender,
        error_margin=ns.error_margin,
        branch=ns.branch,
        close_parens=ns.close_parens,
        log_json=ns.log_json,
        quiet=ns.quiet,
        verbose=ns.verbose,
    )


def run(config: NotifierConfig) -> int:
    log_event(
        config,
        "info",
        "cli",
        "start",
        directory=config.directory,
        margin=config.error_margin,
        branch=config.branch or "-",
    )
    if not Path(config.directory).is_dir():
        log_event(config, "warning", "scan", "missing-directory", directory=config.directory)
    elif not os.access(config.directory, os.R_OK | os.X_OK):
        log_event(config, "warning", "scan", "unreadable-directory", directory=config.directory)
    benchmarks = collect(config, scan_directory(config.directory))
    findings = find_discrepancies(benchmarks, config.error_margin)
    log_event(
        config,
        "info",
        "compare",
        "done",
        benchmarks=len(benchmarks),
        paired=sum(1 for pair in benchmarks.values() if pair.complete),
        flagged=len(findings),
    )

    body = format_findings(findings, config.close_parens)
    if not body:
        print("Nothing to report", flush=True)
        return OK

    print(f"Reporting to {config.recipient}", flush=True)
    try:
        send_report(config, compose_message(config.directory, body))
    except ScriptError as exc:
        log_event(config, "error", "dispatch", "mail-helper-failed", reason=str(exc))
        print(f"{config.mail_program} failed", file=sys.stderr)
        return exc.code
    return OK


def main(argv: list[str] | None = None) -> int:
    try:
        config = parse_config(argv)
    except ScriptError as exc:
        if not exc.is_help_request:
            print(f"error: {exc}", file=sys.stderr)
        if exc.wants_usage:
            sys.stderr.write(usage_text())
        return exc.code
    return run(config)


if __name__ == "__main__":
    raise SystemExit(main())
