from __future__ import annotations

import math
import os
from dataclasses import dataclass

from .errors import usage_error

DEFAULT_SMTP_SERVER = "localhost"
DEFAULT_SENDER = "nobody@nowhere"
DEFAULT_ERROR_MARGIN = 0.01
DEFAULT_MAIL_PROGRAM = "sendemail"


def parse_margin(raw: str) -> float:
    """Parse an error margin the way the C locale would: dot decimals, no grouping."""
    text = raw.strip()
    try:
        value = float(text)
    except ValueError as exc:
        raise usage_error(f"invalid error margin: {raw!r}") from exc
    if "_" in text or not math.isfinite(value) or value < 0.0:
        raise usage_error(f"invalid error margin: {raw!r}")
    return value


@dataclass(frozen=True)
class NotifierConfig:
    directory: str
    recipient: str
    smtp_server: str = DEFAULT_SMTP_SERVER
    sender: str = DEFAULT_SENDER
    error_margin: float = DEFAULT_ERROR_MARGIN
    branch: str = ""
    close_parens: bool = False
    mail_program: str = DEFAULT_MAIL_PROGRAM
    log_json: bool = False
    quiet: bool = False
    verbose: bool = False

    @classmethod
    def from_args(
        cls,
        directory: str,
        recipient: str,
        smtp_server: str | None = None,
        sender: str | None = None,
        error_margin: str | None = None,
        branch: str | None = None,
        close_parens: bool = False,
        log_json: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> "NotifierConfig":
        raw_margin = error_margin if error_margin is not None else os.environ.get("QMLBENCH_ERROR_MARGIN")
        log_format = os.environ.get("QMLBENCH_LOG_FORMAT", "text").strip().lower()
        if smtp_server is None:
            smtp_server = os.environ.get("QMLBENCH_SMTP_SERVER", DEFAULT_SMTP_SERVER)
        if sender is None:
            sender = os.environ.get("QMLBENCH_SENDER", DEFAULT_SENDER)
        return cls(
            directory=directory,
            recipient=recipient,
            smtp_server=smtp_server,
            sender=sender,
            error_margin=parse_margin(raw_margin) if raw_margin is not None else DEFAULT_ERROR_MARGIN,
            branch=branch or "",
            close_parens=close_parens,
            mail_program=os.environ.get("QMLBENCH_MAIL_PROGRAM", DEFAULT_MAIL_PROGRAM),
            log_json=log_json or log_format == "json",
            quiet=quiet,
            verbose=verbose,
        )
