from __future__ import annotations

from .config import NotifierConfig
from .errors import mail_error
from .logging import log_event
from .process import CommandResult, run_command

MAIL_SUBJECT = "[Lancelot QmlBench] Discrepancies in benchmarks"


def mail_command(config: NotifierConfig, message: str) -> list[str]:
    return [
        config.mail_program,
        "-s",
        config.smtp_server,
        "-f",
        config.sender,
        "-u",
        MAIL_SUBJECT,
        "-t",
        config.recipient,
        "-m",
        message,
    ]


def send_report(config: NotifierConfig, message: str) -> CommandResult:
    """Hand ``message`` to the mail helper; its exit status is logged but not enforced."""
    cmd = mail_command(config, message)
    try:
        result = run_command(cmd)
    except (OSError, ValueError) as exc:
        raise mail_error(f"{config.mail_program} failed: {exc}") from exc
    log_event(
        config,
        "info",
        "dispatch",
        "mail-helper-finished",
        program=config.mail_program,
        code=result.code,
        duration_ms=result.duration_ms,
    )
    if result.combined_output:
        log_event(config, "debug", "dispatch", "mail-helper-output", output=result.combined_output)
    return result
