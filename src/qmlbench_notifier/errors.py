from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_MAIL, ERR_USAGE


@dataclass
class ScriptError(Exception):
    """Fatal notifier failure; ``code`` becomes the process exit status."""

    message: str
    code: int
    kind: str = "usage"

    def __str__(self) -> str:
        return self.message

    @property
    def wants_usage(self) -> bool:
        return self.code == ERR_USAGE

    @property
    def is_help_request(self) -> bool:
        return self.kind == "help"


def usage_error(message: str) -> ScriptError:
    return ScriptError(message, ERR_USAGE, "usage")


def mail_error(message: str) -> ScriptError:
    return ScriptError(message, ERR_MAIL, "mail_helper")
