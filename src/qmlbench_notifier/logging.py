from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import NotifierConfig

_LEVELS = {"debug": 10, "info": 20, "warning": 30, "error": 40}


def _threshold(config: NotifierConfig) -> int:
    if config.verbose:
        return _LEVELS["debug"]
    if config.quiet:
        return _LEVELS["warning"]
    return _LEVELS["info"]


def log_event(config: NotifierConfig, level: str, component: str, action: str, **fields: object) -> None:
    if _LEVELS.get(level, _LEVELS["error"]) < _threshold(config):
        return
    payload = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "level": level,
        "component": component,
        "action": action,
        **fields,
    }
    if config.log_json:
        sys.stderr.write(json.dumps(payload, sort_keys=True) + "\n")
        return
    core = f"level={level} component={component} action={action}"
    extras = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
    sys.stderr.write((core if not extras else f"{core} {extras}") + "\n")
