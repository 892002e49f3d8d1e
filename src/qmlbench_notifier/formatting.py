"""Plain-text rendering of flagged benchmark pairs."""

from __future__ import annotations

import math
from datetime import datetime
from pathlib import Path

from .model import BenchmarkSample, Finding, Verdict

HEADINGS = {
    Verdict.IMPROVEMENT: "____IMPROVEMENT DETECTED____",
    Verdict.REGRESSION: "____REGRESSION DETECTED_____",
}

ENVIRONMENT_FIELDS = (
    ("Window size", "window_size"),
    ("Renderer", "renderer"),
    ("Vendor", "vendor"),
    ("Driver version", "driver_version"),
    ("Platform plugin", "platform_plugin"),
    ("OS", "product_name"),
)

MAIL_SIGNOFF = "\n\nHave a nice day!"


def format_number(value: float) -> str:
    """Shortest round-trip decimal; integral values drop the fractional part."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_timestamp(value: datetime | None) -> str:
    if value is None:
        return ""
    return value.replace(microsecond=0).isoformat()


def format_change(delta: float) -> str:
    return f"{delta * 100.0:+.2f}"


def _was_suffix(current: str, previous: str, close_parens: bool) -> str:
    if current == previous:
        return ""
    return f"(was: {previous})" if close_parens else f"(was: {previous}"


def _data_point(sample: BenchmarkSample) -> str:
    return (
        f"qtbase={sample.base_commit}, qtdeclarative={sample.declarative_commit} "
        f"({format_timestamp(sample.timestamp)})"
    )


def format_finding(finding: Finding, close_parens: bool = False) -> str:
    cur = finding.current
    prev = finding.previous
    lines = [
        f"\n\n{HEADINGS[finding.verdict]}\n",
        f"    Name: {finding.name}",
        f"        Previous data point: {_data_point(prev)}\n",
        f"        Current data point : {_data_point(cur)}\n",
        f"        Average: {format_number(cur.average)} (was: {format_number(prev.average)}, "
        f"change: {format_change(finding.delta)}%)\n",
        f"        Results: {','.join(cur.results)} (was: {','.join(prev.results)})\n",
    ]
    for label, attr in ENVIRONMENT_FIELDS:
        now = getattr(cur, attr)
        suffix = _was_suffix(now, getattr(prev, attr), close_parens)
        lines.append(f"        {label}: {now} {suffix}\n")
    return "".join(lines)


def format_findings(findings: list[Finding], close_parens: bool = False) -> str:
    return "".join(format_finding(finding, close_parens) for finding in findings)


def directory_label(directory: str | Path) -> str:
    # Final component up to its first dot; trailing separators are ignored by Path.
    return Path(directory).name.split(".", 1)[0]


def compose_message(directory: str | Path, body: str) -> str:
    return f"Discrepancies detected when running benchmarks today in {directory_label(directory)}{body}{MAIL_SIGNOFF}"
