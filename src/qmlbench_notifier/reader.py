"""Parse one qmlbench result file into a Report."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from .config import NotifierConfig
from .formatting import format_number
from .logging import log_event
from .schema import ENTRY_SCHEMA, REPORT_SCHEMA, first_error

RESERVED_KEYS = frozenset({"id", "windowSize", "opengl", "os"})


@dataclass(frozen=True)
class ReportEntry:
    average: float = 0.0
    results: tuple[str, ...] = ()


@dataclass(frozen=True)
class Report:
    path: Path
    timestamp: datetime
    base_commit: str = ""
    declarative_commit: str = ""
    window_size: str = ""
    renderer: str = ""
    vendor: str = ""
    driver_version: str = ""
    platform_plugin: str = ""
    product_name: str = ""
    entries: dict[str, ReportEntry] = field(default_factory=dict)


def _text(mapping: dict[str, Any], key: str) -> str:
    value = mapping.get(key)
    return value if isinstance(value, str) else ""


def _mapping(mapping: dict[str, Any], key: str) -> dict[str, Any]:
    value = mapping.get(key)
    return value if isinstance(value, dict) else {}


def split_commits(config: NotifierConfig, path: Path, raw_id: str) -> tuple[str, str]:
    commits = raw_id.split(",")
    if len(commits) != 2:
        log_event(config, "warning", "reader", "malformed-id", path=str(path), id=raw_id)
        return "", ""
    return commits[0], commits[1]


def is_benchmark_key(key: str) -> bool:
    """Only keys naming an existing file on this host count as benchmarks."""
    if not key or key in RESERVED_KEYS:
        return False
    try:
        return Path(key).exists()
    except OSError:
        return False


def _entry(config: NotifierConfig, path: Path, name: str, value: Any) -> ReportEntry | None:
    problem = first_error(ENTRY_SCHEMA, value)
    if problem is not None:
        log_event(config, "warning", "reader", "skip-entry", path=str(path), benchmark=name, reason=problem)
        return None
    try:
        average = float(value.get("average", 0.0))
        results = tuple(format_number(float(item)) for item in value.get("results", []))
    except (OverflowError, ValueError) as exc:
        reason = f"unrepresentable number: {exc}"
        log_event(config, "warning", "reader", "skip-entry", path=str(path), benchmark=name, reason=reason)
        return None
    return ReportEntry(average=average, results=results)


def read_report(config: NotifierConfig, path: Path, modified: datetime) -> Report | None:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        reason = f"cannot open file for reading: {exc.strerror or exc}"
        log_event(config, "warning", "reader", "skip-file", path=str(path), reason=reason)
        return None
    try:
        root = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        log_event(config, "warning", "reader", "skip-file", path=str(path), reason=f"malformed json: {exc}")
        return None
    problem = first_error(REPORT_SCHEMA, root)
    if problem is not None:
        log_event(config, "warning", "reader", "skip-file", path=str(path), reason=problem)
        return None

    base_commit, declarative_commit = split_commits(config, path, _text(root, "id"))
    opengl = _mapping(root, "opengl")
    host_os = _mapping(root, "os")
    entries: dict[str, ReportEntry] = {}
    for key, value in root.items():
        if not is_benchmark_key(key):
            continue
        entry = _entry(config, path, key, value)
        if entry is not None:
            entries[key] = entry
    return Report(
        path=path,
        timestamp=modified,
        base_commit=base_commit,
        declarative_commit=declarative_commit,
        window_size=_text(root, "windowSize"),
        renderer=_text(opengl, "renderer"),
        vendor=_text(opengl, "vendor"),
        driver_version=_text(opengl, "version"),
        platform_plugin=_text(host_os, "platformPlugin"),
        product_name=_text(host_os, "prettyProductName"),
        entries=entries,
    )
