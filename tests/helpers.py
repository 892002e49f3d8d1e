from __future__ import annotations

import json
import os
from datetime import datetime
from pathlib import Path

from qmlbench_notifier.model import BenchmarkSample
from qmlbench_notifier.reader import Report, ReportEntry

BASE_TIME = datetime(2026, 10, 18, 9, 30, 0).timestamp()


def make_benchmark(root: Path, name: str) -> str:
    """Create a scene file under ``root`` and return its cwd-relative benchmark key."""
    path = root / "benchmarks" / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("import QtQuick 2.0\nItem {}\n", encoding="utf-8")
    return f"benchmarks/{name}"


def report_payload(
    benchmarks: dict[str, object],
    run_id: str = "abc123,def456",
    window_size: str = "1280x800",
    renderer: str = "Mesa Intel(R) UHD Graphics 620",
    vendor: str = "Intel",
    version: str = "4.6 (Core Profile) Mesa 23.2.1",
    platform_plugin: str = "xcb",
    product: str = "Ubuntu 24.04 LTS",
) -> dict[str, object]:
    payload: dict[str, object] = {
        "id": run_id,
        "windowSize": window_size,
        "opengl": {"renderer": renderer, "vendor": vendor, "version": version},
        "os": {"platformPlugin": platform_plugin, "prettyProductName": product},
    }
    payload.update(benchmarks)
    return payload


def write_report(directory: Path, name: str, payload: object, age_seconds: float = 0.0) -> Path:
    """Write ``payload`` as JSON; larger ``age_seconds`` means an older modification time."""
    path = directory / name
    text = payload if isinstance(payload, str) else json.dumps(payload)
    path.write_text(text, encoding="utf-8")
    stamp = BASE_TIME - age_seconds
    os.utime(path, (stamp, stamp))
    return path


def sample(average: float, when: datetime | None = None, **fields: object) -> BenchmarkSample:
    return BenchmarkSample(timestamp=when or datetime(2026, 10, 18, 9, 30, 0), average=average, **fields)


def report(timestamp: datetime, entries: dict[str, float], **fields: object) -> Report:
    return Report(
        path=Path("/results") / f"{timestamp.isoformat()}.json",
        timestamp=timestamp,
        entries={name: ReportEntry(average=avg, results=(str(avg),)) for name, avg in entries.items()},
        **fields,
    )
