from __future__ import annotations

from collections.abc import Iterable

from .config import NotifierConfig
from .model import BenchmarkSample, BenchmarkSet, SamplePair
from .reader import Report, read_report
from .scan import ScanEntry


def sample_from(report: Report, name: str) -> BenchmarkSample:
    entry = report.entries[name]
    return BenchmarkSample(
        timestamp=report.timestamp,
        average=entry.average,
        results=entry.results,
        base_commit=report.base_commit,
        declarative_commit=report.declarative_commit,
        renderer=report.renderer,
        vendor=report.vendor,
        driver_version=report.driver_version,
        platform_plugin=report.platform_plugin,
        product_name=report.product_name,
        window_size=report.window_size,
    )


def add_report(benchmarks: BenchmarkSet, report: Report) -> None:
    for name in report.entries:
        pair = benchmarks.setdefault(name, SamplePair())
        pair.offer(sample_from(report, name))


def collect(config: NotifierConfig, entries: Iterable[ScanEntry]) -> BenchmarkSet:
    """Fold reports, newest first, into at most two samples per benchmark."""
    benchmarks: BenchmarkSet = {}
    for entry in entries:
        report = read_report(config, entry.path, entry.modified)
        if report is not None:
            add_report(benchmarks, report)
    return benchmarks
