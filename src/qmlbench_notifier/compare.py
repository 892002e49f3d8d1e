from __future__ import annotations

import math

from .model import BenchmarkSet, Finding, SamplePair, Verdict


def relative_change(current: float, previous: float) -> float | None:
    """``(previous - current) / current``; None when undefined."""
    if current == 0.0:
        return None
    delta = (previous - current) / current
    return delta if math.isfinite(delta) else None


def classify(delta: float, margin: float) -> Verdict | None:
    if abs(delta) < margin:
        return None
    # A higher average is worse.
    if delta < 0.0:
        return Verdict.REGRESSION
    return Verdict.IMPROVEMENT


def compare_pair(name: str, pair: SamplePair, margin: float) -> Finding | None:
    if not pair.complete:
        return None
    delta = relative_change(pair.first.average, pair.second.average)
    if delta is None:
        return None
    verdict = classify(delta, margin)
    if verdict is None:
        return None
    return Finding(name=name, verdict=verdict, delta=delta, current=pair.first, previous=pair.second)


def find_discrepancies(benchmarks: BenchmarkSet, margin: float) -> list[Finding]:
    findings = []
    for name in sorted(benchmarks):
        finding = compare_pair(name, benchmarks[name], margin)
        if finding is not None:
            findings.append(finding)
    return findings
