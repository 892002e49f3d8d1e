"""In-memory records shared by the reader, accumulator, comparator and formatter."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class BenchmarkSample:
    """One execution of one benchmark inside one report file.

    A sample is valid once ``timestamp`` is set; every other field defaults to
    an empty value and has no validity of its own.
    """

    timestamp: datetime | None = None
    average: float = 0.0
    results: tuple[str, ...] = ()
    base_commit: str = ""
    declarative_commit: str = ""
    renderer: str = ""
    vendor: str = ""
    driver_version: str = ""
    platform_plugin: str = ""
    product_name: str = ""
    window_size: str = ""

    @property
    def is_valid(self) -> bool:
        return self.timestamp is not None


@dataclass
class SamplePair:
    """Two slots filled first-come first-served; later offers are dropped."""

    first: BenchmarkSample = field(default_factory=BenchmarkSample)
    second: BenchmarkSample = field(default_factory=BenchmarkSample)

    @property
    def complete(self) -> bool:
        return self.first.is_valid and self.second.is_valid

    def offer(self, sample: BenchmarkSample) -> bool:
        if not self.first.is_valid:
            self.first = sample
            return True
        if not self.second.is_valid:
            self.second = sample
            return True
        return False


BenchmarkSet = dict[str, SamplePair]


class Verdict(str, Enum):
    IMPROVEMENT = "improvement"
    REGRESSION = "regression"


@dataclass(frozen=True)
class Finding:
    """A flagged pair: ``current`` is the newer sample, ``previous`` the older one."""

    name: str
    verdict: Verdict
    delta: float
    current: BenchmarkSample
    previous: BenchmarkSample
