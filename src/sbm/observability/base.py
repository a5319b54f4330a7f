# src/sbm/observability/base.py

from collections import defaultdict
from typing import Protocol

LabelKey = tuple[tuple[str, str], ...]


class MetricsHook(Protocol):
    """Sink for parser and renderer metrics.

    Implementations forward to whatever backend the caller uses.
    Names come from `sbm.observability.names`.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


class InMemoryMetricsHook:
    """Keeps every recorded value in process memory.

    Handy for scripts and tests that want to inspect what a parse did
    without wiring a real backend. Not thread-safe.
    """

    def __init__(self) -> None:
        self.latencies: dict[str, list[float]] = defaultdict(list)
        self.counters: dict[tuple[str, LabelKey], int] = defaultdict(int)
        self.gauges: dict[tuple[str, LabelKey], float] = {}

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies[name].append(value_ms)

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters[(name, _label_key(labels))] += value

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges[(name, _label_key(labels))] = value

    def count(self, name: str, labels: dict[str, str] | None = None) -> int:
        return self.counters.get((name, _label_key(labels)), 0)


def _label_key(labels: dict[str, str] | None) -> LabelKey:
    return tuple(sorted((labels or {}).items()))
