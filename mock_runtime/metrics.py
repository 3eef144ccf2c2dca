from __future__ import annotations

import threading
from collections import Counter
from typing import Tuple


class MetricsCollector:
    """Small in-memory Prometheus-style counters for mock dispatches."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._requests: Counter[str] = Counter()
        self._outcomes: Counter[Tuple[str, str]] = Counter()

    def record(self, method: str, outcome: str) -> None:
        with self._lock:
            self._requests[method] += 1
            self._outcomes[(method, outcome)] += 1

    def count(self, method: str, outcome: str | None = None) -> int:
        with self._lock:
            if outcome is None:
                return self._requests[method]
            return self._outcomes[(method, outcome)]

    def reset(self) -> None:
        with self._lock:
            self._requests.clear()
            self._outcomes.clear()

    def render_prometheus(self) -> str:
        with self._lock:
            requests = sorted(self._requests.items())
            outcomes = sorted(self._outcomes.items())

        lines = []
        lines.append("# TYPE mock_http_requests_total counter")
        for method, value in requests:
            lines.append(f'mock_http_requests_total{{method="{method}"}} {value}')

        lines.append("# TYPE mock_http_dispatch_total counter")
        for (method, outcome), value in outcomes:
            lines.append(
                f'mock_http_dispatch_total{{method="{method}",outcome="{outcome}"}} {value}'
            )

        return "\n".join(lines) + "\n"


metrics = MetricsCollector()
