from __future__ import annotations

from mock_runtime.metrics import MetricsCollector


def test_metrics_render_prometheus() -> None:
    collector = MetricsCollector()
    collector.record("GET", "ok")
    collector.record("GET", "exhausted")
    collector.record("POST", "simulated_failure")

    text = collector.render_prometheus()
    assert 'mock_http_requests_total{method="GET"} 2' in text
    assert 'mock_http_dispatch_total{method="GET",outcome="exhausted"} 1' in text
    assert 'outcome="simulated_failure"' in text


def test_metrics_reset() -> None:
    collector = MetricsCollector()
    collector.record("GET", "ok")
    collector.reset()
    assert collector.count("GET") == 0
    assert "method=" not in collector.render_prometheus()
