from __future__ import annotations

import time
from typing import Any, Dict, List, Mapping, Optional, Protocol, Union

import httpx

from dispatcher.dispatcher import Dispatcher
from dispatcher.errors import ExhaustedError, MockHttpError, RoutingError, SimulatedFailureError
from dispatcher.sequence import ResponseSequence
from mock_runtime.audit import AuditLogger
from mock_runtime.config import Settings, settings as default_settings
from mock_runtime.metrics import MetricsCollector, metrics as default_metrics

_OUTCOMES = {
    RoutingError: "routing_error",
    ExhaustedError: "exhausted",
    SimulatedFailureError: "simulated_failure",
}


class HttpClient(Protocol):
    def do(self, request: httpx.Request) -> Any:
        ...


class MockHttpClient:
    """
    Deterministic drop-in for an HTTP client. Never calls the internet.

    Responses are picked per request method from the configured sequences;
    failures are raised as the dispatcher raised them.
    """

    def __init__(
        self,
        config: Union[Dispatcher, Mapping[str, ResponseSequence], None],
        *,
        thread_safe: bool = False,
        audit: Optional[AuditLogger] = None,
        metrics: Optional[MetricsCollector] = default_metrics,
    ):
        if isinstance(config, Dispatcher):
            self.dispatcher = config
        else:
            self.dispatcher = Dispatcher(config, thread_safe=thread_safe)
        self.audit = audit
        self.metrics = metrics
        self._captured: List[Any] = []

    @classmethod
    def from_settings(cls, settings: Settings = default_settings) -> "MockHttpClient":
        from scenario.loader import load_config

        audit = AuditLogger(settings.audit_log_path) if settings.audit_log_path else None
        return cls(
            load_config(settings.scenario_path),
            thread_safe=settings.thread_safe,
            audit=audit,
            metrics=default_metrics if settings.metrics_enabled else None,
        )

    @property
    def captured_requests(self) -> List[Any]:
        return list(self._captured)

    def do(self, request: Union[httpx.Request, str, Any]) -> Any:
        method = request if isinstance(request, str) else request.method
        self._captured.append(request)

        t0 = time.perf_counter()
        try:
            response = self.dispatcher.dispatch(method)
        except MockHttpError as exc:
            self._observe(method, request, _OUTCOMES.get(type(exc), "error"), t0, error=exc)
            raise
        self._observe(method, request, "ok", t0, response=response)
        return response

    def request(self, method: str, url: str, **kwargs: Any) -> Any:
        return self.do(httpx.Request(method, url, **kwargs))

    def get(self, url: str, **kwargs: Any) -> Any:
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> Any:
        return self.request("POST", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> Any:
        return self.request("PUT", url, **kwargs)

    def patch(self, url: str, **kwargs: Any) -> Any:
        return self.request("PATCH", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> Any:
        return self.request("DELETE", url, **kwargs)

    def head(self, url: str, **kwargs: Any) -> Any:
        return self.request("HEAD", url, **kwargs)

    def options(self, url: str, **kwargs: Any) -> Any:
        return self.request("OPTIONS", url, **kwargs)

    def transport(self) -> "httpx.BaseTransport":
        from transports.transport import MockTransport

        return MockTransport(self)

    def httpx_client(self, **kwargs: Any) -> httpx.Client:
        return httpx.Client(transport=self.transport(), **kwargs)

    def _observe(
        self,
        method: str,
        request: Any,
        outcome: str,
        t0: float,
        response: Any = None,
        error: Optional[MockHttpError] = None,
    ) -> None:
        if self.metrics is not None:
            self.metrics.record(method, outcome)
        if self.audit is None:
            return

        t1 = time.perf_counter()
        seq = self.dispatcher.get(method)
        event: Dict[str, Any] = {
            "method": method,
            "url": str(getattr(request, "url", "")) or None,
            "outcome": outcome,
            "code": error.code if error else None,
            "call_count": seq.call_count if seq else None,
            "max_calls": seq.max_calls if seq else None,
            "status_code": getattr(response, "status_code", None),
            "latency_ms": (t1 - t0) * 1000.0,
        }
        self.audit.emit(event)
