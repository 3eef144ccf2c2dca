from __future__ import annotations

from typing import Optional


class MockHttpError(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class ConfigError(MockHttpError, ValueError):
    """Raised while building a dispatcher; no dispatcher exists afterwards."""

    def __init__(self, code: str, message: str, method: Optional[str] = None):
        super().__init__(code, message)
        self.method = method


class RoutingError(MockHttpError):
    def __init__(self, method: str):
        super().__init__("NO_CONFIG_FOR_METHOD", f"no configuration for method {method!r}")
        self.method = method


class ExhaustedError(MockHttpError):
    def __init__(self, method: Optional[str], call_count: int, max_calls: int):
        super().__init__(
            "MAX_CALLS_EXHAUSTED",
            f"max calls exhausted for method {method!r} ({call_count}/{max_calls})",
        )
        self.method = method
        self.call_count = call_count
        self.max_calls = max_calls


class SimulatedFailureError(MockHttpError):
    def __init__(self, method: Optional[str], index: int):
        super().__init__(
            "SIMULATED_FAILURE",
            f"simulated failure for method {method!r} at response slot {index}",
        )
        self.method = method
        self.index = index
