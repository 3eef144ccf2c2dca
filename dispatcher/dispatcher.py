from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from dispatcher.errors import ConfigError, RoutingError
from dispatcher.sequence import ResponseSequence

ResponseConfigMap = Dict[str, ResponseSequence]


class Dispatcher:
    """
    Routes simulated requests to per-method response sequences.

    The sequences passed in are taken over as live state: validation normalizes
    ``max_calls`` on them and every dispatch advances their ``call_count``.
    """

    def __init__(self, sequences: Optional[Mapping[str, ResponseSequence]], thread_safe: bool = False):
        if sequences is None:
            raise ConfigError("CONFIG_ABSENT", "response configuration is absent")
        if len(sequences) == 0:
            raise ConfigError("CONFIG_EMPTY", "response configuration has no methods")

        for method, seq in sequences.items():
            if seq is None:
                raise ConfigError("EMPTY_RESPONSE_LIST", f"empty response list for method {method!r}", method)
            seq.method = method
            seq.validate()
            if thread_safe:
                seq.thread_safe = True

        self._sequences = sequences

    @property
    def methods(self) -> List[str]:
        return list(self._sequences)

    def get(self, method: str) -> Optional[ResponseSequence]:
        return self._sequences.get(method)

    def sequence(self, method: str) -> ResponseSequence:
        seq = self.get(method)
        if seq is None:
            raise RoutingError(method)
        return seq

    def dispatch(self, method: str) -> Any:
        return self.sequence(method).next()

    def effective_config(self) -> Dict[str, Dict[str, Any]]:
        return {
            method: {
                "max_calls": seq.max_calls,
                "call_count": seq.call_count,
                "responses": list(seq.responses or []),
            }
            for method, seq in self._sequences.items()
        }
