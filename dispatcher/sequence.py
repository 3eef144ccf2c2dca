from __future__ import annotations

import threading
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Any, List, Optional

from dispatcher.errors import ConfigError, ExhaustedError, SimulatedFailureError
from dispatcher.slots import Present, to_slot


@dataclass
class ResponseSequence:
    """
    Canned responses for one HTTP method plus its call budget.

    Entries of ``responses`` may be response objects, ``Present``/``SimulatedFailure``
    slots, or ``None`` (treated as a simulated failure). The list itself is never
    reordered or rewritten, so callers can compare dispatched responses against it.
    """

    responses: Optional[List[Any]] = None
    max_calls: int = 0
    call_count: int = 0
    thread_safe: bool = False
    method: Optional[str] = None
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def validate(self) -> None:
        if not self.responses:
            raise ConfigError("EMPTY_RESPONSE_LIST", f"empty response list for method {self.method!r}", self.method)
        if self.max_calls < 0:
            raise ConfigError(
                "NEGATIVE_MAX_CALLS",
                f"negative max calls ({self.max_calls}) for method {self.method!r}",
                self.method,
            )
        if self.max_calls == 0:
            self.max_calls = len(self.responses)

    def next(self) -> Any:
        guard = self._lock if self.thread_safe else nullcontext()
        with guard:
            if self.call_count >= self.max_calls:
                raise ExhaustedError(self.method, self.call_count, self.max_calls)
            index = self.call_count % len(self.responses)
            self.call_count += 1

        slot = to_slot(self.responses[index])
        if isinstance(slot, Present):
            return slot.value
        raise SimulatedFailureError(self.method, index)

    @property
    def remaining(self) -> int:
        return max(self.max_calls - self.call_count, 0)

    @property
    def exhausted(self) -> bool:
        return self.call_count >= self.max_calls
