from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Present:
    value: Any


@dataclass(frozen=True)
class SimulatedFailure:
    """Slot with no response; dispatching it models a transport error."""


SIMULATED_FAILURE = SimulatedFailure()

Slot = Union[Present, SimulatedFailure]


def to_slot(entry: Any) -> Slot:
    if isinstance(entry, (Present, SimulatedFailure)):
        return entry
    if entry is None:
        return SIMULATED_FAILURE
    return Present(entry)
