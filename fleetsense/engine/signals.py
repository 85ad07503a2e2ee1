"""
Signal sources — stand-ins for live telemetry the scoring needs.

Driver hours on duty, route detour efficiency and the simulated
dashboard/provider readings are all drawn from a signal source handed to
the engine, never from the random module directly. RandomSignals samples
from a seeded numpy Generator; FixedSignals replays fixed values so every
score can be pinned in a test.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Protocol, Sequence, TypeVar

import numpy as np

T = TypeVar("T")

# Wall-clock capability: anything that returns "now".
Clock = Callable[[], datetime]

DRIVER_HOURS_RANGE      = (4, 12)
DETOUR_EFFICIENCY_RANGE = (70, 95)


class SignalSource(Protocol):
    """What the engine and the simulated providers draw from."""

    def integer(self, low: int, high: int) -> int: ...

    def choice(self, options: Sequence[T]) -> T: ...

    def driver_hours(self) -> int: ...

    def detour_efficiency(self) -> int: ...


class RandomSignals:
    """Samples every signal uniformly; integer ranges are inclusive."""

    def __init__(
        self,
        seed: Optional[int] = None,
        rng:  Optional[np.random.Generator] = None,
    ):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def integer(self, low: int, high: int) -> int:
        return int(self.rng.integers(low, high + 1))

    def choice(self, options: Sequence[T]) -> T:
        return options[int(self.rng.integers(len(options)))]

    def driver_hours(self) -> int:
        return self.integer(*DRIVER_HOURS_RANGE)

    def detour_efficiency(self) -> int:
        return self.integer(*DETOUR_EFFICIENCY_RANGE)


@dataclass
class FixedSignals:
    """
    Deterministic signal source.

    integer() answers with the low end of the requested range unless an
    explicit value is set, and choice() always picks the first option.
    """
    hours_on_duty:  int = 6
    detour_score:   int = 90
    integer_value:  Optional[int] = None

    def integer(self, low: int, high: int) -> int:
        if self.integer_value is None:
            return low
        return max(low, min(high, self.integer_value))

    def choice(self, options: Sequence[T]) -> T:
        return options[0]

    def driver_hours(self) -> int:
        return self.hours_on_duty

    def detour_efficiency(self) -> int:
        return self.detour_score
