"""High-resolution cycle counting and scoped timing."""

from __future__ import annotations

import struct
import time
from typing import ClassVar


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class PlatformTime:
    """Process-wide access to the high-resolution performance counter."""

    _seconds_per_cycle: ClassVar[float] = 0.0
    _initialized: ClassVar[bool] = False

    @classmethod
    def init_timing(cls) -> None:
        """Compute the seconds-per-cycle factor once."""
        if cls._initialized:
            return
        cls._initialized = True
        frequency = float(cls.frequency())
        if frequency <= 0.0:
            frequency = 1.0
        cls._seconds_per_cycle = 1.0 / frequency

    @classmethod
    def seconds_per_cycle(cls) -> float:
        """Length of one counter cycle in seconds, at single precision."""
        if not cls._initialized:
            cls.init_timing()
        return _to_float32(cls._seconds_per_cycle)

    @classmethod
    def frequency(cls) -> int:
        """Counter ticks per second."""
        return 1_000_000_000

    @classmethod
    def to_milliseconds(cls, cycle_diff: int) -> float:
        """Convert a cycle count into milliseconds."""
        return float(cycle_diff) * cls.seconds_per_cycle() * 1000.0

    @classmethod
    def cycles64(cls) -> int:
        """Current value of the counter."""
        return time.perf_counter_ns()


class ScopeCycleCounter:
    """Counts cycles from construction until finished or the block exits."""

    def __init__(self, stat_id: object = None) -> None:
        self.stat_id = stat_id
        self.start_cycles = PlatformTime.cycles64()
        self.cycles: int | None = None

    def finish(self) -> int:
        """Cycles elapsed since the counter started."""
        return PlatformTime.cycles64() - self.start_cycles

    def __enter__(self) -> ScopeCycleCounter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cycles = self.finish()

    @property
    def milliseconds(self) -> float:
        """Elapsed time of the finished block in milliseconds."""
        if self.cycles is None:
            raise RuntimeError("counter has not finished")
        return PlatformTime.to_milliseconds(self.cycles)