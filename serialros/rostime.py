"""Points in time stored as unsigned 32-bit seconds and nanoseconds."""

from __future__ import annotations

import math
from dataclasses import dataclass

from serialros.duration import NSEC_PER_SEC, Duration

_UINT32_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - 0x1_0000_0000 if value & 0x8000_0000 else value


def normalize_sec_nsec(sec: int, nsec: int) -> tuple[int, int]:
    """Carry whole seconds from ``nsec`` into ``sec``, wrapping at 32 bits."""
    nsec &= _UINT32_MASK
    return (sec + nsec // NSEC_PER_SEC) & _UINT32_MASK, nsec % NSEC_PER_SEC


@dataclass(frozen=True)
class Time:
    """A point in time; always kept normalized."""

    sec: int = 0
    nsec: int = 0

    def __post_init__(self) -> None:
        sec, nsec = normalize_sec_nsec(self.sec & _UINT32_MASK, self.nsec)
        object.__setattr__(self, "sec", sec)
        object.__setattr__(self, "nsec", nsec)

    def to_sec(self) -> float:
        """The time in seconds."""
        return float(self.sec) + 1e-9 * float(self.nsec)

    @classmethod
    def from_sec(cls, t: float) -> Time:
        """Build a time from a non-negative number of seconds."""
        if t < 0:
            raise ValueError(f"time cannot be negative: {t}")
        sec = math.floor(t)
        nsec = math.floor((t - sec) * 1e9 + 0.5)
        return cls(sec, nsec)

    def to_nsec(self) -> int:
        """The time in nanoseconds, truncated to 32 bits."""
        return (self.sec * NSEC_PER_SEC + self.nsec) & _UINT32_MASK

    @classmethod
    def from_nsec(cls, t: int) -> Time:
        """Build a time from a signed 32-bit nanosecond count."""
        t = _to_int32(t)
        whole, rest = divmod(abs(t), NSEC_PER_SEC)
        if t < 0:
            whole, rest = -whole, -rest
        return cls(whole & _UINT32_MASK, rest & _UINT32_MASK)

    def __add__(self, other: object) -> Time:
        if not isinstance(other, Duration):
            return NotImplemented
        return Time(
            (self.sec - 1 + other.sec) & _UINT32_MASK,
            (self.nsec + NSEC_PER_SEC + other.nsec) & _UINT32_MASK,
        )

    __radd__ = __add__

    def __sub__(self, other: object) -> Time | Duration:
        if isinstance(other, Time):
            # Wrap-around counts as time continuing: (0, 0) - (0xFFFFFFFF, 0) is one second.
            return Duration(self.sec - other.sec, self.nsec - other.nsec)
        if isinstance(other, Duration):
            return Time(
                (self.sec - 1 - other.sec) & _UINT32_MASK,
                (self.nsec + NSEC_PER_SEC - other.nsec) & _UINT32_MASK,
            )
        return NotImplemented