"""Signed time spans stored as 32-bit seconds and nanoseconds."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

NSEC_PER_SEC = 1_000_000_000


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x1_0000_0000 if value & 0x8000_0000 else value


def normalize_sec_nsec_signed(sec: int, nsec: int) -> tuple[int, int]:
    """Move whole seconds out of ``nsec`` so that 0 <= nsec <= 1e9.

    An ``nsec`` of exactly one second is left as it is.
    """
    if nsec > NSEC_PER_SEC:
        carry = (nsec - 1) // NSEC_PER_SEC
    elif nsec < 0:
        carry = -((-nsec + NSEC_PER_SEC - 1) // NSEC_PER_SEC)
    else:
        carry = 0
    return _to_int32(sec + carry), nsec - carry * NSEC_PER_SEC


@dataclass(frozen=True)
class Duration:
    """A signed span of time; always kept normalized."""

    sec: int = 0
    nsec: int = 0

    def __post_init__(self) -> None:
        sec, nsec = normalize_sec_nsec_signed(_to_int32(self.sec), _to_int32(self.nsec))
        object.__setattr__(self, "sec", sec)
        object.__setattr__(self, "nsec", nsec)

    def to_sec(self) -> float:
        """The span in seconds."""
        return float(self.sec) + 1e-9 * float(self.nsec)

    @classmethod
    def from_sec(cls, t: float) -> Duration:
        """Build a duration from a number of seconds."""
        sec = math.floor(t)
        nsec = math.floor((t - sec) * 1e9 + 0.5)
        return cls(sec, nsec)

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.sec + other.sec, self.nsec + other.nsec)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.sec - other.sec, self.nsec - other.nsec)

    def __mul__(self, scale: object) -> Duration:
        if not isinstance(scale, numbers.Real):
            return NotImplemented
        # Seconds and nanoseconds are scaled and truncated separately.
        return Duration(math.trunc(self.sec * scale), math.trunc(self.nsec * scale))

    __rmul__ = __mul__