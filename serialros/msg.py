"""Base message type and the 64-bit float codec for 32-bit targets."""

from __future__ import annotations

import abc
import math
import struct
from typing import ClassVar


class Msg(abc.ABC):
    """A message that can be written to and read from the wire."""

    msg_type: ClassVar[str] = ""
    md5sum: ClassVar[str] = ""

    @abc.abstractmethod
    def serialize(self) -> bytes:
        """Return the wire encoding of the message."""

    @abc.abstractmethod
    def deserialize(self, data: bytes) -> int:
        """Fill the message from ``data`` and return the number of bytes read."""


def _to_float32(value: float) -> tuple[int, float]:
    try:
        packed = struct.pack("<f", value)
    except OverflowError:
        packed = struct.pack("<f", math.copysign(math.inf, value))
    return int.from_bytes(packed, "little"), struct.unpack("<f", packed)[0]


def serialize_avr_float64(value: float) -> bytes:
    """Encode ``value``, rounded to 32 bits, as an 8-byte little-endian double.

    The sign of negative zero and of NaN is not kept.
    """
    bits, f32 = _to_float32(float(value))
    exp = (bits >> 23) & 0xFF
    mantissa = bits & 0x7FFFFF

    if exp == 0xFF:
        exp = 2047
    elif exp != 0:
        exp += 1023 - 127
    elif mantissa:
        # A denormal float becomes a normal double.
        shift = 24 - mantissa.bit_length()
        mantissa = (mantissa << shift) & 0x7FFFFF
        exp = 1023 - 127 + 1 - shift

    out = bytearray(8)
    out[3] = (mantissa << 5) & 0xFF
    out[4] = (mantissa >> 3) & 0xFF
    out[5] = (mantissa >> 11) & 0xFF
    out[6] = ((exp << 4) & 0xF0) | ((mantissa >> 19) & 0x0F)
    out[7] = (exp >> 4) & 0x7F
    if f32 < 0:
        out[7] |= 0x80
    return bytes(out)


def deserialize_avr_float64(data: bytes) -> float:
    """Decode an 8-byte little-endian double into a 32-bit float value."""
    raw = bytes(data[:8])
    if len(raw) < 8:
        raise ValueError(f"need 8 bytes for a float64, got {len(raw)}")

    mantissa = (raw[3] >> 4) & 0x0F
    mantissa |= raw[4] << 4
    mantissa |= raw[5] << 12
    mantissa |= (raw[6] & 0x0F) << 20
    exp = (raw[6] & 0xF0) >> 4
    exp |= (raw[7] & 0x7F) << 4

    if exp == 2047:
        exp = 255
    elif exp - 1023 > 127:
        exp = 255
        mantissa = 0
    elif exp - 1023 >= -126:
        exp -= 1023 - 127
    elif exp - 1023 < -150:
        exp = 0
    else:
        mantissa |= 0x1000000
        mantissa >>= (-126 + 1023) - exp
        exp = 0

    if mantissa != 0xFFFFFF:
        mantissa += 1
    mantissa >>= 1

    bits = mantissa | (exp << 23) | ((raw[7] & 0x80) << 24)
    return struct.unpack("<f", (bits & 0xFFFFFFFF).to_bytes(4, "little"))[0]