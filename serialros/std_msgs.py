"""Standard message types: booleans, integers, colours, headers and times."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any, ClassVar

from serialros.msg import Msg
from serialros.rostime import Time


def _unpack(fmt: str, data: bytes, offset: int = 0) -> tuple[Any, ...]:
    try:
        return struct.unpack_from(fmt, data, offset)
    except struct.error as exc:
        raise ValueError(
            f"need {struct.calcsize(fmt)} bytes at offset {offset}, got {max(len(data) - offset, 0)}"
        ) from exc


def _int8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x1_0000_0000 if value & 0x8000_0000 else value


@dataclass
class Bool(Msg):
    """A single boolean, one byte on the wire."""

    msg_type: ClassVar[str] = "std_msgs/Bool"
    md5sum: ClassVar[str] = "8b94c1b53db61fb6aed406028ad6332a"

    data: bool = False

    def serialize(self) -> bytes:
        return bytes([1 if self.data else 0])

    def deserialize(self, data: bytes) -> int:
        (raw,) = _unpack("<B", data)
        self.data = bool(raw)
        return 1


@dataclass
class Byte(Msg):
    """A signed 8-bit value."""

    msg_type: ClassVar[str] = "std_msgs/Byte"
    md5sum: ClassVar[str] = "ad736a2e8818154c487bb80fe42ce43b"

    data: int = 0

    def serialize(self) -> bytes:
        return bytes([self.data & 0xFF])

    def deserialize(self, data: bytes) -> int:
        (self.data,) = _unpack("<b", data)
        return 1


@dataclass
class Char(Msg):
    """An unsigned 8-bit character code."""

    msg_type: ClassVar[str] = "std_msgs/Char"
    md5sum: ClassVar[str] = "1bf77f25acecdedba0e224b162199717"

    data: int = 0

    def serialize(self) -> bytes:
        return bytes([self.data & 0xFF])

    def deserialize(self, data: bytes) -> int:
        (self.data,) = _unpack("<B", data)
        return 1


@dataclass
class ColorRGBA(Msg):
    """A colour as four 32-bit floats."""

    msg_type: ClassVar[str] = "std_msgs/ColorRGBA"
    md5sum: ClassVar[str] = "a29a96539573343b1310c73607334b00"

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def serialize(self) -> bytes:
        return struct.pack("<4f", self.r, self.g, self.b, self.a)

    def deserialize(self, data: bytes) -> int:
        self.r, self.g, self.b, self.a = _unpack("<4f", data)
        return 16


@dataclass
class Header(Msg):
    """Sequence number, time stamp and frame name."""

    msg_type: ClassVar[str] = "std_msgs/Header"
    md5sum: ClassVar[str] = "2176decaecbce78abc3b96ef049fabed"

    seq: int = 0
    stamp: Time = field(default_factory=Time)
    frame_id: str = ""

    def serialize(self) -> bytes:
        frame = self.frame_id.encode("utf-8")
        return (
            struct.pack(
                "<IIII",
                self.seq & 0xFFFFFFFF,
                self.stamp.sec,
                self.stamp.nsec,
                len(frame),
            )
            + frame
        )

    def deserialize(self, data: bytes) -> int:
        seq, sec, nsec, length = _unpack("<IIII", data)
        start = 16
        frame = bytes(data[start : start + length])
        if len(frame) < length:
            raise ValueError(f"frame_id needs {length} bytes, got {len(frame)}")
        self.seq = seq
        self.stamp = Time(sec, nsec)
        self.frame_id = frame.decode("utf-8", errors="replace")
        return start + length


@dataclass
class Int32(Msg):
    """A signed 32-bit integer."""

    msg_type: ClassVar[str] = "std_msgs/Int32"
    md5sum: ClassVar[str] = "da5909fbe378aeaf85e547e830cc1bb7"

    data: int = 0

    def serialize(self) -> bytes:
        return struct.pack("<i", _int32(self.data))

    def deserialize(self, data: bytes) -> int:
        (self.data,) = _unpack("<i", data)
        return 4


@dataclass
class Int8(Msg):
    """A signed 8-bit integer."""

    msg_type: ClassVar[str] = "std_msgs/Int8"
    md5sum: ClassVar[str] = "27ffa0c9c4b8fb8492252bcad9e5c57b"

    data: int = 0

    def serialize(self) -> bytes:
        return struct.pack("<b", _int8(self.data))

    def deserialize(self, data: bytes) -> int:
        (self.data,) = _unpack("<b", data)
        return 1


@dataclass
class TimeMsg(Msg):
    """A point in time as a message."""

    msg_type: ClassVar[str] = "std_msgs/Time"
    md5sum: ClassVar[str] = "cd7166c74c552c311fbcc2fe5a7bc289"

    data: Time = field(default_factory=Time)

    def serialize(self) -> bytes:
        return struct.pack("<II", self.data.sec, self.data.nsec)

    def deserialize(self, data: bytes) -> int:
        sec, nsec = _unpack("<II", data)
        self.data = Time(sec, nsec)
        return 8


@dataclass
class UInt32(Msg):
    """An unsigned 32-bit integer."""

    msg_type: ClassVar[str] = "std_msgs/UInt32"
    md5sum: ClassVar[str] = "304a39449588c7f8ce2df6e8001c5fce"

    data: int = 0

    def serialize(self) -> bytes:
        return struct.pack("<I", self.data & 0xFFFFFFFF)

    def deserialize(self, data: bytes) -> int:
        (self.data,) = _unpack("<I", data)
        return 4


@dataclass
class UInt8(Msg):
    """An unsigned 8-bit integer."""

    msg_type: ClassVar[str] = "std_msgs/UInt8"
    md5sum: ClassVar[str] = "7c8164229e7d2c17eb95e9231617fdee"

    data: int = 0

    def serialize(self) -> bytes:
        return bytes([self.data & 0xFF])

    def deserialize(self, data: bytes) -> int:
        (self.data,) = _unpack("<B", data)
        return 1