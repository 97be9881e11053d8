"""Messages of the smart device protocol: raw packets and UWB distances."""

from __future__ import annotations

import enum
import struct
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar

from serialros.msg import Msg
from serialros.std_msgs import Header


class PacketType(enum.IntEnum):
    """Packet type codes carried in the first bytes of a packet's data."""

    NONE = 0
    TEST = 1
    NAMED_STRING = 11
    NAMED_INT = 12
    NAMED_FLOAT = 13
    SENSOR_ENV_III = 21
    SENSOR_UNITV2_PERSON_COUNTER = 22
    EMERGENCY = 31
    TASK_DISPATCHER = 32
    TASK_RESULT = 33
    TASK_RECEIVED = 34
    DEVICE_MESSAGE_BOARD_META = 41
    DEVICE_MESSAGE_BOARD_DATA = 42
    META = 81
    DATA = 82


def _as_bytes(values: Iterable[int]) -> bytes:
    return bytes(value & 0xFF for value in values)


def _read_byte_array(data: bytes, offset: int, name: str) -> tuple[bytes, int]:
    try:
        (length,) = struct.unpack_from("<I", data, offset)
    except struct.error as exc:
        raise ValueError(f"{name} length needs 4 bytes at offset {offset}") from exc
    start = offset + 4
    chunk = bytes(data[start : start + length])
    if len(chunk) < length:
        raise ValueError(f"{name} needs {length} bytes, got {len(chunk)}")
    return chunk, start + length


@dataclass
class Packet(Msg):
    """A raw packet: the sender's MAC address and the packet body."""

    msg_type: ClassVar[str] = "smart_device_protocol/Packet"
    md5sum: ClassVar[str] = "dbab45830b3b1d11bc00c2acc0192a63"

    mac_address: bytes = b""
    data: bytes = b""

    def serialize(self) -> bytes:
        mac = _as_bytes(self.mac_address)
        body = _as_bytes(self.data)
        return struct.pack("<I", len(mac)) + mac + struct.pack("<I", len(body)) + body

    def deserialize(self, data: bytes) -> int:
        mac, offset = _read_byte_array(data, 0, "mac_address")
        body, offset = _read_byte_array(data, offset, "data")
        self.mac_address = mac
        self.data = body
        return offset


@dataclass
class UWBDistance(Msg):
    """A distance measured by an ultra-wideband module to a tag."""

    msg_type: ClassVar[str] = "smart_device_protocol/UWBDistance"
    md5sum: ClassVar[str] = "ae36538b2b731aed9d5d280b17416445"

    header: Header = field(default_factory=Header)
    id: int = 0
    distance: float = 0.0

    def serialize(self) -> bytes:
        signed_id = self.id & 0xFF
        if signed_id & 0x80:
            signed_id -= 0x100
        return self.header.serialize() + struct.pack("<bf", signed_id, self.distance)

    def deserialize(self, data: bytes) -> int:
        header = Header()
        offset = header.deserialize(data)
        try:
            ident, distance = struct.unpack_from("<bf", data, offset)
        except struct.error as exc:
            raise ValueError(f"id and distance need 5 bytes at offset {offset}") from exc
        self.header = header
        self.id = ident
        self.distance = distance
        return offset + 5