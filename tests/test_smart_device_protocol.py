import pytest

from serialros.rostime import Time
from serialros.smart_device_protocol import Packet, PacketType, UWBDistance
from serialros.std_msgs import Header


def test_packet_type_values_match_protocol():
    assert PacketType.NAMED_STRING == 11
    assert PacketType.DEVICE_MESSAGE_BOARD_DATA == 42
    assert PacketType.DATA == 82
    assert PacketType(21) is PacketType.SENSOR_ENV_III


def test_packet_identity():
    packet = Packet()
    assert packet.msg_type == "smart_device_protocol/Packet"
    assert packet.md5sum == "dbab45830b3b1d11bc00c2acc0192a63"


def test_packet_wire_bytes():
    packet = Packet(mac_address=b"\x01\x02", data=b"\x03")
    assert packet.serialize() == b"\x02\x00\x00\x00\x01\x02\x01\x00\x00\x00\x03"


def test_empty_packet_round_trip():
    wire = Packet().serialize()
    decoded = Packet(mac_address=b"\x09", data=b"\x09")
    assert decoded.deserialize(wire) == len(wire)
    assert decoded.mac_address == b""
    assert decoded.data == b""


def test_packet_round_trip():
    original = Packet(mac_address=bytes([0x02, 0x00, 0x00, 0x00, 0x00, 0x01]), data=bytes(range(40)))
    wire = original.serialize()
    decoded = Packet()
    assert decoded.deserialize(wire) == len(wire)
    assert decoded == original


def test_packet_accepts_int_lists_and_masks():
    packet = Packet(mac_address=[0x1FF, 2], data=[256 + 7])
    decoded = Packet()
    decoded.deserialize(packet.serialize())
    assert decoded.mac_address == bytes([0xFF, 2])
    assert decoded.data == bytes([7])


def test_packet_deserialize_ignores_trailing_bytes():
    wire = Packet(mac_address=b"\x05", data=b"\x06\x07").serialize()
    decoded = Packet()
    assert decoded.deserialize(wire + b"\xff\xff") == len(wire)
    assert decoded.data == b"\x06\x07"


def test_uwb_identity():
    msg = UWBDistance()
    assert msg.msg_type == "smart_device_protocol/UWBDistance"
    assert msg.md5sum == "ae36538b2b731aed9d5d280b17416445"


def test_uwb_layout_follows_header():
    msg = UWBDistance(header=Header(seq=3, frame_id="uwb"), id=-1, distance=2.5)
    wire = msg.serialize()
    header_wire = msg.header.serialize()
    assert wire.startswith(header_wire)
    assert len(wire) == len(header_wire) + 5
    assert wire[len(header_wire)] == 0xFF


def test_uwb_round_trip():
    original = UWBDistance(header=Header(seq=7, stamp=Time(10, 20), frame_id="base"), id=-5, distance=1.5)
    wire = original.serialize()
    decoded = UWBDistance()
    assert decoded.deserialize(wire) == len(wire)
    assert decoded == original


def test_uwb_id_wraps_to_signed_byte():
    decoded = UWBDistance()
    decoded.deserialize(UWBDistance(id=200, distance=0.25).serialize())
    assert decoded.id == 200 - 256
    assert decoded.distance == 0.25


def test_uwb_truncated_raises():
    wire = UWBDistance(id=1, distance=3.0).serialize()
    with pytest.raises(ValueError):
        UWBDistance().deserialize(wire[:-1])