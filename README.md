# serialros

A small library with no dependencies for the wire side of a rosserial-style
serial link: time values, message encoding and frame checksums.

## Modules

- `serialros.duration`: `Duration(sec, nsec)`, a frozen dataclass of signed
  32-bit seconds and nanoseconds, kept normalized by
  `normalize_sec_nsec_signed`. Supports `+` and `-` between durations,
  `*` by a real number (seconds and nanoseconds are scaled and truncated
  separately), `to_sec()` and `Duration.from_sec(t)`.
- `serialros.rostime`: `Time(sec, nsec)`, a frozen dataclass of unsigned
  32-bit seconds and nanoseconds, kept normalized by `normalize_sec_nsec`.
  `Time + Duration` and `Time - Duration` give a `Time`; `Time - Time` gives a
  `Duration`. Also `to_sec()`, `Time.from_sec(t)` (raises `ValueError` for a
  negative value), `to_nsec()` (truncated to 32 bits) and `Time.from_nsec(t)`.
- `serialros.msg`: the abstract `Msg` base class, with `serialize()` returning
  bytes, `deserialize(data)` returning the number of bytes read, and the class
  attributes `msg_type` and `md5sum`. Also `serialize_avr_float64(value)` and
  `deserialize_avr_float64(data)`, which carry a value rounded to a 32-bit float
  in the 8-byte little-endian float64 wire form.
- `serialros.std_msgs`: the dataclass messages `Bool`, `Byte`, `Char`,
  `ColorRGBA`, `Header`, `Int32`, `Int8`, `TimeMsg`, `UInt32` and `UInt8`, all
  little-endian. `Header.frame_id` is sent as UTF-8 with a 32-bit length prefix.
- `serialros.smart_device_protocol`: `Packet` (a `mac_address` and a `data`
  field, each sent as bytes with a 32-bit length prefix), the `PacketType`
  integer enum of packet type codes, and `UWBDistance` (a `Header`, a signed
  8-bit `id` and a 32-bit float `distance`).
- `serialros.framing`: `encode_frame(topic_id, payload, max_size)` builds a
  frame (sync byte, protocol version, length with its checksum, topic id,
  payload and message checksum) and raises `ValueError` when the frame would
  exceed `max_size` bytes. `FrameDecoder(max_size)` turns a byte stream into
  `Frame(topic_id, payload)` objects through `feed(data)`. It drops frames
  with a bad checksum or a payload larger than `max_size`, counts wrong
  protocol versions in `version_mismatches`, and has `reset()` and an `idle`
  property.

Any `deserialize` raises `ValueError` when the input is too short.

## Install

```
pip install serialros
```

For the tests:

```
pip install "serialros[test]"
pytest
```

## Example

```python
from serialros.std_msgs import Int32
from serialros.framing import encode_frame, FrameDecoder

msg = Int32(data=-5)
frame = encode_frame(125, msg.serialize(), 512)

decoder = FrameDecoder()
for received in decoder.feed(frame):
    decoded = Int32()
    decoded.deserialize(received.payload)
    print(received.topic_id, decoded.data)   # 125 -5
```

Time arithmetic:

```python
from serialros.rostime import Time
from serialros.duration import Duration

t = Time(10, 500_000_000) + Duration(1, 700_000_000)
print(t.sec, t.nsec)                 # 12 200000000
print((t - Time(10, 0)).to_sec())    # 2.2
```

## What it does not do

The package only encodes and decodes. It does not open serial ports or
network connections. It has no node handle, and no publisher, subscriber or
service registry. It does not negotiate topics, synchronize time with a host,
or request parameters. A program that needs these builds them on top of
`encode_frame`, `FrameDecoder` and the message classes.