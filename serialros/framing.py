"""Wire framing of serial messages: header, length and topic checksums."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

SYNC_FLAG = 0xFF
PROTOCOL_VER1 = 0xFF
PROTOCOL_VER2 = 0xFE
PROTOCOL_VER = PROTOCOL_VER2

HEADER_SIZE = 7
DEFAULT_BUFFER_SIZE = 512


def _checksum(values: Iterable[int]) -> int:
    return 255 - (sum(values) % 256)


@dataclass(frozen=True)
class Frame:
    """One decoded message: the topic it was sent on and its payload."""

    topic_id: int
    payload: bytes


def encode_frame(topic_id: int, payload: bytes, max_size: int = DEFAULT_BUFFER_SIZE) -> bytes:
    """Wrap ``payload`` in a frame for ``topic_id``.

    Raises ValueError when the whole frame would not fit in ``max_size`` bytes.
    """
    body = bytes(payload)
    length = len(body) & 0xFFFF
    len_lo, len_hi = length & 0xFF, length >> 8
    topic = topic_id & 0xFFFF
    topic_lo, topic_hi = topic & 0xFF, topic >> 8

    frame = bytearray(
        [
            SYNC_FLAG,
            PROTOCOL_VER,
            len_lo,
            len_hi,
            _checksum((len_lo, len_hi)),
            topic_lo,
            topic_hi,
        ]
    )
    frame += body
    frame.append(_checksum(frame[5:]))

    if len(frame) > max_size:
        raise ValueError(
            f"message larger than buffer: frame of {len(frame)} bytes exceeds {max_size}"
        )
    return bytes(frame)


class _Mode(enum.IntEnum):
    FIRST_FF = 0
    PROTOCOL_VER = 1
    SIZE_L = 2
    SIZE_H = 3
    SIZE_CHECKSUM = 4
    TOPIC_L = 5
    TOPIC_H = 6
    MESSAGE = 7
    MSG_CHECKSUM = 8


class FrameDecoder:
    """Incremental decoder that turns a byte stream into frames.

    Frames with a bad length or message checksum are dropped silently, as are
    frames whose payload would not fit in ``max_size`` bytes.  Sync bytes
    followed by a different protocol version are counted in
    ``version_mismatches``.
    """

    def __init__(self, max_size: int = DEFAULT_BUFFER_SIZE) -> None:
        self.max_size = max_size
        self.version_mismatches = 0
        self.reset()

    def reset(self) -> None:
        """Drop any partly received frame and wait for the next sync byte."""
        self._mode = _Mode.FIRST_FF
        self._remaining = 0
        self._topic = 0
        self._checksum = 0
        self._buffer = bytearray()

    @property
    def idle(self) -> bool:
        """True when no frame is partly received."""
        return self._mode is _Mode.FIRST_FF

    def feed(self, data: bytes) -> list[Frame]:
        """Consume ``data`` and return the frames completed by it."""
        return [frame for frame in map(self._push, bytes(data)) if frame is not None]

    def _push(self, byte: int) -> Frame | None:
        self._checksum += byte
        mode = self._mode

        if mode is _Mode.MESSAGE:
            self._buffer.append(byte)
            self._remaining -= 1
            if self._remaining == 0:
                self._mode = _Mode.MSG_CHECKSUM
        elif mode is _Mode.FIRST_FF:
            if byte == SYNC_FLAG:
                self._mode = _Mode.PROTOCOL_VER
        elif mode is _Mode.PROTOCOL_VER:
            if byte == PROTOCOL_VER:
                self._mode = _Mode.SIZE_L
            else:
                self.version_mismatches += 1
                self._mode = _Mode.FIRST_FF
        elif mode is _Mode.SIZE_L:
            self._remaining = byte
            self._buffer = bytearray()
            self._checksum = byte
            self._mode = _Mode.SIZE_H
        elif mode is _Mode.SIZE_H:
            self._remaining += byte << 8
            self._mode = _Mode.SIZE_CHECKSUM
        elif mode is _Mode.SIZE_CHECKSUM:
            if self._checksum % 256 == 255 and self._remaining <= self.max_size:
                self._mode = _Mode.TOPIC_L
            else:
                self._mode = _Mode.FIRST_FF
        elif mode is _Mode.TOPIC_L:
            self._topic = byte
            self._checksum = byte
            self._mode = _Mode.TOPIC_H
        elif mode is _Mode.TOPIC_H:
            self._topic += byte << 8
            self._mode = _Mode.MESSAGE if self._remaining else _Mode.MSG_CHECKSUM
        elif mode is _Mode.MSG_CHECKSUM:
            self._mode = _Mode.FIRST_FF
            if self._checksum % 256 == 255:
                return Frame(self._topic, bytes(self._buffer))
        return None