"""Big-endian byte buffer and the length-prefixed string helpers of the wire format."""

from __future__ import annotations

import struct

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class ShortBufferError(EOFError):
    """Fewer bytes were available than a fixed-size read needs."""


def _encode(value) -> bytes:
    if isinstance(value, str):
        return value.encode(_ENCODING, _ERRORS)
    return bytes(value)


def _decode(raw: bytes) -> str:
    return raw.decode(_ENCODING, _ERRORS)


def _unpack(fmt: str, data) -> int:
    size = struct.calcsize(fmt)
    if len(data) < size:
        raise ValueError(f"need {size} bytes, got {len(data)}")
    return struct.unpack_from(fmt, bytes(data[:size]))[0]


class ByteBuffer:
    """A growable buffer that is written at the end and read from the front."""

    __slots__ = ("_data", "_pos")

    def __init__(self, data=b""):
        self._data = bytearray(data)
        self._pos = 0

    def __len__(self):
        return len(self._data) - self._pos

    def getvalue(self) -> bytes:
        """Return the bytes not yet read."""
        return bytes(self._data[self._pos:])

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; returns fewer when the buffer runs out."""
        if size < 0:
            raise ValueError("size must not be negative")
        chunk = bytes(self._data[self._pos:self._pos + size])
        self._pos += len(chunk)
        if self._pos == len(self._data):
            self._data.clear()
            self._pos = 0
        return chunk

    def _read_fixed(self, size: int, minimum: int | None = None) -> bytes:
        chunk = self.read(size)
        if not chunk:
            raise EOFError("buffer is exhausted")
        needed = size if minimum is None else minimum
        if len(chunk) < needed:
            raise ShortBufferError(f"needed {needed} bytes, got {len(chunk)}")
        return chunk.ljust(size, b"\0")

    def read_byte(self) -> int:
        return self._read_fixed(1)[0]

    def read_int64(self) -> int:
        return bytes_to_int64(self._read_fixed(8))

    def read_uint16(self) -> int:
        return bytes_to_uint16(self._read_fixed(2))

    def read_uint32(self) -> int:
        # Wider reads accept a partial value of at least two bytes, zero-filled.
        return bytes_to_uint32(self._read_fixed(4, minimum=2))

    def read_uint64(self) -> int:
        return bytes_to_uint64(self._read_fixed(8, minimum=2))

    def write(self, data) -> int:
        raw = bytes(data)
        self._data += raw
        return len(raw)

    def write_string(self, value) -> int:
        return self.write(_encode(value))

    def write_byte(self, value: int) -> None:
        self._data.append(value)

    def write_uint16(self, value: int) -> int:
        return self.write(uint16_to_bytes(value))

    def write_uint32(self, value: int) -> int:
        return self.write(uint32_to_bytes(value))

    def write_uint64(self, value: int) -> int:
        return self.write(uint64_to_bytes(value))

    def write_int64(self, value: int) -> int:
        return self.write(int64_to_bytes(value))


def bytes_to_int64(data) -> int:
    """Signed 64-bit big-endian value of the first eight bytes."""
    return _unpack(">q", data)


def bytes_to_uint64(data) -> int:
    return _unpack(">Q", data)


def bytes_to_uint16(data) -> int:
    return _unpack(">H", data)


def bytes_to_uint32(data) -> int:
    return _unpack(">I", data)


def int_to_bytes(value: int) -> bytes:
    """Low 32 bits of ``value`` in big-endian order."""
    return (value & 0xFFFFFFFF).to_bytes(4, "big")


def int64_to_bytes(value: int) -> bytes:
    return (value & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "big")


def uint64_to_bytes(value: int) -> bytes:
    return (value & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "big")


def uint32_to_bytes(value: int) -> bytes:
    return (value & 0xFFFFFFFF).to_bytes(4, "big")


def uint16_to_bytes(value: int) -> bytes:
    return (value & 0xFFFF).to_bytes(2, "big")


def _read_padded(buf: ByteBuffer, size: int) -> bytes:
    return buf.read(size).ljust(size, b"\0")


def _or_zero(reader) -> int:
    try:
        return reader()
    except EOFError:
        return 0


def read_bytes(size: int, buf: ByteBuffer) -> bytes:
    """Read ``size`` bytes, zero-filled where the buffer runs short."""
    return _read_padded(buf, size)


def read_byte(buf: ByteBuffer) -> int:
    return _or_zero(buf.read_byte)


def read_uint8(buf: ByteBuffer) -> int:
    return _or_zero(buf.read_byte)


def read_uint16(buf: ByteBuffer) -> int:
    return _or_zero(buf.read_uint16)


def read_uint32(buf: ByteBuffer) -> int:
    return _or_zero(buf.read_uint32)


def read_uint64(buf: ByteBuffer) -> int:
    return _or_zero(buf.read_uint64)


def read_string8(buf: ByteBuffer) -> str:
    return _decode(_read_padded(buf, 1))


def read_string16(buf: ByteBuffer) -> str:
    return _decode(_read_padded(buf, 2))


def read_string32(buf: ByteBuffer) -> str:
    return _decode(_read_padded(buf, 4))


def read_string64(buf: ByteBuffer) -> str:
    return _decode(_read_padded(buf, 8))


def _read_length_prefixed(buf: ByteBuffer, read_length) -> str:
    length = _or_zero(read_length)
    if length > 0:
        return _decode(_read_padded(buf, length))
    return ""


def read_string8_length(buf: ByteBuffer) -> str:
    return _read_length_prefixed(buf, buf.read_byte)


def read_string16_length(buf: ByteBuffer) -> str:
    return _read_length_prefixed(buf, buf.read_uint16)


def read_string32_length(buf: ByteBuffer) -> str:
    return _read_length_prefixed(buf, buf.read_uint32)


def read_string64_length(buf: ByteBuffer) -> str:
    return _read_length_prefixed(buf, buf.read_uint64)


def _write_length_prefixed(value, write_length) -> bytes:
    raw = _encode(value)
    write_length(len(raw))
    return raw


def write_string8_length(value, buf: ByteBuffer) -> None:
    raw = _write_length_prefixed(value, lambda n: buf.write_byte(n & 0xFF))
    buf.write(raw)


def write_string16_length(value, buf: ByteBuffer) -> None:
    buf.write(_write_length_prefixed(value, buf.write_uint16))


def write_string32_length(value, buf: ByteBuffer) -> None:
    buf.write(_write_length_prefixed(value, buf.write_uint32))


def write_string64_length(value, buf: ByteBuffer) -> None:
    buf.write(_write_length_prefixed(value, buf.write_uint64))