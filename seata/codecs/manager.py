"""Registry of message codecs, keyed by serialization type and message type."""

from __future__ import annotations

import struct
import threading
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, ClassVar, Optional

from seata import log
from seata.message_types import MessageType


class CodecType(IntEnum):
    """Serialization scheme of a message body."""

    SEATA = 0x1
    PROTOBUF = 0x2
    KRYO = 0x4
    FST = 0x8


class Codec(ABC):
    """Turns one kind of message into its wire body and back."""

    message_type: ClassVar[Optional[MessageType]] = None

    @abstractmethod
    def encode(self, message) -> bytes:
        """Return the wire body of ``message``."""

    @abstractmethod
    def decode(self, data: bytes) -> Any:
        """Build a message from its wire body."""


class CodecManager:
    """Finds the codec for a message and frames bodies with their type code."""

    def __init__(self):
        self._lock = threading.Lock()
        self._codecs: dict[int, dict[int, Codec]] = {}

    def register_codec(self, codec_type, codec: Codec) -> None:
        """Register ``codec`` for its message type, replacing any earlier one."""
        if codec.message_type is None:
            raise TypeError(f"{type(codec).__name__} has no message type to register under")
        with self._lock:
            self._codecs.setdefault(codec_type, {})[codec.message_type] = codec

    def get_codec(self, codec_type, message_type) -> Optional[Codec]:
        """Return the registered codec, or None if there is none."""
        return self._codecs.get(codec_type, {}).get(message_type)

    def decode(self, codec_type, data: bytes):
        """Decode a body that starts with its two-byte big-endian type code."""
        data = bytes(data)
        type_code = struct.unpack(">h", data[:2])[0] if len(data) >= 2 else 0
        codec = self.get_codec(codec_type, type_code)
        if codec is None:
            log.errorf("This message type [%s] has no codec to decode", type_code)
            raise LookupError(f"message type {type_code} has no codec to decode")
        return codec.decode(data[2:])

    def encode(self, codec_type, message) -> bytes:
        """Encode ``message`` and prefix it with its two-byte type code."""
        type_code = getattr(message, "type_code", None)
        if type_code is None:
            raise TypeError(f"{type(message).__name__} carries no message type code")
        codec = self.get_codec(codec_type, type_code)
        if codec is None:
            log.errorf("This message type [%s] has no codec to encode", type_code)
            raise LookupError(f"message type {type_code} has no codec to encode")
        body = codec.encode(message)
        return struct.pack(">H", int(type_code) & 0xFFFF) + body


_manager: Optional[CodecManager] = None
_manager_lock = threading.Lock()


def get_codec_manager() -> CodecManager:
    """Return the process-wide codec manager."""
    global _manager
    if _manager is None:
        with _manager_lock:
            if _manager is None:
                _manager = CodecManager()
    return _manager