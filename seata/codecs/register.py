"""Codecs of the client and resource-manager registration messages."""

from __future__ import annotations

from seata.bytebuffer import ByteBuffer, read_string32_length, write_string32_length
from seata.codecs.common import AbstractIdentifyRequestCodec, AbstractIdentifyResponseCodec
from seata.codecs.manager import CodecType, get_codec_manager
from seata.message import (
    RegisterRMRequest,
    RegisterRMResponse,
    RegisterTMRequest,
    RegisterTMResponse,
)
from seata.message_types import MessageType


class RegisterRMRequestCodec(AbstractIdentifyRequestCodec):
    """Identify layout followed by the resource ids with a 32-bit length."""

    message_type = MessageType.REG_RM
    message_class = RegisterRMRequest

    def encode(self, message) -> bytes:
        buf = ByteBuffer()
        self._write_fields(message, buf)
        write_string32_length(message.resource_ids, buf)
        return buf.getvalue()

    def decode(self, data):
        buf = ByteBuffer(data)
        fields = self._read_fields(buf)
        return RegisterRMRequest(**fields, resource_ids=read_string32_length(buf))


class RegisterRMResponseCodec(AbstractIdentifyResponseCodec):
    message_type = MessageType.REG_RM_RESULT
    message_class = RegisterRMResponse

    def encode(self, message) -> bytes:
        return super().encode(message)

    def decode(self, data):
        return super().decode(data)


class RegisterTMRequestCodec(AbstractIdentifyRequestCodec):
    message_type = MessageType.REG_CLT
    message_class = RegisterTMRequest

    def encode(self, message) -> bytes:
        return super().encode(message)

    def decode(self, data):
        return super().decode(data)


class RegisterTMResponseCodec(AbstractIdentifyResponseCodec):
    message_type = MessageType.REG_CLT_RESULT
    message_class = RegisterTMResponse

    def encode(self, message) -> bytes:
        return super().encode(message)

    def decode(self, data):
        return super().decode(data)


def _register() -> None:
    manager = get_codec_manager()
    for codec in (
        RegisterRMRequestCodec(),
        RegisterRMResponseCodec(),
        RegisterTMRequestCodec(),
        RegisterTMResponseCodec(),
    ):
        manager.register_codec(CodecType.SEATA, codec)


_register()