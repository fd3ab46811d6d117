"""Codecs shared by messages with the global-end and identify layouts."""

from __future__ import annotations

from seata.bytebuffer import ByteBuffer, read_byte, read_string16_length, write_string16_length
from seata.codecs.manager import Codec
from seata.errors import TransactionExceptionCode
from seata.message import (
    AbstractGlobalEndRequest,
    AbstractGlobalEndResponse,
    AbstractIdentifyRequest,
    AbstractIdentifyResponse,
)
from seata.message_types import GlobalStatus, ResultCode

_MAX_INT8 = 127
_MAX_INT16 = 32767


def _blob(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def _truncated(text: str, limit: int) -> bytes:
    return _blob(text)[:limit]


def _exception_code(value: int):
    try:
        return TransactionExceptionCode(value)
    except ValueError:
        return value


class CommonGlobalEndRequestCodec(Codec):
    """Layout: xid and extra data, each with a 16-bit length."""

    message_class = AbstractGlobalEndRequest

    def encode(self, message) -> bytes:
        buf = ByteBuffer()
        write_string16_length(message.xid, buf)
        write_string16_length(message.extra_data, buf)
        return buf.getvalue()

    def decode(self, data):
        buf = ByteBuffer(data)
        xid = read_string16_length(buf)
        extra_data = _blob(read_string16_length(buf))
        return self.message_class(xid=xid, extra_data=extra_data)


class CommonGlobalEndResponseCodec(Codec):
    """Layout: result code, failure message, exception code, global status."""

    message_class = AbstractGlobalEndResponse

    def encode(self, message) -> bytes:
        buf = ByteBuffer()
        buf.write_byte(int(message.result_code) & 0xFF)
        if message.result_code == ResultCode.FAILED:
            write_string16_length(_truncated(message.msg, _MAX_INT16), buf)
        buf.write_byte(int(message.transaction_exception_code) & 0xFF)
        buf.write_byte(int(message.global_status) & 0xFF)
        return buf.getvalue()

    def decode(self, data):
        buf = ByteBuffer(data)
        result_code = ResultCode(read_byte(buf))
        msg = read_string16_length(buf) if result_code == ResultCode.FAILED else ""
        exception_code = _exception_code(read_byte(buf))
        global_status = GlobalStatus(read_byte(buf))
        return self.message_class(
            result_code=result_code,
            msg=msg,
            transaction_exception_code=exception_code,
            global_status=global_status,
        )


class AbstractIdentifyRequestCodec(Codec):
    """Layout: version, application id, service group and extra data."""

    message_class = AbstractIdentifyRequest

    def _write_fields(self, message, buf: ByteBuffer) -> None:
        write_string16_length(message.version, buf)
        write_string16_length(message.application_id, buf)
        write_string16_length(message.transaction_service_group, buf)
        write_string16_length(message.extra_data, buf)

    def _read_fields(self, buf: ByteBuffer) -> dict:
        return {
            "version": read_string16_length(buf),
            "application_id": read_string16_length(buf),
            "transaction_service_group": read_string16_length(buf),
            "extra_data": _blob(read_string16_length(buf)),
        }

    def encode(self, message) -> bytes:
        buf = ByteBuffer()
        self._write_fields(message, buf)
        return buf.getvalue()

    def decode(self, data):
        return self.message_class(**self._read_fields(ByteBuffer(data)))


class AbstractIdentifyResponseCodec(Codec):
    """Layout: identified flag byte and version."""

    message_class = AbstractIdentifyResponse

    def encode(self, message) -> bytes:
        buf = ByteBuffer()
        buf.write_byte(1 if message.identified else 0)
        write_string16_length(message.version, buf)
        return buf.getvalue()

    def decode(self, data):
        buf = ByteBuffer(data)
        identified = read_byte(buf) == 1
        version = read_string16_length(buf)
        return self.message_class(identified=identified, version=version)