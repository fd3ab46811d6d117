"""Codecs of the branch register, commit and rollback messages."""

from __future__ import annotations

from seata.branch import BranchStatus, BranchType
from seata.bytebuffer import (
    ByteBuffer,
    read_byte,
    read_string8_length,
    read_string16_length,
    read_string32_length,
    read_uint64,
    write_string8_length,
    write_string16_length,
    write_string32_length,
)
from seata.codecs.manager import Codec, CodecType, get_codec_manager
from seata.errors import TransactionExceptionCode
from seata.message import (
    BranchCommitRequest,
    BranchCommitResponse,
    BranchRegisterRequest,
    BranchRegisterResponse,
    BranchRollbackRequest,
    BranchRollbackResponse,
)
from seata.message_types import MessageType, ResultCode

_MAX_INT8 = 127
_MAX_INT16 = 32767


def _blob(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def _truncated(text: str, limit: int) -> bytes:
    return _blob(text)[:limit]


def _signed8(value: int) -> int:
    return value - 256 if value > 127 else value


def _signed64(value: int) -> int:
    return value - (1 << 64) if value >= (1 << 63) else value


def _branch_type(value: int):
    try:
        return BranchType(_signed8(value))
    except ValueError:
        return _signed8(value)


def _exception_code(value: int):
    try:
        return TransactionExceptionCode(value)
    except ValueError:
        return value


class _BranchEndRequestCodec(Codec):
    """Layout: xid, branch id, branch type, resource id and application data."""

    message_class = BranchCommitRequest

    def encode(self, message) -> bytes:
        buf = ByteBuffer()
        write_string16_length(message.xid, buf)
        buf.write_int64(message.branch_id)
        buf.write_byte(int(message.branch_type) & 0xFF)
        write_string16_length(message.resource_id, buf)
        write_string32_length(message.application_data, buf)
        return buf.getvalue()

    def decode(self, data):
        buf = ByteBuffer(data)
        xid = read_string16_length(buf)
        branch_id = _signed64(read_uint64(buf))
        branch_type = _branch_type(read_byte(buf))
        resource_id = read_string16_length(buf)
        application_data = _blob(read_string32_length(buf))
        return self.message_class(
            xid=xid,
            branch_id=branch_id,
            branch_type=branch_type,
            resource_id=resource_id,
            application_data=application_data,
        )


class _BranchEndResponseCodec(Codec):
    """Layout: result code, failure message, exception code, xid, branch id, status."""

    message_class = BranchCommitResponse
    msg_limit = _MAX_INT8

    def encode(self, message) -> bytes:
        buf = ByteBuffer()
        buf.write_byte(int(message.result_code) & 0xFF)
        if message.result_code == ResultCode.FAILED:
            write_string8_length(_truncated(message.msg, self.msg_limit), buf)
        buf.write_byte(int(message.transaction_exception_code) & 0xFF)
        write_string16_length(message.xid, buf)
        buf.write_int64(message.branch_id)
        buf.write_byte(int(message.branch_status) & 0xFF)
        return buf.getvalue()

    def decode(self, data):
        buf = ByteBuffer(data)
        result_code = ResultCode(read_byte(buf))
        msg = read_string8_length(buf) if result_code == ResultCode.FAILED else ""
        exception_code = _exception_code(read_byte(buf))
        xid = read_string16_length(buf)
        branch_id = _signed64(read_uint64(buf))
        branch_status = BranchStatus(_signed8(read_byte(buf)))
        return self.message_class(
            result_code=result_code,
            msg=msg,
            transaction_exception_code=exception_code,
            xid=xid,
            branch_id=branch_id,
            branch_status=branch_status,
        )


class BranchCommitRequestCodec(_BranchEndRequestCodec):
    message_type = MessageType.BRANCH_COMMIT
    message_class = BranchCommitRequest

    def encode(self, message) -> bytes:
        return super().encode(message)

    def decode(self, data):
        return super().decode(data)


class BranchRollbackRequestCodec(_BranchEndRequestCodec):
    message_type = MessageType.BRANCH_ROLLBACK
    message_class = BranchRollbackRequest

    def encode(self, message) -> bytes:
        return super().encode(message)

    def decode(self, data):
        return super().decode(data)


class BranchCommitResponseCodec(_BranchEndResponseCodec):
    message_type = MessageType.BRANCH_COMMIT_RESULT
    message_class = BranchCommitResponse
    msg_limit = _MAX_INT8

    def encode(self, message) -> bytes:
        return super().encode(message)

    def decode(self, data):
        return super().decode(data)


class BranchRollbackResponseCodec(_BranchEndResponseCodec):
    message_type = MessageType.BRANCH_ROLLBACK_RESULT
    message_class = BranchRollbackResponse
    # The message keeps an 8-bit length prefix even though it is cut at 16-bit range.
    msg_limit = _MAX_INT16

    def encode(self, message) -> bytes:
        return super().encode(message)

    def decode(self, data):
        return super().decode(data)


class BranchRegisterRequestCodec(Codec):
    """Layout: xid, branch type, resource id, lock key and application data."""

    message_type = MessageType.BRANCH_REGISTER

    def encode(self, message) -> bytes:
        buf = ByteBuffer()
        write_string16_length(message.xid, buf)
        buf.write_byte(int(message.branch_type) & 0xFF)
        write_string16_length(message.resource_id, buf)
        write_string32_length(message.lock_key, buf)
        write_string32_length(message.application_data, buf)
        return buf.getvalue()

    def decode(self, data):
        buf = ByteBuffer(data)
        xid = read_string16_length(buf)
        branch_type = _branch_type(read_byte(buf))
        resource_id = read_string16_length(buf)
        lock_key = read_string32_length(buf)
        application_data = _blob(read_string32_length(buf))
        return BranchRegisterRequest(
            xid=xid,
            branch_type=branch_type,
            resource_id=resource_id,
            lock_key=lock_key,
            application_data=application_data,
        )


class BranchRegisterResponseCodec(Codec):
    """Layout: result code, failure message, exception code and branch id."""

    message_type = MessageType.BRANCH_REGISTER_RESULT

    def encode(self, message) -> bytes:
        buf = ByteBuffer()
        buf.write_byte(int(message.result_code) & 0xFF)
        if message.result_code == ResultCode.FAILED:
            write_string16_length(_truncated(message.msg, _MAX_INT16), buf)
        buf.write_byte(int(message.transaction_exception_code) & 0xFF)
        buf.write_int64(message.branch_id)
        return buf.getvalue()

    def decode(self, data):
        buf = ByteBuffer(data)
        result_code = ResultCode(read_byte(buf))
        msg = read_string16_length(buf) if result_code == ResultCode.FAILED else ""
        exception_code = _exception_code(read_byte(buf))
        branch_id = _signed64(read_uint64(buf))
        return BranchRegisterResponse(
            result_code=result_code,
            msg=msg,
            transaction_exception_code=exception_code,
            branch_id=branch_id,
        )


def _register() -> None:
    manager = get_codec_manager()
    for codec in (
        BranchCommitRequestCodec(),
        BranchCommitResponseCodec(),
        BranchRegisterRequestCodec(),
        BranchRegisterResponseCodec(),
        BranchRollbackRequestCodec(),
        BranchRollbackResponseCodec(),
    ):
        manager.register_codec(CodecType.SEATA, codec)


_register()