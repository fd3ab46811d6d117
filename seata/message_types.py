"""Numeric codes of the wire protocol: message types, frame kinds and statuses."""

from __future__ import annotations

from enum import IntEnum

MAGIC_CODE_BYTES = b"\xda\xda"

VERSION = 1
MAX_FRAME_LENGTH = 8 * 1024 * 1024
V1_HEAD_LENGTH = 16


def _open_member(cls, value, low, high):
    """Create an unnamed member for an in-range integer the enum does not list."""
    if isinstance(value, int) and not isinstance(value, bool) and low <= value <= high:
        member = int.__new__(cls, value)
        member._name_ = None
        member._value_ = value
        return cls._value2member_map_.setdefault(value, member)
    return None


class MessageType(IntEnum):
    """Type code that prefixes every encoded message body."""

    GLOBAL_BEGIN = 1
    GLOBAL_BEGIN_RESULT = 2
    BRANCH_COMMIT = 3
    BRANCH_COMMIT_RESULT = 4
    BRANCH_ROLLBACK = 5
    BRANCH_ROLLBACK_RESULT = 6
    GLOBAL_COMMIT = 7
    GLOBAL_COMMIT_RESULT = 8
    GLOBAL_ROLLBACK = 9
    GLOBAL_ROLLBACK_RESULT = 10
    BRANCH_REGISTER = 11
    BRANCH_REGISTER_RESULT = 12
    BRANCH_STATUS_REPORT = 13
    BRANCH_STATUS_REPORT_RESULT = 14
    GLOBAL_STATUS = 15
    GLOBAL_STATUS_RESULT = 16
    GLOBAL_REPORT = 17
    GLOBAL_REPORT_RESULT = 18
    GLOBAL_LOCK_QUERY = 21
    GLOBAL_LOCK_QUERY_RESULT = 22
    SEATA_MERGE = 59
    SEATA_MERGE_RESULT = 60
    REG_CLT = 101
    REG_CLT_RESULT = 102
    REG_RM = 103
    REG_RM_RESULT = 104
    RM_DELETE_UNDOLOG = 111
    HEARTBEAT_MSG = 120


class GettyRequestType(IntEnum):
    """Kind of frame carried by the transport."""

    REQUEST_SYNC = 0
    RESPONSE = 1
    REQUEST_ONEWAY = 2
    HEARTBEAT_REQUEST = 3
    HEARTBEAT_RESPONSE = 4


class GlobalStatus(IntEnum):
    """Lifecycle state of a global transaction.

    Values the protocol does not name are kept as unnamed statuses.
    """

    UNKNOWN = 0
    BEGIN = 1
    COMMITTING = 2
    COMMIT_RETRYING = 3
    ROLLBACKING = 4
    ROLLBACK_RETRYING = 5
    TIMEOUT_ROLLBACKING = 6
    TIMEOUT_ROLLBACK_RETRYING = 7
    ASYNC_COMMITTING = 8
    COMMITTED = 9
    COMMIT_FAILED = 10
    ROLLBACKED = 11
    ROLLBACK_FAILED = 12
    TIMEOUT_ROLLBACKED = 13
    TIMEOUT_ROLLBACK_FAILED = 14
    FINISHED = 15

    @classmethod
    def _missing_(cls, value):
        return _open_member(cls, value, -(2**63), 2**63 - 1)


class ResultCode(IntEnum):
    """Outcome flag of a result message; other byte values are kept unnamed."""

    FAILED = 0
    SUCCESS = 1

    @classmethod
    def _missing_(cls, value):
        return _open_member(cls, value, 0, 255)


__all__ = [
    "MAGIC_CODE_BYTES",
    "VERSION",
    "MAX_FRAME_LENGTH",
    "V1_HEAD_LENGTH",
    "MessageType",
    "GettyRequestType",
    "GlobalStatus",
    "ResultCode",
]