"""Transaction error codes and the exceptions raised by the client."""

from __future__ import annotations

from enum import IntEnum


class TransactionExceptionCode(IntEnum):
    """Reason codes carried by transaction responses and exceptions."""

    UNKNOWN = 0
    BEGIN_FAILED = 1
    LOCK_KEY_CONFLICT = 2
    BRANCH_ROLLBACK_FAILED_RETRIABLE = 3
    BRANCH_ROLLBACK_FAILED_UNRETRIABLE = 4
    BRANCH_REGISTER_FAILED = 5
    BRANCH_REPORT_FAILED = 6
    LOCKABLE_CHECK_FAILED = 7
    BRANCH_TRANSACTION_NOT_EXIST = 8
    GLOBAL_TRANSACTION_NOT_EXIST = 9
    GLOBAL_TRANSACTION_NOT_ACTIVE = 10
    GLOBAL_TRANSACTION_STATUS_INVALID = 11
    FAILED_TO_SEND_BRANCH_COMMIT_REQUEST = 12
    FAILED_TO_SEND_BRANCH_ROLLBACK_REQUEST = 13
    FAILED_TO_ADD_BRANCH = 14
    FAILED_LOCK_GLOBAL_TRANSACTION = 15
    FAILED_WRITE_SESSION = 16
    FAILED_STORE = 17


class TransactionException(Exception):
    """A transaction operation failed with a reason code."""

    def __init__(self, code=TransactionExceptionCode.UNKNOWN, message=""):
        try:
            code = TransactionExceptionCode(code)
        except ValueError:
            code = int(code)
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self):
        return "TransactionException: " + self.message


class TooManySessionsError(Exception):
    """The session pool has no room for another session."""

    def __init__(self, message="too many seeessions"):
        super().__init__(message)


class HeartBeatTimeoutError(TimeoutError):
    """The peer did not answer a heartbeat in time."""

    def __init__(self, message="heart beat time out"):
        super().__init__(message)