"""Branch transaction types and statuses."""

from __future__ import annotations

from enum import IntEnum


class BranchType(IntEnum):
    """Transaction mode a branch runs in."""

    AT = 0
    TCC = 1
    SAGA = 2
    XA = 3


class BranchStatus(IntEnum):
    """Lifecycle state of a branch transaction.

    Any other signed byte value is accepted as an unnamed status.
    """

    UNKNOWN = 0
    REGISTERED = 1
    PHASEONE_DONE = 2
    PHASEONE_FAILED = 3
    PHASEONE_TIMEOUT = 4
    PHASETWO_COMMITTED = 5
    PHASETWO_COMMIT_FAILED_RETRYABLE = 6
    PHASETWO_COMMIT_FAILED_UNRETRYABLE = 7
    PHASETWO_ROLLBACKED = 8
    PHASETWO_ROLLBACK_FAILED_RETRYABLE = 9
    PHASETWO_ROLLBACK_FAILED_UNRETRYABLE = 10

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and not isinstance(value, bool) and -128 <= value <= 127:
            member = int.__new__(cls, value)
            member._name_ = None
            member._value_ = value
            return cls._value2member_map_.setdefault(value, member)
        return None

    def __str__(self) -> str:
        return _STATUS_TEXT.get(self._value_, str(self._value_))


_STATUS_TEXT = {
    0: "Unknown",
    1: "Registered",
    2: "PhaseoneDone",
    3: "PhaseoneFailed",
    4: "PhaseoneTimeout",
    5: "PhasetwoCommitted",
    6: "PhasetwoCommitFailedRetryable",
    7: "CommitFailedUnretryable",
    8: "PhasetwoRollbacked",
    9: "RollbackFailedRetryable",
    10: "RollbackFailedUnretryable",
}