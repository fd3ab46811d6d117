import pytest

from seata.branch import BranchStatus, BranchType


def test_branch_type_wire_values():
    assert [int(t) for t in BranchType] == [0, 1, 2, 3]
    assert BranchType(2) is BranchType.SAGA


@pytest.mark.parametrize(
    "status, text",
    [
        (BranchStatus.UNKNOWN, "Unknown"),
        (BranchStatus.REGISTERED, "Registered"),
        (BranchStatus.PHASEONE_DONE, "PhaseoneDone"),
        (BranchStatus.PHASEONE_FAILED, "PhaseoneFailed"),
        (BranchStatus.PHASEONE_TIMEOUT, "PhaseoneTimeout"),
        (BranchStatus.PHASETWO_COMMITTED, "PhasetwoCommitted"),
        (BranchStatus.PHASETWO_COMMIT_FAILED_RETRYABLE, "PhasetwoCommitFailedRetryable"),
        (BranchStatus.PHASETWO_COMMIT_FAILED_UNRETRYABLE, "CommitFailedUnretryable"),
        (BranchStatus.PHASETWO_ROLLBACKED, "PhasetwoRollbacked"),
        (BranchStatus.PHASETWO_ROLLBACK_FAILED_RETRYABLE, "RollbackFailedRetryable"),
        (BranchStatus.PHASETWO_ROLLBACK_FAILED_UNRETRYABLE, "RollbackFailedUnretryable"),
    ],
)
def test_status_text(status, text):
    assert str(status) == text


def test_status_values_are_consecutive():
    assert BranchStatus(0) is BranchStatus.UNKNOWN
    assert BranchStatus(10) is BranchStatus.PHASETWO_ROLLBACK_FAILED_UNRETRYABLE
    assert not any(str(BranchStatus(i)).isdigit() for i in range(11))


def test_unnamed_status_prints_number():
    status = BranchStatus(42)
    assert int(status) == 42
    assert str(status) == "42"
    assert BranchStatus(42) is status


def test_status_out_of_byte_range_rejected():
    with pytest.raises(ValueError):
        BranchStatus(200)