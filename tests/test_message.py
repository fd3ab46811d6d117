import pytest

from seata.branch import BranchStatus, BranchType
from seata.errors import TransactionExceptionCode
from seata.message import (
    HEARTBEAT_MESSAGE_PING,
    HEARTBEAT_MESSAGE_PONG,
    AbstractGlobalEndRequest,
    AbstractIdentifyRequest,
    BranchCommitRequest,
    BranchCommitResponse,
    BranchRegisterRequest,
    BranchRegisterResponse,
    BranchReportRequest,
    BranchReportResponse,
    BranchRollbackRequest,
    BranchRollbackResponse,
    GlobalBeginRequest,
    GlobalBeginResponse,
    GlobalCommitRequest,
    GlobalCommitResponse,
    GlobalLockQueryRequest,
    GlobalLockQueryResponse,
    GlobalReportRequest,
    GlobalReportResponse,
    GlobalRollbackRequest,
    GlobalRollbackResponse,
    GlobalStatusRequest,
    GlobalStatusResponse,
    HeartBeatMessage,
    MergedWarpMessage,
    MergeResultMessage,
    MessageFuture,
    RegisterRMRequest,
    RegisterRMResponse,
    RegisterTMRequest,
    RegisterTMResponse,
    RpcMessage,
    UndoLogDeleteRequest,
)
from seata.message_types import GlobalStatus, MessageType, ResultCode


def test_merged_warp_message_type_code():
    assert MergedWarpMessage().type_code == MessageType.SEATA_MERGE


def test_merge_result_message_type_code():
    assert MergeResultMessage().type_code == MessageType.SEATA_MERGE_RESULT


def test_new_message_future():
    rpc_message = RpcMessage(id=0)
    assert MessageFuture.from_message(rpc_message).id == 0


def test_message_future_starts_pending():
    future = MessageFuture.from_message(RpcMessage(id=42))
    assert future.id == 42
    assert not future.done.is_set()
    assert future.response is None
    assert future.err is None


def test_message_futures_have_separate_events():
    first = MessageFuture.from_message(RpcMessage(id=1))
    second = MessageFuture.from_message(RpcMessage(id=2))
    first.done.set()
    assert first.done.is_set()
    assert not second.done.is_set()


def test_heartbeat_message_to_string():
    assert str(HeartBeatMessage(True)) == "services ping"
    assert str(HeartBeatMessage(False)) == "services pong"


def test_heartbeat_message_type_code():
    assert HeartBeatMessage().type_code == MessageType.HEARTBEAT_MSG


def test_heartbeat_messages_compare_by_value():
    assert HeartBeatMessage(True) == HEARTBEAT_MESSAGE_PING
    assert HeartBeatMessage(False) == HEARTBEAT_MESSAGE_PONG


@pytest.mark.parametrize(
    "message, expected",
    [
        (BranchRegisterRequest(), MessageType.BRANCH_REGISTER),
        (BranchReportRequest(), MessageType.BRANCH_STATUS_REPORT),
        (BranchCommitRequest(), MessageType.BRANCH_COMMIT),
        (BranchRollbackRequest(), MessageType.BRANCH_ROLLBACK),
        (GlobalBeginRequest(), MessageType.GLOBAL_BEGIN),
        (GlobalCommitRequest(), MessageType.GLOBAL_COMMIT),
        (GlobalRollbackRequest(), MessageType.GLOBAL_ROLLBACK),
        (GlobalLockQueryRequest(), MessageType.GLOBAL_LOCK_QUERY),
        (GlobalReportRequest(), MessageType.GLOBAL_STATUS),
        (UndoLogDeleteRequest(), MessageType.RM_DELETE_UNDOLOG),
        (RegisterTMRequest(), MessageType.REG_CLT),
        (RegisterRMRequest(), MessageType.REG_RM),
        (GlobalStatusResponse(), MessageType.GLOBAL_STATUS_RESULT),
        (GlobalStatusRequest(), MessageType.GLOBAL_STATUS),
    ],
)
def test_request_type_codes(message, expected):
    assert message.type_code == expected


@pytest.mark.parametrize(
    "message, expected",
    [
        (RegisterRMResponse(), MessageType.REG_RM_RESULT),
        (RegisterTMResponse(), MessageType.REG_CLT_RESULT),
        (GlobalReportResponse(), MessageType.GLOBAL_STATUS_RESULT),
        (GlobalLockQueryResponse(), MessageType.GLOBAL_LOCK_QUERY_RESULT),
        (GlobalRollbackResponse(), MessageType.GLOBAL_ROLLBACK_RESULT),
        (GlobalCommitResponse(), MessageType.GLOBAL_COMMIT_RESULT),
        (GlobalBeginResponse(), MessageType.GLOBAL_BEGIN_RESULT),
        (BranchRollbackResponse(), MessageType.BRANCH_ROLLBACK_RESULT),
        (BranchCommitResponse(), MessageType.BRANCH_COMMIT_RESULT),
        (BranchRegisterResponse(), MessageType.BRANCH_REGISTER_RESULT),
        (BranchReportResponse(), MessageType.BRANCH_STATUS_REPORT_RESULT),
        (GlobalStatusResponse(), MessageType.GLOBAL_STATUS_RESULT),
    ],
)
def test_response_type_codes(message, expected):
    assert message.type_code == expected


def test_lock_query_request_carries_register_fields():
    request = GlobalLockQueryRequest(xid="abc134", resource_id="124", lock_key="a:1,b:2")
    assert isinstance(request, BranchRegisterRequest)
    assert request.lock_key == "a:1,b:2"
    assert request.type_code == MessageType.GLOBAL_LOCK_QUERY


def test_register_rm_request_extends_identify_request():
    request = RegisterRMRequest(
        version="V1,0",
        application_id="TestApplicationId",
        transaction_service_group="TestTransactionServiceGroup",
        extra_data=b"TestExtraData",
        resource_ids="TestResourceIds",
    )
    assert isinstance(request, AbstractIdentifyRequest)
    assert request.application_id == "TestApplicationId"
    assert request.resource_ids == "TestResourceIds"


def test_global_end_requests_share_fields_but_differ_by_class():
    commit = GlobalCommitRequest(xid="test-transaction-id", extra_data=b"TestExtraData")
    rollback = GlobalRollbackRequest(xid="test-transaction-id", extra_data=b"TestExtraData")
    assert isinstance(commit, AbstractGlobalEndRequest)
    assert commit == GlobalCommitRequest(xid="test-transaction-id", extra_data=b"TestExtraData")
    assert commit != rollback


def test_branch_commit_response_defaults():
    response = BranchCommitResponse()
    assert response.result_code is ResultCode.FAILED
    assert response.msg == ""
    assert response.transaction_exception_code is TransactionExceptionCode.UNKNOWN
    assert response.branch_status is BranchStatus.UNKNOWN
    assert response.branch_id == 0


def test_branch_rollback_response_holds_nested_fields():
    response = BranchRollbackResponse(
        xid="123344",
        branch_id=56678,
        branch_status=BranchStatus.PHASEONE_FAILED,
        transaction_exception_code=TransactionExceptionCode.BEGIN_FAILED,
        result_code=ResultCode.FAILED,
        msg="FAILED",
    )
    assert response.xid == "123344"
    assert response.branch_id == 56678
    assert response.branch_status is BranchStatus.PHASEONE_FAILED
    assert response.msg == "FAILED"


def test_global_report_request_keeps_status():
    request = GlobalReportRequest(xid="test-transaction-id", global_status=GlobalStatus.COMMITTED)
    assert request.global_status is GlobalStatus.COMMITTED
    assert request.xid == "test-transaction-id"


def test_branch_commit_request_defaults_to_at_branch():
    request = BranchCommitRequest(xid="123344", branch_type=BranchType.SAGA)
    assert request.branch_type is BranchType.SAGA
    assert BranchCommitRequest().branch_type is BranchType.AT


def test_merged_message_lists_are_independent():
    first = MergedWarpMessage()
    second = MergedWarpMessage()
    first.msgs.append(RegisterRMRequest(resource_ids="1111"))
    first.msg_ids.append(1212)
    assert second.msgs == []
    assert first.msg_ids == [1212]


def test_rpc_message_head_maps_are_independent():
    first = RpcMessage()
    second = RpcMessage()
    first.head_map["k"] = "v"
    assert second.head_map == {}
    assert first.head_map == {"k": "v"}