"""Request, response and transport messages exchanged with the transaction coordinator."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from seata.branch import BranchStatus, BranchType
from seata.errors import TransactionExceptionCode
from seata.message_types import GettyRequestType, GlobalStatus, MessageType, ResultCode


@dataclass
class AbstractResultMessage:
    """Outcome flag and an optional failure message."""

    result_code: ResultCode = ResultCode.FAILED
    msg: str = ""


@dataclass
class AbstractIdentifyRequest:
    """Registration data a client sends to identify itself."""

    version: str = ""
    application_id: str = ""
    transaction_service_group: str = ""
    extra_data: bytes = b""


@dataclass
class AbstractIdentifyResponse(AbstractResultMessage):
    """The coordinator's answer to a registration."""

    version: str = ""
    extra_data: bytes = b""
    identified: bool = False


@dataclass
class MergedWarpMessage:
    """Several requests sent together in one frame."""

    type_code: ClassVar[MessageType] = MessageType.SEATA_MERGE

    msgs: list = field(default_factory=list)
    msg_ids: list[int] = field(default_factory=list)


@dataclass
class MergeResultMessage:
    """Responses to a merged request, in the same order."""

    type_code: ClassVar[MessageType] = MessageType.SEATA_MERGE_RESULT

    msgs: list = field(default_factory=list)


@dataclass
class RpcMessage:
    """One frame of the transport: headers and a body."""

    id: int = 0
    type: GettyRequestType = GettyRequestType.REQUEST_SYNC
    codec: int = 0
    compressor: int = 0
    head_map: dict[str, str] = field(default_factory=dict)
    body: Any = None


@dataclass(eq=False)
class MessageFuture:
    """The pending answer to a request, completed when ``done`` is set."""

    id: int = 0
    err: Optional[BaseException] = None
    response: Any = None
    done: threading.Event = field(default_factory=threading.Event)

    @classmethod
    def from_message(cls, message: RpcMessage) -> "MessageFuture":
        """A future waiting for the answer to ``message``."""
        return cls(id=message.id)


@dataclass(frozen=True)
class HeartBeatMessage:
    """Keep-alive ping or its pong."""

    type_code: ClassVar[MessageType] = MessageType.HEARTBEAT_MSG

    ping: bool = False

    def __str__(self) -> str:
        return "services ping" if self.ping else "services pong"


HEARTBEAT_MESSAGE_PING = HeartBeatMessage(True)
HEARTBEAT_MESSAGE_PONG = HeartBeatMessage(False)


# Requests


@dataclass
class AbstractBranchEndRequest:
    """Phase-two instruction for one branch."""

    xid: str = ""
    branch_id: int = 0
    branch_type: BranchType = BranchType.AT
    resource_id: str = ""
    application_data: bytes = b""


@dataclass
class AbstractGlobalEndRequest:
    """Request that names a global transaction."""

    xid: str = ""
    extra_data: bytes = b""


@dataclass
class BranchRegisterRequest:
    type_code: ClassVar[MessageType] = MessageType.BRANCH_REGISTER

    xid: str = ""
    branch_type: BranchType = BranchType.AT
    resource_id: str = ""
    lock_key: str = ""
    application_data: bytes = b""


@dataclass
class BranchReportRequest:
    type_code: ClassVar[MessageType] = MessageType.BRANCH_STATUS_REPORT

    xid: str = ""
    branch_id: int = 0
    resource_id: str = ""
    status: BranchStatus = BranchStatus.UNKNOWN
    application_data: bytes = b""
    branch_type: BranchType = BranchType.AT


@dataclass
class BranchCommitRequest(AbstractBranchEndRequest):
    type_code: ClassVar[MessageType] = MessageType.BRANCH_COMMIT


@dataclass
class BranchRollbackRequest(AbstractBranchEndRequest):
    type_code: ClassVar[MessageType] = MessageType.BRANCH_ROLLBACK


@dataclass
class GlobalBeginRequest:
    type_code: ClassVar[MessageType] = MessageType.GLOBAL_BEGIN

    timeout: int = 0
    transaction_name: str = ""


@dataclass
class GlobalStatusRequest(AbstractGlobalEndRequest):
    type_code: ClassVar[MessageType] = MessageType.GLOBAL_STATUS


@dataclass
class GlobalLockQueryRequest(BranchRegisterRequest):
    type_code: ClassVar[MessageType] = MessageType.GLOBAL_LOCK_QUERY


@dataclass
class GlobalReportRequest(AbstractGlobalEndRequest):
    # The protocol sends a report under the global status type code.
    type_code: ClassVar[MessageType] = MessageType.GLOBAL_STATUS

    global_status: GlobalStatus = GlobalStatus.UNKNOWN


@dataclass
class GlobalCommitRequest(AbstractGlobalEndRequest):
    type_code: ClassVar[MessageType] = MessageType.GLOBAL_COMMIT


@dataclass
class GlobalRollbackRequest(AbstractGlobalEndRequest):
    type_code: ClassVar[MessageType] = MessageType.GLOBAL_ROLLBACK


@dataclass
class UndoLogDeleteRequest:
    type_code: ClassVar[MessageType] = MessageType.RM_DELETE_UNDOLOG

    resource_id: str = ""
    save_days: int = 0
    branch_type: BranchType = BranchType.AT


@dataclass
class RegisterTMRequest(AbstractIdentifyRequest):
    type_code: ClassVar[MessageType] = MessageType.REG_CLT


@dataclass
class RegisterRMRequest(AbstractIdentifyRequest):
    type_code: ClassVar[MessageType] = MessageType.REG_RM

    resource_ids: str = ""


# Responses


@dataclass
class AbstractTransactionResponse(AbstractResultMessage):
    """Result that also carries a transaction exception code."""

    transaction_exception_code: TransactionExceptionCode = TransactionExceptionCode.UNKNOWN


@dataclass
class AbstractBranchEndResponse(AbstractTransactionResponse):
    """Result of a phase-two instruction for one branch."""

    xid: str = ""
    branch_id: int = 0
    branch_status: BranchStatus = BranchStatus.UNKNOWN


@dataclass
class AbstractGlobalEndResponse(AbstractTransactionResponse):
    """Result that reports a global transaction's status."""

    global_status: GlobalStatus = GlobalStatus.UNKNOWN


@dataclass
class BranchRegisterResponse(AbstractTransactionResponse):
    type_code: ClassVar[MessageType] = MessageType.BRANCH_REGISTER_RESULT

    branch_id: int = 0


@dataclass
class RegisterTMResponse(AbstractIdentifyResponse):
    type_code: ClassVar[MessageType] = MessageType.REG_CLT_RESULT


@dataclass
class BranchReportResponse(AbstractTransactionResponse):
    type_code: ClassVar[MessageType] = MessageType.BRANCH_STATUS_REPORT_RESULT


@dataclass
class BranchCommitResponse(AbstractBranchEndResponse):
    type_code: ClassVar[MessageType] = MessageType.BRANCH_COMMIT_RESULT


@dataclass
class BranchRollbackResponse(AbstractBranchEndResponse):
    type_code: ClassVar[MessageType] = MessageType.BRANCH_ROLLBACK_RESULT


@dataclass
class GlobalBeginResponse(AbstractTransactionResponse):
    type_code: ClassVar[MessageType] = MessageType.GLOBAL_BEGIN_RESULT

    xid: str = ""
    extra_data: bytes = b""


@dataclass
class GlobalStatusResponse(AbstractGlobalEndResponse):
    type_code: ClassVar[MessageType] = MessageType.GLOBAL_STATUS_RESULT


@dataclass
class GlobalLockQueryResponse(AbstractTransactionResponse):
    type_code: ClassVar[MessageType] = MessageType.GLOBAL_LOCK_QUERY_RESULT

    lockable: bool = False


@dataclass
class GlobalReportResponse(AbstractGlobalEndResponse):
    # Answered under the global status result type code.
    type_code: ClassVar[MessageType] = MessageType.GLOBAL_STATUS_RESULT


@dataclass
class GlobalCommitResponse(AbstractGlobalEndResponse):
    type_code: ClassVar[MessageType] = MessageType.GLOBAL_COMMIT_RESULT


@dataclass
class GlobalRollbackResponse(AbstractGlobalEndResponse):
    type_code: ClassVar[MessageType] = MessageType.GLOBAL_ROLLBACK_RESULT


@dataclass
class RegisterRMResponse(AbstractIdentifyResponse):
    type_code: ClassVar[MessageType] = MessageType.REG_RM_RESULT