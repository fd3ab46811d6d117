"""Context and attachment keys shared by the transaction client."""

START_TIME = "action-start-time"
HOST_NAME = "host-name"
ACTION_CONTEXT = "actionContext"

SEATA_XID_KEY = "SEATA_XID"
XID_KEY = "TX_XID"
MDC_XID_KEY = "X-TX-XID"
MDC_BRANCH_ID_KEY = "X-TX-BRANCH-ID"
BRANCH_TYPE_KEY = "TX_BRANCH_TYPE"
GLOBAL_LOCK_KEY = "TX_LOCK"
SEATA_FILTER_KEY = "seataDubboFilter"

__all__ = [
    "START_TIME",
    "HOST_NAME",
    "ACTION_CONTEXT",
    "SEATA_XID_KEY",
    "XID_KEY",
    "MDC_XID_KEY",
    "MDC_BRANCH_ID_KEY",
    "BRANCH_TYPE_KEY",
    "GLOBAL_LOCK_KEY",
    "SEATA_FILTER_KEY",
]