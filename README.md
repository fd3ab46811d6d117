# seata

Client-side building blocks for talking to a distributed transaction
coordinator: the message types of its binary protocol, codecs that turn
registration and branch messages into bytes and back, client configuration
and a small pluggable logger.

## What is in the package

- `seata.message_types`: `MessageType`, `GettyRequestType`, `GlobalStatus`
  and `ResultCode`, plus the frame constants `MAGIC_CODE_BYTES`, `VERSION`,
  `MAX_FRAME_LENGTH` and `V1_HEAD_LENGTH`.
- `seata.message`: dataclasses for every request and response, each carrying
  its `type_code`; also `RpcMessage`, `MessageFuture` and `HeartBeatMessage`
  (`HEARTBEAT_MESSAGE_PING`, `HEARTBEAT_MESSAGE_PONG`).
- `seata.branch`: `BranchType` (AT, TCC, SAGA, XA) and `BranchStatus`.
- `seata.bytebuffer`: `ByteBuffer`, a big-endian buffer written at the end and
  read from the front, with helpers such as `write_string16_length` and
  `read_string16_length` for length-prefixed strings.
- `seata.codecs.manager`: `Codec`, `CodecType`, `CodecManager` and
  `get_codec_manager()`, the process-wide registry.
- `seata.codecs.common`: shared layouts for global-end and identify messages.
- `seata.codecs.register`: codecs for TM and RM registration requests and
  responses.
- `seata.codecs.branch`: codecs for branch register, commit and rollback
  requests and responses.
- `seata.config`: `ClientConfig`, `GettyConfig`, `GettySessionParam`,
  `ATConfig` and the default builders.
- `seata.log`: `LogLevel`, the `Logger` protocol and module-level logging
  functions.
- `seata.errors`: `TransactionExceptionCode`, `TransactionException`,
  `TooManySessionsError` and `HeartBeatTimeoutError`.
- `seata.constants`: context and attachment keys such as `SEATA_XID_KEY`.
- `seata.reference`: `get_reference(service)` names a service by its
  `reference()` method, or by its class.
- `seata.netutil`: `get_local_ip()`, which always returns `"127.0.0.1"`.

## Encoding and decoding a message

```python
from seata.branch import BranchType
from seata.codecs.branch import BranchRegisterRequestCodec
from seata.message import BranchRegisterRequest

request = BranchRegisterRequest(
    xid="abc134",
    branch_type=BranchType.TCC,
    resource_id="124",
    lock_key="a:1,b:2",
    application_data=b"abc",
)

codec = BranchRegisterRequestCodec()
payload = codec.encode(request)
assert codec.decode(payload) == request
```

Importing `seata.codecs.branch` or `seata.codecs.register` registers their
codecs with the process-wide manager. Through the manager, an encoded frame
starts with the two-byte big-endian message type, so decoding needs nothing
but the bytes:

```python
from seata.codecs.manager import CodecType, get_codec_manager

manager = get_codec_manager()
frame = manager.encode(CodecType.SEATA, request)
assert manager.decode(CodecType.SEATA, frame) == request
```

A message whose type has no registered codec makes `encode` and `decode`
log an error and raise `LookupError`.

## Configuration

```python
from seata.config import get_default_client_config

config = get_default_client_config("my-application")
print(config.transaction_service_group)   # 127.0.0.1:8091
print(config.getty_config.heartbeat_period)  # 0:00:10
```

## Logging

```python
from seata import log

log.init_logging("/tmp/seata.log", log.LogLevel.parse("debug"))
log.infof("branch %s registered", 42)
```

`init_logging` writes to a file rotated at 10 MB with five backups. Any
object with the methods of `seata.log.Logger` can be installed with
`log.set_logger`. `panic` logs and raises `RuntimeError`; `fatal` logs and
raises `SystemExit(1)`.

## What the package does not do

- There are no codecs for the global transaction messages (begin, commit,
  rollback, status and report). Their message classes exist in
  `seata.message`, but `CodecManager` cannot encode or decode them.
- There is no network transport: nothing opens connections, frames messages
  on a socket, sends heartbeats or completes a `MessageFuture`.
- There is no transaction manager or resource manager that begins, commits
  or rolls back transactions, and no command-line program.

## Tests

The tests use pytest, installed with the `test` extra of the package.