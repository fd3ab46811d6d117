"""Client and transport configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta


@dataclass
class GettySessionParam:
    """TCP parameters of one transport session."""

    compress_encoding: bool = False
    tcp_no_delay: bool = False
    tcp_keep_alive: bool = False
    keep_alive_period: timedelta = timedelta(0)
    cron_period: timedelta = timedelta(0)
    tcp_r_buf_size: int = 0
    tcp_w_buf_size: int = 0
    tcp_read_timeout: timedelta = timedelta(0)
    tcp_write_timeout: timedelta = timedelta(0)
    wait_timeout: timedelta = timedelta(0)
    max_msg_len: int = 0
    session_name: str = ""


@dataclass
class GettyConfig:
    """Transport settings: session pool, heartbeat and TCP parameters."""

    reconnect_interval: int = 0
    connection_num: int = 0
    heartbeat_period: timedelta = timedelta(0)
    getty_session_param: GettySessionParam = field(default_factory=GettySessionParam)


@dataclass
class ATConfig:
    """Settings of automatic-transaction branches."""

    dsn: str = ""
    report_retry_count: int = 0
    report_success_enable: bool = False
    lock_retry_interval: timedelta = timedelta(0)
    lock_retry_times: int = 0


@dataclass
class ClientConfig:
    """Everything a transaction client is configured with."""

    application_id: str = ""
    transaction_service_group: str = ""
    enable_client_batch_send_request: bool = False
    seata_version: str = ""
    getty_config: GettyConfig = field(default_factory=GettyConfig)
    at_config: ATConfig = field(default_factory=ATConfig)


def get_default_getty_config() -> GettyConfig:
    """Transport settings used when none are configured."""
    return GettyConfig(
        reconnect_interval=0,
        connection_num=1,
        heartbeat_period=timedelta(seconds=10),
        getty_session_param=GettySessionParam(
            compress_encoding=False,
            tcp_no_delay=True,
            tcp_keep_alive=True,
            keep_alive_period=timedelta(seconds=180),
            tcp_r_buf_size=2144,
            tcp_w_buf_size=65536,
            tcp_read_timeout=timedelta(seconds=1),
            tcp_write_timeout=timedelta(seconds=5),
            wait_timeout=timedelta(seconds=1),
            cron_period=timedelta(seconds=1),
            max_msg_len=4096,
            session_name="rpc_client",
        ),
    )


def get_client_config() -> ClientConfig:
    """An otherwise empty client configuration with default transport settings."""
    return ClientConfig(getty_config=get_default_getty_config())


def get_default_client_config(application_id: str) -> ClientConfig:
    """Client configuration for ``application_id`` talking to a local server."""
    return ClientConfig(
        application_id=application_id,
        transaction_service_group="127.0.0.1:8091",
        enable_client_batch_send_request=False,
        seata_version="1.1.0",
        getty_config=get_default_getty_config(),
    )