from datetime import timedelta

from seata.config import (
    ATConfig,
    ClientConfig,
    GettyConfig,
    get_client_config,
    get_default_client_config,
    get_default_getty_config,
)


def test_default_getty_config_values():
    cfg = get_default_getty_config()
    assert cfg.reconnect_interval == 0
    assert cfg.connection_num == 1
    assert cfg.heartbeat_period == timedelta(seconds=10)
    param = cfg.getty_session_param
    assert param.compress_encoding is False
    assert param.tcp_no_delay is True
    assert param.tcp_keep_alive is True
    assert param.keep_alive_period == timedelta(seconds=180)
    assert param.tcp_r_buf_size == 2144
    assert param.tcp_w_buf_size == 65536
    assert param.tcp_read_timeout == timedelta(seconds=1)
    assert param.tcp_write_timeout == timedelta(seconds=5)
    assert param.wait_timeout == timedelta(seconds=1)
    assert param.cron_period == timedelta(seconds=1)
    assert param.max_msg_len == 4096
    assert param.session_name == "rpc_client"


def test_default_getty_config_is_fresh_each_call():
    first = get_default_getty_config()
    first.getty_session_param.max_msg_len = 1
    assert get_default_getty_config().getty_session_param.max_msg_len == 4096


def test_client_config_has_only_transport_defaults():
    cfg = get_client_config()
    assert cfg.application_id == ""
    assert cfg.transaction_service_group == ""
    assert cfg.seata_version == ""
    assert cfg.enable_client_batch_send_request is False
    assert cfg.getty_config == get_default_getty_config()
    assert cfg.at_config == ATConfig()


def test_default_client_config():
    cfg = get_default_client_config("order-service")
    assert cfg.application_id == "order-service"
    assert cfg.transaction_service_group == "127.0.0.1:8091"
    assert cfg.seata_version == "1.1.0"
    assert cfg.enable_client_batch_send_request is False
    assert cfg.getty_config == get_default_getty_config()


def test_plain_client_config_differs_from_default_transport():
    cfg = ClientConfig()
    assert cfg.getty_config == GettyConfig()
    assert cfg.getty_config != get_default_getty_config()


def test_client_configs_do_not_share_nested_state():
    a = ClientConfig()
    b = ClientConfig()
    a.at_config.dsn = "db"
    assert b.at_config.dsn == ""