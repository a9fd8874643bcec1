import os

import pytest

from nacoskit.constant import (
    ClientConfig,
    ServerConfig,
    new_client_config,
    new_server_config,
)
from nacoskit.file import get_current_path


def test_new_client_config_defaults():
    config = new_client_config()

    assert config.timeout_ms == 10000
    assert config.endpoint == ""
    assert config.log_level == "info"
    assert config.beat_interval == 5000
    assert config.update_thread_num == 20
    assert config.rotate_time == "24h"

    assert config.log_dir == get_current_path() + os.sep + "log"
    assert config.cache_dir == get_current_path() + os.sep + "cache"

    assert config.max_age == 3
    assert config.not_load_cache_at_start is False
    assert config.update_cache_when_empty is False

    assert config.username == ""
    assert config.password == ""
    assert config.open_kms is False
    assert config.namespace_id == ""
    assert config.region_id == ""
    assert config.access_key == ""
    assert config.secret_key == ""


def test_new_client_config_with_options():
    password = "password"
    config = new_client_config(
        timeout_ms=20000,
        endpoint="http://console.nacos.io:80",
        log_level="error",
        beat_interval=2000,
        update_thread_num=30,
        rotate_time="16h",
        log_dir="/tmp/nacos/log",
        cache_dir="/tmp/nacos/cache",
        max_age=6,
        not_load_cache_at_start=True,
        update_cache_when_empty=True,
        username="nacos",
        password=password,
        open_kms=True,
        region_id="shanghai",
        namespace_id="namespace_1",
        access_key="placeholder",
        secret_key="secret",
    )

    assert config.timeout_ms == 20000
    assert config.endpoint == "http://console.nacos.io:80"
    assert config.log_level == "error"
    assert config.beat_interval == 2000
    assert config.update_thread_num == 30
    assert config.rotate_time == "16h"

    assert config.log_dir == "/tmp/nacos/log"
    assert config.cache_dir == "/tmp/nacos/cache"

    assert config.max_age == 6
    assert config.not_load_cache_at_start is True
    assert config.update_cache_when_empty is True

    assert config.username == "nacos"
    assert config.password == password
    assert config.open_kms is True
    assert config.region_id == "shanghai"
    assert config.namespace_id == "namespace_1"
    assert config.access_key == "placeholder"
    assert config.secret_key == "secret"


def test_new_client_config_rejects_unknown_option():
    with pytest.raises(TypeError):
        new_client_config(no_such_option=1)


def test_new_client_config_returns_independent_objects():
    first = new_client_config()
    second = new_client_config()
    first.log_level = "debug"
    assert second.log_level == "info"


def test_plain_client_config_has_zero_values():
    config = ClientConfig(namespace_id="namespace_1")
    assert config.namespace_id == "namespace_1"
    assert config.timeout_ms == 0
    assert config.log_level == ""


def test_new_server_config():
    config = new_server_config("console.nacos.io", 80)

    assert config.ip_addr == "console.nacos.io"
    assert config.port == 80
    assert config.context_path == "/nacos"
    assert config.scheme == "http"
    assert 0 < config.port < 65535


def test_new_server_config_with_options():
    config = new_server_config(
        "console.nacos.io",
        80,
        context_path="/ns",
        scheme="https",
    )

    assert config.ip_addr == "console.nacos.io"
    assert config.port == 80
    assert config.context_path == "/ns"
    assert config.scheme == "https"
    assert 0 < config.port < 65535


def test_new_server_config_equals_literal():
    assert new_server_config("console.nacos.io", 80) == ServerConfig(
        scheme="http",
        context_path="/nacos",
        ip_addr="console.nacos.io",
        port=80,
    )


def test_new_server_config_rejects_unknown_option():
    with pytest.raises(TypeError):
        new_server_config("console.nacos.io", 80, bogus="x")