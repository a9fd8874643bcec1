from unittest import mock

import pytest

from nacoskit.constant import ServerConfig
from nacoskit.nacos_server import (
    get_address,
    get_sign_headers,
    parse_server_list,
    sign_with_hmac_sha1,
)

FIXED_NS = 1_600_000_000_123_456_789
FIXED_MS = "1600000000123"


def test_get_address_with_scheme():
    cfg = ServerConfig(
        context_path="/nacos", port=80, ip_addr="console.nacos.io", scheme="https"
    )
    assert get_address(cfg) == "https://console.nacos.io:80"


def test_get_address_without_scheme():
    cfg = ServerConfig(context_path="/nacos", port=80, ip_addr="http://console.nacos.io")
    assert get_address(cfg) == "http://console.nacos.io:80"
    cfg.ip_addr = "https://console.nacos.io"
    assert get_address(cfg) == "https://console.nacos.io:80"


def test_sign_with_hmac_sha1_known_vector():
    assert sign_with_hmac_sha1("", "") == "+9sdGxiqbAgyS31ktx+3Y3BpDh0="


def test_sign_with_hmac_sha1_is_deterministic_and_text_dependent():
    first = sign_with_hmac_sha1("group+1", "secret")
    assert first == sign_with_hmac_sha1("group+1", "secret")
    assert first != sign_with_hmac_sha1("group+2", "secret")
    assert len(first) == 28


@mock.patch("time.time_ns", return_value=FIXED_NS)
def test_sign_headers_without_resource(_time_ns):
    headers = get_sign_headers({}, {"secretKey": "secret"})
    assert headers["timeStamp"] == FIXED_MS
    assert headers["Spas-Signature"] == sign_with_hmac_sha1(FIXED_MS, "secret")


@mock.patch("time.time_ns", return_value=FIXED_NS)
def test_sign_headers_with_group(_time_ns):
    headers = get_sign_headers({"group": "g1"}, {"secretKey": "secret"})
    assert headers["Spas-Signature"] == sign_with_hmac_sha1(f"g1+{FIXED_MS}", "secret")


@mock.patch("time.time_ns", return_value=FIXED_NS)
def test_sign_headers_with_tenant_and_group(_time_ns):
    headers = get_sign_headers({"tenant": "t1", "group": "g1"}, {"secretKey": "secret"})
    assert headers["Spas-Signature"] == sign_with_hmac_sha1(
        f"t1+g1+{FIXED_MS}", "secret"
    )
    assert set(headers) == {"timeStamp", "Spas-Signature"}


def test_parse_server_list_defaults_and_skips():
    servers = parse_server_list("1.2.3.4:9000\n5.6.7.8\n\nbad:port\n", "")
    assert servers == [
        ServerConfig(scheme="http", ip_addr="1.2.3.4", port=9000, context_path="/nacos"),
        ServerConfig(scheme="http", ip_addr="5.6.7.8", port=8848, context_path="/nacos"),
    ]


def test_parse_server_list_keeps_context_path_and_trims():
    servers = parse_server_list("  10.0.0.1:80  ", "/ns")
    assert servers == [
        ServerConfig(scheme="http", ip_addr="10.0.0.1", port=80, context_path="/ns")
    ]


@pytest.mark.parametrize("text", ["", "\n\n", "host:x\n"])
def test_parse_server_list_empty_results(text):
    assert parse_server_list(text, "/nacos") == []


def test_parse_server_list_extra_colons_use_default_port():
    servers = parse_server_list("a:b:c", "/nacos")
    assert [(s.ip_addr, s.port) for s in servers] == [("a", 8848)]