"""Addressing, request signing and server-list parsing for server calls."""

from __future__ import annotations

import base64
import hashlib
import hmac
import re
import time
from typing import Any, Mapping

from nacoskit import logger
from nacoskit.constant import DEFAULT_CONTEXT_PATH, DEFAULT_SERVER_SCHEME, ServerConfig

DEFAULT_SERVER_PORT = 8848

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")
_UINT64_MASK = (1 << 64) - 1


def _log(level: str, msg: str, *args: Any) -> None:
    log = logger.get_logger()
    if log is not None:
        getattr(log, level)(msg, *args)


def get_address(cfg: ServerConfig) -> str:
    """Return ``scheme://host:port``, keeping a scheme already present in the host."""
    if "http://" in cfg.ip_addr or "https://" in cfg.ip_addr:
        return f"{cfg.ip_addr}:{cfg.port}"
    return f"{cfg.scheme}://{cfg.ip_addr}:{cfg.port}"


def sign_with_hmac_sha1(encrypt_text: str, encrypt_key: str) -> str:
    """Return the base64 encoded HMAC-SHA1 of the text under the key."""
    mac = hmac.new(encrypt_key.encode("utf-8"), encrypt_text.encode("utf-8"), hashlib.sha1)
    return base64.b64encode(mac.digest()).decode("ascii")


def get_sign_headers(
    params: Mapping[str, str], new_headers: Mapping[str, str]
) -> dict[str, str]:
    """Return the timestamp and signature headers for a configuration request.

    The signed resource is ``tenant+group`` when a tenant is given, otherwise
    the group alone; an empty resource signs the timestamp by itself.
    """
    tenant = params.get("tenant", "")
    group = params.get("group", "")
    resource = f"{tenant}+{group}" if tenant else group

    time_stamp = str(time.time_ns() // 1_000_000)
    secret_key = new_headers.get("secretKey", "")
    text = time_stamp if not resource else f"{resource}+{time_stamp}"
    return {
        "timeStamp": time_stamp,
        "Spas-Signature": sign_with_hmac_sha1(text, secret_key),
    }


def parse_server_list(result: str, context_path: str) -> list[ServerConfig]:
    """Parse a newline separated ``host[:port]`` list into server configs.

    Lines with a port that is not a number are logged and skipped; a missing
    port defaults to 8848 and an empty context path to the default one.
    """
    context_path = context_path or DEFAULT_CONTEXT_PATH
    servers: list[ServerConfig] = []
    for line in result.split("\n"):
        if not line:
            continue
        parts = line.strip().split(":")
        port = DEFAULT_SERVER_PORT
        if len(parts) == 2:
            if not _DECIMAL_INT.fullmatch(parts[1]):
                _log(
                    "error",
                    "get port from server:<%s>  error: <%s>",
                    line,
                    f"invalid port {parts[1]!r}",
                )
                continue
            port = int(parts[1]) & _UINT64_MASK
        servers.append(
            ServerConfig(
                scheme=DEFAULT_SERVER_SCHEME,
                ip_addr=parts[0],
                port=port,
                context_path=context_path,
            )
        )
    return servers