"""Client and server settings and the keys the naming server reserves."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from typing import Any

from nacoskit.file import get_current_path

DEFAULT_CONTEXT_PATH = "/nacos"
DEFAULT_SERVER_SCHEME = "http"

HEART_BEAT_TIMEOUT = "preserved.heart.beat.timeout"
IP_DELETE_TIMEOUT = "preserved.ip.delete.timeout"
HEART_BEAT_INTERVAL = "preserved.heart.beat.interval"


@dataclass
class ServerConfig:
    """Where a server can be reached."""

    scheme: str = ""
    context_path: str = ""
    ip_addr: str = ""
    port: int = 0


@dataclass
class ClientConfig:
    """Settings of a client.

    Fields left at their zero values here get their defaults only through
    ``new_client_config``.
    """

    timeout_ms: int = 0
    listen_interval: int = 0
    beat_interval: int = 0
    namespace_id: str = ""
    app_name: str = ""
    endpoint: str = ""
    region_id: str = ""
    access_key: str = ""
    secret_key: str = ""
    open_kms: bool = False
    cache_dir: str = ""
    update_thread_num: int = 0
    not_load_cache_at_start: bool = False
    update_cache_when_empty: bool = False
    username: str = ""
    password: str = ""
    log_dir: str = ""
    rotate_time: str = ""
    max_age: int = 0
    log_level: str = ""
    context_path: str = ""


def new_client_config(**kwargs: Any) -> ClientConfig:
    """Return a client config with defaults, overridden by keyword arguments.

    Raises TypeError for a keyword that is not a ClientConfig field.
    """
    current = get_current_path()
    config = ClientConfig(
        timeout_ms=10 * 1000,
        beat_interval=5 * 1000,
        open_kms=False,
        cache_dir=current + os.sep + "cache",
        update_thread_num=20,
        not_load_cache_at_start=False,
        update_cache_when_empty=False,
        log_dir=current + os.sep + "log",
        rotate_time="24h",
        max_age=3,
        log_level="info",
    )
    return dataclasses.replace(config, **kwargs)


def new_server_config(ip_addr: str, port: int, **kwargs: Any) -> ServerConfig:
    """Return a server config with the default scheme and context path.

    Keyword arguments override any field; an unknown one raises TypeError.
    """
    config = ServerConfig(
        ip_addr=ip_addr,
        port=port,
        context_path=DEFAULT_CONTEXT_PATH,
        scheme=DEFAULT_SERVER_SCHEME,
    )
    return dataclasses.replace(config, **kwargs)