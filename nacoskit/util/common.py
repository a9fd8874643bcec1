"""Small helpers shared by the clients."""

from __future__ import annotations

import dataclasses
import ipaddress
import json
import re
import socket
import threading
import time
from typing import Any, Mapping
from urllib.parse import urlencode

import psutil

from nacoskit import logger
from nacoskit.model import Service

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")
_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)

_local_ip = ""
_private_cidrs: list[ipaddress.IPv4Network | ipaddress.IPv6Network] = []
_cidr_lock = threading.Lock()


def _log(level: str, msg: str, *args: Any) -> None:
    log = logger.get_logger()
    if log is not None:
        getattr(log, level)(msg, *args)


def current_millis() -> int:
    """Return the current Unix time in milliseconds."""
    return time.time_ns() // 1_000_000


def json_to_service(result: str) -> Service | None:
    """Parse a service from JSON, or return None if it cannot be parsed."""
    try:
        data = json.loads(result)
        service = Service() if data is None else Service.from_dict(data)
    except (ValueError, TypeError) as exc:
        _log("error", "failed to unmarshal json string:%s err:%s", result, exc)
        return None
    if not service.hosts:
        _log("warn", "instance list is empty,json string:%s", result)
    return service


def _json_default(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"cannot encode {type(obj).__name__} as JSON")


def to_json_string(obj: Any) -> str:
    """Encode an object as compact JSON; return an empty string on failure."""
    try:
        text = json.dumps(
            obj,
            default=_json_default,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError):
        return ""
    return text.translate(_JSON_ESCAPES)


def _ip_of(address: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
    try:
        return ipaddress.ip_address(address.split("%", 1)[0])
    except ValueError:
        return None


def _up_addresses() -> list[Any]:
    """Return the addresses of interfaces that are up and not loopback."""
    stats = psutil.net_if_stats()
    result = []
    for name, addresses in psutil.net_if_addrs().items():
        stat = stats.get(name)
        if stat is None or not stat.isup:
            continue
        is_loopback = any(
            ip is not None and ip.is_loopback
            for ip in (
                _ip_of(a.address)
                for a in addresses
                if a.family in (socket.AF_INET, socket.AF_INET6)
            )
        )
        if is_loopback:
            continue
        result.extend(addresses)
    return result


def local_ip() -> str:
    """Return the first IPv4 address of an up interface that is not filtered."""
    global _local_ip
    if _local_ip:
        return _local_ip
    try:
        addresses = _up_addresses()
    except OSError as exc:
        _log("error", "get Interfaces failed,err:%s", exc)
        return ""
    for address in addresses:
        if address.family != socket.AF_INET:
            continue
        ip = _ip_of(address.address)
        if ip is None or ip.version != 4 or is_filtered_ip(ip):
            continue
        _local_ip = str(ip)
        break
    if _local_ip:
        _log("info", "Local IP:%s", _local_ip)
    return _local_ip


def set_filter_net_number_and_mask(*args: str) -> None:
    """Add networks such as ``127.0.0.0/8`` whose addresses local_ip skips.

    Raises ValueError on the first entry that is not in CIDR notation.
    """
    for cidr in args:
        if "/" not in cidr:
            raise ValueError(f"invalid CIDR address: {cidr}")
        try:
            network = ipaddress.ip_network(cidr, strict=False)
        except ValueError as exc:
            raise ValueError(f"invalid CIDR address: {cidr}") from exc
        with _cidr_lock:
            _private_cidrs.append(network)


def is_filtered_ip(ip: str | ipaddress.IPv4Address | ipaddress.IPv6Address) -> bool:
    """Return whether an address falls in one of the filtered networks."""
    if isinstance(ip, str):
        ip = ipaddress.ip_address(ip)
    with _cidr_lock:
        networks = list(_private_cidrs)
    return any(ip.version == net.version and ip in net for net in networks)


def get_duration_with_default(
    metadata: Mapping[str, str], key: str, default_duration: int
) -> int:
    """Read a nanosecond duration from metadata, falling back to a default."""
    if key not in metadata:
        return default_duration
    data = metadata[key]
    if not _DECIMAL_INT.fullmatch(data):
        _log("error", "key:%s is not a number", key)
        return default_duration
    value = int(data)
    if not _INT64_MIN <= value <= _INT64_MAX:
        _log("error", "key:%s is not a number", key)
        return default_duration
    return value


def get_url_formed_map(source: Mapping[str, str]) -> str:
    """Form-encode a mapping, sorted by key."""
    return urlencode(sorted(source.items()))