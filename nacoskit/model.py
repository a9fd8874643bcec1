"""Data objects exchanged with the configuration and naming servers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import IntEnum
from typing import Any


class State(IntEnum):
    """Lifecycle state of a heartbeat task."""

    RUNNING = 0
    SHUTDOWN = 1


@dataclass
class ConfigItem:
    """A single configuration entry."""

    id: str = field(default="", metadata={"param": "id"})
    data_id: str = field(default="", metadata={"param": "dataId"})
    group: str = field(default="", metadata={"param": "group"})
    content: str = field(default="", metadata={"param": "content"})
    md5: str = field(default="", metadata={"param": "md5"})
    tenant: str = field(default="", metadata={"param": "tenant"})
    appname: str = field(default="", metadata={"param": "appname"})


@dataclass
class ConfigPage:
    """One page of a configuration search."""

    total_count: int = field(default=0, metadata={"param": "totalCount"})
    page_number: int = field(default=0, metadata={"param": "pageNumber"})
    pages_available: int = field(default=0, metadata={"param": "pagesAvailable"})
    page_items: list[ConfigItem] = field(
        default_factory=list, metadata={"param": "pageItems"}
    )


def _require_mapping(data: Any) -> dict:
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _str(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key}: expected a string, got {type(value).__name__}")
    return value


def _bool(data: dict, key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"{key}: expected a boolean, got {type(value).__name__}")
    return value


def _uint(data: dict, key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key}: expected an integer, got {type(value).__name__}")
    if not 0 <= value < 1 << 64:
        raise ValueError(f"{key}: {value} is out of range for an unsigned integer")
    return value


def _float(data: dict, key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key}: expected a number, got {type(value).__name__}")
    return float(value)


def _str_map(data: dict, key: str) -> dict[str, str]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise TypeError(f"{key}: expected an object of strings")
    return dict(value)


@dataclass
class Instance:
    """A registered service instance."""

    valid: bool = False
    marked: bool = False
    instance_id: str = ""
    port: int = 0
    ip: str = ""
    weight: float = 0.0
    metadata: dict[str, str] = field(default_factory=dict)
    cluster_name: str = ""
    service_name: str = ""
    enable: bool = False
    healthy: bool = False
    ephemeral: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> Instance:
        """Build an instance from its JSON object."""
        data = _require_mapping(data)
        return cls(
            valid=_bool(data, "valid"),
            marked=_bool(data, "marked"),
            instance_id=_str(data, "instanceId"),
            port=_uint(data, "port"),
            ip=_str(data, "ip"),
            weight=_float(data, "weight"),
            metadata=_str_map(data, "metadata"),
            cluster_name=_str(data, "clusterName"),
            service_name=_str(data, "serviceName"),
            enable=_bool(data, "enabled"),
            healthy=_bool(data, "healthy"),
            ephemeral=_bool(data, "ephemeral"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for this instance."""
        return {
            "valid": self.valid,
            "marked": self.marked,
            "instanceId": self.instance_id,
            "port": self.port,
            "ip": self.ip,
            "weight": self.weight,
            "metadata": dict(self.metadata),
            "clusterName": self.cluster_name,
            "serviceName": self.service_name,
            "enabled": self.enable,
            "healthy": self.healthy,
            "ephemeral": self.ephemeral,
        }


@dataclass
class Service:
    """A service together with its hosts."""

    dom: str = ""
    cache_millis: int = 0
    use_specified_url: bool = False
    hosts: list[Instance] = field(default_factory=list)
    checksum: str = ""
    last_ref_time: int = 0
    env: str = ""
    clusters: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Service:
        """Build a service from its JSON object."""
        data = _require_mapping(data)
        hosts = data.get("hosts")
        if hosts is None:
            hosts = []
        if not isinstance(hosts, list):
            raise TypeError(f"hosts: expected an array, got {type(hosts).__name__}")
        return cls(
            dom=_str(data, "dom"),
            cache_millis=_uint(data, "cacheMillis"),
            use_specified_url=_bool(data, "useSpecifiedUrl"),
            hosts=[Instance.from_dict(host) for host in hosts],
            checksum=_str(data, "checksum"),
            last_ref_time=_uint(data, "lastRefTime"),
            env=_str(data, "env"),
            clusters=_str(data, "clusters"),
            metadata=_str_map(data, "metadata"),
            name=_str(data, "name"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for this service."""
        return {
            "dom": self.dom,
            "cacheMillis": self.cache_millis,
            "useSpecifiedUrl": self.use_specified_url,
            "hosts": [host.to_dict() for host in self.hosts],
            "checksum": self.checksum,
            "lastRefTime": self.last_ref_time,
            "env": self.env,
            "clusters": self.clusters,
            "metadata": dict(self.metadata),
            "name": self.name,
        }


@dataclass
class ServiceSelector:
    """Selector expression attached to a service."""

    selector: str = ""


@dataclass
class ServiceInfo:
    """Descriptive information about a service."""

    app: str = ""
    group: str = ""
    health_check_mode: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    name: str = ""
    protect_threshold: float = 0.0
    selector: ServiceSelector = field(default_factory=ServiceSelector)


@dataclass
class ClusterHealthChecker:
    """Kind of health check a cluster uses."""

    type: str = ""


@dataclass
class Cluster:
    """A cluster of a service."""

    service_name: str = ""
    name: str = ""
    healthy_checker: ClusterHealthChecker = field(default_factory=ClusterHealthChecker)
    default_port: int = 0
    default_check_port: int = 0
    use_ip_port_for_check: bool = False
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class ServiceDetail:
    """A service with its clusters."""

    service: ServiceInfo = field(default_factory=ServiceInfo)
    clusters: list[Cluster] = field(default_factory=list)


@dataclass
class SubscribeService:
    """An instance as delivered to subscribers."""

    cluster_name: str = ""
    enable: bool = False
    instance_id: str = ""
    ip: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    port: int = 0
    service_name: str = ""
    valid: bool = False
    weight: float = 0.0


@dataclass
class BeatInfo:
    """Heartbeat payload for an instance."""

    ip: str = ""
    port: int = 0
    weight: float = 0.0
    service_name: str = ""
    cluster: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    scheduled: bool = False
    period: timedelta = field(default_factory=timedelta)
    state: State = State.RUNNING


@dataclass
class ExpressionSelector:
    """A typed selector expression."""

    type: str = ""
    expression: str = ""


@dataclass
class ServiceList:
    """A page of service names."""

    count: int = 0
    doms: list[str] = field(default_factory=list)