"""Request parameter objects for the configuration and naming clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from nacoskit.constant import ClientConfig, ServerConfig
from nacoskit.model import SubscribeService

Listener = Callable[[str, str, str, str], None]
SubscribeCallback = Callable[[list[SubscribeService], Optional[BaseException]], None]


def _param(tag: str, default=None, factory=None):
    if factory is not None:
        return field(default_factory=factory, metadata={"param": tag})
    return field(default=default, metadata={"param": tag})


@dataclass
class NacosClientParam:
    """Settings a client is created from; both parts are optional."""

    client_config: Optional[ClientConfig] = None
    server_configs: list[ServerConfig] = field(default_factory=list)


@dataclass
class ConfigParam:
    """Identifies a configuration entry and, where needed, its content."""

    data_id: str = _param("dataId", "")
    group: str = _param("group", "")
    content: str = _param("content", "")
    datum_id: str = _param("datumId", "")
    on_change: Optional[Listener] = None


@dataclass
class SearchConfigParam:
    """Criteria for a paged configuration search."""

    search: str = _param("search", "")
    data_id: str = _param("dataId", "")
    group: str = _param("group", "")
    tag: str = _param("tag", "")
    app_name: str = _param("appName", "")
    page_no: int = _param("pageNo", 0)
    page_size: int = _param("pageSize", 0)


@dataclass
class RegisterInstanceParam:
    """An instance to register with the naming server."""

    ip: str = _param("ip", "")
    port: int = _param("port", 0)
    weight: float = _param("weight", 0.0)
    enable: bool = _param("enabled", False)
    healthy: bool = _param("healthy", False)
    metadata: Optional[dict[str, str]] = _param("metadata", None)
    cluster_name: str = _param("clusterName", "")
    service_name: str = _param("serviceName", "")
    group_name: str = _param("groupName", "")
    ephemeral: bool = _param("ephemeral", False)


@dataclass
class DeregisterInstanceParam:
    """An instance to remove from the naming server."""

    ip: str = _param("ip", "")
    port: int = _param("port", 0)
    cluster: str = _param("cluster", "")
    service_name: str = _param("serviceName", "")
    group_name: str = _param("groupName", "")
    ephemeral: bool = _param("ephemeral", False)


@dataclass
class GetServiceParam:
    """Selects a service, optionally restricted to some clusters."""

    clusters: list[str] = _param("clusters", factory=list)
    service_name: str = _param("serviceName", "")
    group_name: str = _param("groupName", "")


@dataclass
class GetAllServiceInfoParam:
    """Selects a page of service names."""

    name_space: str = _param("nameSpace", "")
    group_name: str = _param("groupName", "")
    page_no: int = _param("pageNo", 0)
    page_size: int = _param("pageSize", 0)


@dataclass
class SubscribeParam:
    """A subscription to changes of a service's instances."""

    service_name: str = _param("serviceName", "")
    clusters: list[str] = _param("clusters", factory=list)
    group_name: str = _param("groupName", "")
    subscribe_callback: Optional[SubscribeCallback] = None


@dataclass
class SelectAllInstancesParam:
    """Selects every instance of a service."""

    clusters: list[str] = _param("clusters", factory=list)
    service_name: str = _param("serviceName", "")
    group_name: str = _param("groupName", "")


@dataclass
class SelectInstancesParam:
    """Selects the enabled instances of a service, optionally healthy only."""

    clusters: list[str] = _param("clusters", factory=list)
    service_name: str = _param("serviceName", "")
    group_name: str = _param("groupName", "")
    healthy_only: bool = _param("healthyOnly", False)


@dataclass
class SelectOneHealthInstanceParam:
    """Selects one healthy instance of a service."""

    clusters: list[str] = _param("clusters", factory=list)
    service_name: str = _param("serviceName", "")
    group_name: str = _param("groupName", "")