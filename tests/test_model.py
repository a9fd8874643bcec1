import dataclasses

import pytest

from nacoskit.model import ConfigItem, Instance, Service


def test_instance_from_dict_reads_json_names():
    inst = Instance.from_dict(
        {
            "instanceId": "inst-1",
            "port": 8848,
            "ip": "10.0.0.10",
            "weight": 10,
            "metadata": {"idc": "shanghai"},
            "clusterName": "cluster-a",
            "serviceName": "demo.go",
            "enabled": True,
            "healthy": True,
            "ephemeral": True,
        }
    )
    assert inst.instance_id == "inst-1"
    assert inst.port == 8848
    assert inst.ip == "10.0.0.10"
    assert inst.weight == 10.0
    assert inst.metadata == {"idc": "shanghai"}
    assert inst.cluster_name == "cluster-a"
    assert inst.service_name == "demo.go"
    assert inst.enable is True
    assert inst.healthy is True
    assert inst.ephemeral is True
    assert inst.valid is False


def test_instance_round_trip():
    inst = Instance(
        instance_id="x",
        port=80,
        ip="10.0.0.11",
        weight=1.5,
        metadata={"a": "b"},
        enable=True,
        marked=True,
    )
    assert Instance.from_dict(inst.to_dict()) == inst


def test_instance_to_dict_uses_enabled_key():
    data = Instance(enable=True).to_dict()
    assert data["enabled"] is True
    assert "enable" not in data


def test_instance_missing_keys_give_defaults():
    assert Instance.from_dict({}) == Instance()


def test_instance_wrong_type_raises():
    with pytest.raises(TypeError):
        Instance.from_dict({"port": "abc"})


def test_instance_negative_port_raises():
    with pytest.raises(ValueError):
        Instance.from_dict({"port": -1})


def test_instance_from_non_object_raises():
    with pytest.raises(TypeError):
        Instance.from_dict([1, 2])


def test_service_round_trip_with_hosts():
    service = Service(
        dom="demo",
        cache_millis=1000,
        hosts=[Instance(ip="10.0.0.12", port=8848), Instance(ip="10.0.0.13")],
        checksum="abc",
        clusters="DEFAULT",
        name="DEFAULT_GROUP@@demo",
    )
    restored = Service.from_dict(service.to_dict())
    assert restored == service
    assert [h.ip for h in restored.hosts] == ["10.0.0.12", "10.0.0.13"]


def test_service_null_hosts_is_empty():
    assert Service.from_dict({"hosts": None, "name": "n"}).hosts == []


def test_service_bad_hosts_raises():
    with pytest.raises(TypeError):
        Service.from_dict({"hosts": "nope"})


def test_config_item_param_names():
    item = ConfigItem()
    names = [f.metadata["param"] for f in dataclasses.fields(item)]
    assert names == ["id", "dataId", "group", "content", "md5", "tenant", "appname"]
    assert all(value == "" for value in dataclasses.asdict(item).values())