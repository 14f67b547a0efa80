import pytest

from emctl.kinds import DEFAULT_API_VERSION
from emctl.services import (
    Service,
    ServiceCanary,
    ServiceCanarySpec,
    ServiceInstance,
    ServiceSpec,
    Tenant,
    TenantSpec,
    to_service,
    to_service_canary,
    to_service_instance,
    to_tenant,
)


def test_service_columns_with_and_without_spec():
    service = Service(spec=ServiceSpec(register_tenant="tenant-001"))
    columns = service.columns()
    assert [(c.name, c.value) for c in columns] == [("Tenant", "tenant-001")]
    service.spec = None
    assert service.columns() is None


def test_service_round_trip():
    service = to_service({"name": "svc", "registerTenant": "t1", "sidecar": {"ingressPort": 13001}})
    assert service.kind == "Service"
    assert service.api_version == DEFAULT_API_VERSION
    api = service.to_v2alpha1()
    assert api["name"] == "svc"
    assert api["registerTenant"] == "t1"
    assert api["sidecar"] == {"ingressPort": 13001}
    again = to_service(api)
    assert again.spec == service.spec


def test_service_without_spec_to_v2alpha1():
    service = to_service({"name": "x"})
    service.spec = None
    api = service.to_v2alpha1()
    assert api["name"] == "x"
    assert api["registerTenant"] == ""
    assert api["sidecar"] is None


def test_service_dict_round_trip():
    service = to_service({"name": "svc", "registerTenant": "t1", "mock": {"enabled": True}})
    restored = Service.from_dict(service.to_dict())
    assert restored == service


def test_service_canary_columns_sorted_labels():
    canary = ServiceCanary(
        spec=ServiceCanarySpec(
            priority=5,
            selector={"matchServices": ["a", "b"], "matchInstanceLabels": {"z": "1", "a": "2"}},
        )
    )
    values = {c.name: c.value for c in canary.columns()}
    assert values == {"Services": "a,b", "InstanceLabels": "a=2,z=1", "Priority": "5"}


def test_service_canary_round_trip():
    api = {"name": "c1", "priority": 3, "selector": {"matchServices": ["s"]}, "trafficRules": {"headers": {}}}
    canary = to_service_canary(api)
    assert canary.kind == "ServiceCanary"
    assert canary.to_v2alpha1() == api
    assert ServiceCanary.from_dict(canary.to_dict()) == canary


def test_service_canary_no_spec():
    assert ServiceCanary().columns() is None


def test_service_instance_name_and_columns():
    instance = to_service_instance(
        {"serviceName": "aaa", "instanceID": "bbb", "ip": "10.0.0.1", "port": 8080,
         "status": "UP", "registryName": "reg", "labels": {"v": "1"}}
    )
    assert instance.name == "aaa/bbb"
    assert instance.labels == {"v": "1"}
    values = [(c.name, c.value) for c in instance.columns()]
    assert values == [("RegistryName", "reg"), ("IP", "10.0.0.1"), ("Port", "8080"), ("Status", "UP")]
    assert instance.parse_name() == ("aaa", "bbb")
    instance.spec = None
    assert instance.columns() is None


def test_service_instance_default_port():
    instance = to_service_instance({"serviceName": "aaa", "instanceID": "bbb"})
    assert {c.name: c.value for c in instance.columns()}["Port"] == "0"


@pytest.mark.parametrize("name", ["", "abc", "a/b/c"])
def test_service_instance_parse_name_invalid(name):
    instance = ServiceInstance()
    instance.metadata.name = name
    with pytest.raises(ValueError):
        instance.parse_name()


def test_tenant_columns_and_round_trip():
    tenant = to_tenant({"name": "t", "services": ["a", "b"], "description": "desc"})
    assert [(c.name, c.value) for c in tenant.columns()] == [("Services", "a,b"), ("Description", "desc")]
    assert tenant.to_v2alpha1() == {"name": "t", "services": ["a", "b"], "description": "desc"}
    assert Tenant.from_dict(tenant.to_dict()) == tenant


def test_tenant_empty_spec_and_none():
    tenant = Tenant(spec=TenantSpec())
    assert [(c.name, c.value) for c in to_tenant(tenant.to_v2alpha1()).columns()] == [
        ("Services", ""),
        ("Description", ""),
    ]
    tenant.spec = None
    assert tenant.columns() is None