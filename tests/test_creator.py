import pytest

from emctl.creator import ObjectCreator
from emctl.custom import CustomResource, CustomResourceKind
from emctl.kinds import DEFAULT_API_VERSION
from emctl.meshcontroller import MeshController
from emctl.meta import MeshResource, MetaData, VersionKind
from emctl.observability import (
    ObservabilityMetrics,
    ObservabilityOutputServer,
    ObservabilityTracings,
)
from emctl.policies import LoadBalance, Mock, Resilience
from emctl.services import Service, ServiceCanary, ServiceInstance, Tenant
from emctl.traffic import HTTPRouteGroup, Ingress, TrafficTarget


@pytest.mark.parametrize(
    "kind, cls",
    [
        ("CustomResourceKind", CustomResourceKind),
        ("Ingress", Ingress),
        ("LoadBalance", LoadBalance),
        ("MeshController", MeshController),
        ("ObservabilityMetrics", ObservabilityMetrics),
        ("ObservabilityOutputServer", ObservabilityOutputServer),
        ("ObservabilityTracings", ObservabilityTracings),
        ("Resilience", Resilience),
        ("Service", Service),
        ("ServiceInstance", ServiceInstance),
        ("Tenant", Tenant),
        ("Mock", Mock),
        ("HTTPRouteGroup", HTTPRouteGroup),
        ("TrafficTarget", TrafficTarget),
        ("ServiceCanary", ServiceCanary),
        ("CustomResource", CustomResource),
    ],
)
def test_new_from_kind(kind, cls):
    obj = ObjectCreator().new_from_kind(VersionKind(kind=kind))
    assert type(obj) is cls
    assert obj.kind == kind
    assert obj.api_version == DEFAULT_API_VERSION
    assert obj.name == ""


def test_unknown_kind_is_custom_resource():
    obj = ObjectCreator().new_from_kind(VersionKind(api_version="v9", kind="ShadowService"))
    assert isinstance(obj, CustomResource)
    assert obj.kind == "ShadowService"
    assert obj.api_version == "v9"


def test_new_from_resource_keeps_name_drops_labels():
    resource = MeshResource(
        version_kind=VersionKind(api_version=DEFAULT_API_VERSION, kind="Service"),
        metadata=MetaData(name="service-001", labels={"a": "b"}),
    )
    obj = ObjectCreator().new_from_resource(resource)
    assert isinstance(obj, Service)
    assert obj.name == "service-001"
    assert obj.labels is None
    assert obj.spec is None


def test_created_objects_are_independent():
    creator = ObjectCreator()
    first = creator.new_from_kind(VersionKind(kind="Tenant"))
    second = creator.new_from_kind(VersionKind(kind="Tenant"))
    first.metadata.name = "changed"
    assert second.name == ""