"""Resource kinds, defaults and the generic resource header constructor."""

from __future__ import annotations

from emctl.meta import MeshResource, MetaData, VersionKind

__all__ = [
    "DEFAULT_API_VERSION",
    "LOAD_BALANCE_ROUND_ROBIN_POLICY",
    "DEFAULT_SIDE_INGRESS_PROTOCOL",
    "DEFAULT_SIDE_EGRESS_PROTOCOL",
    "DEFAULT_SIDE_INGRESS_PORT",
    "DEFAULT_SIDE_EGRESS_PORT",
    "KIND_MESH_CONTROLLER",
    "KIND_SERVICE",
    "KIND_SERVICE_INSTANCE",
    "KIND_OBSERVABILITY_METRICS",
    "KIND_OBSERVABILITY_TRACINGS",
    "KIND_OBSERVABILITY_OUTPUT_SERVER",
    "KIND_TENANT",
    "KIND_LOAD_BALANCE",
    "KIND_MOCK",
    "KIND_RESILIENCE",
    "KIND_INGRESS",
    "KIND_HTTP_ROUTE_GROUP",
    "KIND_TRAFFIC_TARGET",
    "KIND_CUSTOM_RESOURCE_KIND",
    "KIND_SERVICE_CANARY",
    "new_mesh_resource",
]

DEFAULT_API_VERSION = "mesh.megaease.com/v2alpha1"

LOAD_BALANCE_ROUND_ROBIN_POLICY = "roundRobin"

DEFAULT_SIDE_INGRESS_PROTOCOL = "http"
DEFAULT_SIDE_EGRESS_PROTOCOL = "http"
DEFAULT_SIDE_INGRESS_PORT = 13001
DEFAULT_SIDE_EGRESS_PORT = 13002

KIND_MESH_CONTROLLER = "MeshController"
KIND_SERVICE = "Service"
KIND_SERVICE_INSTANCE = "ServiceInstance"
KIND_OBSERVABILITY_METRICS = "ObservabilityMetrics"
KIND_OBSERVABILITY_TRACINGS = "ObservabilityTracings"
KIND_OBSERVABILITY_OUTPUT_SERVER = "ObservabilityOutputServer"
KIND_TENANT = "Tenant"
KIND_LOAD_BALANCE = "LoadBalance"
KIND_MOCK = "Mock"
KIND_RESILIENCE = "Resilience"
KIND_INGRESS = "Ingress"
KIND_HTTP_ROUTE_GROUP = "HTTPRouteGroup"
KIND_TRAFFIC_TARGET = "TrafficTarget"
KIND_CUSTOM_RESOURCE_KIND = "CustomResourceKind"
KIND_SERVICE_CANARY = "ServiceCanary"


def new_mesh_resource(api_version: str, kind: str, name: str) -> MeshResource:
    """Return a resource header with the given version, kind and name."""
    return MeshResource(
        version_kind=VersionKind(api_version=api_version, kind=kind),
        metadata=MetaData(name=name),
    )