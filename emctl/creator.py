"""Creation of empty mesh objects from their kind."""

from __future__ import annotations

from emctl.custom import CustomResource, CustomResourceKind
from emctl.kinds import (
    DEFAULT_API_VERSION,
    KIND_CUSTOM_RESOURCE_KIND,
    KIND_HTTP_ROUTE_GROUP,
    KIND_INGRESS,
    KIND_LOAD_BALANCE,
    KIND_MESH_CONTROLLER,
    KIND_MOCK,
    KIND_OBSERVABILITY_METRICS,
    KIND_OBSERVABILITY_OUTPUT_SERVER,
    KIND_OBSERVABILITY_TRACINGS,
    KIND_RESILIENCE,
    KIND_SERVICE,
    KIND_SERVICE_CANARY,
    KIND_SERVICE_INSTANCE,
    KIND_TENANT,
    KIND_TRAFFIC_TARGET,
    new_mesh_resource,
)
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

__all__ = ["ObjectCreator"]

_KIND_CLASSES: dict[str, type[MeshResource]] = {
    KIND_MESH_CONTROLLER: MeshController,
    KIND_SERVICE: Service,
    KIND_SERVICE_INSTANCE: ServiceInstance,
    KIND_TENANT: Tenant,
    KIND_LOAD_BALANCE: LoadBalance,
    KIND_OBSERVABILITY_TRACINGS: ObservabilityTracings,
    KIND_OBSERVABILITY_OUTPUT_SERVER: ObservabilityOutputServer,
    KIND_OBSERVABILITY_METRICS: ObservabilityMetrics,
    KIND_RESILIENCE: Resilience,
    KIND_MOCK: Mock,
    KIND_INGRESS: Ingress,
    KIND_HTTP_ROUTE_GROUP: HTTPRouteGroup,
    KIND_TRAFFIC_TARGET: TrafficTarget,
    KIND_SERVICE_CANARY: ServiceCanary,
    KIND_CUSTOM_RESOURCE_KIND: CustomResourceKind,
}


class ObjectCreator:
    """Creates empty mesh objects of the class matching a kind.

    Unknown kinds become custom resources.
    """

    def new_from_kind(self, kind: VersionKind) -> MeshResource:
        """Return an unnamed object of the given kind."""
        return self._new(kind, MetaData())

    def new_from_resource(self, resource: MeshResource) -> MeshResource:
        """Return an object of the resource's kind carrying the resource's name."""
        return self._new(resource.version_kind, resource.metadata)

    @staticmethod
    def _new(kind: VersionKind, metadata: MetaData) -> MeshResource:
        api_version = kind.api_version or DEFAULT_API_VERSION
        cls = _KIND_CLASSES.get(kind.kind, CustomResource)
        base = new_mesh_resource(api_version, kind.kind, metadata.name)
        return cls(version_kind=base.version_kind, metadata=base.metadata)