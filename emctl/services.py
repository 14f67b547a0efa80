"""Service resources: services, service canaries, service instances and tenants."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Mapping

from emctl.kinds import (
    DEFAULT_API_VERSION,
    KIND_SERVICE,
    KIND_SERVICE_CANARY,
    KIND_SERVICE_INSTANCE,
    KIND_TENANT,
    new_mesh_resource,
)
from emctl.meta import MeshResource, TableColumn, TableObject

__all__ = [
    "ServiceSpec",
    "Service",
    "ServiceCanarySpec",
    "ServiceCanary",
    "ServiceInstance",
    "TenantSpec",
    "Tenant",
    "to_service",
    "to_service_canary",
    "to_service_instance",
    "to_tenant",
]


def _copy_dict(value: Any) -> dict[str, Any] | None:
    return None if value is None else copy.deepcopy(dict(value))


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


@dataclass
class ServiceSpec:
    """Tenant, sidecar and per-service policies of a service."""

    register_tenant: str = ""
    sidecar: dict[str, Any] | None = None
    mock: dict[str, Any] | None = None
    resilience: dict[str, Any] | None = None
    load_balance: dict[str, Any] | None = None
    observability: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "registerTenant": self.register_tenant,
            "sidecar": copy.deepcopy(self.sidecar),
            "mock": copy.deepcopy(self.mock),
            "resilience": copy.deepcopy(self.resilience),
            "loadBalance": copy.deepcopy(self.load_balance),
            "observability": copy.deepcopy(self.observability),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ServiceSpec":
        return cls(
            register_tenant=_str(data, "registerTenant"),
            sidecar=_copy_dict(data.get("sidecar")),
            mock=_copy_dict(data.get("mock")),
            resilience=_copy_dict(data.get("resilience")),
            load_balance=_copy_dict(data.get("loadBalance")),
            observability=_copy_dict(data.get("observability")),
        )


@dataclass
class Service(MeshResource, TableObject):
    """A service of the mesh."""

    spec: ServiceSpec | None = None

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["spec"] = None if self.spec is None else self.spec.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Service":
        resource = super().from_dict(data)
        spec = data.get("spec")
        resource.spec = None if spec is None else ServiceSpec.from_dict(spec)
        return resource

    def columns(self) -> list[TableColumn] | None:
        """Return the tenant column, or None without a spec."""
        if self.spec is None:
            return None
        return [TableColumn("Tenant", self.spec.register_tenant)]

    def to_v2alpha1(self) -> dict[str, Any]:
        """Return the API representation of this service."""
        spec = self.spec or ServiceSpec()
        return {
            "name": self.name,
            "registerTenant": spec.register_tenant,
            "sidecar": spec.sidecar,
            "mock": spec.mock,
            "resilience": spec.resilience,
            "loadBalance": spec.load_balance,
            "observability": spec.observability,
        }


def to_service(service: Mapping[str, Any]) -> Service:
    """Build a Service from its API representation."""
    base = new_mesh_resource(DEFAULT_API_VERSION, KIND_SERVICE, _str(service, "name"))
    spec = ServiceSpec(
        register_tenant=_str(service, "registerTenant"),
        sidecar=service.get("sidecar"),
        mock=service.get("mock"),
        resilience=service.get("resilience"),
        load_balance=service.get("loadBalance"),
        observability=service.get("observability"),
    )
    return Service(version_kind=base.version_kind, metadata=base.metadata, spec=spec)


@dataclass
class ServiceCanarySpec:
    """Priority, selector and traffic rules of a service canary."""

    priority: int = 0
    selector: dict[str, Any] | None = None
    traffic_rules: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "priority": self.priority,
            "selector": copy.deepcopy(self.selector),
            "trafficRules": copy.deepcopy(self.traffic_rules),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ServiceCanarySpec":
        return cls(
            priority=int(data.get("priority") or 0),
            selector=_copy_dict(data.get("selector")),
            traffic_rules=_copy_dict(data.get("trafficRules")),
        )


@dataclass
class ServiceCanary(MeshResource, TableObject):
    """A canary release of services in the mesh."""

    spec: ServiceCanarySpec | None = None

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["spec"] = None if self.spec is None else self.spec.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ServiceCanary":
        resource = super().from_dict(data)
        spec = data.get("spec")
        resource.spec = None if spec is None else ServiceCanarySpec.from_dict(spec)
        return resource

    def columns(self) -> list[TableColumn] | None:
        """Return services, sorted instance labels and priority, or None without a spec."""
        if self.spec is None:
            return None
        selector = self.spec.selector or {}
        instance_labels = selector.get("matchInstanceLabels") or {}
        labels = sorted(f"{key}={value}" for key, value in instance_labels.items())
        services = selector.get("matchServices") or []
        return [
            TableColumn("Services", ",".join(services)),
            TableColumn("InstanceLabels", ",".join(labels)),
            TableColumn("Priority", str(int(self.spec.priority))),
        ]

    def to_v2alpha1(self) -> dict[str, Any]:
        """Return the API representation of this canary."""
        spec = self.spec or ServiceCanarySpec()
        return {
            "name": self.name,
            "priority": spec.priority,
            "selector": spec.selector,
            "trafficRules": spec.traffic_rules,
        }


def to_service_canary(service_canary: Mapping[str, Any]) -> ServiceCanary:
    """Build a ServiceCanary from its API representation."""
    base = new_mesh_resource(DEFAULT_API_VERSION, KIND_SERVICE_CANARY, _str(service_canary, "name"))
    spec = ServiceCanarySpec(
        priority=int(service_canary.get("priority") or 0),
        selector=service_canary.get("selector"),
        traffic_rules=service_canary.get("trafficRules"),
    )
    return ServiceCanary(version_kind=base.version_kind, metadata=base.metadata, spec=spec)


@dataclass
class ServiceInstance(MeshResource, TableObject):
    """A running instance of a service, named serviceName/instanceID."""

    spec: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["spec"] = copy.deepcopy(self.spec)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ServiceInstance":
        resource = super().from_dict(data)
        resource.spec = _copy_dict(data.get("spec"))
        return resource

    def parse_name(self) -> tuple[str, str]:
        """Split the name into service name and instance id.

        Raises ValueError when the name is not of the form serviceName/instanceID.
        """
        parts = self.name.split("/")
        if len(parts) != 2:
            raise ValueError("invalid service instance name (format: serviceName/instanceID)")
        return parts[0], parts[1]

    def columns(self) -> list[TableColumn] | None:
        """Return registry name, IP, port and status, or None without a spec."""
        if self.spec is None:
            return None
        return [
            TableColumn("RegistryName", _str(self.spec, "registryName")),
            TableColumn("IP", _str(self.spec, "ip")),
            TableColumn("Port", str(int(self.spec.get("port") or 0))),
            TableColumn("Status", _str(self.spec, "status")),
        ]

    def to_v2alpha1(self) -> dict[str, Any] | None:
        """Return the API representation of this instance."""
        return self.spec


def to_service_instance(instance: Mapping[str, Any]) -> ServiceInstance:
    """Build a ServiceInstance from its API representation."""
    name = f"{_str(instance, 'serviceName')}/{_str(instance, 'instanceID')}"
    base = new_mesh_resource(DEFAULT_API_VERSION, KIND_SERVICE_INSTANCE, name)
    labels = instance.get("labels")
    base.metadata.labels = None if labels is None else dict(labels)
    return ServiceInstance(version_kind=base.version_kind, metadata=base.metadata, spec=dict(instance))


@dataclass
class TenantSpec:
    """The services residing in a tenant and its description."""

    services: list[str] | None = None
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "services": None if self.services is None else list(self.services),
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TenantSpec":
        services = data.get("services")
        return cls(
            services=None if services is None else [str(s) for s in services],
            description=_str(data, "description"),
        )


@dataclass
class Tenant(MeshResource, TableObject):
    """A tenant grouping services of the mesh."""

    spec: TenantSpec | None = None

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["spec"] = None if self.spec is None else self.spec.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Tenant":
        resource = super().from_dict(data)
        spec = data.get("spec")
        resource.spec = None if spec is None else TenantSpec.from_dict(spec)
        return resource

    def columns(self) -> list[TableColumn] | None:
        """Return the services and description columns, or None without a spec."""
        if self.spec is None:
            return None
        return [
            TableColumn("Services", ",".join(self.spec.services or [])),
            TableColumn("Description", self.spec.description),
        ]

    def to_v2alpha1(self) -> dict[str, Any]:
        """Return the API representation of this tenant."""
        spec = self.spec or TenantSpec()
        return {"name": self.name, "services": spec.services, "description": spec.description}


def to_tenant(tenant: Mapping[str, Any]) -> Tenant:
    """Build a Tenant from its API representation."""
    base = new_mesh_resource(DEFAULT_API_VERSION, KIND_TENANT, _str(tenant, "name"))
    spec = TenantSpec(services=tenant.get("services"), description=_str(tenant, "description"))
    return Tenant(version_kind=base.version_kind, metadata=base.metadata, spec=spec)