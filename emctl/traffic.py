"""Traffic resources: HTTP route groups, ingresses and traffic targets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from emctl.kinds import (
    DEFAULT_API_VERSION,
    KIND_HTTP_ROUTE_GROUP,
    KIND_INGRESS,
    KIND_TRAFFIC_TARGET,
    new_mesh_resource,
)
from emctl.meta import MeshResource

__all__ = [
    "HTTPRouteGroupSpec",
    "HTTPRouteGroup",
    "IngressSpec",
    "Ingress",
    "TrafficTargetSpec",
    "TrafficTarget",
    "to_http_route_group",
    "to_ingress",
    "to_traffic_target",
]


@dataclass
class HTTPRouteGroupSpec:
    """The HTTP matches of a route group."""

    matches: list[dict[str, Any]] | None = None


@dataclass
class HTTPRouteGroup(MeshResource):
    """A named group of HTTP route matches."""

    spec: HTTPRouteGroupSpec | None = None

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["spec"] = None if self.spec is None else {"matches": self.spec.matches}
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HTTPRouteGroup":
        resource = super().from_dict(data)
        spec = data.get("spec")
        if spec is not None:
            resource.spec = HTTPRouteGroupSpec(matches=spec.get("matches"))
        return resource

    def to_v2alpha1(self) -> dict[str, Any]:
        """Return the API representation of this route group."""
        return {"name": self.name, "matches": None if self.spec is None else self.spec.matches}


def to_http_route_group(group: Mapping[str, Any]) -> HTTPRouteGroup:
    """Build an HTTPRouteGroup from its API representation."""
    base = new_mesh_resource(DEFAULT_API_VERSION, KIND_HTTP_ROUTE_GROUP, group.get("name", ""))
    return HTTPRouteGroup(
        version_kind=base.version_kind,
        metadata=base.metadata,
        spec=HTTPRouteGroupSpec(matches=group.get("matches")),
    )


@dataclass
class IngressSpec:
    """The routing rules of an ingress."""

    rules: list[dict[str, Any]] | None = None


@dataclass
class Ingress(MeshResource):
    """An ingress of the mesh."""

    spec: IngressSpec | None = None

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["spec"] = None if self.spec is None else {"rules": self.spec.rules}
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Ingress":
        resource = super().from_dict(data)
        spec = data.get("spec")
        if spec is not None:
            resource.spec = IngressSpec(rules=spec.get("rules"))
        return resource

    def to_v2alpha1(self) -> dict[str, Any]:
        """Return the API representation of this ingress."""
        return {"name": self.name, "rules": None if self.spec is None else self.spec.rules}


def to_ingress(ingress: Mapping[str, Any]) -> Ingress:
    """Build an Ingress from its API representation."""
    base = new_mesh_resource(DEFAULT_API_VERSION, KIND_INGRESS, ingress.get("name", ""))
    return Ingress(
        version_kind=base.version_kind,
        metadata=base.metadata,
        spec=IngressSpec(rules=ingress.get("rules")),
    )


@dataclass
class TrafficTargetSpec:
    """Destination, allowed sources and rules of a traffic target."""

    destination: dict[str, Any] | None = None
    sources: list[dict[str, Any]] | None = None
    rules: list[dict[str, Any]] | None = field(default=None)


@dataclass
class TrafficTarget(MeshResource):
    """Access control between service identities."""

    spec: TrafficTargetSpec | None = None

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.spec is None:
            result["spec"] = None
        else:
            result["spec"] = {
                "destination": self.spec.destination,
                "sources": self.spec.sources,
                "rules": self.spec.rules,
            }
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TrafficTarget":
        resource = super().from_dict(data)
        spec = data.get("spec")
        if spec is not None:
            resource.spec = TrafficTargetSpec(
                destination=spec.get("destination"),
                sources=spec.get("sources"),
                rules=spec.get("rules"),
            )
        return resource

    def to_v2alpha1(self) -> dict[str, Any]:
        """Return the API representation of this traffic target."""
        spec = self.spec or TrafficTargetSpec()
        return {
            "name": self.name,
            "destination": spec.destination,
            "sources": spec.sources,
            "rules": spec.rules,
        }


def to_traffic_target(target: Mapping[str, Any]) -> TrafficTarget:
    """Build a TrafficTarget from its API representation."""
    base = new_mesh_resource(DEFAULT_API_VERSION, KIND_TRAFFIC_TARGET, target.get("name", ""))
    return TrafficTarget(
        version_kind=base.version_kind,
        metadata=base.metadata,
        spec=TrafficTargetSpec(
            destination=target.get("destination"),
            sources=target.get("sources"),
            rules=target.get("rules"),
        ),
    )