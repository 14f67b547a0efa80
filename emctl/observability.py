"""Observability resources: metrics, tracings and the output server."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Mapping

from emctl.kinds import (
    DEFAULT_API_VERSION,
    KIND_OBSERVABILITY_METRICS,
    KIND_OBSERVABILITY_OUTPUT_SERVER,
    KIND_OBSERVABILITY_TRACINGS,
    new_mesh_resource,
)
from emctl.meta import MeshResource

__all__ = [
    "ObservabilityMetrics",
    "ObservabilityTracings",
    "ObservabilityOutputServer",
    "to_observability_metrics",
    "to_observability_tracings",
    "to_observability_output_server",
]


@dataclass
class _ObservabilityResource(MeshResource):
    spec: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["spec"] = copy.deepcopy(self.spec)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        resource = super().from_dict(data)
        spec = data.get("spec")
        resource.spec = None if spec is None else copy.deepcopy(dict(spec))
        return resource


def _spec(value: Mapping[str, Any] | None) -> dict[str, Any] | None:
    return None if value is None else dict(value)


@dataclass
class ObservabilityMetrics(_ObservabilityResource):
    """Metrics settings of a service."""

    def to_v2alpha1(self) -> dict[str, Any] | None:
        """Return the API representation of the metrics spec."""
        return self.spec


@dataclass
class ObservabilityTracings(_ObservabilityResource):
    """Tracing settings of a service."""

    def to_v2alpha1(self) -> dict[str, Any] | None:
        """Return the API representation of the tracings spec."""
        return self.spec


@dataclass
class ObservabilityOutputServer(_ObservabilityResource):
    """Output server settings of a service."""

    def to_v2alpha1(self) -> dict[str, Any] | None:
        """Return the API representation of the output server spec."""
        return self.spec


def to_observability_metrics(service_id: str, metrics: Mapping[str, Any] | None) -> ObservabilityMetrics:
    """Build an ObservabilityMetrics for a service from its API representation."""
    base = new_mesh_resource(DEFAULT_API_VERSION, KIND_OBSERVABILITY_METRICS, service_id)
    return ObservabilityMetrics(version_kind=base.version_kind, metadata=base.metadata, spec=_spec(metrics))


def to_observability_tracings(service_id: str, tracings: Mapping[str, Any] | None) -> ObservabilityTracings:
    """Build an ObservabilityTracings for a service from its API representation."""
    base = new_mesh_resource(DEFAULT_API_VERSION, KIND_OBSERVABILITY_TRACINGS, service_id)
    return ObservabilityTracings(version_kind=base.version_kind, metadata=base.metadata, spec=_spec(tracings))


def to_observability_output_server(
    service_id: str, output: Mapping[str, Any] | None
) -> ObservabilityOutputServer:
    """Build an ObservabilityOutputServer for a service from its API representation."""
    base = new_mesh_resource(DEFAULT_API_VERSION, KIND_OBSERVABILITY_OUTPUT_SERVER, service_id)
    return ObservabilityOutputServer(
        version_kind=base.version_kind, metadata=base.metadata, spec=_spec(output)
    )