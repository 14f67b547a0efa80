"""Per-service policy resources: load balancing, mocking and resilience."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Mapping

from emctl.kinds import (
    DEFAULT_API_VERSION,
    KIND_LOAD_BALANCE,
    KIND_MOCK,
    KIND_RESILIENCE,
    new_mesh_resource,
)
from emctl.meta import MeshResource, TableColumn, TableObject

__all__ = [
    "LoadBalance",
    "Mock",
    "Resilience",
    "to_load_balance",
    "to_mock",
    "to_resilience",
]

_RESILIENCE_FIELDS = ("rateLimiter", "retry", "circuitBreaker", "timeLimiter", "failureCodes")


@dataclass
class _PolicyResource(MeshResource):
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


@dataclass
class LoadBalance(_PolicyResource, TableObject):
    """The load-balancing policy of a service."""

    def columns(self) -> list[TableColumn] | None:
        """Return the policy and header hash key columns, or None without a spec."""
        if self.spec is None:
            return None
        return [
            TableColumn("Policy", str(self.spec.get("policy") or "")),
            TableColumn("HeaderHashKey", str(self.spec.get("headerHashKey") or "")),
        ]

    def to_v2alpha1(self) -> dict[str, Any] | None:
        """Return the API representation of this policy."""
        return self.spec


def to_load_balance(name: str, load_balance: Mapping[str, Any] | None) -> LoadBalance:
    """Build a LoadBalance named after its service from its API representation."""
    base = new_mesh_resource(DEFAULT_API_VERSION, KIND_LOAD_BALANCE, name)
    spec = None if load_balance is None else dict(load_balance)
    return LoadBalance(version_kind=base.version_kind, metadata=base.metadata, spec=spec)


@dataclass
class Mock(_PolicyResource):
    """The mock rules of a service."""

    def to_v2alpha1(self) -> dict[str, Any] | None:
        """Return the API representation of the mock rules."""
        return self.spec


def to_mock(name: str, mock: Mapping[str, Any]) -> Mock:
    """Build a Mock named after its service, keeping its enabled flag and rules.

    Raises TypeError when mock is None.
    """
    if mock is None:
        raise TypeError("mock spec can't be None")
    base = new_mesh_resource(DEFAULT_API_VERSION, KIND_MOCK, name)
    spec = {"enabled": bool(mock.get("enabled", False)), "rules": mock.get("rules")}
    return Mock(version_kind=base.version_kind, metadata=base.metadata, spec=spec)


@dataclass
class Resilience(_PolicyResource):
    """The resilience policies of a service."""

    def to_v2alpha1(self) -> dict[str, Any] | None:
        """Return the API representation of the resilience policies."""
        return self.spec


def to_resilience(name: str, resilience: Mapping[str, Any]) -> Resilience:
    """Build a Resilience named after its service, keeping its known policies.

    Raises TypeError when resilience is None.
    """
    if resilience is None:
        raise TypeError("resilience spec can't be None")
    base = new_mesh_resource(DEFAULT_API_VERSION, KIND_RESILIENCE, name)
    spec = {key: resilience.get(key) for key in _RESILIENCE_FIELDS}
    return Resilience(version_kind=base.version_kind, metadata=base.metadata, spec=spec)