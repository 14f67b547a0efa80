"""Custom resource kinds and custom resources."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Mapping

from emctl.kinds import DEFAULT_API_VERSION, KIND_CUSTOM_RESOURCE_KIND, new_mesh_resource
from emctl.meta import MeshResource

__all__ = [
    "CustomResourceKindSpec",
    "CustomResourceKind",
    "CustomResource",
    "to_dynamic_object",
    "to_custom_resource_kind",
    "to_custom_resource",
]


def _convert(value: Any) -> Any:
    if isinstance(value, Mapping):
        result: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"dynamic object key {key!r} is not a string")
            result[key] = _convert(item)
        return result
    if isinstance(value, (list, tuple)):
        return [_convert(item) for item in value]
    return value


def to_dynamic_object(data: Any) -> dict[str, Any]:
    """Return a copy of a parsed YAML mapping whose nested mappings all have string keys.

    Raises TypeError when data is not a mapping or holds a non-string key.
    """
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"dynamic object must be a mapping, got {type(data).__name__}")
    return _convert(data)


@dataclass
class CustomResourceKindSpec:
    """The JSON schema that resources of a custom kind must follow."""

    json_schema: dict[str, Any] | None = None


@dataclass
class CustomResourceKind(MeshResource):
    """A custom resource kind of the mesh."""

    spec: CustomResourceKindSpec | None = None

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["spec"] = None if self.spec is None else {"jsonSchema": copy.deepcopy(self.spec.json_schema)}
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CustomResourceKind":
        resource = super().from_dict(data)
        spec = data.get("spec")
        if spec is not None:
            schema = spec.get("jsonSchema")
            resource.spec = CustomResourceKindSpec(
                json_schema=None if schema is None else to_dynamic_object(schema)
            )
        return resource

    def to_v2alpha1(self) -> dict[str, Any]:
        """Return the API representation of this kind."""
        result: dict[str, Any] = {"name": self.name, "jsonSchema": None}
        if self.spec is not None and self.spec.json_schema is not None:
            result["jsonSchema"] = copy.deepcopy(self.spec.json_schema)
        return result


def to_custom_resource_kind(kind: Mapping[str, Any]) -> CustomResourceKind:
    """Build a CustomResourceKind from its API representation."""
    base = new_mesh_resource(DEFAULT_API_VERSION, KIND_CUSTOM_RESOURCE_KIND, kind.get("name", ""))
    spec = CustomResourceKindSpec()
    schema = kind.get("jsonSchema")
    if schema is not None:
        spec.json_schema = copy.deepcopy(dict(schema))
    return CustomResourceKind(version_kind=base.version_kind, metadata=base.metadata, spec=spec)


@dataclass
class CustomResource(MeshResource):
    """A resource of a user-defined kind."""

    spec: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["spec"] = copy.deepcopy(self.spec)
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CustomResource":
        resource = super().from_dict(data)
        resource.spec = to_dynamic_object(data.get("spec"))
        return resource

    def to_v2alpha1(self) -> dict[str, Any]:
        """Return the API representation: name and kind merged with the spec."""
        result: dict[str, Any] = {"name": self.name, "kind": self.kind}
        result.update(self.spec)
        return result


def to_custom_resource(data: Mapping[str, Any]) -> CustomResource:
    """Build a CustomResource from its API representation.

    Raises KeyError when name or kind is missing and TypeError when either
    is not a string.
    """
    name = data["name"]
    kind = data["kind"]
    if not isinstance(name, str) or not isinstance(kind, str):
        raise TypeError("custom resource name and kind must be strings")
    base = new_mesh_resource(DEFAULT_API_VERSION, kind, name)
    spec = {key: value for key, value in data.items() if key not in ("name", "kind")}
    return CustomResource(version_kind=base.version_kind, metadata=base.metadata, spec=spec)