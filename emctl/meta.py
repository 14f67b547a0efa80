"""Common metadata shared by every mesh resource."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Mapping

__all__ = ["VersionKind", "MetaData", "MeshResource", "TableColumn", "TableObject"]


@dataclass
class VersionKind:
    """API version and kind of a resource."""

    api_version: str = ""
    kind: str = ""


@dataclass
class MetaData:
    """Name and labels of a resource."""

    name: str = ""
    labels: dict[str, str] | None = None


@dataclass
class MeshResource:
    """Version, kind and metadata common to every mesh resource."""

    version_kind: VersionKind = field(default_factory=VersionKind)
    metadata: MetaData = field(default_factory=MetaData)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def kind(self) -> str:
        return self.version_kind.kind

    @property
    def api_version(self) -> str:
        return self.version_kind.api_version

    @property
    def labels(self) -> dict[str, str] | None:
        return self.metadata.labels

    def to_dict(self) -> dict[str, Any]:
        """Return the resource header as it appears in a YAML document."""
        metadata: dict[str, Any] = {"name": self.metadata.name}
        if self.metadata.labels:
            metadata["labels"] = dict(self.metadata.labels)
        return {
            "apiVersion": self.version_kind.api_version,
            "kind": self.version_kind.kind,
            "metadata": metadata,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MeshResource":
        """Build the resource header from a parsed YAML document."""
        metadata = data.get("metadata") or {}
        labels = metadata.get("labels")
        return cls(
            version_kind=VersionKind(
                api_version=str(data.get("apiVersion") or ""),
                kind=str(data.get("kind") or ""),
            ),
            metadata=MetaData(
                name=str(metadata.get("name") or ""),
                labels={str(k): str(v) for k, v in labels.items()} if labels else None,
            ),
        )


@dataclass(frozen=True)
class TableColumn:
    """A user-defined column in table output."""

    name: str
    value: str


class TableObject(ABC):
    """An object that adds its own columns to table output."""

    @abstractmethod
    def columns(self) -> list[TableColumn] | None:
        """Return the extra columns of this object."""