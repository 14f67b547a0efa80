"""The mesh controller resource and its admin configuration."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Mapping

from emctl.kinds import DEFAULT_API_VERSION, new_mesh_resource
from emctl.meta import MeshResource, TableColumn, TableObject

__all__ = [
    "MonitorCert",
    "MonitorMTLS",
    "Security",
    "MeshControllerAdmin",
    "MeshController",
    "MeshControllerV2Alpha1",
    "to_mesh_controller",
]


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


@dataclass
class MonitorCert:
    """One certificate and key pair of the monitor, with the services it covers."""

    cert_base64: str = ""
    key_base64: str = ""
    services: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "certBase64": self.cert_base64,
            "keyBase64": self.key_base64,
            "services": None if self.services is None else list(self.services),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MonitorCert":
        services = data.get("services")
        return cls(
            cert_base64=_str(data, "certBase64"),
            key_base64=_str(data, "keyBase64"),
            services=None if services is None else [str(s) for s in services],
        )


@dataclass
class MonitorMTLS:
    """The mTLS settings of the monitor."""

    enabled: bool = False
    url: str = ""
    username: str = ""
    password: str = ""
    reporter_append_type: str = ""
    ca_cert_base64: str = ""
    certs: list[MonitorCert] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "url": self.url,
            "username": self.username,
            "password": self.password,
            "reporterAppendType": self.reporter_append_type,
            "caCertBase64": self.ca_cert_base64,
            "certs": None if self.certs is None else [c.to_dict() for c in self.certs],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MonitorMTLS":
        certs = data.get("certs")
        return cls(
            enabled=bool(data.get("enabled", False)),
            url=_str(data, "url"),
            username=_str(data, "username"),
            password=_str(data, "password"),
            reporter_append_type=_str(data, "reporterAppendType"),
            ca_cert_base64=_str(data, "caCertBase64"),
            certs=None if certs is None else [MonitorCert.from_dict(c) for c in certs],
        )


@dataclass
class Security:
    """Mesh-wide security settings."""

    mtls_mode: str = ""
    cert_provider: str = ""
    root_cert_ttl: str = ""
    app_cert_ttl: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "mtlsMode": self.mtls_mode,
            "certProvider": self.cert_provider,
            "rootCertTTL": self.root_cert_ttl,
            "appCertTTL": self.app_cert_ttl,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Security":
        return cls(
            mtls_mode=_str(data, "mtlsMode"),
            cert_provider=_str(data, "certProvider"),
            root_cert_ttl=_str(data, "rootCertTTL"),
            app_cert_ttl=_str(data, "appCertTTL"),
        )


@dataclass
class MeshControllerAdmin:
    """Administrative configuration of the mesh controller."""

    heartbeat_interval: str = ""
    registry_type: str = ""
    api_port: int = 0
    ingress_port: int = 0
    external_service_registry: str = ""
    clean_external_registry: bool = False
    security: Security | None = None
    image_registry_url: str = ""
    image_pull_policy: str = ""
    sidecar_image_name: str = ""
    agent_initializer_image_name: str = ""
    log4j_config_name: str = ""
    monitor_mtls: MonitorMTLS | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "heartbeatInterval": self.heartbeat_interval,
            "registryType": self.registry_type,
            "apiPort": self.api_port,
            "ingressPort": self.ingress_port,
            "externalServiceRegistry": self.external_service_registry,
            "cleanExternalRegistry": self.clean_external_registry,
            "security": None if self.security is None else self.security.to_dict(),
            "imageRegistryURL": self.image_registry_url,
            "imagePullPolicy": self.image_pull_policy,
            "sidecarImageName": self.sidecar_image_name,
            "agentInitializerImageName": self.agent_initializer_image_name,
            "log4jConfigName": self.log4j_config_name,
            "monitorMTLS": None if self.monitor_mtls is None else self.monitor_mtls.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MeshControllerAdmin":
        security = data.get("security")
        monitor = data.get("monitorMTLS")
        return cls(
            heartbeat_interval=_str(data, "heartbeatInterval"),
            registry_type=_str(data, "registryType"),
            api_port=int(data.get("apiPort") or 0),
            ingress_port=int(data.get("ingressPort") or 0),
            external_service_registry=_str(data, "externalServiceRegistry"),
            clean_external_registry=bool(data.get("cleanExternalRegistry", False)),
            security=None if security is None else Security.from_dict(security),
            image_registry_url=_str(data, "imageRegistryURL"),
            image_pull_policy=_str(data, "imagePullPolicy"),
            sidecar_image_name=_str(data, "sidecarImageName"),
            agent_initializer_image_name=_str(data, "agentInitializerImageName"),
            log4j_config_name=_str(data, "log4jConfigName"),
            monitor_mtls=None if monitor is None else MonitorMTLS.from_dict(monitor),
        )


@dataclass
class MeshControllerV2Alpha1:
    """The API representation of the mesh controller."""

    kind: str = ""
    name: str = ""
    admin: MeshControllerAdmin = field(default_factory=MeshControllerAdmin)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"kind": self.kind, "name": self.name}
        result.update(self.admin.to_dict())
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MeshControllerV2Alpha1":
        return cls(
            kind=_str(data, "kind"),
            name=_str(data, "name"),
            admin=MeshControllerAdmin.from_dict(data),
        )


@dataclass
class MeshController(MeshResource, TableObject):
    """The mesh controller running on the control plane."""

    admin: MeshControllerAdmin = field(default_factory=MeshControllerAdmin)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result.update(self.admin.to_dict())
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MeshController":
        resource = super().from_dict(data)
        resource.admin = MeshControllerAdmin.from_dict(data)
        return resource

    def columns(self) -> list[TableColumn]:
        """Return heartbeat, registry, ports and external registry columns."""
        ports = f"{self.admin.api_port}/API,{self.admin.ingress_port}/Ingress"
        return [
            TableColumn("Heartbeat", self.admin.heartbeat_interval),
            TableColumn("Registry", self.admin.registry_type),
            TableColumn("Ports", ports),
            TableColumn("ExternalRegistry", self.admin.external_service_registry),
        ]

    def to_v2alpha1(self) -> MeshControllerV2Alpha1:
        """Return the API representation of this controller."""
        return MeshControllerV2Alpha1(kind=self.kind, name=self.name, admin=copy.deepcopy(self.admin))


def to_mesh_controller(mesh_controller: MeshControllerV2Alpha1) -> MeshController:
    """Build a MeshController from its API representation."""
    base = new_mesh_resource(DEFAULT_API_VERSION, mesh_controller.kind, mesh_controller.name)
    return MeshController(
        version_kind=base.version_kind,
        metadata=base.metadata,
        admin=copy.deepcopy(mesh_controller.admin),
    )