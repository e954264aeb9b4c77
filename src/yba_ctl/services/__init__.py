"""Service registry and controllers for the local platform services."""

from .base import ServiceController
from .registry import SERVICE_ORDER, ServiceName, ServiceRegistry, valid_service_names
from .systemd import SystemdService, build_default_registry

__all__ = [
    "SERVICE_ORDER",
    "ServiceController",
    "ServiceName",
    "ServiceRegistry",
    "SystemdService",
    "build_default_registry",
    "valid_service_names",
]
