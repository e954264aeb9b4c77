"""
Registry of the services that make up an installation.

The set of services is closed and their canonical order is fixed. ``start``,
``stop`` and ``restart`` all walk the same forward order.
"""

from collections.abc import Iterator, Mapping
from enum import StrEnum
from types import MappingProxyType

from yba_ctl.exceptions import UnknownServiceError
from yba_ctl.services.base import ServiceController


class ServiceName(StrEnum):
    """Names of the services managed by the controller."""

    POSTGRES = "postgres"
    PROMETHEUS = "prometheus"
    YB_PLATFORM = "yb-platform"


SERVICE_ORDER: tuple[ServiceName, ...] = (
    ServiceName.POSTGRES,
    ServiceName.PROMETHEUS,
    ServiceName.YB_PLATFORM,
)


def valid_service_names(order: tuple[ServiceName, ...] = SERVICE_ORDER) -> str:
    """Comma-separated service names for help text."""
    return ", ".join(name.value for name in order)


class ServiceRegistry(Mapping[ServiceName, ServiceController]):
    """Read-only mapping from service name to its controller.

    Iteration follows the canonical order. Every name in the order must have
    exactly one controller, and no controller may exist outside it.
    """

    def __init__(
        self,
        controllers: Mapping[str, ServiceController],
        order: tuple[ServiceName, ...] = SERVICE_ORDER,
    ):
        if len(set(order)) != len(order):
            raise ValueError("Service order contains duplicates")

        normalized: dict[ServiceName, ServiceController] = {}
        for key, controller in controllers.items():
            try:
                name = ServiceName(key)
            except ValueError as e:
                raise ValueError(f"No such service: {key}") from e
            if name in normalized:
                raise ValueError(f"Duplicate controller for {name}")
            normalized[name] = controller

        missing = [name.value for name in order if name not in normalized]
        if missing:
            raise ValueError(f"Missing controllers for: {', '.join(missing)}")
        extra = sorted(name.value for name in normalized if name not in order)
        if extra:
            raise ValueError(f"Controllers registered outside service order: {', '.join(extra)}")

        self._order = tuple(order)
        self._controllers = MappingProxyType(normalized)

    @property
    def order(self) -> tuple[ServiceName, ...]:
        """Canonical start/stop/restart order."""
        return self._order

    def __getitem__(self, name: str) -> ServiceController:
        try:
            return self._controllers[ServiceName(name)]
        except (ValueError, KeyError) as e:
            raise UnknownServiceError(str(name)) from e

    def __iter__(self) -> Iterator[ServiceName]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, name: object) -> bool:
        try:
            return ServiceName(name) in self._controllers
        except ValueError:
            return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({[name.value for name in self._order]!r})"
