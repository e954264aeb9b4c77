"""
Command dispatch for the lifecycle verbs.

A dispatch runs the version pre-check (unless skipped) and then calls the
verb's lifecycle method on one named service, or on every service in
canonical order. The first failure ends the command; operations that already
succeeded are left as they are.
"""

from collections.abc import Callable
from enum import StrEnum

from ff_logger import ScopedLogger

from yba_ctl.config import get_logger
from yba_ctl.exceptions import (
    MetadataError,
    PreconditionError,
    ServiceError,
    ServiceOperationError,
    UnknownServiceError,
    VersionMismatchError,
)
from yba_ctl.services.registry import ServiceName, ServiceRegistry
from yba_ctl.version import CONTROLLER_VERSION

VersionLoader = Callable[[], str]


class Verb(StrEnum):
    """Lifecycle verbs; each maps to the controller method of the same name."""

    START = "start"
    STOP = "stop"
    RESTART = "restart"


def check_version(
    verb: Verb,
    version_loader: VersionLoader,
    controller_version: str = CONTROLLER_VERSION,
) -> str:
    """Confirm the installed platform matches this controller.

    Returns:
        The installed version

    Raises:
        PreconditionError: If the metadata cannot be loaded
        VersionMismatchError: If the versions differ
    """
    try:
        installed = version_loader()
    except MetadataError as e:
        raise PreconditionError(f"Cannot {verb.value}: {e}") from e

    if installed != controller_version:
        raise VersionMismatchError(installed=installed, expected=controller_version)
    return installed


class Dispatcher:
    """Runs one lifecycle verb against the registry.

    Holds no state between runs beyond its collaborators.
    """

    def __init__(
        self,
        registry: ServiceRegistry,
        version_loader: VersionLoader,
        *,
        controller_version: str = CONTROLLER_VERSION,
        skip_version_checks: bool = False,
        logger: ScopedLogger | None = None,
    ):
        self.registry = registry
        self.version_loader = version_loader
        self.controller_version = controller_version
        self.skip_version_checks = skip_version_checks
        self._logger = logger

    @property
    def logger(self) -> ScopedLogger:
        if self._logger is None:
            self._logger = get_logger("dispatcher")
        return self._logger

    def targets(self, service: str | None = None) -> list[ServiceName]:
        """Services a dispatch operates on, in call order."""
        if service is None:
            return list(self.registry.order)
        if service not in self.registry:
            raise UnknownServiceError(str(service))
        return [ServiceName(service)]

    def run(self, verb: Verb, service: str | None = None) -> list[ServiceName]:
        """Run ``verb`` on ``service``, or on every service when ``service`` is None.

        Returns:
            Names of the services operated on, in order

        Raises:
            PreconditionError: If the version pre-check fails
            ServiceOperationError: On the first lifecycle failure
        """
        verb = Verb(verb)
        if self.skip_version_checks:
            self.logger.warning("version checks skipped", verb=verb.value)
        else:
            installed = check_version(verb, self.version_loader, self.controller_version)
            self.logger.debug("version check passed", installed=installed)

        completed: list[ServiceName] = []
        for name in self.targets(service):
            controller = self.registry[name]
            self.logger.info(f"{verb.value} {name.value}", service=name.value)
            try:
                getattr(controller, verb.value)()
            except ServiceError as e:
                self.logger.error(
                    f"{verb.value} failed",
                    service=name.value,
                    error=str(e),
                    completed=len(completed),
                )
                raise ServiceOperationError(verb.value, name.value, str(e)) from e
            completed.append(name)

        return completed
