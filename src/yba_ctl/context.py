"""Per-invocation state handed from the root command to the verbs."""

from dataclasses import dataclass

from ff_logger import ScopedLogger

from yba_ctl.config import CLISettings
from yba_ctl.dispatcher import Dispatcher, VersionLoader
from yba_ctl.metadata import InstallationMetadata
from yba_ctl.services import ServiceRegistry, build_default_registry
from yba_ctl.version import CONTROLLER_VERSION


@dataclass
class ControllerContext:
    """Collaborators for one controller invocation.

    The CLI builds this from settings unless a caller passes one in as the
    Click context object.
    """

    registry: ServiceRegistry
    version_loader: VersionLoader
    controller_version: str = CONTROLLER_VERSION
    skip_version_checks: bool = False
    logger: ScopedLogger | None = None

    @classmethod
    def from_settings(cls, settings: CLISettings) -> "ControllerContext":
        """Create the production context: systemd controllers and on-disk metadata."""
        metadata = InstallationMetadata(settings.metadata_file)
        return cls(
            registry=build_default_registry(settings),
            version_loader=metadata.installed_version,
            skip_version_checks=settings.skip_version_checks,
        )

    def dispatcher(self, skip_version_checks: bool = False) -> Dispatcher:
        """Build a dispatcher; ``skip_version_checks`` adds to the context's own flag."""
        return Dispatcher(
            self.registry,
            self.version_loader,
            controller_version=self.controller_version,
            skip_version_checks=self.skip_version_checks or skip_version_checks,
            logger=self.logger,
        )
