"""systemd-backed service controllers."""

import subprocess

from ff_logger import ScopedLogger

from yba_ctl.config import CLISettings, get_logger
from yba_ctl.exceptions import ServiceError
from yba_ctl.services.registry import SERVICE_ORDER, ServiceName, ServiceRegistry
from yba_ctl.utils.common import command_exists, run_command

SYSTEMCTL = "systemctl"


class SystemdService:
    """Controls one service through its systemd unit.

    Uses ``systemctl --user`` when ``user_mode`` is set, the system manager
    otherwise.
    """

    def __init__(
        self,
        name: str,
        unit: str | None = None,
        *,
        user_mode: bool = False,
        timeout: int = 300,
        logger: ScopedLogger | None = None,
    ):
        self.name = name
        self.unit = unit or f"{name}.service"
        self.user_mode = user_mode
        self.timeout = timeout
        self._logger = logger

    @property
    def logger(self) -> ScopedLogger:
        if self._logger is None:
            self._logger = get_logger("systemd")
        return self._logger

    def _systemctl(self, action: str) -> None:
        """Run ``systemctl <action> <unit>`` and raise ServiceError on failure."""
        if not command_exists(SYSTEMCTL):
            raise ServiceError(f"{SYSTEMCTL} not found in PATH")

        cmd = [SYSTEMCTL]
        if self.user_mode:
            cmd.append("--user")
        cmd.extend([action, self.unit])

        self.logger.debug("running systemctl", unit=self.unit, command=" ".join(cmd))
        try:
            result = run_command(cmd, timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            raise ServiceError(
                f"systemctl {action} {self.unit} timed out after {self.timeout}s"
            ) from e
        except OSError as e:
            raise ServiceError(f"could not run systemctl: {e}") from e

        if result.returncode != 0:
            detail = (result.stderr or result.stdout or "").strip()
            raise ServiceError(
                detail or f"systemctl {action} {self.unit} exited with {result.returncode}"
            )

    def start(self) -> None:
        """Start the unit."""
        self._systemctl("start")

    def stop(self) -> None:
        """Stop the unit."""
        self._systemctl("stop")

    def restart(self) -> None:
        """Restart the unit."""
        self._systemctl("restart")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, unit={self.unit!r})"


def build_default_registry(settings: CLISettings) -> ServiceRegistry:
    """Build the registry of systemd-backed controllers for every known service."""
    controllers: dict[ServiceName, SystemdService] = {
        name: SystemdService(
            name.value,
            user_mode=settings.systemd_user_mode,
            timeout=settings.systemctl_timeout,
        )
        for name in SERVICE_ORDER
    }
    return ServiceRegistry(controllers)
