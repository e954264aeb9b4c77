"""Shared fixtures for controller tests."""

import io

import pytest
from ff_logger import ConsoleLogger

from yba_ctl.context import ControllerContext
from yba_ctl.exceptions import MetadataError, ServiceError
from yba_ctl.services import SERVICE_ORDER, ServiceRegistry

CONTROLLER_VERSION = "2.20.0"


class FakeService:
    """Service controller that records calls into a shared list."""

    def __init__(self, name: str, calls: list[str], failures: dict[str, str] | None = None):
        self.name = name
        self.calls = calls
        self.failures = failures or {}

    def _call(self, method: str) -> None:
        self.calls.append(f"{self.name}.{method}")
        if method in self.failures:
            raise ServiceError(self.failures[method])

    def start(self) -> None:
        self._call("start")

    def stop(self) -> None:
        self._call("stop")

    def restart(self) -> None:
        self._call("restart")


class RecordingLoader:
    """Version loader that counts reads and can fail like unreadable metadata."""

    def __init__(self, version: str = CONTROLLER_VERSION, error: str | None = None):
        self.version = version
        self.error = error
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise MetadataError(self.error)
        return self.version


@pytest.fixture
def calls() -> list[str]:
    """Shared record of controller calls, in order."""
    return []


@pytest.fixture
def make_registry(calls):
    """Build a registry of fakes; ``failures`` maps service -> {method: detail}."""

    def _make(failures: dict[str, dict[str, str]] | None = None) -> ServiceRegistry:
        failures = failures or {}
        return ServiceRegistry(
            {
                name: FakeService(name.value, calls, failures.get(name.value))
                for name in SERVICE_ORDER
            }
        )

    return _make


@pytest.fixture
def quiet_logger() -> ConsoleLogger:
    """Logger that writes to an in-memory stream."""
    return ConsoleLogger("test", level="DEBUG", stream=io.StringIO(), colors=False)


@pytest.fixture
def make_context(make_registry, quiet_logger):
    """Build a controller context around fakes for CLI tests."""

    def _make(
        loader: RecordingLoader | None = None,
        failures: dict[str, dict[str, str]] | None = None,
    ) -> ControllerContext:
        return ControllerContext(
            registry=make_registry(failures),
            version_loader=loader or RecordingLoader(),
            controller_version=CONTROLLER_VERSION,
            logger=quiet_logger,
        )

    return _make
