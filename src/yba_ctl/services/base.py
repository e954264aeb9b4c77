"""Lifecycle capability shared by every managed service."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ServiceController(Protocol):
    """Structural interface for a controller of one local service.

    Each operation returns ``None`` on success and raises
    :class:`~yba_ctl.exceptions.ServiceError` with a descriptive message on
    failure. Whether an operation is a no-op (e.g. starting a running
    service) is the controller's concern.
    """

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def restart(self) -> None: ...
