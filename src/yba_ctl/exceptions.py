"""Exception hierarchy for yba-ctl."""

VERSION_MISMATCH_MESSAGE = (
    "yba-ctl version does not match the installed YugabyteDB Anywhere version"
)


class YbaCtlError(Exception):
    """Base class for all controller errors that end a command."""


class PreconditionError(YbaCtlError):
    """The installation is not in a state the controller can operate on."""


class VersionMismatchError(PreconditionError):
    """Installed platform version differs from the controller version."""

    def __init__(self, installed: str | None = None, expected: str | None = None):
        super().__init__(VERSION_MISMATCH_MESSAGE)
        self.installed = installed
        self.expected = expected


class MetadataError(YbaCtlError):
    """Installation metadata is missing or unreadable."""


class ServiceError(YbaCtlError):
    """Raised by a service controller when a lifecycle operation fails."""


class ServiceOperationError(YbaCtlError):
    """A lifecycle operation failed while dispatching a command."""

    def __init__(self, verb: str, service: str, detail: str):
        super().__init__(f"Failed to {verb} {service}: {detail}")
        self.verb = verb
        self.service = service
        self.detail = detail


class UnknownServiceError(YbaCtlError, KeyError):
    """Registry lookup for a name outside the known services."""

    def __str__(self) -> str:
        return f"Unknown service: {self.args[0]}" if self.args else "Unknown service"


__all__ = [
    "VERSION_MISMATCH_MESSAGE",
    "YbaCtlError",
    "PreconditionError",
    "VersionMismatchError",
    "MetadataError",
    "ServiceError",
    "ServiceOperationError",
    "UnknownServiceError",
]
