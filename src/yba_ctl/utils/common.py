"""Common utilities shared across the CLI."""

import shutil
import subprocess

from rich.console import Console
from rich.text import Text

# Shared console instances for the entire CLI
console = Console()
err_console = Console(stderr=True)


def command_exists(cmd: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        cmd: Command name to check (e.g., 'systemctl')

    Returns:
        True if command exists, False otherwise
    """
    return shutil.which(cmd) is not None


def run_command(
    cmd: list[str],
    *,
    capture: bool = True,
    timeout: int | None = None,
) -> subprocess.CompletedProcess:
    """Unified subprocess runner.

    Args:
        cmd: Command and arguments as list
        capture: Capture stdout/stderr
        timeout: Command timeout in seconds

    Returns:
        CompletedProcess instance

    Raises:
        subprocess.TimeoutExpired: If the command runs past ``timeout``
        FileNotFoundError: If the executable does not exist
    """
    return subprocess.run(
        cmd,
        capture_output=capture,
        text=True,
        timeout=timeout,
    )


def print_error(message: str) -> None:
    """Print an error message to stderr without markup or wrapping."""
    err_console.print(Text(message, style="red"), soft_wrap=True)


__all__ = [
    "console",
    "err_console",
    "command_exists",
    "run_command",
    "print_error",
]
