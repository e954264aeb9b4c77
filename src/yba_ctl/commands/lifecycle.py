"""start, stop and restart commands."""

import typer
from pydantic import ValidationError

from ..config import get_settings
from ..context import ControllerContext
from ..dispatcher import Verb
from ..exceptions import YbaCtlError
from ..services import ServiceName, valid_service_names
from ..utils.common import console, print_error

SKIP_VERSION_CHECKS_KEY = "yba_ctl.skip_version_checks"

_PAST_TENSE = {
    Verb.START: "Started",
    Verb.STOP: "Stopped",
    Verb.RESTART: "Restarted",
}


def short_help(verb: Verb) -> str:
    return (
        f"The {verb.value} command is used to {verb.value} service(s) required for your "
        "YugabyteDB Anywhere installation."
    )


def long_help(verb: Verb) -> str:
    return (
        f"The {verb.value} command can be invoked to {verb.value} any service that is required "
        f"for the running of YugabyteDB Anywhere. Can be invoked without any arguments to "
        f"{verb.value} all services, or invoked with a specific service name to {verb.value} "
        f"only that service.\n\nValid service names: {valid_service_names()}"
    )


def controller_context(ctx: typer.Context) -> ControllerContext:
    """Return the caller-supplied context, or build one from settings."""
    state = ctx.find_object(ControllerContext)
    if state is not None:
        return state
    try:
        return ControllerContext.from_settings(get_settings())
    except ValidationError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1) from e


def run_verb(
    ctx: typer.Context,
    verb: Verb,
    service: ServiceName | None,
    skip_version_checks: bool = False,
) -> None:
    """Dispatch ``verb`` and turn any controller error into a fatal exit."""
    state = controller_context(ctx)
    skip = skip_version_checks or ctx.meta.get(SKIP_VERSION_CHECKS_KEY, False)
    dispatcher = state.dispatcher(skip_version_checks=skip)
    try:
        completed = dispatcher.run(verb, service)
    except YbaCtlError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    names = ", ".join(name.value for name in completed)
    console.print(f"[green]✓[/green] {_PAST_TENSE[verb]} {names}")


_SERVICE_HELP = "Service name (default: all services in order)"
_SKIP_HELP = "Skip the installed version check"


def start(
    ctx: typer.Context,
    service: ServiceName | None = typer.Argument(None, help=_SERVICE_HELP, show_default=False),
    skip_version_checks: bool = typer.Option(False, "--skip-version-checks", help=_SKIP_HELP),
):
    run_verb(ctx, Verb.START, service, skip_version_checks)


def stop(
    ctx: typer.Context,
    service: ServiceName | None = typer.Argument(None, help=_SERVICE_HELP, show_default=False),
    skip_version_checks: bool = typer.Option(False, "--skip-version-checks", help=_SKIP_HELP),
):
    run_verb(ctx, Verb.STOP, service, skip_version_checks)


def restart(
    ctx: typer.Context,
    service: ServiceName | None = typer.Argument(None, help=_SERVICE_HELP, show_default=False),
    skip_version_checks: bool = typer.Option(False, "--skip-version-checks", help=_SKIP_HELP),
):
    run_verb(ctx, Verb.RESTART, service, skip_version_checks)


COMMANDS = {
    Verb.START: start,
    Verb.STOP: stop,
    Verb.RESTART: restart,
}
