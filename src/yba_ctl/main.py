#!/usr/bin/env python3
"""Main entry point for yba-ctl."""

import sys

import typer

from yba_ctl import __version__
from yba_ctl.commands import lifecycle
from yba_ctl.utils.common import console, print_error

app = typer.Typer(
    name="yba-ctl",
    help="Control the services of a YugabyteDB Anywhere installation.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"[bold cyan]yba-ctl[/bold cyan] version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    skip_version_checks: bool = typer.Option(
        False,
        "--skip-version-checks",
        help="Skip checking the installed YugabyteDB Anywhere version",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
):
    """
    Main CLI callback - handles global options.

    The flag is kept on the Click context for this invocation only; a
    context object passed in by the caller is never modified.
    """
    ctx.meta[lifecycle.SKIP_VERSION_CHECKS_KEY] = skip_version_checks


for verb, command in lifecycle.COMMANDS.items():
    app.command(
        name=verb.value,
        short_help=lifecycle.short_help(verb),
        help=lifecycle.long_help(verb),
    )(command)


def run():
    """Main entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)
    except Exception as e:
        print_error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
