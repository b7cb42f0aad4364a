"""CLI application entry point and command routing for stackctl.

This module is the **sole error boundary** for the entire application.
It catches :class:`~stackctl.exceptions.StackctlError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No lifecycle logic lives here — parsing, conflict resolution and
  phase execution are delegated to the core layer; external tools are
  reached through the infrastructure adapters.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from stackctl.cli import exit_codes
from stackctl.cli.console import console, escape
from stackctl.cli.usage import USAGE_TEXT, print_usage
from stackctl.config import StackSettings
from stackctl.core.models import ActionSet, Phase
from stackctl.core.parser import USAGE_TOKENS, parse_tokens
from stackctl.core.protocols import ApplicationServer, ContainerEngine, DependencyInstaller
from stackctl.core.resolver import resolve
from stackctl.exceptions import ConflictError, LifecycleInterrupted, StackctlError, UsageError
from stackctl.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that reports bad options as :class:`UsageError`.

    Keeps every command-line mistake on exit status 1 through the
    :func:`cli` boundary instead of argparse's own exit status 2.
    """

    def error(self, message: str) -> NoReturn:
        raise UsageError(
            f"Invalid option: {message}",
            hint="Run 'stackctl usage' to list valid options.",
        )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Action words are collected verbatim and interpreted by
    :func:`~stackctl.core.parser.parse_tokens`; argparse only owns the
    dashed options.  Abbreviated long options are not accepted so that
    e.g. ``--ver`` is reported as an unknown word.
    """
    parser = _ArgumentParser(
        prog="stackctl",
        allow_abbrev=False,
        description="Drive the local development stack through its lifecycle.",
        epilog=USAGE_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--doctor",
        action="store_true",
        help="check that the required tools are installed and exit",
    )
    parser.add_argument(
        "actions",
        nargs="*",
        metavar="action",
        help="lifecycle actions to perform (see below)",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_collaborators(
    settings: StackSettings,
) -> tuple[ContainerEngine, DependencyInstaller, ApplicationServer]:
    """Instantiate the infrastructure adapters for *settings*."""
    from stackctl.infra.app_server import RailsServer
    from stackctl.infra.compose_engine import ComposeEngine
    from stackctl.infra.installers import ProjectInstaller
    from stackctl.infra.shell import CommandRunner

    runner = CommandRunner(settings.project_dir)
    return (
        ComposeEngine(runner, settings),
        ProjectInstaller(runner, settings),
        RailsServer(runner, settings),
    )


def _announce_phase(phase: Phase) -> None:
    console.print(f"\n[bold cyan]==>[/bold cyan] [bold]{phase.value}[/bold]")


def _report_stop_error(exc: StackctlError) -> None:
    console.print(f"[yellow]Could not stop containers:[/yellow] {escape(exc)}")


def _handle_lifecycle(actions: ActionSet) -> int:
    """Run the resolved *actions* against the real toolchain.

    Flow:
    1. Load settings and make sure the container engine (and, for
       armageddon, the prune command) is installed.
    2. Build the infra adapters.
    3. Trap SIGINT so an interrupt stops the containers.
    4. Execute the phases in their fixed order.
    """
    from stackctl.core.interrupts import InterruptHandler
    from stackctl.core.lifecycle import LifecycleExecutor
    from stackctl.infra.tool_detector import require_tool

    settings = StackSettings.from_env()
    require_tool(settings.engine_executable)
    prune_executable = settings.container_prune_command[0]
    if actions.armageddon and prune_executable != settings.engine_executable:
        require_tool(prune_executable)
    engine, installer, server = _build_collaborators(settings)

    with InterruptHandler(engine, on_stop_error=_report_stop_error) as interrupts:
        executor = LifecycleExecutor(
            engine,
            installer,
            server,
            host=settings.host,
            port=settings.port,
            cancelled=interrupts.cancelled,
            on_phase=_announce_phase,
        )
        executor.execute(actions)

    console.print("\n[bold green]Done.[/bold green]")
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``--doctor`` diagnostics command."""
    from stackctl.cli.doctor import run_doctor

    return run_doctor(StackSettings.from_env())


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the stackctl CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    StackctlError
        For unknown tokens, conflicting actions and failed phases; the
        :func:`cli` boundary renders these.
    """
    words = sys.argv[1:] if argv is None else argv
    # usage outranks every other word, dashed options included.
    if any(word in USAGE_TOKENS for word in words):
        print_usage()
        return exit_codes.SUCCESS

    parser = _build_parser()
    args, extras = parser.parse_known_args(words)

    outcome = parse_tokens([*args.actions, *extras])
    if args.doctor:
        return _handle_doctor()

    resolution = resolve(outcome.actions)
    for warning in resolution.warnings:
        console.print(f"[yellow]Warning:[/yellow] {escape(warning)}")

    return _handle_lifecycle(resolution.actions)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def report_error(exc: StackctlError) -> None:
    """Render *exc* (and its hint) the way the error boundary does."""
    console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
    if isinstance(exc, ConflictError) and exc.show_usage:
        console.print()
        print_usage()


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except LifecycleInterrupted as exc:
        console.print(f"\n[yellow]Aborted:[/yellow] {escape(exc)}")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except StackctlError as exc:
        report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
