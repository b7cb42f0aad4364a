"""``stackctl --doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the tools stackctl shells out to are installed.

This module lives in the CLI layer — it may import from ``infra``
and ``config``, and it renders via Rich.  It only collects and
displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys

from stackctl.cli import exit_codes
from stackctl.cli.console import console
from stackctl.config import StackSettings
from stackctl.infra.tool_detector import ToolStatus, detect_tool
from stackctl.version import __version__


_OK = "[green]OK[/green]"
_WARN = "[yellow]WARN[/yellow]"
_FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _tool_check(status: ToolStatus, *, required: bool) -> tuple[str, str, str]:
    """Return (label, value, status) for one external tool."""
    if status.found:
        return status.name, str(status.path) if status.path else "found", _OK
    return status.name, "not found", _FAIL if required else _WARN


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {"Darwin": "macOS"}.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, _OK


def _tool_names(settings: StackSettings) -> list[str]:
    """Executables invoked by the configured commands, engine first."""
    names: list[str] = []
    for command in (
        settings.compose_command,
        settings.frontend_install_command,
        settings.backend_install_command,
        ("ruby",),
    ):
        if command[0] not in names:
            names.append(command[0])
    return names


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nstackctl doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<36} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<36} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(settings: StackSettings | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Only the container engine is critical; missing package managers are
    reported as warnings because ``halt``/``tidy`` do not need them.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    settings = settings or StackSettings()
    statuses = [detect_tool(name) for name in _tool_names(settings)]

    checks = [("stackctl", __version__, _OK), _python_version_check()]
    checks.extend(
        _tool_check(status, required=status.name == settings.engine_executable)
        for status in statuses
    )
    checks.append(_os_check())

    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
    else:
        table = Table(
            title="stackctl doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)
        console.print()
        console.print(table)
        console.print()

    for status in statuses:
        if status.found or not status.install_commands:
            continue
        console.print(f"[yellow]{status.name} is not installed.[/yellow] Try one of:")
        for cmd in status.install_commands:
            console.print(f"  [bold]{cmd}[/bold]")

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
