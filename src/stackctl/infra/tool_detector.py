"""Infrastructure: executable detection and platform guidance.

This module is responsible for locating the external tools stackctl
shells out to and providing platform-specific installation guidance
when one is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from stackctl.exceptions import ToolNotFoundError


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a PATH lookup for one executable.

    Attributes
    ----------
    name : str
        Executable name that was looked up.
    found : bool
        Whether it was located on PATH.
    path : Path | None
        Absolute path to the binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the tool on the current
        platform.  Empty when the tool is already present.
    """

    name: str
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Probe PATH for *name*.

    Returns a :class:`ToolStatus` regardless of whether the tool is
    present — the caller decides whether to abort or merely warn.
    """
    result = shutil.which(name)
    if result is not None:
        return ToolStatus(
            name=name,
            found=True,
            path=Path(result).resolve(),
            install_commands=(),
        )
    return ToolStatus(
        name=name,
        found=False,
        path=None,
        install_commands=install_commands_for(name),
    )


def require_tool(name: str) -> Path:
    """Locate *name* or raise :class:`ToolNotFoundError` with guidance."""
    status = detect_tool(name)
    if not status.found or status.path is None:
        raise ToolNotFoundError(
            f"{name} is not installed or not on PATH.",
            hint=install_hint(name),
        )
    return status.path


def install_hint(name: str) -> str | None:
    """Return a multi-line install suggestion for *name*, if any is known."""
    commands = install_commands_for(name)
    if not commands:
        return None
    lines = [f"Install {name} using one of:"]
    lines.extend(f"  {cmd}" for cmd in commands)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

_INSTALL_COMMANDS: dict[str, dict[str, tuple[str, ...]]] = {
    "docker": {
        "linux": (
            "sudo apt install docker.io docker-compose-plugin",
            "sudo dnf install docker-ce docker-compose-plugin",
        ),
        "darwin": ("brew install --cask docker",),
        "windows": ("winget install Docker.DockerDesktop",),
    },
    "yarn": {
        "linux": ("npm install --global yarn", "corepack enable"),
        "darwin": ("brew install yarn", "corepack enable"),
        "windows": ("npm install --global yarn", "corepack enable"),
    },
    "bundle": {
        "linux": ("gem install bundler",),
        "darwin": ("gem install bundler",),
        "windows": ("gem install bundler",),
    },
    "ruby": {
        "linux": ("sudo apt install ruby-full", "sudo dnf install ruby"),
        "darwin": ("brew install ruby",),
        "windows": ("winget install RubyInstallerTeam.Ruby.3.2",),
    },
}


def install_commands_for(name: str) -> tuple[str, ...]:
    """Return install commands for *name* appropriate for the current OS."""
    per_platform = _INSTALL_COMMANDS.get(name)
    if per_platform is None:
        return ()
    system = platform.system().lower()
    return per_platform.get(system, ())
