"""Infrastructure layer — external system integration.

This layer wraps all interaction with the container engine, the package
managers, the application server and the operating system.  Every raw
``OSError`` or non-zero exit status must be caught here and re-raised
as a :class:`~stackctl.exceptions.StackctlError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from stackctl.infra.app_server import RailsServer
from stackctl.infra.compose_engine import ComposeEngine
from stackctl.infra.installers import ProjectInstaller
from stackctl.infra.shell import CommandRunner
from stackctl.infra.tool_detector import ToolStatus, detect_tool, require_tool

__all__: list[str] = [
    "CommandRunner",
    "ComposeEngine",
    "ProjectInstaller",
    "RailsServer",
    "ToolStatus",
    "detect_tool",
    "require_tool",
]
