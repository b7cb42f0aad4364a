"""Core layer — action parsing, conflict resolution and lifecycle orchestration.

Rules
-----
* No ``print()`` calls.
* No subprocess, filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* External tools are reached only through the protocols in
  :mod:`stackctl.core.protocols`.
"""

from stackctl.core.interrupts import InterruptHandler
from stackctl.core.lifecycle import LifecycleExecutor
from stackctl.core.models import ActionSet, ParseOutcome, Phase, Resolution
from stackctl.core.parser import parse_tokens
from stackctl.core.protocols import ApplicationServer, ContainerEngine, DependencyInstaller
from stackctl.core.resolver import resolve

__all__: list[str] = [
    "ActionSet",
    "ApplicationServer",
    "ContainerEngine",
    "DependencyInstaller",
    "InterruptHandler",
    "LifecycleExecutor",
    "ParseOutcome",
    "Phase",
    "Resolution",
    "parse_tokens",
    "resolve",
]
