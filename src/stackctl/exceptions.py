"""Custom exception hierarchy for stackctl.

All exceptions that cross layer boundaries must inherit from
:class:`StackctlError`.  Raw ``OSError`` / ``subprocess`` failures must
NEVER propagate beyond the infrastructure layer — they must be caught
and re-raised as a typed subclass defined here.

Hierarchy
---------
StackctlError
├── UsageError
│   └── UnknownTokenError
├── ConflictError
├── ConfigurationError
├── CollaboratorFailure
│   ├── CommandFailedError
│   ├── ToolNotFoundError
│   └── PhaseFailedError
├── LifecycleInterrupted
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Sequence


class StackctlError(Exception):
    """Base exception for all stackctl errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(StackctlError):
    """Raised when the command line cannot be interpreted."""


class UnknownTokenError(UsageError):
    """Raised when a token is not part of the action vocabulary."""

    def __init__(self, token: str, *, hint: str | None = None) -> None:
        super().__init__(f"Unknown option: {token!r}", hint=hint)
        self.token: str = token


class ConflictError(StackctlError):
    """Raised when the requested actions contradict each other or are empty."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        show_usage: bool = False,
    ) -> None:
        super().__init__(message, hint=hint)
        self.show_usage: bool = show_usage
        """Whether the CLI should print the usage text after the error."""


class ConfigurationError(StackctlError):
    """Raised when an environment override cannot be parsed."""


# --- External collaborators ------------------------------------------------

class CollaboratorFailure(StackctlError):
    """Raised when a call to an external tool does not succeed."""


class CommandFailedError(CollaboratorFailure):
    """Raised when an external command exits with a non-zero status."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        *,
        hint: str | None = None,
    ) -> None:
        self.command: tuple[str, ...] = tuple(command)
        self.returncode: int = returncode
        super().__init__(
            f"{' '.join(self.command)} exited with status {returncode}",
            hint=hint,
        )


class ToolNotFoundError(CollaboratorFailure):
    """Raised when a required executable cannot be located on PATH."""


class PhaseFailedError(CollaboratorFailure):
    """Raised by the lifecycle executor when a phase aborts.

    The originating infrastructure error is always chained as
    ``__cause__``.
    """

    def __init__(self, phase: str, message: str, *, hint: str | None = None) -> None:
        super().__init__(f"{phase} phase failed: {message}", hint=hint)
        self.phase: str = phase


# --- Interruption ----------------------------------------------------------

class LifecycleInterrupted(StackctlError):
    """Raised when an interrupt was observed before a phase could start."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(StackctlError):
    """Raised when a required runtime dependency is not available."""


def rerun_hint(phase: str) -> str:
    """Return guidance for re-running a single failed *phase*."""
    return f"Fix the problem above, then re-run only this phase: stackctl {phase}"
