"""Domain models for stackctl.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  The conflict resolver derives a new
:class:`ActionSet` with :func:`dataclasses.replace` rather than mutating
the one produced by the parser.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields


# ---------------------------------------------------------------------------
# Lifecycle phases
# ---------------------------------------------------------------------------

class Phase(enum.Enum):
    """A named unit of orchestration work.

    Declaration order is execution order.
    """

    BUILD = "build"
    START = "start"
    HALT = "halt"
    TIDY = "tidy"
    CLEAN = "clean"
    ARMAGEDDON = "armageddon"


# ---------------------------------------------------------------------------
# Requested actions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ActionSet:
    """The set of lifecycle intents for a single invocation."""

    build: bool = False
    start: bool = False
    detached: bool = False
    """Modifier for *start*: launch the server without blocking."""

    halt: bool = False
    tidy: bool = False
    clean: bool = False
    armageddon: bool = False

    @property
    def any_requested(self) -> bool:
        """``True`` when at least one action was requested."""
        return any(getattr(self, f.name) for f in fields(self))

    def phases(self) -> tuple[Phase, ...]:
        """Return the requested phases in execution order."""
        return tuple(phase for phase in Phase if getattr(self, phase.value))


# ---------------------------------------------------------------------------
# Pipeline results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """Result of interpreting the command-line tokens."""

    actions: ActionSet
    show_usage: bool = False
    """``True`` when ``usage`` was requested; *actions* is then empty."""


@dataclass(frozen=True, slots=True)
class Resolution:
    """A conflict-free :class:`ActionSet` plus any downgrade warnings."""

    actions: ActionSet
    warnings: tuple[str, ...] = ()
