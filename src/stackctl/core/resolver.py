"""Conflict resolution between simultaneously requested actions.

Rules are applied in a fixed order; the first failing rule wins and only
one conflict is ever reported.  Destructive teardowns never error when
combined — the least severe one is kept and a warning is returned.
"""

from __future__ import annotations

from dataclasses import replace

from stackctl.core.models import ActionSet, Resolution
from stackctl.exceptions import ConflictError


# Reported in this order when combined with ``start``.
_START_CONFLICTS: tuple[str, ...] = ("clean", "armageddon", "tidy", "halt")


def resolve(actions: ActionSet) -> Resolution:
    """Validate *actions* and downgrade redundant teardowns.

    Raises
    ------
    ConflictError
        When ``detached`` lacks ``start``, nothing was requested, or
        ``start`` is combined with a stop/teardown action.
    """
    if actions.detached and not actions.start:
        raise ConflictError(
            "detached requires start",
            hint="Use 'stackctl start detached'.",
        )

    if not actions.any_requested:
        raise ConflictError("no valid option specified", show_usage=True)

    if actions.start:
        for name in _START_CONFLICTS:
            if getattr(actions, name):
                raise ConflictError(
                    f"start cannot be combined with {name}",
                    hint=f"Run 'stackctl {name}' and 'stackctl start' separately.",
                )

    warnings: list[str] = []
    if actions.tidy and (actions.clean or actions.armageddon):
        dropped = [name for name in ("clean", "armageddon") if getattr(actions, name)]
        warnings.append(
            f"tidy takes precedence; ignoring {' and '.join(dropped)}",
        )
        actions = replace(actions, clean=False, armageddon=False)
    elif actions.clean and actions.armageddon:
        warnings.append("clean takes precedence; ignoring armageddon")
        actions = replace(actions, armageddon=False)

    return Resolution(actions=actions, warnings=tuple(warnings))
