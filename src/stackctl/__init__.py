"""stackctl — local development stack lifecycle controller.

Drives a containerised development environment through named lifecycle
phases (build, start, halt, tidy, clean, armageddon) with a strict
layered architecture.
"""

from stackctl.version import __version__

__all__: list[str] = ["__version__"]
