"""Allow ``python -m stackctl`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m stackctl`` behaves identically to the ``stackctl``
console script.
"""

from __future__ import annotations

from stackctl.cli.app import cli

if __name__ == "__main__":
    cli()
