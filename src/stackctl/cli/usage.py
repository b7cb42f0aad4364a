"""Usage text for the action vocabulary.

Shown for the ``usage`` token, appended to ``--help``, and printed after
the "no valid option specified" error.
"""

from __future__ import annotations

from stackctl.cli.console import console


USAGE_TEXT: str = """\
Usage: stackctl <action> ...

Actions (long form or one-letter alias, any order):
  build       b   build images, install dependencies, initialise the database
  start       s   start the environment and the application server
  detached    d   with start: run the server in the background
  halt, stop  h   stop the running containers
  tidy        t   stop and remove containers, keep volumes
  clean       c   remove caches, containers, volumes and orphans
  armageddon  a   clean, then prune all stopped containers and gem caches
  usage       u   show this message

Phases always run in the order build, start, halt, then teardown.
start cannot be combined with halt, tidy, clean or armageddon.

Examples:
  stackctl build start
  stackctl s d
  stackctl tidy"""


def print_usage() -> None:
    """Render :data:`USAGE_TEXT` on the console."""
    console.print(USAGE_TEXT)
