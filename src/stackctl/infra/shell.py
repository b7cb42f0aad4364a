"""Subprocess execution shared by every infrastructure adapter.

This module is the **only** place in the codebase that starts external
processes.  ``OSError`` from the OS and non-zero exit statuses are
translated into :class:`~stackctl.exceptions.CollaboratorFailure`
subclasses here; nothing raw escapes.

Child processes inherit the terminal so that installers and the
foreground server stream their own output.  No timeouts are applied.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from stackctl.exceptions import CommandFailedError, ToolNotFoundError
from stackctl.infra.tool_detector import install_hint


class CommandRunner:
    """Runs commands inside a fixed working directory.

    Parameters
    ----------
    cwd:
        Directory every command is started in.
    """

    def __init__(self, cwd: Path) -> None:
        self._cwd: Path = cwd
        self._detached: list[subprocess.Popen[bytes]] = []

    @property
    def cwd(self) -> Path:
        return self._cwd

    @property
    def detached(self) -> tuple[subprocess.Popen[bytes], ...]:
        """Handles of the processes started by :meth:`spawn_detached`."""
        return tuple(self._detached)

    def run(self, command: Sequence[str]) -> None:
        """Run *command* to completion.

        Raises
        ------
        CommandFailedError
            When the command exits with a non-zero status.
        ToolNotFoundError
            When the executable does not exist.
        """
        completed = self._call(command)
        if completed.returncode != 0:
            raise CommandFailedError(command, completed.returncode)

    def succeeds(self, command: Sequence[str]) -> bool:
        """Run *command* quietly and report whether it exited with status 0."""
        completed = self._call(
            command,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
        return completed.returncode == 0

    def spawn_detached(self, command: Sequence[str]) -> int:
        """Start *command* in its own session and return its PID.

        The child is not waited for and keeps running after stackctl
        exits.  Its handle is retained on the runner so it is not
        garbage-collected while the child is still alive.
        """
        try:
            process = subprocess.Popen(
                list(command),
                cwd=self._cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except FileNotFoundError as exc:
            raise self._missing(command) from exc
        except OSError as exc:
            raise CommandFailedError(command, -1, hint=str(exc)) from exc
        self._detached.append(process)
        return process.pid

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _call(
        self,
        command: Sequence[str],
        **kwargs: object,
    ) -> subprocess.CompletedProcess[bytes]:
        try:
            return subprocess.run(list(command), cwd=self._cwd, check=False, **kwargs)  # type: ignore[call-overload]
        except FileNotFoundError as exc:
            raise self._missing(command) from exc
        except OSError as exc:
            raise CommandFailedError(command, -1, hint=str(exc)) from exc

    @staticmethod
    def _missing(command: Sequence[str]) -> ToolNotFoundError:
        name = command[0]
        return ToolNotFoundError(
            f"{name} is not installed or not on PATH.",
            hint=install_hint(name),
        )
