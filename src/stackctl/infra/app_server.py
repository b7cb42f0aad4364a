"""Rails implementation of :class:`~stackctl.core.protocols.ApplicationServer`."""

from __future__ import annotations

from stackctl.config import StackSettings
from stackctl.infra.shell import CommandRunner


class RailsServer:
    """Concrete :class:`ApplicationServer` driving ``bin/rails``.

    A detached server is started in its own session and left running;
    a foreground server blocks until it exits (normally via Ctrl+C).
    """

    def __init__(self, runner: CommandRunner, settings: StackSettings) -> None:
        self._runner: CommandRunner = runner
        self._command: tuple[str, ...] = settings.server_command

    def initialize_storage(self) -> None:
        self._runner.run((*self._command, "db:create", "db:setup"))

    def run(self, port: int, host: str, *, detached: bool) -> None:
        command = (*self._command, "server", "--port", str(port), "--binding", host)
        if detached:
            self._runner.spawn_detached(command)
        else:
            self._runner.run(command)
