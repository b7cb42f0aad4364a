"""``docker compose`` implementation of :class:`~stackctl.core.protocols.ContainerEngine`."""

from __future__ import annotations

from stackctl.config import StackSettings
from stackctl.infra.shell import CommandRunner


class ComposeEngine:
    """Concrete :class:`ContainerEngine` driving the compose CLI.

    This class satisfies the :class:`~stackctl.core.protocols.ContainerEngine`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, runner: CommandRunner, settings: StackSettings) -> None:
        self._runner: CommandRunner = runner
        self._compose: tuple[str, ...] = settings.compose_command
        self._prune: tuple[str, ...] = settings.container_prune_command

    def build(self) -> None:
        self._runner.run((*self._compose, "build"))

    def up(self, *, detached: bool) -> None:
        args = ("up", "--detach") if detached else ("up",)
        self._runner.run((*self._compose, *args))

    def stop(self) -> None:
        self._runner.run((*self._compose, "stop"))

    def down(self, *, remove_volumes: bool, remove_orphans: bool) -> None:
        args = ["down"]
        if remove_volumes:
            args.append("--volumes")
        if remove_orphans:
            args.append("--remove-orphans")
        self._runner.run((*self._compose, *args))

    def prune_stopped_containers(self) -> None:
        self._runner.run(self._prune)
