"""Runtime configuration for stackctl.

:class:`StackSettings` is a frozen dataclass carrying every command line
and endpoint the infrastructure adapters need.  Defaults reproduce the
stock development stack (``docker compose`` + yarn + bundler + Rails on
``0.0.0.0:3000``); a handful of ``STACKCTL_*`` environment variables can
override them without touching code.
"""

from __future__ import annotations

import os
import shlex
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from stackctl.exceptions import ConfigurationError


ENV_PROJECT_DIR = "STACKCTL_PROJECT_DIR"
ENV_COMPOSE = "STACKCTL_COMPOSE"
ENV_HOST = "STACKCTL_HOST"
ENV_PORT = "STACKCTL_PORT"
ENV_PRUNE = "STACKCTL_PRUNE"


@dataclass(frozen=True, slots=True)
class StackSettings:
    """Commands and endpoints used by the infrastructure layer."""

    project_dir: Path = Path(".")
    """Directory holding the compose file and the application sources."""

    compose_command: tuple[str, ...] = ("docker", "compose")
    """Container engine front end; sub-commands are appended."""

    host: str = "0.0.0.0"
    """Address the application server binds to."""

    port: int = 3000
    """Port the application server listens on."""

    frontend_install_command: tuple[str, ...] = ("yarn", "install")
    backend_install_command: tuple[str, ...] = ("bundle", "install")
    backend_check_command: tuple[str, ...] = ("bundle", "check")
    backend_cache_clean_command: tuple[str, ...] = ("bundle", "clean", "--force")

    server_command: tuple[str, ...] = ("bin/rails",)
    """Application server launcher; ``server`` / ``db:*`` are appended."""

    prune_command: tuple[str, ...] = ()
    """Host-wide removal of stopped containers (armageddon only).

    Empty means derive it from *compose_command*, see
    :attr:`container_prune_command`.
    """

    local_cache_dirs: tuple[str, ...] = ("node_modules", "tmp/cache")
    """Directories (relative to *project_dir*) removed by the clean phase."""

    @property
    def engine_executable(self) -> str:
        """Name of the executable the container engine command starts with."""
        return self.compose_command[0]

    @property
    def container_prune_command(self) -> tuple[str, ...]:
        """Command that prunes stopped containers for the configured engine.

        ``docker compose`` and ``docker-compose`` prune through ``docker``;
        ``podman-compose`` and ``podman compose`` through ``podman``.
        """
        if self.prune_command:
            return self.prune_command
        engine = Path(self.engine_executable).name
        if engine.endswith("-compose"):
            engine = engine[: -len("-compose")]
        return (engine, "container", "prune", "--force")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StackSettings:
        """Build settings from defaults plus ``STACKCTL_*`` overrides.

        Raises
        ------
        ConfigurationError
            When an override is present but cannot be parsed.
        """
        env = os.environ if environ is None else environ
        settings = cls()

        project_dir = env.get(ENV_PROJECT_DIR)
        if project_dir:
            settings = replace(settings, project_dir=Path(project_dir).expanduser())

        compose = env.get(ENV_COMPOSE)
        if compose:
            settings = replace(
                settings, compose_command=_parse_command(ENV_COMPOSE, compose),
            )

        prune = env.get(ENV_PRUNE)
        if prune:
            settings = replace(
                settings, prune_command=_parse_command(ENV_PRUNE, prune),
            )

        host = env.get(ENV_HOST)
        if host:
            settings = replace(settings, host=host)

        port = env.get(ENV_PORT)
        if port:
            settings = replace(settings, port=_parse_port(port))

        return settings


def _parse_command(name: str, raw: str) -> tuple[str, ...]:
    parts = tuple(shlex.split(raw))
    if not parts:
        raise ConfigurationError(f"{name} is blank.")
    return parts


def _parse_port(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"{ENV_PORT} must be an integer, got {raw!r}.",
        ) from exc
    if not 0 < value < 65536:
        raise ConfigurationError(
            f"{ENV_PORT} must be between 1 and 65535, got {value}.",
        )
    return value
