"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so the lifecycle logic can be driven by fakes in
tests.

Every method signals failure by raising a
:class:`~stackctl.exceptions.StackctlError` subclass (normally
:class:`~stackctl.exceptions.CommandFailedError`); returning normally
means success.
"""

from __future__ import annotations

from typing import Protocol


class ContainerEngine(Protocol):
    """Contract for the container orchestration backend."""

    def build(self) -> None:
        """Build the service images."""
        ...  # pragma: no cover

    def up(self, *, detached: bool) -> None:
        """Create and start the service containers."""
        ...  # pragma: no cover

    def stop(self) -> None:
        """Stop running containers without removing them."""
        ...  # pragma: no cover

    def down(self, *, remove_volumes: bool, remove_orphans: bool) -> None:
        """Stop and remove containers and networks.

        Named volumes survive unless *remove_volumes* is set.
        """
        ...  # pragma: no cover

    def prune_stopped_containers(self) -> None:
        """Remove every stopped container on the host, not just this project's."""
        ...  # pragma: no cover


class DependencyInstaller(Protocol):
    """Contract for the front-end and back-end package managers."""

    def install_frontend(self) -> None:
        ...  # pragma: no cover

    def install_backend(self) -> None:
        ...  # pragma: no cover

    def check_backend(self) -> bool:
        """Return ``True`` when back-end dependencies are already satisfied.

        An unsatisfied check is not an error.
        """
        ...  # pragma: no cover

    def remove_local_caches(self) -> None:
        """Delete project-local dependency caches."""
        ...  # pragma: no cover

    def clean_backend_cache(self) -> None:
        """Purge the back-end package manager's cache."""
        ...  # pragma: no cover


class ApplicationServer(Protocol):
    """Contract for the web application process."""

    def initialize_storage(self) -> None:
        """Create and seed the persistent store."""
        ...  # pragma: no cover

    def run(self, port: int, host: str, *, detached: bool) -> None:
        """Serve the application on *host*:*port*.

        Blocks until the server exits unless *detached* is set.
        """
        ...  # pragma: no cover
