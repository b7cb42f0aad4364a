"""Package-manager implementation of :class:`~stackctl.core.protocols.DependencyInstaller`.

Front-end packages are handled by yarn, back-end gems by bundler; both
command lines come from :class:`~stackctl.config.StackSettings`.
"""

from __future__ import annotations

import shutil

from stackctl.config import StackSettings
from stackctl.exceptions import CollaboratorFailure
from stackctl.infra.shell import CommandRunner


class ProjectInstaller:
    """Concrete :class:`DependencyInstaller` for a yarn + bundler project."""

    def __init__(self, runner: CommandRunner, settings: StackSettings) -> None:
        self._runner: CommandRunner = runner
        self._settings: StackSettings = settings

    def install_frontend(self) -> None:
        self._runner.run(self._settings.frontend_install_command)

    def install_backend(self) -> None:
        self._runner.run(self._settings.backend_install_command)

    def check_backend(self) -> bool:
        return self._runner.succeeds(self._settings.backend_check_command)

    def remove_local_caches(self) -> None:
        """Delete the configured cache directories under the project root.

        Missing directories are skipped.

        Raises
        ------
        CollaboratorFailure
            When an existing directory cannot be removed.
        """
        for relative in self._settings.local_cache_dirs:
            target = self._runner.cwd / relative
            if not target.exists():
                continue
            try:
                shutil.rmtree(target)
            except OSError as exc:
                raise CollaboratorFailure(
                    f"Could not remove {target}: {exc.strerror or exc}",
                    hint="Check the directory permissions.",
                ) from exc

    def clean_backend_cache(self) -> None:
        self._runner.run(self._settings.backend_cache_clean_command)
