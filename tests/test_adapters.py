"""Tests for the collaborator adapters (compose engine, installers, server).

A MagicMock stands in for :class:`CommandRunner`; assertions are made on
the exact command lines.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from unittest.mock import MagicMock, call, patch

import pytest

from stackctl.config import StackSettings
from stackctl.exceptions import CollaboratorFailure
from stackctl.infra.app_server import RailsServer
from stackctl.infra.compose_engine import ComposeEngine
from stackctl.infra.installers import ProjectInstaller


@pytest.fixture()
def runner(tmp_path: Path) -> MagicMock:
    mock = MagicMock()
    mock.cwd = tmp_path
    return mock


# ---------------------------------------------------------------------------
# ComposeEngine
# ---------------------------------------------------------------------------

class TestComposeEngine:
    def test_build(self, runner: MagicMock) -> None:
        ComposeEngine(runner, StackSettings()).build()
        runner.run.assert_called_once_with(("docker", "compose", "build"))

    def test_up_detached(self, runner: MagicMock) -> None:
        ComposeEngine(runner, StackSettings()).up(detached=True)
        runner.run.assert_called_once_with(("docker", "compose", "up", "--detach"))

    def test_up_foreground(self, runner: MagicMock) -> None:
        ComposeEngine(runner, StackSettings()).up(detached=False)
        runner.run.assert_called_once_with(("docker", "compose", "up"))

    def test_stop(self, runner: MagicMock) -> None:
        ComposeEngine(runner, StackSettings()).stop()
        runner.run.assert_called_once_with(("docker", "compose", "stop"))

    def test_down_keeps_volumes(self, runner: MagicMock) -> None:
        ComposeEngine(runner, StackSettings()).down(
            remove_volumes=False, remove_orphans=False,
        )
        runner.run.assert_called_once_with(("docker", "compose", "down"))

    def test_down_full(self, runner: MagicMock) -> None:
        ComposeEngine(runner, StackSettings()).down(
            remove_volumes=True, remove_orphans=True,
        )
        runner.run.assert_called_once_with(
            ("docker", "compose", "down", "--volumes", "--remove-orphans"),
        )

    def test_prune(self, runner: MagicMock) -> None:
        ComposeEngine(runner, StackSettings()).prune_stopped_containers()
        runner.run.assert_called_once_with(("docker", "container", "prune", "--force"))

    @pytest.mark.parametrize(
        ("compose", "expected"),
        [
            (("podman-compose",), ("podman", "container", "prune", "--force")),
            (("podman", "compose"), ("podman", "container", "prune", "--force")),
        ],
    )
    def test_prune_follows_engine(
        self, runner: MagicMock, compose: tuple[str, ...], expected: tuple[str, ...],
    ) -> None:
        settings = replace(StackSettings(), compose_command=compose)
        ComposeEngine(runner, settings).prune_stopped_containers()
        runner.run.assert_called_once_with(expected)

    def test_custom_compose_command(self, runner: MagicMock) -> None:
        settings = replace(StackSettings(), compose_command=("docker-compose",))
        ComposeEngine(runner, settings).stop()
        runner.run.assert_called_once_with(("docker-compose", "stop"))


# ---------------------------------------------------------------------------
# ProjectInstaller
# ---------------------------------------------------------------------------

class TestProjectInstaller:
    def test_install_commands(self, runner: MagicMock) -> None:
        installer = ProjectInstaller(runner, StackSettings())
        installer.install_frontend()
        installer.install_backend()
        installer.clean_backend_cache()
        assert runner.run.call_args_list == [
            call(("yarn", "install")),
            call(("bundle", "install")),
            call(("bundle", "clean", "--force")),
        ]

    @pytest.mark.parametrize("result", [True, False])
    def test_check_backend(self, runner: MagicMock, result: bool) -> None:
        runner.succeeds.return_value = result
        assert ProjectInstaller(runner, StackSettings()).check_backend() is result
        runner.succeeds.assert_called_once_with(("bundle", "check"))

    def test_remove_local_caches(self, runner: MagicMock, tmp_path: Path) -> None:
        (tmp_path / "node_modules" / "left-pad").mkdir(parents=True)
        (tmp_path / "tmp" / "cache").mkdir(parents=True)
        (tmp_path / "tmp" / "keep.txt").write_text("x")

        ProjectInstaller(runner, StackSettings()).remove_local_caches()

        assert not (tmp_path / "node_modules").exists()
        assert not (tmp_path / "tmp" / "cache").exists()
        assert (tmp_path / "tmp" / "keep.txt").exists()
        runner.run.assert_not_called()

    def test_remove_local_caches_skips_missing(self, runner: MagicMock) -> None:
        ProjectInstaller(runner, StackSettings()).remove_local_caches()

    def test_remove_local_caches_failure(self, runner: MagicMock, tmp_path: Path) -> None:
        (tmp_path / "node_modules").mkdir()
        with patch(
            "stackctl.infra.installers.shutil.rmtree",
            side_effect=PermissionError(13, "Permission denied"),
        ):
            with pytest.raises(CollaboratorFailure, match="Permission denied"):
                ProjectInstaller(runner, StackSettings()).remove_local_caches()


# ---------------------------------------------------------------------------
# RailsServer
# ---------------------------------------------------------------------------

class TestRailsServer:
    def test_initialize_storage(self, runner: MagicMock) -> None:
        RailsServer(runner, StackSettings()).initialize_storage()
        runner.run.assert_called_once_with(("bin/rails", "db:create", "db:setup"))

    def test_run_foreground_blocks(self, runner: MagicMock) -> None:
        RailsServer(runner, StackSettings()).run(3000, "0.0.0.0", detached=False)
        runner.run.assert_called_once_with(
            ("bin/rails", "server", "--port", "3000", "--binding", "0.0.0.0"),
        )
        runner.spawn_detached.assert_not_called()

    def test_run_detached_spawns(self, runner: MagicMock) -> None:
        RailsServer(runner, StackSettings()).run(8080, "127.0.0.1", detached=True)
        runner.spawn_detached.assert_called_once_with(
            ("bin/rails", "server", "--port", "8080", "--binding", "127.0.0.1"),
        )
        runner.run.assert_not_called()
