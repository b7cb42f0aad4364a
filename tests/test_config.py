"""Tests for settings loading (config.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from stackctl.config import StackSettings
from stackctl.exceptions import ConfigurationError


class TestDefaults:
    def test_defaults(self) -> None:
        settings = StackSettings()
        assert settings.compose_command == ("docker", "compose")
        assert settings.host == "0.0.0.0"
        assert settings.port == 3000
        assert settings.engine_executable == "docker"

    def test_empty_environment_gives_defaults(self) -> None:
        assert StackSettings.from_env({}) == StackSettings()


class TestOverrides:
    def test_all_overrides(self, tmp_path: Path) -> None:
        settings = StackSettings.from_env(
            {
                "STACKCTL_PROJECT_DIR": str(tmp_path),
                "STACKCTL_COMPOSE": "podman-compose --file dev.yml",
                "STACKCTL_HOST": "127.0.0.1",
                "STACKCTL_PORT": "8080",
            },
        )
        assert settings.project_dir == tmp_path
        assert settings.compose_command == ("podman-compose", "--file", "dev.yml")
        assert settings.engine_executable == "podman-compose"
        assert settings.host == "127.0.0.1"
        assert settings.port == 8080

    def test_empty_values_are_ignored(self) -> None:
        assert StackSettings.from_env({"STACKCTL_PORT": "", "STACKCTL_HOST": ""}) == (
            StackSettings()
        )

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STACKCTL_PORT", "5000")
        assert StackSettings.from_env().port == 5000

    @pytest.mark.parametrize("raw", ["abc", "0", "70000", "-1"])
    def test_bad_port(self, raw: str) -> None:
        with pytest.raises(ConfigurationError, match="STACKCTL_PORT"):
            StackSettings.from_env({"STACKCTL_PORT": raw})

    def test_blank_compose(self) -> None:
        with pytest.raises(ConfigurationError, match="STACKCTL_COMPOSE"):
            StackSettings.from_env({"STACKCTL_COMPOSE": "   "})


class TestPruneCommand:
    @pytest.mark.parametrize(
        ("compose", "engine"),
        [
            ("docker compose", "docker"),
            ("podman-compose", "podman"),
            ("podman compose", "podman"),
            ("/usr/bin/docker-compose --file x.yml", "docker"),
        ],
    )
    def test_derived_from_compose(self, compose: str, engine: str) -> None:
        settings = StackSettings.from_env({"STACKCTL_COMPOSE": compose})
        assert settings.container_prune_command == (
            engine, "container", "prune", "--force",
        )

    def test_override(self) -> None:
        settings = StackSettings.from_env({"STACKCTL_PRUNE": "nerdctl container prune -f"})
        assert settings.container_prune_command == ("nerdctl", "container", "prune", "-f")

    def test_blank_override(self) -> None:
        with pytest.raises(ConfigurationError, match="STACKCTL_PRUNE"):
            StackSettings.from_env({"STACKCTL_PRUNE": "  "})
