"""Shared pytest fixtures and configuration for the stackctl test suite.

Guidelines
----------
* No test may start docker, yarn, bundler or rails.
* Collaborators are MagicMocks attached to one parent so call order
  across engine / installer / server can be asserted.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest


@pytest.fixture()
def stack() -> MagicMock:
    """Parent mock exposing ``engine``, ``installer`` and ``server`` children.

    ``stack.mock_calls`` records every collaborator call in order.
    """
    parent = MagicMock()
    parent.installer.check_backend.return_value = True
    return parent


@pytest.fixture(autouse=True)
def _clean_stackctl_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own ``STACKCTL_*`` overrides out of tests."""
    for name in (
        "STACKCTL_PROJECT_DIR",
        "STACKCTL_COMPOSE",
        "STACKCTL_HOST",
        "STACKCTL_PORT",
        "STACKCTL_PRUNE",
    ):
        monkeypatch.delenv(name, raising=False)
