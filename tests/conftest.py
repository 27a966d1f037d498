"""Shared pytest fixtures for the Crayon test suite.

Provides reusable fixtures for:
- Temporary project directories
- Configurations with and without optional features
- A scripted prompter that replays canned answers
- A small fixture stub tree for resolver and registry tests
"""

from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import Any, Sequence

import pytest

from crayon.config import CrayonConfig, FeaturesConfig, TestsConfig


# ---------------------------------------------------------------------------
# Scripted prompter
# ---------------------------------------------------------------------------


class ScriptedPrompter:
    """Prompter that replays answers in order and records every question.

    ``calls`` holds ``(method, message)`` tuples in the order they were asked.
    Running out of answers fails the test instead of hanging.
    """

    def __init__(self, answers: Sequence[Any] = ()) -> None:
        self.answers: deque[Any] = deque(answers)
        self.calls: list[tuple[str, str]] = []

    def _next(self, method: str, message: str) -> Any:
        self.calls.append((method, message))
        if not self.answers:
            raise AssertionError(f"No scripted answer left for {method}({message!r})")
        return self.answers.popleft()

    def messages(self, method: str | None = None) -> list[str]:
        return [message for name, message in self.calls if method is None or name == method]

    async def ask(self, message: str) -> str:
        return self._next("ask", message)

    async def confirm(self, message: str, default: bool = True) -> bool:
        return self._next("confirm", message)

    async def select(self, message: str, choices: Sequence[str]) -> str:
        return self._next("select", message)

    async def multiple(self, message: str, choices: Sequence[str]) -> list[str]:
        return self._next("multiple", message)


@pytest.fixture
def scripted_prompter():
    """Factory: ``scripted_prompter([True, "label", ["string"], False])``."""
    return ScriptedPrompter


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Temporary project directory used as the command's cwd."""
    project = tmp_path / "project"
    project.mkdir()
    yield project


@pytest.fixture
def fixture_stub_root(tmp_path: Path) -> Path:
    """A minimal bundled stub tree with two frameworks.

    ``alpha`` has component, stories and tests stubs; ``beta`` only a
    component stub.
    """
    root = tmp_path / "stubs" / "frameworks"
    alpha = root / "alpha"
    alpha.mkdir(parents=True)
    (alpha / "Component.alpha.stub").write_text(
        "<{{ pascalName }} root=\"{{ toRootPrefix }}\" />\n", encoding="utf-8"
    )
    (alpha / "Component.stories.js.stub").write_text(
        "story {{ pascalName }}\n", encoding="utf-8"
    )
    (alpha / "Component.spec.js.stub").write_text(
        "test {{ pascalName }} with {{ testRunner }}\n", encoding="utf-8"
    )

    beta = root / "beta"
    beta.mkdir()
    (beta / "Component.beta.stub").write_text("beta {{ kebabName }}\n", encoding="utf-8")
    yield root


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@pytest.fixture
def vue_config() -> CrayonConfig:
    """Vue with no optional stubs."""
    return CrayonConfig(framework="vue", features=FeaturesConfig(storybook=False))


@pytest.fixture
def full_config() -> CrayonConfig:
    """Vue with stories and vitest tests enabled."""
    return CrayonConfig(
        framework="vue",
        features=FeaturesConfig(storybook=True, tests=TestsConfig(runner="vitest")),
    )


@pytest.fixture
def unconfigured() -> CrayonConfig:
    """No framework configured; commands must prompt for one."""
    return CrayonConfig()


@pytest.fixture(autouse=True)
def _clean_crayon_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of config tests."""
    for name in ("CRAYON_FRAMEWORK", "CRAYON_STORYBOOK", "CRAYON_TEST_RUNNER", "CRAYON_OVERRIDE_DIR"):
        monkeypatch.delenv(name, raising=False)
