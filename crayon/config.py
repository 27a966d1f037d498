"""Crayon configuration.

Typed configuration for every command. Settings use Pydantic v2 models so they
are validated at construction time and serialised to/from JSON or environment
variables without boiler-plate.

A configuration is loaded once per invocation (see :meth:`CrayonConfig.discover`)
and passed explicitly to the commands and framework plugins; nothing reads it
from global state.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

CONFIG_FILENAME = "crayon.config.json"


class TestsConfig(BaseModel):
    """Test-file generation settings."""

    __test__ = False

    model_config = ConfigDict(frozen=True)

    runner: str = Field(default="jest", description="Test runner the generated test file targets (jest, vitest, ...)")


class FeaturesConfig(BaseModel):
    """Optional stub roles. Absent features are not generated."""

    model_config = ConfigDict(frozen=True)

    storybook: bool = Field(default=False, description="Generate a stories file")
    tests: TestsConfig | None = Field(default=None, description="Generate a test file")


class CrayonConfig(BaseModel):
    """Project-level Crayon configuration.

    Holds the default framework, the feature switches that enable optional
    stubs, and the paths used by the eject and ``add:vuex`` commands.
    """

    model_config = ConfigDict(frozen=True)

    framework: str | None = Field(default=None, description="Default framework id")
    features: FeaturesConfig = Field(default_factory=FeaturesConfig)
    override_dir: str = Field(
        default=".crayon",
        description="Directory (relative to cwd) that holds ejected stubs",
    )

    # add:vuex
    js_directory: str = Field(default="resources/assets/js")
    js_entry: str = Field(default="app.js")
    package_manager: str = Field(default="yarn")

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    def override_root(self, cwd: Path | None = None) -> Path:
        """Root of the ejected stub tree, ``<cwd>/<override_dir>/stubs``."""
        return (cwd or Path.cwd()) / self.override_dir / "stubs"

    def entry_path(self, cwd: Path | None = None) -> Path:
        """Path to the application entry file patched by ``add:vuex``."""
        return (cwd or Path.cwd()) / self.js_directory / self.js_entry

    @property
    def test_runner(self) -> str | None:
        """The configured test runner, or ``None`` when tests are disabled."""
        return self.features.tests.runner if self.features.tests else None

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2, exclude_none=True), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "CrayonConfig":
        """Load a configuration from JSON.

        Raises:
            FileNotFoundError: If *path* does not exist.
            pydantic.ValidationError: If the file content is invalid.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def discover(cls, cwd: Path | None = None, path: Path | None = None) -> "CrayonConfig":
        """Load ``crayon.config.json`` (or *path*) and apply env overrides.

        A missing default config file yields the default configuration. An
        explicitly requested *path* must exist.
        """
        config_path = Path(path) if path else (cwd or Path.cwd()) / CONFIG_FILENAME
        if path is not None or config_path.exists():
            base = cls.load(config_path)
        else:
            base = cls()
        return base.with_env_overrides()

    @classmethod
    def from_env(cls) -> "CrayonConfig":
        """Build a ``CrayonConfig`` from environment variables only."""
        return cls().with_env_overrides()

    def with_env_overrides(self) -> "CrayonConfig":
        """Return a copy with environment variables applied.

        Recognised variables (all optional):
            CRAYON_FRAMEWORK, CRAYON_STORYBOOK, CRAYON_TEST_RUNNER,
            CRAYON_OVERRIDE_DIR.
        """
        updates: dict[str, Any] = {}
        if os.environ.get("CRAYON_FRAMEWORK"):
            updates["framework"] = os.environ["CRAYON_FRAMEWORK"]
        if os.environ.get("CRAYON_OVERRIDE_DIR"):
            updates["override_dir"] = os.environ["CRAYON_OVERRIDE_DIR"]

        feature_updates: dict[str, Any] = {}
        if os.environ.get("CRAYON_STORYBOOK"):
            feature_updates["storybook"] = _env_flag(os.environ["CRAYON_STORYBOOK"])
        if os.environ.get("CRAYON_TEST_RUNNER"):
            feature_updates["tests"] = TestsConfig(runner=os.environ["CRAYON_TEST_RUNNER"])
        if feature_updates:
            updates["features"] = self.features.model_copy(update=feature_updates)

        if not updates:
            return self
        return self.model_copy(update=updates)


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")
