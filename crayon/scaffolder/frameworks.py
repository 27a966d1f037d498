"""Framework plugins.

Every immediate subdirectory of the bundled stub root is a framework. A
framework's stubs are classified by role from their file names:

* ``*.stories.*.stub`` is the stories stub (needs ``features.storybook``)
* ``*.spec.*.stub`` / ``*.test.*.stub`` is the tests stub (needs ``features.tests``)
* anything else is the component stub; there must be exactly one

:class:`FrameworkPlugin` exposes the two operations commands rely on,
``run`` and ``eject``. :class:`FrameworkRegistry` is the lookup table from
framework id to plugin.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from crayon.config import CrayonConfig
from crayon.exceptions import FrameworkNotFoundError, PreconditionError
from crayon.scaffolder.ejector import EjectionManager
from crayon.scaffolder.props import Prop
from crayon.scaffolder.templates import (
    BUNDLED_STUB_ROOT,
    STUB_SUFFIX,
    StubResolver,
    TemplateRenderer,
    build_context,
    output_filename,
)
from crayon.utils import path_segments

# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class ComponentSpec(BaseModel):
    """The component being scaffolded."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Target directory, relative to cwd unless absolute")
    component_name: str
    framework_id: str
    props: list[Prop] = Field(default_factory=list)

    @classmethod
    def from_path(cls, path: str, framework_id: str, props: list[Prop] | None = None) -> "ComponentSpec":
        """Normalise *path* and take its last segment as the component name.

        An absolute *path* stays absolute so output lands where it points.
        """
        segments = path_segments(path)
        if not segments:
            raise ValueError(f"invalid component path: {path!r}")
        normalised = "/".join(segments)
        if Path(path).is_absolute():
            normalised = "/" + normalised
        return cls(
            path=normalised,
            component_name=segments[-1],
            framework_id=framework_id,
            props=list(props or []),
        )


class StubSet(BaseModel):
    """Stub file names of one framework, by role."""

    component: str
    stories: str | None = None
    tests: str | None = None

    @classmethod
    def classify(cls, framework_id: str, stub_names: list[str]) -> "StubSet":
        components: list[str] = []
        stories: str | None = None
        tests: str | None = None

        for name in stub_names:
            parts = name[: -len(STUB_SUFFIX)].split(".")[1:]
            if "stories" in parts:
                stories = name
            elif "spec" in parts or "test" in parts:
                tests = name
            else:
                components.append(name)

        if len(components) != 1:
            raise PreconditionError(
                f"Framework {framework_id!r} must define exactly one component stub, "
                f"found {len(components)}"
            )
        return cls(component=components[0], stories=stories, tests=tests)


# ---------------------------------------------------------------------------
# Plugin
# ---------------------------------------------------------------------------


class FrameworkPlugin:
    """Scaffolds components for one framework.

    Args:
        framework_id: Name of the framework's stub directory.
        config: The invocation's configuration.
        cwd: Project directory; output and override paths are relative to it.
        bundled_root: Packaged stub root (tests point this at a fixture tree).
    """

    def __init__(
        self,
        framework_id: str,
        config: CrayonConfig,
        cwd: str | Path | None = None,
        bundled_root: str | Path | None = None,
    ) -> None:
        self.framework_id = framework_id
        self.config = config
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.override_root = config.override_root(self.cwd)
        self.resolver = StubResolver(self.override_root, bundled_root)
        self.renderer = TemplateRenderer()
        self.stubs = StubSet.classify(framework_id, self.resolver.list_stubs(framework_id))

    def __repr__(self) -> str:
        return f"FrameworkPlugin({self.framework_id!r})"

    # -- Paths -------------------------------------------------------------

    def output_dir(self, spec: ComponentSpec) -> Path:
        return self.cwd / spec.path

    def component_file(self, spec: ComponentSpec) -> Path:
        """Where the primary component file of *spec* is written."""
        return self.output_dir(spec) / output_filename(self.stubs.component, spec.component_name)

    def enabled_stubs(self) -> list[str]:
        """Stubs rendered by :meth:`run` under the current feature switches."""
        names = [self.stubs.component]
        if self.config.features.storybook and self.stubs.stories:
            names.append(self.stubs.stories)
        if self.config.features.tests is not None and self.stubs.tests:
            names.append(self.stubs.tests)
        return names

    # -- Operations --------------------------------------------------------

    async def run(self, spec: ComponentSpec) -> list[Path]:
        """Render and write every enabled stub for *spec*.

        Files are written one after another; a failure leaves earlier files
        in place.

        Returns:
            The written file paths, in write order.
        """
        context = build_context(
            spec.component_name,
            spec.path,
            spec.props,
            framework=self.framework_id,
            test_runner=self.config.test_runner,
        )
        out_dir = self.output_dir(spec)

        written: list[Path] = []
        for stub_name in self.enabled_stubs():
            text = self.resolver.load(self.framework_id, stub_name)
            target = out_dir / output_filename(stub_name, spec.component_name)
            written.append(await self.renderer.render_to_file(text, target, context))
        return written

    async def eject(self) -> Path:
        """Copy every bundled stub into the override root.

        Returns:
            ``<cwd>/<override_dir>/stubs/<framework_id>``.
        """
        manager = EjectionManager(self.resolver, self.override_root)
        return await manager.eject(self.framework_id)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class FrameworkRegistry:
    """Discovers frameworks from the bundled stub root."""

    def __init__(
        self,
        config: CrayonConfig,
        cwd: str | Path | None = None,
        bundled_root: str | Path | None = None,
    ) -> None:
        self.config = config
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.bundled_root = Path(bundled_root) if bundled_root is not None else BUNDLED_STUB_ROOT
        self._plugins: dict[str, FrameworkPlugin] = {}

    def available(self) -> list[str]:
        """Sorted framework ids (the stub root's immediate subdirectories)."""
        if not self.bundled_root.is_dir():
            return []
        return sorted(
            p.name for p in self.bundled_root.iterdir()
            if p.is_dir() and not p.name.startswith((".", "_"))
        )

    def __contains__(self, framework_id: object) -> bool:
        return framework_id in self.available()

    def get(self, framework_id: str | None) -> FrameworkPlugin:
        """Return the plugin for *framework_id*.

        Raises:
            FrameworkNotFoundError: If no such framework is bundled.
        """
        available = self.available()
        if not framework_id or framework_id not in available:
            raise FrameworkNotFoundError(framework_id, available)

        if framework_id not in self._plugins:
            self._plugins[framework_id] = FrameworkPlugin(
                framework_id, self.config, cwd=self.cwd, bundled_root=self.bundled_root
            )
        return self._plugins[framework_id]
