"""``make:component`` -- scaffold a UI component from framework stubs.

The command runs through these steps, stopping early where noted:

1. resolve the target path (missing -> ``MissingPathError``)
2. resolve the framework, prompting when none is configured
   (unknown -> ``FrameworkNotFoundError``)
3. check the primary component file does not exist yet
   (exists -> ``ComponentExistsError``)
4. collect props, unless ``--skip-props``
5. show a summary and ask for confirmation (declined -> ``aborted``)
6. render and write the stubs through the framework plugin

``--eject`` skips straight from step 2 to copying the framework's stubs into
the override root.

Nothing is written before step 6. Write failures in step 6 propagate and
files already written stay on disk.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from crayon.config import CrayonConfig
from crayon.exceptions import (
    ComponentExistsError,
    FrameworkNotFoundError,
    MissingPathError,
    UserAbort,
)
from crayon.prompts import Prompter, QuestionaryPrompter
from crayon.scaffolder.frameworks import ComponentSpec, FrameworkPlugin, FrameworkRegistry
from crayon.scaffolder.props import Prop, PropSchemaBuilder
from crayon.utils import (
    path_segments,
    print_header,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)

COMMAND_NAME = "make:component"


class ScaffoldStatus(str, Enum):
    DONE = "done"
    EJECTED = "ejected"
    ABORTED = "aborted"


class ScaffoldResult(BaseModel):
    """Outcome of one ``make:component`` invocation."""

    status: ScaffoldStatus
    framework_id: str
    path: Path | None = None
    files: list[Path] = Field(default_factory=list)


class MakeComponentCommand:
    """Drives the interactive scaffolding workflow.

    Attributes:
        config: Configuration loaded for this invocation.
        prompter: Source of interactive answers.
        registry: Framework lookup table.
    """

    def __init__(
        self,
        config: CrayonConfig,
        prompter: Prompter | None = None,
        registry: FrameworkRegistry | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        self.config = config
        self.prompter = prompter or QuestionaryPrompter()
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.registry = registry or FrameworkRegistry(config, cwd=self.cwd)

    async def run(
        self,
        path: str | None = None,
        *,
        skip_props: bool = False,
        eject: bool = False,
        framework: str | None = None,
    ) -> ScaffoldResult:
        """Run the command.

        Args:
            path: Component path, e.g. ``components/Badge``.
            skip_props: Skip the prop questions.
            eject: Eject the framework's stubs instead of scaffolding.
            framework: Framework id overriding the configured one.

        Raises:
            PreconditionError: Missing path, unknown framework or existing
                component. Nothing has been written.
        """
        print_header(COMMAND_NAME)

        if eject:
            plugin = await self.resolve_framework(framework)
            return await self.eject(plugin)

        if not path or not path_segments(path):
            raise MissingPathError()

        plugin = await self.resolve_framework(framework)
        spec = ComponentSpec.from_path(path, plugin.framework_id)

        if plugin.component_file(spec).exists():
            raise ComponentExistsError(spec.component_name, spec.path)

        props: list[Prop] = []
        if not skip_props:
            props = await PropSchemaBuilder(self.prompter).define_props()
        spec = spec.model_copy(update={"props": props})

        try:
            await self.confirm_summary(spec)
        except UserAbort as exc:
            print_warning(str(exc))
            return ScaffoldResult(status=ScaffoldStatus.ABORTED, framework_id=plugin.framework_id)

        files = await plugin.run(spec)

        print_success(
            f"{spec.component_name} scaffolding created successfully at [{spec.path}]."
        )
        return ScaffoldResult(
            status=ScaffoldStatus.DONE,
            framework_id=plugin.framework_id,
            path=plugin.output_dir(spec),
            files=files,
        )

    # -- Steps -------------------------------------------------------------

    async def resolve_framework(self, requested: str | None = None) -> FrameworkPlugin:
        """Pick the framework plugin: option, then config, then a prompt."""
        framework_id = requested or self.config.framework
        if not framework_id:
            available = self.registry.available()
            if not available:
                raise FrameworkNotFoundError(None)
            framework_id = await self.prompter.select("Select framework:", available)
        return self.registry.get(framework_id)

    async def confirm_summary(self, spec: ComponentSpec) -> None:
        """Show what will be generated and ask for confirmation.

        Raises:
            UserAbort: If the user declines.
        """
        features = self.config.features
        summary = {
            "Component name": spec.component_name,
            "Component path": spec.path,
            "Framework": spec.framework_id,
            "Stories": "yes" if features.storybook else "no",
            "Tests": features.tests.runner if features.tests else "no",
        }
        print_summary_table(summary, title=f"Scaffolding component at: {spec.path}")

        if spec.props:
            print_info("Props:")
            for prop in spec.props:
                print_info(f"  {prop.summary()}")

        if not await self.prompter.confirm("Is this correct?"):
            raise UserAbort()

    async def eject(self, plugin: FrameworkPlugin) -> ScaffoldResult:
        target = await plugin.eject()
        print_success(f"{plugin.framework_id} stubs ejected to [{target}].")
        return ScaffoldResult(
            status=ScaffoldStatus.EJECTED,
            framework_id=plugin.framework_id,
            path=target,
            files=[target / name for name in plugin.resolver.list_stubs(plugin.framework_id)],
        )
