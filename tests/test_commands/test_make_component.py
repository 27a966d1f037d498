"""Integration tests for the ``make:component`` command.

Covers:
- The Badge/vue scenario with no optional stubs
- Missing path, unknown framework and existing component preconditions
- Declining the confirmation writes nothing
- Framework prompt when none is configured, --framework override
- --skip-props and --eject flows
"""

from __future__ import annotations

from pathlib import Path

import pytest

from crayon.commands.make_component import MakeComponentCommand, ScaffoldStatus
from crayon.config import CrayonConfig, FeaturesConfig, TestsConfig
from crayon.exceptions import ComponentExistsError, FrameworkNotFoundError, MissingPathError
from crayon.scaffolder.frameworks import FrameworkRegistry
from crayon.scaffolder.props import PROP_TYPES


pytestmark = pytest.mark.integration


def _tree(root: Path) -> list[str]:
    return sorted(str(p.relative_to(root)) for p in root.rglob("*") if p.is_file())


class TestScaffold:
    @pytest.mark.asyncio
    async def test_badge_vue_without_optional_stubs(self, project_dir, vue_config, scripted_prompter):
        prompter = scripted_prompter([False, True])
        command = MakeComponentCommand(vue_config, prompter=prompter, cwd=project_dir)

        result = await command.run("components/Badge")

        assert result.status is ScaffoldStatus.DONE
        assert result.framework_id == "vue"
        assert _tree(project_dir) == ["components/Badge/Badge.vue"]
        content = (project_dir / "components" / "Badge" / "Badge.vue").read_text()
        assert "name: 'Badge'," in content
        assert "props:" not in content
        assert prompter.messages() == ["Would you like to define props?", "Is this correct?"]

    @pytest.mark.asyncio
    async def test_with_props_and_all_features(self, project_dir, full_config, scripted_prompter):
        prompter = scripted_prompter([
            True, "label", ["string"],
            True, "label", "count", ["number"],
            False,
            True,
        ])
        command = MakeComponentCommand(full_config, prompter=prompter, cwd=project_dir)

        result = await command.run("components/Badge")

        assert [p.name for p in result.files] == ["Badge.vue", "Badge.stories.js", "Badge.spec.js"]
        component = (project_dir / "components" / "Badge" / "Badge.vue").read_text()
        assert f"default: {PROP_TYPES['string'].default}," in component
        assert f"default: {PROP_TYPES['number'].default}," in component

    @pytest.mark.asyncio
    async def test_summary_lists_props(self, project_dir, vue_config, scripted_prompter, capsys):
        prompter = scripted_prompter([True, "value", ["number", "string"], False, True])
        await MakeComponentCommand(vue_config, prompter=prompter, cwd=project_dir).run("Badge")

        out = capsys.readouterr().out
        assert "value: [number, string]" in out
        assert "Badge" in out

    @pytest.mark.asyncio
    async def test_skip_props(self, project_dir, vue_config, scripted_prompter):
        prompter = scripted_prompter([True])
        result = await MakeComponentCommand(vue_config, prompter=prompter, cwd=project_dir).run(
            "Badge", skip_props=True
        )
        assert result.status is ScaffoldStatus.DONE
        assert prompter.messages() == ["Is this correct?"]

    @pytest.mark.asyncio
    async def test_framework_option_overrides_config(self, project_dir, vue_config, scripted_prompter):
        prompter = scripted_prompter([True])
        result = await MakeComponentCommand(vue_config, prompter=prompter, cwd=project_dir).run(
            "ui/Badge", skip_props=True, framework="react"
        )
        assert result.framework_id == "react"
        assert _tree(project_dir) == ["ui/Badge/Badge.tsx"]

    @pytest.mark.asyncio
    async def test_prompts_for_framework_when_unconfigured(self, project_dir, unconfigured, scripted_prompter):
        prompter = scripted_prompter(["react", True])
        result = await MakeComponentCommand(unconfigured, prompter=prompter, cwd=project_dir).run(
            "Badge", skip_props=True
        )
        assert result.framework_id == "react"
        assert prompter.calls[0] == ("select", "Select framework:")

    @pytest.mark.asyncio
    async def test_renders_edited_override(self, project_dir, vue_config, scripted_prompter):
        override = vue_config.override_root(project_dir) / "vue"
        override.mkdir(parents=True)
        (override / "Component.vue.stub").write_text("custom {{ pascalName }}\n")

        await MakeComponentCommand(vue_config, prompter=scripted_prompter([True]), cwd=project_dir).run(
            "Badge", skip_props=True
        )

        assert (project_dir / "Badge" / "Badge.vue").read_text() == "custom Badge\n"


class TestPreconditions:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", [None, "", "./"])
    async def test_missing_path(self, project_dir, vue_config, scripted_prompter, path):
        prompter = scripted_prompter([])
        with pytest.raises(MissingPathError, match="Missing path argument"):
            await MakeComponentCommand(vue_config, prompter=prompter, cwd=project_dir).run(path)
        assert _tree(project_dir) == []
        assert prompter.calls == []

    @pytest.mark.asyncio
    async def test_framework_not_found(self, project_dir, scripted_prompter):
        config = CrayonConfig(framework="angular")
        with pytest.raises(FrameworkNotFoundError, match="Framework not found"):
            await MakeComponentCommand(config, prompter=scripted_prompter([]), cwd=project_dir).run(
                "components/Badge"
            )
        assert _tree(project_dir) == []

    @pytest.mark.asyncio
    async def test_framework_not_found_with_fixture_registry(
        self, project_dir, fixture_stub_root, scripted_prompter
    ):
        config = CrayonConfig(framework="vue")
        registry = FrameworkRegistry(config, cwd=project_dir, bundled_root=fixture_stub_root)
        command = MakeComponentCommand(config, prompter=scripted_prompter([]), registry=registry, cwd=project_dir)
        with pytest.raises(FrameworkNotFoundError):
            await command.run("Badge")

    @pytest.mark.asyncio
    async def test_component_exists(self, project_dir, vue_config, scripted_prompter):
        existing = project_dir / "components" / "Badge" / "Badge.vue"
        existing.parent.mkdir(parents=True)
        existing.write_text("original")
        prompter = scripted_prompter([])

        with pytest.raises(ComponentExistsError, match=r"Badge already exists at \[components/Badge\]"):
            await MakeComponentCommand(vue_config, prompter=prompter, cwd=project_dir).run("components/Badge")

        assert existing.read_text() == "original"
        assert prompter.calls == []

    @pytest.mark.asyncio
    async def test_other_framework_file_does_not_block(self, project_dir, vue_config, scripted_prompter):
        other = project_dir / "Badge" / "Badge.tsx"
        other.parent.mkdir(parents=True)
        other.write_text("react")
        result = await MakeComponentCommand(vue_config, prompter=scripted_prompter([True]), cwd=project_dir).run(
            "Badge", skip_props=True
        )
        assert result.status is ScaffoldStatus.DONE


class TestAbort:
    @pytest.mark.asyncio
    async def test_decline_writes_nothing(self, project_dir, scripted_prompter):
        config = CrayonConfig(
            framework="vue",
            features=FeaturesConfig(storybook=True, tests=TestsConfig()),
        )
        prompter = scripted_prompter([True, "label", ["string"], False, False])

        result = await MakeComponentCommand(config, prompter=prompter, cwd=project_dir).run("components/Badge")

        assert result.status is ScaffoldStatus.ABORTED
        assert result.files == []
        assert _tree(project_dir) == []
        assert not (project_dir / "components").exists()


class TestEjectFlow:
    @pytest.mark.asyncio
    async def test_eject_bypasses_path_and_props(self, project_dir, vue_config, scripted_prompter):
        prompter = scripted_prompter([])
        result = await MakeComponentCommand(vue_config, prompter=prompter, cwd=project_dir).run(eject=True)

        assert result.status is ScaffoldStatus.EJECTED
        assert result.path == project_dir / ".crayon" / "stubs" / "vue"
        assert [p.name for p in result.files] == [
            "Component.spec.js.stub",
            "Component.stories.js.stub",
            "Component.vue.stub",
        ]
        assert prompter.calls == []

    @pytest.mark.asyncio
    async def test_eject_prompts_for_framework(self, project_dir, unconfigured, scripted_prompter):
        prompter = scripted_prompter(["react"])
        result = await MakeComponentCommand(unconfigured, prompter=prompter, cwd=project_dir).run(eject=True)
        assert result.framework_id == "react"
        assert (project_dir / ".crayon" / "stubs" / "react" / "Component.tsx.stub").is_file()

    @pytest.mark.asyncio
    async def test_eject_unknown_framework(self, project_dir, scripted_prompter):
        command = MakeComponentCommand(CrayonConfig(framework="angular"), prompter=scripted_prompter([]), cwd=project_dir)
        with pytest.raises(FrameworkNotFoundError):
            await command.run(eject=True)
        assert not (project_dir / ".crayon").exists()


class TestTargetPath:
    @pytest.mark.asyncio
    async def test_absolute_path_kept(self, project_dir, tmp_path, vue_config, scripted_prompter):
        target = tmp_path / "elsewhere" / "Badge"

        result = await MakeComponentCommand(vue_config, prompter=scripted_prompter([True]), cwd=project_dir).run(
            str(target), skip_props=True
        )

        assert result.path == target
        assert (target / "Badge.vue").is_file()
        assert _tree(project_dir) == []

    @pytest.mark.asyncio
    async def test_absolute_path_existing_component(self, project_dir, tmp_path, vue_config, scripted_prompter):
        existing = tmp_path / "elsewhere" / "Badge" / "Badge.vue"
        existing.parent.mkdir(parents=True)
        existing.write_text("original")

        with pytest.raises(ComponentExistsError):
            await MakeComponentCommand(vue_config, prompter=scripted_prompter([]), cwd=project_dir).run(
                str(existing.parent), skip_props=True
            )

        assert existing.read_text() == "original"

    @pytest.mark.asyncio
    async def test_override_stub_uses_root_prefix(self, project_dir, vue_config, scripted_prompter):
        override = vue_config.override_root(project_dir) / "vue"
        override.mkdir(parents=True)
        (override / "Component.vue.stub").write_text("import '{{ toRootPrefix }}styles/app.css';\n")

        await MakeComponentCommand(vue_config, prompter=scripted_prompter([True]), cwd=project_dir).run(
            "./components/cards/Badge", skip_props=True
        )

        written = project_dir / "components" / "cards" / "Badge" / "Badge.vue"
        assert written.read_text() == "import '../../../styles/app.css';\n"


class TestNoFrameworks:
    @pytest.mark.asyncio
    async def test_no_frameworks_installed(self, project_dir, tmp_path, unconfigured, scripted_prompter):
        empty_root = tmp_path / "no-stubs"
        empty_root.mkdir()
        registry = FrameworkRegistry(unconfigured, cwd=project_dir, bundled_root=empty_root)
        prompter = scripted_prompter([])
        command = MakeComponentCommand(unconfigured, prompter=prompter, registry=registry, cwd=project_dir)

        with pytest.raises(FrameworkNotFoundError, match="Framework not found"):
            await command.run("Badge")

        assert prompter.calls == []
        assert _tree(project_dir) == []
