"""Stub resolution and Jinja2 rendering.

Stubs are bundled under ``crayon/stubs/frameworks/<framework>/`` and can be
overridden per project by ejecting them into
``<cwd>/<override_dir>/stubs/<framework>/``. :class:`StubResolver` picks the
override copy whenever it exists; :class:`TemplateRenderer` fills in the
placeholders and normalises blank lines.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path
from typing import Any, Sequence

from jinja2 import Environment, StrictUndefined

from crayon.exceptions import StubNotFoundError
from crayon.utils import camel_case, kebab_case, pascal_case, to_root_prefix


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

BUNDLED_STUB_ROOT = Path(__file__).resolve().parent.parent / "stubs" / "frameworks"

STUB_SUFFIX = ".stub"
COMPONENT_TOKEN = "Component"

_BLANK_RUN_RE = re.compile(r"\n\s*\n")


# ---------------------------------------------------------------------------
# StubResolver
# ---------------------------------------------------------------------------


class StubResolver:
    """Maps ``(framework_id, stub_name)`` to stub text.

    Args:
        override_root: Root of ejected stubs (``<cwd>/<override_dir>/stubs``),
            or ``None`` to read bundled stubs only.
        bundled_root: Root of the packaged stubs.
    """

    def __init__(
        self,
        override_root: str | Path | None = None,
        bundled_root: str | Path | None = None,
    ) -> None:
        self.override_root = Path(override_root) if override_root is not None else None
        self.bundled_root = Path(bundled_root) if bundled_root is not None else BUNDLED_STUB_ROOT

    def bundled_path(self, framework_id: str, stub_name: str) -> Path:
        return self.bundled_root / framework_id / stub_name

    def override_path(self, framework_id: str, stub_name: str) -> Path | None:
        if self.override_root is None:
            return None
        return self.override_root / framework_id / stub_name

    def resolve_path(self, framework_id: str, stub_name: str) -> Path:
        """Return the file that backs a stub, override first."""
        override = self.override_path(framework_id, stub_name)
        if override is not None and override.is_file():
            return override

        bundled = self.bundled_path(framework_id, stub_name)
        if bundled.is_file():
            return bundled

        raise StubNotFoundError(framework_id, stub_name)

    def is_overridden(self, framework_id: str, stub_name: str) -> bool:
        override = self.override_path(framework_id, stub_name)
        return override is not None and override.is_file()

    def load(self, framework_id: str, stub_name: str) -> str:
        """Read a stub, honouring override precedence."""
        return self.resolve_path(framework_id, stub_name).read_text(encoding="utf-8")

    def load_bundled(self, framework_id: str, stub_name: str) -> str:
        """Read the packaged copy of a stub, ignoring any override."""
        path = self.bundled_path(framework_id, stub_name)
        if not path.is_file():
            raise StubNotFoundError(framework_id, stub_name)
        return path.read_text(encoding="utf-8")

    def list_stubs(self, framework_id: str) -> list[str]:
        """Return the sorted bundled stub file names of a framework."""
        directory = self.bundled_root / framework_id
        if not directory.is_dir():
            return []
        return sorted(p.name for p in directory.iterdir() if p.is_file() and p.name.endswith(STUB_SUFFIX))


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders stub text with Jinja2.

    Every placeholder must be defined by the context (``StrictUndefined``), so
    a stub never reaches the disk half-rendered.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["pascal_case"] = pascal_case
        self.env.filters["camel_case"] = camel_case
        self.env.filters["kebab_case"] = kebab_case
        self.env.filters["vue_type"] = _vue_type_filter

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render stub text and collapse runs of blank lines."""
        template = self.env.from_string(template_string)
        return collapse_blank_lines(template.render(**context))

    async def render_to_file(
        self,
        template_string: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render stub text and write the result to *output_path*.

        Parent directories are created automatically.
        """
        content = self.render_string(template_string, context)
        out = Path(output_path)
        await asyncio.to_thread(_write_file, out, content)
        return out


# ---------------------------------------------------------------------------
# Context & naming helpers
# ---------------------------------------------------------------------------


def build_context(
    component_name: str,
    path: str,
    props: Sequence[Any],
    *,
    framework: str = "",
    test_runner: str | None = None,
) -> dict[str, Any]:
    """Build the placeholder data bag for one component."""
    return {
        "componentName": component_name,
        "pascalName": component_name,
        "camelName": camel_case(component_name),
        "kebabName": kebab_case(component_name),
        "toRootPrefix": to_root_prefix(path),
        "props": list(props),
        "framework": framework,
        "testRunner": test_runner,
    }


def collapse_blank_lines(text: str) -> str:
    """Collapse every run of blank (or whitespace-only) lines to one blank line."""
    return _BLANK_RUN_RE.sub("\n\n", text)


def output_filename(stub_name: str, component_name: str) -> str:
    """``Component.spec.js.stub`` -> ``Badge.spec.js`` for ``Badge``."""
    name = stub_name.replace(COMPONENT_TOKEN, component_name, 1)
    if name.endswith(STUB_SUFFIX):
        name = name[: -len(STUB_SUFFIX)]
    return name


def _vue_type_filter(prop: Any) -> str:
    """Render a prop's runtime type: ``String`` or ``[String, Number]``."""
    constructors = list(prop.constructors)
    if len(constructors) == 1:
        return constructors[0]
    return "[" + ", ".join(constructors) + "]"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
