"""Crayon scaffolder -- renders framework stubs into component files.

Quick usage::

    from crayon.config import CrayonConfig
    from crayon.scaffolder import ComponentSpec, FrameworkRegistry, Prop

    config = CrayonConfig(framework="vue")
    plugin = FrameworkRegistry(config).get("vue")
    spec = ComponentSpec.from_path(
        "components/Badge",
        "vue",
        props=[Prop.from_kinds("label", ["string"])],
    )
    files = await plugin.run(spec)
"""

from crayon.scaffolder.ejector import EjectionManager
from crayon.scaffolder.frameworks import ComponentSpec, FrameworkPlugin, FrameworkRegistry, StubSet
from crayon.scaffolder.props import PROP_TYPES, Prop, PropSchemaBuilder, PropTypeSpec
from crayon.scaffolder.templates import StubResolver, TemplateRenderer

__all__ = [
    "PROP_TYPES",
    "ComponentSpec",
    "EjectionManager",
    "FrameworkPlugin",
    "FrameworkRegistry",
    "Prop",
    "PropSchemaBuilder",
    "PropTypeSpec",
    "StubResolver",
    "StubSet",
    "TemplateRenderer",
]
