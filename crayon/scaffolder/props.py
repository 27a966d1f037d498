"""Component prop definitions.

``PROP_TYPES`` is the catalog of supported prop kinds. Each kind maps to the
literals and annotations that the stubs need. :class:`PropSchemaBuilder` walks
the user through declaring props and turns the answers into :class:`Prop`
records.
"""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from crayon.prompts import Prompter
from crayon.utils import is_camel_case, print_error

# ---------------------------------------------------------------------------
# Prop type catalog
# ---------------------------------------------------------------------------


class PropTypeSpec(BaseModel):
    """Literals generated for one prop kind."""

    model_config = ConfigDict(frozen=True)

    default: str = Field(..., description="Default value literal in prop declarations")
    arg: str = Field(..., description="Sample argument literal for stories and tests")
    ts_type: str = Field(..., description="Static type annotation fragment")
    constructor: str = Field(..., description="Runtime constructor used for prop validation")


# Insertion order is the catalog order used for type annotations.
PROP_TYPES: dict[str, PropTypeSpec] = {
    "string": PropTypeSpec(default="''", arg="'Lorem ipsum'", ts_type="string", constructor="String"),
    "number": PropTypeSpec(default="0", arg="1", ts_type="number", constructor="Number"),
    "boolean": PropTypeSpec(default="false", arg="true", ts_type="boolean", constructor="Boolean"),
    "array": PropTypeSpec(default="() => []", arg="[]", ts_type="unknown[]", constructor="Array"),
    "object": PropTypeSpec(
        default="() => ({})", arg="{}", ts_type="Record<string, unknown>", constructor="Object"
    ),
    "function": PropTypeSpec(
        default="() => {}", arg="() => {}", ts_type="(...args: unknown[]) => unknown", constructor="Function"
    ),
    "date": PropTypeSpec(default="() => new Date()", arg="new Date()", ts_type="Date", constructor="Date"),
    "symbol": PropTypeSpec(default="undefined", arg="Symbol('prop')", ts_type="symbol", constructor="Symbol"),
}

PROP_KINDS: list[str] = list(PROP_TYPES)


def type_annotations_for(kinds: Sequence[str]) -> list[str]:
    """Return the annotations of *kinds* in catalog order."""
    return [spec.ts_type for kind, spec in PROP_TYPES.items() if kind in kinds]


# ---------------------------------------------------------------------------
# Prop model
# ---------------------------------------------------------------------------


class Prop(BaseModel):
    """A declared component property."""

    model_config = ConfigDict(frozen=True)

    name: str
    kinds: tuple[str, ...] = Field(..., min_length=1)
    default_value: str
    arg_value: str
    type_annotations: tuple[str, ...]

    @field_validator("name")
    @classmethod
    def _name_is_camel_case(cls, value: str) -> str:
        if not is_camel_case(value):
            raise ValueError(f"prop name {value!r} must be camelCase")
        return value

    @field_validator("kinds")
    @classmethod
    def _kinds_are_known(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        unknown = [kind for kind in value if kind not in PROP_TYPES]
        if unknown:
            raise ValueError(f"unknown prop kind(s): {', '.join(unknown)}")
        if len(set(value)) != len(value):
            raise ValueError("prop kinds must be unique")
        return value

    @classmethod
    def from_kinds(cls, name: str, kinds: Sequence[str]) -> "Prop":
        """Build a prop; literals come from the first kind only."""
        kinds = list(dict.fromkeys(kinds))
        first = PROP_TYPES[kinds[0]] if kinds and kinds[0] in PROP_TYPES else None
        return cls(
            name=name,
            kinds=tuple(kinds),
            default_value=first.default if first else "",
            arg_value=first.arg if first else "",
            type_annotations=tuple(type_annotations_for(kinds)),
        )

    @property
    def constructors(self) -> list[str]:
        """Runtime constructors for every kind, in selection order."""
        return [PROP_TYPES[kind].constructor for kind in self.kinds]

    @property
    def ts_type(self) -> str:
        """The union of all type annotations, e.g. ``string | number``."""
        return " | ".join(self.type_annotations)

    def summary(self) -> str:
        """``name: [kind, ...]`` as shown in the confirmation step."""
        return f"{self.name}: [{', '.join(self.kinds)}]"


# ---------------------------------------------------------------------------
# Validation predicates
# ---------------------------------------------------------------------------


def validate_prop_name(name: str, existing: Sequence[Prop]) -> str | None:
    """Return an error message for an unacceptable prop name, else ``None``."""
    if not name:
        return "Please provide a name"
    if not is_camel_case(name):
        return "Name must be camelcase"
    if any(prop.name == name for prop in existing):
        return "Prop already defined"
    return None


def validate_prop_kinds(kinds: Sequence[str]) -> str | None:
    """Return an error message for an empty kind selection, else ``None``."""
    if not kinds:
        return "Please select one or more types"
    return None


# ---------------------------------------------------------------------------
# Interactive builder
# ---------------------------------------------------------------------------


class PropSchemaBuilder:
    """Collects props interactively.

    Props are append-only: once a prop is confirmed it is never edited or
    removed. Invalid answers print an error and re-ask without limit.
    """

    def __init__(self, prompter: Prompter) -> None:
        self.prompter = prompter
        self.props: list[Prop] = []

    async def define_props(self) -> list[Prop]:
        """Run the prop loop and return the props in definition order."""
        another = await self.prompter.confirm("Would you like to define props?")

        while another:
            name = await self.ask_name()
            kinds = await self.ask_kinds()
            self.props.append(Prop.from_kinds(name, kinds))
            another = await self.prompter.confirm("Would you like to define another?")

        return list(self.props)

    async def ask_name(self) -> str:
        while True:
            name = (await self.prompter.ask("Name")).strip()
            error = validate_prop_name(name, self.props)
            if error is None:
                return name
            print_error(error)

    async def ask_kinds(self) -> list[str]:
        while True:
            kinds = await self.prompter.multiple("Select type(s)", PROP_KINDS)
            error = validate_prop_kinds(kinds)
            if error is None:
                return list(kinds)
            print_error(error)
