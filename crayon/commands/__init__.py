"""Crayon commands.

``make:component`` scaffolds components; ``add:vuex`` wires a Vuex store into
an existing Vue entry file.
"""

from crayon.commands.add_vuex import AddVuexCommand
from crayon.commands.make_component import MakeComponentCommand, ScaffoldResult, ScaffoldStatus

__all__ = [
    "AddVuexCommand",
    "MakeComponentCommand",
    "ScaffoldResult",
    "ScaffoldStatus",
]
