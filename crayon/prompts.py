"""Interactive prompts.

Commands talk to the user through the :class:`Prompter` protocol so the
interactive flow can be driven by a scripted prompter in tests. The default
implementation renders prompts with ``questionary``.

Prompts are unbounded suspension points: there is no timeout, and Ctrl-C
raises ``KeyboardInterrupt`` which ends the process.
"""

from __future__ import annotations

from typing import Protocol, Sequence

import questionary


class Prompter(Protocol):
    """Ask/confirm/select capability used by the commands."""

    async def ask(self, message: str) -> str: ...

    async def confirm(self, message: str, default: bool = True) -> bool: ...

    async def select(self, message: str, choices: Sequence[str]) -> str: ...

    async def multiple(self, message: str, choices: Sequence[str]) -> list[str]: ...


class QuestionaryPrompter:
    """Terminal prompter backed by ``questionary``."""

    async def ask(self, message: str) -> str:
        answer = await questionary.text(message).unsafe_ask_async()
        return (answer or "").strip()

    async def confirm(self, message: str, default: bool = True) -> bool:
        return bool(await questionary.confirm(message, default=default).unsafe_ask_async())

    async def select(self, message: str, choices: Sequence[str]) -> str:
        return await questionary.select(message, choices=list(choices)).unsafe_ask_async()

    async def multiple(self, message: str, choices: Sequence[str]) -> list[str]:
        answer = await questionary.checkbox(message, choices=list(choices)).unsafe_ask_async()
        return list(answer or [])
