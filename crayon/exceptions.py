"""Exception hierarchy for Crayon commands.

Precondition failures abort a command before anything is written.
``UserAbort`` is an intentional no-op outcome rather than a failure.
"""

from __future__ import annotations


class CrayonError(Exception):
    """Base class for every error raised by Crayon."""


class PreconditionError(CrayonError):
    """Raised when a command cannot start; no files have been touched."""


class MissingPathError(PreconditionError):
    def __init__(self) -> None:
        super().__init__("Missing path argument")


class FrameworkNotFoundError(PreconditionError):
    def __init__(self, framework_id: str | None, available: list[str] | None = None) -> None:
        self.framework_id = framework_id
        self.available = available or []
        message = "Framework not found"
        if framework_id:
            message += f": {framework_id!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class ComponentExistsError(PreconditionError):
    def __init__(self, component_name: str, path: str) -> None:
        self.component_name = component_name
        self.path = path
        super().__init__(f"{component_name} already exists at [{path}].")


class StubNotFoundError(PreconditionError):
    def __init__(self, framework_id: str, stub_name: str) -> None:
        self.framework_id = framework_id
        self.stub_name = stub_name
        super().__init__(f"Stub {stub_name!r} not found for framework {framework_id!r}")


class EntryPointError(PreconditionError):
    """Raised by ``add:vuex`` when the entry file or its bootstrap block is missing."""


class UserAbort(CrayonError):
    """Raised when the user declines the confirmation prompt."""

    def __init__(self, message: str = "Aborted") -> None:
        super().__init__(message)
