"""Stub ejection.

Copies a framework's bundled stubs verbatim into the project's override
root so they can be edited. Existing override files are overwritten.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from crayon.exceptions import StubNotFoundError
from crayon.scaffolder.templates import StubResolver


class EjectionManager:
    """Writes bundled stubs to ``<override_root>/<framework_id>/``."""

    def __init__(self, resolver: StubResolver, override_root: str | Path) -> None:
        self.resolver = resolver
        self.override_root = Path(override_root)

    def target_dir(self, framework_id: str) -> Path:
        return self.override_root / framework_id

    async def eject(self, framework_id: str, stub_names: list[str] | None = None) -> Path:
        """Copy every stub of *framework_id* (or only *stub_names*).

        Returns:
            The directory the stubs were written to.
        """
        names = stub_names if stub_names is not None else self.resolver.list_stubs(framework_id)
        target = self.target_dir(framework_id)
        await asyncio.to_thread(target.mkdir, parents=True, exist_ok=True)

        for name in names:
            source = self.resolver.bundled_path(framework_id, name)
            if not source.is_file():
                raise StubNotFoundError(framework_id, name)
            # Byte-for-byte copy of the packaged stub.
            content = await asyncio.to_thread(source.read_bytes)
            await asyncio.to_thread((target / name).write_bytes, content)

        return target
